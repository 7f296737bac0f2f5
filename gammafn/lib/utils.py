import logging
import math
import numpy as np

from gammafn.exceptions import NonconvergenceError
from gammafn.lib.constants import TWO_PI_HIGH, TWO_PI_LOW

__author__ = 'Robbert Harms'
__date__ = "2014-05-13"
__license__ = "LGPL v3"
__maintainer__ = "Robbert Harms"
__email__ = "robbert.harms@maastrichtuniversity.nl"


_logger = logging.getLogger(__name__)


def nonconvergence(evaluator_name, nmr_iterations, **arguments):
    """Log the failure of an iterative evaluator and return the exception to raise.

    Example::
        raise nonconvergence('gamma_series', 250, a=a, x=x)

    Args:
        evaluator_name (str): the name of the series or continued fraction
        nmr_iterations (int): the number of iterations we tried
        **arguments: the arguments with which the evaluator was called, these are logged

    Returns:
        NonconvergenceError: the exception, ready to be raised
    """
    _logger.error('Evaluator "{}" did not converge in {} iterations, arguments: {}.'.format(
        evaluator_name, nmr_iterations, ', '.join('{}={!r}'.format(k, v) for k, v in sorted(arguments.items()))))
    return NonconvergenceError(evaluator_name, nmr_iterations)


def is_nonpositive_integer(x):
    """Check if the given value is zero or a negative integer.

    Args:
        x (float): the value to check

    Returns:
        boolean: if x is one of 0, -1, -2, ...
    """
    return x <= 0 and x == np.floor(x)


def _octant_reduce(x):
    """Reduce x to a remainder r in [-1/4, 1/4] and the number of half turns it was shifted by.

    The reduction modulo 2 is exact in floating point, so no accuracy is lost for large x.

    Returns:
        tuple: (n, r) with x = n / 2 + r (modulo 2) and n in 0, ..., 3
    """
    x = math.fmod(x, 2.0)
    n = int(round(2.0 * x))
    return n % 4, x - n / 2.0


def sin_pi(x):
    """Compute sin(pi * x) without the loss of accuracy of forming pi * x for large x.

    This returns exact zeros at the integers.
    """
    if not np.isfinite(x):
        return np.nan
    if x < 0:
        return -sin_pi(-x)
    n, r = _octant_reduce(x)
    if n == 0:
        return np.sin(np.pi * r)
    elif n == 1:
        return np.cos(np.pi * r)
    elif n == 2:
        return -np.sin(np.pi * r)
    return -np.cos(np.pi * r)


def cos_pi(x):
    """Compute cos(pi * x), with exact zeros at the half-integers."""
    if not np.isfinite(x):
        return np.nan
    n, r = _octant_reduce(abs(x))
    if n == 0:
        return np.cos(np.pi * r)
    elif n == 1:
        return -np.sin(np.pi * r)
    elif n == 2:
        return -np.cos(np.pi * r)
    return np.sin(np.pi * r)


@np.errstate(divide='ignore')
def tan_pi(x):
    """Compute tan(pi * x). At the half-integers this returns an infinity."""
    return np.float64(sin_pi(x)) / np.float64(cos_pi(x))


def reduce_angle(x):
    """Reduce the given angle modulo 2 pi into the range [-pi, pi].

    We subtract the multiples of 2 pi in two parts, such that the low order bits of 2 pi are not lost when x is large.
    """
    n = round(x / TWO_PI_HIGH)
    return (x - n * TWO_PI_HIGH) - n * TWO_PI_LOW


def reduced_log1p(h, y):
    """Compute log(1 + h * y) / y, which tends to h as y goes to zero."""
    if y == 0:
        return h
    return np.log1p(h * y) / y


def reduced_expm1(h, y):
    """Compute (exp(h * y) - 1) / y, which tends to h as y goes to zero."""
    if y == 0:
        return h
    return np.expm1(h * y) / y


def factorial(n):
    """The factorial n! as a float, exact for all n for which it is representable.

    Args:
        n (int): a non-negative integer

    Returns:
        float: n!, or infinity if n! exceeds the double range
    """
    if n > 170:
        return np.inf
    return float(math.factorial(n))


def cartesian(arrays, out=None):
    """Generate a cartesian product of input arrays.

    Args:
        arrays (list of array-like): 1-D arrays to form the cartesian product of.
        out (ndarray): Array to place the cartesian product in.

    Returns:
        ndarray: 2-D array of shape (M, len(arrays)) containing cartesian products formed of input arrays.

    Examples:
        >>> cartesian(([1, 2, 3], [4, 5]))
        array([[1, 4],
               [1, 5],
               [2, 4],
               [2, 5],
               [3, 4],
               [3, 5]])
    """
    arrays = [np.asarray(x) for x in arrays]
    dtype = arrays[0].dtype

    nmr_elements = np.prod([x.size for x in arrays])
    if out is None:
        out = np.zeros([nmr_elements, len(arrays)], dtype=dtype)

    m = nmr_elements // arrays[0].size
    out[:, 0] = np.repeat(arrays[0], m)
    if arrays[1:]:
        cartesian(arrays[1:], out=out[0:m, 1:])
        for j in range(1, arrays[0].size):
            out[j*m:(j+1)*m, 1:] = out[0:m, 1:]
    return out
