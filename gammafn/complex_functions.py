"""The Gamma function, its logarithm and the digamma function for complex arguments.

The Lanczos approximation is valid over the whole right half plane, for the left half plane we use the reflection
formulas. For arguments with a large modulus we use the Stirling series.
"""
import numpy as np

from gammafn.exceptions import DomainError
from gammafn.factory import get_evaluator
from gammafn.lib.utils import is_nonpositive_integer
from gammafn.regimes import GammaRegime, STIRLING_LIMIT

__author__ = 'Robbert Harms'
__date__ = '2020-05-12'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


_REFLECTION_REAL_PART = 0.5


@np.errstate(over='ignore', invalid='ignore', divide='ignore')
def complex_gamma(z):
    r"""Computes the Gamma function for a complex argument.

    For Re(z) < 0.5 we use the reflection formula :math:`\Gamma(z) = \pi / (\Gamma(1 - z) \sin(\pi z))`.

    Args:
        z (complex): the argument

    Returns:
        complex: the value of Gamma(z)
    """
    z = np.complex128(z)
    if _is_pole(z):
        return np.complex128(complex(np.nan, np.nan))
    if z.real < _REFLECTION_REAL_PART:
        return np.pi / (np.exp(complex_log_gamma(1.0 - z)) * np.sin(np.pi * z))
    return np.exp(complex_log_gamma(z))


def complex_log_gamma(z):
    """Computes the logarithm of the Gamma function for a complex argument in the right half plane.

    Below a modulus of 16 the imaginary part is continuous over the right half plane, it is not reduced to the
    principal branch of the logarithm of Gamma(z). From a modulus of 16 onwards the imaginary part is only defined
    modulo 2 pi, it is reduced to about [-pi, pi] such that the corrections of the Stirling series are not lost.

    Args:
        z (complex): the argument, with a non-negative real part

    Returns:
        complex: the value of log(Gamma(z))

    Raises:
        DomainError: if the real part of z is negative
    """
    z = np.complex128(z)
    if z.real < 0.0:
        raise DomainError('z', z, 'Re(z) >= 0')
    if z == 0.0:
        return np.complex128(np.inf)

    if abs(z) < STIRLING_LIMIT:
        return np.complex128(get_evaluator(GammaRegime.LANCZOS).complex_log_gamma(z))
    return np.complex128(get_evaluator(GammaRegime.STIRLING).complex_log_gamma(z))


@np.errstate(over='ignore', invalid='ignore', divide='ignore')
def complex_psi(z):
    r"""Computes the digamma function for a complex argument.

    For Re(z) < 0.5 we use the reflection formula :math:`\psi(z) = \psi(1 - z) - \pi / \tan(\pi z)`.

    Args:
        z (complex): the argument

    Returns:
        complex: the value of psi(z)
    """
    z = np.complex128(z)
    lanczos = get_evaluator(GammaRegime.LANCZOS)
    if _is_pole(z):
        return np.complex128(complex(np.nan, np.nan))
    if z.real < _REFLECTION_REAL_PART:
        return np.complex128(lanczos.psi(1.0 - z) - np.pi / np.tan(np.pi * z))
    return np.complex128(lanczos.psi(z))


def _is_pole(z):
    """Check if z lies on one of the poles of the Gamma function, zero and the negative integers."""
    return z.imag == 0.0 and is_nonpositive_integer(z.real)
