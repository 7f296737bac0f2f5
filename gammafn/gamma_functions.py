"""The Gamma function and its relatives for real arguments.

Every function in this module validates its domain and then dispatches to the approximation scheme that is
appropriate for the magnitude of its arguments. The evaluators themselves live in :mod:`gammafn.library_functions`,
the thresholds between them in :mod:`gammafn.regimes`.

Poles are returned as NaN and values beyond the double range as infinity, neither raises. Arguments outside the
domain of a function raise a :class:`~gammafn.exceptions.DomainError`.
"""
import numpy as np

from gammafn.exceptions import DomainError
from gammafn.factory import evaluator_for, get_evaluator
from gammafn.lib.constants import BERNOULLI
from gammafn.lib.utils import sin_pi, tan_pi, cos_pi, is_nonpositive_integer, factorial, nonconvergence
from gammafn.library_functions.incomplete_beta import beta_continued_fraction, beta_transition_point, \
    beta_zero_tail_series
from gammafn.library_functions.incomplete_gamma import gamma_p_series, gamma_q_continued_fraction
from gammafn.library_functions.temme import temme_gamma
from gammafn.regimes import GammaRegime, IncompleteGammaRegime, gamma_regime, incomplete_gamma_regime, \
    in_stirling_band, STIRLING_LIMIT

__author__ = 'Robbert Harms'
__date__ = '2020-05-12'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


def _unreflected(x):
    """Get the evaluator for an argument that resulted from a reflection, which never lies in the reflection band."""
    regime = gamma_regime(x)
    assert regime != GammaRegime.REFLECT, 'The reflected argument {} should lie outside the reflection band.'.format(x)
    return get_evaluator(regime)


@np.errstate(over='ignore')
def gamma(x):
    r"""Computes the Gamma function.

    The Gamma function generalizes the factorial, :math:`\Gamma(n + 1) = n!`, to arbitrary real values. Like the
    factorial it grows rapidly, for x larger than about 171.6 it exceeds the double range and we return infinity.
    In that range you may want to use :func:`log_gamma` instead.

    Below 0.25 we use the reflection formula :math:`\Gamma(x) \Gamma(1 - x) = \pi / \sin(\pi x)`.

    Args:
        x (float): the argument

    Returns:
        float: the value of Gamma(x), NaN at zero and the negative integers
    """
    if np.isnan(x):
        return np.nan
    if np.isposinf(x):
        return np.inf

    regime = gamma_regime(x)
    if regime == GammaRegime.REFLECT:
        if is_nonpositive_integer(x):
            return np.nan
        return np.pi / sin_pi(x) / _unreflected(1.0 - x).gamma(1.0 - x)
    return get_evaluator(regime).gamma(x)


def log_gamma(x):
    """Computes the natural logarithm of the Gamma function.

    This is accurate also for arguments for which Gamma(x) itself would overflow.

    Args:
        x (float): the argument, must be positive

    Returns:
        float: the value of log(Gamma(x))

    Raises:
        DomainError: if x is zero or negative
    """
    if x <= 0:
        raise DomainError('x', x, 'x > 0')
    if np.isnan(x):
        return np.nan
    if np.isposinf(x):
        return np.inf
    return evaluator_for(x).log_gamma(x)


def psi(x):
    """Computes the digamma function, the logarithmic derivative of the Gamma function.

    Being a logarithmic derivative, this does not overflow for arguments for which Gamma(x) does.

    Args:
        x (float): the argument

    Returns:
        float: the value of psi(x), NaN at zero and the negative integers
    """
    if np.isnan(x):
        return np.nan
    if np.isposinf(x):
        return np.inf

    regime = gamma_regime(x)
    if regime == GammaRegime.REFLECT:
        if is_nonpositive_integer(x):
            return np.nan
        return _unreflected(1.0 - x).psi(1.0 - x) - np.pi / tan_pi(x)
    return get_evaluator(regime).psi(x)


def polygamma(n, x):
    r"""Computes the polygamma function, the n-th derivative of the digamma function.

    For n = 0 this is :func:`psi`. For positive x we use the recurrence
    :math:`\psi^{(n)}(x) = \psi^{(n)}(x + 1) - (-1)^n n! / x^{n+1}` to move the argument up until the asymptotic
    series converges. For negative x we use the reflection formula, which needs the n-th derivative of
    :math:`\cot(\pi x)`.

    Args:
        n (int): the order, must be non-negative
        x (float): the argument

    Returns:
        float: the value of the n-th polygamma function at x, NaN at zero and the negative integers

    Raises:
        DomainError: if n is negative or not an integer
    """
    if n < 0 or int(n) != n:
        raise DomainError('n', n, 'n a non-negative integer')
    n = int(n)

    if n == 0:
        return psi(x)
    if np.isnan(x):
        return np.nan

    if x <= 0.0:
        if is_nonpositive_integer(x):
            return np.nan
        d = -_evaluate_cot_derivative(_cot_derivative_coefficients(n), x) * np.power(np.pi, n + 1)
        if n % 2 == 0:
            return d + _polygamma_positive(n, 1.0 - x)
        return d - _polygamma_positive(n, 1.0 - x)
    return _polygamma_positive(n, x)


def _polygamma_positive(n, x):
    """The polygamma function of order n > 0 for positive x."""
    # An estimate from the growth of the factorials in the series gives x ~ 27 for convergence at the 8th term,
    # but that underestimates it. This empirical relation works for all orders.
    xm = STIRLING_LIMIT + 2.0 * n

    s = 0.0
    while x < xm:
        s += 1.0 / np.power(x, n + 1)
        x += 1.0

    # psi(n, x) = -(-1)^n (n-1)! / x^n [1 + n / 2x + sum_k (2k+n-1)! / (2k)! / (n-1)! B_{2k} / x^{2k}]
    t = 1.0 + n / (2.0 * x)
    x2 = x * x
    t1 = n * (n + 1) / 2.0 / x2
    for i in range(1, len(BERNOULLI)):
        t_old = t
        t += BERNOULLI[i] * t1
        if t == t_old:
            g = factorial(n - 1) * (t / np.power(x, n) + n * s)
            if n % 2 == 0:
                g = -g
            return g
        i2 = 2 * i
        t1 *= (n + i2) * (n + i2 + 1) / (i2 + 2) / (i2 + 1) / x2
    raise nonconvergence('polygamma_asymptotic_series', len(BERNOULLI), n=n, x=x)


def _cot_derivative_coefficients(n):
    """Get the n-th derivative of cot as a polynomial in r = cot.

    With r_n = (cos/sin)^n, explicit differentiation gives D r_n = -n (r_{n-1} + r_{n+1}). Since the result is
    again expressed in powers of r, the differentiation can be repeated. This is O(n^2), which is fine for the
    small orders we expect.

    Args:
        n (int): the order of the derivative

    Returns:
        list: the coefficients of 1, r, r^2, ..., r^(n+1)
    """
    p = [0.0] * (n + 2)
    p[1] = 1.0

    for i in range(1, n + 1):
        # only powers of one parity are non-zero at any order, so one array holds both the source and the target
        for j in range(i, -1, -2):
            p[j + 1] += -j * p[j]
            if j > 0:
                p[j - 1] = -j * p[j]
            p[j] = 0.0
    return p


def _evaluate_cot_derivative(p, x):
    """Evaluate the polynomial in r = cot(pi x) returned by :func:`_cot_derivative_coefficients`."""
    with np.errstate(divide='ignore'):
        r = np.float64(cos_pi(x)) / np.float64(sin_pi(x))
    r2 = r * r

    if len(p) % 2 == 0:
        i = 1
        rp = r
    else:
        i = 0
        rp = 1.0

    f = 0.0
    while i < len(p):
        f += p[i] * rp
        i += 2
        rp *= r2
    return f


@np.errstate(over='ignore')
def pow_over_gamma_plus_one(x, nu):
    r"""Computes :math:`x^{\nu} / \Gamma(\nu + 1)`.

    For large nu both the numerator and the denominator overflow, while the ratio may still be representable.

    Args:
        x (float): the base, non-negative
        nu (float): the power, non-negative

    Returns:
        float: the value of the ratio
    """
    if nu < STIRLING_LIMIT:
        return np.power(x, nu) / gamma(nu + 1.0)
    return get_evaluator(GammaRegime.STIRLING).pow_over_gamma_plus_one(x, nu)


@np.errstate(over='ignore', divide='ignore')
def pochhammer(x, y):
    r"""Computes the Pochhammer symbol :math:`(x)_y = \Gamma(x + y) / \Gamma(x)`.

    For positive integer y this equals the rising factorial x (x + 1) ... (x + y - 1). Both x and y may be negative.

    Computing this ratio with this function is preferred over the quotient of two calls to :func:`gamma`, since in a
    large part of the parameter space both Gamma functions overflow while their ratio does not.

    Args:
        x (float): the base argument
        y (float): the shift

    Returns:
        float: the value of the Pochhammer symbol
    """
    if np.isnan(x) or np.isnan(y):
        return np.nan
    if y == 0.0:
        return 1.0
    elif y == 1.0:
        return x

    z = x + y
    if gamma_regime(x) == GammaRegime.REFLECT:
        if is_nonpositive_integer(x):
            if is_nonpositive_integer(z):
                # both Gamma functions have a pole, their ratio is a finite product
                if z >= x:
                    m = int(z - x)
                    p = pochhammer(1.0 - z, m)
                else:
                    m = int(x - z)
                    p = 1.0 / pochhammer(1.0 - x, m)
                if m % 2 != 0:
                    p = -p
                return p
            return 0.0

        if y < 0.0:
            return 1.0 / pochhammer(1.0 - x, -y) * sin_pi(x) / sin_pi(z)
        elif gamma_regime(z) == GammaRegime.REFLECT or z == 0.25:
            return pochhammer(1.0 - z, y) * sin_pi(x) / sin_pi(z)
        return gamma(1.0 - x) * gamma(z) * sin_pi(x) / np.pi

    if gamma_regime(z) != GammaRegime.REFLECT:
        if in_stirling_band(x, z):
            reduced_log = get_evaluator(GammaRegime.STIRLING).reduced_log_pochhammer(x, y)
        else:
            reduced_log = get_evaluator(GammaRegime.LANCZOS).reduced_log_pochhammer(x, y)
        return np.exp(y * reduced_log)

    if z == np.round(z):
        return np.inf
    return np.pi / (gamma(x) * gamma(1.0 - z) * sin_pi(z))


def beta(a, b):
    r"""Computes the Beta function :math:`B(a, b) = \Gamma(a) \Gamma(b) / \Gamma(a + b)`.

    This is both faster and more robust than forming the ratio of Gamma functions, which overflow for many values
    for which the Beta function does not. Where the Beta function itself under- or overflows, use :func:`log_beta`.

    Args:
        a (float): the first parameter, must be positive
        b (float): the second parameter, must be positive

    Returns:
        float: the value of B(a, b)

    Raises:
        DomainError: if a or b is zero or negative
    """
    _check_positive(a=a, b=b)
    if in_stirling_band(a, b):
        return get_evaluator(GammaRegime.STIRLING).beta(a, b)
    return get_evaluator(GammaRegime.LANCZOS).beta(a, b)


def log_beta(a, b):
    """Computes the logarithm of the Beta function.

    This is accurate also where B(a, b) is too small or too large to be represented.

    Args:
        a (float): the first parameter, must be positive
        b (float): the second parameter, must be positive

    Returns:
        float: the value of log(B(a, b))

    Raises:
        DomainError: if a or b is zero or negative
    """
    _check_positive(a=a, b=b)
    if in_stirling_band(a, b):
        return get_evaluator(GammaRegime.STIRLING).log_beta(a, b)
    return get_evaluator(GammaRegime.LANCZOS).log_beta(a, b)


def left_regularized_gamma(a, x):
    r"""Computes the normalized lower (left) incomplete Gamma function :math:`P(a, x) = \gamma(a, x) / \Gamma(a)`.

    This ranges from 0 to 1 as x ranges from zero to infinity. For large x it becomes 1 within floating point
    precision, to get its deviation from 1 use :func:`right_regularized_gamma`.

    For a = nu / 2 and x = chi^2 / 2, this is the CDF of the chi^2 distribution with nu degrees of freedom.

    Args:
        a (float): the shape parameter, must be positive
        x (float): the argument, must be non-negative

    Returns:
        float: the value of P(a, x)

    Raises:
        DomainError: if a is not positive or x is negative
    """
    _check_incomplete_gamma_domain(a, x)
    if np.isnan(a) or np.isnan(x):
        return np.nan

    regime = incomplete_gamma_regime(a, x)
    if regime == IncompleteGammaRegime.TEMME:
        return temme_gamma(a, x)[0]
    elif regime == IncompleteGammaRegime.SERIES:
        return gamma_p_series(a, x)
    return 1.0 - gamma_q_continued_fraction(a, x)


def right_regularized_gamma(a, x):
    r"""Computes the normalized upper (right) incomplete Gamma function :math:`Q(a, x) = \Gamma(a, x) / \Gamma(a)`.

    This is the complement of :func:`left_regularized_gamma`.

    Args:
        a (float): the shape parameter, must be positive
        x (float): the argument, must be non-negative

    Returns:
        float: the value of Q(a, x)

    Raises:
        DomainError: if a is not positive or x is negative
    """
    _check_incomplete_gamma_domain(a, x)
    if np.isnan(a) or np.isnan(x):
        return np.nan

    regime = incomplete_gamma_regime(a, x)
    if regime == IncompleteGammaRegime.TEMME:
        return temme_gamma(a, x)[1]
    elif regime == IncompleteGammaRegime.SERIES:
        return 1.0 - gamma_p_series(a, x)
    return gamma_q_continued_fraction(a, x)


@np.errstate(over='ignore')
def upper_incomplete_gamma(a, x):
    r"""Computes the (unnormalized) upper incomplete Gamma function :math:`\Gamma(a, x)`.

    Like the Gamma function itself this gets large very quickly. For most purposes the regularized functions
    :func:`left_regularized_gamma` and :func:`right_regularized_gamma` are preferable, since they are accurate also
    where this function overflows.

    Args:
        a (float): the shape parameter, must be positive
        x (float): the argument, must be non-negative

    Returns:
        float: the value of Gamma(a, x)

    Raises:
        DomainError: if a is not positive or x is negative
    """
    q = right_regularized_gamma(a, x)
    if q == 0.0:
        return 0.0
    return q * gamma(a)


def incomplete_beta(a, b, x):
    r"""Computes the incomplete Beta function :math:`B_x(a, b) = \int_0^x t^{a-1} (1-t)^{b-1} dt`.

    Note that in most of the literature x is the first argument, we follow the convention that it comes last.
    For the regularized function use :func:`left_regularized_beta`.

    The integral diverges for a = 0 (for any x > 0) and for b = 0 at x = 1, for these we return infinity.

    Args:
        a (float): the left shape parameter, must be non-negative
        b (float): the right shape parameter, must be non-negative
        x (float): the integral endpoint, must lie in [0, 1]

    Returns:
        float: the value of the incomplete Beta function

    Raises:
        DomainError: if a or b is negative or x lies outside [0, 1]
    """
    _check_incomplete_beta_domain(a, b, x, strict=False)
    if np.isnan(a) or np.isnan(b) or np.isnan(x):
        return np.nan

    if x == 0.0:
        return 0.0
    if a == 0.0:
        return np.inf
    if b == 0.0:
        if x == 1.0:
            return np.inf
        if x > beta_transition_point(a, b):
            y = 1.0 - x
            return -np.log(y) - psi(a) - np.euler_gamma - beta_zero_tail_series(a, y)
        return np.power(x, a) * beta_continued_fraction(a, b, x)

    if x > beta_transition_point(a, b):
        return beta(a, b) - _incomplete_beta_direct(b, a, 1.0 - x)
    return _incomplete_beta_direct(a, b, x)


def _incomplete_beta_direct(a, b, x):
    """The incomplete Beta function for x below the transition point."""
    return np.power(x, a) * np.power(1.0 - x, b) * beta_continued_fraction(a, b, x)


def left_regularized_beta(a, b, x):
    r"""Computes the regularized incomplete Beta function :math:`I_x(a, b) = B_x(a, b) / B(a, b)`.

    Args:
        a (float): the left shape parameter, must be positive
        b (float): the right shape parameter, must be positive
        x (float): the integral endpoint, must lie in [0, 1]

    Returns:
        float: the value of I_x(a, b), in [0, 1]

    Raises:
        DomainError: if a or b is not positive or x lies outside [0, 1]
    """
    _check_incomplete_beta_domain(a, b, x, strict=True)
    if np.isnan(a) or np.isnan(b) or np.isnan(x):
        return np.nan

    if x > beta_transition_point(a, b):
        return 1.0 - _left_regularized_beta_direct(b, a, 1.0 - x)
    return _left_regularized_beta_direct(a, b, x)


def _left_regularized_beta_direct(a, b, x):
    """The regularized incomplete Beta function for x below the transition point."""
    return beta_continued_fraction(a, b, x) * _pow_over_beta(a, b, x)


@np.errstate(divide='ignore')
def _pow_over_beta(a, b, x):
    """Compute x^a (1-x)^b / B(a, b), in log space if a and b are both large."""
    if in_stirling_band(a, b):
        return get_evaluator(GammaRegime.STIRLING).pow_over_beta(a, b, x)
    return np.power(x, a) * np.power(1.0 - x, b) / beta(a, b)


def _check_positive(**arguments):
    for name, value in sorted(arguments.items()):
        if not value > 0:
            raise DomainError(name, value, '{} > 0'.format(name))


def _check_incomplete_gamma_domain(a, x):
    if a <= 0:
        raise DomainError('a', a, 'a > 0')
    if x < 0:
        raise DomainError('x', x, 'x >= 0')


def _check_incomplete_beta_domain(a, b, x, strict=True):
    for name, value in (('a', a), ('b', b)):
        if strict and value <= 0:
            raise DomainError(name, value, '{} > 0'.format(name))
        if not strict and value < 0:
            raise DomainError(name, value, '{} >= 0'.format(name))
    if x < 0 or x > 1:
        raise DomainError('x', x, '0 <= x <= 1')
