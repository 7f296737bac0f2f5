r"""Algorithms that arise from Stirling's asymptotic expansion of the Gamma function.

The expansion is good for large arguments:

.. math::

    \log \Gamma(x) = x \log(x) - x - \frac{1}{2} \log\left(\frac{x}{2 \pi}\right)
        + \sum_{k=1} \frac{B_{2k}}{2k (2k - 1) x^{2k - 1}}

The Stirling sum converges to full double precision within a dozen terms for all x > 16. Below that it may run out
of Bernoulli numbers before it converges, which we report with a :class:`~gammafn.exceptions.NonconvergenceError`.
"""
import numpy as np

from gammafn.lib.constants import BERNOULLI, TWO_PI, LOG_TWO_PI
from gammafn.lib.utils import reduced_log1p, reduced_expm1, reduce_angle, nonconvergence
from gammafn.library_functions.base import GammaEvaluator

__author__ = 'Robbert Harms'
__date__ = '2020-05-12'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


def stirling_sum(x):
    """The correction sum of the Stirling series, the part that follows the leading terms of log(Gamma(x))."""
    xx = x * x
    xk = x
    f = BERNOULLI[1] / (2.0 * xk)
    for k in range(2, len(BERNOULLI)):
        f_old = f
        xk *= xx
        f += BERNOULLI[k] / ((2 * k) * (2 * k - 1)) / xk
        if f == f_old:
            return f
    raise nonconvergence('stirling_sum', len(BERNOULLI), x=x)


def _stirling_sum_prime(x):
    """The derivative of :func:`stirling_sum`."""
    xx = x * x
    xk = xx
    f = -BERNOULLI[1] / (2.0 * xk)
    for k in range(2, len(BERNOULLI)):
        f_old = f
        xk *= xx
        f -= BERNOULLI[k] / (2 * k) / xk
        if f == f_old:
            return f
    raise nonconvergence('stirling_sum_prime', len(BERNOULLI), x=x)


def _reduced_pochhammer_sum(x, y):
    """Computes (S(x + y) - S(x)) / y with S the Stirling sum, i.e. the rate at which the sum changes with y.

    Each term x^(1-2k) changes by a factor (1 + y/x)^(1-2k), which we write as an exponential of the reduced
    logarithm such that the difference stays accurate as y goes to zero.
    """
    log_ratio = reduced_log1p(1.0 / x, y)
    xx = x * x
    xk = x
    f = BERNOULLI[1] / (2.0 * xk) * reduced_expm1(-log_ratio, y)
    for k in range(2, len(BERNOULLI)):
        f_old = f
        xk *= xx
        f += BERNOULLI[k] / ((2 * k) * (2 * k - 1)) / xk * reduced_expm1((1 - 2 * k) * log_ratio, y)
        if f == f_old:
            return f
    raise nonconvergence('reduced_pochhammer_sum', len(BERNOULLI), x=x, y=y)


class StirlingEvaluator(GammaEvaluator):
    """Evaluates the Gamma family using Stirling's asymptotic series. Only valid for arguments of 16 and above."""

    def log_gamma(self, x):
        return x * np.log(x) - x - np.log(x / TWO_PI) / 2.0 + stirling_sum(x)

    def gamma(self, x):
        return np.exp(self.log_gamma(x))

    def psi(self, x):
        return np.log(x) - 0.5 / x + _stirling_sum_prime(x)

    def reduced_log_pochhammer(self, x, y):
        log_ratio = reduced_log1p(1.0 / x, y)
        return (x - 0.5) * log_ratio + np.log(x + y) - 1.0 + _reduced_pochhammer_sum(x, y)

    def beta(self, a, b):
        ab = a + b
        return (np.sqrt(TWO_PI * ab / a / b)
                * np.power(a / ab, a) * np.power(b / ab, b)
                * np.exp(stirling_sum(a) + stirling_sum(b) - stirling_sum(ab)))

    def log_beta(self, a, b):
        ab = a + b
        return (a * np.log(a / ab) + b * np.log(b / ab) - np.log(a / ab * b / TWO_PI) / 2.0
                + stirling_sum(a) + stirling_sum(b) - stirling_sum(ab))

    def pow_over_gamma_plus_one(self, x, nu):
        """Compute x^nu / Gamma(nu + 1) without forming the two, possibly infinite, parts separately.

        Args:
            x (float): the base, non-negative
            nu (float): the power, at least 16

        Returns:
            float: the ratio x^nu / Gamma(nu + 1)
        """
        return np.power(x * np.e / nu, nu) / np.sqrt(TWO_PI * nu) / np.exp(stirling_sum(nu))

    def pow_over_beta(self, a, b, x):
        """Compute x^a (1-x)^b / B(a, b) for a and b both at least 16.

        For large a and b, B(a, b) is often unrepresentably small while this ratio is still representable, because
        x^a (1-x)^b is also small. Bringing x and 1 - x inside the powers still leaves many inputs where one power
        underflows and the other overflows, so we work in log space.

        Args:
            a (float): the first shape parameter
            b (float): the second shape parameter
            x (float): the position in [0, 1]

        Returns:
            float: the ratio x^a (1-x)^b / B(a, b)
        """
        ab = a + b
        t = a * np.log(x / (a / ab)) + b * np.log((1.0 - x) / (b / ab))
        return np.sqrt(a / ab * b / TWO_PI) * np.exp(stirling_sum(ab) - stirling_sum(a) - stirling_sum(b) + t)

    def complex_log_gamma(self, z):
        """The logarithm of the Gamma function for a complex argument with a large modulus.

        The imaginary part of the leading term is reduced modulo 2 pi before the Bernoulli corrections are added,
        otherwise the corrections would be lost against a large imaginary part.
        """
        if z.imag < 0.0:
            return np.conj(self.complex_log_gamma(np.conj(z)))

        f = (z - 0.5) * np.log(z) - z + LOG_TWO_PI / 2.0
        f = complex(f.real, reduce_angle(f.imag))

        zz = z * z
        zp = z
        for i in range(1, len(BERNOULLI)):
            f_old = f
            f += BERNOULLI[i] / (2 * i) / (2 * i - 1) / zp
            if f == f_old:
                return f
            zp *= zz
        raise nonconvergence('complex_stirling_sum', len(BERNOULLI), z=z)
