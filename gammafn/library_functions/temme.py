r"""Temme's uniform asymptotic expansion of the regularized incomplete Gamma functions.

For large a and x close to a, both the power series and the continued fraction of the incomplete Gamma function
converge very slowly, the k-th term goes like x / (a + k) and adding k makes little difference until k ~ a.
In that region we use the expansion:

.. math::

    P = \frac{1}{2} \operatorname{erfc}(-z) - R \qquad Q = \frac{1}{2} \operatorname{erfc}(z) + R

where the error function part is nearly the Normal(a, sqrt(a)) approximation and R is a correction term. The
argument z is not quite (x - a) / sqrt(2a), it follows from:

.. math::

    \frac{z^2}{a} = \frac{x - a}{a} - \log\left(\frac{x}{a}\right) = e^u - 1 - u

with u = log(x / a). The correction is a double power series in 1/a and u:

.. math::

    R = \frac{e^{-z^2}}{\sqrt{2 \pi a}} \sum_{ij} D_{ij} \frac{u^j}{a^i}

The coefficients D are only good for a > 100 and |x/a - 1| < 0.25. Callers must not use this outside that envelope.
"""
import numpy as np
from scipy.special import erfc

from gammafn.lib.constants import SERIES_MAX, TEMME_D, TWO_PI
from gammafn.lib.utils import nonconvergence

__author__ = 'Robbert Harms'
__date__ = '2020-05-12'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


def _temme_argument(a, u):
    """Solve z^2 / a = exp(u) - 1 - u for z, with the sign of z following the sign of u.

    The ratio 2 (exp(u) - 1 - u) / u^2 = 1 + u/3 + u^2/12 + ... is summed as a power series to prevent the
    cancellation in exp(u) - 1 - u for small u.
    """
    dz = 1.0
    z = dz
    for i in range(3, SERIES_MAX + 3):
        z_old = z
        dz *= u / i
        z += dz
        if z == z_old:
            return u * np.sqrt(a * z / 2.0)
    raise nonconvergence('temme_argument', SERIES_MAX, a=a, u=u)


def _temme_correction_sum(a, u):
    """The double power series sum_ij D_ij u^j / a^i."""
    s = 0.0
    ai = 1.0
    for row in TEMME_D:
        ds = 0.0
        uj = 1.0
        for coefficient in row:
            ds += coefficient * uj
            uj *= u
        s += ds / ai
        ai *= a
    return s


def temme_gamma(a, x):
    """Compute both regularized incomplete Gamma functions P(a, x) and Q(a, x) in the transition region.

    Args:
        a (float): the shape parameter, larger than 100
        x (float): the argument, with |x/a - 1| < 0.25

    Returns:
        tuple: the left (P) and right (Q) regularized incomplete Gamma functions
    """
    u = np.log(x / a)
    z = _temme_argument(a, u)

    if z > 0:
        q = erfc(z) / 2.0
        p = 1.0 - q
    else:
        p = erfc(-z) / 2.0
        q = 1.0 - p

    r = np.exp(-z * z) / np.sqrt(TWO_PI * a) * _temme_correction_sum(a, u)
    return p - r, q + r
