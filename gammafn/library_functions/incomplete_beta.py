r"""The continued fraction of the incomplete Beta function.

We use the continued fraction (DLMF 8.17.22, http://dlmf.nist.gov/8.17#v):

.. math::

    B_x(a, b) = x^a (1-x)^b \operatorname{BCF}(a, b, x)

    \operatorname{BCF}(a, b, x) = \frac{1}{a} \left[ \frac{1}{1+} \frac{d_1}{1+} \frac{d_2}{1+} \cdots \right]

where

.. math::

    d_{2m} = \frac{x m (b - m)}{(a + 2m - 1)(a + 2m)}

    d_{2m+1} = -\frac{x (a + m)(a + b + m)}{(a + 2m)(a + 2m + 1)}

which is good for x < (a + 1) / (a + b + 2). For larger x, compute the complement and subtract.
"""
from gammafn.lib.constants import SERIES_MAX
from gammafn.lib.utils import nonconvergence

__author__ = 'Robbert Harms'
__date__ = '2020-05-12'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


def beta_transition_point(a, b):
    """The point (a + 1) / (a + b + 2) below which the continued fraction converges quickly."""
    return (a + 1.0) / (a + b + 2.0)


def beta_continued_fraction(a, b, x):
    """Evaluate BCF(a, b, x), such that the incomplete Beta function is x^a (1-x)^b BCF(a, b, x).

    This uses Steed's method, simplified by the denominators all being one (a Stieltjes fraction). The terms
    for k = 0 and k = 1 are done explicitly.

    Args:
        a (float): the first shape parameter, positive
        b (float): the second shape parameter, non-negative
        x (float): the position, preferably below the transition point

    Returns:
        float: the value of the continued fraction
    """
    ab = a + b
    p = -x * ab / (a + 1.0)
    d = 1.0 / (1.0 + p)
    df = -p * d
    f = 1.0 + df
    for k in range(2, SERIES_MAX):
        f_old = f
        m = k // 2
        p = x / ((a + (k - 1)) * (a + k))
        if k % 2 == 0:
            p *= m * (b - m)
        else:
            p *= -(a + m) * (ab + m)
        d = 1.0 / (1.0 + p * d)
        df = (d - 1.0) * df
        f += df
        if f == f_old:
            return f / a
    raise nonconvergence('beta_continued_fraction', SERIES_MAX, a=a, b=b, x=x)


def beta_zero_tail_series(a, y):
    r"""The tail integral of the incomplete Beta function with a vanishing right parameter.

    For b = 0 the complete Beta function diverges, so above the transition point we can not subtract from it. Instead
    we use :math:`B_x(a, 0) = -\log(1 - x) - \psi(a) - \gamma - T(a, 1 - x)` with the tail:

    .. math::

        T(a, y) = \int_0^y \frac{(1 - s)^{a-1} - 1}{s} ds = \sum_{k=1} \binom{a-1}{k} \frac{(-y)^k}{k}

    Above the transition point y < 1 / (a + 2), so the ratio of successive terms stays below a / (a + 2).

    Args:
        a (float): the left shape parameter, positive
        y (float): the distance 1 - x to the upper end of the integral

    Returns:
        float: the value of T(a, y)
    """
    c = 1.0
    s = 0.0
    for k in range(1, SERIES_MAX):
        s_old = s
        c *= (k - a) * y / k
        s += c / k
        if s == s_old:
            return s
    raise nonconvergence('beta_zero_tail_series', SERIES_MAX, a=a, y=y)
