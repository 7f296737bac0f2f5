"""The power series and the continued fraction of the regularized incomplete Gamma functions.

The series for P(a, x) converges quickly for x < a + 1 and the continued fraction for Q(a, x) = 1 - P(a, x)
for x >= a + 1. Choosing between the two, and the Temme expansion, is done in
:func:`gammafn.regimes.incomplete_gamma_regime`.
"""
import numpy as np

from gammafn.factory import evaluator_for
from gammafn.lib.constants import SERIES_MAX
from gammafn.lib.utils import nonconvergence

__author__ = 'Robbert Harms'
__date__ = '2018-05-07'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


def gamma_p_series(a, x):
    """Compute the left regularized incomplete Gamma function P(a, x) using its power series.

    Args:
        a (float): the shape parameter, positive
        x (float): the argument, should be smaller than a + 1

    Returns:
        float: the value of P(a, x)
    """
    if x == 0.0:
        return 0.0

    ap = a
    ds = np.exp(a * np.log(x) - x - evaluator_for(a + 1.0).log_gamma(a + 1.0))
    s = ds
    for _ in range(SERIES_MAX):
        ap += 1.0
        ds *= x / ap
        s_old = s
        s += ds
        if s == s_old:
            return s
    raise nonconvergence('gamma_p_series', SERIES_MAX, a=a, x=x)


def gamma_q_continued_fraction(a, x):
    """Compute the right regularized incomplete Gamma function Q(a, x) using its continued fraction.

    This uses the modified Lentz (Steed) method. An infinite x is answered directly with zero, since entering the
    recursion with an infinite denominator would never converge.

    Args:
        a (float): the shape parameter, positive
        x (float): the argument, should be at least a + 1

    Returns:
        float: the value of Q(a, x)
    """
    if np.isposinf(x):
        return 0.0

    bb = x - a + 1.0
    d = 1.0 / bb
    df = 1.0 / bb
    f = df
    for k in range(1, SERIES_MAX):
        f_old = f
        aa = -k * (k - a)
        bb += 2.0
        d = 1.0 / (bb + aa * d)
        df = (bb * d - 1.0) * df
        f += df
        if f == f_old:
            return np.exp(a * np.log(x) - x - evaluator_for(a).log_gamma(a)) * f
    raise nonconvergence('gamma_q_continued_fraction', SERIES_MAX, a=a, x=x)
