"""The classification of arguments into the bands in which each approximation scheme is used.

Every dispatcher selects its evaluator through these functions, such that all functions share exactly the same
thresholds.
"""
from enum import Enum

__author__ = 'Robbert Harms'
__date__ = '2020-05-12'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


"""Below this value we use the reflection formula to map the argument to 1 - x, which is then above 0.75."""
REFLECTION_LIMIT = 0.25

"""At and above this value the Stirling series converges faster than the Lanczos sum."""
STIRLING_LIMIT = 16.0

"""The Temme expansion is used for shape parameters above this value, if x is also close enough to a."""
TEMME_SHAPE_LIMIT = 128.0

"""The maximum relative distance |x - a| / a for which we use the Temme expansion."""
TEMME_RELATIVE_WIDTH = 0.25


class GammaRegime(Enum):
    REFLECT = 'reflect'
    LANCZOS = 'lanczos'
    STIRLING = 'stirling'


class IncompleteGammaRegime(Enum):
    SERIES = 'series'
    CONTINUED_FRACTION = 'continued_fraction'
    TEMME = 'temme'


def gamma_regime(x):
    """Get the band of the real axis in which x lies for the Gamma function and its logarithmic derivatives.

    Args:
        x (float): the argument

    Returns:
        GammaRegime: the regime in which to evaluate x
    """
    if x < REFLECTION_LIMIT:
        return GammaRegime.REFLECT
    elif x < STIRLING_LIMIT:
        return GammaRegime.LANCZOS
    return GammaRegime.STIRLING


def in_stirling_band(*args):
    """Check if all the given arguments are large enough to use the Stirling series for the two-argument functions.

    Args:
        *args (float): the arguments to check

    Returns:
        boolean: if all the arguments are strictly larger than the Stirling limit
    """
    return all(x > STIRLING_LIMIT for x in args)


def incomplete_gamma_regime(a, x):
    """Get the method to use for evaluating the regularized incomplete Gamma functions.

    Args:
        a (float): the shape parameter
        x (float): the argument

    Returns:
        IncompleteGammaRegime: the regime in which to evaluate (a, x)
    """
    if a > TEMME_SHAPE_LIMIT and abs(x - a) < TEMME_RELATIVE_WIDTH * a:
        return IncompleteGammaRegime.TEMME
    elif x < a + 1.0:
        return IncompleteGammaRegime.SERIES
    return IncompleteGammaRegime.CONTINUED_FRACTION
