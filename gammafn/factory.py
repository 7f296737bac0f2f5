from gammafn.library_functions.lanczos import LanczosEvaluator
from gammafn.library_functions.stirling import StirlingEvaluator
from gammafn.regimes import GammaRegime, gamma_regime

__author__ = 'Robbert Harms'
__date__ = "2015-07-06"
__maintainer__ = "Robbert Harms"
__email__ = "robbert.harms@maastrichtuniversity.nl"


_instances = {
    GammaRegime.LANCZOS: LanczosEvaluator(),
    GammaRegime.STIRLING: StirlingEvaluator()
}


def get_evaluator(regime):
    """Get the evaluator for the given non-reflecting regime.

    Args:
        regime (GammaRegime): either the Lanczos or the Stirling regime

    Returns:
        gammafn.library_functions.base.GammaEvaluator: the evaluator for that regime

    Raises:
        ValueError: if the regime has no evaluator of its own, i.e. the reflection regime
    """
    try:
        return _instances[regime]
    except KeyError:
        raise ValueError('The regime {} has no evaluator of its own.'.format(regime))


def evaluator_for(x):
    """Get the evaluator suitable for the given positive argument.

    The Lanczos sum is valid over the whole right half plane, so below the Stirling band it is returned also for
    arguments in the reflection band. Deciding whether to reflect is up to the caller.

    Args:
        x (float): the argument, positive

    Returns:
        gammafn.library_functions.base.GammaEvaluator: the evaluator for the band x lies in
    """
    if gamma_regime(x) == GammaRegime.STIRLING:
        return _instances[GammaRegime.STIRLING]
    return _instances[GammaRegime.LANCZOS]
