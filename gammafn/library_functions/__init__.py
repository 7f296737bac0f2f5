from gammafn.library_functions.base import GammaEvaluator
from gammafn.library_functions.lanczos import LanczosEvaluator
from gammafn.library_functions.stirling import StirlingEvaluator
from gammafn.library_functions.temme import temme_gamma

__author__ = 'Robbert Harms'
__date__ = '2018-05-07'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'
