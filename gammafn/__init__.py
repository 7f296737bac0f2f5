import logging
from logging import NullHandler

from .__version__ import VERSION, VERSION_STATUS, __version__
from .exceptions import DomainError, NonconvergenceError
from .gamma_functions import gamma, log_gamma, psi, polygamma, beta, log_beta, upper_incomplete_gamma, \
    left_regularized_gamma, right_regularized_gamma, incomplete_beta, left_regularized_beta, pochhammer, \
    pow_over_gamma_plus_one
from .complex_functions import complex_gamma, complex_log_gamma, complex_psi
from .vectorize import evaluate

__author__ = 'Robbert Harms'
__date__ = '2020-05-12'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


logging.getLogger(__name__).addHandler(NullHandler())
