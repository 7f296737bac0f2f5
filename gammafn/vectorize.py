"""Evaluate the scalar functions of this package over numpy arrays.

All functions in :mod:`gammafn.gamma_functions` and :mod:`gammafn.complex_functions` take scalars. This module
broadcasts them over arrays of inputs, for example:

.. code-block:: python

    from gammafn import left_regularized_gamma
    from gammafn.vectorize import evaluate

    evaluate(left_regularized_gamma, {'a': [[1], [2]], 'x': np.linspace(0, 10, 20)})

"""
import logging
from inspect import signature

import numpy as np

from gammafn.complex_functions import complex_gamma, complex_log_gamma, complex_psi

__author__ = 'Robbert Harms'
__date__ = '2020-05-12'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


_logger = logging.getLogger(__name__)

_complex_functions = (complex_gamma, complex_log_gamma, complex_psi)


def evaluate(function, inputs):
    """Evaluate the given scalar function on every element of the broadcast inputs.

    Args:
        function (Callable): one of the scalar functions of this package
        inputs (dict): mapping the argument names of the function to scalars or array-like values. The values
            are broadcast against each other following the usual numpy rules.

    Returns:
        ndarray: the results, with the broadcast shape of the inputs. This is of type complex128 for the complex
            functions and of type float64 otherwise.

    Raises:
        ValueError: if an argument of the function is missing from the inputs, or if the inputs can not be broadcast
    """
    argument_names = list(signature(function).parameters)

    missing = [name for name in argument_names if name not in inputs]
    if missing:
        raise ValueError('Missing the inputs {} for the function "{}".'.format(missing, function.__name__))

    dtype = np.complex128 if function in _complex_functions else np.float64
    arrays = np.broadcast_arrays(*[np.asarray(inputs[name]) for name in argument_names])

    results = np.empty(arrays[0].shape, dtype=dtype)
    _logger.debug('Evaluating "{}" on {} elements.'.format(function.__name__, results.size))

    for index in np.ndindex(*results.shape):
        results[index] = function(*[array[index].item() for array in arrays])
    return results
