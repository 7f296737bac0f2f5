import unittest

import numpy as np
from numpy.testing import assert_allclose
from scipy.special import gammainc, gammaincc

from gammafn.exceptions import NonconvergenceError
from gammafn.library_functions.incomplete_gamma import gamma_p_series, gamma_q_continued_fraction
from gammafn.lib.utils import cartesian

__author__ = 'Robbert Harms'
__date__ = '2020-05-12'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


class test_IncompleteGamma(unittest.TestCase):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

    def test_series(self):
        test_params = cartesian([np.arange(0.01, 30, 0.9), np.arange(0, 30, 0.7)])
        test_params = test_params[test_params[:, 1] < test_params[:, 0] + 1]

        python_results = gammainc(test_params[:, 0], test_params[:, 1])
        results = [gamma_p_series(a, x) for a, x in test_params]
        assert_allclose(results, python_results, rtol=1e-10, atol=1e-15)

    def test_continued_fraction(self):
        test_params = cartesian([np.arange(0.01, 30, 0.9), np.arange(1, 60, 1.1)])
        test_params = test_params[test_params[:, 1] >= test_params[:, 0] + 1]

        python_results = gammaincc(test_params[:, 0], test_params[:, 1])
        results = [gamma_q_continued_fraction(a, x) for a, x in test_params]
        assert_allclose(results, python_results, rtol=1e-10, atol=1e-300)

    def test_limits(self):
        assert gamma_p_series(3.0, 0.0) == 0
        assert gamma_q_continued_fraction(3.0, np.inf) == 0

    def test_nonconvergence(self):
        with self.assertRaises(NonconvergenceError):
            gamma_p_series(1.0, 300.0)
        with self.assertRaises(NonconvergenceError):
            gamma_q_continued_fraction(0.5, 1e-6)
