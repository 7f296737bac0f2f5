import math
import unittest
from concurrent.futures import ThreadPoolExecutor

import mpmath
import numpy as np
from numpy.testing import assert_allclose
from scipy import special

from gammafn import gamma, log_gamma, psi, polygamma, beta, log_beta, upper_incomplete_gamma, \
    left_regularized_gamma, right_regularized_gamma, incomplete_beta, left_regularized_beta, pochhammer, \
    pow_over_gamma_plus_one, DomainError
from gammafn.lib.utils import cartesian

__author__ = 'Robbert Harms'
__date__ = '2020-05-12'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


class test_gamma(unittest.TestCase):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

    def test_factorials(self):
        for n in range(1, 21):
            assert_allclose(gamma(n + 1.0), math.factorial(n), rtol=1e-13)

    def test_reflection_identity(self):
        for x in [0.1, 0.3, 0.5, 0.7, 0.9]:
            assert_allclose(gamma(x) * gamma(1 - x), np.pi / np.sin(np.pi * x), rtol=1e-13)

    def test_against_scipy(self):
        xs = np.concatenate([np.arange(-9.75, 0, 0.5), np.arange(0.01, 1, 0.07), np.arange(1, 170, 1.3)])
        results = [gamma(x) for x in xs]
        assert_allclose(results, special.gamma(xs), rtol=1e-12)

    def test_poles(self):
        for x in [0.0, -1.0, -2.0, -50.0, -np.inf]:
            assert np.isnan(gamma(x))

    def test_negative_half_integer(self):
        value = gamma(-2.5)
        assert np.isfinite(value)
        assert_allclose(value, np.pi / np.sin(np.pi * -2.5) / gamma(3.5), rtol=1e-14)
        assert_allclose(value, special.gamma(-2.5), rtol=1e-13)

    def test_overflow(self):
        assert gamma(180.0) == np.inf
        assert gamma(np.inf) == np.inf

    def test_nan(self):
        assert np.isnan(gamma(np.nan))


class test_log_gamma(unittest.TestCase):

    def test_log_of_gamma(self):
        xs = np.arange(1, 50.5, 0.5)
        assert_allclose([log_gamma(x) for x in xs], [np.log(gamma(x)) for x in xs], rtol=1e-13, atol=1e-13)

    def test_against_scipy(self):
        xs = np.concatenate([np.logspace(-10, -1, 10), np.arange(0.1, 20, 0.3), np.logspace(1.5, 6, 20)])
        assert_allclose([log_gamma(x) for x in xs], special.gammaln(xs), rtol=1e-12, atol=1e-13)

    def test_smallest_arguments(self):
        for x in [5e-324, 1e-310, 1e-300, 1e-299, 1e-200]:
            assert_allclose(log_gamma(x), -np.log(x), rtol=1e-15)

    def test_beyond_gamma_overflow(self):
        assert np.isfinite(log_gamma(1000.0))
        assert log_gamma(np.inf) == np.inf

    def test_domain(self):
        for x in [0.0, -1.0, -2.5]:
            with self.assertRaises(DomainError):
                log_gamma(x)

    def test_domain_error_is_value_error(self):
        with self.assertRaises(ValueError):
            log_gamma(-1.0)


class test_psi(unittest.TestCase):

    def test_recurrence(self):
        for x in [0.1, 1.0, 10.0, 100.0]:
            assert_allclose(psi(x + 1), psi(x) + 1.0 / x, rtol=1e-10, atol=1e-14)

    def test_against_scipy(self):
        xs = np.concatenate([np.arange(-5.85, 0, 0.4), np.arange(0.05, 16, 0.25), np.arange(16, 500, 7.5)])
        assert_allclose([psi(x) for x in xs], special.psi(xs), rtol=1e-10, atol=1e-12)

    def test_poles(self):
        for x in [0.0, -1.0, -7.0]:
            assert np.isnan(psi(x))

    def test_infinity(self):
        assert psi(np.inf) == np.inf


class test_polygamma(unittest.TestCase):

    def test_order_zero(self):
        for x in [-2.5, 0.3, 4.0, 30.0]:
            assert polygamma(0, x) == psi(x)

    def test_against_scipy(self):
        test_params = cartesian([[1.0, 2.0, 3.0, 4.0, 5.0], [0.3, 0.5, 1.0, 2.5, 7.0, 20.0, 50.0]])
        results = [polygamma(int(n), x) for n, x in test_params]
        assert_allclose(results, special.polygamma(test_params[:, 0].astype(int), test_params[:, 1]), rtol=1e-10)

    def test_trigamma_reflection(self):
        for x in [-0.3, -1.7, -2.25, -4.6]:
            assert_allclose(polygamma(1, x) + polygamma(1, 1 - x), (np.pi / np.sin(np.pi * x)) ** 2, rtol=1e-10)

    def test_recurrence_negative(self):
        for n in range(1, 5):
            for x in [-2.7, -1.3, -0.7, -0.25]:
                expected = polygamma(n, x + 1) - (-1) ** n * math.factorial(n) / x ** (n + 1)
                assert_allclose(polygamma(n, x), expected, rtol=1e-8, atol=1e-8)

    def test_poles(self):
        assert np.isnan(polygamma(2, -3.0))
        assert np.isnan(polygamma(1, 0.0))

    def test_domain(self):
        with self.assertRaises(DomainError):
            polygamma(-1, 1.0)
        with self.assertRaises(DomainError):
            polygamma(1.5, 1.0)


class test_beta(unittest.TestCase):

    def test_gamma_ratio(self):
        values = np.arange(1, 15.5, 0.5)
        test_params = cartesian([values, values])
        for a, b in test_params:
            assert_allclose(beta(a, b), gamma(a) * gamma(b) / gamma(a + b), rtol=1e-12)

    def test_against_scipy(self):
        values = np.array([0.1, 0.5, 1, 3.3, 12, 17, 40, 200])
        test_params = cartesian([values, values])
        assert_allclose([beta(a, b) for a, b in test_params],
                        special.beta(test_params[:, 0], test_params[:, 1]), rtol=1e-11)

    def test_log_beta_against_scipy(self):
        values = np.array([0.1, 0.5, 1, 3.3, 12, 17, 40, 200, 1e4])
        test_params = cartesian([values, values])
        assert_allclose([log_beta(a, b) for a, b in test_params],
                        special.betaln(test_params[:, 0], test_params[:, 1]), rtol=1e-10, atol=1e-12)

    def test_domain(self):
        for a, b in [(0, 1), (1, 0), (-1, 2), (2, -0.5)]:
            with self.assertRaises(DomainError):
                beta(a, b)
            with self.assertRaises(DomainError):
                log_beta(a, b)


class test_incomplete_gamma(unittest.TestCase):

    def test_complementarity(self):
        test_params = cartesian([[0.1, 1.0, 5.0, 30.0, 200.0],
                                 np.concatenate([[0, 0.5, 1, 5, 30, 100], np.arange(190, 211, 2.5)])])
        for a, x in test_params:
            assert_allclose(left_regularized_gamma(a, x) + right_regularized_gamma(a, x), 1.0, atol=1e-14)

    def test_left_against_scipy(self):
        test_params = cartesian([np.arange(0.1, 20, 0.7), np.arange(0, 40, 0.9)])
        results = [left_regularized_gamma(a, x) for a, x in test_params]
        assert_allclose(results, special.gammainc(test_params[:, 0], test_params[:, 1]), rtol=2e-13, atol=1e-14)

    def test_right_against_scipy(self):
        test_params = cartesian([np.arange(0.1, 20, 0.7), np.arange(0, 40, 0.9)])
        results = [right_regularized_gamma(a, x) for a, x in test_params]
        assert_allclose(results, special.gammaincc(test_params[:, 0], test_params[:, 1]), rtol=2e-13, atol=1e-14)

    def test_transition_region(self):
        for a in [150.0, 200.0, 500.0]:
            for x in a * np.array([0.8, 0.9, 0.99, 1.0, 1.05, 1.2]):
                with mpmath.workdps(40):
                    p = float(mpmath.gammainc(a, 0, x, regularized=True))
                    q = float(mpmath.gammainc(a, x, mpmath.inf, regularized=True))
                assert_allclose(left_regularized_gamma(a, x), p, rtol=1e-13, atol=1e-300)
                assert_allclose(right_regularized_gamma(a, x), q, rtol=1e-13, atol=1e-300)

    def test_limits(self):
        assert left_regularized_gamma(2.0, 0.0) == 0
        assert right_regularized_gamma(2.0, 0.0) == 1
        assert left_regularized_gamma(2.0, np.inf) == 1
        assert right_regularized_gamma(2.0, np.inf) == 0

    def test_upper_against_scipy(self):
        test_params = cartesian([np.arange(0.5, 10, 0.5), np.arange(0, 20, 1.5)])
        results = [upper_incomplete_gamma(a, x) for a, x in test_params]
        expected = special.gammaincc(test_params[:, 0], test_params[:, 1]) * special.gamma(test_params[:, 0])
        assert_allclose(results, expected, rtol=1e-12, atol=1e-14)

    def test_domain(self):
        for function in [left_regularized_gamma, right_regularized_gamma, upper_incomplete_gamma]:
            with self.assertRaises(DomainError):
                function(0.0, 1.0)
            with self.assertRaises(DomainError):
                function(-1.0, 1.0)
            with self.assertRaises(DomainError):
                function(1.0, -1.0)

    def test_nan(self):
        assert np.isnan(left_regularized_gamma(np.nan, 1.0))
        assert np.isnan(right_regularized_gamma(1.0, np.nan))

    def test_concurrent_callers(self):
        test_params = cartesian([[5.0, 40.0, 300.0], [3.0, 9.0, 45.0, 290.0, 320.0]])
        expected = [left_regularized_gamma(a, x) for a, x in test_params]

        def evaluate_all(_):
            return [left_regularized_gamma(a, x) for a, x in test_params]

        with ThreadPoolExecutor(max_workers=8) as executor:
            for results in executor.map(evaluate_all, range(32)):
                assert results == expected


class test_incomplete_beta(unittest.TestCase):

    def test_against_scipy(self):
        values = np.array([0.5, 1, 2.5, 7, 20])
        test_params = cartesian([values, values, np.linspace(0, 1, 11)])
        results = [incomplete_beta(a, b, x) for a, b, x in test_params]
        expected = (special.betainc(test_params[:, 0], test_params[:, 1], test_params[:, 2])
                    * special.beta(test_params[:, 0], test_params[:, 1]))
        assert_allclose(results, expected, rtol=1e-10, atol=1e-15)

    def test_zero_parameters(self):
        assert incomplete_beta(0.0, 2.0, 0.5) == np.inf
        assert incomplete_beta(2.0, 0.0, 1.0) == np.inf
        assert incomplete_beta(0.0, 2.0, 0.0) == 0

    def test_zero_right_parameter(self):
        assert_allclose(incomplete_beta(1.0, 0.0, 0.5), np.log(2), rtol=1e-12)
        assert_allclose(incomplete_beta(2.0, 0.0, 0.3), -np.log(0.7) - 0.3, rtol=1e-12)

    def test_zero_right_parameter_near_one(self):
        for x in [0.9, 0.99, 0.999, 0.999999]:
            assert_allclose(incomplete_beta(1.0, 0.0, x), -np.log1p(-x), rtol=1e-12)
            assert_allclose(incomplete_beta(2.0, 0.0, x), -np.log1p(-x) - x, rtol=1e-12)
            assert_allclose(incomplete_beta(7.0, 0.0, x),
                            -np.log1p(-x) - sum(x ** k / k for k in range(1, 7)), rtol=1e-12)

    def test_zero_right_parameter_fractional(self):
        # B_x(1/2, 0) = log((1 + sqrt(x)) / (1 - sqrt(x)))
        for x in [0.3, 0.59, 0.61, 0.9, 0.999]:
            expected = np.log((1 + np.sqrt(x)) / (1 - np.sqrt(x)))
            assert_allclose(incomplete_beta(0.5, 0.0, x), expected, rtol=1e-12)

    def test_domain(self):
        for a, b, x in [(-1, 1, 0.5), (1, -1, 0.5), (1, 1, -0.1), (1, 1, 1.5)]:
            with self.assertRaises(DomainError):
                incomplete_beta(a, b, x)


class test_left_regularized_beta(unittest.TestCase):

    def test_against_scipy(self):
        values = np.array([0.5, 1, 3, 10, 30, 100])
        test_params = cartesian([values, values, np.linspace(0, 1, 21)])
        results = [left_regularized_beta(a, b, x) for a, b, x in test_params]
        expected = special.betainc(test_params[:, 0], test_params[:, 1], test_params[:, 2])
        assert_allclose(results, expected, rtol=1e-9, atol=1e-14)

    def test_monotone(self):
        xs = np.linspace(0, 1, 101)
        for a, b in cartesian([[1.0, 5.0, 50.0], [1.0, 5.0, 50.0]]):
            values = np.array([left_regularized_beta(a, b, x) for x in xs])
            assert values[0] == 0
            assert values[-1] == 1
            assert np.all(np.diff(values) >= 0)

    def test_symmetry(self):
        for a, b, x in [(2.0, 3.0, 0.2), (0.5, 7.0, 0.9), (40.0, 25.0, 0.55)]:
            assert_allclose(left_regularized_beta(a, b, x), 1 - left_regularized_beta(b, a, 1 - x),
                            rtol=1e-12, atol=1e-15)

    def test_domain(self):
        for a, b, x in [(0, 1, 0.5), (1, 0, 0.5), (1, 1, -0.1), (1, 1, 1.1)]:
            with self.assertRaises(DomainError):
                left_regularized_beta(a, b, x)


class test_pochhammer(unittest.TestCase):

    def test_rising_factorial(self):
        for x in [0.5, 2.0, -3.5]:
            assert pochhammer(x, 0) == 1
            assert pochhammer(x, 1) == x
            for n in range(2, 7):
                assert_allclose(pochhammer(x, n), np.prod([x + k for k in range(n)]), rtol=1e-12)

    def test_against_scipy(self):
        test_params = cartesian([[0.5, 3.0, 20.0, 50.0], [0.3, 2.5, 10.0, 40.0]])
        results = [pochhammer(x, y) for x, y in test_params]
        assert_allclose(results, special.poch(test_params[:, 0], test_params[:, 1]), rtol=1e-11)

    def test_negative_shift(self):
        assert_allclose(pochhammer(5.5, -2.0), 1.0 / (3.5 * 4.5), rtol=1e-12)
        assert_allclose(pochhammer(-2.5, -1.0), 1.0 / -3.5, rtol=1e-12)

    def test_poles(self):
        assert_allclose(pochhammer(-3.0, 2.0), 6.0, rtol=1e-13)
        assert_allclose(pochhammer(-3.0, -1.0), -0.25, rtol=1e-13)
        assert pochhammer(-3.0, 0.5) == 0
        assert pochhammer(0.5, -1.5) == np.inf

    def test_nan(self):
        assert np.isnan(pochhammer(np.nan, 1.0))
        assert np.isnan(pochhammer(1.0, np.nan))


class test_pow_over_gamma_plus_one(unittest.TestCase):

    def test_small_power(self):
        for nu in [0.0, 0.5, 3.0, 15.9]:
            for x in [0.0, 0.5, 2.0, 10.0]:
                assert_allclose(pow_over_gamma_plus_one(x, nu), x ** nu / special.gamma(nu + 1), rtol=1e-12)

    def test_large_power(self):
        for nu in [20.0, 50.0, 100.0, 400.0]:
            for x in [0.5, 2.0, 10.0, 300.0]:
                expected = np.exp(nu * np.log(x) - special.gammaln(nu + 1))
                assert_allclose(pow_over_gamma_plus_one(x, nu), expected, rtol=1e-10)
            assert pow_over_gamma_plus_one(0.0, nu) == 0
