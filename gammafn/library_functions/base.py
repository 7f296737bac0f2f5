__author__ = 'Robbert Harms'
__date__ = "2016-10-03"
__maintainer__ = "Robbert Harms"
__email__ = "robbert.harms@maastrichtuniversity.nl"


class GammaEvaluator:
    """Interface for an approximation scheme of the Gamma function and the functions derived from it.

    Implementations are stateless, they are only valid on a part of the real axis. It is the task of the dispatcher
    to only call an evaluator inside its band.
    """

    def gamma(self, x):
        """Compute the Gamma function.

        Args:
            x (float): the argument

        Returns:
            float: the value of Gamma(x)
        """
        raise NotImplementedError()

    def log_gamma(self, x):
        """Compute the logarithm of the Gamma function.

        Args:
            x (float): the argument

        Returns:
            float: the value of log(Gamma(x))
        """
        raise NotImplementedError()

    def psi(self, x):
        """Compute the digamma function, the logarithmic derivative of the Gamma function.

        Args:
            x (float): the argument

        Returns:
            float: the value of psi(x)
        """
        raise NotImplementedError()

    def beta(self, a, b):
        """Compute the Beta function without forming the ratio of three Gamma functions.

        Args:
            a (float): the first argument
            b (float): the second argument

        Returns:
            float: the value of B(a, b)
        """
        raise NotImplementedError()

    def log_beta(self, a, b):
        """Compute the logarithm of the Beta function.

        Args:
            a (float): the first argument
            b (float): the second argument

        Returns:
            float: the value of log(B(a, b))
        """
        raise NotImplementedError()

    def reduced_log_pochhammer(self, x, y):
        """Compute (log(Gamma(x + y)) - log(Gamma(x))) / y, accurate also as y goes to zero.

        Args:
            x (float): the base argument
            y (float): the shift

        Returns:
            float: the log of the Pochhammer symbol divided by y
        """
        raise NotImplementedError()
