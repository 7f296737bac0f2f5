__author__ = 'Robbert Harms'
__date__ = '2020-05-12'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


class DomainError(ValueError):

    def __init__(self, argument_name, value, requirement=None):
        """Raised when an argument lies outside the domain of the function.

        Args:
            argument_name (str): the name of the offending argument
            value: the value that was given
            requirement (str): optional description of the valid domain, for example ``'x > 0'``
        """
        message = 'The argument "{}" is out of range, got {}.'.format(argument_name, value)
        if requirement:
            message += ' It must satisfy {}.'.format(requirement)
        super().__init__(message)
        self.argument_name = argument_name
        self.value = value


class NonconvergenceError(ArithmeticError):

    def __init__(self, evaluator_name, nmr_iterations):
        """Raised when an iterative evaluator exhausts its iteration budget.

        This is not a recoverable condition, it means an evaluator was used outside the range for which it is
        known to converge.

        Args:
            evaluator_name (str): the name of the series or continued fraction that did not converge
            nmr_iterations (int): the number of iterations after which we gave up
        """
        super().__init__('The evaluation of "{}" did not converge within {} iterations.'.format(
            evaluator_name, nmr_iterations))
        self.evaluator_name = evaluator_name
        self.nmr_iterations = nmr_iterations
