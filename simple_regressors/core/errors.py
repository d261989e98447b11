class RegressorError(Exception):
    """Base class for errors raised by simple_regressors."""


class InvalidArgumentError(RegressorError, ValueError):
    """An input or hyperparameter violates a precondition."""


class NotFittedError(RegressorError, RuntimeError):
    """The estimator is used before a successful call to ``fit``."""
