from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class GradientDescentConfig:
    """
    Hyperparameters of the logistic gradient descent.

    Values are stored as given and only checked by ``validate``, which
    ``fit`` calls before touching any state.
    """

    learning_rate: float = 0.001
    gradient_threshold: float = 0.01
    max_iter: int = 100
    legacy: bool = False
    legacy_iteration_cap: int = 100_000
    label_tolerance: float = 1e-6

    def validate(self):
        if not self.learning_rate > 0:
            raise InvalidArgumentError("learning_rate must be positive.")
        if not 0 < self.gradient_threshold < 1:
            raise InvalidArgumentError(
                "gradient_threshold must be a fraction in (0, 1)."
            )
        if self.max_iter <= 0:
            raise InvalidArgumentError("max_iter must be positive.")
        if self.legacy and self.legacy_iteration_cap < self.max_iter:
            raise InvalidArgumentError(
                "legacy_iteration_cap must be at least max_iter."
            )
        if self.label_tolerance < 0:
            raise InvalidArgumentError("label_tolerance must be non-negative.")
