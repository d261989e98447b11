import logging

import torch

from simple_regressors.core.base import BaseRegressor, check_paired
from simple_regressors.core.config import GradientDescentConfig
from simple_regressors.core.errors import InvalidArgumentError
from simple_regressors.training.iterative import logistic_gradient_descent
from simple_regressors.utils.maths import as_vector, linear, sigmoid, unique
from simple_regressors.utils.stats import accuracy_score

logger = logging.getLogger(__name__)


def check_binary_targets(y: torch.Tensor, eps: float):
    if not torch.isfinite(y).all():
        raise InvalidArgumentError("Targets must be finite.")
    classes = unique(y, eps=eps)
    if classes.numel() != 2:
        raise InvalidArgumentError("Targets must contain two classes of values.")
    for c in classes.tolist():
        if c not in (0.0, 1.0) and min(abs(c), abs(c - 1.0)) >= eps:
            raise InvalidArgumentError("Targets must contain binary values, 0 or 1.")


class SimpleLogisticRegression(BaseRegressor):
    """
    Logistic regression on one feature, for binary classification, fitted
    by gradient descent.

    Args:
        learning_rate: step size of the gradient descent.
        gradient_threshold: relative gradient size, in (0, 1), under which
            both parameters count as converged.
        max_iter: maximal number of iterations.
        legacy: reproduce the historical stopping rule, which keeps iterating
            up to ``max_iter`` and past it while the gradients stay large.
        legacy_iteration_cap: hard stop for the legacy rule, which need not
            terminate on its own.
        label_tolerance: tolerance used to tell the two label values apart.
        track_objective: record the binary cross-entropy of every iterate
            in ``objective_``.
    """

    def __init__(
        self,
        learning_rate: float = 0.001,
        gradient_threshold: float = 0.01,
        max_iter: int = 100,
        legacy: bool = False,
        legacy_iteration_cap: int = 100_000,
        label_tolerance: float = 1e-6,
        track_objective: bool = False,
        device="cpu",
    ):
        super().__init__(device=device)
        self.learning_rate = float(learning_rate)
        self.gradient_threshold = float(gradient_threshold)
        self.max_iter = int(max_iter)
        self.legacy = bool(legacy)
        self.legacy_iteration_cap = int(legacy_iteration_cap)
        self.label_tolerance = float(label_tolerance)
        self.track_objective = bool(track_objective)

    @property
    def config(self) -> GradientDescentConfig:
        return GradientDescentConfig(
            learning_rate=self.learning_rate,
            gradient_threshold=self.gradient_threshold,
            max_iter=self.max_iter,
            legacy=self.legacy,
            legacy_iteration_cap=self.legacy_iteration_cap,
            label_tolerance=self.label_tolerance,
        )

    def fit(self, x, y):
        config = self.config
        config.validate()

        x = as_vector(x, device=self.device)
        y = as_vector(y, device=self.device)
        check_paired(x, y, min_size=2, what="fit")
        check_binary_targets(y, config.label_tolerance)

        logger.debug(
            "Fitting %s on %d samples (lr=%g, threshold=%g, max_iter=%d, legacy=%s)",
            type(self).__name__, x.shape[0], config.learning_rate,
            config.gradient_threshold, config.max_iter, config.legacy,
        )

        def solve():
            coef, intercept, objective, n_iter, converged = logistic_gradient_descent(
                x, y, config, track_objective=self.track_objective
            )
            self.objective_ = objective
            self.n_iter_ = n_iter
            self.converged_ = converged
            return coef, intercept

        self._run_fit(solve)
        self.n_features_in_ = 1
        return self

    def predict_proba(self, x) -> torch.Tensor:
        self._check_fitted()
        x = as_vector(x, device=self.device)
        return sigmoid(linear(x, self._coef, self._intercept))

    def predict(self, x) -> torch.Tensor:
        probs = self.predict_proba(x)
        return (probs >= 0.5).to(torch.int32)

    def score(self, x, y) -> float:
        """Return the accuracy of ``predict(x)`` wrt. ``y``."""
        self._check_fitted()
        x = as_vector(x, device=self.device)
        y = as_vector(y, device=self.device)
        check_paired(x, y, min_size=1, what="score")
        return accuracy_score(y, self.predict(x))
