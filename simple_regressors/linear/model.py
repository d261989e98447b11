import logging

import torch

from simple_regressors.core.base import BaseRegressor, check_paired
from simple_regressors.training.closed_form import simple_ols_closed_form
from simple_regressors.utils.maths import as_vector, linear
from simple_regressors.utils.stats import r2_score

logger = logging.getLogger(__name__)


class SimpleLinearRegression(BaseRegressor):
    """
    sklearn-like simple linear regression (one feature) by ordinary least squares.

    ``legacy_score`` makes ``score`` use the variance of the predictions as the
    total sum of squares, as earlier releases did, instead of the variance of
    the true targets.
    """

    def __init__(self, legacy_score=False, device="cpu"):
        super().__init__(device=device)
        self.legacy_score = bool(legacy_score)

    def fit(self, x, y):
        x = as_vector(x, device=self.device)
        y = as_vector(y, device=self.device)
        check_paired(x, y, min_size=2, what="fit")

        logger.debug("Fitting %s on %d samples", type(self).__name__, x.shape[0])
        self._run_fit(lambda: simple_ols_closed_form(x, y))

        self.n_features_in_ = 1
        self.n_iter_ = 1
        self.converged_ = True
        self.objective_ = None
        logger.debug(
            "Fitted coef=%g intercept=%g", self._coef.item(), self._intercept.item()
        )
        return self

    def predict(self, x) -> torch.Tensor:
        self._check_fitted()
        x = as_vector(x, device=self.device)
        return linear(x, self._coef, self._intercept)

    def score(self, x, y) -> float:
        """
        Return the coefficient of determination R^2 of ``predict(x)`` wrt. ``y``.
        """
        self._check_fitted()
        x = as_vector(x, device=self.device)
        y = as_vector(y, device=self.device)
        check_paired(x, y, min_size=1, what="score")
        return r2_score(y, self.predict(x), legacy=self.legacy_score)
