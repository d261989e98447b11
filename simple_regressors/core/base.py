from __future__ import annotations

import abc
import enum

import torch

from .errors import InvalidArgumentError, NotFittedError


class FitState(enum.Enum):
    UNFIT = "unfit"
    FITTING = "fitting"
    FITTED = "fitted"


class BaseRegressor(abc.ABC):
    @abc.abstractmethod
    def fit(self, x, y):
        """
        Fit the model on a single feature.

        After this method returns, the following attributes MUST exist:
          -> self.coef_          (0-d float64 torch.Tensor)
          -> self.intercept_     (0-d float64 torch.Tensor)
          -> self.n_features_in_ (int, always 1)

        Returns:
            self
        """
        raise NotImplementedError

    @abc.abstractmethod
    def predict(self, x):
        raise NotImplementedError

    @abc.abstractmethod
    def score(self, x, y):
        raise NotImplementedError

    n_features_in_: int = 1

    objective_: list[float] | None = None
    n_iter_: int | None = None
    converged_: bool | None = None

    def __init__(self, device="cpu"):
        self.device = device
        self.state_ = FitState.UNFIT
        self._coef = None
        self._intercept = None

    @property
    def coef_(self) -> torch.Tensor:
        self._check_fitted()
        return self._coef

    @property
    def intercept_(self) -> torch.Tensor:
        self._check_fitted()
        return self._intercept

    @property
    def is_fitted(self) -> bool:
        return self.state_ is FitState.FITTED

    def _check_fitted(self):
        if self.state_ is not FitState.FITTED:
            raise NotFittedError(
                f"{type(self).__name__} has not been fitted yet."
            )

    def _run_fit(self, solver):
        """
        Run ``solver`` while the model is FITTING.

        ``solver`` returns ``(coef, intercept)``; they are stored only once it
        returns, any error drops the model back to UNFIT.
        """
        self.state_ = FitState.FITTING
        try:
            coef, intercept = solver()
        except Exception:
            self.state_ = FitState.UNFIT
            self._coef = None
            self._intercept = None
            raise
        self._coef = coef
        self._intercept = intercept
        self.state_ = FitState.FITTED
        return self


def check_paired(x: torch.Tensor, y: torch.Tensor, min_size: int, what: str):
    if x.shape[0] != y.shape[0]:
        raise InvalidArgumentError("Inputs have not the same size.")
    if x.shape[0] < min_size:
        raise InvalidArgumentError(f"Inputs have not enough values for {what}.")
