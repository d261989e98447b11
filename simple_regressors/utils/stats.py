import logging

import torch

from simple_regressors.core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def _paired(y_true, y_pred):
    y_true = torch.as_tensor(y_true, dtype=torch.float64).reshape(-1)
    y_pred = torch.as_tensor(
        y_pred, dtype=torch.float64, device=y_true.device
    ).reshape(-1)
    if y_true.shape != y_pred.shape:
        raise InvalidArgumentError("Inputs have not the same size.")
    if y_true.numel() == 0:
        raise InvalidArgumentError("Inputs have not enough values for score.")
    return y_true, y_pred


def accuracy_score(y_true, y_pred) -> float:
    """Fraction of positions where the predicted label equals the true one."""
    y_true, y_pred = _paired(y_true, y_pred)
    return float((y_true == y_pred).to(torch.float64).mean())


def r2_score(y_true, y_pred, legacy: bool = False) -> float:
    """
    Coefficient of determination ``1 - SS_res / SS_tot``.

    ``SS_tot`` is the centered sum of squares of ``y_true``. With ``legacy`` it
    is taken over ``y_pred`` instead (``sum(p**2) - sum(p)**2 / n``), which
    is what earlier releases reported. A zero ``SS_tot`` gives nan or inf.
    """
    y_true, y_pred = _paired(y_true, y_pred)
    n = y_true.numel()

    res = y_true - y_pred
    ss_res = res @ res

    if legacy:
        s = y_pred.sum()
        ss_tot = y_pred @ y_pred - s * s / n
    else:
        centered = y_true - y_true.mean()
        ss_tot = centered @ centered

    if ss_tot == 0:
        logger.warning("Total sum of squares is zero, R^2 is not finite.")
    return float(1.0 - ss_res / ss_tot)
