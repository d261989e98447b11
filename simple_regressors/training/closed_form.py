import logging

import torch

from simple_regressors.utils.maths import inner, total

logger = logging.getLogger(__name__)


def simple_ols_closed_form(x, y):
    """
    Closed-form ordinary least squares for y = coef * x + intercept:
      coef      = (n Sxy - Sx Sy) / (n Sxx - Sx^2)
      intercept = (Sy - coef Sx) / n

    A zero denominator (constant x) gives a NaN coef, which then
    propagates into the intercept.
    """
    x = torch.as_tensor(x, dtype=torch.float64).contiguous().view(-1)
    y = torch.as_tensor(y, dtype=torch.float64, device=x.device).contiguous().view(-1)

    n = float(x.shape[0])
    sx = total(x)
    sy = total(y)
    sxx = inner(x, x)
    sxy = inner(x, y)

    num = n * sxy - sx * sy
    denom = n * sxx - sx * sx

    if denom != 0:
        coef = num / denom
    else:
        logger.warning("All x values are identical, slope is undefined (NaN).")
        coef = torch.tensor(float("nan"), dtype=torch.float64, device=x.device)
    intercept = (sy - coef * sx) / n

    return coef, intercept
