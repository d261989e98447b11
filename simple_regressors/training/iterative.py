import logging

import torch
import torch.nn.functional as F

from simple_regressors.utils.maths import inner, linear, sigmoid, total

logger = logging.getLogger(__name__)


def _legacy_stop(d_coef, d_intercept, coef, intercept, thr) -> bool:
    # Historical ratio test, IEEE division: 0/0 is nan and nan > thr is False.
    still_moving = (
        bool(torch.abs(d_coef / coef) > thr)
        and bool(torch.abs(d_intercept / intercept) > thr)
    )
    return not still_moving


def _gradient_small(d_coef, d_intercept, coef, intercept, thr) -> bool:
    return bool(torch.abs(d_coef) <= thr * torch.abs(coef)) and bool(
        torch.abs(d_intercept) <= thr * torch.abs(intercept)
    )


def logistic_gradient_descent(x, y, config, track_objective: bool = False):
    """
    Single-feature logistic regression by gradient descent.

    The step uses thresholded 0/1 predictions, not probabilities:
      r           = 1[sigmoid(coef x + intercept) >= 0.5] - y
      d_coef      = mean(x r)
      d_intercept = mean(r)

    Returns (coef, intercept, objective, n_iter, converged). ``objective`` is
    the binary cross-entropy of each iterate when ``track_objective`` is set,
    otherwise None.
    """
    x = torch.as_tensor(x, dtype=torch.float64).contiguous().view(-1)
    y = torch.as_tensor(y, dtype=torch.float64, device=x.device).contiguous().view(-1)

    B = x.shape[0]
    lr = config.learning_rate
    thr = config.gradient_threshold
    cap = config.legacy_iteration_cap if config.legacy else config.max_iter

    coef = torch.zeros((), dtype=torch.float64, device=x.device)
    intercept = torch.zeros((), dtype=torch.float64, device=x.device)

    objective = [] if track_objective else None
    converged = False
    n_iter = 0

    while True:
        probs = sigmoid(linear(x, coef, intercept))
        r = (probs >= 0.5).to(torch.float64) - y

        d_coef = inner(x, r) / B
        d_intercept = total(r) / B

        coef = coef - lr * d_coef
        intercept = intercept - lr * d_intercept
        n_iter += 1

        if track_objective:
            with torch.no_grad():
                objective.append(float(F.binary_cross_entropy(probs, y).item()))

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "iter %d: d_coef=%g d_intercept=%g coef=%g intercept=%g",
                n_iter, d_coef.item(), d_intercept.item(), coef.item(), intercept.item(),
            )

        if config.legacy:
            if n_iter >= config.max_iter and _legacy_stop(
                d_coef, d_intercept, coef, intercept, thr
            ):
                converged = True
                break
        elif _gradient_small(d_coef, d_intercept, coef, intercept, thr):
            converged = True
            break

        if n_iter >= cap:
            if config.legacy:
                logger.warning(
                    "Legacy convergence test still running after %d iterations, stopping.",
                    n_iter,
                )
            break

    if converged:
        logger.info("Gradient descent converged after %d iterations.", n_iter)
    else:
        logger.info("Gradient descent stopped at the iteration limit (%d).", n_iter)

    return coef, intercept, objective, n_iter, converged
