import torch

from simple_regressors.core.errors import InvalidArgumentError


def as_vector(x, device=None) -> torch.Tensor:
    """
    Convert a sequence (list, ndarray, tensor) into a 1-D float64 tensor.

    A single column ``(n, 1)`` is flattened, anything wider is rejected.
    """
    x = torch.as_tensor(x, dtype=torch.float64, device=device)
    if x.ndim == 2 and x.shape[1] == 1:
        x = x.reshape(-1)
    if x.ndim != 1:
        raise InvalidArgumentError(
            f"Expected a 1-D sequence or a single column, got shape {tuple(x.shape)}."
        )
    return x


def linear(x, a, b):
    x = torch.as_tensor(x, dtype=torch.float64)
    return a * x + b


def sigmoid(x):
    return torch.sigmoid(torch.as_tensor(x, dtype=torch.float64))


def reciprocal(x):
    return torch.reciprocal(torch.as_tensor(x, dtype=torch.float64))


def log(x):
    return torch.log(torch.as_tensor(x, dtype=torch.float64))


def power(x, p):
    return torch.pow(torch.as_tensor(x, dtype=torch.float64), p)


def total(x) -> torch.Tensor:
    return torch.as_tensor(x, dtype=torch.float64).sum()


def inner(x, y) -> torch.Tensor:
    x = torch.as_tensor(x, dtype=torch.float64)
    y = torch.as_tensor(y, dtype=torch.float64, device=x.device)
    if x.shape != y.shape:
        raise InvalidArgumentError("Inputs have not the same size.")
    return (x * y).sum()


def unique(x, eps: float = 1e-6) -> torch.Tensor:
    """
    Distinct values of ``x`` up to a tolerance, in ascending order.

    Each class is represented by its smallest member; a sorted value joins
    the current class while it is strictly closer than ``eps`` to that
    representative.
    """
    if eps < 0:
        raise InvalidArgumentError("eps must be non-negative.")
    x = as_vector(x)
    if x.numel() == 0:
        return x

    values = torch.sort(x).values.tolist()
    reps = [values[0]]
    for v in values[1:]:
        if v != reps[-1] and v - reps[-1] >= eps:
            reps.append(v)

    return torch.tensor(reps, dtype=torch.float64, device=x.device)
