import numpy as np
from sklearn.linear_model import LinearRegression, LogisticRegression


def _column(x):
    return np.asarray(x, dtype=np.float64).reshape(-1, 1)


def train_simple_linear_regression(x, y):
    model = LinearRegression()
    model.fit(_column(x), np.asarray(y, dtype=np.float64).reshape(-1))
    return float(model.coef_[0]), float(model.intercept_)


def train_simple_logistic_regression(x, y, max_iter=1000):
    model = LogisticRegression(
        C=np.inf,
        solver="lbfgs",
        max_iter=max_iter,
    )
    model.fit(_column(x), np.asarray(y).reshape(-1).astype(np.int64))
    return float(model.coef_[0][0]), float(model.intercept_[0])
