import logging
import math

import numpy as np
import pytest
import torch

from simple_regressors.core.errors import InvalidArgumentError
from simple_regressors.linear.model import SimpleLinearRegression
from simple_regressors.linear.reference import fit_numpy, predict_numpy
from simple_regressors.training.sklearn_train import train_simple_linear_regression


def test_linear_regression_perfect_line():
    model = SimpleLinearRegression().fit([1, 2, 3, 4], [3, 5, 7, 9])

    assert float(model.coef_) == 2.0
    assert float(model.intercept_) == 1.0
    assert model.predict([5]).tolist() == [11.0]
    assert np.allclose(model.predict([1, 2, 3, 4]).numpy(), [3, 5, 7, 9])
    assert model.score([1, 2, 3, 4], [3, 5, 7, 9]) == pytest.approx(1.0)


def test_linear_regression_legacy_score_on_perfect_line():
    model = SimpleLinearRegression(legacy_score=True).fit([1, 2, 3, 4], [3, 5, 7, 9])
    assert model.score([1, 2, 3, 4], [3, 5, 7, 9]) == pytest.approx(1.0)


def test_linear_regression_matches_sklearn():
    np.random.seed(0)

    x = np.random.randn(512)
    y = 0.7 * x - 1.3 + 0.1 * np.random.randn(512)

    coef_sk, intercept_sk = train_simple_linear_regression(x, y)
    coef_np, intercept_np = fit_numpy(x, y)

    model = SimpleLinearRegression().fit(x, y)

    assert np.allclose(float(model.coef_), coef_sk, atol=1e-9)
    assert np.allclose(float(model.intercept_), intercept_sk, atol=1e-9)
    assert np.allclose(float(model.coef_), coef_np, atol=1e-9)
    assert np.allclose(float(model.intercept_), intercept_np, atol=1e-9)

    y_ref = predict_numpy(x, coef_sk, intercept_sk)
    assert np.allclose(model.predict(x).numpy(), y_ref, atol=1e-9)


def test_linear_regression_score_matches_textbook_r2():
    from sklearn.metrics import r2_score

    np.random.seed(1)
    x = np.random.randn(256)
    y = 2.0 * x + np.random.randn(256)

    model = SimpleLinearRegression().fit(x[:200], y[:200])
    y_hat = model.predict(x[200:]).numpy()

    assert model.score(x[200:], y[200:]) == pytest.approx(r2_score(y[200:], y_hat))


def test_linear_regression_legacy_score_uses_prediction_variance():
    x = np.array([1.0, 2.0, 3.0, 4.0])
    y = np.array([2.0, 5.0, 6.0, 9.0])

    model = SimpleLinearRegression(legacy_score=True).fit(x, y)
    y_hat = model.predict(x).numpy()

    ss_res = np.sum((y - y_hat) ** 2)
    ss_tot = np.sum(y_hat ** 2) - np.sum(y_hat) ** 2 / len(y_hat)
    assert model.score(x, y) == pytest.approx(1.0 - ss_res / ss_tot)
    assert model.score(x, y) != pytest.approx(
        SimpleLinearRegression().fit(x, y).score(x, y)
    )


def test_linear_regression_accepts_column_and_tensor_inputs():
    x = np.array([[1.0], [2.0], [3.0]])
    y = torch.tensor([2.0, 4.0, 6.0])

    model = SimpleLinearRegression().fit(x, y)

    assert model.predict(x).shape == (3,)
    assert model.predict(x).dtype == torch.float64
    assert model.n_features_in_ == 1


def test_linear_regression_constant_x_gives_nan(caplog):
    with caplog.at_level(logging.WARNING):
        model = SimpleLinearRegression().fit([2, 2, 2], [1, 2, 3])

    assert math.isnan(float(model.coef_))
    assert math.isnan(float(model.intercept_))
    assert torch.isnan(model.predict([1, 2])).all()
    assert "slope is undefined" in caplog.text


def test_linear_regression_predict_empty():
    model = SimpleLinearRegression().fit([0, 1], [0, 1])
    assert model.predict([]).shape == (0,)


def test_linear_regression_refit_overwrites_parameters():
    model = SimpleLinearRegression().fit([0, 1], [0, 1])
    model.fit([0, 1], [5, 3])

    assert float(model.coef_) == -2.0
    assert float(model.intercept_) == 5.0


@pytest.mark.parametrize(
    "x, y",
    [
        ([1, 2, 3], [1, 2]),
        ([1], [1]),
        ([], []),
    ],
)
def test_linear_regression_fit_rejects_bad_samples(x, y):
    with pytest.raises(InvalidArgumentError):
        SimpleLinearRegression().fit(x, y)


def test_linear_regression_score_rejects_bad_samples():
    model = SimpleLinearRegression().fit([1, 2], [1, 2])

    with pytest.raises(InvalidArgumentError):
        model.score([1, 2], [1])
    with pytest.raises(InvalidArgumentError):
        model.score([], [])
