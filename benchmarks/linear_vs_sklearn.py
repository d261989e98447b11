import time
import numpy as np
from sklearn.linear_model import LinearRegression

from simple_regressors.linear.model import SimpleLinearRegression


def time_fn(fn, iters=50):
    t0 = time.time()
    for _ in range(iters):
        fn()
    return (time.time() - t0) / iters


BATCHES = [8, 128, 1024, 16384, 262144]

print(f"{'B':>7} | {'sk fit(ms)':>11} | {'fit(ms)':>9} | {'sk predict(ms)':>14} | {'predict(ms)':>11}")
print("-" * 66)

for B in BATCHES:
    x = np.random.randn(B)
    y = 1.5 * x + 0.2 + 0.1 * np.random.randn(B)
    X = x.reshape(-1, 1)

    sk = LinearRegression().fit(X, y)
    model = SimpleLinearRegression().fit(x, y)

    assert np.allclose(sk.predict(X), model.predict(x).numpy())

    t_sk_fit = time_fn(lambda: LinearRegression().fit(X, y)) * 1e3
    t_fit = time_fn(lambda: SimpleLinearRegression().fit(x, y)) * 1e3
    t_sk_pred = time_fn(lambda: sk.predict(X)) * 1e3
    t_pred = time_fn(lambda: model.predict(x)) * 1e3

    print(f"{B:7d} | {t_sk_fit:11.4f} | {t_fit:9.4f} | {t_sk_pred:14.4f} | {t_pred:11.4f}")
