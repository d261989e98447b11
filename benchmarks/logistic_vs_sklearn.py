import time
import numpy as np
from sklearn.linear_model import LogisticRegression

from simple_regressors.logistic.model import SimpleLogisticRegression


def time_fn(fn, iters=20):
    fn()
    t0 = time.time()
    for _ in range(iters):
        fn()
    return (time.time() - t0) / iters * 1e3


B = 8192
x = np.random.randn(B)
y = (x + 0.5 * np.random.randn(B) > 0).astype(np.int32)
X = x.reshape(-1, 1)

sk = LogisticRegression(C=np.inf, solver="lbfgs", max_iter=1000)
sk.fit(X, y)

model = SimpleLogisticRegression(learning_rate=0.1, max_iter=1000)
model.fit(x, y)

t_sklearn = time_fn(lambda: sk.predict_proba(X))
t_model = time_fn(lambda: model.predict_proba(x))

print(f"sklearn accuracy: {sk.score(X, y):.4f}")
print(f"model accuracy:   {model.score(x, y):.4f} ({model.n_iter_} iterations, converged={model.converged_})")
print(f"sklearn inference: {t_sklearn:.2f} ms")
print(f"model inference:   {t_model:.2f} ms")
