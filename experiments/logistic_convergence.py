import logging

import numpy as np
import torch
import matplotlib.pyplot as plt

from simple_regressors.logistic.model import SimpleLogisticRegression

logging.basicConfig(level=logging.INFO)

np.random.seed(0)
torch.manual_seed(0)

B = 2048
x = np.random.randn(B)
y = (x + 0.3 * np.random.randn(B) > 0.2).astype(np.int32)

runs = {}
for lr in (0.001, 0.01, 0.1):
    for legacy in (False, True):
        model = SimpleLogisticRegression(
            learning_rate=lr,
            max_iter=500,
            legacy=legacy,
            legacy_iteration_cap=2000,
            track_objective=True,
        )
        model.fit(x, y)
        label = f"lr={lr}" + (" (legacy)" if legacy else "")
        runs[label] = np.array(model.objective_)
        print(f"{label}: {model.n_iter_} iterations, accuracy {model.score(x, y):.4f}")

plt.figure(figsize=(7, 5))
for label, obj in runs.items():
    plt.plot(obj, label=label, linestyle="--" if "legacy" in label else "-")
plt.xlabel("Iteration")
plt.ylabel("Binary cross-entropy")
plt.title("Logistic gradient descent convergence")
plt.legend()
plt.tight_layout()
plt.savefig("logistic_convergence.png", dpi=150)
print("Plot done saved to logistic_convergence.png")
