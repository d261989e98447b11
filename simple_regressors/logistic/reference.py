import numpy as np

def predict_proba_numpy(x, coef, intercept):
    z = np.asarray(x, dtype=np.float64) * coef + intercept
    return 1.0 / (1.0 + np.exp(-z))

def predict_numpy(x, coef, intercept):
    return (predict_proba_numpy(x, coef, intercept) >= 0.5).astype(np.int32)
