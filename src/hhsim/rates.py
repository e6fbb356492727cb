import numpy as np

from .constants import f32, jit

# =========================
# Gating variable rate functions
# =========================
# Every literal is cast to float32 so that float32 input stays float32 all
# the way through.
@jit
def alpha_n(v):
    # 0/0 at v = 10, left unguarded
    return f32(0.01) * (f32(10.0) - v) / (np.exp((f32(10.0) - v) / f32(10.0)) - f32(1.0))

@jit
def alpha_m(v):
    # 0/0 at v = 25, left unguarded
    return f32(0.1) * (f32(25.0) - v) / (np.exp((f32(25.0) - v) / f32(10.0)) - f32(1.0))

@jit
def alpha_h(v):
    return f32(0.07) * np.exp(-v / f32(20.0))

@jit
def beta_n(v):
    return f32(0.125) * np.exp(-v / f32(80.0))

@jit
def beta_m(v):
    return f32(4.0) * np.exp(-v / f32(18.0))

@jit
def beta_h(v):
    return f32(1.0) / (np.exp((f32(30.0) - v) / f32(10.0)) + f32(1.0))

# =========================
# Step function
# =========================
@jit
def heaviside(x):
    """
    Unit step with its threshold at 1, not 0:
    heaviside(x) = 1 if x >= 1 else 0
    """
    if x >= f32(1.0):
        return f32(1.0)
    return f32(0.0)
