import numpy as np
from numba import njit

f32 = np.float32

# Compiled kernels. error_model="numpy" lets 0/0 produce NaN instead of
# raising ZeroDivisionError.
jit = njit(cache=True, error_model="numpy")

# =========================
# Hodgkin–Huxley constants
# =========================
# Voltages are relative to the resting potential (original 1952 convention).
C_m = f32(1.0)      # membrane capacitance (uF/cm^2)

g_K  = f32(36.0)    # max potassium conductance (mS/cm^2)
g_Na = f32(120.0)   # max sodium conductance (mS/cm^2)
g_L  = f32(0.3)     # leak conductance (mS/cm^2)

V_K  = f32(-12.0)   # potassium reversal potential (mV)
V_Na = f32(115.0)   # sodium reversal potential (mV)
V_L  = f32(10.6)    # leak reversal potential (mV)

# =========================
# Simulation parameters
# =========================
t_max = f32(10000.0)  # ms
dt    = f32(0.01)     # ms

# =========================
# Applied current
# =========================
I_start_time = f32(1000.0)  # ms
I_end_time   = f32(5000.0)  # ms
I            = f32(12.0)    # uA/cm^2
