from dataclasses import astuple, dataclass

import numpy as np

from . import constants as c
from .constants import jit
from .rates import alpha_h, alpha_m, alpha_n, beta_h, beta_m, beta_n, heaviside


# =========================
# Parameter records
# =========================
@dataclass(frozen=True)
class Membrane:
    """
    Membrane capacitance, maximal conductances and reversal potentials.
    Defaults are the module constants in hhsim.constants.
    """
    C_m: float = c.C_m
    g_K: float = c.g_K
    g_Na: float = c.g_Na
    g_L: float = c.g_L
    V_K: float = c.V_K
    V_Na: float = c.V_Na
    V_L: float = c.V_L

    def as_tuple(self):
        return tuple(np.float32(x) for x in astuple(self))


@dataclass(frozen=True)
class Stimulus:
    """Step current of amplitude I switched on between two times (ms)."""
    I: float = c.I
    I_start_time: float = c.I_start_time
    I_end_time: float = c.I_end_time

    def as_tuple(self):
        return tuple(np.float32(x) for x in astuple(self))


# =========================
# Applied current
# =========================
@jit
def applied_current(t, stimulus):
    """
    I_app(t) = I * H(t - t_start) * H(t_end - t)

    With the shifted step the current is on for t_start + 1 <= t <= t_end - 1.
    """
    I, I_start_time, I_end_time = stimulus
    return I * heaviside(t - I_start_time) * heaviside(I_end_time - t)


# =========================
# Ionic currents
# =========================
@jit
def ionic_currents(v, n, m, h, membrane):
    """
    I_K  = g_K  * n⁴ * (V - V_K)
    I_Na = g_Na * m³ * h * (V - V_Na)
    I_L  = g_L  * (V - V_L)
    """
    C_m, g_K, g_Na, g_L, V_K, V_Na, V_L = membrane
    I_K = g_K * n ** np.float32(4.0) * (v - V_K)
    I_Na = g_Na * m ** np.float32(3.0) * h * (v - V_Na)
    I_L = g_L * (v - V_L)
    return I_K, I_Na, I_L


# =========================
# Hodgkin–Huxley ODEs
# =========================
@jit
def derivatives(v, n, m, h, i_app, membrane):
    """
    C_m * dV/dt = I_app - I_K - I_Na - I_L
    dx/dt = α_x(V)*(1 - x) - β_x(V)*x   for x in {n, m, h}
    """
    C_m = membrane[0]
    I_K, I_Na, I_L = ionic_currents(v, n, m, h, membrane)
    one = np.float32(1.0)

    dV = (i_app - I_K - I_Na - I_L) / C_m
    dN = alpha_n(v) * (one - n) - beta_n(v) * n
    dM = alpha_m(v) * (one - m) - beta_m(v) * m
    dH = alpha_h(v) * (one - h) - beta_h(v) * h
    return dV, dN, dM, dH
