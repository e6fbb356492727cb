"""
Heun (improved Euler) integration of the Hodgkin–Huxley equations.

Given dy/dt = f(t, y), each step does
    k1 = f(t, y)
    y* = y + dt * k1
    k2 = f(t, y*)
    y(t + dt) = y(t) + dt/2 * (k1 + k2)

The corrector slope k2 is evaluated with the applied current at t rather
than t + dt. Everything runs in float32.
"""
import logging
from dataclasses import dataclass

import numpy as np

from . import constants as c
from .constants import jit
from .model import Membrane, Stimulus, applied_current, derivatives
from .rates import alpha_h, alpha_m, alpha_n

logger = logging.getLogger(__name__)

NONFINITE_POLICIES = ("ignore", "warn", "raise")


class SimulationDivergedError(FloatingPointError):
    """A state variable became NaN or infinite during integration."""

    def __init__(self, step, time):
        super().__init__(
            "state became non-finite at step %d (t = %g ms)" % (step, time))
        self.step = step
        self.time = time


@dataclass
class Trajectory:
    """Time grid and state arrays of one run, all float32 and of equal length."""
    t: np.ndarray
    V: np.ndarray
    N: np.ndarray
    M: np.ndarray
    H: np.ndarray

    def __len__(self):
        return self.t.size

    @property
    def final_voltage(self):
        return self.V[-1]


# =========================
# Time grid & initial state
# =========================
def num_steps(t_max, dt):
    """ceil(t_max / dt), computed in float32."""
    with np.errstate(divide="ignore", invalid="ignore"):
        q = np.ceil(np.float32(t_max) / np.float32(dt))
    if not np.isfinite(q) or q < 1:
        raise ValueError(
            "t_max=%r and dt=%r do not give at least one time point" % (t_max, dt))
    return int(q)


@jit
def _accumulate(t, dt):
    t[0] = np.float32(0.0)
    for i in range(1, t.shape[0]):
        t[i] = t[i - 1] + dt


def time_grid(t_max, dt):
    """
    Time points 0, dt, 2*dt, ... built by running float32 addition, so
    rounding drift accumulates along the grid.
    """
    t = np.empty(num_steps(t_max, dt), dtype=np.float32)
    _accumulate(t, np.float32(dt))
    return t


def initial_state(v0):
    """
    V(0) = v0, gates at α_x(v0) (not the steady state α/(α+β)).
    """
    v0 = np.float32(v0)
    return v0, alpha_n(v0), alpha_m(v0), alpha_h(v0)


# =========================
# Heun integrator
# =========================
@jit
def heun_step(v, n, m, h, i_app, dt, membrane):
    # predictor slopes
    dV1, dN1, dM1, dH1 = derivatives(v, n, m, h, i_app, membrane)

    # forward Euler prediction
    aV = v + dV1 * dt
    aN = n + dN1 * dt
    aM = m + dM1 * dt
    aH = h + dH1 * dt

    # corrector slopes, same applied current
    dV2, dN2, dM2, dH2 = derivatives(aV, aN, aM, aH, i_app, membrane)

    two = np.float32(2.0)
    return (v + (dV1 + dV2) * dt / two,
            n + (dN1 + dN2) * dt / two,
            m + (dM1 + dM2) * dt / two,
            h + (dH1 + dH2) * dt / two)


@jit
def integrate(t, V, N, M, H, dt, membrane, stimulus):
    """Fill V, N, M, H from index 1 onward, given the values at index 0."""
    for i in range(t.shape[0] - 1):
        i_app = applied_current(t[i], stimulus)
        v, n, m, h = heun_step(V[i], N[i], M[i], H[i], i_app, dt, membrane)
        V[i + 1] = v
        N[i + 1] = n
        M[i + 1] = m
        H[i + 1] = h


def first_nonfinite(traj):
    """Index of the first step with a non-finite state value, or None."""
    bad = ~(np.isfinite(traj.V) & np.isfinite(traj.N)
            & np.isfinite(traj.M) & np.isfinite(traj.H))
    if not bad.any():
        return None
    return int(np.argmax(bad))


def simulate(t_max=c.t_max, dt=c.dt, membrane=None, stimulus=None, V0=None,
             on_nonfinite="ignore"):
    """
    Run a single Hodgkin–Huxley neuron from t = 0 to t_max.

    Parameters:
        t_max        : simulation horizon (ms)
        dt           : integration time step (ms)
        membrane     : Membrane, defaults to the module constants
        stimulus     : Stimulus, defaults to the module constants
        V0           : initial voltage (mV), defaults to membrane.V_L
        on_nonfinite : "ignore" passes NaN/inf through silently, "warn" logs
                       the first bad step, "raise" raises
                       SimulationDivergedError

    Returns a Trajectory of float32 arrays.
    """
    if on_nonfinite not in NONFINITE_POLICIES:
        raise ValueError("on_nonfinite must be one of %s, got %r"
                         % (", ".join(NONFINITE_POLICIES), on_nonfinite))
    if membrane is None:
        membrane = Membrane()
    if stimulus is None:
        stimulus = Stimulus()
    if V0 is None:
        V0 = membrane.V_L

    dt = np.float32(dt)
    t = time_grid(t_max, dt)
    n = t.size

    V = np.empty(n, dtype=np.float32)
    N = np.empty(n, dtype=np.float32)
    M = np.empty(n, dtype=np.float32)
    H = np.empty(n, dtype=np.float32)
    V[0], N[0], M[0], H[0] = initial_state(V0)

    logger.debug("integrating %d steps, dt = %g ms", n - 1, dt)
    integrate(t, V, N, M, H, dt, membrane.as_tuple(), stimulus.as_tuple())
    logger.debug("done, V[%d] = %g mV", n - 1, V[-1])

    traj = Trajectory(t, V, N, M, H)
    if on_nonfinite != "ignore":
        step = first_nonfinite(traj)
        if step is not None:
            if on_nonfinite == "raise":
                raise SimulationDivergedError(step, float(t[step]))
            logger.warning("state became non-finite at step %d (t = %g ms)",
                           step, t[step])
    return traj
