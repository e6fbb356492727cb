"""
Single Hodgkin–Huxley neuron driven by a step current, integrated with
Heun's method in single precision.
"""
from .integrator import (
    SimulationDivergedError,
    Trajectory,
    heun_step,
    initial_state,
    integrate,
    num_steps,
    simulate,
    time_grid,
)
from .model import Membrane, Stimulus, applied_current, derivatives, ionic_currents
from .rates import alpha_h, alpha_m, alpha_n, beta_h, beta_m, beta_n, heaviside

__version__ = "0.1.0"
__all__ = [
    "SimulationDivergedError",
    "Trajectory",
    "heun_step",
    "initial_state",
    "integrate",
    "num_steps",
    "simulate",
    "time_grid",
    "Membrane",
    "Stimulus",
    "applied_current",
    "derivatives",
    "ionic_currents",
    "alpha_h",
    "alpha_m",
    "alpha_n",
    "beta_h",
    "beta_m",
    "beta_n",
    "heaviside",
]
