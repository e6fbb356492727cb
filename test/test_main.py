import math

import numpy as np
import pytest

from hhsim import __main__ as cli
from hhsim.integrator import simulate


@pytest.mark.parametrize("v, text", [
    (np.float32(1.5), "1.5"),
    (np.float32(-12.0), "-12"),
    (0.123456789, "0.123457"),
    (123456789.0, "1.23457e+08"),
    (math.nan, "nan"),
])
def test_format_voltage(v, text):
    assert cli.format_voltage(v) == text


def test_main_prints_one_line(monkeypatch, capsys):
    monkeypatch.setattr(cli, "simulate", lambda: simulate(t_max=100.0))
    cli.main()
    out = capsys.readouterr().out
    assert out == cli.format_voltage(simulate(t_max=100.0).final_voltage) + "\n"


@pytest.mark.slow
def test_main_default_scenario(capsys):
    cli.main()
    out = capsys.readouterr().out
    assert out == "0.000615596\n"
