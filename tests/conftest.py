"""Shared fixtures: synthetic anpass input files."""
import numpy as np
import pytest


X0, Y0, E0 = 0.004, -0.0025, -76.3621


def quartic_exponents():
    return np.array([(a, d - a) for d in range(5) for a in range(d, -1, -1)]).T


def known_energy(x, y):
    u, v = x - X0, y - Y0
    return E0 + 0.35 * u ** 2 + 0.55 * v ** 2 - 0.1 * u ** 3 + 0.05 * u * v ** 2 \
        + 0.02 * u ** 4 + 0.03 * v ** 4


def render_input(disps, energies, exps, stationary=None):
    lines = [
        "! synthetic two-coordinate quartic field",
        "! generated for tests",
        f"{disps.shape[1]:4d}{disps.shape[0]:5d}",
        "(2F12.8,F20.12)",
    ]
    for row, e in zip(disps, energies):
        lines.append("".join(f"{d:12.8f}" for d in row) + f"{e:20.12f}")
    lines.append("UNKNOWNS")
    lines.append(f"{exps.shape[1]:5d}")
    lines.append("FUNCTION")
    for row in exps:
        lines.append("".join(f"{e:5d}" for e in row))
    if stationary is not None:
        lines.append("STATIONARY POINT")
        lines.append("".join(f"{v:20.12f}" for v in stationary))
    lines.append("END OF DATA")
    lines.append("!INTDER FILE")
    return "\n".join(lines) + "\n"


@pytest.fixture
def sample_data():
    axis = np.linspace(-0.2, 0.2, 9)
    xx, yy = np.meshgrid(axis, axis)
    disps = np.round(np.column_stack([xx.ravel(), yy.ravel()]), 8)
    energies = np.round(known_energy(disps[:, 0], disps[:, 1]), 12)
    return disps, energies, quartic_exponents()


@pytest.fixture
def sample_text(sample_data):
    return render_input(*sample_data)


@pytest.fixture
def sample_input(tmp_path, sample_text):
    path = tmp_path / 'anpass.in'
    path.write_text(sample_text)
    return path


@pytest.fixture
def make_input_text():
    return render_input
