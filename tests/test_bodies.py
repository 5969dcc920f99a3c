from __future__ import annotations

import numpy as np
import pytest

from omnipository.core.bodies import Body, PositionIntegrator
from omnipository.errors import ConfigurationError


def make_integrator(*positions, is_active=None) -> PositionIntegrator:
    bodies = [Body(id=f"s{i}", x=float(x), y=float(y)) for i, (x, y) in enumerate(positions)]
    return PositionIntegrator(bodies, threshold=240., strength=0.05, is_active=is_active)


def test_separated_bodies_are_left_alone() -> None:
    integrator = make_integrator((0, 0), (300, 0), (0, 300))
    before = integrator.positions

    integrator.tick()

    assert np.allclose(integrator.positions, before)


def test_coincident_bodies_stay_coincident_and_finite() -> None:
    integrator = make_integrator((10, 10), (10, 10), (1000, 0))

    for _ in range(5):
        integrator.tick()

    pos = integrator.positions
    assert np.all(np.isfinite(pos))
    assert np.array_equal(pos[0], pos[1])


def test_overlapping_pair_separates_over_ticks() -> None:
    integrator = make_integrator((0, 0), (100, 0), (5000, 0))

    previous = integrator.pairwise_distances()[(0, 1)]
    for _ in range(200):
        integrator.tick()
        current = integrator.pairwise_distances()[(0, 1)]
        assert current >= previous
        previous = current

    assert previous >= 240. - 1e-3


def test_single_tick_does_not_fully_separate() -> None:
    integrator = make_integrator((0, 0), (100, 0), (5000, 0))

    integrator.tick()

    # Overlap of 140 shrinks by 10% per tick
    assert integrator.pairwise_distances()[(0, 1)] == pytest.approx(114.)


def test_repulsion_only_moves_x() -> None:
    integrator = make_integrator((0, 0), (50, 80), (-60, 120))
    ys_before = integrator.positions[:, 1].copy()

    for _ in range(50):
        integrator.tick()

    assert np.array_equal(integrator.positions[:, 1], ys_before)


def test_pairs_see_earlier_updates_within_a_tick() -> None:
    integrator = make_integrator((0, 0), (100, 0), (200, 0))

    integrator.tick()

    xs = integrator.positions[:, 0]
    assert xs[0] == pytest.approx(-8.65)
    assert xs[1] == pytest.approx(99.7325)
    assert xs[2] == pytest.approx(208.9175)


def test_inactive_gate_freezes_positions() -> None:
    active = {"value": False}
    integrator = make_integrator((0, 0), (100, 0), (5000, 0), is_active=lambda: active["value"])
    before = integrator.positions

    for _ in range(10):
        integrator.tick()
    assert np.array_equal(integrator.positions, before)

    active["value"] = True
    integrator.tick()
    assert not np.array_equal(integrator.positions, before)


def test_original_layout_settles() -> None:
    integrator = make_integrator((-150, -100), (180, 20), (-20, 150))

    for _ in range(100):
        integrator.tick()
    assert integrator.min_separation() >= 240. - 1.

    settled = integrator.positions
    for _ in range(100):
        integrator.tick()
    assert np.abs(integrator.positions - settled).sum() < 0.5


def test_positions_is_a_copy() -> None:
    integrator = make_integrator((0, 0), (100, 0), (5000, 0))

    pos = integrator.positions
    pos[0, 0] = 42.

    assert pos.shape == (3, 2)
    assert integrator.bodies[0].x == 0.


@pytest.mark.parametrize("positions", [
    [(0, 0), (1, 1)],
    [(0, 0), (1, 1), (2, 2), (3, 3)],
])
def test_rejects_wrong_body_count(positions) -> None:
    with pytest.raises(ConfigurationError):
        make_integrator(*positions)


def test_rejects_non_finite_positions() -> None:
    with pytest.raises(ConfigurationError):
        make_integrator((0, 0), (float("nan"), 0), (1, 1))
