import logging
import math

import numpy as np
import pytest

from charge_sim.factory import random_particles
from charge_sim.profiler import Profiler
from charge_sim.simulation import Simulation
from charge_sim.types import Particle
from charge_sim.util import positions_array, velocities_array


def test_zero_steps_leave_state_unchanged():
    rng = np.random.default_rng(7)
    particles = random_particles(5, 800, 600, rng)
    pos0 = positions_array(particles)
    vel0 = velocities_array(particles)

    sim = Simulation(particles, width=800, height=600)

    np.testing.assert_array_equal(positions_array(sim.particles), pos0)
    np.testing.assert_array_equal(velocities_array(sim.particles), vel0)
    assert sim.energy_snapshot is None
    assert sim.time == 0.0
    assert sim.steps == 0


def test_invalid_parameters_rejected():
    with pytest.raises(ValueError):
        Simulation(dt=0.0)
    with pytest.raises(ValueError):
        Simulation(width=-1.0)
    with pytest.raises(ValueError):
        Simulation(force_constant=0.0)


def test_step_advances_time_and_captures_energy():
    a = Particle(charge=10, radius=1.0, position=(300.0, 300.0), velocity=(1.0, 0.0))
    b = Particle(charge=20, radius=1.0, position=(500.0, 300.0))
    sim = Simulation([a, b], dt=0.1)
    e0 = sim.total_energy()

    sim.step()
    sim.step()

    assert sim.time == pytest.approx(0.2)
    assert sim.steps == 2
    assert sim.energy_snapshot == pytest.approx(e0, rel=1e-9)


def test_add_particle_recaptures_energy():
    sim = Simulation([Particle(charge=10, position=(100.0, 100.0), velocity=(1.0, 1.0))])
    sim.step()
    assert sim.energy_snapshot is not None

    sim.add_particle(Particle(charge=10, position=(300.0, 300.0)))
    assert sim.energy_snapshot is None

    e_new = sim.total_energy()
    sim.step()
    assert sim.energy_snapshot == pytest.approx(e_new, rel=1e-9)


def test_random_box_stays_finite_and_inside():
    rng = np.random.default_rng(12345)
    particles = random_particles(10, 800, 600, rng)
    sim = Simulation(particles, width=800, height=600)

    for _ in range(100):
        sim.step()

    for p in sim.particles:
        r = p.radius * sim.pixels_per_unit
        assert math.isfinite(p.velocity.x) and math.isfinite(p.velocity.y)
        assert r <= p.position.x <= sim.width - r
        assert r <= p.position.y <= sim.height - r
    assert math.isfinite(sim.total_energy())


def test_profiler_sections():
    prof = Profiler()
    rng = np.random.default_rng(1)
    sim = Simulation(random_particles(4, 800, 600, rng), profiler=prof)

    for _ in range(3):
        sim.step()

    summary = prof.stats.summary()
    assert set(summary) == {"forces", "integrate", "walls", "normalize"}
    assert all(s["n"] == 3 for s in summary.values())


def test_creation_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="charge_sim.simulation"):
        Simulation([Particle(charge=10)])
    assert "1 particles" in caplog.text
