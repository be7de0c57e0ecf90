import json
import math

import numpy as np
import pytest
from spring_sim.config import SimConfig
from spring_sim.io.json_io import (
    load_simulation, save_simulation, simulation_from_json, simulation_to_json,
    load_config, save_config,
)
from spring_sim.simulation import Simulation
from spring_sim.world import build_chain


def test_save_and_load_simulation(tmp_path):
    sim = build_chain(segments=4)
    for _ in range(300):
        sim.update(1e-4)

    path = tmp_path / "chain.json"
    save_simulation(sim, path)
    loaded = load_simulation(path)

    assert len(loaded.balls) == len(sim.balls)
    assert len(loaded.springs) == len(sim.springs)
    for a, b in zip(sim.balls, loaded.balls):
        assert np.all(a.position == b.position)
        assert np.all(a.velocity == b.velocity)
        assert a.anchor == b.anchor
    for a, b in zip(sim.springs, loaded.springs):
        assert a.ball1.id == b.ball1.id and a.ball2.id == b.ball2.id

    # Both continue identically
    sim.update(1e-4)
    loaded.update(1e-4)
    assert np.all(sim.balls[-1].position == loaded.balls[-1].position)


def test_grab_not_persisted():
    sim = build_chain(segments=2)
    anchor = sim.balls[0]
    sim.grab(0.0, 0.0)
    assert anchor.anchor == 2

    data = simulation_to_json(sim)
    assert data["balls"][0]["anchor"] == 1

    loaded = simulation_from_json(data)
    assert loaded.grabbed is None
    assert loaded.balls[0].anchor == 1


def test_no_damping_written_as_null():
    sim = Simulation(damping_half_life=None)
    data = simulation_to_json(sim)
    assert data["damping_half_life"] is None
    json.dumps(data)
    assert math.isinf(simulation_from_json(data).damping_half_life)


def test_invalid_spring_index():
    data = {
        "balls": [{"mass": 0.1, "anchor": 1}, {"mass": 0.1, "position": [0, -0.04]}],
        "springs": [{"ball1": 0, "ball2": 5, "rest_length": 0.04, "spring_const": 100.0}],
    }
    with pytest.raises(ValueError):
        simulation_from_json(data)


def test_missing_mass():
    with pytest.raises(ValueError):
        simulation_from_json({"balls": [{"position": [0, 0]}]})


def test_invalid_mass_rejected():
    with pytest.raises(ValueError):
        simulation_from_json({"balls": [{"mass": 0.0}]})


def test_bad_gravity_rejected():
    with pytest.raises(ValueError):
        simulation_from_json({"gravity": [0.0, -9.8, 0.0], "balls": [{"mass": 0.1}]})


@pytest.mark.parametrize("key", ["ball1", "ball2", "rest_length", "spring_const"])
def test_missing_spring_field(key):
    spring = {"ball1": 0, "ball2": 1, "rest_length": 0.04, "spring_const": 1000.0}
    del spring[key]
    data = {"balls": [{"mass": 0.1}, {"mass": 0.1, "position": [0.0, -0.04]}], "springs": [spring]}
    with pytest.raises(ValueError, match=key):
        simulation_from_json(data)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_simulation(tmp_path / "nope.json")


def test_config_file(tmp_path):
    path = tmp_path / "settings.json"
    config = SimConfig(steps_per_frame=250, damping_half_life=math.inf)
    save_config(config, path)
    assert load_config(path) == config

    path.write_text(json.dumps({"spring_const": 50.0}), encoding="utf-8")
    assert load_config(path).spring_const == 50.0
