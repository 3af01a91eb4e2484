import json
import logging
import logging.handlers

import pytest

from errors import ConfigurationError
from flock import Flock
from main import build_demo, run
from simulation import Field
from utils import load_config, setup_logging


def _config(demo, **sections):
    config = {"run_control": {"demo": demo}, "field": {"seed": 1, "particle_count": 4},
              "flock": {"seed": 1, "bird_count": 6}}
    config.update(sections)
    return config


def test_momentum_demo_has_flocking_off():
    demo = build_demo(_config("momentum", field={"seed": 1, "particle_count": 4, "neighbours": 3}))
    assert isinstance(demo, Field)
    assert demo.config.neighbours == 0
    assert len(demo.particles) == 4


def test_swarm_demo_turns_flocking_on():
    demo = build_demo(_config("swarm"))
    assert isinstance(demo, Field)
    assert demo.config.neighbours > 0


def test_flock_demo():
    demo = build_demo(_config("flock"))
    assert isinstance(demo, Flock)
    assert len(demo.birds) == 6


def test_unknown_demo():
    with pytest.raises(ConfigurationError):
        build_demo(_config("fireworks"))


def test_run_counts_steps():
    demo = build_demo(_config("momentum"))
    assert run(demo, {"max_steps": 7, "log_throttle_steps": 3}) == 7


def test_run_stops_when_the_flock_is_gone():
    demo = build_demo(_config("flock", flock={"seed": 1, "bird_count": 3, "position_range": 100.0, "half_extent": 0.01}))
    assert run(demo, {"max_steps": 50}) == 1


def test_load_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(_config("flock")))
    assert load_config(str(path))["run_control"]["demo"] == "flock"

    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.json"))

    path.write_text("{not json")
    with pytest.raises(json.JSONDecodeError):
        load_config(str(path))


def test_setup_logging_writes_rotating_file(tmp_path):
    log_file = tmp_path / "logs" / "run.log"
    setup_logging({"logging": {"level": "debug", "log_file": str(log_file)}})
    try:
        logging.info("hello")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers)
        assert log_file.exists()
    finally:
        for handler in logging.getLogger().handlers:
            handler.close()
        logging.getLogger().handlers.clear()


def test_setup_logging_without_file():
    setup_logging({"logging": {"log_file": None}})
    try:
        root = logging.getLogger()
        assert len(root.handlers) == 1
    finally:
        logging.getLogger().handlers.clear()


def test_default_log_file_is_named_after_the_demo(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    setup_logging({"run_control": {"demo": "flock"}, "logging": {}})
    try:
        logging.info("flock log")
        assert (tmp_path / "logs" / "flock.log").exists()
        assert not (tmp_path / "logs" / "momentum.log").exists()
    finally:
        for handler in logging.getLogger().handlers:
            handler.close()
        logging.getLogger().handlers.clear()


def test_load_config_rejects_non_object(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]")
    with pytest.raises(ConfigurationError):
        load_config(str(path))


def test_build_and_run_log_parameters_and_average_speed(caplog):
    with caplog.at_level(logging.DEBUG):
        demo = build_demo(_config("momentum", field={"seed": 1, "particle_count": 4, "velocity_range": 1.0}))
        run(demo, {"max_steps": 2, "log_throttle_steps": 1})
    assert "'velocity_range': 1.0" in caplog.text
    assert "Average speed" in caplog.text
