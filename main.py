# main.py
"""
Headless host loop for the demos.

This script stands in for the page timer that normally drives the demos:
1. Loads configuration from `config.json`.
2. Initializes the logging system.
3. Builds the requested demo (momentum, swarm or flock) and spawns it.
4. Ticks it with a fixed frame dt until max_steps or an empty flock.
5. Logs a performance profile.
"""
import logging
from typing import Any, Dict, Union

import cProfile
import io
import numpy as np
import pstats

from constants import DEFAULT_FRAME_DT, DEFAULT_SWARM_NEIGHBOURS
from errors import ConfigurationError
from flock import Flock
from settings import FieldConfig, FlockConfig
from simulation import Field
from utils import setup_logging, load_config

Demo = Union[Field, Flock]
DEMOS = ("momentum", "swarm", "flock")


def build_demo(config: Dict[str, Any]) -> Demo:
    """Builds and spawns the demo named in config['run_control']['demo']."""
    name = config.get('run_control', {}).get('demo', 'momentum')
    if name not in DEMOS:
        msg = f"Configuration error: unknown demo '{name}'. Expected one of {DEMOS}."
        logging.critical(msg)
        raise ConfigurationError(msg)

    if name == 'flock':
        demo = Flock(FlockConfig.from_dict(config.get('flock', {})))
    else:
        field_params = dict(config.get('field', {}))
        if name == 'momentum':
            field_params['neighbours'] = 0
        elif not field_params.get('neighbours'):
            field_params['neighbours'] = DEFAULT_SWARM_NEIGHBOURS
        demo = Field(FieldConfig.from_dict(field_params))

    demo.spawn()
    logging.info(f"Demo '{name}' ready.")
    logging.debug(f"Demo '{name}' parameters: {demo.config.to_dict()}")
    return demo


def _population(demo: Demo) -> list:
    return demo.birds if isinstance(demo, Flock) else demo.particles


def run(demo: Demo, run_params: Dict[str, Any]) -> int:
    """
    Ticks `demo` until max_steps, or until a flock has no birds left.

    Returns the number of ticks executed.
    """
    frame_dt = run_params.get('frame_dt', DEFAULT_FRAME_DT)
    max_steps = run_params.get('max_steps', 2000)
    log_throttle = run_params.get('log_throttle_steps', 100)

    step_num = 0
    while step_num < max_steps:
        demo.tick(frame_dt)
        step_num += 1

        population = _population(demo)
        # Hot loops must throttle logs
        if step_num % log_throttle == 0:
            logging.info(f"Step {step_num}/{max_steps}, population {len(population)}")
            if population:
                avg_speed = np.mean([entity.speed for entity in population])
                logging.debug(f"Step {step_num} | Average speed: {avg_speed:.4f}")

        if isinstance(demo, Flock) and not population:
            logging.info(f"Every bird left the domain after {step_num} steps. Stopping.")
            break

    return step_num


def main():
    """
    The main function to run a demo headless.
    """
    # Logging is not set up yet, so we use a print for this one error.
    try:
        config = load_config('config.json')
    except Exception as e:
        print(f"FATAL: Could not load config.json. Error: {e}")
        return

    setup_logging(config)
    logging.info("--- Demo Starting ---")

    run_params = config.get('run_control', {})
    demo = build_demo(config)

    profiler = cProfile.Profile() if run_params.get('profile', False) else None
    if profiler:
        profiler.enable()
    steps = run(demo, run_params)
    if profiler:
        profiler.disable()

    logging.info(f"Simulation loop finished after {steps} steps.")

    if profiler:
        logging.info("--- Performance Profile ---")
        s = io.StringIO()
        stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
        stats.print_stats(20)
        logging.info(f"\n{s.getvalue()}")

    logging.info("--- Demo Shutting Down ---")


if __name__ == "__main__":
    main()
