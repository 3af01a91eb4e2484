# utils.py
"""
Utility functions for the demos.

This module provides logging setup and configuration loading, which are
used by the host loop but belong to neither the physics nor any renderer.
"""
import logging
import logging.handlers
import json
import os
from typing import Dict, Any

from errors import ConfigurationError

# --- Data Contracts ---
#
# setup_logging(config: Dict[str, Any]) -> None:
#   - Inputs:
#     - config: A dictionary with an optional "logging" key holding "level",
#       "format" and "log_file" (default logs/<demo>.log, demo taken from
#       "run_control"). A null "log_file" disables file logging.
#   - Side Effects: Configures the root logger with a console handler and,
#     unless disabled, a rotating file handler. Creates the log directory.
#
# load_config(path: str) -> Dict[str, Any]:
#   - Raises FileNotFoundError / json.JSONDecodeError after logging them,
#     and ConfigurationError when the file does not hold a JSON object.

DEFAULT_LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_FILE_TEMPLATE = 'logs/{demo}.log'
KNOWN_SECTIONS = ('logging', 'run_control', 'field', 'flock')


def default_log_file(config: Dict[str, Any]) -> str:
    """One log file per demo, so momentum, swarm and flock runs don't interleave."""
    demo = config.get('run_control', {}).get('demo', 'momentum')
    return LOG_FILE_TEMPLATE.format(demo=demo)


def setup_logging(config: Dict[str, Any]) -> None:
    """
    Configures the root logger from a configuration dictionary.
    """
    log_config = config.get('logging', {})
    log_level = log_config.get('level', 'INFO').upper()
    log_format = log_config.get('format', DEFAULT_LOG_FORMAT)
    log_file_path = log_config.get('log_file', default_log_file(config))

    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Clear existing handlers to avoid duplication
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file_path:
        log_dir = os.path.dirname(log_file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        # Rotates at 1MB, keeps 5 backups.
        file_handler = logging.handlers.RotatingFileHandler(
            log_file_path, maxBytes=1024*1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logging.info("Logging system initialized.")
    logging.debug(f"Log level set to {log_level}.")
    logging.debug(f"Log file path: {log_file_path or 'disabled'}")


def load_config(path: str) -> Dict[str, Any]:
    """Loads a JSON configuration file."""
    logging.info(f"Loading configuration from {path}...")
    try:
        with open(path, 'r') as f:
            config = json.load(f)
    except FileNotFoundError:
        logging.error(f"Configuration file not found at {path}.")
        raise
    except json.JSONDecodeError:
        logging.error(f"Error decoding JSON from {path}.")
        raise
    if not isinstance(config, dict):
        msg = f"Configuration error: {path} must hold a JSON object, got {type(config).__name__}."
        logging.critical(msg)
        raise ConfigurationError(msg)
    missing = [s for s in KNOWN_SECTIONS if s not in config]
    if missing:
        logging.warning(f"Configuration has no {missing} section(s); defaults apply.")
    logging.info(f"Configuration loaded with sections: {sorted(config)}.")
    return config
