#!/usr/bin/env python3
"""
ecparams - Configuration
Settings consumed by the parameter classes and the logging setup shared by
every module of the package.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, fields

LOGGER_NAME = "ECParameters"

ENV_LEGACY_CURVE_NAMES = "ECPARAMS_LEGACY_CURVE_NAMES"
ENV_LOG_LEVEL = "ECPARAMS_LOG_LEVEL"

_TRUE_VALUES = ("1", "true", "yes", "on")

logger = logging.getLogger(LOGGER_NAME)


def configure_logging(level="WARNING"):
    """
    Attach the package handler to the package logger and set its level.

    Args:
        level: Level name or number

    Returns:
        logging.Logger: The package logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger.setLevel(level)
    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setLevel(logging.DEBUG)
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        ch.setFormatter(formatter)
        logger.addHandler(ch)
    return logger


@dataclass
class ParametersConfig:
    """
    Settings for EC parameter resolution.

    ``use_legacy_curve_names`` reproduces runtimes (version 8 and older)
    that report a curve's OID instead of its name when the curve is
    identified from explicit domain parameters. It is a fact about the host,
    supplied by whoever constructs the config, never detected here.
    """

    use_legacy_curve_names: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data):
        # unknown keys are ignored so one JSON file can carry other sections
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        if "use_legacy_curve_names" in values:
            values["use_legacy_curve_names"] = _to_bool(values["use_legacy_curve_names"])
        return cls(**values)

    @classmethod
    def load(cls, path):
        """
        Load settings from a JSON file.

        Args:
            path: Path to the JSON configuration

        Returns:
            ParametersConfig: The loaded settings
        """
        with open(path, 'r') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Configuration in {path} must be a JSON object")
        # accept either a flat object or one nested under "ec_parameters"
        data = data.get("ec_parameters", data)
        return cls.from_dict(data)

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ
        config = cls()
        if ENV_LEGACY_CURVE_NAMES in environ:
            config.use_legacy_curve_names = _to_bool(environ[ENV_LEGACY_CURVE_NAMES])
        if ENV_LOG_LEVEL in environ:
            config.log_level = environ[ENV_LOG_LEVEL]
        return config

    def to_dict(self):
        return asdict(self)


def _to_bool(value):
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return bool(value)


_config = None


def get_config():
    """Return the process-wide settings, read from the environment on first use."""
    global _config
    if _config is None:
        _config = ParametersConfig.from_env()
    return _config


def set_config(config):
    """Replace the process-wide settings. Existing ECParameters keep theirs."""
    global _config
    _config = config
    return _config
