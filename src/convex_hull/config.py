from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from convex_hull.algorithms import Algorithm

logger = logging.getLogger(__name__)

SETTINGS_KEY = "convex_hull"


class Config:
    _instance = None
    _data = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._data is None:
            self._data = self._load()

    def __getitem__(self, key: str):
        return self._data.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"Config(keys={list(self._data.keys())})"

    def _load(self) -> dict:
        config_path = Path(__file__).parent / "config.yaml"
        if config_path.exists():
            return yaml.safe_load(config_path.read_text())
        return self._default_config()

    def _default_config(self) -> dict:
        return {
            SETTINGS_KEY: {
                'algorithm': Algorithm.GRAHAM_SCAN.value,
                'check_preconditions': False,
                'validate_output': False,
            },
            'logging': {
                'level': 'WARNING',
                'format': "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
        }

    def get_nested(self, *keys):
        result = self._data
        for key in keys:
            try:
                result = result[key]
            except (KeyError, TypeError):
                return None
        return result


CFG = Config()


@dataclass
class HullConfig:
    """
    Options for :class:`convex_hull.solver.ConvexHullSolver`.

    Attributes:
        algorithm: Algorithm the solver dispatches to.
        check_preconditions: Reject NaN and infinite coordinates up front.
        validate_output: Check convexity and containment of each result.
    """

    algorithm: Algorithm = Algorithm.GRAHAM_SCAN
    check_preconditions: bool = False
    validate_output: bool = False

    def __post_init__(self) -> None:
        self.algorithm = Algorithm.parse(self.algorithm)
        for name in ("check_preconditions", "validate_output"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"'{name}' must be true or false, got {value!r}")

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any] | None) -> HullConfig:
        settings = settings or {}
        return cls(
            algorithm=settings.get("algorithm", Algorithm.GRAHAM_SCAN),
            check_preconditions=settings.get("check_preconditions", False),
            validate_output=settings.get("validate_output", False),
        )

    @classmethod
    def default(cls) -> HullConfig:
        """Options from the packaged configuration."""
        return cls.from_settings(CFG[SETTINGS_KEY])

    @classmethod
    def from_config(cls, config_path: Path | str) -> HullConfig:
        """Read the ``convex_hull`` section of a YAML file."""
        config_path = Path(config_path)
        logger.info("Loading configuration from: %s", config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}

        settings = config.get(SETTINGS_KEY)

        if settings is None:
            raise KeyError(f"Key '{SETTINGS_KEY}' not found in {config_path}.")

        return cls.from_settings(settings)


def configure_logging(level: str | int | None = None, fmt: str | None = None) -> None:
    logging.basicConfig(
        level=level or CFG.get_nested("logging", "level") or logging.WARNING,
        format=fmt or CFG.get_nested("logging", "format"),
    )
