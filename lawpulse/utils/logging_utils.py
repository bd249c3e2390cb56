"""Logging utilities for LawPulse.

Provides YAML-based configuration loading and a timing boundary used by the
pipeline. All loggers are namespaced under 'lawpulse'. Analysis modules do
not log; timing and empty-state reporting happen around them.
"""

from __future__ import annotations

import logging
import logging.config
import os
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Optional

import yaml


def configure_logging(
    config_path: Optional[str] = None,
    log_level: Optional[str] = None,
) -> None:
    """Configure logging from the YAML configuration file.

    Falls back to basicConfig if the YAML file is not found.

    Args:
        config_path: Path to logging.yaml (defaults to config/logging.yaml).
        log_level: Override log level (e.g., "DEBUG", "INFO", "WARNING").
    """
    if config_path is None:
        config_path = str(Path(__file__).parent.parent.parent / "config" / "logging.yaml")

    if os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f)

        if log_level and "loggers" in cfg:
            for logger_cfg in cfg["loggers"].values():
                logger_cfg["level"] = log_level.upper()

        logging.config.dictConfig(cfg)
    else:
        logging.basicConfig(
            level=getattr(logging, (log_level or "INFO").upper(), logging.INFO),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


def get_logger(name: str) -> logging.Logger:
    """Get a namespaced logger under 'lawpulse'.

    Args:
        name: Module or component name (e.g., "analysis.kpi").

    Returns:
        Logger instance with full 'lawpulse.<name>' namespace.
    """
    if name.startswith("lawpulse"):
        return logging.getLogger(name)
    return logging.getLogger(f"lawpulse.{name}")


@contextmanager
def log_timing(
    logger: logging.Logger,
    label: str,
    timings: Optional[Dict[str, float]] = None,
) -> Iterator[None]:
    """Log how long the wrapped block took, in milliseconds.

    Args:
        logger: Logger to write to (DEBUG level).
        label: Name of the timed step.
        timings: Optional dict that receives ``label → elapsed_ms``.
    """
    started = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        if timings is not None:
            timings[label] = round(elapsed_ms, 3)
        logger.debug("%s finished in %.1f ms", label, elapsed_ms)
