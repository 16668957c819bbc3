"""Configuration loading for termline."""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, NamedTuple, Optional

import yaml

from termline.redraw.probe import DEFAULT_PROBE_TIMEOUT
from termline.shared.progress import DEFAULT_FALLBACK_WIDTH

CONFIG_PATH = Path.home() / ".termline" / "config.yaml"

logger = logging.getLogger(__name__)


class ProbeSettings(NamedTuple):
    timeout: float  # seconds
    fallback_width: int


def load_config(
    required: bool = False,
    fallback: Optional[Dict[str, Any]] = None
) -> Optional[Dict[str, Any]]:
    """Load ~/.termline/config.yaml.

    Args:
        required: If True, exit with error when config is missing.
        fallback: Default dict to return when config is missing and not required.

    Returns:
        Parsed config dict, fallback dict, or None if missing/invalid.
    """
    if not CONFIG_PATH.exists():
        if required:
            logger.error("Config file not found at %s", CONFIG_PATH)
            sys.exit(1)
        return fallback

    try:
        with open(CONFIG_PATH) as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as e:
        logger.error("Error reading config: %s", e)
        if required:
            sys.exit(1)
        return fallback

    if not isinstance(data, dict):
        logger.error("Config at %s must be a mapping, got %s", CONFIG_PATH, type(data).__name__)
        if required:
            sys.exit(1)
        return fallback
    return data


def _positive(section, key, default, cast):
    raw = section.get(key, default)
    try:
        value = cast(raw)
    except (TypeError, ValueError):
        logger.warning("Invalid probe.%s %r, using %s", key, raw, default)
        return default
    if value <= 0:
        logger.warning("probe.%s must be positive, got %r; using %s", key, raw, default)
        return default
    return value


def probe_settings(config: Optional[Dict[str, Any]] = None) -> ProbeSettings:
    """Read size probe settings from the 'probe' section of a config dict.

        probe:
          timeout_ms: 250
          fallback_width: 80
    """
    section = (config or {}).get("probe") or {}
    if not isinstance(section, dict):
        logger.warning("Config 'probe' section must be a mapping; using defaults")
        section = {}
    timeout_ms = _positive(section, "timeout_ms", int(DEFAULT_PROBE_TIMEOUT * 1000), float)
    width = _positive(section, "fallback_width", DEFAULT_FALLBACK_WIDTH, int)
    return ProbeSettings(timeout=timeout_ms / 1000.0, fallback_width=width)
