"""ConfigManager — environment profiles, logging setup and pricing-config loading."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from scanquote.cost.seed_data import default_pricing_config
from scanquote.models.pricing import PricingConfig

logger = logging.getLogger(__name__)

# All known configuration keys with defaults
_CONFIG_KEYS: dict[str, dict[str, Any]] = {
    "SCANQUOTE_ENV": {"default": "development", "description": "Environment profile"},
    "SCANQUOTE_LOG_LEVEL": {"default": "INFO", "description": "Logging level"},
    "SCANQUOTE_PRICING_CONFIG": {"default": "", "description": "Path to a pricing config JSON file"},
}

_PROFILES: dict[str, dict[str, str]] = {
    "development": {
        "SCANQUOTE_ENV": "development",
        "SCANQUOTE_LOG_LEVEL": "DEBUG",
    },
    "production": {
        "SCANQUOTE_ENV": "production",
        "SCANQUOTE_LOG_LEVEL": "WARNING",
    },
    "testing": {
        "SCANQUOTE_ENV": "testing",
        "SCANQUOTE_LOG_LEVEL": "DEBUG",
        "SCANQUOTE_PRICING_CONFIG": "",
    },
}


class ConfigManager:
    """Manage scanquote configuration across environments."""

    def write_pricing_config(
        self,
        project_path: str | Path,
        config: PricingConfig | None = None,
    ) -> Path:
        """Write *config* (the seed defaults when omitted) to ``.scanquote/pricing.json``.

        The file uses camelCase keys and can be pointed to with
        ``SCANQUOTE_PRICING_CONFIG``.  Returns the path written.
        """
        target = Path(project_path) / ".scanquote" / "pricing.json"
        target.parent.mkdir(parents=True, exist_ok=True)
        config = config or default_pricing_config()
        target.write_text(config.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
        logger.info("Wrote pricing config to %s", target)
        return target

    def load_config(self, project_path: str | Path = ".") -> dict[str, str]:
        """Load merged config: defaults -> profile -> config.json -> .env -> env vars."""
        root = Path(project_path)
        config: dict[str, str] = {key: str(info["default"]) for key, info in _CONFIG_KEYS.items()}

        env_name = os.environ.get("SCANQUOTE_ENV", config["SCANQUOTE_ENV"])
        profile = _PROFILES.get(env_name)
        if profile is None:
            logger.warning("Unknown environment profile %r; using defaults", env_name)
            profile = {}
        config.update(profile)

        config_json = root / ".scanquote" / "config.json"
        if config_json.is_file():
            try:
                data = json.loads(config_json.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, OSError):
                logger.warning("Could not read %s", config_json, exc_info=True)
            else:
                for k, v in data.items():
                    config[k] = str(v)

        env_file = root / ".env"
        if env_file.is_file():
            for line in env_file.read_text(encoding="utf-8").splitlines():
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                config[k.strip()] = v.strip()

        for key in _CONFIG_KEYS:
            env_val = os.environ.get(key)
            if env_val is not None:
                config[key] = env_val

        return config


def configure_logging(level: str | int | None = None) -> None:
    """Attach a basic handler to the ``scanquote`` logger.

    *level* defaults to ``SCANQUOTE_LOG_LEVEL`` from the merged settings.
    """
    if level is None:
        level = ConfigManager().load_config()["SCANQUOTE_LOG_LEVEL"]
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved

    root = logging.getLogger("scanquote")
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        root.addHandler(handler)


def load_pricing_config(path: str | Path | None = None) -> PricingConfig:
    """Read a pricing configuration JSON file.

    With no *path*, ``SCANQUOTE_PRICING_CONFIG`` is consulted; if that is
    empty too the embedded defaults are returned.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    pydantic.ValidationError
        If the file's content is not a valid pricing configuration.
    """
    if path is None:
        path = ConfigManager().load_config()["SCANQUOTE_PRICING_CONFIG"] or None
    if path is None:
        logger.debug("No pricing config file; using seed defaults")
        return default_pricing_config()

    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Pricing config not found: {path}")
    config = PricingConfig.model_validate_json(path.read_text(encoding="utf-8"))
    logger.info("Loaded pricing config from %s", path)
    return config
