"""Ruleset loader for YAML configuration files."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from flightgate.config.models import RulesetConfig
from flightgate.config.presets import DEFAULT_RULESET, RULESETS, get_ruleset
from flightgate.core.errors import ConfigError

logger = logging.getLogger(__name__)

RULESET_ENV_VAR = "FLIGHTGATE_RULESET"


class RulesetLoader:
    """Load RulesetConfig from YAML files, presets or the environment."""

    @staticmethod
    def load(path: Path | str) -> RulesetConfig:
        """Load a ruleset from a YAML file.

        The file may name a preset under ``extends``; its values are used as
        defaults and the remaining keys override them.

        Args:
            path: Path to a ruleset YAML file

        Returns:
            Parsed RulesetConfig instance

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If the content is not a valid ruleset
        """
        yaml_file = Path(path)
        if not yaml_file.is_file():
            raise FileNotFoundError(f"Ruleset file not found: {yaml_file}")

        with open(yaml_file, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigError(f"Ruleset file must contain a mapping: {yaml_file}")

        base = data.pop("extends", None)
        if base is not None:
            merged: dict[str, Any] = get_ruleset(str(base)).model_dump(exclude={"name"})
            for key, value in data.items():
                # Nested sections override key by key
                if isinstance(value, dict) and isinstance(merged.get(key), dict):
                    merged[key] = {**merged[key], **value}
                else:
                    merged[key] = value
            data = merged

        data.setdefault("name", yaml_file.stem)

        try:
            config = RulesetConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid ruleset in {yaml_file}: {e}") from e

        logger.debug(
            f"Loaded ruleset '{config.name}' from {yaml_file}",
            extra={"ruleset": config.name, "extends": base},
        )
        return config

    @staticmethod
    def resolve(name_or_path: str) -> RulesetConfig:
        """Resolve a preset name or a path to a YAML file."""
        if name_or_path in RULESETS:
            return get_ruleset(name_or_path)
        return RulesetLoader.load(name_or_path)

    @staticmethod
    def from_env() -> RulesetConfig:
        """Load the ruleset named by FLIGHTGATE_RULESET (defaults to strict)."""
        return RulesetLoader.resolve(os.environ.get(RULESET_ENV_VAR, DEFAULT_RULESET))
