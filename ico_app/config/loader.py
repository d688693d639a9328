"""Configuration loader with 3-tier parameter precedence and preset lookup."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    AllocationParams,
    DefaultConfig,
    DisplayParams,
    SamplerParams,
    VestingParams,
    get_default_config,
)

SETTINGS_FILE = "settings.yaml"
PRESETS_FILE = "allocations.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def _read_yaml(self, file_name: str) -> dict[str, Any]:
        path = self.config_dir / file_name

        if not path.exists():
            return {}

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Cannot parse {path}: {e}", source=str(path)) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"{path} must contain a mapping at top level", source=str(path))
        return data

    def load_settings(self) -> dict[str, Any]:
        """Load file-level overrides of the global defaults."""
        return self._read_yaml(SETTINGS_FILE).get("settings", {}) or {}

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. settings.yaml overrides
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_settings())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def build_config(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """Merge configuration and rebuild the typed dataclass tree."""
        merged = self.merge_config(overrides)
        try:
            return DefaultConfig(
                vesting=VestingParams(**merged.get("vesting", {})),
                allocation=AllocationParams(**merged.get("allocation", {})),
                sampler=SamplerParams(**merged.get("sampler", {})),
                display=DisplayParams(**merged.get("display", {})),
            )
        except TypeError as e:
            raise ConfigurationError(f"Unknown configuration parameter: {e}") from e

    def load_presets(self) -> dict[str, dict[str, Any]]:
        """Load every named allocation preset."""
        presets = self._read_yaml(PRESETS_FILE).get("presets", {}) or {}
        if not isinstance(presets, dict):
            raise ConfigurationError("'presets' must be a mapping of name to preset",
                                     source=str(self.config_dir / PRESETS_FILE))
        return presets

    def load_preset(self, name: str) -> dict[str, Any]:
        """Load a single allocation preset by name."""
        presets = self.load_presets()

        if name not in presets:
            raise ConfigurationError(
                f"Unknown allocation preset '{name}'",
                source=str(self.config_dir / PRESETS_FILE),
                context={"available": sorted(presets)},
            )

        return presets[name]

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
