import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from complexity_cli.core.constants import (
    CONFIG_FILENAME,
    STORE_DIR_NAME,
    STORE_FILENAME,
)
from complexity_cli.core.exceptions import ConfigurationError

# Configuration defaults - all constants at the top
DEFAULT_OUTPUT_FORMAT = "table"
OUTPUT_FORMATS = ("table", "json")
DEFAULT_TIMESTAMP_FORMAT = "%H:%M:%S"
STORE_ENABLED_DEFAULT = True


@dataclass
class StoreConfig:
    """Result store configuration."""

    enabled: bool = STORE_ENABLED_DEFAULT
    path: Optional[str] = None  # Default: .complexity/results.json in cwd


@dataclass
class AnalyzerConfig:
    """Main configuration class for Complexity CLI."""

    language: Optional[str] = None
    output_format: str = DEFAULT_OUTPUT_FORMAT
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    show_explanation: bool = True
    debug: bool = False
    log_file: Optional[str] = None
    store: StoreConfig = field(default_factory=StoreConfig)

    def __post_init__(self):
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unsupported output format: '{self.output_format}'. "
                f"Expected one of: {', '.join(OUTPUT_FORMATS)}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalyzerConfig":
        """Create config from dictionary."""
        config_data = data.copy()

        # Map JSON keys to config fields
        field_mapping = {
            "default_language": "language",
            "output_format": "output_format",
            "timestamp_format": "timestamp_format",
            "show_explanation": "show_explanation",
            "debug": "debug",
            "log_file": "log_file",
            "store_enabled": "store.enabled",
            "store_path": "store.path",
        }

        for json_key, config_key in field_mapping.items():
            if json_key in config_data:
                value = config_data.pop(json_key)
                if "." in config_key:  # Nested field
                    parent, child = config_key.split(".", 1)
                    if parent not in config_data:
                        config_data[parent] = {}
                    config_data[parent][child] = value
                else:
                    config_data[config_key] = value

        if "store" in config_data:
            if isinstance(config_data["store"], dict):
                config_data["store"] = StoreConfig(**config_data["store"])
            elif isinstance(config_data["store"], bool):
                config_data["store"] = StoreConfig(enabled=config_data["store"])

        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(config_data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

        return cls(**config_data)

    def get_store_path(self) -> Path:
        """Get the result store file path."""
        if self.store.path:
            return Path(self.store.path).expanduser()
        return Path.cwd() / STORE_DIR_NAME / STORE_FILENAME


def load_config_file(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from file."""
    paths = []

    if config_path:
        explicit = Path(config_path)
        if not explicit.exists():
            raise ConfigurationError(f"Config file not found: {explicit}")
        paths.append(explicit)

    paths.extend(
        [
            Path.cwd() / CONFIG_FILENAME,
            Path.home() / f".{CONFIG_FILENAME}",
        ]
    )

    for path in paths:
        if path.exists():
            try:
                with open(path, "r") as f:
                    return json.load(f)
            except (json.JSONDecodeError, IOError):
                continue

    return {}

