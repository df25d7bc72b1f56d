# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for kgadget.

This module defines dataclasses representing all configurable aspects of kgadget,
including environment variables, timeouts, trace source options, presentation
settings, and exit codes.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass
class EnvironmentVariables:
    """Environment variable names used by kgadget."""

    # Enables kgadget debug mode.
    debug_mode: str = "KGADGET_DEBUG"
    # Path to an explicit kgadget configuration file.
    config: str = "KGADGET_CONFIG"


@dataclass
class TimeoutSettings:
    """Timeout settings in seconds."""

    # Timeout for a single kubectl invocation.
    kubectl: int = 30


@dataclass
class TraceSourceSettings:
    """Settings for obtaining per-node trace results."""

    # Name (or path) of the kubectl binary.
    kubectl_binary: str = "kubectl"
    # Namespace in which the trace resources live.
    namespace: str = "gadget"
    # Kubernetes resource holding the per-node trace results.
    resource: str = "traces.gadget.kinvolk.io"
    # Label used to select traces belonging to a gadget.
    gadget_label: str = "gadgetName"


@dataclass
class CollectorPresenterSettings:
    """Settings for CollectorPresenter."""

    # Output mode used when `--output` is not specified.
    default_output: str = "columns"
    # Number of spaces separating columns of the table.
    column_padding: int = 4
    # Indentation used for JSON output.
    json_indent: int = 2
    # Indentation used for YAML output.
    yaml_indent: int = 2


@dataclass
class DateFormats:
    """Date and time format strings."""

    # Standard date format used by kgadget.
    standard: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class ExitCodes:
    """Exit codes used for various errors."""

    # Default error code for failures of kgadget commands.
    default: int = 91
    # Returned when the collected results could not be serialized.
    serialization: int = 92
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class Config:
    """Main configuration for kgadget."""

    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    timeouts: TimeoutSettings = field(default_factory=TimeoutSettings)
    trace_source: TraceSourceSettings = field(default_factory=TraceSourceSettings)
    collector_presenter: CollectorPresenterSettings = field(
        default_factory=CollectorPresenterSettings
    )
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(f"Could not read kgadget config '{config_path}': {e}.")

        # no config found - use defaults
        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.
        """
        config_locations: list[Path | None] = [
            # explicit environment variable has the highest priority
            Path(env_path)
            if (env_path := os.getenv(EnvironmentVariables.config))
            else None,
            # current working directory
            Path.cwd() / "kgadget_config.toml",
            # XDG config home
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "kgadget"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Handles nested dataclasses properly.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        field_name = field_info.name
        field_type = field_info.type

        if field_name in data:
            value = data[field_name]
            if is_dataclass(field_type) and isinstance(value, dict):
                field_values[field_name] = _dict_to_dataclass(field_type, value)
            else:
                field_values[field_name] = value

    return cls(**field_values)


# Global configuration for kgadget.
CFG = Config.load()
