"""Connection-level configuration for gofr-view."""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from gofr_view.exceptions import ConfigurationError

DEFAULT_LEFT_DELIMITER = "{%"
DEFAULT_RIGHT_DELIMITER = "%}"
DEFAULT_ROOT = "asset/views"
DEFAULT_SHARED = "shared"

ENV_PREFIX = "GOFR_VIEW_"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class ViewConfig(BaseModel):
    """Delimiters and template directory layout for one connection.

    Any field that is missing, ``None`` or an empty string receives its own
    default. The model is frozen: defaults are applied once, at construction.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    left: str = DEFAULT_LEFT_DELIMITER
    right: str = DEFAULT_RIGHT_DELIMITER
    root: str = DEFAULT_ROOT
    shared: str = DEFAULT_SHARED
    autoescape: bool = True

    @model_validator(mode="before")
    @classmethod
    def _drop_unset(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {key: value for key, value in data.items() if value is not None and value != ""}
        return data

    @property
    def root_path(self) -> Path:
        return Path(self.root)

    @classmethod
    def from_mapping(cls, settings: Optional[Mapping[str, Any]] = None) -> "ViewConfig":
        """Build a config from a plain settings mapping (e.g. a driver's options)."""
        try:
            return cls(**dict(settings or {}))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid view configuration: {e}") from e

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ViewConfig":
        """
        Build a config from GOFR_VIEW_* environment variables.

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            ViewConfig with unset variables defaulted
        """
        environ = os.environ if environ is None else environ
        settings: Dict[str, Any] = {
            "left": environ.get(f"{ENV_PREFIX}LEFT"),
            "right": environ.get(f"{ENV_PREFIX}RIGHT"),
            "root": environ.get(f"{ENV_PREFIX}ROOT"),
            "shared": environ.get(f"{ENV_PREFIX}SHARED"),
        }
        autoescape = environ.get(f"{ENV_PREFIX}AUTOESCAPE")
        if autoescape:
            settings["autoescape"] = autoescape.strip().lower() in _TRUE_VALUES
        return cls.from_mapping(settings)

    @classmethod
    def from_yaml(cls, file_path: Union[str, Path]) -> "ViewConfig":
        """
        Load a config from a YAML file.

        The file holds a single mapping with any of ``left``, ``right``,
        ``root``, ``shared`` and ``autoescape``.

        Raises:
            ConfigurationError: If the file cannot be read or is not a mapping
        """
        path = Path(file_path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to load view configuration from {path}: {e}",
                details={"path": str(path)},
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"View configuration in {path} must be a mapping",
                details={"path": str(path)},
            )
        return cls.from_mapping(data)
