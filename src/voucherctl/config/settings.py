"""VoucherSettings: CLI flags, env vars, and voucherctl.toml in one object.

Highest priority first: CLI flags, ``VOUCHERCTL_*`` env vars (``__``
separates section and key, e.g. ``VOUCHERCTL_DISCOUNT__MIN_AMOUNT``), the
TOML file, then the defaults in :mod:`voucherctl.config.models`.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, TomlConfigSettingsSource

from voucherctl.config.discovery import locate_config
from voucherctl.config.models import DatabaseConfig, DiscountConfig


class VoucherSettings(BaseSettings):
    """Frozen settings for one voucherctl invocation.

    Attributes:
        project_root: Base for a relative ``[database] path``.
        config_path: The TOML file that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "VOUCHERCTL_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    discount: DiscountConfig = Field(default_factory=DiscountConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # The TOML file is whichever config_path the caller passed in.
        toml_file = getattr(init_settings, "init_kwargs", {}).get("config_path")
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
        )

    @property
    def db_path(self) -> Path:
        """Absolute path of the SQLite database file."""
        path = Path(self.database.path)
        return path if path.is_absolute() else self.project_root / path

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **flags: Any,
    ) -> VoucherSettings:
        """Build settings for a CLI invocation.

        Without an explicit *project_root*, the directory holding the config
        file (or the CWD when there is none) becomes the project root.

        Raises:
            click.ClickException: If the config file is not valid TOML.
        """
        toml_path = locate_config(config_path, project_root)
        if project_root is None:
            project_root = toml_path.parent if toml_path else Path.cwd()
        try:
            return cls(project_root=project_root, config_path=toml_path, **flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
