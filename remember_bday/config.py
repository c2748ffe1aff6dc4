"""
Configuration models and YAML I/O for remember-bday.

This module defines the Pydantic models for a run, plus helpers to build
them from the command line / environment and to load or save the
optional notification settings file.

Key models:
- AppConfig: Top-level config (input file + Windows app id + notification settings).
- NotificationConfig: Title, message template, priority and timeout of
  delivered notifications.

Key functions:
- build_config(file_path, environ, ...) -> AppConfig: Validate CLI/env input.
- load_notification_config(path) -> NotificationConfig: Load from YAML.
- save_notification_config(config, path): Serialize to YAML.

Why Pydantic + YAML:
- Pydantic gives us strict validation and clear error messages.
- YAML is human-editable (users tweak the message text and priority).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from remember_bday.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

APP_ID_ENV_VAR = "REMEMBER_BDAY_APP_ID"
DEFAULT_APP_ID = "remember-bday"
DEFAULT_MESSAGE_TEMPLATE = "It's {name}'s birthday today!"
VCF_SUFFIX = ".vcf"


class NotificationConfig(BaseModel):
    """How notifications look and how long delivery may take."""

    title: str = Field("Remember B-Day", description="Notification title")
    message_template: str = Field(
        DEFAULT_MESSAGE_TEMPLATE,
        description="Body text; '{name}' is replaced by the contact's name",
    )
    priority: Literal["low", "normal", "high", "urgent"] = Field(
        "low", description="Portal priority hint (Linux only)"
    )
    timeout_ms: int = Field(
        5000, gt=0, description="How long to wait for the notification service"
    )
    notification_id: str = Field(
        DEFAULT_APP_ID,
        min_length=1,
        description="Prefix for portal notification ids (Linux only)",
    )

    @field_validator("message_template")
    @classmethod
    def _check_template_has_name(cls, value: str) -> str:
        if "{name}" not in value:
            raise ValueError("message_template must contain '{name}'")
        return value


class AppConfig(BaseModel):
    """Everything a single run needs.

    ``file_path`` is only checked for its extension here; whether it
    exists is found out when the file is read.
    """

    file_path: str
    windows_app_id: str = DEFAULT_APP_ID
    notification: NotificationConfig = Field(default_factory=NotificationConfig)

    @field_validator("file_path")
    @classmethod
    def _check_vcf_suffix(cls, value: str) -> str:
        if not value.endswith(VCF_SUFFIX):
            raise ValueError("Didn't get path to a vcf file")
        return value


def _format_validation_error(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
        for err in exc.errors()
    )


def build_config(
    file_path: str | None,
    environ: Mapping[str, str],
    notification: NotificationConfig | None = None,
) -> AppConfig:
    """Build an AppConfig from the positional argument and the environment.

    Args:
        file_path: The input path given on the command line (``None`` if
            none was given).
        environ: Environment mapping; ``REMEMBER_BDAY_APP_ID`` overrides
            the default Windows application id.
        notification: Settings loaded from YAML, or ``None`` for defaults.

    Raises:
        ConfigValidationError: If no path was given or it is not a ``.vcf`` file.
    """
    if not file_path:
        raise ConfigValidationError("Didn't get path to a vcf file")

    data: dict[str, object] = {
        "file_path": file_path,
        "windows_app_id": environ.get(APP_ID_ENV_VAR, DEFAULT_APP_ID),
    }
    if notification is not None:
        data["notification"] = notification

    try:
        return AppConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigValidationError(_format_validation_error(exc)) from exc


def load_notification_config(path: str | Path) -> NotificationConfig:
    """Load notification settings from a YAML file.

    Raises:
        FileNotFoundError: If the settings file does not exist.
        ConfigValidationError: If the file is empty or fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(f"Config file must contain a mapping: {path}")
    try:
        config = NotificationConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(
            f"Invalid config file {path}: {_format_validation_error(exc)}"
        ) from exc
    logger.info("Loaded config from %s", path)
    return config


def save_notification_config(config: NotificationConfig, path: str | Path) -> None:
    """Serialize NotificationConfig to YAML.

    Writes a human-readable YAML file with a header comment.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# remember-bday notification settings\n")
        f.write("# '{name}' in message_template is replaced by the contact's name\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)
