"""Configuration loading: process settings from environment, solver config from the issuer."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field

from ovh_webhook.errors import ConfigDecodeError, ConfigValidationError

_DEFAULT_SECURE_PORT = 443
_DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class AppConfig:
    """Process configuration loaded once from environment variables."""

    group_name: str
    secure_port: int = _DEFAULT_SECURE_PORT
    tls_cert_file: str | None = None
    tls_private_key_file: str | None = None
    log_level: str = _DEFAULT_LOG_LEVEL


def _require_env(name: str) -> str:
    value = os.environ.get(name)
    if not value:
        raise ValueError(f"Required environment variable {name} is not set")
    return value


def load_config() -> AppConfig:
    """Load and validate process configuration from environment variables."""
    group_name = _require_env("GROUP_NAME")

    raw_port = os.environ.get("SECURE_PORT", str(_DEFAULT_SECURE_PORT))
    try:
        secure_port = int(raw_port)
    except ValueError:
        raise ValueError(f"SECURE_PORT must be an integer, got: {raw_port!r}")
    if secure_port < 1:
        raise ValueError(f"SECURE_PORT must be a positive integer, got: {secure_port}")

    tls_cert_file = os.environ.get("TLS_CERT_FILE") or None
    tls_private_key_file = os.environ.get("TLS_PRIVATE_KEY_FILE") or None
    if bool(tls_cert_file) != bool(tls_private_key_file):
        raise ValueError("TLS_CERT_FILE and TLS_PRIVATE_KEY_FILE must both be set or both be unset")

    log_level = os.environ.get("LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()

    return AppConfig(
        group_name=group_name,
        secure_port=secure_port,
        tls_cert_file=tls_cert_file,
        tls_private_key_file=tls_private_key_file,
        log_level=log_level,
    )


@dataclass(frozen=True)
class SecretKeySelector:
    """Reference to one key of a Secret in the challenge's namespace."""

    name: str = ""
    key: str = ""


@dataclass(frozen=True)
class ProviderConfig:
    """Per-issuer OVH settings decoded from the solver's ``config`` block."""

    endpoint: str = ""
    application_key: str = ""
    application_secret_ref: SecretKeySelector = field(default_factory=SecretKeySelector)
    consumer_key: str = ""


def _string_field(data: dict, name: str) -> str:
    value = data.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigDecodeError(f"error decoding OVH config: {name} must be a string, got {type(value).__name__}")
    return value


def load_provider_config(raw: str | bytes | None) -> ProviderConfig:
    """Decode the JSON config attached to a challenge.

    No config at all is a valid base case and yields an empty ProviderConfig;
    whether that is usable is decided by ``validate_provider_config``.
    """
    if not raw:
        return ProviderConfig()

    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise ConfigDecodeError(f"error decoding OVH config: {exc}") from exc
    if data is None:
        return ProviderConfig()
    if not isinstance(data, dict):
        raise ConfigDecodeError(f"error decoding OVH config: expected an object, got {type(data).__name__}")

    ref = data.get("applicationSecretRef") or {}
    if not isinstance(ref, dict):
        raise ConfigDecodeError("error decoding OVH config: applicationSecretRef must be an object")

    return ProviderConfig(
        endpoint=_string_field(data, "endpoint"),
        application_key=_string_field(data, "applicationKey"),
        application_secret_ref=SecretKeySelector(
            name=_string_field(ref, "name"),
            key=_string_field(ref, "key"),
        ),
        consumer_key=_string_field(data, "consumerKey"),
    )


def validate_provider_config(cfg: ProviderConfig, allow_ambient_credentials: bool) -> None:
    """Require every credential field unless the OVH client may load them itself."""
    if allow_ambient_credentials:
        # The ovh library falls back to OVH_* variables and ovh.conf files.
        return
    if not cfg.endpoint:
        raise ConfigValidationError("no endpoint provided in OVH config", field="endpoint")
    if not cfg.application_key:
        raise ConfigValidationError("no application key provided in OVH config", field="applicationKey")
    if not cfg.application_secret_ref.name:
        raise ConfigValidationError("no application secret provided in OVH config", field="applicationSecretRef")
    if not cfg.consumer_key:
        raise ConfigValidationError("no consumer key provided in OVH config", field="consumerKey")
