"""Errors raised while solving a DNS-01 challenge."""

from __future__ import annotations


class WebhookError(Exception):
    """Base class for every failure reported back to cert-manager."""


class ConfigDecodeError(WebhookError):
    """The per-issuer config payload is not valid JSON for this solver."""


class ConfigValidationError(WebhookError):
    """A required config field is missing and ambient credentials are not allowed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class SolverNotInitializedError(WebhookError):
    """A secret lookup was needed before the solver was initialized."""


class CredentialLookupError(WebhookError):
    """The application secret could not be read from the cluster."""


class SecretNotFoundError(CredentialLookupError):
    """The referenced Secret does not exist."""


class SecretKeyMissingError(CredentialLookupError):
    """The Secret exists but lacks the requested key."""

    def __init__(self, key: str, namespace: str, name: str) -> None:
        super().__init__(f"key not found \"{key}\" in secret '{namespace}/{name}'")
        self.key = key
        self.namespace = namespace
        self.name = name


class ZoneNotDeployedError(WebhookError):
    """OVH reports the zone as not deployed; records must not be changed."""

    def __init__(self, domain: str) -> None:
        super().__init__(f"OVH zone not deployed for domain {domain}")
        self.domain = domain


class RemoteAPIError(WebhookError):
    """An OVH API call failed."""

    def __init__(self, method: str, path: str, cause: Exception) -> None:
        super().__init__(f"OVH API call failed: {method} {path} - {cause}")
        self.method = method
        self.path = path
