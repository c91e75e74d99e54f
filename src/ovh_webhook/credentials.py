"""Credential lookups — read the OVH application secret from a Kubernetes Secret."""

from __future__ import annotations

import base64
import binascii
import logging

from kubernetes.client import CoreV1Api
from kubernetes.client.exceptions import ApiException

from ovh_webhook.config import SecretKeySelector
from ovh_webhook.errors import CredentialLookupError, SecretKeyMissingError, SecretNotFoundError

logger = logging.getLogger(__name__)


class SecretResolver:
    """Resolves ``SecretKeySelector`` references against the cluster.

    Every call reads the Secret again; nothing is cached so rotated
    credentials are picked up on the next challenge.
    """

    def __init__(self, core_api: CoreV1Api) -> None:
        self._core_api = core_api

    def resolve(self, ref: SecretKeySelector, namespace: str) -> str:
        """Return the decoded value of ``ref.key`` in Secret ``ref.name``.

        An empty reference name means no secret is configured and yields "".
        """
        if not ref.name:
            return ""

        try:
            secret = self._core_api.read_namespaced_secret(ref.name, namespace)
        except ApiException as exc:
            if exc.status == 404:
                raise SecretNotFoundError(f"secret '{namespace}/{ref.name}' not found") from exc
            raise CredentialLookupError(f"failed to read secret '{namespace}/{ref.name}': {exc.reason}") from exc

        data = secret.data or {}
        if ref.key not in data:
            raise SecretKeyMissingError(ref.key, namespace, ref.name)

        try:
            value = base64.b64decode(data[ref.key], validate=True).decode()
        except (binascii.Error, UnicodeDecodeError) as exc:
            raise CredentialLookupError(
                f"cannot decode key \"{ref.key}\" of secret '{namespace}/{ref.name}': {exc}"
            ) from exc

        logger.debug("Read key %r from secret '%s/%s'", ref.key, namespace, ref.name)
        return value
