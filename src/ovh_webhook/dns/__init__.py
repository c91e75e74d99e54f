"""Zone client factory — build an OVH zone client from a decoded solver config."""

from __future__ import annotations

from ovh.exceptions import APIError

from ovh_webhook.config import ProviderConfig
from ovh_webhook.dns.ovh_zone import OvhZoneClient
from ovh_webhook.errors import ConfigValidationError


def get_zone_client(config: ProviderConfig, application_secret: str) -> OvhZoneClient:
    """Instantiate an OVH zone client.

    Args:
        config: Decoded solver configuration; empty fields are left for the
            ovh library to load from the environment.
        application_secret: Application secret resolved from the cluster.

    Returns:
        A configured OvhZoneClient instance.
    """
    try:
        return OvhZoneClient(
            endpoint=config.endpoint,
            application_key=config.application_key,
            application_secret=application_secret,
            consumer_key=config.consumer_key,
        )
    except APIError as exc:
        raise ConfigValidationError(f"invalid OVH client configuration: {exc}", field="endpoint") from exc
