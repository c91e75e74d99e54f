"""OVH DNS-01 solver — present and clean up challenge TXT records."""

from __future__ import annotations

import logging

from kubernetes import client

from ovh_webhook.auth import get_core_api
from ovh_webhook.config import load_provider_config, validate_provider_config
from ovh_webhook.credentials import SecretResolver
from ovh_webhook.dns import get_zone_client
from ovh_webhook.dns.ovh_zone import OvhZoneClient
from ovh_webhook.dns.util import get_sub_domain, un_fqdn
from ovh_webhook.errors import SolverNotInitializedError, ZoneNotDeployedError
from ovh_webhook.models import ChallengeRequest

logger = logging.getLogger(__name__)

SOLVER_NAME = "ovh"
_FIELD_TYPE = "TXT"


class OvhDnsSolver:
    """cert-manager webhook solver backed by the OVH zone API.

    ``present`` and ``cleanup`` are safe to call concurrently for different
    challenges: the OVH client is rebuilt per call and cleanup only deletes
    records whose target matches the challenge key.
    """

    def __init__(self, _secret_resolver: SecretResolver | None = None) -> None:
        self._secrets = _secret_resolver

    def name(self) -> str:
        """Solver name referenced by ``solverName`` in the Issuer's webhook config."""
        return SOLVER_NAME

    def initialize(self, kube_config: client.Configuration | None = None) -> None:
        """Build the Kubernetes client used to read credential Secrets."""
        self._secrets = SecretResolver(get_core_api(kube_config))

    def present(self, request: ChallengeRequest) -> None:
        """Create the challenge TXT record.

        May be called repeatedly with the same request; each call adds a record
        and duplicates are removed by ``cleanup``.
        """
        zone_client = self._zone_client(request)
        domain = un_fqdn(request.resolved_zone)
        sub_domain = get_sub_domain(domain, request.resolved_fqdn)
        add_txt_record(zone_client, domain, sub_domain, request.key)
        logger.info("Presented challenge %s for %s", request.uid, request.resolved_fqdn)

    def cleanup(self, request: ChallengeRequest) -> None:
        """Delete the TXT records at the challenge name whose value is the challenge key.

        Other records at the same name belong to concurrent validations
        (e.g. a wildcard and its apex) and are left in place.
        """
        zone_client = self._zone_client(request)
        domain = un_fqdn(request.resolved_zone)
        sub_domain = get_sub_domain(domain, request.resolved_fqdn)
        remove_txt_record(zone_client, domain, sub_domain, request.key)
        logger.info("Cleaned up challenge %s for %s", request.uid, request.resolved_fqdn)

    def _zone_client(self, request: ChallengeRequest) -> OvhZoneClient:
        cfg = load_provider_config(request.config)
        validate_provider_config(cfg, request.allow_ambient_credentials)

        application_secret = ""
        if cfg.application_secret_ref.name:
            if self._secrets is None:
                raise SolverNotInitializedError("solver is not initialized")
            application_secret = self._secrets.resolve(cfg.application_secret_ref, request.resource_namespace)

        return get_zone_client(cfg, application_secret)


def validate_zone(zone_client: OvhZoneClient, domain: str) -> None:
    """Refuse to touch a zone whose previous changes are still being deployed."""
    status = zone_client.get_zone_status(domain)
    if not status.is_deployed:
        raise ZoneNotDeployedError(domain)


def add_txt_record(zone_client: OvhZoneClient, domain: str, sub_domain: str, target: str) -> None:
    validate_zone(zone_client, domain)
    zone_client.create_record(domain, _FIELD_TYPE, sub_domain, target)
    zone_client.refresh_zone(domain)


def remove_txt_record(zone_client: OvhZoneClient, domain: str, sub_domain: str, target: str) -> None:
    """Delete every TXT record at ``sub_domain`` whose target equals ``target``, then refresh.

    The first failing call aborts the loop and skips the refresh; a retry
    lists again and finds already-deleted records absent.
    """
    deleted = 0
    for record_id in zone_client.list_records(domain, _FIELD_TYPE, sub_domain):
        record = zone_client.get_record(domain, record_id)
        if record.target != target:
            logger.debug("Skipping record %s in zone %s: target does not match", record_id, domain)
            continue
        zone_client.delete_record(domain, record_id)
        deleted += 1

    if deleted == 0:
        logger.warning("No TXT record %s with matching value in OVH zone %s", sub_domain, domain)
    zone_client.refresh_zone(domain)
