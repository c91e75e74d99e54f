"""OVH zone API client — list/get/create/delete TXT records and refresh a zone."""

from __future__ import annotations

import logging

import ovh
from ovh.exceptions import APIError

from ovh_webhook.errors import RemoteAPIError
from ovh_webhook.models import ZoneRecord, ZoneStatus

logger = logging.getLogger(__name__)

_CHALLENGE_TTL = 60


class OvhZoneClient:
    """Thin wrapper over ``ovh.Client`` for the ``/domain/zone`` endpoints.

    Holds nothing but connection parameters; every method is one API round trip.
    Empty credential values are handed to the ovh library as ``None`` so it can
    fall back to its environment variables and ``ovh.conf`` files.
    """

    def __init__(
        self,
        endpoint: str | None = None,
        application_key: str | None = None,
        application_secret: str | None = None,
        consumer_key: str | None = None,
        _ovh_client: ovh.Client | None = None,
    ) -> None:
        self._client = _ovh_client or ovh.Client(
            endpoint=endpoint or None,
            application_key=application_key or None,
            application_secret=application_secret or None,
            consumer_key=consumer_key or None,
        )

    def get_zone_status(self, domain: str) -> ZoneStatus:
        path = f"/domain/zone/{domain}/status"
        try:
            data = self._client.get(path)
        except APIError as exc:
            raise RemoteAPIError("GET", path, exc) from exc
        return ZoneStatus.from_dict(data)

    def list_records(self, domain: str, field_type: str, sub_domain: str) -> list[int]:
        """Return the ids of records of ``field_type`` at ``sub_domain``."""
        path = f"/domain/zone/{domain}/record"
        try:
            ids = self._client.get(path, fieldType=field_type, subDomain=sub_domain)
        except APIError as exc:
            raise RemoteAPIError("GET", f"{path}?fieldType={field_type}&subDomain={sub_domain}", exc) from exc
        return [int(record_id) for record_id in ids or []]

    def get_record(self, domain: str, record_id: int) -> ZoneRecord:
        path = f"/domain/zone/{domain}/record/{record_id}"
        try:
            data = self._client.get(path)
        except APIError as exc:
            raise RemoteAPIError("GET", path, exc) from exc
        return ZoneRecord.from_dict(data)

    def create_record(self, domain: str, field_type: str, sub_domain: str, target: str) -> ZoneRecord:
        """Create a record; OVH assigns and returns its id."""
        path = f"/domain/zone/{domain}/record"
        params = ZoneRecord(field_type=field_type, sub_domain=sub_domain, target=target, ttl=_CHALLENGE_TTL)
        try:
            data = self._client.post(path, **params.to_dict())
        except APIError as exc:
            raise RemoteAPIError("POST", path, exc) from exc
        record = ZoneRecord.from_dict(data or {})
        logger.info("Created %s record %s (id %s) in OVH zone %s", field_type, sub_domain, record.id, domain)
        return record

    def delete_record(self, domain: str, record_id: int) -> None:
        path = f"/domain/zone/{domain}/record/{record_id}"
        try:
            self._client.delete(path)
        except APIError as exc:
            raise RemoteAPIError("DELETE", path, exc) from exc
        logger.info("Deleted record %s from OVH zone %s", record_id, domain)

    def refresh_zone(self, domain: str) -> None:
        """Publish pending changes of the zone."""
        path = f"/domain/zone/{domain}/refresh"
        try:
            self._client.post(path)
        except APIError as exc:
            raise RemoteAPIError("POST", path, exc) from exc
        logger.info("Refreshed OVH zone %s", domain)
