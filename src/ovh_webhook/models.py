"""Data classes exchanged with cert-manager and the OVH zone API."""

from __future__ import annotations

import json
from dataclasses import dataclass

_DEFAULT_TTL = 60


@dataclass(frozen=True)
class ChallengeRequest:
    """A single Present or CleanUp call issued by cert-manager."""

    uid: str
    action: str
    resolved_fqdn: str
    resolved_zone: str
    key: str
    resource_namespace: str = ""
    dns_name: str = ""
    type: str = "dns-01"
    allow_ambient_credentials: bool = False
    config: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> ChallengeRequest:
        raw_config = data.get("config")
        return cls(
            uid=data.get("uid", ""),
            action=data.get("action", ""),
            resolved_fqdn=data.get("resolvedFQDN", ""),
            resolved_zone=data.get("resolvedZone", ""),
            key=data.get("key", ""),
            resource_namespace=data.get("resourceNamespace", ""),
            dns_name=data.get("dnsName", ""),
            type=data.get("type", "dns-01"),
            allow_ambient_credentials=bool(data.get("allowAmbientCredentials", False)),
            config=json.dumps(raw_config) if raw_config is not None else None,
        )


@dataclass(frozen=True)
class ChallengeResponse:
    """Outcome of a challenge call, in the shape cert-manager expects."""

    uid: str
    success: bool
    message: str | None = None

    def to_dict(self) -> dict:
        data: dict = {"uid": self.uid, "success": self.success}
        if not self.success:
            data["status"] = {
                "metadata": {},
                "status": "Failure",
                "message": self.message or "",
            }
        return data


@dataclass(frozen=True)
class ZoneRecord:
    """A record of an OVH DNS zone."""

    field_type: str
    sub_domain: str
    target: str
    ttl: int | None = _DEFAULT_TTL
    id: int | None = None

    def to_dict(self) -> dict:
        data: dict = {
            "fieldType": self.field_type,
            "subDomain": self.sub_domain,
            "target": self.target,
        }
        if self.ttl:
            data["ttl"] = self.ttl
        if self.id:
            data["id"] = self.id
        return data

    @classmethod
    def from_dict(cls, data: dict) -> ZoneRecord:
        return cls(
            id=data.get("id"),
            field_type=data.get("fieldType", ""),
            sub_domain=data.get("subDomain", ""),
            target=data.get("target", ""),
            ttl=data.get("ttl"),
        )


@dataclass(frozen=True)
class ZoneStatus:
    """Deployment state of an OVH DNS zone."""

    is_deployed: bool

    @classmethod
    def from_dict(cls, data: dict) -> ZoneStatus:
        return cls(is_deployed=bool(data.get("isDeployed", False)))
