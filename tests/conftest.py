"""Shared test fixtures for cert-manager-webhook-ovh."""

import re

import pytest
from ovh.exceptions import ResourceNotFoundError

_STATUS = re.compile(r"/domain/zone/([^/]+)/status")
_RECORDS = re.compile(r"/domain/zone/([^/]+)/record")
_RECORD = re.compile(r"/domain/zone/([^/]+)/record/(\d+)")
_REFRESH = re.compile(r"/domain/zone/([^/]+)/refresh")


class FakeOvhApi:
    """In-memory stand-in for ``ovh.Client`` serving the /domain/zone endpoints."""

    def __init__(self, deployed=True):
        self.deployed = deployed
        self.records = {}
        self.calls = []
        self._next_id = 1000

    def add(self, zone, sub_domain, target, field_type="TXT"):
        self._next_id += 1
        self.records[self._next_id] = {
            "id": self._next_id,
            "zone": zone,
            "fieldType": field_type,
            "subDomain": sub_domain,
            "target": target,
            "ttl": 60,
        }
        return self._next_id

    def targets(self, zone, sub_domain):
        return sorted(
            r["target"] for r in self.records.values() if r["zone"] == zone and r["subDomain"] == sub_domain
        )

    def methods(self):
        return [method for method, _path in self.calls]

    def get(self, path, **params):
        self.calls.append(("GET", path))
        if match := _STATUS.fullmatch(path):
            return {"isDeployed": self.deployed}
        if match := _RECORDS.fullmatch(path):
            return [
                record_id
                for record_id, r in self.records.items()
                if r["zone"] == match.group(1)
                and r["fieldType"] == params.get("fieldType")
                and r["subDomain"] == params.get("subDomain")
            ]
        if match := _RECORD.fullmatch(path):
            record = self.records.get(int(match.group(2)))
            if record is None:
                raise ResourceNotFoundError("This service does not exist")
            return dict(record)
        raise AssertionError(f"unexpected GET {path}")

    def post(self, path, **body):
        self.calls.append(("POST", path))
        if match := _RECORDS.fullmatch(path):
            record_id = self.add(match.group(1), body["subDomain"], body["target"], body["fieldType"])
            self.records[record_id]["ttl"] = body.get("ttl")
            return dict(self.records[record_id])
        if _REFRESH.fullmatch(path):
            return None
        raise AssertionError(f"unexpected POST {path}")

    def delete(self, path):
        self.calls.append(("DELETE", path))
        match = _RECORD.fullmatch(path)
        if match is None or int(match.group(2)) not in self.records:
            raise ResourceNotFoundError("This service does not exist")
        del self.records[int(match.group(2))]


@pytest.fixture
def fake_ovh():
    return FakeOvhApi()
