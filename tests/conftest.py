"""Shared fixtures: canned PUG REST payloads and a fake requests session."""

# Standard Library
import copy
import json

# Third Party
import pytest
import requests


ASPIRIN_RECORD = {
    "id": {"id": {"cid": 2244}},
    "atoms": {"aid": [1, 2, 3, 4, 5], "element": [8, 8, 6, 6, 1]},
    "bonds": [{"aid1": [1, 3], "aid2": [3, 4], "order": [2, 1]}],
    "coords": [
        {
            "type": [1, 5, 255],
            "aid": [1, 2, 3, 4, 5],
            "conformers": [
                {"x": [1.0, 2.0, 3.0, 4.0, 5.0], "y": [1.5, 2.5, 3.5, 4.5, 5.5]},
            ],
        },
    ],
    "props": [
        {
            "urn": {"label": "IUPAC Name", "name": "Preferred", "datatype": 1},
            "value": {"sval": "2-acetyloxybenzoic acid"},
        },
        {"urn": {"label": "Molecular Weight"}, "value": {"fval": 180.16}},
    ],
    "molecular_formula": "C9H8O4",
    "charge": 0,
}


#============================================
class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self.status_code = status_code
        if isinstance(payload, (bytes, str)):
            body = payload
        else:
            body = json.dumps(payload)
        self.content = body.encode() if isinstance(body, str) else body

    @property
    def ok(self):
        return 200 <= self.status_code < 300


#============================================
class FakeSession:
    """Stands in for requests.Session; answers by the last path segment before the suffix."""

    def __init__(self, responses=None, error=None):
        self.responses = responses or {}
        self.error = error
        self.calls = []
        self.closed = False

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        for name, response in self.responses.items():
            if f"/{name}/" in url:
                return response
        return FakeResponse({"Fault": {"Code": "PUGREST.NotFound"}}, status_code=404)

    def close(self):
        self.closed = True


#============================================
@pytest.fixture
def aspirin_record():
    return copy.deepcopy(ASPIRIN_RECORD)


@pytest.fixture
def aspirin_payload(aspirin_record):
    return {"PC_Compounds": [aspirin_record]}


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")
