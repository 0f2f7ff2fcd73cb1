"""
Tests for the HTTP client (requests is stubbed out)
"""

import pytest
import requests

from opal.server import client as client_module
from opal.server.client import OpalClient


class FakeResponse:
    def __init__(self, data, status_code=200):
        self.data = data
        self.status_code = status_code

    def json(self):
        return self.data

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_augment_posts_payload(monkeypatch):
    calls = []

    def fake_post(url, json=None, timeout=None):
        calls.append((url, json))
        return FakeResponse({"success": True, "result": {"contract": "UpdatedNFTFactory"}})

    monkeypatch.setattr(client_module.requests, "post", fake_post)

    result = OpalClient("http://opal.local/").augment("contracts/NFTFactory.sol", "erc721")

    assert result == {"contract": "UpdatedNFTFactory"}
    assert calls == [("http://opal.local/api/augment", {
        "file_path": "contracts/NFTFactory.sol",
        "profile": "erc721",
        "output_dir": None,
        "dry_run": False
    })]


def test_failed_augmentation_raises(monkeypatch):
    monkeypatch.setattr(
        client_module.requests, "post",
        lambda url, json=None, timeout=None: FakeResponse({"success": False, "error": "no declaration"})
    )

    with pytest.raises(RuntimeError, match="no declaration"):
        OpalClient().preview("library L {}", "erc721")


def test_http_error_raises(monkeypatch):
    monkeypatch.setattr(
        client_module.requests, "post",
        lambda url, json=None, timeout=None: FakeResponse({"detail": "File not found"}, 404)
    )

    with pytest.raises(requests.HTTPError):
        OpalClient().augment("missing.sol", "erc721")


def test_list_profiles(monkeypatch):
    monkeypatch.setattr(
        client_module.requests, "get",
        lambda url, timeout=None: FakeResponse({"profiles": [{"family": "erc721"}]})
    )

    assert OpalClient().list_profiles() == [{"family": "erc721"}]
