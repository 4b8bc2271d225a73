"""Tests for the FastAPI endpoints."""

import pytest
from fastapi.testclient import TestClient

from dimension.core.resolver import default_resolver
from dimension.main import app

client = TestClient(app)


class TestHealthEndpoint:
    def test_health(self):
        r = client.get("/api/health")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"


class TestUnitsEndpoint:
    def test_lists_units(self):
        r = client.get("/api/units")
        assert r.status_code == 200
        data = r.json()
        assert "mm" in data["units"]
        assert "arcsec" in data["units"]
        assert data["units"] == sorted(data["units"])
        assert data["aliases"]["°"] == "deg"
        assert data["anchor_unit"] == "mm"


class TestParseEndpoint:
    def test_valid_literal(self):
        r = client.post("/api/parse", json={"text": "2.5in"})
        assert r.status_code == 200
        assert r.json() == {"value": 2.5, "unit": "in"}

    def test_alias_is_canonical(self):
        r = client.post("/api/parse", json={"text": "5um"})
        assert r.status_code == 200
        assert r.json()["unit"] == "µ"

    def test_empty_text(self):
        r = client.post("/api/parse", json={"text": "  "})
        assert r.status_code == 422

    def test_invalid_literal(self):
        r = client.post("/api/parse", json={"text": "five inches"})
        assert r.status_code == 422
        assert r.json()["detail"][0]["text"] == "five inches"


class TestConvertEndpoint:
    def test_convert_literal(self):
        r = client.post("/api/convert", json={"dimension": "1in", "to_unit": "mm"})
        assert r.status_code == 200
        data = r.json()
        assert data["value"] == pytest.approx(25.4)
        assert data["unit"] == "mm"
        assert data["text"] == "25.4mm"
        assert data["indirect"] is False

    def test_convert_record_with_digits(self):
        r = client.post("/api/convert", json={
            "dimension": {"value": 2.125, "unit": "in"},
            "to_unit": "mm",
            "digits": 2,
        })
        assert r.status_code == 200
        assert r.json()["text"] == "53.97mm"

    def test_indirect_conversion(self):
        r = client.post("/api/convert", json={"dimension": "1km", "to_unit": "m"})
        assert r.status_code == 200
        data = r.json()
        assert data["value"] == pytest.approx(1000)
        assert data["indirect"] is True

    def test_no_conversion_path(self):
        r = client.post("/api/convert", json={"dimension": "1furlong", "to_unit": "mm"})
        assert r.status_code == 422
        detail = r.json()["detail"][0]
        assert detail["from_unit"] == "furlong"
        assert detail["to_unit"] == "mm"

    def test_invalid_literal(self):
        r = client.post("/api/convert", json={"dimension": "abc", "to_unit": "mm"})
        assert r.status_code == 422

    def test_digits_out_of_range(self):
        r = client.post("/api/convert", json={"dimension": "1in", "to_unit": "mm", "digits": 101})
        assert r.status_code == 422

    def test_non_finite_input_rejected(self):
        r = client.post(
            "/api/convert",
            content='{"dimension": {"value": Infinity, "unit": "in"}, "to_unit": "mm"}',
            headers={"Content-Type": "application/json"},
        )
        assert r.status_code == 422

    def test_resolves_once(self, monkeypatch):
        calls = []
        resolve = default_resolver.resolve

        def counting_resolve(*args, **kwargs):
            calls.append(args)
            return resolve(*args, **kwargs)

        monkeypatch.setattr(default_resolver, "resolve", counting_resolve)
        r = client.post("/api/convert", json={"dimension": "1km", "to_unit": "m", "digits": 1})
        assert r.status_code == 200
        assert r.json()["text"] == "1000.0m"
        assert r.json()["indirect"] is True
        assert calls == [("km", "m")]
