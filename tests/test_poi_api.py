import sys
from io import BytesIO
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

from fastapi.testclient import TestClient
from openpyxl import load_workbook

from core.exceptions import ExternalApiError
from main import app
from modules.coord_transform import wgs84_to_gcj02
from modules.poi import PoiNode

client = TestClient(app)


def _sample_pois():
    return [
        {"id": 1, "lat": 29.5690, "lon": 106.5860, "tags": {"name": "朝天门", "name:en": "Chaotianmen"}},
        {"id": "hyd", "lat": 29.5635, "lon": 106.5794, "tags": {"name": "洪崖洞"}},
    ]


def test_list_core_pois_converts_from_source_system(monkeypatch):
    calls = {}

    def _fake_fetch(base_url=None, limit=None, timeout=None):
        calls["limit"] = limit
        return [PoiNode(**item) for item in _sample_pois()]

    monkeypatch.setattr("router.pois.fetch_core_pois", _fake_fetch)
    monkeypatch.setattr("router.pois.settings.poi_source_coord_system", "wgs84")
    monkeypatch.setattr("router.pois.settings.gcj02_inverse_mode", "approximate")

    resp = client.get("/api/v1/pois", params={"coord_type": "gcj02", "limit": 20})
    assert resp.status_code == 200
    data = resp.json()
    assert data["count"] == 2
    assert data["coord_type"] == "gcj02"
    assert calls["limit"] == 20

    lat, lon = wgs84_to_gcj02(29.5690, 106.5860)
    assert abs(data["pois"][0]["lat"] - lat) < 1e-12
    assert abs(data["pois"][0]["lon"] - lon) < 1e-12
    assert data["pois"][0]["tags"]["name:en"] == "Chaotianmen"


def test_list_core_pois_same_system_is_passthrough(monkeypatch):
    monkeypatch.setattr(
        "router.pois.fetch_core_pois",
        lambda base_url=None, limit=None, timeout=None: [PoiNode(**item) for item in _sample_pois()],
    )
    monkeypatch.setattr("router.pois.settings.poi_source_coord_system", "wgs84")

    data = client.get("/api/v1/pois", params={"coord_type": "wgs84"}).json()
    assert data["pois"][1]["lat"] == 29.5635
    assert data["pois"][1]["lon"] == 106.5794


def test_list_core_pois_upstream_failure_maps_to_502(monkeypatch):
    def _failing_fetch(base_url=None, limit=None, timeout=None):
        raise ExternalApiError("POI 数据源请求失败", original_error="timeout")

    monkeypatch.setattr("router.pois.fetch_core_pois", _failing_fetch)

    resp = client.get("/api/v1/pois")
    assert resp.status_code == 502
    data = resp.json()
    assert data["status"] == "error"
    assert data["detail"]["original_error"] == "timeout"


def test_convert_poi_list():
    resp = client.post(
        "/api/v1/pois/convert",
        json={"pois": _sample_pois(), "from_type": "wgs84", "to_type": "gcj02"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["count"] == 2
    assert data["pois"][1]["id"] == "hyd"

    lat, lon = wgs84_to_gcj02(29.5635, 106.5794)
    assert abs(data["pois"][1]["lat"] - lat) < 1e-12
    assert abs(data["pois"][1]["lon"] - lon) < 1e-12


def test_export_poi_list_stream():
    resp = client.post(
        "/api/v1/pois/export",
        json={"pois": _sample_pois(), "from_type": "wgs84", "to_type": "gcj02"},
    )
    assert resp.status_code == 200
    assert "spreadsheetml" in resp.headers["content-type"]
    assert 'filename="pois_gcj02.xlsx"' in resp.headers["content-disposition"]

    ws = load_workbook(BytesIO(resp.content)).active
    rows = list(ws.iter_rows(values_only=True))
    assert len(rows) == 3
    assert rows[1][1] == "Chaotianmen"


if __name__ == "__main__":
    test_convert_poi_list()
    test_export_poi_list_stream()
    print("POI API tests passed.")
