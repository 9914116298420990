import json
import sys
from io import BytesIO
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

from openpyxl import load_workbook

from modules.poi import PoiNode
from utils import export_pois_to_xlsx
from utils.exporter import HEADERS


def test_export_pois_to_xlsx_rows():
    pois = [
        PoiNode(id=1, lat=29.5661, lon=106.5897, tags={"name": "朝天门", "name:en": "Chaotianmen"}),
        PoiNode(id="hyd", lat=29.5606, lon=106.5831),
    ]
    filename, content = export_pois_to_xlsx(pois, "gcj02")
    assert filename == "pois_gcj02.xlsx"

    wb = load_workbook(BytesIO(content))
    ws = wb.active
    rows = list(ws.iter_rows(values_only=True))
    assert list(rows[0]) == HEADERS
    assert len(rows) == 3

    first = rows[1]
    assert first[0] == "1"
    assert first[1] == "Chaotianmen"
    assert first[2] == 106.5897
    assert first[3] == 29.5661
    assert first[4] == "gcj02"
    assert json.loads(first[5])["name"] == "朝天门"

    second = rows[2]
    assert second[1] == "Destination"
    assert second[5] in ("", None)


def test_export_empty_list_has_header_only():
    filename, content = export_pois_to_xlsx([], "wgs84")
    assert filename == "pois_wgs84.xlsx"
    ws = load_workbook(BytesIO(content)).active
    assert ws.max_row == 1


if __name__ == "__main__":
    test_export_pois_to_xlsx_rows()
    test_export_empty_list_has_header_only()
    print("Exporter tests passed.")
