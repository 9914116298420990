import argparse
import requests


# 朝天门（重庆）
SAMPLE_LAT = 29.5690
SAMPLE_LON = 106.5860


def build_sample_polygon():
    d = 0.01
    return [
        [SAMPLE_LON - d, SAMPLE_LAT - d],
        [SAMPLE_LON + d, SAMPLE_LAT - d],
        [SAMPLE_LON + d, SAMPLE_LAT + d],
        [SAMPLE_LON - d, SAMPLE_LAT + d],
        [SAMPLE_LON - d, SAMPLE_LAT - d],
    ]


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--base-url", default="http://127.0.0.1:8000")
    parser.add_argument("--from-type", choices=["gcj02", "wgs84"], default="wgs84")
    parser.add_argument("--to-type", choices=["gcj02", "wgs84"], default="gcj02")
    parser.add_argument("--inverse-mode", choices=["approximate", "iterative"], default=None)
    args = parser.parse_args()

    base_url = args.base_url.rstrip("/")
    payload = {
        "lat": SAMPLE_LAT,
        "lon": SAMPLE_LON,
        "from_type": args.from_type,
        "to_type": args.to_type,
        "inverse_mode": args.inverse_mode,
    }

    resp = requests.post(base_url + "/api/v1/coords/convert", json=payload, timeout=20)
    print("status:", resp.status_code)
    resp.raise_for_status()
    data = resp.json()
    print("point:", data.get("lat"), data.get("lon"), "in_china:", data.get("in_china"))

    geometry_payload = {
        "geometry": {"type": "Polygon", "coordinates": [build_sample_polygon()]},
        "from_type": args.from_type,
        "to_type": args.to_type,
        "inverse_mode": args.inverse_mode,
    }
    resp = requests.post(base_url + "/api/v1/coords/geometry", json=geometry_payload, timeout=20)
    print("status:", resp.status_code)
    resp.raise_for_status()
    ring = resp.json()["geometry"]["coordinates"][0]
    print("ring_first:", ring[0])


if __name__ == "__main__":
    main()
