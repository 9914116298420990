"""
CSV 批量坐标转换：WGS84 <-> GCJ-02。

用法:
    python scripts/convert_csv.py points.csv --from wgs84 --to gcj02
    python scripts/convert_csv.py track.csv --lat-col latitude --lon-col longitude -o out.csv
"""

import argparse
import csv
import logging
import sys
from pathlib import Path
from typing import Dict, Optional

sys.path.append(str(Path(__file__).resolve().parent.parent))

from modules.coord_transform import convert_coordinate

logger = logging.getLogger(__name__)


def _to_float(value) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def convert_row(
    row: Dict[str, str],
    lat_col: str,
    lon_col: str,
    from_type: str,
    to_type: str,
    inverse_mode: str = "approximate",
) -> Dict[str, str]:
    raw_lat = _to_float(row.get(lat_col))
    raw_lon = _to_float(row.get(lon_col))
    if raw_lat is None or raw_lon is None:
        return dict(row)

    lat, lon = convert_coordinate(raw_lat, raw_lon, from_type, to_type, inverse_mode)
    converted = dict(row)
    converted[lat_col] = repr(lat)
    converted[lon_col] = repr(lon)
    return converted


def convert_csv(
    input_path: Path,
    output_path: Path,
    lat_col: str = "lat",
    lon_col: str = "lon",
    from_type: str = "wgs84",
    to_type: str = "gcj02",
    inverse_mode: str = "approximate",
) -> int:
    """
    转换 CSV 文件中的坐标列，返回写出的行数。坐标无法解析的行原样写出。
    """
    with input_path.open("r", encoding="utf-8-sig", newline="") as f_in:
        reader = csv.DictReader(f_in)
        fieldnames = reader.fieldnames or []
        missing = [col for col in (lat_col, lon_col) if col not in fieldnames]
        if missing:
            raise ValueError(f"CSV 缺少坐标列: {', '.join(missing)}")

        output_path.parent.mkdir(parents=True, exist_ok=True)
        count = 0
        with output_path.open("w", encoding="utf-8", newline="") as f_out:
            writer = csv.DictWriter(f_out, fieldnames=fieldnames)
            writer.writeheader()
            for row in reader:
                writer.writerow(convert_row(row, lat_col, lon_col, from_type, to_type, inverse_mode))
                count += 1

    logger.info("Converted %s rows -> %s", count, output_path)
    return count


def main(argv=None):
    parser = argparse.ArgumentParser(description="CSV 坐标转换（WGS84 <-> GCJ-02）")
    parser.add_argument("input", type=Path)
    parser.add_argument("-o", "--output", type=Path, default=None)
    parser.add_argument("--from", dest="from_type", choices=["wgs84", "gcj02"], default="wgs84")
    parser.add_argument("--to", dest="to_type", choices=["wgs84", "gcj02"], default="gcj02")
    parser.add_argument("--lat-col", default="lat")
    parser.add_argument("--lon-col", default="lon")
    parser.add_argument("--inverse-mode", choices=["approximate", "iterative"], default="approximate")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s'
    )

    output = args.output or args.input.with_name(f"{args.input.stem}_{args.to_type}{args.input.suffix}")
    count = convert_csv(
        args.input,
        output,
        lat_col=args.lat_col,
        lon_col=args.lon_col,
        from_type=args.from_type,
        to_type=args.to_type,
        inverse_mode=args.inverse_mode,
    )
    print(f"rows: {count}")
    print(f"output: {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
