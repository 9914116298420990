"""
WGS-84 与 GCJ-02（火星坐标系）之间的坐标转换。

参数与返回值统一为 (lat, lon) 顺序；GeoJSON 的 [lng, lat] 顺序由 geometry 模块处理。
"""

import math
from typing import Callable, Literal, NamedTuple

CoordType = Literal["wgs84", "gcj02"]
InverseMode = Literal["approximate", "iterative"]

# Krasovsky 1940 椭球参数
A = 6378245.0
EE = 0.00669342162296594323


class Coordinate(NamedTuple):
    lat: float
    lon: float


def wgs84_to_gcj02(lat, lon):
    """
    将WGS84坐标系转换为GCJ-02坐标系（火星坐标系）
    :param lat: WGS84坐标系的纬度
    :param lon: WGS84坐标系的经度
    :return: 转换后的GCJ-02坐标 Coordinate(lat, lon)
    """
    if out_of_china(lat, lon):
        # 若坐标点不在中国范围内，直接返回原坐标
        return Coordinate(lat, lon)

    # 计算转换偏移量
    dlat = transform_lat(lon - 105.0, lat - 35.0)
    dlon = transform_lon(lon - 105.0, lat - 35.0)

    # 将纬度转换为弧度
    radlat = lat / 180.0 * math.pi
    magic = math.sin(radlat)
    magic = 1 - EE * magic * magic
    sqrtmagic = math.sqrt(magic)

    # 计算经度和纬度的偏移量
    dlat = (dlat * 180.0) / ((A * (1 - EE)) / (magic * sqrtmagic) * math.pi)
    dlon = (dlon * 180.0) / (A / sqrtmagic * math.cos(radlat) * math.pi)

    return Coordinate(lat + dlat, lon + dlon)


def gcj02_to_wgs84(lat, lon):
    """
    将GCJ-02坐标系近似反推为WGS84坐标系（单步法）。

    把输入点当作 WGS84 点求一次偏移量，再从输入中减去该偏移量。
    结果存在亚米到数米的残差，地图图层按此误差特性对齐，不要替换为精确反算。

    :param lat: GCJ-02 坐标系的纬度
    :param lon: GCJ-02 坐标系的经度
    :return: 反推后的 WGS84 坐标 Coordinate(lat, lon)
    """
    if out_of_china(lat, lon):
        return Coordinate(lat, lon)

    gcj = wgs84_to_gcj02(lat, lon)
    dlat = gcj.lat - lat
    dlon = gcj.lon - lon
    return Coordinate(lat - dlat, lon - dlon)


def gcj02_to_wgs84_iterative(lat, lon, max_iter=10, threshold=1e-6):
    """
    将GCJ-02坐标系反推为WGS84坐标系（迭代法）。

    :param lat: GCJ-02 坐标系的纬度
    :param lon: GCJ-02 坐标系的经度
    :param max_iter: 最大迭代次数
    :param threshold: 收敛阈值（度）
    :return: 反推后的 WGS84 坐标 Coordinate(lat, lon)
    """
    if out_of_china(lat, lon):
        return Coordinate(lat, lon)

    guess_lat, guess_lon = lat, lon
    for _ in range(max_iter):
        calc_lat, calc_lon = wgs84_to_gcj02(guess_lat, guess_lon)
        d_lat = calc_lat - lat
        d_lon = calc_lon - lon
        if abs(d_lat) < threshold and abs(d_lon) < threshold:
            break
        guess_lat -= d_lat
        guess_lon -= d_lon

    return Coordinate(guess_lat, guess_lon)


def converter_for(
    from_type: CoordType,
    to_type: CoordType,
    inverse_mode: InverseMode = "approximate",
) -> Callable[[float, float], Coordinate]:
    """
    Pick the (lat, lon) -> Coordinate function for a datum pair.

    Raises ValueError for unknown datum names or inverse modes.
    """
    if from_type not in ("wgs84", "gcj02") or to_type not in ("wgs84", "gcj02"):
        raise ValueError(f"Unsupported coordinate system pair: {from_type} -> {to_type}")
    if from_type == to_type:
        return Coordinate
    if to_type == "gcj02":
        return wgs84_to_gcj02
    if inverse_mode == "approximate":
        return gcj02_to_wgs84
    if inverse_mode == "iterative":
        return gcj02_to_wgs84_iterative
    raise ValueError(f"Unsupported inverse mode: {inverse_mode}")


def convert_coordinate(
    lat: float,
    lon: float,
    from_type: CoordType,
    to_type: CoordType,
    inverse_mode: InverseMode = "approximate",
) -> Coordinate:
    """
    Convert a single point between coordinate systems.
    """
    return converter_for(from_type, to_type, inverse_mode)(lat, lon)


def transform_lat(x, y):
    """
    计算纬度偏移量的辅助函数
    """
    ret = -100.0 + 2.0 * x + 3.0 * y + 0.2 * y * y + 0.1 * x * y + 0.2 * math.sqrt(abs(x))
    ret += (20.0 * math.sin(6.0 * x * math.pi) + 20.0 * math.sin(2.0 * x * math.pi)) * 2.0 / 3.0
    ret += (20.0 * math.sin(y * math.pi) + 40.0 * math.sin(y / 3.0 * math.pi)) * 2.0 / 3.0
    ret += (160.0 * math.sin(y / 12.0 * math.pi) + 320 * math.sin(y * math.pi / 30.0)) * 2.0 / 3.0
    return ret


def transform_lon(x, y):
    """
    计算经度偏移量的辅助函数
    """
    ret = 300.0 + x + 2.0 * y + 0.1 * x * x + 0.1 * x * y + 0.1 * math.sqrt(abs(x))
    ret += (20.0 * math.sin(6.0 * x * math.pi) + 20.0 * math.sin(2.0 * x * math.pi)) * 2.0 / 3.0
    ret += (20.0 * math.sin(x * math.pi) + 40.0 * math.sin(x / 3.0 * math.pi)) * 2.0 / 3.0
    ret += (150.0 * math.sin(x / 12.0 * math.pi) + 300.0 * math.sin(x / 30.0 * math.pi)) * 2.0 / 3.0
    return ret


def out_of_china(lat, lon):
    """
    判断坐标点是否在中国范围（粗略矩形）之外
    """
    return lon < 72.004 or lon > 137.8347 or lat < 0.8293 or lat > 55.8271
