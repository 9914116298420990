"""
工具函数入口：统一对外暴露常用方法。
"""

from .exporter import export_pois_to_xlsx

__all__ = [
    "export_pois_to_xlsx",
]
