"""Invoice export/import codecs (JSON and CSV)."""

from src.infrastructure.transfer import csv_codec, json_codec

__all__ = ["csv_codec", "json_codec"]
