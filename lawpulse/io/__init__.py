"""LawPulse I/O package: dataset ingestion and JSON helpers."""

from lawpulse.io.loader import load_dataset, parse_dataset
from lawpulse.io.persistence import dumps_json, load_json

__all__ = ["dumps_json", "load_dataset", "load_json", "parse_dataset"]
