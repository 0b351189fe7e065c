"""JSON report writer for parsed message records."""

import dataclasses
import json
import math
from enum import Enum
from pathlib import Path
from typing import TextIO, Union

from dynamsg.models import MessagRecord


def record_to_dict(record: MessagRecord) -> dict:
    """Convert a MessagRecord to a JSON-serializable dictionary."""

    def convert(obj):
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return {f.name: convert(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
        elif isinstance(obj, list):
            return [convert(item) for item in obj]
        elif isinstance(obj, Enum):
            return obj.value
        elif isinstance(obj, float) and not math.isfinite(obj):
            return None
        elif isinstance(obj, Path):
            return str(obj)
        return obj

    return convert(record)


def records_to_list(records: list[MessagRecord]) -> list[dict]:
    return [record_to_dict(r) for r in records]


def write_json_report(records: list[MessagRecord], target: Union[Path, TextIO]):
    """Write the records as a JSON array to a path or an open text stream."""
    data = records_to_list(records)
    if isinstance(target, (str, Path)):
        with open(target, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False, allow_nan=False)
            f.write("\n")
    else:
        json.dump(data, target, indent=2, ensure_ascii=False, allow_nan=False)
        target.write("\n")
