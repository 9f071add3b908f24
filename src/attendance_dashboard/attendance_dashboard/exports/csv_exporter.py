from __future__ import annotations

import csv
import io
from typing import Iterable

from ..core.constants import EXPORT_COLUMNS
from .model import ExportRow


def to_delimited_text(rows: Iterable[ExportRow]) -> bytes:
    """UTF-8 CSV with BOM; fields quoted only when they contain `,` `"`, CR or LF."""
    out = io.StringIO()
    writer = csv.writer(out, delimiter=",", quotechar='"', quoting=csv.QUOTE_MINIMAL, lineterminator="\r\n")
    writer.writerow([header for _, header, _ in EXPORT_COLUMNS])
    for row in rows:
        writer.writerow(row.values())
    return out.getvalue().encode("utf-8-sig")
