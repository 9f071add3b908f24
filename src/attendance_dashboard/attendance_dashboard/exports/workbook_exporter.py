from __future__ import annotations

import io
from typing import Iterable

import pandas as pd
from openpyxl.utils import get_column_letter

from ..core.constants import EXPORT_COLUMNS, WORKSHEET_TITLE
from .model import ExportRow

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def to_dataframe(rows: Iterable[ExportRow]) -> pd.DataFrame:
    headers = [header for _, header, _ in EXPORT_COLUMNS]
    return pd.DataFrame([row.values() for row in rows], columns=headers, dtype=str)


def to_workbook(rows: Iterable[ExportRow]) -> bytes:
    """Single-sheet xlsx, same columns as the CSV export."""
    df = to_dataframe(rows)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=WORKSHEET_TITLE)

        ws = writer.sheets[WORKSHEET_TITLE]
        for idx, (_, _, width) in enumerate(EXPORT_COLUMNS, start=1):
            ws.column_dimensions[get_column_letter(idx)].width = width

    return output.getvalue()
