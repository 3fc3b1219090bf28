#file: envmonitor/parser.py

import csv
import io
import logging
from typing import List, Optional

import numpy as np
import pandas as pd

from envmonitor.errors import ParseFailure
from envmonitor.models import NUMERIC_COLUMNS, Diagnostic, ParseResult


def _is_blank(fields: List[str]) -> bool:
    return not fields or (len(fields) == 1 and not fields[0].strip())


def _tokenize(text: str) -> List[List[str]]:
    """Split CSV text into rows of fields, skipping blank lines.

    Structural corruption (e.g. an unterminated quote) raises ParseFailure.
    """
    reader = csv.reader(io.StringIO(text), strict=True)
    try:
        return [fields for fields in reader if not _is_blank(fields)]
    except csv.Error as e:
        logging.error(f"CSV parser error on line {reader.line_num}: {e}")
        raise ParseFailure(f"CSV parsing failed: {e} (line {reader.line_num})") from e


def _fit_row(fields: List[str], width: int, row: int, diagnostics: List[Diagnostic]) -> List[Optional[str]]:
    """Cut or pad a row to the header width, reporting any mismatch."""
    if len(fields) > width:
        diagnostics.append(Diagnostic(row=row, code="TooManyFields",
                                      message=f"Row {row} has {len(fields)} fields, expected {width}; extra fields ignored"))
        return fields[:width]
    if len(fields) < width:
        diagnostics.append(Diagnostic(row=row, code="TooFewFields",
                                      message=f"Row {row} has {len(fields)} fields, expected {width}"))
        return fields + [None] * (width - len(fields))
    return fields


def _infer_numbers(frame: pd.DataFrame, diagnostics: List[Diagnostic]) -> pd.DataFrame:
    """Convert numeric columns, nulling cells that are not finite numbers."""
    frame = frame.where(frame.ne(""), None)
    for column in NUMERIC_COLUMNS:
        if column not in frame.columns:
            continue
        raw = frame[column].str.strip()
        values = pd.to_numeric(raw, errors="coerce").astype(float)
        finite = pd.Series(np.isfinite(values), index=values.index)
        invalid = ~finite & raw.notna() & raw.ne("")
        for row in frame.index[invalid]:
            diagnostics.append(Diagnostic(row=int(row), column=column, code="InvalidNumber",
                                          message=f"Unable to parse {raw[row]!r} as a finite number"))
        frame[column] = values.where(finite)
    return frame


def parse_csv(text: str) -> ParseResult:
    """Parse raw CSV text into a dataset plus non-fatal row diagnostics."""
    rows = _tokenize(text)
    if not rows:
        logging.warning("CSV input has no content")
        return ParseResult(frame=pd.DataFrame(), diagnostics=())

    header, body = rows[0], rows[1:]
    diagnostics: List[Diagnostic] = []
    records = [_fit_row(fields, len(header), row, diagnostics) for row, fields in enumerate(body)]
    frame = pd.DataFrame(records, columns=header, dtype=object)
    frame = _infer_numbers(frame, diagnostics)

    if diagnostics:
        logging.warning(f"CSV parsing errors: {[d.message for d in diagnostics]}")
        logging.warning("Some parsing errors occurred, but continuing with available data")
    logging.info(f"CSV parsed: {len(frame)} rows, columns {list(frame.columns)}")
    return ParseResult(frame=frame, diagnostics=tuple(diagnostics))


async def parse_csv_async(text: str) -> ParseResult:
    return parse_csv(text)
