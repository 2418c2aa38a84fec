"""Pasted spreadsheet text -> list of header-keyed rows.

Text copied out of a spreadsheet app arrives tab-separated; anything else is
treated as comma-separated. Cells are plain strings, there is no quoting.
"""
import re, logging
from typing import Dict, List

log = logging.getLogger(__name__)

_LINE_SPLIT = re.compile(r"\r?\n")
MIN_TAB_COLUMNS = 3


def sniff_delimiter(first_line: str) -> str:
    if len(first_line.split("\t")) < MIN_TAB_COLUMNS:
        return ","
    return "\t"


def parse_spreadsheet(text: str) -> List[Dict[str, str]]:
    if not text.strip(): return []
    lines = _LINE_SPLIT.split(text.strip())
    if len(lines) < 2: return []

    delimiter = sniff_delimiter(lines[0])
    headers = [h.strip() for h in lines[0].split(delimiter)]
    log.debug("delimiter=%r columns=%d lines=%d", delimiter, len(headers), len(lines))

    rows = []
    for line in lines[1:]:
        line = line.strip()
        if not line:
            continue
        values = [v.strip() for v in line.split(delimiter)]
        row = {}
        for idx, header in enumerate(headers):
            row[header] = values[idx] if idx < len(values) else ""
        if any(row.values()):
            rows.append(row)
    return rows
