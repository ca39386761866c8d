from __future__ import annotations

"""Whole-text CSV tokenizer for vendor catalog exports.

The scan runs over the full file content (not line by line) so that quoted
fields may carry embedded commas, line breaks and doubled quotes.

States: Unquoted (initial) / Quoted. Malformed input (an unterminated quote)
never raises; the remainder of the text is read as part of the quoted cell.

Known limitation: a row made of a single empty cell cannot be told apart from
a blank line, and both are dropped. Downstream consumers rely on blank lines
being ignored, so this is kept as is.
"""

__all__ = [
    "Row",
    "parse",
]

Row = list[str]

QUOTE = '"'
DELIMITER = ","
CR = "\r"
LF = "\n"


def _is_blank_row(row: Row) -> bool:
    return len(row) == 1 and row[0] == ""


def parse(content: str) -> list[Row]:
    """Split raw CSV text into rows of string cells.

    Args:
        content: Entire decoded file content

    Returns:
        Rows in source order. Blank lines (and single-empty-cell rows) are
        omitted. A final row without a trailing line terminator is kept.
    """
    rows: list[Row] = []
    row: Row = []
    cell: list[str] = []
    quoted = False

    i = 0
    length = len(content)
    while i < length:
        char = content[i]
        next_char = content[i + 1] if i + 1 < length else ""

        if char == QUOTE:
            if quoted and next_char == QUOTE:
                # escaped quote
                cell.append(QUOTE)
                i += 1
            else:
                quoted = not quoted
        elif char == DELIMITER and not quoted:
            row.append("".join(cell))
            cell = []
        elif (char == CR or char == LF) and not quoted:
            if char == CR and next_char == LF:
                i += 1
            row.append("".join(cell))
            if not _is_blank_row(row):
                rows.append(row)
            row = []
            cell = []
        else:
            cell.append(char)
        i += 1

    # No trailing terminator: flush whatever is pending
    if cell or row:
        row.append("".join(cell))
        rows.append(row)

    return rows
