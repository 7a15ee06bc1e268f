"""
A1 notation helpers.
See https://developers.google.com/sheets/api/guides/concepts#cell
The values resource addresses ranges by A1 string while batchUpdate uses
zero-based GridRange indexes, these translate between the two.

A general A1 has the form:

    <title>!<start col><start row>:<end col><end row>

Rows are 1-based integers and columns are letters A-ZZZ.  The title may be
quoted with single quotes if it has spaces or other non alphanumerics, and
a missing title means the first sheet.
"""
import re

from . import GoogleSheetsMaxColumns
from .resources import GridRange

# title is everything up to the last '!' outside of quotes
_A1_SPLIT_RE = re.compile(r"^\s*(?:(?P<sheet>'(?:[^']|'')+'|[^'!]+)!)?(?P<cells>[^!]*)\s*$")
_A1_CELLS_RE = re.compile(r"^(?P<start_col>[A-Za-z]{0,3})(?P<start_row>\d*)(?::(?P<end_col>[A-Za-z]{0,3})(?P<end_row>\d*))?$")
_PLAIN_TITLE_RE = re.compile(r"^[A-Za-z_]\w*$")

def col_to_int(column: str) -> int:
    """
    'A' -> 1, 'Z' -> 26, 'AA' -> 27.  1-based, 0 means not a column.
    """
    c = str(column).upper()
    if not re.match(r"^[A-Z]{1,3}$", c):
        return 0
    num = 0
    for ch in c:
        num = num * 26 + (ord(ch) - 64)
    return num

def int_to_col(index: int) -> str:
    """
    1 -> 'A', 27 -> 'AA'.  1-based, empty string if out of range.
    """
    i = int(index)
    if i < 1 or i > GoogleSheetsMaxColumns:
        return ""
    col = ""
    while i:
        i, r = divmod(i - 1, 26)
        col = chr(r + 65) + col
    return col

def quote_title(title: str) -> str:
    """
    Sheet titles with anything other than plain word characters need
    single quotes, with embedded quotes doubled.
    """
    t = str(title)
    if not t or _PLAIN_TITLE_RE.match(t):
        return t
    if len(t) > 1 and t[0] == "'" and t[-1] == "'":
        return t
    return "'" + t.replace("'", "''") + "'"

def unquote_title(title: str) -> str:
    t = str(title)
    if len(t) > 1 and t[0] == "'" and t[-1] == "'":
        return t[1:-1].replace("''", "'")
    return t

def split_a1(a1: str) -> tuple[str,str]:
    """
    Split into (unquoted title, cells).  Either can be empty, a lone
    title with no '!' is treated as the whole sheet.
    """
    a = str(a1).strip()
    m = _A1_SPLIT_RE.match(a)
    if not m:
        raise ValueError(f"invalid A1 notation: {a1}")
    sheet = m.group("sheet") or ""
    cells = m.group("cells") or ""
    if not sheet and cells and not _is_cells(cells):
        # just a title
        sheet, cells = cells, ""
    elif cells and not _is_cells(cells):
        raise ValueError(f"invalid A1 notation: {a1}")
    return unquote_title(sheet), cells.upper()

def _is_cells(cells: str) -> bool:
    m = _A1_CELLS_RE.match(cells)
    if not m:
        return False
    if ":" not in cells:
        # a lone reference has to be a single cell like B7
        return bool(m.group("start_col")) and bool(m.group("start_row"))
    return bool(m.group("start_col") or m.group("start_row"))

def join_a1(title: str, cells: str = "") -> str:
    t = quote_title(title)
    if not t:
        return cells
    return f"{t}!{cells}" if cells else t

def grid_range_to_a1(grid: GridRange, title: str = "") -> str:
    """
    Zero-based, end exclusive GridRange to the A1 string covering the same
    cells.  Whole rows give '1:5' and whole columns 'B:D'.  An open end
    runs to the last row (no end row) or to column ZZZ, e.g. rows from the
    third on give 'A3:ZZZ' as '3:' isn't valid A1.
    """
    sr = grid.startRowIndex
    er = grid.endRowIndex
    sc = grid.startColumnIndex
    ec = grid.endColumnIndex
    last_col = int_to_col(GoogleSheetsMaxColumns)
    if sr is None and er is None and sc is None and ec is None:
        cells = ""
    elif sr is None and er is None:
        cells = f"{int_to_col((sc or 0) + 1)}:{int_to_col(ec) if ec is not None else last_col}"
    elif sc is None and ec is None and er is not None:
        cells = f"{(sr or 0) + 1}:{er}"
    else:
        start = f"{int_to_col((sc or 0) + 1)}{(sr or 0) + 1}"
        end = (int_to_col(ec) if ec is not None else last_col) + (str(er) if er is not None else "")
        cells = start if end == start else f"{start}:{end}"
    return join_a1(title, cells)
