"""
Typed cell values for updateCells.
The values resource lets the API guess types from USER_ENTERED strings, but
updateCells wants an ExtendedValue with the type spelled out, see
https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/other#extendedvalue
so the type is inferred here from the Python value.
"""
from collections.abc import Iterable
from decimal import Decimal
import datetime
import math
from numbers import Number

from .resources import GridRange

BOOL_VALUE = "boolValue"
NUMBER_VALUE = "numberValue"
FORMULA_VALUE = "formulaValue"
STRING_VALUE = "stringValue"

# day zero of the sheets serial date system
SERIAL_EPOCH = datetime.datetime(1899, 12, 30)

def to_serial(value: datetime.date|datetime.datetime) -> float:
    """
    Spreadsheet serial number for a date or datetime, whole days since
    1899-12-30 plus the time of day as a fraction.  Timezone aware datetimes
    keep their own wall clock time, the sheet has no notion of zones per cell.
    """
    if isinstance(value, datetime.datetime):
        delta = value.replace(tzinfo=None) - SERIAL_EPOCH
    elif isinstance(value, datetime.date):
        delta = datetime.datetime(value.year, value.month, value.day) - SERIAL_EPOCH
    else:
        raise TypeError(f"not a date: {value!r}")
    return delta.days + delta.seconds / 86400 + delta.microseconds / 86400e6

def _finite_number(value) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, Number) and not isinstance(value, complex):
        try:
            return math.isfinite(value)
        except (TypeError, ValueError, OverflowError):
            return False
    return False

def value_type(value) -> str:
    """
    The ExtendedValue key for a value.  Every value maps to exactly one:
        True/False                      -> boolValue
        finite number, date, datetime   -> numberValue
        str starting with '='           -> formulaValue
        anything else, None included    -> stringValue
    bool is checked first as it is an int subclass.
    """
    if isinstance(value, bool):
        return BOOL_VALUE
    if isinstance(value, (datetime.date, datetime.datetime)):
        return NUMBER_VALUE
    if _finite_number(value):
        return NUMBER_VALUE
    if isinstance(value, str) and value.startswith("="):
        return FORMULA_VALUE
    return STRING_VALUE

def extended_value(value) -> dict:
    t = value_type(value)
    if t == BOOL_VALUE:
        v = value
    elif t == NUMBER_VALUE:
        if isinstance(value, (datetime.date, datetime.datetime)):
            v = to_serial(value)
        elif isinstance(value, int):
            v = value
        else:
            v = float(value)
    elif t == FORMULA_VALUE:
        v = value
    else:
        v = "" if value is None else str(value)
    return {t: v}

def cell_data(value) -> dict:
    """CellData carrying just the entered value"""
    return {"userEnteredValue": extended_value(value)}

def as_rows(values) -> list[list]:
    """
    Normalize to a list of rows, each a list.  A flat sequence is a single
    row and a lone scalar a single cell.  Iterators are consumed here, so
    normalize once and pass the result on when the values are walked twice.
    """
    if values is None:
        return []
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        return [[values]]
    rows = list(values)
    if rows and all(isinstance(r, (str, bytes)) or not isinstance(r, Iterable) for r in rows):
        return [rows]
    return [[r] if isinstance(r, (str, bytes)) or not isinstance(r, Iterable) else list(r) for r in rows]

def row_data(values) -> list[dict]:
    """
    RowData list for updateCells, one entry per row and one cell per column
    with the input order kept.
    """
    return [{"values": [cell_data(v) for v in row]} for row in as_rows(values)]

def dimensions(values) -> tuple[int,int]:
    """(rows, columns) of the value grid, columns being the longest row"""
    rows = as_rows(values)
    return len(rows), max((len(r) for r in rows), default=0)

def grid_range_for(sheetId: int, values, startRow: int = 0, startColumn: int = 0) -> GridRange:
    """
    The GridRange a value grid covers when written from (startRow, startColumn).
    End indexes are start plus the grid dimensions.
    """
    if startRow < 0 or startColumn < 0:
        raise ValueError("start row and column must be >= 0")
    nrows, ncols = dimensions(values)
    return GridRange(sheetId=sheetId,
                     startRowIndex=startRow, endRowIndex=startRow + nrows,
                     startColumnIndex=startColumn, endColumnIndex=startColumn + ncols)
