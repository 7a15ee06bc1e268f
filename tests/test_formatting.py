import pytest

from gsheetsreq.sheets import formatting
from gsheetsreq.sheets.resources import GridRange, Color

RANGE = GridRange(sheetId=2, startRowIndex=0, endRowIndex=1, startColumnIndex=0, endColumnIndex=4)
RANGE_BASE = {"sheetId": 2, "startRowIndex": 0, "endRowIndex": 1, "startColumnIndex": 0, "endColumnIndex": 4}

def test_wrap():
    r = formatting.wrap(RANGE).to_request()
    assert(r == {"repeatCell": {"range": RANGE_BASE,
                                "cell": {"userEnteredFormat": {"wrapStrategy": "WRAP"}},
                                "fields": "userEnteredFormat.wrapStrategy"}})
    r = formatting.wrap(RANGE, "overflow").to_request()
    assert(r["repeatCell"]["cell"]["userEnteredFormat"]["wrapStrategy"] == "OVERFLOW_CELL")
    with pytest.raises(ValueError):
        formatting.wrap(RANGE, "SHRINK")

def test_bold():
    r = formatting.bold(RANGE).to_request()["repeatCell"]
    assert(r["cell"] == {"userEnteredFormat": {"textFormat": {"bold": True}}})
    assert(r["fields"] == "userEnteredFormat.textFormat.bold")
    # False is a value and has to be sent
    r = formatting.bold(RANGE, False).to_request()["repeatCell"]
    assert(r["cell"] == {"userEnteredFormat": {"textFormat": {"bold": False}}})

def test_number_format():
    r = formatting.number_format(RANGE, "date", "yyyy-mm-dd").to_request()["repeatCell"]
    assert(r["cell"] == {"userEnteredFormat": {"numberFormat": {"type": "DATE", "pattern": "yyyy-mm-dd"}}})
    assert(r["fields"] == "userEnteredFormat.numberFormat")
    r = formatting.number_format(RANGE, "PERCENT").to_request()["repeatCell"]
    assert(r["cell"] == {"userEnteredFormat": {"numberFormat": {"type": "PERCENT"}}})
    with pytest.raises(ValueError):
        formatting.number_format(RANGE, "ROMAN")

def test_alignment():
    r = formatting.alignment(RANGE, horizontal="center").to_request()["repeatCell"]
    assert(r["cell"] == {"userEnteredFormat": {"horizontalAlignment": "CENTER"}})
    assert(r["fields"] == "userEnteredFormat.horizontalAlignment")
    r = formatting.alignment(RANGE, horizontal="LEFT", vertical="middle").to_request()["repeatCell"]
    assert(r["cell"] == {"userEnteredFormat": {"horizontalAlignment": "LEFT", "verticalAlignment": "MIDDLE"}})
    assert(r["fields"] == "userEnteredFormat.horizontalAlignment,userEnteredFormat.verticalAlignment")
    with pytest.raises(ValueError):
        formatting.alignment(RANGE)
    with pytest.raises(ValueError):
        formatting.alignment(RANGE, vertical="SIDEWAYS")

def test_borders():
    r = formatting.borders(RANGE).to_request()["updateBorders"]
    assert(r["range"] == RANGE_BASE)
    assert(set(r) == {"range", "top", "bottom", "left", "right"})
    assert(r["top"] == {"style": "SOLID"})

    r = formatting.borders(RANGE, "thick", color="#ff0000", innerHorizontal=True).to_request()["updateBorders"]
    assert(set(r) == {"range", "innerHorizontal"})
    assert(r["innerHorizontal"]["style"] == "SOLID_THICK")
    assert(r["innerHorizontal"]["color"] == {"red": 1.0, "green": 0.0, "blue": 0.0})
    with pytest.raises(ValueError):
        formatting.borders(RANGE, "WAVY")

def test_colors():
    assert(Color.from_hex("#fff") == Color(1.0, 1.0, 1.0))
    with pytest.raises(ValueError):
        Color.from_hex("#12")

def test_dimension_sizes():
    r = formatting.row_height(2, 0, 3, 40).to_request()
    assert(r == {"updateDimensionProperties": {
        "range": {"sheetId": 2, "dimension": "ROWS", "startIndex": 0, "endIndex": 3},
        "properties": {"pixelSize": 40},
        "fields": "pixelSize"}})
    r = formatting.column_width(2, 1, 2, 150).to_request()["updateDimensionProperties"]
    assert(r["range"]["dimension"] == "COLUMNS")
    with pytest.raises(ValueError):
        formatting.column_width(2, 1, 2, -1)
    with pytest.raises(ValueError):
        formatting.row_height(2, 3, 3, 10)

def test_auto_resize():
    r = formatting.auto_resize(2).to_request()
    assert(r == {"autoResizeDimensions": {"dimensions": {"sheetId": 2, "dimension": "COLUMNS"}}})

def test_sheet_properties():
    r = formatting.freeze(2, rows=1).to_request()
    assert(r == {"updateSheetProperties": {"properties": {"sheetId": 2, "gridProperties": {"frozenRowCount": 1}},
                                           "fields": "gridProperties.frozenRowCount"}})
    r = formatting.freeze(2, rows=0, columns=2).to_request()["updateSheetProperties"]
    assert(r["properties"]["gridProperties"] == {"frozenRowCount": 0, "frozenColumnCount": 2})
    assert(r["fields"] == "gridProperties.frozenRowCount,gridProperties.frozenColumnCount")
    with pytest.raises(ValueError):
        formatting.freeze(2)
    r = formatting.rename(2, "Totals").to_request()
    assert(r == {"updateSheetProperties": {"properties": {"sheetId": 2, "title": "Totals"}, "fields": "title"}})
