from unittest.mock import MagicMock

import pytest

SPREADSHEET_ID = "ss-123"

def _sheet(sheetId, title, index, rows=1000, cols=26):
    return {"properties": {"sheetId": sheetId, "title": title, "index": index,
                           "sheetType": "GRID",
                           "gridProperties": {"rowCount": rows, "columnCount": cols}}}

@pytest.fixture
def spreadsheet_response():
    return {
        "spreadsheetId": SPREADSHEET_ID,
        "properties": {"title": "Budget", "locale": "en_US"},
        "sheets": [_sheet(0, "Summary", 0), _sheet(1234, "Raw Data", 1, 50, 5)],
        "spreadsheetUrl": "https://docs.google.com/spreadsheets/d/ss-123/edit",
        # a field the dataclasses don't know about
        "someNewField": {"x": 1},
    }

@pytest.fixture
def service(spreadsheet_response):
    """A stand in for googleapiclient's sheets v4 Resource"""
    s = MagicMock()
    spreadsheets = s.spreadsheets.return_value
    spreadsheets.get.return_value.execute.return_value = spreadsheet_response
    spreadsheets.batchUpdate.return_value.execute.return_value = {"spreadsheetId": SPREADSHEET_ID,
                                                                  "replies": [{}]}
    return s
