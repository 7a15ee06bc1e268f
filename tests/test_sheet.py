import pytest

from gsheetsreq.exceptions import SheetsUsageError
from gsheetsreq.sheets.sheet import GoogleSheet, _SheetUpdateChain
from gsheetsreq.sheets.spreadsheet import GoogleSpreadSheet
from gsheetsreq.sheets.resources import GridRange
from gsheetsreq.sheets.requests import GoogleSheetsUpdateRequest

from conftest import SPREADSHEET_ID

@pytest.fixture
def spreadsheet(service):
    return GoogleSpreadSheet.open(SPREADSHEET_ID, service)

def test_lookup(spreadsheet):
    assert(len(spreadsheet) == 2)
    assert(spreadsheet.title == "Budget")
    assert("Summary" in spreadsheet)
    assert(1234 in spreadsheet)
    assert("Nope" not in spreadsheet)
    assert(5 not in spreadsheet)
    assert(spreadsheet["Raw Data"].sheet_id == 1234)
    assert(spreadsheet[1234].title == "Raw Data")
    assert(spreadsheet.sheet_by_title("Summary").sheet_id == 0)
    assert(spreadsheet.sheet_by_id(0).title == "Summary")
    with pytest.raises(KeyError):
        spreadsheet["Nope"]
    with pytest.raises(KeyError):
        spreadsheet.sheet_by_id(77)

def test_unconnected():
    ss = GoogleSpreadSheet()
    assert(not ss)
    assert(ss.title == "unconnected")
    assert(len(ss) == 0)

def test_sheet_properties(spreadsheet):
    raw = spreadsheet["Raw Data"]
    assert(raw)
    assert(raw.is_grid)
    assert(raw.dimensions == (50, 5))
    assert(len(raw) == 250)
    assert(raw.index == 1)
    assert(raw.a1 == "'Raw Data'")

def test_chain_guard():
    with pytest.raises(SheetsUsageError):
        _SheetUpdateChain(None)

def test_chain_builds_one_batch(spreadsheet, service):
    summary = spreadsheet["Summary"]
    chain = (summary.updateRequests()
             .writeValues([["Name", "Total"], ["a", "=SUM(B3:B9)"]])
             .bold(summary.grid_range(0, 1))
             .alignment({"startColumnIndex": 1, "endColumnIndex": 2}, horizontal="RIGHT")
             .numberFormat(summary.grid_range(1, 2, 1, 2), "NUMBER", "#,##0.00")
             .wrap()
             .borders(summary.grid_range(0, 2, 0, 2), innerVertical=True)
             .rowHeight(0, 1, 30)
             .columnWidth(0, 1, 200)
             .autoResize())
    assert(len(chain) == 9)
    request = chain.to_request()
    assert(request.includeSpreadsheetInResponse is False)
    body = request.to_base()
    assert([list(r)[0] for r in body["requests"]] == [
        "updateCells", "repeatCell", "repeatCell", "repeatCell", "repeatCell",
        "updateBorders", "updateDimensionProperties", "updateDimensionProperties",
        "autoResizeDimensions"])
    # dict range without a sheetId lands on this sheet
    assert(body["requests"][2]["repeatCell"]["range"] == {"sheetId": 0, "startColumnIndex": 1, "endColumnIndex": 2})
    # no range means the whole sheet
    assert(body["requests"][4]["repeatCell"]["range"] == {"sheetId": 0})

    response = chain.execute()
    assert(response)
    service.spreadsheets.return_value.batchUpdate.assert_called_once()

def test_chain_rejects_other_sheet(spreadsheet):
    summary = spreadsheet["Summary"]
    with pytest.raises(ValueError):
        summary.updateRequests().bold({"sheetId": 1234, "startRowIndex": 0, "endRowIndex": 1})

def test_chain_refreshes_sheet(spreadsheet, service, spreadsheet_response):
    updated = dict(spreadsheet_response)
    updated["sheets"] = [dict(s) for s in spreadsheet_response["sheets"]]
    updated["sheets"][0] = {"properties": {"sheetId": 0, "title": "Totals", "index": 0, "sheetType": "GRID",
                                           "gridProperties": {"rowCount": 1000, "columnCount": 26,
                                                              "frozenRowCount": 1}}}
    service.spreadsheets.return_value.batchUpdate.return_value.execute.return_value = {
        "spreadsheetId": SPREADSHEET_ID, "replies": [{}, {}], "updatedSpreadsheet": updated}
    summary = spreadsheet["Summary"]
    summary.updateRequests().freeze(rows=1).rename("Totals").execute()
    body = service.spreadsheets.return_value.batchUpdate.call_args.kwargs["body"]
    assert(body["includeSpreadsheetInResponse"] is True)
    assert(summary.title == "Totals")
    assert(summary.properties.gridProperties.frozenRowCount == 1)

def test_empty_chain_sends_nothing(spreadsheet, service):
    response = spreadsheet["Summary"].updateRequests().execute()
    assert(response.spreadsheetId == SPREADSHEET_ID)
    service.spreadsheets.return_value.batchUpdate.assert_not_called()

def test_dimension_chain(spreadsheet):
    raw = spreadsheet["Raw Data"]
    chain = (raw.updateRequests()
             .appendDimension(10)
             .appendDimension(0, "COLS")
             .insertDimension(2, 3, "COLUMNS", inheritFromBefore=False)
             .deleteDimension(40))
    body = chain.to_request().to_base()
    assert(body["includeSpreadsheetInResponse"] is True)
    assert(body["requests"][0] == {"appendDimension": {"sheetId": 1234, "dimension": "ROWS", "length": 10}})
    assert(body["requests"][1]["insertDimension"]["range"] == {"sheetId": 1234, "dimension": "COLUMNS",
                                                              "startIndex": 2, "endIndex": 5})
    assert(body["requests"][2] == {"deleteDimension": {"range": {"sheetId": 1234, "dimension": "ROWS",
                                                                 "startIndex": 40}}})
    with pytest.raises(ValueError):
        raw.updateRequests().appendDimension(-1)
    with pytest.raises(ValueError):
        raw.updateRequests().insertDimension(6, 1, "COLUMNS")
    with pytest.raises(ValueError):
        raw.updateRequests().deleteDimension(0, None, "SIDEWAYS")

def test_sheet_get_values(spreadsheet, service):
    values = service.spreadsheets.return_value.values.return_value
    values.get.return_value.execute.return_value = {"range": "'Raw Data'!A1:B2", "majorDimension": "ROWS",
                                                    "values": [["x"]]}
    raw = spreadsheet["Raw Data"]
    assert(raw.getValues("A1:B2").values == [["x"]])
    assert(values.get.call_args.kwargs["range"] == "'Raw Data'!A1:B2")
    raw.getValues()
    assert(values.get.call_args.kwargs["range"] == "'Raw Data'")
    raw.getValues(raw.grid_range(0, 3, 0, 2))
    assert(values.get.call_args.kwargs["range"] == "'Raw Data'!A1:B3")
    with pytest.raises(ValueError):
        raw.getValues("Summary!A1:B2")
    with pytest.raises(ValueError):
        raw.getValues({"sheetId": 0})

def test_chain_background_and_raw_requests(spreadsheet):
    summary = spreadsheet["Summary"]
    chain = (summary.updateRequests()
             .background(summary.grid_range(0, 1), "#00ff00")
             .add({"sortRange": {"range": {"sheetId": 0}, "sortSpecs": [{"dimensionIndex": 0}]}}))
    body = chain.to_request().to_base()
    cell = body["requests"][0]["repeatCell"]["cell"]
    assert(cell == {"userEnteredFormat": {"backgroundColor": {"red": 0.0, "green": 1.0, "blue": 0.0}}})
    assert(body["requests"][1] == {"sortRange": {"range": {"sheetId": 0}, "sortSpecs": [{"dimensionIndex": 0}]}})

def test_spreadsheet_get_values_by_sheet_id(spreadsheet, service):
    values = service.spreadsheets.return_value.values.return_value
    values.get.return_value.execute.return_value = {}
    values.batchGet.return_value.execute.return_value = {}
    spreadsheet.getValues(GridRange(1234, 0, 2, 0, 2))
    assert(values.get.call_args.kwargs["range"] == "'Raw Data'!A1:B2")
    spreadsheet.batchGetValues([GridRange(0, 1, 2, 1, 2), "'Raw Data'!A:A"])
    assert(values.batchGet.call_args.kwargs["ranges"] == ["Summary!B2", "'Raw Data'!A:A"])
    # sheets already known from open(), nothing fetched again
    assert(service.spreadsheets.return_value.get.call_count == 1)
    with pytest.raises(ValueError):
        spreadsheet.getValues(GridRange(99, 0, 1, 0, 1))

def test_spreadsheet_refreshed_in_place(spreadsheet, service, spreadsheet_response):
    held = spreadsheet.spreadsheet
    renamed = dict(spreadsheet_response, properties={"title": "Budget 2026", "locale": "en_US"})
    service.spreadsheets.return_value.batchUpdate.return_value.execute.return_value = {
        "spreadsheetId": SPREADSHEET_ID, "replies": [{}], "updatedSpreadsheet": renamed}
    spreadsheet.batchUpdate(GoogleSheetsUpdateRequest([{"updateSpreadsheetProperties": {}}], True))
    assert(spreadsheet.spreadsheet is held)
    assert(spreadsheet.title == "Budget 2026")
    assert(len(spreadsheet) == 2)
