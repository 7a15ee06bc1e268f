"""
Wrappers around the Sheets v4 API calls.
Each one makes a single blocking call through the bound client, see
access.sheets_binding, or an explicit service= if one is passed.
Nothing is retried, whatever the client raises (HttpError) goes
straight back to the caller.
"""
import logging

from googleapiclient.discovery import Resource

from ..access import get_service
from .resources import *
from .requests import *
from .a1 import grid_range_to_a1

logger = logging.getLogger(__name__)

def _resolve_ranges(spreadsheetId: str, ranges: list,
                    spreadsheet: Spreadsheet|None = None,
                    service: Resource|None = None) -> list[str]:
    """
    A1 strings for the ranges.  A GridRange is addressed by sheetId, which
    A1 can't express, so it gets the title of that sheet.  The spreadsheet
    is only fetched when a GridRange needs it and none was given.
    """
    a1s = []
    for r in ranges:
        if not isinstance(r, (GridRange, dict)):
            a1s.append(str(r))
            continue
        gr = as_grid_range(r)
        title = ""
        if gr.sheetId >= 0:
            if spreadsheet is None:
                spreadsheet = get(spreadsheetId, service=service)
            s = spreadsheet.find_sheet(gr.sheetId)
            if s is None:
                raise ValueError(f"sheetId {gr.sheetId} not in sheets of {spreadsheetId}")
            title = s.properties.title
        a1s.append(grid_range_to_a1(gr, title))
    return a1s

def _render_options(valueRenderOption: str, dateTimeRenderOption: str) -> tuple[str,str]:
    value_render = GoogleSheetsEnum.valueRenderOption(valueRenderOption)
    if not value_render:
        raise ValueError(f"Invalid valueRenderOption value: {valueRenderOption}")
    date_time_render = GoogleSheetsEnum.dateTimeRenderOption(dateTimeRenderOption)
    if not date_time_render and value_render != "FORMATTED_VALUE":
        raise ValueError(f"Invalid dateTimeRenderOption value: {dateTimeRenderOption}")
    return value_render, date_time_render

def get(spreadsheetId: str,
        ranges: list[str]|None = None,
        includeGridData: bool = False,
        service: Resource|None = None) -> Spreadsheet:
    """
    Wrapper for calling the get() spreadsheet method.
    See https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/get
    This is for retrieving spreadsheet properties, sheets included, but can also
    include data if you need it.
    """
    if not spreadsheetId:
        raise ValueError("A spreadsheetId is required")
    kwargs = {"spreadsheetId": spreadsheetId, "includeGridData": includeGridData}
    if ranges:
        kwargs["ranges"] = [str(r) for r in ranges]
    logger.debug("spreadsheets.get %s", spreadsheetId)
    response = get_service(service).spreadsheets().get(**kwargs).execute()
    if response:
        return Spreadsheet.from_base(response)
    return Spreadsheet()

def getSheet(spreadsheetId: str, sheet: str|int,
             service: Resource|None = None) -> Sheet:
    """
    Look up a sheet within a spreadsheet by title (str) or sheetId (int).
    Raises KeyError if there is no such sheet.
    """
    spreadsheet = get(spreadsheetId, service=service)
    found = spreadsheet.find_sheet(sheet)
    if found is None:
        raise KeyError(f"{sheet} not in sheets of {spreadsheetId}")
    return found

def batchUpdate(spreadsheetId: str,
                request: GoogleSheetsUpdateRequest|list|dict,
                service: Resource|None = None) -> GoogleSheetsUpdateRequestResponse:
    """
    Wrapper for calling the batchUpdate() spreadsheet method.
    See https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/batchUpdate
    This is for altering any spreadsheet properties and formatting, and
    updateCells writes.  request can be a full body dict, a
    GoogleSheetsUpdateRequest or just a list of requests.
    """
    if isinstance(request, GoogleSheetsUpdateRequest):
        body = request.to_base()
    elif isinstance(request, GoogleSheetsUpdateRequestBase):
        body = make_request([request])
    elif isinstance(request, list):
        body = make_request(request)
    else:
        body = dict(request)
    if not body.get("requests"):
        logger.debug("batchUpdate %s with no requests, skipping", spreadsheetId)
        return GoogleSheetsUpdateRequestResponse(spreadsheetId)
    logger.debug("spreadsheets.batchUpdate %s: %d request(s)", spreadsheetId, len(body["requests"]))
    response = get_service(service).spreadsheets().batchUpdate(spreadsheetId=spreadsheetId, body=body).execute()
    if response:
        return GoogleSheetsUpdateRequestResponse.from_base(response)
    return GoogleSheetsUpdateRequestResponse()

def getValues(spreadsheetId: str,
              range: str|GridRange|dict,
              dimension: str = "ROWS",
              valueRenderOption: str = "FORMATTED",
              dateTimeRenderOption: str = "SERIAL",
              service: Resource|None = None,
              spreadsheet: Spreadsheet|None = None) -> ValueRange:
    """
    Wrapper for calling the get() method on the values resource.
    See https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/get
    range is an A1 string or a GridRange.  A GridRange with a sheetId is read
    from that sheet, its title taken from spreadsheet or fetched with get().
    Trailing empty rows and columns are not returned by the API.
    """
    dim = GoogleSheetsEnum.dimension(dimension)
    if not dim:
        raise ValueError(f"Invalid majorDimension value: {dimension}")
    value_render, date_time_render = _render_options(valueRenderOption, dateTimeRenderOption)
    a1 = _resolve_ranges(spreadsheetId, [range], spreadsheet, service)[0]
    if not a1:
        raise ValueError("A range is required")
    kwargs = {"spreadsheetId": spreadsheetId, "range": a1,
              "majorDimension": dim, "valueRenderOption": value_render}
    if date_time_render:
        kwargs["dateTimeRenderOption"] = date_time_render
    logger.debug("values.get %s %s", spreadsheetId, a1)
    r = get_service(service).spreadsheets().values().get(**kwargs).execute()
    if r:
        return ValueRange.from_base(r)
    return ValueRange(range=a1, majorDimension=dim)

def batchGetValues(spreadsheetId: str,
                   ranges: str|list[str],
                   dimension: str = "ROWS",
                   valueRenderOption: str = "FORMATTED",
                   dateTimeRenderOption: str = "SERIAL",
                   service: Resource|None = None,
                   spreadsheet: Spreadsheet|None = None) -> GetValuesRequestResponse:
    """
    Wrapper for calling the batchGet() method on the values resource.
    See https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/batchGet
    Several ranges in one call, the value ranges come back in request order.
    GridRanges are resolved as in getValues().
    """
    dim = GoogleSheetsEnum.dimension(dimension)
    if not dim:
        raise ValueError(f"Invalid majorDimension value: {dimension}")
    value_render, date_time_render = _render_options(valueRenderOption, dateTimeRenderOption)
    range_list = [ranges] if isinstance(ranges, (str, GridRange, dict)) else list(ranges)
    range_list = _resolve_ranges(spreadsheetId, range_list, spreadsheet, service)
    response = GetValuesRequestResponse(spreadsheetId)
    if not range_list:
        return response
    kwargs = {"spreadsheetId": spreadsheetId, "ranges": range_list,
              "majorDimension": dim, "valueRenderOption": value_render}
    if date_time_render:
        kwargs["dateTimeRenderOption"] = date_time_render
    logger.debug("values.batchGet %s %s", spreadsheetId, range_list)
    r = get_service(service).spreadsheets().values().batchGet(**kwargs).execute()
    if r:
        response = GetValuesRequestResponse.from_base(r)
    else:
        response.spreadsheetId = ""
    return response
