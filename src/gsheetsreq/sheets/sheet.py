from dataclasses import replace
from typing import Self
import logging

from googleapiclient.discovery import Resource

from ..exceptions import SheetsUsageError
from . import formatting
from .a1 import split_a1, join_a1, grid_range_to_a1
from .ops import *

logger = logging.getLogger(__name__)

class GoogleSheet():
    """
    Class representation of a sheet.  In Google Sheets parlance a 'sheet' is
    an individual sheet within a parent 'spreadsheet', the different tabs on
    the spreadsheet itself.  Typically this is what you would work with as this
    is where the data actually resides.  A batchUpdate request to a sheet is
    addressed with the spreadsheetId of the parent and the sheetId inside the
    request, a values request by the sheet title in the A1 range.
    """
    def __init__(self, spreadsheetid: str,
                 sheet: Sheet|dict,
                 service: Resource|None = None) -> None:
        self._spreadsheetid = spreadsheetid
        self._sheet = sheet if isinstance(sheet, Sheet) else Sheet.from_base(sheet)
        self._service = service

    def __bool__(self) -> bool:
        return bool(self._spreadsheetid) and bool(self._sheet)

    def __str__(self) -> str:
        return str(self._sheet.properties)

    def __repr__(self) -> str:
        return f"{self.__class__}:{str(self)}"

    def __len__(self) -> int:
        """
        In this context length is number of cells in the sheet
        """
        return max(self.rows, 0) * max(self.cols, 0)

    @property
    def spreadsheet_id(self) -> str:
        return self._spreadsheetid

    @property
    def sheet(self) -> Sheet:
        return self._sheet

    @property
    def properties(self) -> SheetProperties:
        return self._sheet.properties

    @property
    def title(self) -> str:
        return self.properties.title

    @property
    def index(self) -> int:
        """
        Index within the spreadsheet, which is the ordering you see
        of the tabs when you open the spreadsheet.  The index can shift
        by update, but the sheetId is always constant.
        """
        return self.properties.index

    @property
    def sheet_id(self) -> int:
        return self.properties.sheetId

    @property
    def is_grid(self) -> bool:
        return self.properties.is_grid()

    @property
    def rows(self) -> int:
        return self.properties.gridProperties.rowCount

    @property
    def cols(self) -> int:
        return self.properties.gridProperties.columnCount

    @property
    def dimensions(self) -> tuple[int,int]:
        return (self.rows, self.cols)

    @property
    def a1(self) -> str:
        """A1 of the whole sheet"""
        return join_a1(self.title)

    def grid_range(self, startRow: int|None = None, endRow: int|None = None,
                   startColumn: int|None = None, endColumn: int|None = None) -> GridRange:
        """GridRange on this sheet, zero-based and end exclusive"""
        return GridRange(self.sheet_id, startRow, endRow, startColumn, endColumn)

    def _refresh(self, response: GoogleSheetsUpdateRequestResponse) -> None:
        ss = response.updatedSpreadsheet
        if not ss:
            return
        s = ss.find_sheet(self.sheet_id)
        if s is None:
            raise RuntimeError(f"This sheet: {self.title}/{self.sheet_id} should be available?")
        self._sheet = s

    def batchUpdate(self, request: GoogleSheetsUpdateRequest|list|dict) -> GoogleSheetsUpdateRequestResponse:
        """
        Send a batchUpdate to the parent spreadsheet.  If the spreadsheet was asked
        for in the response this sheet's properties are refreshed from it.
        """
        response = batchUpdate(self._spreadsheetid, request, service=self._service)
        if response:
            self._refresh(response)
        return response

    def updateRequests(self) -> "_SheetUpdateChain":
        """
        Start a batchUpdate() chain, makes it easy to append operations to pack
        into a request before sending it.
        """
        return _SheetUpdateChain(self)

    def _a1_for(self, range: str|GridRange|dict) -> str:
        """
        Resolve a range to an A1 on this sheet.  A range without a sheet title
        gets this sheet's title, one addressed to another sheet is an error.
        """
        if isinstance(range, (GridRange, dict)):
            gr = as_grid_range(range)
            if gr.sheetId >= 0 and gr.sheetId != self.sheet_id:
                raise ValueError("Cannot get ranges from other sheets")
            return grid_range_to_a1(gr, self.title)
        title, cells = split_a1(range)
        if title and title != self.title:
            raise ValueError("Cannot get ranges from other sheets")
        return join_a1(self.title, cells)

    def getValues(self, range: str|GridRange|dict = "",
                  dimension: str = "ROWS",
                  valueRenderOption: str = "FORMATTED",
                  dateTimeRenderOption: str = "SERIAL") -> ValueRange:
        """
        Read the values of a range on this sheet, the whole sheet if no range.
        Empty trailing rows/columns are not returned, so asking for A1:C5 when
        only A1:A2 has data gives back 2 rows of 1 value.
        https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/get
        """
        return getValues(self._spreadsheetid, self._a1_for(range), dimension,
                         valueRenderOption, dateTimeRenderOption, service=self._service)

    def batchGetValues(self, ranges: list[str|GridRange|dict],
                       dimension: str = "ROWS",
                       valueRenderOption: str = "FORMATTED",
                       dateTimeRenderOption: str = "SERIAL") -> GetValuesRequestResponse:
        return batchGetValues(self._spreadsheetid, [self._a1_for(r) for r in ranges], dimension,
                              valueRenderOption, dateTimeRenderOption, service=self._service)

class _SheetUpdateChain():
    """
    Utility class for building up a chain of update requests.
    The spreadsheet batchUpdate method can take a list of requests at once
    and it is more efficient to provide a number of them at once rather than
    request/response/request/response/etc.  So this provides a means to add
    a chain of requests and then terminate with execute().
    The idea is you would:
    response = sheet.updateRequests().writeValues(values).bold(header).execute()
    Ranges given as dicts/GridRanges without a sheetId are put on this sheet.
    """
    def __init__(self, sheet: GoogleSheet|None) -> None:
        if sheet is None or not isinstance(sheet, GoogleSheet):
            raise SheetsUsageError("An update chain has to come from GoogleSheet.updateRequests()")
        if not sheet:
            raise ValueError("Must be a valid sheet for an update operation")
        self._sheet = sheet
        self._requests = []
        self._need_sheet_update = False

    def __len__(self) -> int:
        return len(self._requests)

    @property
    def requests(self) -> list:
        return list(self._requests)

    def _range(self, range: GridRange|dict|None) -> GridRange:
        if range is None:
            return self._sheet.grid_range()
        gr = replace(range) if isinstance(range, GridRange) else as_grid_range(range)
        if gr.sheetId < 0:
            gr.sheetId = self._sheet.sheet_id
        elif gr.sheetId != self._sheet.sheet_id:
            raise ValueError("Cannot update ranges on other sheets")
        return gr

    def add(self, request: GoogleSheetsUpdateRequestBase|dict) -> Self:
        """Any request not covered by a chain method"""
        self._requests.append(request)
        return self

    def to_request(self, includeSpreadsheetInResponse: bool = False,
                   responseRanges: list[str]|None = None,
                   responseIncludeGridData: bool = False) -> GoogleSheetsUpdateRequest:
        return GoogleSheetsUpdateRequest(list(self._requests),
                                         includeSpreadsheetInResponse or self._need_sheet_update,
                                         list(responseRanges or []), responseIncludeGridData)

    def execute(self, includeSpreadsheetInResponse: bool = False,
                responseRanges: list[str]|None = None,
                responseIncludeGridData: bool = False) -> GoogleSheetsUpdateRequestResponse:
        """
        Terminate a request chain and send the actual batchUpdate
        """
        if self._requests:
            request = self.to_request(includeSpreadsheetInResponse, responseRanges, responseIncludeGridData)
            return self._sheet.batchUpdate(request)
        logger.debug("empty update chain for %s, nothing sent", self._sheet.title)
        return GoogleSheetsUpdateRequestResponse(self._sheet.spreadsheet_id)

    def writeValues(self, values, startRow: int = 0, startColumn: int = 0) -> Self:
        """
        Write a grid of values from the zero-based (startRow, startColumn),
        types inferred per value.
        """
        self._requests.append(write_values(self._sheet.sheet_id, values, startRow, startColumn))
        return self

    def wrap(self, range: GridRange|dict|None = None, strategy: str = "WRAP") -> Self:
        self._requests.append(formatting.wrap(self._range(range), strategy))
        return self

    def numberFormat(self, range: GridRange|dict|None, type: str, pattern: str = "") -> Self:
        self._requests.append(formatting.number_format(self._range(range), type, pattern))
        return self

    def alignment(self, range: GridRange|dict|None = None,
                  horizontal: str|None = None, vertical: str|None = None) -> Self:
        self._requests.append(formatting.alignment(self._range(range), horizontal, vertical))
        return self

    def bold(self, range: GridRange|dict|None = None, bold: bool = True) -> Self:
        self._requests.append(formatting.bold(self._range(range), bold))
        return self

    def background(self, range: GridRange|dict|None, color: Color|dict|str) -> Self:
        self._requests.append(formatting.background(self._range(range), color))
        return self

    def borders(self, range: GridRange|dict|None = None, style: str = "SOLID", **kwargs) -> Self:
        """See formatting.borders() for the side and color keywords"""
        self._requests.append(formatting.borders(self._range(range), style, **kwargs))
        return self

    def rowHeight(self, startIndex: int, endIndex: int, pixelSize: int) -> Self:
        self._requests.append(formatting.row_height(self._sheet.sheet_id, startIndex, endIndex, pixelSize))
        return self

    def columnWidth(self, startIndex: int, endIndex: int, pixelSize: int) -> Self:
        self._requests.append(formatting.column_width(self._sheet.sheet_id, startIndex, endIndex, pixelSize))
        return self

    def autoResize(self, dimension: str = "COLUMNS",
                   startIndex: int|None = None, endIndex: int|None = None) -> Self:
        self._requests.append(formatting.auto_resize(self._sheet.sheet_id, dimension, startIndex, endIndex))
        return self

    def freeze(self, rows: int|None = None, columns: int|None = None) -> Self:
        self._requests.append(formatting.freeze(self._sheet.sheet_id, rows, columns))
        self._need_sheet_update = True
        return self

    def rename(self, title: str) -> Self:
        self._requests.append(formatting.rename(self._sheet.sheet_id, title))
        self._need_sheet_update = True
        return self

    def appendDimension(self, num: int, dimension: str = "ROWS") -> Self:
        """
        Append rows or columns to the end.
        https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/request#appenddimensionrequest
        """
        if num < 0:
            raise ValueError("appendDimension(): num parameter must be >= 0")
        if num > 0:
            dim = GoogleSheetsEnum.dimension(dimension)
            if not dim:
                raise ValueError("appendDimension() dimension parameter must be 'ROWS' or 'COLUMNS' not: " + str(dimension))
            self._requests.append(AppendDimensionRequest(self._sheet.sheet_id, dim, num))
            self._need_sheet_update = True
        return self

    def deleteDimension(self, start: int, end: int|None = None, dimension: str = "ROWS") -> Self:
        """
        Remove rows or columns in [start, end), end of None meaning to the end.
        https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/request#deletedimensionrequest
        """
        if start < 0:
            raise ValueError("deleteDimension(): start must be >= 0")
        dim = GoogleSheetsEnum.dimension(dimension)
        if not dim:
            raise ValueError("deleteDimension() dimension parameter must be 'ROWS' or 'COLUMNS' not: " + str(dimension))
        self._requests.append(DeleteDimensionRequest(self._sheet.sheet_id, dim, start, end))
        self._need_sheet_update = True
        return self

    def insertDimension(self, index: int, num: int,
                        dimension: str = "ROWS",
                        inheritFromBefore: bool = True) -> Self:
        """
        Insert number of rows/cols from the specified index.
        inheritFromBefore is to either inherit from prior row/col (index-1) at True
        or from following row/col (index + num) at False
        https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/request#insertdimensionrequest
        """
        if num > 0:
            dim = GoogleSheetsEnum.dimension(dimension)
            if not dim:
                raise ValueError("insertDimension() dimension parameter must be 'ROWS' or 'COLUMNS' not: " + str(dimension))
            limit = self._sheet.rows if dim == "ROWS" else self._sheet.cols
            if index < 0 or (limit >= 0 and index > limit):
                raise ValueError("insertDimension(), start index out of range")
            self._requests.append(InsertDimensionRequest(self._sheet.sheet_id, dim,
                                                         index, index + num, inheritFromBefore))
            self._need_sheet_update = True
        return self
