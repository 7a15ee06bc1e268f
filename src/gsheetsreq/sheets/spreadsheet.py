import logging

from googleapiclient.discovery import Resource

from .ops import *
from .sheet import GoogleSheet

logger = logging.getLogger(__name__)

class GoogleSpreadSheet():
    """
    A spreadsheet and its sheets.  Sheets can be looked up by title or by
    sheetId, the title being what a user sees on the tab and the sheetId the
    constant identifier batchUpdate requests are addressed with.
    """
    def __init__(self, spreadsheet: Spreadsheet|dict|str|None = None,
                 service: Resource|None = None) -> None:
        self._service = service
        if spreadsheet is None:
            spreadsheet = Spreadsheet()
        self._spreadsheet = (Spreadsheet(spreadsheetId=spreadsheet) if isinstance(spreadsheet, str) else
                             spreadsheet if isinstance(spreadsheet, Spreadsheet) else
                             Spreadsheet.from_base(spreadsheet))

    @classmethod
    def open(cls, spreadsheetId: str, service: Resource|None = None) -> "GoogleSpreadSheet":
        """Fetch a spreadsheet's properties and sheets"""
        ss = cls(spreadsheetId, service)
        ss.get()
        return ss

    def __bool__(self) -> bool:
        return bool(self._spreadsheet)

    def __str__(self) -> str:
        return str(self._spreadsheet)

    def __repr__(self) -> str:
        return f"{self.__class__}:{str(self)}"

    def __len__(self) -> int:
        """
        In this context length is the number of sheets in this spreadsheet.
        Or 0 if unconnected,
        """
        return len(self._spreadsheet.sheets)

    def __contains__(self, val: str|int) -> bool:
        """
        Is the sheet in this spreadsheet?
        val can be either a string (title) or int (sheetId)
        """
        return self._spreadsheet.find_sheet(val) is not None

    def __getitem__(self, item: str|int) -> GoogleSheet:
        """
        Get the sheet by title (str) or sheetId (int)
        """
        s = self._spreadsheet.find_sheet(item)
        if s is None:
            raise KeyError(f"{item} not in sheets[]")
        return GoogleSheet(self.id, s, self._service)

    def sheet_by_title(self, title: str) -> GoogleSheet:
        return self[str(title)]

    def sheet_by_id(self, sheetId: int) -> GoogleSheet:
        return self[int(sheetId)]

    @property
    def id(self) -> str:
        return self._spreadsheet.spreadsheetId

    @property
    def spreadsheet(self) -> Spreadsheet:
        return self._spreadsheet

    @property
    def sheets(self) -> list[GoogleSheet]:
        return [GoogleSheet(self.id, s, self._service) for s in self._spreadsheet.sheets]

    @property
    def title(self) -> str:
        if self._spreadsheet:
            return self._spreadsheet.properties.title
        return 'unconnected'

    def _update(self, spreadsheet: Spreadsheet) -> None:
        # refresh in place, the same Spreadsheet stays held
        updated = self._spreadsheet.update_fields(**vars(spreadsheet))
        logger.debug("%s refreshed: %s", self.id, ",".join(updated))

    def get(self, ranges: list[str]|None = None,
            includeGridData: bool = False) -> Spreadsheet:
        spreadsheet = get(self.id, ranges, includeGridData, service=self._service)
        if spreadsheet:
            self._update(spreadsheet)
        return spreadsheet

    def batchUpdate(self, request: GoogleSheetsUpdateRequest|list|dict) -> GoogleSheetsUpdateRequestResponse:
        response = batchUpdate(self.id, request, service=self._service)
        if response and response.updatedSpreadsheet:
            self._update(response.updatedSpreadsheet)
        return response

    def _known(self) -> Spreadsheet|None:
        return self._spreadsheet if self._spreadsheet.sheets else None

    def getValues(self, range: str|GridRange|dict,
                  dimension: str = "ROWS",
                  valueRenderOption: str = "FORMATTED",
                  dateTimeRenderOption: str = "SERIAL") -> ValueRange:
        """A GridRange is read from the sheet its sheetId names"""
        return getValues(self.id, range, dimension,
                         valueRenderOption, dateTimeRenderOption,
                         service=self._service, spreadsheet=self._known())

    def batchGetValues(self, ranges: list[str|GridRange|dict],
                       dimension: str = "ROWS",
                       valueRenderOption: str = "FORMATTED",
                       dateTimeRenderOption: str = "SERIAL") -> GetValuesRequestResponse:
        return batchGetValues(self.id, ranges, dimension,
                              valueRenderOption, dateTimeRenderOption,
                              service=self._service, spreadsheet=self._known())
