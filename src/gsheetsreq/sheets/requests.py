from dataclasses import dataclass, field
from typing import List
import re

from ..resources import GoogleWorkSpaceResourceBase, prune
from .resources import *
from .values import as_rows, row_data, grid_range_for

class GoogleSheetsUpdateRequestBase(GoogleWorkSpaceResourceBase):
    """
    Base class for sheet batchUpdate requests to get the actual
    request dict into the right format.
    """
    def to_request(self) -> dict[str,dict]:
        name = self.__class__.__name__
        # need to strip off the trailing 'Request' class name and
        # set the first letter to lower case.  could be done
        # several ways but lets go re
        m = re.match("^([a-zA-Z])([a-zA-Z]+)Request$", name)
        if not m:
            raise RuntimeError("Invalid Google Sheets request format for class name")
        key = m.group(1).lower() + m.group(2)
        return {key: self.trim()}

@dataclass
class UpdateCellsRequest(GoogleSheetsUpdateRequestBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/request#updatecellsrequest
    Either range or start can be used, range is what write_values() fills in.
    The rows are sent as built, an empty stringValue is a real value here.
    """
    rows: List[dict] = field(default_factory=list)
    fields: str = field(default="userEnteredValue")
    range: GridRange|dict|None = field(default=None)
    start: dict|None = field(default=None)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        if self.range is not None:
            self.range = as_grid_range(self.range)

    def trim(self) -> dict:
        b = {"rows": list(self.rows), "fields": self.fields}
        if self.range is not None:
            b["range"] = self.range.to_base()
        if self.start:
            b["start"] = prune(dict(self.start))
        return b

def write_values(sheetId: int, values,
                 startRow: int = 0, startColumn: int = 0) -> UpdateCellsRequest:
    """
    updateCells request writing a grid of values with their types inferred,
    see values.value_type().  The range covers exactly the given grid.
    """
    rows = as_rows(values)
    return UpdateCellsRequest(rows=row_data(rows),
                              fields="userEnteredValue",
                              range=grid_range_for(sheetId, rows, startRow, startColumn))

@dataclass
class RepeatCellRequest(GoogleSheetsUpdateRequestBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/request#repeatcellrequest
    The cell is applied to every cell in range, only for the given fields mask.
    """
    range: GridRange|dict
    cell: dict
    fields: str

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.range = as_grid_range(self.range)

    def trim(self) -> dict:
        return {"range": self.range.to_base(), "cell": prune(self.cell), "fields": self.fields}

@dataclass
class UpdateBordersRequest(GoogleSheetsUpdateRequestBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/request#updatebordersrequest
    A side left as None is not touched.
    """
    range: GridRange|dict
    top: Border|dict|None = field(default=None)
    bottom: Border|dict|None = field(default=None)
    left: Border|dict|None = field(default=None)
    right: Border|dict|None = field(default=None)
    innerHorizontal: Border|dict|None = field(default=None)
    innerVertical: Border|dict|None = field(default=None)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.range = as_grid_range(self.range)
        for side in self.sides():
            b = getattr(self, side)
            if b is not None and not isinstance(b, Border):
                setattr(self, side, Border.from_base(b))

    @staticmethod
    def sides() -> tuple[str,...]:
        return ("top", "bottom", "left", "right", "innerHorizontal", "innerVertical")

    def trim(self) -> dict:
        b = {"range": self.range.to_base()}
        for side in self.sides():
            border = getattr(self, side)
            if border is not None:
                b[side] = border.trim()
        return b

@dataclass
class UpdateDimensionPropertiesRequest(GoogleSheetsUpdateRequestBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/request#updatedimensionpropertiesrequest
    """
    range: DimensionRange|dict
    properties: DimensionProperties|dict
    fields: str = field(default="pixelSize")

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        if not isinstance(self.range, DimensionRange):
            self.range = DimensionRange.from_base(self.range)
        if not isinstance(self.properties, DimensionProperties):
            self.properties = DimensionProperties.from_base(self.properties)

    def trim(self) -> dict:
        return {"range": self.range.to_base(), "properties": self.properties.trim(), "fields": self.fields}

@dataclass
class AutoResizeDimensionsRequest(GoogleSheetsUpdateRequestBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/request#autoresizedimensionsrequest
    """
    dimensions: DimensionRange|dict

    def __post_init__(self) -> None:
        if not isinstance(self.dimensions, DimensionRange):
            self.dimensions = DimensionRange.from_base(self.dimensions)

    def trim(self) -> dict:
        return {"dimensions": self.dimensions.to_base()}

@dataclass
class UpdateSheetPropertiesRequest(GoogleSheetsUpdateRequestBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/request#updatesheetpropertiesrequest
    properties is a partial SheetProperties dict, fields the mask of what to apply.
    """
    properties: dict
    fields: str

    def trim(self) -> dict:
        return {"properties": dict(self.properties), "fields": self.fields}

@dataclass
class AppendDimensionRequest(GoogleSheetsUpdateRequestBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/request#appenddimensionrequest
    """
    sheetId: int
    dimension: str
    length: int

@dataclass
class DeleteDimensionRequest(GoogleSheetsUpdateRequestBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/request#deletedimensionrequest
    The 'range' indirection makes this a bit complicated, we want the DimensionRange
    initializer but park it in the range object.
    """
    range: DimensionRange = field(init=False)

    def __init__(self, sheetId: int, dimension: str,
                 startIndex: int|None = None,
                 endIndex: int|None = None) -> None:
        self.range = DimensionRange(sheetId, dimension, startIndex, endIndex)

    def trim(self) -> dict:
        return {'range': self.range.to_base()}

@dataclass
class InsertDimensionRequest(GoogleSheetsUpdateRequestBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/request#insertdimensionrequest
    """
    range: DimensionRange = field(init=False)
    inheritFromBefore: bool = field(default=True)

    def __init__(self, sheetId: int, dimension: str,
                 startIndex: int, endIndex: int,
                 inheritFromBefore: bool = True) -> None:
        self.range = DimensionRange(sheetId, dimension, startIndex, endIndex)
        self.inheritFromBefore = inheritFromBefore

    def trim(self) -> dict:
        return {'range': self.range.to_base(), 'inheritFromBefore': self.inheritFromBefore}

@dataclass
class GoogleSheetsUpdateRequest(GoogleWorkSpaceResourceBase):
    """
    Generate a GSheet Batch Update request body.
    Most likely you'd use make_request() directly to generate
    the request dict JIT
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/batchUpdate#request-body
    """
    requests: List[GoogleSheetsUpdateRequestBase|dict] = field(default_factory=list)
    includeSpreadsheetInResponse: bool = field(default=False)
    responseRanges: List[str] = field(default_factory=list)
    responseIncludeGridData: bool = field(default=False)

    def __len__(self) -> int:
        return len(self.requests)

    def append(self, request: GoogleSheetsUpdateRequestBase|dict) -> "GoogleSheetsUpdateRequest":
        self.requests.append(request)
        return self

    def to_base(self) -> dict:
        b = {
            "requests": [r.to_request() if isinstance(r, GoogleSheetsUpdateRequestBase) else dict(r)
                         for r in self.requests],
            "includeSpreadsheetInResponse": self.includeSpreadsheetInResponse,
        }
        if self.responseRanges:
            b["responseRanges"] = [str(r) for r in self.responseRanges]
        if self.includeSpreadsheetInResponse:
            b["responseIncludeGridData"] = self.responseIncludeGridData
        return b

def make_request(requests: list[GoogleSheetsUpdateRequestBase|dict],
                 includeSpreadsheetInResponse: bool = False,
                 responseRanges: list[str]|None = None,
                 responseIncludeGridData: bool = False) -> dict:
    """
    Convenience function to assemble the batchUpdate body with the usual parameters.
    """
    return GoogleSheetsUpdateRequest(requests=list(requests),
                                     includeSpreadsheetInResponse=includeSpreadsheetInResponse,
                                     responseRanges=list(responseRanges or []),
                                     responseIncludeGridData=responseIncludeGridData).to_base()

@dataclass
class GoogleSheetsUpdateRequestResponse(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/batchUpdate#response-body
    """
    spreadsheetId: str = field(default="")
    replies: List[dict] = field(default_factory=list)
    updatedSpreadsheet: Spreadsheet|dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.fixup()

    def __bool__(self) -> bool:
        return bool(self.spreadsheetId)

    def fixup(self) -> None:
        if not isinstance(self.updatedSpreadsheet, Spreadsheet):
            self.updatedSpreadsheet = Spreadsheet.from_base(self.updatedSpreadsheet)

@dataclass
class GetValuesRequestResponse(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/batchGet#response-body
    """
    spreadsheetId: str = field(default="")
    valueRanges: list[ValueRange|dict] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.fixup()

    def __bool__(self) -> bool:
        return bool(self.spreadsheetId)

    def __len__(self) -> int:
        return len(self.valueRanges)

    def fixup(self) -> None:
        self.valueRanges = [vr if isinstance(vr,ValueRange) else ValueRange.from_base(vr) for vr in self.valueRanges]
