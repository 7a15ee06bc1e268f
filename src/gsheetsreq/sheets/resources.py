"""
Class implementations of sheets request resources.
As these are just logical groupings of data fields we use dataclasses
to implement.  The nested aspect does cause some headaches as there
is a handy dataclass.asdict() method to get a dict translation of the
class fields, which is exactly what that request client needs, but
there's no inverse support, as in initializing a dataclass from a dict.
So dataclasses with dataclasses as fields do the conversion in fixup().
Only the resources the request builders need are implemented.
"""
from dataclasses import dataclass, field, asdict
from typing import List, ClassVar

from ..resources import GoogleWorkSpaceResourceBase

class GoogleSheetsEnum():
    """
    An 'enum' in the sheets client is just a string so this is
    just to translate and validate input.
    """
    _VALID_VALUE_RENDER_OPTIONS = {
        "FORMATTED": "FORMATTED_VALUE",
        "FORMATTED_VALUE": "FORMATTED_VALUE",
        "UNFORMATTED": "UNFORMATTED_VALUE",
        "UNFORMATTED_VALUE": "UNFORMATTED_VALUE",
        "FORMULA": "FORMULA"
    }
    _VALID_DATE_TIME_RENDER_OPTIONS = {
        "SERIAL": "SERIAL_NUMBER",
        "SERIAL_NUMBER": "SERIAL_NUMBER",
        "FORMATTED": "FORMATTED_STRING",
        "FORMATTED_STRING": "FORMATTED_STRING"
    }
    _VALID_DIMENSION_OPTIONS = {
        "ROWS": "ROWS",
        "ROW": "ROWS",
        "R": "ROWS",
        "C": "COLUMNS",
        "COLS": "COLUMNS",
        "COLUMN": "COLUMNS",
        "COLUMNS": "COLUMNS"
    }
    _VALID_VALUE_INPUT_OPTIONS = {
        "RAW": "RAW",
        "USER": "USER_ENTERED",
        "USER_ENTERED": "USER_ENTERED"
    }
    _VALID_WRAP_STRATEGIES = {
        "OVERFLOW": "OVERFLOW_CELL",
        "OVERFLOW_CELL": "OVERFLOW_CELL",
        "LEGACY_WRAP": "LEGACY_WRAP",
        "CLIP": "CLIP",
        "WRAP": "WRAP"
    }
    _VALID_HORIZONTAL_ALIGNMENTS = {
        "LEFT": "LEFT",
        "CENTER": "CENTER",
        "CENTRE": "CENTER",
        "RIGHT": "RIGHT"
    }
    _VALID_VERTICAL_ALIGNMENTS = {
        "TOP": "TOP",
        "MIDDLE": "MIDDLE",
        "CENTER": "MIDDLE",
        "BOTTOM": "BOTTOM"
    }
    _VALID_BORDER_STYLES = {
        "DOTTED": "DOTTED",
        "DASHED": "DASHED",
        "SOLID": "SOLID",
        "SOLID_MEDIUM": "SOLID_MEDIUM",
        "MEDIUM": "SOLID_MEDIUM",
        "SOLID_THICK": "SOLID_THICK",
        "THICK": "SOLID_THICK",
        "NONE": "NONE",
        "DOUBLE": "DOUBLE"
    }

    @classmethod
    def valueRenderOption(cls, option: str) -> str:
        """https://developers.google.com/sheets/api/reference/rest/v4/ValueRenderOption"""
        return cls._VALID_VALUE_RENDER_OPTIONS.get(str(option).upper(), "")

    @classmethod
    def dateTimeRenderOption(cls, option: str) -> str:
        """https://developers.google.com/sheets/api/reference/rest/v4/DateTimeRenderOption"""
        return cls._VALID_DATE_TIME_RENDER_OPTIONS.get(str(option).upper(), "")

    @classmethod
    def dimension(cls, dim: str) -> str:
        """https://developers.google.com/sheets/api/reference/rest/v4/Dimension"""
        return cls._VALID_DIMENSION_OPTIONS.get(str(dim).upper(), "")

    @classmethod
    def valueInputOption(cls, option: str) -> str:
        """https://developers.google.com/sheets/api/reference/rest/v4/ValueInputOption"""
        return cls._VALID_VALUE_INPUT_OPTIONS.get(str(option).upper(), "")

    @classmethod
    def wrapStrategy(cls, option: str) -> str:
        """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/cells#wrapstrategy"""
        return cls._VALID_WRAP_STRATEGIES.get(str(option).upper(), "")

    @classmethod
    def horizontalAlignment(cls, option: str) -> str:
        """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/other#horizontalalign"""
        return cls._VALID_HORIZONTAL_ALIGNMENTS.get(str(option).upper(), "")

    @classmethod
    def verticalAlignment(cls, option: str) -> str:
        """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/cells#verticalalign"""
        return cls._VALID_VERTICAL_ALIGNMENTS.get(str(option).upper(), "")

    @classmethod
    def borderStyle(cls, option: str) -> str:
        """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/cells#style"""
        return cls._VALID_BORDER_STYLES.get(str(option).upper(), "")

@dataclass
class NumberFormat(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/cells#numberformat
    """
    type: str = field(default="")
    pattern: str = field(default="")

    valid_values: ClassVar[List[str]] = ['TEXT', 'NUMBER', 'PERCENT',
                                         'CURRENCY', 'DATE', 'TIME',
                                         'DATE_TIME', 'SCIENTIFIC']

    def __post_init__(self):
        self.fixup()

    def __bool__(self) -> bool:
        return bool(self.type) and self.type in self.valid_values

    def fixup(self) -> None:
        if self.type:
            t = str(self.type).upper()
            if t not in self.valid_values:
                raise ValueError('Invalid number format type: ' + t)
            self.type = t

@dataclass
class Color(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/other#color
    Components are 0-1 floats.  alpha left as None is sent as absent which
    the API takes as fully opaque.
    """
    red: int|float = field(default=0)
    green: int|float = field(default=0)
    blue: int|float = field(default=0)
    alpha: int|float|None = field(default=None)

    @classmethod
    def from_hex(cls, hex_color: str) -> "Color":
        """'#RRGGBB' or '#RGB' to a Color"""
        h = str(hex_color).lstrip("#")
        if len(h) == 3:
            h = "".join(c * 2 for c in h)
        if len(h) != 6:
            raise ValueError(f"Invalid hex color: {hex_color}")
        r, g, b = (int(h[i:i + 2], 16) for i in (0, 2, 4))
        return cls(red=r / 255, green=g / 255, blue=b / 255)

def _as_color(value) -> Color|None:
    if value is None or isinstance(value, Color):
        return value
    if isinstance(value, str):
        return Color.from_hex(value)
    return Color.from_base(value)

@dataclass
class TextFormat(GoogleWorkSpaceResourceBase):
    """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/other#textformat"""
    bold: bool|None = field(default=None)
    italic: bool|None = field(default=None)
    strikethrough: bool|None = field(default=None)
    underline: bool|None = field(default=None)
    fontFamily: str = field(default="")
    fontSize: int|None = field(default=None)
    foregroundColor: Color|dict|str|None = field(default=None)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.foregroundColor = _as_color(self.foregroundColor)

@dataclass
class CellFormat(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/cells#cellformat
    Empty/None fields are not sent, so only what is set gets applied.
    """
    numberFormat: NumberFormat|dict|None = field(default=None)
    backgroundColor: Color|dict|str|None = field(default=None)
    horizontalAlignment: str = field(default="")
    verticalAlignment: str = field(default="")
    wrapStrategy: str = field(default="")
    textFormat: TextFormat|dict|None = field(default=None)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        if self.numberFormat is not None and not isinstance(self.numberFormat, NumberFormat):
            self.numberFormat = NumberFormat.from_base(self.numberFormat)
        self.backgroundColor = _as_color(self.backgroundColor)
        if self.textFormat is not None and not isinstance(self.textFormat, TextFormat):
            self.textFormat = TextFormat.from_base(self.textFormat)
        if self.horizontalAlignment:
            h = GoogleSheetsEnum.horizontalAlignment(self.horizontalAlignment)
            if not h:
                raise ValueError(f"Invalid horizontal alignment: {self.horizontalAlignment}")
            self.horizontalAlignment = h
        if self.verticalAlignment:
            v = GoogleSheetsEnum.verticalAlignment(self.verticalAlignment)
            if not v:
                raise ValueError(f"Invalid vertical alignment: {self.verticalAlignment}")
            self.verticalAlignment = v
        if self.wrapStrategy:
            w = GoogleSheetsEnum.wrapStrategy(self.wrapStrategy)
            if not w:
                raise ValueError(f"Invalid wrap strategy: {self.wrapStrategy}")
            self.wrapStrategy = w

@dataclass
class Border(GoogleWorkSpaceResourceBase):
    """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/cells#border"""
    style: str = field(default="SOLID")
    width: int|None = field(default=None)
    color: Color|dict|str|None = field(default=None)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        s = GoogleSheetsEnum.borderStyle(self.style)
        if not s:
            raise ValueError(f"Invalid border style: {self.style}")
        self.style = s
        self.color = _as_color(self.color)

@dataclass
class SpreadsheetProperties(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets#SpreadsheetProperties
    """
    title: str = field(default="")
    locale: str = field(default="")
    autoRecalc: str = field(default="")
    timeZone: str = field(default="")
    defaultFormat: dict = field(default_factory=dict)
    iterativeCalculationSettings: dict = field(default_factory=dict)
    spreadsheetTheme: dict = field(default_factory=dict)
    importFunctionsExternalUrlAccessAllowed: bool = field(default=False)

    def __bool__(self) -> bool:
        return bool(self.title)

@dataclass
class GridProperties(GoogleWorkSpaceResourceBase):
    """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/sheets#gridproperties"""
    rowCount: int = field(default=-1)
    columnCount: int = field(default=-1)
    frozenRowCount: int = field(default=0)
    frozenColumnCount: int = field(default=0)
    hideGridlines: bool = field(default=False)
    rowGroupControlAfter: bool = field(default=False)
    columnGroupControlAfter: bool = field(default=False)

    def __bool__(self) -> bool:
        return self.rowCount >= 0 and self.columnCount >= 0

@dataclass
class SheetProperties(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/sheets#sheetproperties
    The sheet descriptor, the sheetId is constant for the life of the sheet
    while title and index can change.
    """
    sheetId: int = field(default=-1)
    title: str = field(default="")
    index: int = field(default=-1)
    sheetType: str = field(default="")
    gridProperties: GridProperties|dict = field(default_factory=dict)
    hidden: bool = field(default=False)
    tabColor: dict = field(default_factory=dict)
    tabColorStyle: dict = field(default_factory=dict)
    rightToLeft: bool = field(default=False)
    dataSourceSheetProperties: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.gridProperties = self.gridProperties if isinstance(self.gridProperties,GridProperties) else GridProperties.from_base(self.gridProperties)

    def __bool__(self) -> bool:
        """
        True if it is valid, which is the ID and index are 0 or positive
        as negative index is not possible
        """
        return self.sheetId >= 0 and self.index >= 0 and bool(self.title)

    def __str__(self) -> str:
        val = ""
        if self:
            val = f"{str(self.title)}({str(self.sheetId)}[{str(self.index)}]):{str(self.sheetType)}"
            if self.is_grid():
                val += f"({self.gridProperties.rowCount}Rx{self.gridProperties.columnCount}C)"
        else:
            val = "<invalid sheet>"
        return val

    def is_grid(self) -> bool:
        """
        A GRID sheet is the traditional range of cells and is normally
        what you want to work with.
        """
        return self.sheetType == 'GRID'

@dataclass
class GridData(GoogleWorkSpaceResourceBase):
    """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/sheets#griddata"""
    startRow: int = field(default=0)
    startColumn: int = field(default=0)
    rowData: List[dict] = field(default_factory=list)
    rowMetadata: List[dict] = field(default_factory=list)
    columnMetadata: List[dict] = field(default_factory=list)

@dataclass
class GridRange(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/other#gridrange
    All indexes are zero-based, start inclusive and end exclusive.
    A None index is unbounded on that side.
    """
    sheetId: int = field(default=-1)
    startRowIndex: int|None = field(default=None)
    endRowIndex: int|None = field(default=None)
    startColumnIndex: int|None = field(default=None)
    endColumnIndex: int|None = field(default=None)

    def __bool__(self) -> bool:
        return self.sheetId >= 0

    @property
    def num_rows(self) -> int:
        """0 when unbounded"""
        if self.startRowIndex is None or self.endRowIndex is None:
            return 0
        return self.endRowIndex - self.startRowIndex

    @property
    def num_cols(self) -> int:
        """0 when unbounded"""
        if self.startColumnIndex is None or self.endColumnIndex is None:
            return 0
        return self.endColumnIndex - self.startColumnIndex

    def to_base(self) -> dict:
        # unbounded sides are left out rather than sent as null
        return {k: v for k, v in asdict(self).items() if v is not None}

def as_grid_range(value: GridRange|dict) -> GridRange:
    if isinstance(value, GridRange):
        return value
    return GridRange.from_base(value)

@dataclass
class DimensionRange(GoogleWorkSpaceResourceBase):
    """https://developers.google.com/sheets/api/reference/rest/v4/DimensionRange"""
    sheetId: int = field(default=-1)
    dimension: str = field(default="")
    startIndex: int|None = field(default=None)
    endIndex: int|None = field(default=None)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        if self.dimension:
            d = str(self.dimension)
            self.dimension = GoogleSheetsEnum.dimension(d)
            if not self.dimension:
                raise ValueError(f"Invalid dimension value: {d}")

    def __bool__(self) -> bool:
        return self.sheetId >= 0 and bool(self.dimension)

    def to_base(self) -> dict:
        self.fixup()
        return {k: v for k, v in asdict(self).items() if v is not None}

@dataclass
class DimensionProperties(GoogleWorkSpaceResourceBase):
    """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/sheets#dimensionproperties"""
    pixelSize: int|None = field(default=None)
    hiddenByUser: bool|None = field(default=None)

@dataclass
class ValueRange(GoogleWorkSpaceResourceBase):
    """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values#resource:-valuerange"""
    range: str = field(default="")
    majorDimension: str = field(default="")
    values: list[list[bool|str|float|None]] = field(default_factory=list)

    def __post_init__(self):
        self.fixup()

    def fixup(self) -> None:
        if self.majorDimension:
            self.majorDimension = GoogleSheetsEnum.dimension(str(self.majorDimension))

    def __bool__(self) -> bool:
        """
        A ValueRange is valid if the range string is not empty
        and the majorDimension has a valid value.
        """
        return bool(self.range) and bool(self.majorDimension)

@dataclass
class Sheet(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/sheets#sheet
    Representation of a sheet within a spreadsheet
    """
    properties: SheetProperties|dict = field(default_factory=dict)
    data: List[GridData|dict] = field(default_factory=list)
    merges: List[GridRange|dict] = field(default_factory=list)
    conditionalFormats: List[dict] = field(default_factory=list)
    filterViews: List[dict] = field(default_factory=list)
    protectedRanges: List[dict] = field(default_factory=list)
    basicFilter: dict = field(default_factory=dict)
    charts: List[dict] = field(default_factory=list)
    bandedRanges: List[dict] = field(default_factory=list)
    developerMetadata: List[dict] = field(default_factory=list)
    rowGroups: List[dict] = field(default_factory=list)
    columnGroups: List[dict] = field(default_factory=list)
    slicers: List[dict] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.properties = self.properties if isinstance(self.properties,SheetProperties) else SheetProperties.from_base(self.properties)
        self.data = [gd if isinstance(gd,GridData) else GridData.from_base(gd) for gd in self.data]
        self.merges = [as_grid_range(gr) for gr in self.merges]

    def __bool__(self) -> bool:
        return bool(self.properties)

    def __str__(self) -> str:
        return str(self.properties)

@dataclass
class Spreadsheet(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets#resource:-spreadsheet
    The representation of a spreadsheet.
    """
    spreadsheetId: str = field(default="")
    properties: SpreadsheetProperties|dict = field(default_factory=dict)
    sheets: List[Sheet|dict] = field(default_factory=list)
    namedRanges: List[dict] = field(default_factory=list)
    spreadsheetUrl: str = field(default="")
    developerMetadata: List[dict] = field(default_factory=list)
    dataSources: List[dict] = field(default_factory=list)
    dataSourceSchedules: List[dict] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.properties = self.properties if isinstance(self.properties,SpreadsheetProperties) else SpreadsheetProperties.from_base(self.properties)
        self.sheets = [s if isinstance(s,Sheet) else Sheet.from_base(s) for s in self.sheets]

    def __bool__(self) -> bool:
        return bool(self.spreadsheetId)

    def __str__(self) -> str:
        val = 'unconnected'
        if self.spreadsheetId:
            if self.sheets:
                val = self.properties.title
                val += '[' + ','.join(str(s) for s in self.sheets) + ']'
            else:
                val = f"{self.spreadsheetId}(unconnected)"
        return val

    def find_sheet(self, sheet: str|int) -> Sheet|None:
        """
        Look a sheet up by title (str) or sheetId (int).
        None if there is no such sheet.
        """
        for s in self.sheets:
            if isinstance(sheet, int) and not isinstance(sheet, bool):
                if s.properties.sheetId == sheet:
                    return s
            elif s.properties.title == str(sheet):
                return s
        return None
