"""
Builders for the formatting requests of a batchUpdate.
Nothing here calls the API, each function returns a request object that
goes into make_request() or an update chain.  Ranges can be a GridRange
or the equivalent dict.
"""
from .resources import *
from .requests import (RepeatCellRequest, UpdateBordersRequest,
                       UpdateDimensionPropertiesRequest,
                       AutoResizeDimensionsRequest,
                       UpdateSheetPropertiesRequest)

def _repeat_format(range: GridRange|dict, fmt: CellFormat, fields: list[str]) -> RepeatCellRequest:
    return RepeatCellRequest(range=range,
                             cell={"userEnteredFormat": fmt.trim()},
                             fields=",".join(f"userEnteredFormat.{f}" for f in fields))

def wrap(range: GridRange|dict, strategy: str = "WRAP") -> RepeatCellRequest:
    """Set the text wrap strategy of the cells"""
    w = GoogleSheetsEnum.wrapStrategy(strategy)
    if not w:
        raise ValueError(f"Invalid wrap strategy: {strategy}")
    return _repeat_format(range, CellFormat(wrapStrategy=w), ["wrapStrategy"])

def number_format(range: GridRange|dict, type: str, pattern: str = "") -> RepeatCellRequest:
    """
    Number format of the cells, type being one of NumberFormat.valid_values
    and pattern the optional custom pattern, e.g. ("DATE", "yyyy-mm-dd")
    """
    nf = NumberFormat(type=type, pattern=pattern)
    return _repeat_format(range, CellFormat(numberFormat=nf), ["numberFormat"])

def alignment(range: GridRange|dict,
              horizontal: str|None = None,
              vertical: str|None = None) -> RepeatCellRequest:
    """
    Horizontal and/or vertical alignment.  Only the one(s) given are applied
    so the other alignment of the cells is left alone.
    """
    if not horizontal and not vertical:
        raise ValueError("alignment() needs a horizontal or vertical alignment")
    fmt = CellFormat(horizontalAlignment=horizontal or "", verticalAlignment=vertical or "")
    fields = []
    if horizontal:
        fields.append("horizontalAlignment")
    if vertical:
        fields.append("verticalAlignment")
    return _repeat_format(range, fmt, fields)

def bold(range: GridRange|dict, bold: bool = True) -> RepeatCellRequest:
    """
    Bold on or off.  The mask is just textFormat.bold, setting all of textFormat
    would wipe fonts, colors and links.
    """
    return _repeat_format(range, CellFormat(textFormat=TextFormat(bold=bool(bold))), ["textFormat.bold"])

def background(range: GridRange|dict, color: Color|dict|str) -> RepeatCellRequest:
    return _repeat_format(range, CellFormat(backgroundColor=color), ["backgroundColor"])

def borders(range: GridRange|dict,
            style: str = "SOLID",
            color: Color|dict|str|None = None,
            width: int|None = None,
            top: bool = False, bottom: bool = False,
            left: bool = False, right: bool = False,
            innerHorizontal: bool = False, innerVertical: bool = False) -> UpdateBordersRequest:
    """
    Borders around and/or inside the range, all with the same style.
    With no side selected the four outer sides are used.  Style "NONE"
    removes the border on the selected sides.
    """
    border = Border(style=style, width=width, color=color)
    selected = {"top": top, "bottom": bottom, "left": left, "right": right,
                "innerHorizontal": innerHorizontal, "innerVertical": innerVertical}
    if not any(selected.values()):
        selected.update(top=True, bottom=True, left=True, right=True)
    sides = {k: border for k, v in selected.items() if v}
    return UpdateBordersRequest(range=range, **sides)

def dimension_size(sheetId: int, dimension: str,
                   startIndex: int, endIndex: int,
                   pixelSize: int) -> UpdateDimensionPropertiesRequest:
    """
    Pixel height of rows or width of columns in [startIndex, endIndex), zero-based.
    """
    if pixelSize < 0:
        raise ValueError("pixelSize must be >= 0")
    if endIndex <= startIndex:
        raise ValueError("endIndex must be greater than startIndex")
    return UpdateDimensionPropertiesRequest(range=DimensionRange(sheetId, dimension, startIndex, endIndex),
                                            properties=DimensionProperties(pixelSize=int(pixelSize)),
                                            fields="pixelSize")

def row_height(sheetId: int, startIndex: int, endIndex: int, pixelSize: int) -> UpdateDimensionPropertiesRequest:
    return dimension_size(sheetId, "ROWS", startIndex, endIndex, pixelSize)

def column_width(sheetId: int, startIndex: int, endIndex: int, pixelSize: int) -> UpdateDimensionPropertiesRequest:
    return dimension_size(sheetId, "COLUMNS", startIndex, endIndex, pixelSize)

def auto_resize(sheetId: int, dimension: str = "COLUMNS",
                startIndex: int|None = None, endIndex: int|None = None) -> AutoResizeDimensionsRequest:
    """Fit rows or columns to their content, unbounded indexes mean all of them"""
    return AutoResizeDimensionsRequest(dimensions=DimensionRange(sheetId, dimension, startIndex, endIndex))

def freeze(sheetId: int, rows: int|None = None, columns: int|None = None) -> UpdateSheetPropertiesRequest:
    """Freeze the leading rows and/or columns, 0 unfreezes"""
    if rows is None and columns is None:
        raise ValueError("freeze() needs rows or columns")
    grid = {}
    fields = []
    if rows is not None:
        grid["frozenRowCount"] = int(rows)
        fields.append("gridProperties.frozenRowCount")
    if columns is not None:
        grid["frozenColumnCount"] = int(columns)
        fields.append("gridProperties.frozenColumnCount")
    return UpdateSheetPropertiesRequest(properties={"sheetId": sheetId, "gridProperties": grid},
                                        fields=",".join(fields))

def rename(sheetId: int, title: str) -> UpdateSheetPropertiesRequest:
    if not title:
        raise ValueError("A sheet title cannot be empty")
    return UpdateSheetPropertiesRequest(properties={"sheetId": sheetId, "title": str(title)},
                                        fields="title")
