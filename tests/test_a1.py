import pytest

from gsheetsreq.sheets.a1 import (col_to_int, int_to_col, quote_title, split_a1,
                                  join_a1, grid_range_to_a1)
from gsheetsreq.sheets.resources import GridRange

def test_columns():
    assert(col_to_int('A') == 1)
    assert(col_to_int('z') == 26)
    assert(col_to_int('AA') == 27)
    assert(col_to_int('BX') == 76)
    assert(col_to_int('ZZZ') == 18278)
    assert(col_to_int('A1') == 0)
    assert(int_to_col(1) == 'A')
    assert(int_to_col(26) == 'Z')
    assert(int_to_col(27) == 'AA')
    assert(int_to_col(702) == 'ZZ')
    assert(int_to_col(703) == 'AAA')
    assert(int_to_col(0) == '')
    assert(int_to_col(18279) == '')

def test_titles():
    assert(quote_title("Summary") == "Summary")
    assert(quote_title("Raw Data") == "'Raw Data'")
    assert(quote_title("Bob's") == "'Bob''s'")
    assert(quote_title("'Raw Data'") == "'Raw Data'")

def test_split():
    assert(split_a1("Summary!A1:B2") == ("Summary", "A1:B2"))
    assert(split_a1("'Raw Data'!c4:bx2") == ("Raw Data", "C4:BX2"))
    assert(split_a1("'Bob''s'!A:A") == ("Bob's", "A:A"))
    assert(split_a1("A1:B2") == ("", "A1:B2"))
    assert(split_a1("B7") == ("", "B7"))
    assert(split_a1("Summary") == ("Summary", ""))
    assert(split_a1("Raw Data") == ("Raw Data", ""))
    assert(split_a1("Summary!4:10") == ("Summary", "4:10"))
    with pytest.raises(ValueError):
        split_a1("Summary!not a range")

def test_join():
    assert(join_a1("Raw Data", "A1:C3") == "'Raw Data'!A1:C3")
    assert(join_a1("Summary") == "Summary")
    assert(join_a1("", "A1") == "A1")

def test_grid_range_to_a1():
    assert(grid_range_to_a1(GridRange(0, 0, 2, 0, 3), "Summary") == "Summary!A1:C2")
    assert(grid_range_to_a1(GridRange(0, 4, 5, 1, 2)) == "B5")
    assert(grid_range_to_a1(GridRange(0, None, None, 1, 4)) == "B:D")
    assert(grid_range_to_a1(GridRange(0, 0, 5, None, None)) == "1:5")
    assert(grid_range_to_a1(GridRange(0, 1, None, 0, 2)) == "A2:B")
    assert(grid_range_to_a1(GridRange(0), "Raw Data") == "'Raw Data'")

@pytest.mark.parametrize("grid, expected", [
    (GridRange(0, 2, None, None, None), "A3:ZZZ"),
    (GridRange(0, None, None, 1, None), "B:ZZZ"),
    (GridRange(0, None, None, None, 4), "A:D"),
    (GridRange(0, None, 5, None, None), "1:5"),
    (GridRange(0, None, 5, 1, 3), "B1:C5"),
    (GridRange(0, 2, None, None, 3), "A3:C"),
    (GridRange(0, 2, 4, 1, None), "B3:ZZZ4"),
])
def test_open_ended_grid_ranges(grid, expected):
    a1 = grid_range_to_a1(grid)
    assert(a1 == expected)
    # always something split_a1 accepts
    assert(split_a1(f"Summary!{a1}") == ("Summary", expected))
