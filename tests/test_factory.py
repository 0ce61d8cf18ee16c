import pytest

from binary_puzzle.lib.s1_surface import (
    CellValue,
    RotatedSurface,
    SingleChangeSurface,
    SurfaceFactory,
    SurfaceFormatError,
    SurfacePosition,
    create_empty,
    create_from_text,
)


def test_create_from_text_reads_cells():
    surface = create_from_text("10", "-1")

    assert surface.get_cell(0, 0) is CellValue.ONE
    assert surface.get_cell(0, 1) is CellValue.ZERO
    assert surface.get_cell(1, 0) is CellValue.UNKNOWN
    assert surface.count_in_column(1, CellValue.ONE) == 1


def test_create_from_text_does_not_validate_rules():
    # Duplicate columns and unbalanced digits are accepted at construction
    surface = create_from_text("10", "11")
    assert surface.is_solved


@pytest.mark.parametrize("lines", [
    ["10", "11"],
    ["1011", "1101"],
    ["1011", "11-0", "0101", "1-10", "-111", "1-11"],
])
def test_round_trip(lines):
    assert create_from_text(*lines).to_string(":") == ":".join(lines)


def test_create_empty():
    surface = create_empty(4, 2)
    assert surface.to_string("|") == "--|--|--|--"


@pytest.mark.parametrize("lines,match", [
    ((), "At least one line"),
    (("1100", "0011", "1010"), "Line count must be even"),
    (("10", None), r"lines\[1\] must not be None"),
    (("10", ""), r"lines\[1\] must not be empty"),
    (("111", "000"), r"lines\[0\] length must be even"),
    (("10", "1100"), r"lines\[1\] has length 4"),
])
def test_malformed_text(lines, match):
    with pytest.raises(SurfaceFormatError, match=match):
        create_from_text(*lines)


def test_bad_character_names_position():
    with pytest.raises(SurfaceFormatError, match="line 1 at position 3") as error:
        create_from_text("1100", "110*")

    assert error.value.line_index == 1
    assert error.value.column_index == 3


def test_custom_placeholder():
    factory = SurfaceFactory(unknown_char=".")
    surface = factory.create_from_text("1.", ".0")

    assert surface.count_in_line(0, CellValue.UNKNOWN) == 1
    assert surface.unknown_char == "."
    assert surface.to_string() == "1.,.0"
    assert factory.create_from_text(*surface.to_string().split(",")).to_string() == "1.,.0"
    assert factory.create_empty(2, 4).to_string(";") == "....;...."
    assert RotatedSurface(surface).to_string() == "1.,.0"
    assert SingleChangeSurface(surface, SurfacePosition(0, 1), CellValue.ZERO).to_string() == "10,.0"
    with pytest.raises(SurfaceFormatError):
        factory.create_from_text("1-", "-0")
