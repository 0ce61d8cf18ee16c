import numpy as np
import pytest

from binary_puzzle.lib.s1_surface import (
    CellValue,
    ChangeTrackingSurface,
    PuzzleSurface,
    SurfaceFormatError,
    SurfacePosition,
    copy_cells,
    create_from_text,
    iter_unknown_positions,
    read_line,
)


def _rescan(surface, line_index=None, column_index=None):
    if line_index is not None:
        cells = [surface.get_cell(line_index, c) for c in range(surface.column_count)]
    else:
        cells = [surface.get_cell(l, column_index) for l in range(surface.line_count)]
    return {value: sum(1 for cell in cells if cell is value) for value in CellValue}


def test_new_surface_is_all_unknown():
    surface = PuzzleSurface(2, 4)

    assert surface.line_count == 2
    assert surface.column_count == 4
    assert not surface.is_solved
    assert surface.count_in_line(0, CellValue.UNKNOWN) == 4
    assert surface.count_in_column(3, CellValue.UNKNOWN) == 2
    assert str(surface) == "----,----"


@pytest.mark.parametrize("line_count,column_count", [(0, 2), (2, 0), (3, 2), (2, 5), (-2, 2)])
def test_invalid_dimensions(line_count, column_count):
    with pytest.raises(SurfaceFormatError):
        PuzzleSurface(line_count, column_count)


def test_set_cell_updates_counts_and_dirty_flag():
    surface = PuzzleSurface(2, 2)
    assert not surface.has_changes()

    surface.set_cell(0, 1, CellValue.ONE)

    assert surface.has_changes()
    assert surface.get_cell(0, 1) is CellValue.ONE
    assert surface.count_in_line(0, CellValue.ONE) == 1
    assert surface.count_in_line(0, CellValue.UNKNOWN) == 1
    assert surface.count_in_column(1, CellValue.ONE) == 1
    assert surface.count_in_column(0, CellValue.UNKNOWN) == 2

    surface.accept_changes()
    assert not surface.has_changes()


def test_set_cell_rejects_unknown():
    surface = PuzzleSurface(2, 2)
    with pytest.raises(ValueError):
        surface.set_cell(0, 0, CellValue.UNKNOWN)


def test_set_cell_coerces_plain_ints():
    surface = ChangeTrackingSurface.from_cells(np.full((2, 2), CellValue.UNKNOWN, dtype=np.int8))

    with pytest.raises(ValueError):
        surface.set_cell(0, 0, -1)
    with pytest.raises(ValueError):
        surface.set_cell(0, 0, 2)
    assert not surface.has_changes()

    surface.set_cell(0, 1, 1)
    assert surface.get_cell(0, 1) is CellValue.ONE
    assert surface.get_changed_cells() == [(SurfacePosition(0, 1), CellValue.ONE)]
    assert surface.get_changed_cells()[0][1] is CellValue.ONE


def test_count_queries_check_range():
    surface = PuzzleSurface(2, 2)
    with pytest.raises(IndexError):
        surface.count_in_line(2, CellValue.ZERO)
    with pytest.raises(IndexError):
        surface.is_column_complete(-1)


def test_cache_consistency_after_writes():
    surface = create_from_text("--1-", "0---", "----", "-1--")
    # Warm every cache entry before writing
    for index in range(4):
        surface.count_in_line(index, CellValue.ZERO)
        surface.count_in_column(index, CellValue.ZERO)

    writes = [(0, 0, CellValue.ZERO), (1, 2, CellValue.ONE), (2, 2, CellValue.ZERO), (0, 0, CellValue.ONE)]
    for line_index, column_index, value in writes:
        surface.set_cell(line_index, column_index, value)

    for index in range(4):
        line_counts = _rescan(surface, line_index=index)
        column_counts = _rescan(surface, column_index=index)
        for value in CellValue:
            assert surface.count_in_line(index, value) == line_counts[value]
            assert surface.count_in_column(index, value) == column_counts[value]
        assert sum(surface.count_in_line(index, value) for value in CellValue) == 4
        assert surface.is_line_complete(index) == (line_counts[CellValue.UNKNOWN] == 0)


def test_is_solved(solved_surface):
    assert solved_surface.is_solved
    assert all(solved_surface.is_column_complete(index) for index in range(6))


def test_change_tracking_records_writes_by_position():
    surface = ChangeTrackingSurface(2, 2)
    surface.set_cell(1, 0, CellValue.ONE)
    surface.set_cell(0, 1, CellValue.ZERO)
    surface.set_cell(1, 0, CellValue.ZERO)

    assert surface.get_changed_cells() == [
        (SurfacePosition(0, 1), CellValue.ZERO),
        (SurfacePosition(1, 0), CellValue.ZERO),
    ]
    assert surface.has_changes()

    surface.accept_changes()
    assert surface.get_changed_cells() == []
    assert not surface.has_changes()


def test_from_cells_wraps_matrix_without_validation():
    surface = PuzzleSurface.from_cells(np.array([[0, 1, -1]], dtype=np.int8))

    assert surface.line_count == 1
    assert surface.to_string() == "01-"


def test_helpers():
    surface = create_from_text("1-", "-0")

    assert read_line(surface, 1) == (CellValue.UNKNOWN, CellValue.ZERO)
    assert list(iter_unknown_positions(surface)) == [SurfacePosition(0, 1), SurfacePosition(1, 0)]
    assert copy_cells(surface).tolist() == [[1, -1], [-1, 0]]


def test_surface_position_ordering_and_str():
    positions = [SurfacePosition(1, 0), SurfacePosition(0, 3), SurfacePosition(0, 1)]

    assert sorted(positions) == [SurfacePosition(0, 1), SurfacePosition(0, 3), SurfacePosition(1, 0)]
    assert str(SurfacePosition(2, 5)) == "(2,5)"
    assert SurfacePosition(2, 5).coord == (2, 5)


def test_cell_value_helpers():
    assert CellValue.ZERO.opposite is CellValue.ONE
    assert CellValue.ONE.opposite is CellValue.ZERO
    assert not CellValue.UNKNOWN.is_known
    assert CellValue.from_char("-") is CellValue.UNKNOWN
    with pytest.raises(ValueError):
        CellValue.UNKNOWN.opposite
    with pytest.raises(ValueError):
        CellValue.from_char("x")
