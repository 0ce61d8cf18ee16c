import itertools

import pytest

from binary_puzzle.lib.s1_surface import (
    CellValue,
    PuzzleSurface,
    SurfacePosition,
    copy_cells,
    create_from_text,
    iter_unknown_positions,
)
from binary_puzzle.lib.s2_validator import try_validate, validate
from binary_puzzle.lib.s3_solver import BacktrackingPuzzleSolver


def test_solves_empty_grid(empty_4x4):
    solver = BacktrackingPuzzleSolver()

    assert solver.solve(empty_4x4)

    assert empty_4x4.is_solved
    validate(empty_4x4)
    assert solver.nodes > 0
    assert len(solver.resolved_positions) == 16


def test_explores_last_cell_first_and_zero_first():
    surface = create_from_text("--", "--")

    BacktrackingPuzzleSolver().solve(surface)

    # (1,1)=0 then (1,0)=1, (0,1)=1, (0,0)=0
    assert surface.to_string() == "01,10"


def test_keeps_known_cells():
    surface = create_from_text("0---", "----", "----", "----")
    solver = BacktrackingPuzzleSolver()

    assert solver.solve(surface)

    assert surface.get_cell(0, 0) is CellValue.ZERO
    assert SurfacePosition(0, 0) not in solver.resolved_positions
    assert try_validate(surface)


def test_invalid_start_is_not_solved():
    surface = create_from_text("000-", "----", "----", "----")
    solver = BacktrackingPuzzleSolver()

    assert not solver.solve(surface)

    assert surface.to_string() == "000-,----,----,----"
    assert solver.nodes == 1
    assert solver.resolved_positions == []


def test_already_solved_surface(solved_surface):
    solver = BacktrackingPuzzleSolver()

    assert solver.solve(solved_surface)
    assert solver.resolved_positions == []


def test_writes_once_into_base_surface(empty_4x4):
    BacktrackingPuzzleSolver().solve(empty_4x4)

    # Hypotheses live in layered views; only the final flatten touches the grid
    assert empty_4x4.has_changes()
    for index in range(4):
        assert empty_4x4.count_in_line(index, CellValue.ZERO) == 2
        assert empty_4x4.count_in_column(index, CellValue.ONE) == 2


def test_requires_surface():
    with pytest.raises(TypeError):
        BacktrackingPuzzleSolver().solve(None)


def test_mixed_puzzle_has_a_single_completion(mixed_puzzle):
    puzzle, answer = mixed_puzzle
    surface = create_from_text(*puzzle)
    unknowns = list(iter_unknown_positions(surface))

    completions = []
    for values in itertools.product((CellValue.ZERO, CellValue.ONE), repeat=len(unknowns)):
        candidate = PuzzleSurface.from_cells(copy_cells(surface))
        for position, value in zip(unknowns, values):
            candidate.set_cell(position.line_index, position.column_index, value)
        if try_validate(candidate):
            completions.append(candidate.to_string())

    assert completions == [",".join(answer)]


def test_finds_mixed_puzzle_answer(mixed_puzzle):
    puzzle, answer = mixed_puzzle
    surface = create_from_text(*puzzle)

    assert BacktrackingPuzzleSolver().solve(surface)
    assert surface.to_string() == ",".join(answer)
