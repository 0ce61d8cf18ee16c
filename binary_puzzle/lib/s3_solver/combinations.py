"""Brute-force enumeration of the completions of a single line."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from binary_puzzle.lib.s1_surface import CellValue, PuzzleSurfaceApi

Line = Tuple[CellValue, ...]


class BitCounter:
    """
    Fixed-width binary counter, bit 0 is the least significant.

    Starts with every bit cleared; increment() walks through all 2^width
    values in increasing order and raises OverflowError past all-ones.
    """

    def __init__(self, width: int):
        if width < 0:
            raise ValueError("width must not be negative")
        self.bits: List[bool] = [False] * width

    def __len__(self) -> int:
        return len(self.bits)

    def __getitem__(self, index: int) -> bool:
        return self.bits[index]

    def increment(self) -> None:
        for index, bit in enumerate(self.bits):
            if not bit:
                self.bits[index] = True
                for lower in range(index):
                    self.bits[lower] = False
                return
        raise OverflowError(f"BitCounter of width {len(self.bits)} is already at its maximum value.")

    def are_all_set(self) -> bool:
        return all(self.bits)


def is_valid_complete_sequence(sequence: Sequence[CellValue]) -> bool:
    """True when no digit repeats three times in a row and both digits occur equally often (and at all)."""
    zero_count = 0
    one_count = 0
    length = len(sequence)
    for index in range(length):
        if sequence[index] is CellValue.ZERO:
            zero_count += 1
        else:
            one_count += 1

        if index < length - 2 and sequence[index] == sequence[index + 1] == sequence[index + 2]:
            return False

    return zero_count == one_count and zero_count > 0


def create_line_combinations(surface: PuzzleSurfaceApi, line_index: int) -> List[Line]:
    """
    Every valid completion of one line, in increasing counter order.

    The i-th unknown cell (left to right) takes bit i of the counter; known
    cells are copied as-is. Cost is 2^unknowns, callers only invoke it on
    lines that are close to complete.
    """
    known: List[CellValue] = [
        surface.get_cell(line_index, column_index) for column_index in range(surface.column_count)
    ]
    unknown_columns = [index for index, cell in enumerate(known) if cell is CellValue.UNKNOWN]

    counter = BitCounter(len(unknown_columns))
    combinations: List[Line] = []
    for combination_index in range(2 ** len(unknown_columns)):
        if combination_index > 0:
            counter.increment()

        candidate = list(known)
        for bit_index, column_index in enumerate(unknown_columns):
            candidate[column_index] = CellValue.ONE if counter[bit_index] else CellValue.ZERO

        if is_valid_complete_sequence(candidate):
            combinations.append(tuple(candidate))

    return combinations


def filter_matching_complete_lines(
    complete_lines: Sequence[Line],
    surface: PuzzleSurfaceApi,
    line_index: int,
) -> List[Line]:
    """Complete lines that agree with every known cell of the given (incomplete) line."""
    matching: List[Line] = []
    for complete_line in complete_lines:
        is_match = True
        for column_index in range(surface.column_count):
            cell = surface.get_cell(line_index, column_index)
            if cell is not CellValue.UNKNOWN and cell is not complete_line[column_index]:
                is_match = False
                break
        if is_match:
            matching.append(complete_line)
    return matching
