import pytest

from binary_puzzle.lib.s1_surface import create_from_text

# Solution shared by the 6x6 puzzles below
SOLUTION_6X6 = ["010110", "101001", "001101", "110010", "101010", "010101"]

# Every line is a rotation of "0011010011", so no two lines repeat
SOLUTION_10X10 = [
    "0011010011",
    "0110100110",
    "1101001100",
    "1010011001",
    "0100110011",
    "1001100110",
    "0011001101",
    "0110011010",
    "1100110100",
    "1001101001",
]

# Rotations of "00110100110101"
SOLUTION_14X14 = [
    "00110100110101",
    "01101001101010",
    "11010011010100",
    "10100110101001",
    "01001101010011",
    "10011010100110",
    "00110101001101",
    "01101010011010",
    "11010100110100",
    "10101001101001",
    "01010011010011",
    "10100110100110",
    "01001101001101",
    "10011010011010",
]


def strip_diagonals(answer, diagonals, keep=()):
    """Blank every cell whose (line + column) % size falls in ``diagonals``, except ``keep``."""
    size = len(answer)
    return [
        "".join(
            "-" if (line_index + column_index) % size in diagonals and (line_index, column_index) not in keep
            else ch
            for column_index, ch in enumerate(line)
        )
        for line_index, line in enumerate(answer)
    ]


# Puzzles with a unique answer, each solvable by the rules alone
CORPUS = {
    "diagonal_6x6": (
        ["-10110", "1-1001", "00-101", "110-10", "1010-0", "01010-"],
        SOLUTION_6X6,
    ),
    "sparse_6x6": (
        ["01-11-", "-01-0-", "00---1", "-10-1-", "1--0-0", "--01-1"],
        SOLUTION_6X6,
    ),
    # 37 unknowns; each one sits next to a given pair or between two equal givens
    "pairs_10x10": (
        strip_diagonals(SOLUTION_10X10, {0, 1, 5, 7}, keep={(0, 0), (8, 9), (9, 8)}),
        SOLUTION_10X10,
    ),
    # 68 unknowns, same construction
    "pairs_14x14": (
        strip_diagonals(SOLUTION_14X14, {1, 5, 7, 10, 13}, keep={(0, 13), (13, 0)}),
        SOLUTION_14X14,
    ),
}

# Unique answer, but the rules stop after (2,0) and (5,6). The two candidate
# completions left for line 0 are only told apart by line 7: one of them would
# put three 1s in a row there.
MIXED_8X8 = (
    ["0--1--10", "11001010", "-0100101", "00110110", "11001001", "010101-1", "10101010", "0--1--01"],
    ["01011010", "11001010", "10100101", "00110110", "11001001", "01010101", "10101010", "00110101"],
)


@pytest.fixture
def solution_lines():
    return list(SOLUTION_6X6)


@pytest.fixture
def solved_surface():
    return create_from_text(*SOLUTION_6X6)


@pytest.fixture(params=sorted(CORPUS))
def corpus_puzzle(request):
    """(name, puzzle lines, answer lines) for every puzzle in the corpus."""
    puzzle, answer = CORPUS[request.param]
    return request.param, puzzle, answer


@pytest.fixture
def mixed_puzzle():
    """(puzzle lines, answer lines) for a puzzle that needs both the rules and the search."""
    puzzle, answer = MIXED_8X8
    return list(puzzle), list(answer)


@pytest.fixture
def empty_4x4():
    return create_from_text("----", "----", "----", "----")
