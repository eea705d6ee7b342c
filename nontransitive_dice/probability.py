from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Sequence

from .dice import FACE_COUNT, Die

TOTAL_OUTCOMES = FACE_COUNT * FACE_COUNT
EVEN_ODDS = Fraction(1, 2)


@dataclass(frozen=True)
class ProbabilityMatrix:
    """
    Win probability of the row die against the column die.

    Off-diagonal cells hold exact fractions; diagonal cells are ``None``
    because a die is never matched against itself in play. ``self_play``
    gives the value shown for the diagonal in the help table.
    """
    dice: tuple[Die, ...]
    cells: tuple[tuple[Optional[Fraction], ...], ...]

    def __len__(self) -> int:
        return len(self.dice)

    def __getitem__(self, index: tuple[int, int]) -> Optional[Fraction]:
        row, col = index
        return self.cells[row][col]

    def self_play(self, index: int) -> Fraction:
        die = self.dice[index]
        return ProbabilityCalculator.pairwise(die, die)

    def beats(self, row: int, col: int) -> bool:
        probability = self[row, col]
        return probability is not None and probability > EVEN_ODDS


class ProbabilityCalculator:
    @staticmethod
    def pairwise(die1: Die, die2: Die) -> Fraction:
        # ties count for neither side
        wins = sum(1 for f1 in die1 for f2 in die2 if f1 > f2)
        return Fraction(wins, TOTAL_OUTCOMES)

    @staticmethod
    def matrix(dice: Sequence[Die]) -> ProbabilityMatrix:
        dice = tuple(dice)
        cells = tuple(
            tuple(
                None if i == j else ProbabilityCalculator.pairwise(row_die, col_die)
                for j, col_die in enumerate(dice)
            )
            for i, row_die in enumerate(dice)
        )
        return ProbabilityMatrix(dice, cells)
