"""N-queens in the complete-state formulation: one queen per column."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations

from hillclimb.core.errors import HillClimbValueError
from hillclimb.core.types import RandomSource
from hillclimb.problems.contract import SearchProblem


@dataclass(frozen=True, slots=True)
class QueensBoard:
    """``rows[c]`` is the row of the queen standing in column ``c``."""

    rows: tuple[int, ...]

    @property
    def size(self) -> int:
        return len(self.rows)

    def attacking_pairs(self) -> int:
        """Count queen pairs sharing a row or a diagonal."""
        count = 0
        for (c1, r1), (c2, r2) in combinations(enumerate(self.rows), 2):
            if r1 == r2 or abs(r1 - r2) == c2 - c1:
                count += 1
        return count

    def expand(self) -> list[QueensBoard]:
        """Every board reachable by moving a single queen within its column."""
        neighbors: list[QueensBoard] = []
        for column, current in enumerate(self.rows):
            for row in range(self.size):
                if row == current:
                    continue
                moved = self.rows[:column] + (row,) + self.rows[column + 1 :]
                neighbors.append(QueensBoard(moved))
        return neighbors

    def render(self) -> str:
        lines = []
        for row in range(self.size):
            lines.append(" ".join("Q" if r == row else "." for r in self.rows))
        return "\n".join(lines)


def queens_heuristic(board: QueensBoard) -> float:
    """Negated number of attacking pairs, so a solution scores ``0``."""
    return -float(board.attacking_pairs())


def random_board(size: int, rng: RandomSource) -> QueensBoard:
    return QueensBoard(tuple(rng.randrange(size) for _ in range(size)))


def describe_board(board: QueensBoard) -> str:
    return f"rows={list(board.rows)} attacking={board.attacking_pairs()}"


def build_queens_problem(
    size: int,
    rng: RandomSource,
    start: QueensBoard | None = None,
) -> SearchProblem:
    """Bundle an N-queens problem; the start board is random unless given."""
    if size < 2:
        raise HillClimbValueError(f"queens board size must be at least 2, got {size}.")
    if start is not None and start.size != size:
        raise HillClimbValueError(f"start board has size {start.size}, expected {size}.")
    return SearchProblem(
        name="queens",
        initial_state=start if start is not None else random_board(size, rng),
        heuristic=queens_heuristic,
        random_state=lambda source: random_board(size, source),
        describe=describe_board,
    )


__all__ = [
    "QueensBoard",
    "queens_heuristic",
    "random_board",
    "describe_board",
    "build_queens_problem",
]
