import pytest

from hillclimb.problems import SequenceWalk

POINTS = (1.0, 2.0, 5.0, 6.0, 1.0)


@pytest.fixture
def points() -> tuple[float, ...]:
    return POINTS


@pytest.fixture
def walk_start() -> SequenceWalk:
    return SequenceWalk(POINTS, 0)
