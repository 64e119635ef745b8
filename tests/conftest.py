import pytest
from typing import Callable

from trisol.search.engine import SearchContext, search
from trisol.triangle.board import Board


@pytest.fixture(scope="session")
def searched() -> Callable[[int], SearchContext]:
    # Full searches take seconds and create up to millions of boards,
    # so every starting hole is searched at most once per test session.
    contexts: dict[int, SearchContext] = {}

    def get(hole: int) -> SearchContext:
        if hole not in contexts:
            contexts[hole] = search(Board.start(hole))
        return contexts[hole]

    return get
