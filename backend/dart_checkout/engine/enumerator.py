from __future__ import annotations

from collections import defaultdict

from dart_checkout.engine.darts import ALL_DARTS, MAX_DART_SCORE, MIN_DART_SCORE, DartValue

MAX_DARTS = 3

Route = tuple[DartValue, ...]


def _darts_by_score() -> dict[int, tuple[DartValue, ...]]:
    by_score: dict[int, list[DartValue]] = defaultdict(list)
    for d in ALL_DARTS:
        by_score[d.score].append(d)
    return {score: tuple(darts) for score, darts in by_score.items()}


_DARTS_BY_SCORE: dict[int, tuple[DartValue, ...]] = _darts_by_score()


def _unreachable(remaining: int, darts_left: int) -> bool:
    return remaining > MAX_DART_SCORE * darts_left or remaining < MIN_DART_SCORE


def enumerate_routes(target_score: int, darts_budget: int) -> list[Route]:
    """
    Every dart sequence (in throw order) scoring exactly `target_score` with at most
    `darts_budget` darts.

    Shorter sequences come first; within a length the order follows ALL_DARTS, so the
    output is stable across calls. An empty list means the score is unreachable.
    """
    budget = min(darts_budget, MAX_DARTS)
    routes: list[Route] = []
    if target_score <= 0 or budget <= 0:
        return routes

    for length in range(1, budget + 1):
        _extend(routes, (), target_score, length)
    return routes


def _extend(out: list[Route], prefix: Route, remaining: int, darts_left: int) -> None:
    if _unreachable(remaining, darts_left):
        return

    if darts_left == 1:
        # Closing dart: look it up by score instead of scanning the domain.
        for d in _DARTS_BY_SCORE.get(remaining, ()):
            out.append((*prefix, d))
        return

    for d in ALL_DARTS:
        rest = remaining - d.score
        if rest <= 0:
            continue
        _extend(out, (*prefix, d), rest, darts_left - 1)
