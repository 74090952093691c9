from __future__ import annotations

import logging
from threading import Lock
from time import perf_counter
from types import MappingProxyType
from typing import Mapping

from dart_checkout.engine.enumerator import MAX_DARTS, enumerate_routes
from dart_checkout.engine.finish import FinishRule, validate
from dart_checkout.engine.ranking import CheckoutRoute, rank

logger = logging.getLogger(__name__)

MIN_TABLE_SCORE = 2
MAX_CHECKOUT = 170

CheckoutTable = Mapping[int, tuple[CheckoutRoute, ...]]


def ranked_routes(score: int, darts: int, rule: FinishRule) -> tuple[CheckoutRoute, ...]:
    """
    Enumerate, filter by finish rule and rank the routes for one score.
    """
    candidates = [r for r in enumerate_routes(score, darts) if validate(r, rule)]
    return tuple(rank(candidates))


def build() -> CheckoutTable:
    """
    Build the canonical table: 3 darts, double-out, every score 2..170.

    Scores without any route (bogey numbers) are left out of the table.
    """
    started = perf_counter()
    table: dict[int, tuple[CheckoutRoute, ...]] = {}
    for score in range(MIN_TABLE_SCORE, MAX_CHECKOUT + 1):
        routes = ranked_routes(score, MAX_DARTS, FinishRule.DOUBLE_OUT)
        if routes:
            table[score] = routes

    logger.info(
        "built checkout table: %d scores, %d routes in %.1f ms",
        len(table),
        sum(len(v) for v in table.values()),
        (perf_counter() - started) * 1000.0,
    )
    return MappingProxyType(table)


_TABLE: CheckoutTable | None = None
_TABLE_LOCK = Lock()


def get_checkout_table() -> CheckoutTable:
    """
    The process-wide canonical table, built on first use.

    Concurrent first callers wait on the lock; only one of them runs build().
    """
    global _TABLE
    if _TABLE is None:
        with _TABLE_LOCK:
            if _TABLE is None:
                _TABLE = build()
    return _TABLE


def bogey_numbers() -> list[int]:
    """
    Scores in 2..170 with no 3-dart double-out finish, highest first.
    """
    table = get_checkout_table()
    return [s for s in range(MAX_CHECKOUT, MIN_TABLE_SCORE - 1, -1) if s not in table]


def is_bogey_number(score: int) -> bool:
    if score < MIN_TABLE_SCORE or score > MAX_CHECKOUT:
        return False
    return score not in get_checkout_table()
