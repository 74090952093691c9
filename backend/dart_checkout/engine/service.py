from __future__ import annotations

import logging
from functools import lru_cache

from dart_checkout.engine.enumerator import MAX_DARTS
from dart_checkout.engine.finish import FinishRule, finish_rule_for
from dart_checkout.engine.ranking import CheckoutRoute
from dart_checkout.engine.table import MAX_CHECKOUT, get_checkout_table, ranked_routes

logger = logging.getLogger(__name__)

MIN_SCORE = 1


def _check_darts_remaining(darts_remaining: int) -> None:
    if darts_remaining not in range(1, MAX_DARTS + 1):
        raise ValueError("darts_remaining must be 1, 2, or 3")


@lru_cache(maxsize=4096)
def _compute(score: int, darts_remaining: int, rule: FinishRule) -> tuple[CheckoutRoute, ...]:
    logger.debug("computing checkout routes for %d (%d darts, %s)", score, darts_remaining, rule.value)
    return ranked_routes(score, darts_remaining, rule)


def get_checkout_routes(
    score: int,
    darts_remaining: int = 3,
    double_out: bool = True,
    *,
    master_out: bool = False,
) -> tuple[CheckoutRoute, ...] | None:
    """
    Ranked checkout routes for `score`, best first, or None when there is no finish.

    - score outside 1..170 -> None (routine, e.g. right after a bust)
    - darts_remaining outside 1..3 -> ValueError
    - 3 darts, double-out -> served from the precomputed table
    """
    _check_darts_remaining(darts_remaining)
    if score < MIN_SCORE or score > MAX_CHECKOUT:
        return None

    rule = finish_rule_for(double_out, master_out=master_out)
    if darts_remaining == MAX_DARTS and rule is FinishRule.DOUBLE_OUT:
        return get_checkout_table().get(score)

    routes = _compute(score, darts_remaining, rule)
    return routes or None


def get_checkout_suggestion(
    score: int,
    darts_remaining: int = 3,
    double_out: bool = True,
    *,
    master_out: bool = False,
) -> list[str] | None:
    """
    The preferred route in dart notation, e.g. ["T20", "T20", "Bull"] for 170.
    """
    routes = get_checkout_routes(score, darts_remaining, double_out, master_out=master_out)
    if not routes:
        return None
    return routes[0].as_strings()


def get_checkout_alternatives(
    score: int,
    darts_remaining: int = 3,
    double_out: bool = True,
    *,
    master_out: bool = False,
    limit: int = 2,
) -> list[list[str]]:
    routes = get_checkout_routes(score, darts_remaining, double_out, master_out=master_out)
    if not routes or limit <= 0:
        return []
    return [r.as_strings() for r in routes[1 : 1 + limit]]
