from __future__ import annotations

from enum import Enum
from typing import Sequence

from dart_checkout.engine.darts import DartKind, DartValue


class FinishRule(str, Enum):
    DOUBLE_OUT = "double_out"
    MASTER_OUT = "master_out"
    STRAIGHT_OUT = "straight_out"


FINISHING_KINDS: dict[FinishRule, frozenset[DartKind]] = {
    FinishRule.DOUBLE_OUT: frozenset({DartKind.DOUBLE, DartKind.INNER_BULL}),
    FinishRule.MASTER_OUT: frozenset({DartKind.DOUBLE, DartKind.TRIPLE, DartKind.INNER_BULL}),
    FinishRule.STRAIGHT_OUT: frozenset(DartKind),
}


def finish_rule_for(double_out: bool, *, master_out: bool = False) -> FinishRule:
    if master_out:
        return FinishRule.MASTER_OUT
    if double_out:
        return FinishRule.DOUBLE_OUT
    return FinishRule.STRAIGHT_OUT


def is_valid_finish(last: DartValue, rule: FinishRule) -> bool:
    return last.kind in FINISHING_KINDS[rule]


def validate(route: Sequence[DartValue], rule: FinishRule) -> bool:
    """
    True when the final dart of `route` may legally end a leg under `rule`.

    Only the final dart is inspected; summing to the target is the enumerator's job.
    """
    if not route:
        return False
    return is_valid_finish(route[-1], rule)


def _min_finish_score(rule: FinishRule) -> int:
    # D1 for double-out and master-out, S1 for straight-out.
    return 2 if rule in (FinishRule.DOUBLE_OUT, FinishRule.MASTER_OUT) else 1


def check_visit(remaining: int, darts: Sequence[DartValue]) -> None:
    """
    Raise ValueError if the visit keeps going after the score reached 0.

    You can't throw extra darts after the leg ends, so such a visit is malformed
    rather than a bust.
    """
    running = 0
    for i, d in enumerate(darts):
        running += d.score
        if running == remaining and i != len(darts) - 1:
            raise ValueError("visit includes darts after checkout; submit only darts thrown")


def is_checkout(remaining: int, darts: Sequence[DartValue], rule: FinishRule) -> bool:
    """
    A thrown visit is a checkout when it scores exactly `remaining` and the last dart
    satisfies the finish rule.
    """
    if not darts:
        return False
    if sum(d.score for d in darts) != remaining:
        return False
    return validate(darts, rule)


def is_bust(remaining: int, darts: Sequence[DartValue], rule: FinishRule) -> bool:
    """
    Bust: the visit would go below 0, reaches 0 on an illegal final dart, or leaves a
    score that can no longer be finished under the rule (1 for double-out / master-out).
    """
    left = remaining - sum(d.score for d in darts)
    if left < 0:
        return True
    if left == 0:
        return not validate(darts, rule)
    return left < _min_finish_score(rule)
