from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class DartKind(str, Enum):
    SINGLE = "single"
    DOUBLE = "double"
    TRIPLE = "triple"
    OUTER_BULL = "outer_bull"
    INNER_BULL = "inner_bull"


_MULTIPLIER: dict[DartKind, int] = {
    DartKind.SINGLE: 1,
    DartKind.DOUBLE: 2,
    DartKind.TRIPLE: 3,
    DartKind.OUTER_BULL: 1,
    DartKind.INNER_BULL: 2,
}

BULL_BASE = 25


@dataclass(frozen=True)
class DartValue:
    """
    A single scoring dart outcome.

    - kind: which bed was hit (single/double/triple ring, outer or inner bull)
    - base: 1-20 for the numbered beds, 25 for either bull

    A miss is deliberately not representable: it can never contribute to a checkout.
    """

    kind: DartKind
    base: int

    def __post_init__(self) -> None:
        if self.kind in (DartKind.OUTER_BULL, DartKind.INNER_BULL):
            if self.base != BULL_BASE:
                raise ValueError("bull darts must have base=25")
            return

        if self.base not in range(1, 21):
            raise ValueError("base must be 1-20 for single, double and triple darts")

    @property
    def multiplier(self) -> int:
        return _MULTIPLIER[self.kind]

    @property
    def score(self) -> int:
        return self.base * self.multiplier

    @property
    def is_double(self) -> bool:
        # The inner bull counts as a double for finishing purposes.
        return self.kind in (DartKind.DOUBLE, DartKind.INNER_BULL)

    def __str__(self) -> str:
        return format_dart(self)


OUTER_BULL = DartValue(DartKind.OUTER_BULL, BULL_BASE)
INNER_BULL = DartValue(DartKind.INNER_BULL, BULL_BASE)


def single(base: int) -> DartValue:
    return DartValue(DartKind.SINGLE, base)


def double(base: int) -> DartValue:
    return DartValue(DartKind.DOUBLE, base)


def triple(base: int) -> DartValue:
    return DartValue(DartKind.TRIPLE, base)


def _all_scoring_darts() -> tuple[DartValue, ...]:
    darts: list[DartValue] = []
    for v in range(1, 21):
        darts.append(single(v))
        darts.append(double(v))
        darts.append(triple(v))
    darts.append(OUTER_BULL)
    darts.append(INNER_BULL)
    return tuple(darts)


ALL_DARTS: tuple[DartValue, ...] = _all_scoring_darts()

MAX_DART_SCORE: int = max(d.score for d in ALL_DARTS)
MIN_DART_SCORE: int = min(d.score for d in ALL_DARTS)


def enumerate_all_dart_values() -> tuple[DartValue, ...]:
    """
    The complete catalogue of the 62 legal scoring outcomes, in a fixed order.
    """
    return ALL_DARTS


_PREFIX: dict[DartKind, str] = {
    DartKind.SINGLE: "",
    DartKind.DOUBLE: "D",
    DartKind.TRIPLE: "T",
}


def format_dart(d: DartValue) -> str:
    if d.kind is DartKind.OUTER_BULL:
        return "25"
    if d.kind is DartKind.INNER_BULL:
        return "Bull"
    return f"{_PREFIX[d.kind]}{d.base}"


def format_route(darts: Iterable[DartValue]) -> list[str]:
    return [format_dart(d) for d in darts]


def parse_dart(text: str) -> DartValue:
    """
    Decode a dart notation ("20", "S20", "D16", "T20", "25", "Bull").

    "D25" is accepted as the inner bull. Raises ValueError for anything else.
    """
    token = text.strip().upper()
    if not token:
        raise ValueError("empty dart notation")

    if token in ("BULL", "D25", "DB", "DBULL"):
        return INNER_BULL
    if token in ("25", "S25", "SB", "SBULL"):
        return OUTER_BULL

    kind = DartKind.SINGLE
    digits = token
    if token[0] in "SDT":
        kind = {"S": DartKind.SINGLE, "D": DartKind.DOUBLE, "T": DartKind.TRIPLE}[token[0]]
        digits = token[1:]

    if not digits.isdigit():
        raise ValueError(f"invalid dart notation: {text!r}")
    base = int(digits)
    if base not in range(1, 21):
        raise ValueError(f"invalid dart notation: {text!r}")
    return DartValue(kind, base)


def parse_route(notations: Iterable[str]) -> tuple[DartValue, ...]:
    return tuple(parse_dart(n) for n in notations)
