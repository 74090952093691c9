from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Sequence, Union

from dart_checkout.engine.darts import DartKind, DartValue, format_dart


@dataclass(frozen=True)
class CheckoutRoute:
    """
    A single checkout route (1-3 darts) that finishes exactly.
    """

    darts: tuple[DartValue, ...]
    preferred: bool = False

    @property
    def total(self) -> int:
        return sum(d.score for d in self.darts)

    @property
    def score(self) -> int:
        return self.total

    def as_strings(self) -> list[str]:
        return [format_dart(d) for d in self.darts]


# Closing doubles, most to least conventionally used in professional play.
FAVOURITE_FINISHES: tuple[tuple[DartKind, int], ...] = (
    (DartKind.DOUBLE, 20),
    (DartKind.DOUBLE, 16),
    (DartKind.DOUBLE, 18),
    (DartKind.DOUBLE, 12),
    (DartKind.DOUBLE, 10),
    (DartKind.DOUBLE, 8),
    (DartKind.DOUBLE, 4),
    (DartKind.DOUBLE, 2),
    (DartKind.DOUBLE, 1),
    (DartKind.INNER_BULL, 25),
)

_FAVOURITE_INDEX: dict[tuple[DartKind, int], int] = {
    key: i for i, key in enumerate(FAVOURITE_FINISHES)
}

_SETUP_KIND_RANK: dict[DartKind, int] = {
    DartKind.TRIPLE: 0,
    DartKind.DOUBLE: 1,
    DartKind.SINGLE: 2,
    DartKind.INNER_BULL: 3,
    DartKind.OUTER_BULL: 4,
}


def finish_preference(d: DartValue) -> int:
    """
    Lower is better. The favourite doubles come first, then the other doubles by
    descending number. Triples, singles and the outer bull only close a leg under
    master-out or straight-out and rank after every double.
    """
    fav = _FAVOURITE_INDEX.get((d.kind, d.base))
    if fav is not None:
        return fav

    base_offset = 20 - d.base
    if d.kind is DartKind.DOUBLE:
        return 10 + base_offset
    if d.kind is DartKind.TRIPLE:
        return 30 + base_offset
    if d.kind is DartKind.SINGLE:
        return 50 + base_offset
    return 70


def _route_weight(route: tuple[DartValue, ...]) -> tuple:
    """
    Sort key for routes. Lower tuples are preferred.
    """
    # 1) fewer darts
    # 2) heaviest setup darts, biggest first
    # 3) nicer closing double
    # 4) deterministic tie-breakers on setup ring and notation
    setup = route[:-1]
    return (
        len(route),
        -sum(d.score for d in setup),
        tuple(-d.score for d in setup),
        finish_preference(route[-1]),
        tuple(_SETUP_KIND_RANK[d.kind] for d in setup),
        ",".join(format_dart(d) for d in route),
    )


RouteLike = Union[CheckoutRoute, Sequence[DartValue]]


def _darts_of(route: RouteLike) -> tuple[DartValue, ...]:
    if isinstance(route, CheckoutRoute):
        return route.darts
    return tuple(route)


def rank(routes: Iterable[RouteLike]) -> list[CheckoutRoute]:
    """
    Order candidate routes best-first and flag the top one as preferred.

    Duplicates collapse to one entry. The order depends only on the set of routes
    given, never on the order they arrive in.
    """
    unique = {_darts_of(r) for r in routes}
    unique.discard(())
    ordered = sorted(unique, key=_route_weight)

    out = [CheckoutRoute(darts=darts) for darts in ordered]
    if out:
        out[0] = replace(out[0], preferred=True)
    return out
