import random

from dart_checkout.engine.darts import INNER_BULL, OUTER_BULL, double, single, triple
from dart_checkout.engine.enumerator import enumerate_routes
from dart_checkout.engine.finish import FinishRule, validate
from dart_checkout.engine.ranking import CheckoutRoute, finish_preference, rank


def _double_out_candidates(score: int) -> list:
    return [r for r in enumerate_routes(score, 3) if validate(r, FinishRule.DOUBLE_OUT)]


def test_fewer_darts_rank_first() -> None:
    ranked = rank([(single(20), double(10)), (double(20),)])
    assert [r.as_strings() for r in ranked] == [["D20"], ["20", "D10"]]


def test_heavier_setup_darts_rank_first() -> None:
    ranked = rank(_double_out_candidates(160))
    assert ranked[0].as_strings() == ["T20", "T20", "D20"]
    assert ranked[1].as_strings() == ["T20", "Bull", "Bull"]


def test_biggest_setup_dart_is_thrown_first() -> None:
    ranked = rank([(triple(19), triple(20), INNER_BULL), (triple(20), triple(19), INNER_BULL)])
    assert ranked[0].as_strings() == ["T20", "T19", "Bull"]


def test_closing_double_preference_breaks_ties() -> None:
    ranked = rank([(triple(20), double(16)), (triple(20), double(20)), (triple(20), INNER_BULL)])
    assert [r.as_strings()[-1] for r in ranked] == ["D20", "D16", "Bull"]


def test_finish_preference_order() -> None:
    favourites = [
        double(20),
        double(16),
        double(18),
        double(12),
        double(10),
        double(8),
        double(4),
        double(2),
        double(1),
        INNER_BULL,
        double(19),
        double(17),
        double(3),
    ]
    weights = [finish_preference(d) for d in favourites]
    assert weights == sorted(weights)
    assert len(set(weights)) == len(weights)

    # Non-double closers come after every double.
    assert finish_preference(triple(20)) > finish_preference(double(1))
    assert finish_preference(single(20)) > finish_preference(triple(1))
    assert finish_preference(OUTER_BULL) > finish_preference(single(1))


def test_exactly_one_preferred_and_it_is_first() -> None:
    ranked = rank(_double_out_candidates(121))
    assert ranked[0].preferred
    assert sum(1 for r in ranked if r.preferred) == 1


def test_rank_ignores_input_order() -> None:
    candidates = _double_out_candidates(99)
    expected = rank(candidates)
    rng = random.Random(1234)
    for _ in range(5):
        shuffled = list(candidates)
        rng.shuffle(shuffled)
        assert rank(shuffled) == expected


def test_duplicates_collapse() -> None:
    route = (triple(20), double(20))
    ranked = rank([route, route, CheckoutRoute(darts=route, preferred=True)])
    assert ranked == [CheckoutRoute(darts=route, preferred=True)]


def test_empty_input() -> None:
    assert rank([]) == []


def test_route_value_object() -> None:
    r = CheckoutRoute(darts=(triple(20), triple(20), INNER_BULL))
    assert r.total == 170
    assert r.score == 170
    assert r.as_strings() == ["T20", "T20", "Bull"]
    assert r == CheckoutRoute(darts=(triple(20), triple(20), INNER_BULL))
