from dart_checkout.engine.darts import double, single, triple
from dart_checkout.engine.enumerator import enumerate_routes


def test_single_dart_routes() -> None:
    assert enumerate_routes(40, 1) == [(double(20),)]
    assert enumerate_routes(60, 1) == [(triple(20),)]


def test_small_score_lists_every_sequence() -> None:
    routes = enumerate_routes(3, 2)
    assert routes == [
        (triple(1),),
        (single(3),),
        (single(1), double(1)),
        (single(1), single(2)),
        (double(1), single(1)),
        (single(2), single(1)),
    ]


def test_shorter_routes_come_first() -> None:
    lengths = [len(r) for r in enumerate_routes(50, 3)]
    assert lengths == sorted(lengths)


def test_routes_sum_to_target_within_budget() -> None:
    for budget in (1, 2, 3):
        routes = enumerate_routes(50, budget)
        assert routes
        for r in routes:
            assert 1 <= len(r) <= budget
            assert sum(d.score for d in r) == 50


def test_180_has_exactly_one_route() -> None:
    assert enumerate_routes(180, 3) == [(triple(20), triple(20), triple(20))]


def test_unreachable_is_empty() -> None:
    assert enumerate_routes(181, 3) == []
    assert enumerate_routes(170, 1) == []
    assert enumerate_routes(121, 2) == []


def test_non_positive_target_is_empty() -> None:
    assert enumerate_routes(0, 3) == []
    assert enumerate_routes(-5, 3) == []


def test_enumeration_is_stable() -> None:
    assert enumerate_routes(99, 3) == enumerate_routes(99, 3)
