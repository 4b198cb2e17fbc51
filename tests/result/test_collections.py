from collections.abc import Iterator

from projector import Result


def test_first_ok_returns_first_ok_value() -> None:
    results = [Result.err("error 1"), Result.ok(42), Result.err("error 2")]

    assert Result.first_ok(results) == 42


def test_first_ok_returns_none_without_ok() -> None:
    assert Result.first_ok([Result.err(1), Result.err(2)]) is None
    assert Result.first_ok([]) is None


def test_first_ok_stops_consuming_lazy_source() -> None:
    pulled: list[int] = []

    def source() -> Iterator[Result[int, str]]:
        for i in range(5):
            pulled.append(i)
            yield Result.ok(i) if i == 1 else Result.err(f"error {i}")

    assert Result.first_ok(source()) == 1
    assert pulled == [0, 1]


def test_okays_yields_ok_values_in_order() -> None:
    results = [Result.err("a"), Result.ok(1), Result.err("b"), Result.ok(2)]

    assert list(Result.okays(results)) == [1, 2]


def test_okays_of_empty_source_is_empty() -> None:
    assert list(Result.okays([])) == []


def test_okays_is_lazy() -> None:
    pulled: list[int] = []

    def source() -> Iterator[Result[int, str]]:
        for i in range(3):
            pulled.append(i)
            yield Result.ok(i)

    okays = Result.okays(source())
    assert pulled == []

    iterator = iter(okays)
    assert next(iterator) == 0
    assert pulled == [0]


def test_okays_is_restartable_over_restartable_source() -> None:
    okays = Result.okays([Result.ok(1), Result.err("x"), Result.ok(2)])

    assert list(okays) == [1, 2]
    assert list(okays) == [1, 2]


def test_okays_over_one_shot_source_is_exhausted_after_first_pass() -> None:
    okays = Result.okays(iter([Result.ok(1), Result.ok(2)]))

    assert list(okays) == [1, 2]
    assert list(okays) == []
