import pytest

from safecall import NOTHING, Result, Some, Step


def test_present_result():
    res = Result(Some("Springfield"))
    assert res.is_present
    assert res.get() == "Springfield"
    assert res.get_or_default("Unknown") == "Springfield"
    assert res.get_optional() == Some("Springfield")


def test_absent_result():
    res = Result()
    assert res.get_optional() is NOTHING
    assert res.get() is None
    assert res.get_or_default("Unknown") == "Unknown"


def test_result_is_not_chainable():
    assert not hasattr(Result(), "step")


def test_step_defaults_name_from_function():
    def get_city(a):
        return a

    assert Step(get_city).name == "get_city"
    assert Step(get_city, name="city").name == "city"


def test_step_run_normalises_outcome():
    assert Step(lambda x: None).run(1) is NOTHING
    assert Step(lambda x: x + 1).run(1) == Some(2)


def test_step_rejects_non_callable():
    with pytest.raises(TypeError):
        Step("nope")  # type: ignore[arg-type]
