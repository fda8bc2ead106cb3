"""Tests for ParameterSpec discovery and call binding."""
import pytest

from optvec.broadcast import Parameter, ParameterSpec
from optvec.errors import UnexpectedArgument


def test_from_function_reads_defaults(scaled_sum_fn):
    spec = ParameterSpec.from_function(scaled_sum_fn)
    assert spec.names == ("a", "b", "k", "multby2")
    assert spec.required == ("a", "b", "k")
    assert spec["multby2"].has_default
    assert spec["multby2"].default is True
    assert not spec["a"].has_default


def test_from_pairs_matches_from_function(scaled_sum_fn, flag_spec):
    by_hand = [(p.name, p.has_default, p.default) for p in flag_spec]
    discovered = [
        (p.name, p.has_default, p.default)
        for p in ParameterSpec.from_function(scaled_sum_fn)
    ]
    assert by_hand == discovered


def test_none_default_is_still_a_default():
    def f(x, y=None):
        return x

    spec = ParameterSpec.from_function(f)
    assert spec["y"].has_default
    assert spec["y"].default is None


def test_empty_spec_rejected():
    with pytest.raises(ValueError, match="at least one"):
        ParameterSpec([])


def test_duplicate_names_rejected():
    with pytest.raises(ValueError, match="duplicate"):
        ParameterSpec([Parameter("a", False), Parameter("a", True, 1)])


def test_variadics_rejected():
    def f(a, *rest, **extra):
        return a

    with pytest.raises(ValueError, match="variadic"):
        ParameterSpec.from_function(f)


def test_contains_and_len(flag_spec):
    assert "k" in flag_spec
    assert "z" not in flag_spec
    assert len(flag_spec) == 4


def test_repr_shows_defaults(flag_spec):
    assert repr(flag_spec) == "ParameterSpec(a, b, k, multby2=True)"


# ── bind ──

def test_bind_positional(flag_spec):
    assert flag_spec.bind(1, 2, 3) == {"a": 1, "b": 2, "k": 3}


def test_bind_mixed(flag_spec):
    bound = flag_spec.bind(1, k=[1, 2], multby2=False)
    assert bound == {"a": 1, "k": [1, 2], "multby2": False}


def test_bind_leaves_missing_for_broadcast(flag_spec):
    assert flag_spec.bind(1) == {"a": 1}


def test_bind_too_many_positionals(abk_spec):
    with pytest.raises(UnexpectedArgument, match="positional"):
        abk_spec.bind(1, 2, 3, 4)


def test_bind_unknown_keyword(abk_spec):
    with pytest.raises(UnexpectedArgument, match="unexpected keyword"):
        abk_spec.bind(1, 2, 3, q=1)


def test_bind_duplicate_value(abk_spec):
    with pytest.raises(TypeError, match="multiple values"):
        abk_spec.bind(1, 2, 3, a=4)


def test_bind_keyword_only():
    def f(a, *, scale=1.0):
        return a * scale

    spec = ParameterSpec.from_function(f)
    with pytest.raises(UnexpectedArgument):
        spec.bind(1, 2.0)
    assert spec.bind(1, scale=2.0) == {"a": 1, "scale": 2.0}


def test_bind_positional_only():
    def f(a, /, b):
        return a + b

    spec = ParameterSpec.from_function(f)
    assert spec.bind(1, b=2) == {"a": 1, "b": 2}
    with pytest.raises(UnexpectedArgument, match="positional-only"):
        spec.bind(a=1, b=2)


def test_split_round_trip():
    def f(a, /, b, *, c=3):
        return a + b + c

    spec = ParameterSpec.from_function(f)
    args, kwargs = spec.split({"a": 1, "b": 2, "c": 3})
    assert args == (1,)
    assert kwargs == {"b": 2, "c": 3}
