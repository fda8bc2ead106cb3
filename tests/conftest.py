import pytest

from optvec.broadcast import ParameterSpec


def scaled_sum(a, b, k, multby2=True):
    """Scalar-only target: the conditional reads a defaulted flag."""
    if multby2:
        return (a + b) * k * 2
    return (a + b) * k


def intrinsic_value(s, k, putopt=False):
    if putopt:
        return max(k - s, 0.0)
    return max(s - k, 0.0)


@pytest.fixture
def abk_spec():
    return ParameterSpec.from_pairs(["a", "b", "k"])


@pytest.fixture
def flag_spec():
    return ParameterSpec.from_pairs(["a", "b", "k", ("multby2", True)])


@pytest.fixture
def scaled_sum_fn():
    return scaled_sum


@pytest.fixture
def intrinsic_fn():
    return intrinsic_value
