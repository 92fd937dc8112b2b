import numpy as np
import pytest

from taylorad.traits import is_arithmetic, is_vector, order


class _MethodOrderNumber:
    def __init__(self, n):
        self._n = n

    def order(self):
        return self._n

    def seed(self, k, value):
        pass

    def __len__(self):
        return self._n + 1

    def __getitem__(self, i):
        return 0.0


class _AttributeOrderNumber:
    order = 2

    def seed(self, k, value):
        pass


@pytest.mark.parametrize("x", [1, 1.5, True, np.float64(2.0), np.int32(3)])
def test_is_arithmetic_true(x):
    assert is_arithmetic(x) is True


@pytest.mark.parametrize("x", ["1", [1.0], 1 + 2j, None, _AttributeOrderNumber()])
def test_is_arithmetic_false(x):
    assert is_arithmetic(x) is False


@pytest.mark.parametrize("x", [0, 3.0, "abc", [1.0, 2.0], None])
def test_order_of_non_autodiff_is_zero(x):
    assert order(x) == 0


def test_order_from_method():
    assert order(_MethodOrderNumber(4)) == 4


def test_order_from_attribute():
    assert order(_AttributeOrderNumber()) == 2


@pytest.mark.parametrize("x", [[1.0, 2.0], (1.0,), [], np.zeros(3), np.zeros((2, 2))])
def test_is_vector_true(x):
    assert is_vector(x) is True


@pytest.mark.parametrize(
    "x",
    [1.0, 2, "text", b"bytes", {"a": 1}, np.float64(1.0), np.array(1.0), None],
)
def test_is_vector_false(x):
    assert is_vector(x) is False


def test_autodiff_number_with_len_is_not_vector():
    assert is_vector(_MethodOrderNumber(3)) is False


def test_custom_sequence_is_vector():
    class Seq:
        def __len__(self):
            return 2

        def __getitem__(self, i):
            return float(i)

    assert is_vector(Seq()) is True