import pytest

from catdiag.cat import Ob, Box
from catdiag.utils import *


class Wrapper(NamedGeneric['param']):
    param = 0

    def __init__(self, inside):
        self.inside = inside


def test_NamedGeneric():
    assert Wrapper[0] is Wrapper and Wrapper[1] is Wrapper[1]
    assert Wrapper[1](42).param == 1 and Wrapper(42).param == 0
    assert Wrapper[1][2] is Wrapper[2] and Wrapper[2][0] is Wrapper
    assert issubclass(Wrapper[1], Wrapper)
    assert Wrapper[1].__name__ == "Wrapper[1]"


def test_MappingOrCallable():
    mapping, function = MappingOrCallable({0: 1}), MappingOrCallable(abs)
    assert mapping[0] == function[-1] == 1
    assert MappingOrCallable(mapping).mapping == {0: 1}
    assert mapping == {0: 1} and mapping == MappingOrCallable({0: 1})
    assert bool(mapping) and not MappingOrCallable({})
    assert repr(mapping) == "{0: 1}"
    assert mapping.then(function) == {0: 1}
    assert mapping.then(str) == {0: "1"}
    with pytest.raises(TypeError):
        function.then(str)


def test_factory_name():
    assert factory_name(Ob) == "cat.Ob"
    assert factory_name(int) == "int"


def test_assert_isinstance():
    assert_isinstance(Ob('x'), Ob)
    assert_isinstance(Ob('x'), (int, Ob))
    with pytest.raises(TypeError):
        assert_isinstance(42, Ob)


def test_assert_iscomposable():
    x, y = Ob('x'), Ob('y')
    f, g = Box('f', x, y), Box('g', y, x)
    assert_iscomposable(f, g)
    with pytest.raises(AxiomError):
        assert_iscomposable(f, f)


def test_assert_isparallel():
    x, y = Ob('x'), Ob('y')
    f, g = Box('f', x, y), Box('g', x, y)
    assert_isparallel(f, g)
    with pytest.raises(AxiomError):
        assert_isparallel(f, Box('h', y, x))


def test_unbiased():
    class Sum:
        def __init__(self, value):
            self.value = value

        @unbiased
        def then(self, other):
            return Sum(self.value + other.value)

    assert Sum(1).then(Sum(2), Sum(3)).value == 6
    one = Sum(1)
    assert one.then() is one


def test_errors():
    assert issubclass(InvalidCompositionError, AxiomError)
    assert issubclass(UnsupportedOperationError, TypeError)
