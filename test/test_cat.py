# -*- coding: utf-8 -*-

from pytest import raises

from catdiag.cat import *
from catdiag.utils import AxiomError


x, y, z = Ob('x'), Ob('y'), Ob('z')
f, g, h = Box('f', x, y), Box('g', y, z), Box('h', z, x)


def test_axioms():
    assert Id(x) >> f == f == f >> Id(y)
    assert (f >> g) >> h == f >> (g >> h) == Id(x).then(f, g, h)
    assert (f >> g).dom == x and (f >> g).cod == z


def test_Ob():
    assert Ob('x') == x != y and x != 'x' and 'x' != x
    assert {Ob('x'): 0}[x] == 0
    assert repr(x) == "cat.Ob('x')" and str(x) == 'x'
    assert sorted([z, x, y]) == [x, y, z] and x < y <= y
    with raises(TypeError):
        Ob(42)


def test_Arrow_init():
    assert Arrow((f, g), 'x', 'z') == f >> g
    assert Arrow((), 'x', 'x') == Id(x)
    with raises(TypeError):
        Arrow((), 42, x)
    with raises(TypeError):
        Arrow((x, ), x, x)


def test_Arrow_init_not_composable():
    with raises(AxiomError):
        Arrow((g, ), x, z)
    with raises(AxiomError):
        Arrow((f, ), x, z)
    with raises(AxiomError):
        Arrow((f, h), x, x)


def test_Arrow_then():
    assert f.then(g) == f >> g == g << f
    assert f.then() == f
    with raises(AxiomError):
        g >> f
    with raises(TypeError):
        f >> x


def test_Arrow_is_id():
    assert Id(x).is_id and not f.is_id and not (f >> g).is_id


def test_Arrow_len_iter():
    loop = f >> g >> h
    assert len(loop) == 3 and len(Id(x)) == 0
    assert list(loop) == [f, g, h] and list(Id(x)) == []


def test_Arrow_repr_str():
    assert repr(Id(x)) == "cat.Arrow.id(cat.Ob('x'))"
    assert repr(f >> g) == "cat.Arrow(inside=("\
        "cat.Box('f', cat.Ob('x'), cat.Ob('y')), "\
        "cat.Box('g', cat.Ob('y'), cat.Ob('z'))), "\
        "dom=cat.Ob('x'), cod=cat.Ob('z'))"
    assert str(Id(x)) == "Id(x)" and str(f >> g >> h) == "f >> g >> h"


def test_Arrow_hash():
    assert {f >> g: 0}[Arrow((f, g), x, z)] == 0
    assert len({f, f >> Id(y), Id(x) >> f}) == 1


def test_Box():
    assert f.inside == (f, ) and f.name == 'f' and f.data is None
    assert f == Arrow((f, ), x, y) == f and Arrow((f, ), x, y) == f
    assert f != Box('f', x, z) and f != Box('g', x, y) and f != x
    with raises(TypeError):
        Box(42, x, y)


def test_Box_data():
    data = [42, {0: 1}, lambda n: n]
    boxed = Box('f', x, y, data=data)
    assert boxed == Box('f', x, y, data=data) != Box('f', x, y, data=[])
    assert boxed >> Id(y) == boxed
    assert repr(Box('f', x, y, data=42))\
        == "cat.Box('f', cat.Ob('x'), cat.Ob('y'), data=42)"


def test_Category():
    C = Category()
    assert C == Category(Ob, Arrow) and hash(C) == hash(Category())
    assert repr(C) == "Category(cat.Ob, cat.Arrow)"
    assert C.id(x) == Id(x)
    assert C.compose(f) == f and C.compose(f, g, h) == f >> g >> h
    assert C != Category(Ob, Box) and C != "Category"


def test_Functor():
    F = Functor({x: y, y: z, z: x}, {f: g, g: h, h: f})
    assert F(x) == y and F(f) == g
    assert F(f >> g >> h) == g >> h >> f
    assert F(Id(x)) == Id(y)
    with raises(TypeError):
        F(F)


def test_Functor_identity_image():
    F = Functor({x: x, y: x, z: x}, {f: Id(x), g: Id(x), h: Id(x)})
    assert F(f >> g >> h) == Id(x)


def test_Functor_callable():
    F = Functor(lambda ob: Ob(ob.name.upper()),
                lambda box: Box(box.name.upper(), F(box.dom), F(box.cod)))
    assert str(F(f >> g)) == "F >> G" and F(g).dom == Ob('Y')


def test_Functor_then():
    F, G = Functor({x: y}, {}), Functor({y: z}, {})
    assert (F >> G).ob == {x: z} and (F >> G)(x) == z
    relabel = Functor(lambda ob: Ob(ob.name.upper()), {})
    assert (F >> relabel).ob == {x: Ob('Y')}
    with raises(TypeError):
        relabel >> F


def test_Functor_eq_repr():
    assert Functor({x: y, y: x}, {}) == Functor({y: x, x: y}, {})
    assert Functor({x: y}, {}) != Functor({x: z}, {})
    assert repr(Functor({}, {})) == "cat.Functor(ob={}, ar={})"
