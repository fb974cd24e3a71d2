# -*- coding: utf-8 -*-

from pytest import raises, fixture

from catdiag import config
from catdiag.cat import Ob, Box, Id
from catdiag.fincat import *
from catdiag.utils import AxiomError


x, y, z = Ob('x'), Ob('y'), Ob('z')
A, B, E = Ob('A'), Ob('B'), Ob('E')
s, t = Box('s', x, y), Box('t', x, y)
u, v, w = Box('u', A, B), Box('v', A, B), Box('w', B, E)


@fixture
def J():
    return FinCat([x, y], [s, t])


@fixture
def C():
    return FinCat([A, B, E], [u, v, w])


@fixture
def D(J, C):
    return FinFunctor({x: A, y: B}, {s: u, t: v}, J, C)


def test_FinCat(J):
    assert set(J.objects) == {x, y}
    assert set(J.generators) == {s, t}
    assert J == FinCat([y, x], [t, s]) != FinCat([x, y], [s])
    assert hash(J) == hash(FinCat([y, x], [t, s]))
    assert not J.is_discrete and FinCat([x]).is_discrete
    assert J.is_finite


def test_FinCat_objects_from_generators():
    assert set(FinCat([], [s]).objects) == {x, y}


def test_FinCat_cast():
    assert FinCat(['x', 'y']) == FinCat([x, y])
    assert FinCat([x]).cast('x') == x


def test_FinCat_contains(J):
    assert x in J and 'y' in J and z not in J
    assert s in J and s >> Id(y) in J and Id(x) in J
    assert Box('s', x, z) not in J and Box('r', x, y) not in J


def test_FinCat_id(J):
    assert J.id(x) == J.id('x') == Id(x)
    with raises(AxiomError):
        J.id(z)


def test_FinCat_compose(C):
    assert C.compose(u, w) == u >> w
    assert C.compose(C.id(A), u, C.id(B)) == u


def test_FinCat_hom(J, C):
    assert set(J.hom(x, y)) == {s, t}
    assert J.hom(y, x) == []
    assert J.hom(x, x) == [Id(x)]
    assert set(C.hom(A, E)) == {u >> w, v >> w}


def test_FinCat_hom_not_an_object(J):
    for dom, cod in [(x, z), (z, y), (z, z), ('z', 'x')]:
        with raises(AxiomError) as err:
            J.hom(dom, cod)
        assert "z is not an object of" in str(err.value)


def test_FinCat_hom_infinite():
    f = Box('f', x, x)
    C = FinCat([x], [f])
    assert not C.is_finite
    with raises(ValueError):
        C.hom(x, x)


def test_FinCat_repr():
    assert repr(FinCat([x])) == "fincat.FinCat([cat.Ob('x')], [])"


def test_FinFunctor(J, C, D):
    assert D.ob_map(x) == D.ob_map('x') == A
    assert D.hom_map(s) == D(s) == u
    assert D(Id(x)) == Id(A)
    assert D.dom == J and D.cod == C


def test_FinFunctor_hom_map_by_name(J, C, D):
    assert FinFunctor({'x': 'A', 'y': 'B'}, {'s': u, 't': v}, J, C) == D


def test_FinFunctor_missing(J, C):
    with raises(AxiomError):
        FinFunctor({x: A}, {s: u, t: v}, J, C)
    with raises(AxiomError):
        FinFunctor({x: A, y: B}, {s: u}, J, C)
    with raises(AxiomError):
        FinFunctor({x: A, y: B}, None, J, C)


def test_FinFunctor_wrong_image(J, C):
    with raises(AxiomError):
        FinFunctor({x: A, y: B}, {s: u, t: w}, J, C)
    with raises(AxiomError):
        FinFunctor({x: A, y: E}, {s: u, t: u}, J, C)


def test_FinFunctor_type_error(J, C):
    with raises(TypeError):
        FinFunctor({x: A, y: B}, {s: u, t: v}, J, 42)
    with raises(TypeError):
        FinFunctor({}, {}, None, C)


def test_FinFunctor_then(J, C, D):
    K = FinCat([A])
    G = FinFunctor({A: A, B: A, E: A}, {u: Id(A), v: Id(A), w: Id(A)}, C, K)
    GD = D >> G
    assert GD.ob_map(x) == GD.ob_map(y) == A
    assert GD(s) == GD(t) == Id(A)
    assert GD.dom == J and GD.cod == K
    with raises(AxiomError):
        G >> D


def test_FinFunctor_unit(J, C, D):
    assert FinFunctor.id(J) >> D == D == D >> FinFunctor.id(C)


def test_FinFunctor_associativity(C):
    K, L = FinCat([x]), FinCat([y], [Box('f', y, y)])
    F = FinFunctor({A: x, B: x, E: x}, {u: Id(x), v: Id(x), w: Id(x)}, C, K)
    G = FinFunctor({x: y}, {}, K, L)
    H = FinFunctor.id(L)
    assert (F >> G) >> H == F >> (G >> H)


def test_FinFunctor_constant(J, C):
    K = FinFunctor.constant(J, A, C)
    assert K.ob_map(x) == K.ob_map(y) == A
    assert K(s) == K(t) == Id(A)


def test_FinFunctor_eq(J, C, D):
    assert D == FinFunctor({x: A, y: B}, {s: u, t: v}, J, C)
    assert D != FinFunctor({x: A, y: B}, {s: v, t: u}, J, C)
    assert D != FinFunctor(
        {x: A, y: B}, {s: u, t: v}, J, FinCat([A, B], [u, v]))


def test_FinTransformation(J, C, D):
    D_ = FinFunctor({x: A, y: E}, {s: u >> w, t: v >> w}, J, C)
    phi = FinTransformation({x: Id(A), y: w}, D, D_)
    assert phi.component(x) == phi.component('x') == Id(A)
    assert phi.component(y) == w
    assert phi.is_natural()
    assert str(phi) == "{x: Id(A), y: w}"


def test_FinTransformation_not_natural(J, C, D):
    D_ = FinFunctor({x: A, y: E}, {s: u >> w, t: u >> w}, J, C)
    phi = FinTransformation({x: Id(A), y: w}, D, D_)
    assert not phi.is_natural()
    wrong = FinTransformation({x: u, y: w}, D, D_)
    assert not wrong.is_natural()


def test_FinTransformation_checked(J, C, D, monkeypatch):
    D_ = FinFunctor({x: A, y: E}, {s: u >> w, t: u >> w}, J, C)
    monkeypatch.setattr(config, "CHECK_NATURALITY", True)
    with raises(AxiomError):
        FinTransformation({x: Id(A), y: w}, D, D_)
    assert FinTransformation.id(D).is_natural()


def test_FinTransformation_missing_component(J, C, D):
    with raises(AxiomError):
        FinTransformation({x: Id(A)}, D, D)


def test_FinTransformation_not_parallel(J, C, D):
    K = FinFunctor({x: A}, {}, FinCat([x]), C)
    with raises(AxiomError):
        FinTransformation({x: Id(A)}, K, D)


def test_FinTransformation_then(J, C, D):
    D_ = FinFunctor({x: A, y: E}, {s: u >> w, t: v >> w}, J, C)
    phi = FinTransformation({x: Id(A), y: w}, D, D_)
    one, one_ = FinTransformation.id(D), FinTransformation.id(D_)
    assert one >> phi == phi == phi >> one_
    assert (one >> phi).component(y) == w
    with raises(AxiomError):
        phi >> phi


def test_FinTransformation_whisker(C):
    K, L = FinCat([x, y], [s]), FinCat([z])
    D = FinFunctor({x: A, y: B}, {s: u}, K, C)
    D_ = FinFunctor({x: B, y: B}, {s: Id(B)}, K, C)
    phi = FinTransformation({x: u, y: Id(B)}, D, D_)
    F = FinFunctor({z: x}, {}, L, K)
    whiskered = phi.whisker(F)
    assert whiskered.component(z) == u
    assert whiskered.dom == F >> D and whiskered.cod == F >> D_
    assert phi.whisker(FinFunctor.id(K)) == phi
    with raises(AxiomError):
        phi.whisker(FinFunctor.id(L))


def test_FinTransformation_whisker_then(C):
    K, L = FinCat([x, y], [s]), FinCat([z])
    D = FinFunctor({x: A, y: B}, {s: u}, K, C)
    D_ = FinFunctor({x: B, y: B}, {s: Id(B)}, K, C)
    D__ = FinFunctor({x: E, y: E}, {s: Id(E)}, K, C)
    phi = FinTransformation({x: u, y: Id(B)}, D, D_)
    psi = FinTransformation({x: w, y: w}, D_, D__)
    F = FinFunctor({z: y}, {}, L, K)
    assert (phi >> psi).whisker(F) == phi.whisker(F) >> psi.whisker(F)
