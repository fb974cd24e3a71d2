# -*- coding: utf-8 -*-

"""
Finitely presented categories, functors out of them and natural
transformations between such functors.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    FinCat
    FinFunctor
    FinTransformation

Example
-------
A shape category with two parallel generators and a target category:

>>> x, y = Ob('x'), Ob('y')
>>> s, t = Box('s', x, y), Box('t', x, y)
>>> J = FinCat([x, y], [s, t])
>>> A, B = Ob('A'), Ob('B')
>>> u, v = Box('u', A, B), Box('v', A, B)
>>> C = FinCat([A, B], [u, v])

A functor is given by its images on objects and generators:

>>> D = FinFunctor({x: A, y: B}, {s: u, t: v}, J, C)
>>> assert D(s >> Id(y)) == u and D.ob_map('x') == A

Functors compose strictly, so the identity is a two-sided unit:

>>> assert FinFunctor.id(J) >> D == D == D >> FinFunctor.id(C)

Natural transformations are given by their components:

>>> phi = FinTransformation.id(D)
>>> assert phi.component(x) == Id(A) and phi.is_natural()
>>> assert phi >> phi == phi
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from networkx import (
    MultiDiGraph,
    all_simple_edge_paths,
    is_directed_acyclic_graph,
)

from catdiag import config, messages
from catdiag.cat import Ob, Arrow, Box, Category, Functor, Id
from catdiag.utils import (
    factory_name,
    AxiomError,
    Composable,
    assert_isinstance,
    assert_iscomposable,
    assert_isparallel,
)

logger = logging.getLogger(__name__)


class FinCat(Category):
    """
    The category freely generated by a finite graph, i.e. its arrows are the
    paths of generators.

    Parameters:
        obs : The objects, strings are cast to :class:`Ob`.
        generators : The boxes generating the arrows.

    Note
    ----
    The generating graph is kept as a ``networkx.MultiDiGraph`` with objects
    as nodes and generators as edge keys.

    Example
    -------
    >>> x, y, z = Ob('x'), Ob('y'), Ob('z')
    >>> f, g, h = Box('f', x, y), Box('g', y, z), Box('h', x, z)
    >>> C = FinCat([x, y, z], [f, g, h])
    >>> assert C.hom(x, z) == [f >> g, h] or C.hom(x, z) == [h, f >> g]
    >>> assert C.hom(z, x) == [] and C.hom(x, x) == [Id(x)]
    >>> assert f >> g in C and 'x' in C and Ob('w') not in C
    """
    def __init__(self, obs: Iterable[Ob | str] = (),
                 generators: Iterable[Box] = ()):
        super().__init__(Ob, Arrow)
        self.graph = MultiDiGraph()
        for x in obs:
            self.graph.add_node(self.cast(x))
        for f in generators:
            assert_isinstance(f, Box)
            self.graph.add_edge(f.dom, f.cod, key=f)

    def cast(self, x: Ob | str) -> Ob:
        """ Cast a string to an object, do nothing to objects. """
        return x if isinstance(x, self.ob) else self.ob(x)

    @property
    def objects(self) -> tuple[Ob, ...]:
        """ The objects of the category. """
        return tuple(self.graph.nodes)

    @property
    def generators(self) -> tuple[Box, ...]:
        """ The generators of the category. """
        return tuple(f for _, _, f in self.graph.edges(keys=True))

    @property
    def is_discrete(self) -> bool:
        """ Whether the category has no generators. """
        return self.graph.number_of_edges() == 0

    @property
    def is_finite(self) -> bool:
        """ Whether every hom-set is finite, i.e. the graph is acyclic. """
        return is_directed_acyclic_graph(self.graph)

    def __contains__(self, other):
        if isinstance(other, Arrow):
            return other.dom in self.graph and all(
                self.graph.has_edge(f.dom, f.cod, key=f) for f in other)
        return self.cast(other) in self.graph

    def __eq__(self, other):
        return isinstance(other, FinCat)\
            and set(self.objects) == set(other.objects)\
            and set(self.generators) == set(other.generators)

    def __hash__(self):
        return hash((frozenset(self.objects), frozenset(self.generators)))

    def __repr__(self):
        return factory_name(type(self))\
            + f"({list(self.objects)}, {list(self.generators)})"

    def id(self, x: Ob | str) -> Arrow:
        """
        The identity arrow on an object of the category.

        Parameters:
            x : The object on which to take the identity.

        Raises:
            AxiomError : If ``x`` is not an object of the category.
        """
        x = self.cast(x)
        if x not in self.graph:
            raise AxiomError(messages.NOT_AN_OBJECT.format(x, self))
        return self.ar.id(x)

    def hom(self, x: Ob | str, y: Ob | str) -> list[Arrow]:
        """
        The list of all arrows from ``x`` to ``y``.

        Parameters:
            x : The domain of the arrows.
            y : The codomain of the arrows.

        Raises:
            AxiomError : If ``x`` or ``y`` is not an object of the category.
            ValueError : If the generating graph has a cycle.
        """
        x, y = map(self.cast, (x, y))
        for z in (x, y):
            if z not in self.graph:
                raise AxiomError(messages.NOT_AN_OBJECT.format(z, self))
        if not self.is_finite:
            raise ValueError(messages.INFINITE_HOM.format(x, y))
        if x == y:
            return [self.ar.id(x)]
        return [self.ar.id(x).then(*(f for _, _, f in path))
                for path in all_simple_edge_paths(self.graph, x, y)]


class FinFunctor(Functor):
    """
    A functor out of a finitely presented category, given by dictionaries on
    objects and generators.

    Parameters:
        ob_map : Mapping from objects of ``dom`` to objects of ``cod``.
        hom_map : Mapping from generators of ``dom`` (or their names) to
                  arrows of ``cod``, may be ``None`` if ``dom`` is discrete.
        dom : The domain of the functor.
        cod : The codomain of the functor.

    Raises:
        AxiomError : If an object or a generator is not mapped, or if a
                     generator is mapped to an arrow of the wrong type.

    Example
    -------
    >>> x, A, B = Ob('x'), Ob('A'), Ob('B')
    >>> J, C = FinCat([x]), FinCat([A, B], [Box('g', A, B)])
    >>> D = FinFunctor({x: A}, None, J, C)
    >>> assert D == FinFunctor.constant(J, A, C)
    >>> assert D != FinFunctor({x: B}, {}, J, C)
    """
    def __init__(self, ob_map: Mapping, hom_map: Mapping | None = None,
                 dom: FinCat = None, cod: Category = None):
        assert_isinstance(dom, FinCat)
        assert_isinstance(cod, Category)
        ob_map = {dom.cast(x): y for x, y in ob_map.items()}
        hom_map = {} if hom_map is None else hom_map
        ob, ar = {}, {}
        for x in dom.objects:
            if x not in ob_map:
                raise AxiomError(messages.MISSING_OB_MAP.format(x, dom))
            y = ob_map[x]
            ob[x] = y if isinstance(y, cod.ob) else cod.ob(y)
        for f in dom.generators:
            if f in hom_map:
                g = hom_map[f]
            elif f.name in hom_map:
                g = hom_map[f.name]
            else:
                raise AxiomError(messages.MISSING_HOM_MAP.format(f, dom))
            g = cod.ar.id(ob[f.dom]).then(g)
            if g.cod != ob[f.cod]:
                raise AxiomError(messages.WRONG_HOM_IMAGE.format(
                    f, ob[f.dom], ob[f.cod], g))
            ar[f] = g
        super().__init__(ob, ar, dom=dom, cod=cod)

    @classmethod
    def id(cls, dom: FinCat) -> FinFunctor:
        """
        The identity functor on a finitely presented category.

        Parameters:
            dom : The domain (and codomain) of the functor.
        """
        return cls({x: x for x in dom.objects},
                   {f: f for f in dom.generators}, dom, dom)

    @classmethod
    def constant(cls, dom: FinCat, x: Ob, cod: Category) -> FinFunctor:
        """
        The functor sending every object to ``x`` and every generator to the
        identity on ``x``.

        Parameters:
            dom : The domain of the functor.
            x : The object of ``cod`` in the image.
            cod : The codomain of the functor.
        """
        return cls({y: x for y in dom.objects},
                   {f: cod.id(x) for f in dom.generators}, dom, cod)

    def then(self, other: FinFunctor) -> FinFunctor:
        """
        The diagrammatic composition of functors, called with :code:`>>`.

        Parameters:
            other : The functor to apply after ``self``.
        """
        assert_isinstance(other, FinFunctor)
        assert_iscomposable(self, other)
        ob = {x: other.ob[y] for x, y in self.ob.items()}
        ar = {f: other(g) for f, g in self.ar.items()}
        return type(self)(ob, ar, self.dom, other.cod)

    def ob_map(self, x: Ob | str) -> Ob:
        """ The image of an object. """
        return self.ob[self.dom.cast(x)]

    def hom_map(self, f: Arrow) -> Arrow:
        """ The image of a generator or, more generally, of a path. """
        return self(f)

    def __eq__(self, other):
        return type(self) is type(other) and (
            self.dom, self.cod, self.ob, self.ar) == (
            other.dom, other.cod, other.ob, other.ar)

    def __repr__(self):
        return factory_name(type(self))\
            + f"(ob={self.ob}, ar={self.ar}, "\
              f"dom={repr(self.dom)}, cod={repr(self.cod)})"


class FinTransformation(Composable[FinFunctor]):
    """
    A natural transformation between two parallel functors out of a finitely
    presented category, given by one component for each object of the shape.

    Parameters:
        components : Mapping from objects of ``dom.dom`` to arrows.
        dom : The functor at the domain of the transformation.
        cod : The functor at the codomain of the transformation.

    Raises:
        AxiomError : If ``dom`` and ``cod`` are not parallel or a component
                     is missing. If ``config.CHECK_NATURALITY`` is set, also
                     when the transformation is not natural.

    Note
    ----
    Whiskering a transformation ``phi: G => H`` by a functor ``F`` gives
    ``phi.whisker(F): F >> G => F >> H`` with components ``phi[F(x)]``.

    Example
    -------
    >>> x, y = Ob('x'), Ob('y')
    >>> J, K = FinCat([x]), FinCat([y])
    >>> A, B = Ob('A'), Ob('B')
    >>> g = Box('g', A, B)
    >>> C = FinCat([A, B], [g])
    >>> D, E = FinFunctor({y: A}, {}, K, C), FinFunctor({y: B}, {}, K, C)
    >>> phi = FinTransformation({y: g}, D, E)
    >>> F = FinFunctor({x: y}, {}, J, K)
    >>> assert phi.whisker(F).component(x) == g
    >>> assert phi.whisker(F).dom == F >> D
    """
    def __init__(self, components: Mapping, dom: FinFunctor, cod: FinFunctor):
        assert_isinstance(dom, FinFunctor)
        assert_isinstance(cod, FinFunctor)
        assert_isparallel(dom, cod)
        components = {dom.dom.cast(x): f for x, f in components.items()}
        self.dom, self.cod, self.components = dom, cod, {}
        for x in dom.dom.objects:
            if x not in components:
                raise AxiomError(messages.MISSING_COMPONENT.format(x))
            self.components[x] = components[x]
        if config.CHECK_NATURALITY:
            self.assert_isnatural()

    @classmethod
    def id(cls, dom: FinFunctor) -> FinTransformation:
        """
        The identity transformation on a functor.

        Parameters:
            dom : The functor on which to take the identity.
        """
        return cls({x: dom.cod.id(y) for x, y in dom.ob.items()}, dom, dom)

    def then(self, other: FinTransformation) -> FinTransformation:
        """
        The vertical composition of transformations, called with :code:`>>`.

        Parameters:
            other : The transformation to apply after ``self``.

        Raises:
            AxiomError : If ``self.cod != other.dom``.
        """
        assert_isinstance(other, FinTransformation)
        assert_iscomposable(self, other)
        components = {
            x: f >> other.components[x] for x, f in self.components.items()}
        return type(self)(components, self.dom, other.cod)

    def whisker(self, functor: FinFunctor) -> FinTransformation:
        """
        The precomposition of a transformation by a functor.

        Parameters:
            functor : A functor with codomain the shape of ``self``.

        Raises:
            AxiomError : If ``functor.cod != self.dom.dom``.
        """
        assert_isinstance(functor, FinFunctor)
        assert_iscomposable(functor, self.dom)
        components = {x: self.components[y] for x, y in functor.ob.items()}
        return type(self)(components, functor >> self.dom, functor >> self.cod)

    def component(self, x: Ob | str) -> Arrow:
        """ The component at an object of the shape. """
        return self.components[self.dom.dom.cast(x)]

    def assert_isnatural(self):
        """
        Raise :class:`AxiomError` if some component is not of the right type
        or some naturality square does not commute.
        """
        source, target = self.dom, self.cod
        logger.debug("Checking naturality of %r.", self)
        for x, f in self.components.items():
            if (f.dom, f.cod) != (source(x), target(x)):
                raise AxiomError(messages.WRONG_COMPONENT.format(
                    x, source(x), target(x), f))
        for g in source.dom.generators:
            left = source(g) >> self.components[g.cod]
            right = self.components[g.dom] >> target(g)
            if left != right:
                raise AxiomError(messages.NOT_NATURAL.format(g, left, right))

    def is_natural(self) -> bool:
        """ Whether all the naturality squares commute. """
        try:
            self.assert_isnatural()
        except AxiomError:
            return False
        return True

    def __eq__(self, other):
        return isinstance(other, FinTransformation) and (
            self.dom, self.cod, self.components) == (
            other.dom, other.cod, other.components)

    def __repr__(self):
        return factory_name(type(self))\
            + f"({self.components}, dom={repr(self.dom)}, "\
              f"cod={repr(self.cod)})"

    def __str__(self):
        return "{" + ", ".join(
            f"{x}: {f}" for x, f in self.components.items()) + "}"
