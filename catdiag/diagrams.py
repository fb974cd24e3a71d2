# -*- coding: utf-8 -*-

"""
Diagrams in a category and their morphisms.

Recall that a *diagram* in a category :math:`C` is a functor
:math:`D: J \\to C` where the *shape category* :math:`J` is finitely
presented. Such a diagram is captured perfectly well by a
:class:`fincat.FinFunctor`, but there are several different notions of
morphism between diagrams. The wrapper types of this module exist to
distinguish them, they are indexed by a :class:`Kind` with square brackets.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    Kind
    Diagram
    DiagramHom

.. admonition:: Functions

    .. autosummary::
        :template: function.rst
        :nosignatures:
        :toctree:

        diagram_hom
        op

Example
-------
Two diagrams with a single object in their shape, picking out the two ends
of an arrow :code:`g: A -> B`:

>>> x, x_ = Ob('x'), Ob('x_')
>>> J, J_ = FinCat([x]), FinCat([x_])
>>> A, B = Ob('A'), Ob('B')
>>> g = Box('g', A, B)
>>> C = FinCat([A, B], [g])
>>> D, D_ = FinFunctor({x: A}, None, J, C), FinFunctor({x_: B}, None, J_, C)

A morphism of diagrams from :code:`D` to :code:`D_` is built from a mapping of
objects of the shape to pairs of objects and components:

>>> f = DiagramHom.from_ob_maps({x: (x_, g)}, D, D_)
>>> assert f.dom == Diagram(D) and f.cod == Diagram(D_)
>>> assert f.ob_map(x) == (x_, g)

Diagrams and their morphisms form a category:

>>> assert DiagramHom.id(f.dom) >> f == f == f >> DiagramHom.id(f.cod)

The same data goes the other way round as a morphism of kind :code:`op`:

>>> h = DiagramHom[Kind.op].from_ob_maps({x_: (x, g)}, D, D_)
>>> assert h.dom == Diagram[Kind.op](D) and h.cod == Diagram[Kind.op](D_)
>>> assert op(h).dom == Diagram[Kind.co](D_) and op(op(h)) == h
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Mapping

from catdiag import messages
from catdiag.cat import Ob, Box, Arrow, Category, Id
from catdiag.fincat import FinCat, FinFunctor, FinTransformation
from catdiag.utils import (
    factory_name,
    unbiased,
    Composable,
    NamedGeneric,
    AxiomError,
    InvalidCompositionError,
    UnsupportedOperationError,
    assert_isinstance,
)

logger = logging.getLogger(__name__)


class Kind(Enum):
    """
    The kind of a morphism of diagrams, see :class:`DiagramHom`.

    Note
    ----
    The set of kinds is closed: :code:`op` and :code:`co` are opposite to each
    other while :code:`id` has no dual.
    """
    id = "id"
    op = "op"
    co = "co"

    def __repr__(self):
        return f"Kind.{self.value}"

    def __str__(self):
        return self.value


class Kinded(NamedGeneric['kind']):
    """
    Classes indexed by a :class:`Kind`, given either as a member of the
    enumeration or as its value.

    Raises:
        ValueError : When indexed by anything else, or when a subclass sets
                     :code:`kind` to anything else.

    Example
    -------
    >>> assert DiagramHom["op"] is DiagramHom[Kind.op] is DiagramHom["op"]
    >>> DiagramHom["cop"]
    Traceback (most recent call last):
    ...
    ValueError: 'cop' is not a valid Kind
    """
    kind = Kind.id

    def __class_getitem__(cls, kind):
        return super().__class_getitem__(Kind(kind))

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.kind = Kind(cls.kind)


class Diagram(Kinded):
    """
    A diagram in a category, i.e. a functor out of a finitely presented shape
    category, together with a :class:`Kind`.

    Parameters:
        diagram : The underlying functor, or a diagram to re-tag.

    Note
    ----
    Re-tagging a diagram with another kind keeps the same functor, it is up to
    the caller to make sure the new kind makes sense.

    Example
    -------
    >>> x, A = Ob('x'), Ob('A')
    >>> D = FinFunctor({x: A}, None, FinCat([x]), FinCat([A]))
    >>> assert Diagram(D) == Diagram[Kind.id](D) != Diagram[Kind.op](D)
    >>> assert Diagram[Kind.co](Diagram[Kind.op](D)) == Diagram[Kind.co](D)
    >>> assert Diagram(D).shape == FinCat([x])
    >>> Diagram[Kind.op](D).kind
    Kind.op
    """
    def __init__(self, diagram: FinFunctor | Diagram):
        if isinstance(diagram, Diagram):
            diagram = diagram.diagram
        assert_isinstance(diagram, FinFunctor)
        self.diagram = diagram

    @property
    def shape(self) -> FinCat:
        """ The shape or indexing category, i.e. the domain of the functor. """
        return self.diagram.dom

    def __eq__(self, other):
        return isinstance(other, Diagram) and self.kind == other.kind\
            and self.diagram == other.diagram

    def __repr__(self):
        return f"{factory_name(type(self))}({repr(self.diagram)})"


class DiagramHom(Composable[Diagram], Kinded):
    """
    A morphism of diagrams in a category.

    In fact, this type encompasses several different kinds of morphisms from a
    diagram :math:`D: J \\to C` to another diagram :math:`D': J' \\to C`:

    1. :code:`DiagramHom[Kind.id]`: a functor :math:`F: J \\to J'` together
       with a natural transformation :math:`\\phi: D \\Rightarrow F ; D'`,
    2. :code:`DiagramHom[Kind.op]`: a functor :math:`F: J' \\to J` together
       with a natural transformation :math:`\\phi: F ; D \\Rightarrow D'`,
    3. :code:`DiagramHom[Kind.co]`: a functor :math:`F: J \\to J'` together
       with a natural transformation :math:`\\phi: F ; D' \\Rightarrow D`.

    Parameters:
        shape_map : The functor :math:`F` between shape categories, or a
                    morphism of diagrams to re-tag.
        diagram_map : The natural transformation :math:`\\phi`.
        precomposed_diagram : The diagram :math:`D'` for kinds :code:`id`
                              and :code:`co`, :math:`D` for kind :code:`op`.

    Note
    ----
    :code:`Diagram[Kind.op]` is not the opposite category of
    :code:`Diagram[Kind.id]`, but :code:`Diagram[Kind.op]` and
    :code:`Diagram[Kind.co]` are opposites of each other, see :func:`op`.
    Morphisms of kind :code:`op` induce morphisms between the limits of the
    diagrams, whereas morphisms of kind :code:`co` generalise morphisms of
    polynomial functors.

    Note
    ----
    The precomposed diagram is part of the data, it is compared by
    :code:`==` along with the shape map and the diagram map.

    .. admonition:: Summary

        .. autosummary::

            from_ob_maps
            id
            then
            ob_map
            hom_map
    """
    def __init__(self, shape_map: FinFunctor | DiagramHom,
                 diagram_map: FinTransformation = None,
                 precomposed_diagram: FinFunctor = None):
        if isinstance(shape_map, DiagramHom):
            shape_map, diagram_map, precomposed_diagram = (
                shape_map.shape_map, shape_map.diagram_map,
                shape_map.precomposed_diagram)
        assert_isinstance(shape_map, FinFunctor)
        assert_isinstance(diagram_map, FinTransformation)
        assert_isinstance(precomposed_diagram, FinFunctor)
        self.shape_map, self.diagram_map = shape_map, diagram_map
        self.precomposed_diagram = precomposed_diagram

    @classmethod
    def from_ob_maps(
            cls, ob_maps: Mapping, source: FinFunctor | Diagram,
            target: FinFunctor | Diagram, hom_map: Mapping = None
            ) -> DiagramHom:
        """
        Build a morphism of diagrams from its action on objects.

        Parameters:
            ob_maps : Mapping from objects of the shape of ``source`` (of
                      ``target`` for kind :code:`op`) to either a pair of an
                      object and a component, or just an object.
            source : The domain of the morphism.
            target : The codomain of the morphism.
            hom_map : The action of the shape map on generators, may be
                      ``None`` if the shape is discrete.

        Note
        ----
        When only an object is given, the component is the identity on the
        image of the key under ``target`` for kind :code:`op` and under
        ``source`` otherwise.

        Example
        -------
        >>> x, y, A = Ob('x'), Ob('y'), Ob('A')
        >>> C = FinCat([A])
        >>> D = FinFunctor({x: A}, None, FinCat([x]), C)
        >>> D_ = FinFunctor({y: A}, None, FinCat([y]), C)
        >>> f = DiagramHom[Kind.co].from_ob_maps({x: y}, D, D_)
        >>> assert f.diagram_map.component(x) == Id(A)
        >>> assert f.dom == Diagram[Kind.co](D) and f.cod.shape == FinCat([y])
        """
        source, target = (d.diagram if isinstance(d, Diagram) else d
                          for d in (source, target))
        logger.debug(
            "Building %s from object maps %r.", factory_name(cls), ob_maps)
        if cls.kind == Kind.op:
            shape_map = FinFunctor(
                cell1(ob_maps), hom_map, target.dom, source.dom)
            diagram_map = FinTransformation(
                cell2(target, ob_maps), shape_map >> source, target)
            return cls(shape_map, diagram_map, source)
        shape_map = FinFunctor(cell1(ob_maps), hom_map, source.dom, target.dom)
        components = cell2(source, ob_maps)
        if cls.kind == Kind.id:
            diagram_map = FinTransformation(
                components, source, shape_map >> target)
        elif cls.kind == Kind.co:
            diagram_map = FinTransformation(
                components, shape_map >> target, source)
        return cls(shape_map, diagram_map, target)

    @property
    def dom_diagram(self) -> FinFunctor:
        """ The functor underlying the domain. """
        return {Kind.id: self.diagram_map.dom,
                Kind.op: self.precomposed_diagram,
                Kind.co: self.diagram_map.cod}[self.kind]

    @property
    def cod_diagram(self) -> FinFunctor:
        """ The functor underlying the codomain. """
        return {Kind.id: self.precomposed_diagram,
                Kind.op: self.diagram_map.cod,
                Kind.co: self.precomposed_diagram}[self.kind]

    @property
    def dom(self) -> Diagram:
        return Diagram[self.kind](self.dom_diagram)

    @property
    def cod(self) -> Diagram:
        return Diagram[self.kind](self.cod_diagram)

    @classmethod
    def id(cls, dom: Diagram) -> DiagramHom:
        """
        The identity morphism on a diagram, of the same kind.

        Parameters:
            dom : The diagram on which to take the identity.
        """
        assert_isinstance(dom, Diagram)
        functor = dom.diagram
        return cls[dom.kind](
            FinFunctor.id(functor.dom), FinTransformation.id(functor), functor)

    @unbiased
    def then(self, other: DiagramHom) -> DiagramHom:
        """
        Sequential composition, called with :code:`>>` and :code:`<<`.

        Parameters:
            other : The morphism to compose after ``self``.

        Raises:
            InvalidCompositionError : If ``self`` and ``other`` have different
                                      kinds.
        """
        assert_isinstance(other, DiagramHom)
        if self.kind != other.kind:
            raise InvalidCompositionError(
                messages.KIND_MISMATCH.format(self.kind, other.kind))
        logger.debug("Composing %s morphisms of diagrams.", self.kind)
        F, G = self.shape_map, other.shape_map
        phi, psi = self.diagram_map, other.diagram_map
        if self.kind == Kind.id:
            return type(self)(F >> G, phi >> psi.whisker(F), other.cod_diagram)
        if self.kind == Kind.op:
            return type(self)(G >> F, phi.whisker(G) >> psi, self.dom_diagram)
        if self.kind == Kind.co:
            return type(self)(F >> G, psi.whisker(F) >> phi, other.cod_diagram)

    def ob_map(self, x: Ob) -> tuple[Ob, Arrow]:
        """ The image of an object under the shape map and its component. """
        return self.shape_map.ob_map(x), self.diagram_map.component(x)

    def hom_map(self, f: Box | Arrow) -> Arrow:
        """ The image of an arrow under the shape map. """
        return self.shape_map.hom_map(f)

    def __eq__(self, other):
        return isinstance(other, DiagramHom) and self.kind == other.kind\
            and self.shape_map == other.shape_map\
            and self.diagram_map == other.diagram_map\
            and self.precomposed_diagram == other.precomposed_diagram

    def __repr__(self):
        return factory_name(type(self))\
            + f"(shape_map={repr(self.shape_map)}, "\
              f"diagram_map={repr(self.diagram_map)}, "\
              f"precomposed_diagram={repr(self.precomposed_diagram)})"


def cell1(ob_maps: Mapping) -> dict:
    """ The object part of an object mapping. """
    return {x: y[0] if isinstance(y, tuple) else y
            for x, y in ob_maps.items()}


def cell2(diagram: FinFunctor, ob_maps: Mapping) -> dict:
    """
    The component part of an object mapping, identities on the image under
    ``diagram`` where no component is given.
    """
    components = {}
    for x, y in ob_maps.items():
        if x not in diagram.dom:
            raise AxiomError(messages.NOT_AN_OBJECT.format(x, diagram.dom))
        components[x] = y[-1] if isinstance(y, tuple)\
            else diagram.cod.id(diagram.ob_map(x))
    return components


def diagram_hom(ob_maps: Mapping, source: FinFunctor | Diagram,
                target: FinFunctor | Diagram, hom_map: Mapping = None,
                kind: Kind | str = Kind.id) -> DiagramHom:
    """ Shortcut for :code:`DiagramHom[kind].from_ob_maps`. """
    return DiagramHom[kind].from_ob_maps(ob_maps, source, target, hom_map)


def op(x: Diagram | DiagramHom) -> Diagram | DiagramHom:
    """
    The duality between diagrams of kinds :code:`op` and :code:`co`.

    Parameters:
        x : A diagram or a morphism of diagrams.

    Raises:
        UnsupportedOperationError : If ``x`` has kind :code:`id`.

    Example
    -------
    >>> x, A = Ob('x'), Ob('A')
    >>> D = FinFunctor({x: A}, None, FinCat([x]), FinCat([A]))
    >>> assert op(Diagram[Kind.op](D)) == Diagram[Kind.co](D)
    >>> op(Diagram(D))  # doctest: +ELLIPSIS
    Traceback (most recent call last):
    ...
    catdiag.utils.UnsupportedOperationError: diagrams.Diagram has no dual...
    """
    assert_isinstance(x, (Diagram, DiagramHom))
    base = Diagram if isinstance(x, Diagram) else DiagramHom
    if x.kind == Kind.id:
        raise UnsupportedOperationError(
            messages.NO_DUAL.format(factory_name(type(x))))
    return base[{Kind.op: Kind.co, Kind.co: Kind.op}[x.kind]](x)


def diagram(d: Diagram) -> FinFunctor:
    """ The functor underlying a diagram. """
    return d.diagram


def shape(d: Diagram) -> FinCat:
    """ The shape category of a diagram. """
    return d.shape


def shape_map(f: DiagramHom) -> FinFunctor:
    """ The functor between the shapes of a morphism of diagrams. """
    return f.shape_map


def diagram_map(f: DiagramHom) -> FinTransformation:
    """ The natural transformation of a morphism of diagrams. """
    return f.diagram_map


def ob_map(f: DiagramHom, x: Ob) -> tuple[Ob, Arrow]:
    return f.ob_map(x)


def hom_map(f: DiagramHom, g: Box | Arrow) -> Arrow:
    return f.hom_map(g)


def dom(f: DiagramHom) -> Diagram:
    return f.dom


def codom(f: DiagramHom) -> Diagram:
    return f.cod


def compose(f: DiagramHom, *others: DiagramHom) -> DiagramHom:
    return f.then(*others)


def identity(d: Diagram) -> DiagramHom:
    return DiagramHom.id(d)


DIAGRAMS = {kind: Category(Diagram[kind], DiagramHom[kind]) for kind in Kind}
""" The categories of diagrams, one for each :class:`Kind`. """
