# -*- coding: utf-8 -*-

"""
Paths in a graph, i.e. the arrows of the free category on that graph.

Shape categories and their targets are built out of these: a vertex of the
graph is an :class:`Ob`, an edge is a :class:`Box` and an arrow is a path of
consecutive edges. Finite presentations of such categories live in
:mod:`catdiag.fincat`.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    Ob
    Arrow
    Box
    Category
    Functor

Example
-------
A triangle of generators:

>>> x, y, z = Ob('x'), Ob('y'), Ob('z')
>>> f, g, h = Box('f', x, y), Box('g', y, z), Box('h', z, x)

Paths compose with :code:`>>` (or backwards with :code:`<<`), the empty path
is the identity and composition is strictly associative:

>>> loop = Id(x).then(f, g, h)
>>> assert loop == f >> g >> h == h << g << f == f >> (g >> h)
>>> assert Id(x) >> f == f == f >> Id(y)

A functor is determined by where it sends vertices and edges:

>>> rotate = Functor({x: y, y: z, z: x}, {f: g, g: h, h: f})
>>> assert rotate(f >> g) == rotate(f) >> rotate(g) == g >> h
>>> assert rotate(Id(x)) == Id(rotate(x))
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Callable, Mapping, Optional, Type

from catdiag.utils import (
    factory,
    factory_name,
    MappingOrCallable,
    Composable,
    assert_isinstance,
    assert_iscomposable,
)


@total_ordering
class Ob:
    """
    A vertex of a graph, i.e. an object of the free category, given by its
    name.

    Parameters:
        name : The name of the vertex.

    Example
    -------
    >>> assert Ob('A') == Ob('A') != Ob('B')
    >>> assert sorted([Ob('B'), Ob('A')]) == [Ob('A'), Ob('B')]
    """
    def __init__(self, name: str = ""):
        assert_isinstance(name, str)
        self.name = name

    def __repr__(self):
        return f"{factory_name(type(self))}({self.name!r})"

    def __str__(self):
        return self.name

    def __eq__(self, other):
        return isinstance(other, type(self)) and self.name == other.name

    def __hash__(self):
        return hash(repr(self))

    def __lt__(self, other):
        return self.name < other.name


@factory
class Arrow(Composable[Ob]):
    """
    A path in a graph: a tuple of consecutive boxes :code:`inside`, going from
    :code:`dom` to :code:`cod`.

    Parameters:
        inside: The boxes along the path.
        dom: The source of the path.
        cod: The target of the path.
        _scan: Whether to check that consecutive boxes meet.

    Raises:
        AxiomError : When ``_scan`` is set and two consecutive boxes do not
                     meet, or the path does not start at ``dom`` or end at
                     ``cod``.

    Note
    ----
    Build paths with :meth:`Arrow.id` and :meth:`Arrow.then` rather than with
    the constructor. Strings are cast to vertices with ``ty_factory``.

    >>> x, y, z = map(Ob, "xyz")
    >>> f, g = Box('f', x, y), Box('g', y, z)
    >>> assert list(f >> g) == [f, g] and len(Id(z)) == 0
    """
    ty_factory = Ob

    def __init__(self, inside: tuple[Box, ...], dom: Ob | str, cod: Ob | str,
                 _scan: bool = True) -> None:
        cast = type(self).ty_factory
        self.dom = dom if isinstance(dom, cast) else cast(dom)
        self.cod = cod if isinstance(cod, cast) else cast(cod)
        self.inside = inside
        if not _scan:
            return
        for box in inside:
            assert_isinstance(box, Box)
        path = (Id(self.dom), ) + inside + (Id(self.cod), )
        for left, right in zip(path, path[1:]):
            assert_iscomposable(left, right)

    def __iter__(self):
        yield from self.inside

    def __len__(self):
        return len(self.inside)

    def __repr__(self):
        if self.is_id:
            return f"{factory_name(type(self))}.id({self.dom!r})"
        return f"{factory_name(self.factory)}(inside={self.inside!r}, "\
               f"dom={self.dom!r}, cod={self.cod!r})"

    def __str__(self):
        if self.is_id:
            return f"Id({self.dom})"
        return " >> ".join(str(box) for box in self.inside)

    def __eq__(self, other):
        return isinstance(other, self.factory) and self.is_parallel(other)\
            and self.inside == other.inside

    def __hash__(self):
        return hash(repr(self))

    @classmethod
    def id(cls: Type[Arrow], dom: Optional[Ob] = None) -> Arrow:
        """
        The empty path at a vertex, also called with :code:`Id`.

        Parameters:
            dom : The vertex, the default ``ty_factory()`` if not given.

        Example
        -------
        >>> assert Arrow.id('x') == Id(Ob('x')) and len(Id('x')) == 0
        """
        dom = cls.ty_factory() if dom is None else dom
        return cls.factory((), dom, dom, _scan=False)

    def then(self, *others: Arrow) -> Arrow:
        """
        Concatenation of paths, called with :code:`>>` and :code:`<<`.

        Parameters:
            others : The paths to follow after ``self``.

        Raises:
            AxiomError : When a path does not start where the previous one
                         ends.
        """
        inside, cod = self.inside, self.cod
        for other in others:
            assert_isinstance(other, self.factory)
            assert_isinstance(self, other.factory)
            inside += other.inside
            cod = other.cod
        return self.factory(inside, self.dom, cod)

    @property
    def is_id(self) -> bool:
        """ Whether the path is empty. """
        return not self.inside


@total_ordering
class Box(Arrow):
    """
    An edge of a graph, i.e. a generator of the free category, seen as the
    path of length one made of itself.

    Parameters:
        name : The label of the edge.
        dom : The source of the edge.
        cod : The target of the edge.
        data (any) : Arbitrary data attached to the edge.

    Example
    -------
    >>> f = Box('f', Ob('x'), Ob('y'))
    >>> assert f.inside == (f, ) and f == Arrow((f, ), 'x', 'y')
    """
    def __init__(self, name: str, dom: Ob, cod: Ob, data=None):
        assert_isinstance(name, str)
        self.name, self.data = name, data
        Arrow.__init__(self, (self, ), dom, cod, _scan=False)

    def __repr__(self):
        data = "" if self.data is None else f", data={self.data!r}"
        return f"{factory_name(type(self))}({self.name!r}, "\
               f"{self.dom!r}, {self.cod!r}{data})"

    def __str__(self):
        return str(self.name)

    def __hash__(self):
        # Must agree with the hash of the one-step path.
        return hash(Arrow.__repr__(self))

    def __eq__(self, other):
        if not isinstance(other, Box):
            return isinstance(other, Arrow) and other == self.factory(
                (self, ), self.dom, self.cod, _scan=False)
        return type(self) is type(other) and self.name == other.name\
            and self.is_parallel(other) and bool(self.data == other.data)

    def __lt__(self, other):
        return self.name < other.name


@dataclass
class Category:
    """
    A pair of Python types :code:`ob` and :code:`ar`, for objects and arrows.

    Anything written against :meth:`Category.id` and
    :meth:`Category.compose` works for any such pair, e.g. for the categories
    of diagrams in :mod:`catdiag.diagrams`.

    Parameters:
        ob : The type of objects, :class:`Ob` by default.
        ar : The type of arrows, :class:`Arrow` by default.

    Example
    -------
    >>> C = Category()
    >>> C
    Category(cat.Ob, cat.Arrow)
    >>> f = Box('f', Ob('x'), Ob('y'))
    >>> assert C.compose(C.id(f.dom), f, C.id(f.cod)) == f
    """
    ob, ar = Ob, Arrow

    def __init__(self, ob: type = None, ar: type = None):
        self.ob = type(self).ob if ob is None else ob
        self.ar = type(self).ar if ar is None else ar

    def __repr__(self):
        return f"Category({factory_name(self.ob)}, {factory_name(self.ar)})"

    def __eq__(self, other):
        return isinstance(other, Category)\
            and (self.ob, self.ar) == (other.ob, other.ar)

    def __hash__(self):
        return hash((self.ob, self.ar))

    def id(self, x):
        """ The identity arrow on an object ``x``. """
        return self.ar.id(x)

    def compose(self, arrow, *arrows):
        """
        Composition of a non-empty sequence of arrows, left to right.

        Parameters:
            arrow : The first arrow.
            arrows : The arrows to follow it with.
        """
        return arrow.then(*arrows)


class Functor(Composable[Category]):
    """
    A functor out of a free category, given by its images on vertices
    :code:`ob` and on edges :code:`ar` and extended to paths.

    Parameters:
        ob : Mapping from :class:`Ob` to :code:`cod.ob`.
        ar : Mapping from :class:`Box` to :code:`cod.ar`.
        dom : The domain, :code:`Category(Ob, Arrow)` by default.
        cod : The codomain, :code:`Category(Ob, Arrow)` by default.

    Note
    ----
    Either map may be a function instead of a dictionary, in which case
    equality of functors cannot be decided and the functor can only come
    last in a composite, see :meth:`Functor.then`.

    Example
    -------
    >>> x, y, z = Ob('x'), Ob('y'), Ob('z')
    >>> f, g = Box('f', x, y), Box('g', y, z)
    >>> collapse = Functor({x: y, y: z, z: z}, {f: g, g: Id(z)})
    >>> assert collapse(f >> g) == g and collapse(g) == Id(z)
    >>> prime = lambda f: Box(f.name + "'", f.dom, f.cod)
    >>> relabel = Functor(lambda x: x, prime)
    >>> print(relabel(f >> g))
    f' >> g'
    """
    dom = cod = Category(Ob, Arrow)

    def __init__(
            self,
            ob: Mapping[Ob, Ob] | Callable[[Ob], Ob] | None = None,
            ar: Mapping[Box, Arrow] | Callable[[Box], Arrow] | None = None,
            dom: Category = None, cod: Category = None):
        self.dom = type(self).dom if dom is None else dom
        self.cod = type(self).cod if cod is None else cod
        self.ob: MappingOrCallable[Ob, Ob] = MappingOrCallable(ob or {})
        self.ar: MappingOrCallable[Box, Arrow] = MappingOrCallable(ar or {})

    def then(self, other: Functor) -> Functor:
        """
        Apply ``self`` then ``other``, called with :code:`>>`.

        Parameters:
            other : The functor to apply second.

        Note
        ----
        The maps of ``self`` must be dictionaries, those of ``other`` may be
        functions.

        Example
        -------
        >>> x, y = Ob('x'), Ob('y')
        >>> swap = Functor({x: y, y: x}, {})
        >>> assert (swap >> swap).ob == {x: x, y: y}
        >>> relabel = Functor(lambda x: Ob(x.name.upper()), {})
        >>> assert (swap >> relabel).ob == {x: Ob('Y'), y: Ob('X')}
        """
        assert_isinstance(other, Functor)
        assert_iscomposable(self, other)
        return type(self)(self.ob.then(other), self.ar.then(other),
                          dom=self.dom, cod=other.cod)

    def __eq__(self, other):
        return type(self) is type(other) and self.cod == other.cod\
            and self.ob == other.ob and self.ar == other.ar

    def __repr__(self):
        cod = "" if self.cod == type(self).cod else f", cod={self.cod}"
        return f"{factory_name(type(self))}(ob={self.ob}, ar={self.ar}{cod})"

    def __call__(self, other):
        if isinstance(other, Ob):
            return self.ob[other]
        if isinstance(other, Box):
            image = self.ar[other]
            if isinstance(image, self.cod.ar):
                return image
            # Bare values are wrapped as arrows between the images.
            return self.cod.ar(image, self(other.dom), self(other.cod))
        assert_isinstance(other, Arrow)
        return self.cod.ar.id(self(other.dom)).then(
            *(self(box) for box in other.inside))


Id = Arrow.id
