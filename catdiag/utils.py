# -*- coding: utf-8 -*-

""" Helpers shared by the catdiag modules. """

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import wraps
from typing import (
    Callable,
    Generic,
    Mapping,
    Iterable,
    TypeVar,
    Any,
    Type,
    Optional,
)

from catdiag import messages

KT = TypeVar('KT')
VT = TypeVar('VT')
V2T = TypeVar('V2T')


class MappingOrCallable(Mapping[KT, VT]):
    """
    Wraps either a dictionary or a function so that both are indexed with
    square brackets.

    Example
    -------
    >>> succ = MappingOrCallable(lambda n: n + 1)
    >>> table = MappingOrCallable({0: 1})
    >>> assert succ[0] == table[0] == 1 and list(table) == [0]
    """
    def __class_getitem__(_, args: tuple[type, type]) -> type:
        source, target = args
        return Mapping[source, target] | Callable[[source], target]

    def __init__(self, mapping: MappingOrCallable[KT, VT]) -> None:
        if isinstance(mapping, MappingOrCallable):
            mapping = mapping.mapping
        self.mapping = mapping

    @property
    def is_dict(self) -> bool:
        """ Whether the wrapped object is a dictionary, not a function. """
        return not callable(self.mapping)

    def __bool__(self) -> bool:
        return bool(self.mapping)

    def __len__(self) -> int:
        return len(self.mapping)

    def __iter__(self) -> Iterable[KT]:
        return iter(self.mapping)

    def __getitem__(self, item: KT) -> VT:
        return self.mapping[item] if self.is_dict else self.mapping(item)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, MappingOrCallable):
            other = other.mapping
        return self.mapping == other

    def __repr__(self):
        return repr(self.mapping)

    def then(self, other: MappingOrCallable[VT, V2T]
             ) -> MappingOrCallable[KT, V2T]:
        """
        Post-compose a dictionary with a dictionary or a function.

        Raises:
            TypeError : If ``self`` wraps a function.

        Example
        -------
        >>> double = MappingOrCallable({1: 2, 2: 4})
        >>> assert double.then({2: 'b', 4: 'd'}) == {1: 'b', 2: 'd'}
        >>> assert double.then(str) == {1: '2', 2: '4'}
        """
        if not self.is_dict:
            raise TypeError(messages.TYPE_ERROR.format(
                "dict", factory_name(type(self.mapping))))
        other = MappingOrCallable(other)
        return MappingOrCallable({
            key: other[value] for key, value in self.mapping.items()})


class NamedGeneric(Generic[TypeVar('T')]):
    """
    Classes indexed by values with square brackets, where the index is stored
    in a class attribute with a given name.

    Indexing the base class with the default value of the attribute gives
    back the base class itself, other values give cached subclasses.

    Example
    -------
    >>> class Tagged(NamedGeneric["tag"]):
    ...     tag = "plain"
    ...     def __init__(self, value):
    ...         self.value = value
    >>> assert Tagged["bold"](1).tag == "bold" and Tagged(1).tag == "plain"
    >>> assert Tagged["plain"] is Tagged and Tagged["bold"] is Tagged["bold"]
    >>> assert issubclass(Tagged["bold"], Tagged)
    >>> assert Tagged["bold"]["plain"] is Tagged
    """
    _cache: dict[type, dict[tuple, type]] = dict()

    def __class_getitem__(_, attributes):
        attributes = attributes if isinstance(attributes, tuple)\
            else (attributes, )

        class Result(Generic[TypeVar(attributes[0])]):
            def __class_getitem__(cls, values):
                values = values if isinstance(values, tuple) else (values, )
                while getattr(cls, "__is_named_generic__", False)\
                        and "__is_named_generic__" in vars(cls):
                    cls = cls.__bases__[0]
                subclasses = NamedGeneric._cache.setdefault(cls, {
                    tuple(getattr(cls, attr) for attr in attributes): cls})
                if values not in subclasses:
                    name = cls.__name__ + "[" + ", ".join(
                        getattr(value, "__name__", str(value))
                        for value in values) + "]"
                    subclass = type(cls)(name, (cls, ), dict(
                        {"__is_named_generic__": True,
                         "__module__": cls.__module__,
                         "__qualname__": name},
                        **dict(zip(attributes, values))))
                    subclasses[values] = subclass
                return subclasses[values]

            __name__ = __qualname__\
                = f"NamedGeneric[{', '.join(map(repr, attributes))}]"

        for attr in attributes:
            setattr(Result, attr, None)
        return Result


def factory_name(cls: type) -> str:
    """
    The name of a class relative to the catdiag package.

    Example
    -------
    >>> from catdiag.fincat import FinFunctor
    >>> assert factory_name(FinFunctor) == "fincat.FinFunctor"
    >>> assert factory_name(int) == "int"
    """
    module = cls.__module__
    for prefix in ("catdiag.", "builtins"):
        module = module.removeprefix(prefix)
    return f"{module}.{cls.__name__}" if module else cls.__name__


def assert_isinstance(object_, cls: type | tuple[type, ...]):
    """ Raise ``TypeError`` unless ``object_`` is an instance of ``cls``. """
    classes = cls if isinstance(cls, tuple) else (cls, )
    if not isinstance(object_, classes):
        raise TypeError(messages.TYPE_ERROR.format(
            ' | '.join(map(factory_name, classes)),
            factory_name(type(object_))))


def unbiased(binary_method):
    """
    Extend a method ``(self, other)`` to any number of arguments
    ``(self, *others)`` by folding from the left.
    """
    @wraps(binary_method)
    def method(self, *others):
        result = self
        for other in others:
            result = binary_method(result, other)
        return result
    return method


T = TypeVar('T')


class Composable(ABC, Generic[T]):
    """
    Values with a domain and a codomain of type ``T`` and a method
    :code:`then`, composed with :code:`>>` (forwards) and :code:`<<`
    (backwards).

    Example
    -------
    >>> class Word(str, Composable):
    ...     def then(self, other):
    ...         return Word(self + other)
    >>> cat, diag = Word("cat"), Word("diag")
    >>> assert cat >> diag == "catdiag" == diag << cat
    """
    factory: Type[Composable]
    ty_factory: Type[T]
    dom: T
    cod: T

    @abstractmethod
    def then(self, other: Optional[Composable[T]], *others: Composable[T]
             ) -> Composable[T]:
        """
        Sequential composition.

        Parameters:
            other : The value to compose after ``self``.
        """

    def is_composable(self, other: Composable) -> bool:
        """ Whether ``other`` starts where ``self`` ends. """
        return self.cod == other.dom

    def is_parallel(self, other: Composable) -> bool:
        """ Whether ``self`` and ``other`` share domain and codomain. """
        return self.dom == other.dom and self.cod == other.cod

    def __rshift__(self, other):
        return self.then(other)

    def __lshift__(self, other):
        return other.then(self)


def factory(cls: Type[Composable]) -> Type[Composable]:
    """
    Class decorator making identities and composites of instances of ``cls``,
    or of its subclasses, land back in ``cls``.

    Example
    -------
    >>> from catdiag.cat import Ob, Arrow, Box
    >>> class Node(Ob):
    ...     pass
    >>> @factory
    ... class Walk(Arrow):
    ...     ty_factory = Node
    >>> class Step(Box, Walk):
    ...     pass
    >>> step = Step('step', Node('n'), Node('n'))
    >>> assert isinstance(step >> step, Walk) and type(Walk.id().dom) is Node
    """
    cls.factory = cls
    return cls


class AxiomError(Exception):
    """ Some axiom of categories, functors or transformations is violated. """


class InvalidCompositionError(AxiomError):
    """ Two morphisms of diagrams of different kinds are composed. """


class UnsupportedOperationError(TypeError):
    """ An operation is not defined for values of a given kind. """


def assert_iscomposable(left: Composable, right: Composable):
    """
    Raise :class:`AxiomError` unless ``right`` starts where ``left`` ends.

    Parameters:
        left : The value applied first.
        right : The value applied second.
    """
    if not left.is_composable(right):
        raise AxiomError(messages.NOT_COMPOSABLE.format(
            left, right, left.cod, right.dom))


def assert_isparallel(left: Composable, right: Composable):
    """
    Raise :class:`AxiomError` unless ``left`` and ``right`` share their
    domain and codomain.
    """
    if not left.is_parallel(right):
        raise AxiomError(messages.NOT_PARALLEL.format(left, right))
