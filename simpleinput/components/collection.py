"""
Collection normalization for radio and select inputs.

Any supported collection shape becomes an ordered list of
``CollectionEntry(label, value)``:

- scalars: ``["Jose", "Carlos"]``
- (label, value) pairs: ``[("Jose", "jose"), ("Carlos", "carlos")]``
- mappings: ``{"Jose": "jose"}``, read as label -> value pairs
- arbitrary objects, read through ``label_method`` / ``value_method``
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Mapping, Optional, Union
import logging

from ..core.exceptions import InvalidAccessorError, InvalidCollectionError
from ..html import stringify
from ..schemas.input import CollectionEntry

logger = logging.getLogger(__name__)


class Accessor(ABC):
    """Reads a label or a value out of one collection element."""

    @abstractmethod
    def __call__(self, element: Any) -> Any:
        ...


class IdentityAccessor(Accessor):
    def __call__(self, element: Any) -> Any:
        return element

    def __repr__(self) -> str:
        return "IdentityAccessor()"


class AttributeAccessor(Accessor):
    """
    Named lookup: a mapping key, else an attribute of the element.

    Zero-argument methods are called, so ``AttributeAccessor("upper")``
    upper-cases string elements.
    """

    def __init__(self, name: str) -> None:
        self.name = name

    def __call__(self, element: Any) -> Any:
        if isinstance(element, Mapping):
            if self.name not in element:
                raise InvalidAccessorError(self.name, element)
            return element[self.name]

        try:
            value = getattr(element, self.name)
        except AttributeError:
            raise InvalidAccessorError(self.name, element) from None

        if callable(value):
            try:
                return value()
            except TypeError as e:
                raise InvalidAccessorError(self.name, element) from e
        return value

    def __repr__(self) -> str:
        return f"AttributeAccessor({self.name!r})"


class CallableAccessor(Accessor):
    def __init__(self, func: Callable[[Any], Any]) -> None:
        self.func = func

    def __call__(self, element: Any) -> Any:
        try:
            return self.func(element)
        except Exception as e:
            logger.error(f"Accessor {self.func!r} failed on {element!r}: {str(e)}")
            raise InvalidAccessorError(self.func, element) from e

    def __repr__(self) -> str:
        return f"CallableAccessor({self.func!r})"


AccessorOption = Union[None, str, Callable[[Any], Any], Accessor]


def accessor_for(method: AccessorOption) -> Optional[Accessor]:
    """Pick the accessor variant for a ``label_method``/``value_method`` option."""
    if method is None or isinstance(method, Accessor):
        return method
    if isinstance(method, str):
        return AttributeAccessor(method)
    if callable(method):
        return CallableAccessor(method)
    raise InvalidAccessorError(method, None)


def normalize_collection(
    collection: Any,
    label_method: AccessorOption = None,
    value_method: AccessorOption = None,
) -> List[CollectionEntry]:
    """Turn ``collection`` into entries, preserving input order."""
    if isinstance(collection, (str, bytes)):
        raise InvalidCollectionError(collection, "a string is not a collection")

    if isinstance(collection, Mapping):
        elements = list(collection.items())
    else:
        try:
            elements = list(collection)
        except TypeError:
            raise InvalidCollectionError(collection) from None

    label_accessor = accessor_for(label_method)
    value_accessor = accessor_for(value_method)

    entries = []
    for element in elements:
        if isinstance(element, (list, tuple)):
            if len(element) != 2:
                raise InvalidCollectionError(
                    collection, f"entry {element!r} is not a (label, value) pair"
                )
            label, value = element
        else:
            label = value = element

        if label_accessor is not None:
            label = label_accessor(element)
        if value_accessor is not None:
            value = value_accessor(element)

        entries.append(CollectionEntry(label=stringify(label), value=stringify(value)))

    return entries
