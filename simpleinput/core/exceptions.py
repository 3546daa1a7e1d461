from typing import Any


class SimpleInputError(Exception):
    """Base class for every error raised while rendering an input."""


class UnknownTypeError(SimpleInputError):
    def __init__(self, input_type: str) -> None:
        self.input_type = input_type
        super().__init__(f"No widget registered for input type '{input_type}'")


class InvalidCollectionError(SimpleInputError):
    def __init__(self, collection: Any, reason: str = "not iterable as entries") -> None:
        self.collection = collection
        super().__init__(f"Invalid collection {collection!r}: {reason}")


class InvalidAccessorError(SimpleInputError):
    """Raised when a label/value accessor cannot be applied to an element."""

    def __init__(self, accessor: Any, element: Any) -> None:
        self.accessor = accessor
        self.element = element
        super().__init__(f"Accessor {accessor!r} cannot be applied to {element!r}")


class InvalidPromptUnitError(SimpleInputError):
    def __init__(self, unit: str, kind: str) -> None:
        self.unit = unit
        self.kind = kind
        super().__init__(f"Prompt given for '{unit}', which a {kind} select does not render")
