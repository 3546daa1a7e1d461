from .config import FormConfig
from .exceptions import (
    InvalidAccessorError,
    InvalidCollectionError,
    InvalidPromptUnitError,
    SimpleInputError,
    UnknownTypeError,
)

__all__ = [
    "FormConfig",
    "SimpleInputError",
    "UnknownTypeError",
    "InvalidCollectionError",
    "InvalidAccessorError",
    "InvalidPromptUnitError",
]
