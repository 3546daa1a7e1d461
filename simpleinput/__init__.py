from .core.config import FormConfig
from .core.exceptions import (
    InvalidAccessorError,
    InvalidCollectionError,
    InvalidPromptUnitError,
    SimpleInputError,
    UnknownTypeError,
)
from .form.builder import FormBuilder
from .i18n.backend import TranslationBackend
from .i18n.cache import TranslationCache
from .simple_form import SimpleForm

__all__ = [
    "SimpleForm",
    "FormBuilder",
    "FormConfig",
    "TranslationBackend",
    "TranslationCache",
    "SimpleInputError",
    "UnknownTypeError",
    "InvalidCollectionError",
    "InvalidAccessorError",
    "InvalidPromptUnitError",
]
