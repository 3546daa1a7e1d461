from .backend import TranslationBackend
from .cache import BOOLEAN_COLLECTION, TranslationCache

__all__ = ["TranslationBackend", "TranslationCache", "BOOLEAN_COLLECTION"]
