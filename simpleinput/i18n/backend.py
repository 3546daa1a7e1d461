"""In-memory translation store consulted for labels, prompts and month names."""

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Mapping, Optional
import logging
import threading

logger = logging.getLogger(__name__)


def _flatten(mapping: Mapping[Any, Any], prefix: str = "") -> Dict[str, str]:
    flat: Dict[str, str] = {}
    for key, value in mapping.items():
        dotted = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(_flatten(value, dotted))
        else:
            flat[dotted] = str(value)
    return flat


class TranslationBackend:
    """
    Key/value translation lookups per locale.

    Translations are given as nested mappings and stored under dotted keys,
    so ``{"simple_form": {"true": "Sim"}}`` answers ``simple_form.true``.

    Args:
        translations: Optional initial mapping of locale -> nested translations.
    """

    def __init__(self, translations: Optional[Mapping[str, Mapping[str, Any]]] = None) -> None:
        self._store: Dict[str, Dict[str, str]] = {}
        self._lock = threading.RLock()
        for locale, mapping in (translations or {}).items():
            self.store_translations(locale, mapping)

    def store_translations(self, locale: str, mapping: Mapping[str, Any]) -> None:
        flat = _flatten(mapping)
        with self._lock:
            self._store.setdefault(locale, {}).update(flat)
        logger.debug(f"Stored {len(flat)} translations for locale '{locale}'")

    def lookup(self, locale: str, key: str, default: Optional[str] = None) -> Optional[str]:
        with self._lock:
            return self._store.get(locale, {}).get(key, default)

    @contextmanager
    def translations(self, locale: str, mapping: Mapping[str, Any]) -> Iterator["TranslationBackend"]:
        """Store translations for the duration of the block, then restore the locale."""
        with self._lock:
            previous = dict(self._store.get(locale, {}))
        self.store_translations(locale, mapping)
        try:
            yield self
        finally:
            with self._lock:
                self._store[locale] = previous
