from typing import Callable, Dict, Optional, Tuple, TypeVar
import logging
import threading

from .backend import TranslationBackend

logger = logging.getLogger(__name__)

T = TypeVar("T")

BOOLEAN_COLLECTION = "boolean_collection"
BOOLEAN_TRUE_KEY = "simple_form.true"
BOOLEAN_FALSE_KEY = "simple_form.false"


class TranslationCache:
    """
    Resolved translations keyed by (locale, key).

    Entries are computed once from the backend and kept until ``reset`` is
    called for their key. Reads and writes share one lock, so a cache can be
    used by concurrent renders.
    """

    def __init__(self, backend: TranslationBackend) -> None:
        self.backend = backend
        self._entries: Dict[Tuple[str, str], object] = {}
        self._lock = threading.RLock()

    def fetch(self, locale: str, key: str, resolve: Callable[[], T]) -> T:
        with self._lock:
            cache_key = (locale, key)
            if cache_key not in self._entries:
                self._entries[cache_key] = resolve()
                logger.debug(f"Cached '{key}' for locale '{locale}'")
            return self._entries[cache_key]  # type: ignore[return-value]

    def get_boolean_labels(self, locale: str) -> Tuple[str, str]:
        """Return the (true, false) labels used by boolean collections."""
        return self.fetch(
            locale,
            BOOLEAN_COLLECTION,
            lambda: (
                self.backend.lookup(locale, BOOLEAN_TRUE_KEY, "Yes"),
                self.backend.lookup(locale, BOOLEAN_FALSE_KEY, "No"),
            ),
        )

    def reset(self, key: Optional[str] = None) -> None:
        """Drop cached entries for ``key`` in every locale, or everything when omitted."""
        with self._lock:
            if key is None:
                self._entries.clear()
            else:
                for cache_key in [k for k in self._entries if k[1] == key]:
                    del self._entries[cache_key]
        logger.info(f"Translation cache reset for {key or 'all keys'}")

    def __contains__(self, cache_key: Tuple[str, str]) -> bool:
        with self._lock:
            return cache_key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
