from typing import Any, Optional
import logging

from fastapi.templating import Jinja2Templates

from .components.input import InputDispatcher
from .components.widgets import WidgetRegistry, WidgetStrategy
from .core.config import FormConfig
from .form.builder import FormBuilder
from .i18n.backend import TranslationBackend
from .i18n.cache import TranslationCache

logger = logging.getLogger("simpleinput")


class SimpleForm:
    """
    Entry point for rendering form inputs.

    Owns the pieces every form shares: configuration, the translation
    backend, the translation cache and the widget registry. Keep one
    instance per application so the cache is shared across renders.

    Args:
        config: Rendering defaults.
        translations: Translation backend; an empty one is created when omitted.
        registry: Widget registry; defaults to the built-in input types.

    Example:
        >>> simple_form = SimpleForm()
        >>> f = simple_form.form_for(user)
        >>> f.input("name")
        >>> f.input_field("active", as_="radio")
    """

    def __init__(
        self,
        config: Optional[FormConfig] = None,
        translations: Optional[TranslationBackend] = None,
        registry: Optional[WidgetRegistry] = None,
    ) -> None:
        self.config = config or FormConfig()
        self.translations = translations or TranslationBackend()
        self.translation_cache = TranslationCache(self.translations)
        self.registry = registry or WidgetRegistry()
        self.dispatcher = InputDispatcher(self.registry)

    def form_for(
        self, obj: Any, object_name: Optional[str] = None, locale: Optional[str] = None
    ) -> FormBuilder:
        return FormBuilder(self, obj, object_name=object_name, locale=locale)

    def reset_i18n_cache(self, key: Optional[str] = None) -> None:
        self.translation_cache.reset(key)

    def register_widget(self, input_type: str, strategy: WidgetStrategy) -> None:
        self.registry.register(input_type, strategy)
        logger.debug(f"Registered widget {type(strategy).__name__} for '{input_type}'")

    def install(self, templates: Jinja2Templates) -> Jinja2Templates:
        """Expose ``simple_form_for`` to every template rendered by ``templates``."""
        templates.env.globals["simple_form_for"] = self.form_for
        return templates
