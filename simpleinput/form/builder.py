from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Union
import logging
import re

from markupsafe import Markup, escape

from ..components.datetime_select import CompositeDateTimeBuilder
from ..components.widgets import CompositeField, RadioCollectionField
from ..core.config import FormConfig
from ..html import build_tag, class_names, join, sanitize_id
from ..i18n.backend import TranslationBackend
from ..i18n.cache import TranslationCache
from ..schemas.input import InputSpec, RenderOptions

if TYPE_CHECKING:
    from ..simple_form import SimpleForm

logger = logging.getLogger(__name__)


def underscore(name: str) -> str:
    """``AdminUser`` -> ``admin_user``"""
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    name = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", name)
    return name.lower()


def humanize(attribute: str) -> str:
    """``category_id`` -> ``Category``, ``born_at`` -> ``Born at``"""
    text = re.sub(r"_id$", "", attribute).replace("_", " ").strip()
    return text[:1].upper() + text[1:]


class FormBuilder:
    """
    The form context every input is rendered against.

    Args:
        simple_form: Owner of the configuration, translations and widgets.
        obj: The object being edited; attributes or mapping keys are read from it.
        object_name: Prefix of every id and name. Defaults to the snake_case class name.
        locale: Locale for labels; defaults to ``FormConfig.default_locale``.
    """

    def __init__(
        self,
        simple_form: "SimpleForm",
        obj: Any,
        object_name: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> None:
        if object_name is None:
            if obj is None or isinstance(obj, Mapping):
                raise ValueError("object_name is required when the form object has no class name")
            object_name = underscore(type(obj).__name__)

        self.simple_form = simple_form
        self.object = obj
        self.object_name = object_name
        self.locale = locale or simple_form.config.default_locale

    @property
    def config(self) -> FormConfig:
        return self.simple_form.config

    @property
    def translations(self) -> TranslationBackend:
        return self.simple_form.translations

    @property
    def translation_cache(self) -> TranslationCache:
        return self.simple_form.translation_cache

    def value_of(self, attribute: str) -> Any:
        if isinstance(self.object, Mapping):
            return self.object.get(attribute)
        return getattr(self.object, attribute, None)

    def errors_on(self, attribute: str) -> List[str]:
        if isinstance(self.object, Mapping):
            errors = self.object.get("errors")
        else:
            errors = getattr(self.object, "errors", None)
        if not isinstance(errors, Mapping):
            return []

        messages = errors.get(attribute)
        if not messages:
            return []
        if isinstance(messages, str):
            return [messages]
        return [str(m) for m in messages]

    def input_field(self, attribute: str, as_: str = "string", **options: Any) -> Markup:
        """Render the bare control for ``attribute``."""
        return self.simple_form.dispatcher.render(self, attribute, as_, options)

    def input(self, attribute: str, as_: str = "string", **options: Any) -> Markup:
        """Render the control wrapped with its label, hint and first error."""
        render_options = RenderOptions.model_validate(options)
        control = self.simple_form.dispatcher.render(self, attribute, as_, render_options)
        if as_ == "hidden":
            return control

        required = self.simple_form.dispatcher.is_required(self, render_options)
        errors = self.errors_on(attribute)
        config = self.config

        parts = []
        if render_options.label is not False:
            text = render_options.label if isinstance(render_options.label, str) else None
            target = self.label_target(attribute, as_, render_options)
            parts.append(self.label(attribute, text, required, as_, target if target else False))
        parts.append(control)
        if render_options.hint:
            parts.append(build_tag("span", {"class": config.hint_class}, render_options.hint))
        if errors:
            parts.append(build_tag("span", {"class": config.error_class}, errors[0]))

        css = class_names(
            config.wrapper_class,
            as_,
            "required" if required else None,
            config.field_with_errors_class if errors else None,
        )
        return build_tag(config.wrapper_tag, {"class": css}, join(parts, "\n"))

    def label_target(self, attribute: str, input_type: str, options: RenderOptions) -> Optional[str]:
        """Id of the first visible control rendered for ``attribute``, if any."""
        base_id = options.html.get("id") or f"{self.object_name}_{attribute}"
        strategy = self.simple_form.registry.resolve(input_type)

        if isinstance(strategy, RadioCollectionField):
            spec = InputSpec(attribute=attribute, declared_type=input_type, options=options)
            entries = self.simple_form.dispatcher.collection_for(self, spec)
            return f"{base_id}_{sanitize_id(entries[0].value)}" if entries else None

        if isinstance(strategy, CompositeField):
            builder = CompositeDateTimeBuilder(self.translations, self.locale, self.config)
            position = builder.first_visible_position(strategy.kind, options.options)
            return f"{base_id}_{position}i" if position else None

        return base_id

    def label(
        self,
        attribute: str,
        text: Optional[str] = None,
        required: bool = True,
        input_type: str = "string",
        target_id: Union[str, bool, None] = None,
    ) -> Markup:
        """Label for ``attribute``; ``target_id=False`` leaves out the ``for`` attribute."""
        if text is None:
            text = self.translations.lookup(
                self.locale,
                f"simple_form.labels.{self.object_name}.{attribute}",
                humanize(attribute),
            )

        if target_id is None:
            target_id = f"{self.object_name}_{attribute}"

        content = escape(text)
        if required:
            content += Markup(" ") + build_tag("abbr", {"title": "required"}, self.config.required_text)

        return build_tag(
            "label",
            {"for": target_id or None, "class": class_names(input_type, "required" if required else None)},
            content,
        )
