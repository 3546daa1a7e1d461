"""Widget strategies and the registry mapping input types to them."""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional
import logging

from markupsafe import Markup

from ..core.exceptions import UnknownTypeError
from ..html import build_tag, join, sanitize_id, stringify
from ..schemas.input import CollectionEntry
from .datetime_select import CompositeDateTimeBuilder
from .field import InputField

logger = logging.getLogger(__name__)

CHECKED_VALUES = frozenset({"true", "1", "on", "yes"})


class WidgetStrategy(ABC):
    uses_collection = False

    @abstractmethod
    def render(self, field: InputField, collection: Optional[List[CollectionEntry]] = None) -> Markup:
        ...


class SimpleField(WidgetStrategy):
    """A single ``<input>`` element."""

    def __init__(self, input_type: str = "text", echo_value: bool = True) -> None:
        self.input_type = input_type
        self.echo_value = echo_value

    def render(self, field: InputField, collection: Optional[List[CollectionEntry]] = None) -> Markup:
        attrs = {"type": self.input_type, **field.attrs}
        if self.echo_value and field.value is not None:
            attrs.setdefault("value", stringify(field.value))
        return build_tag("input", attrs)


class TextAreaField(SimpleField):
    def render(self, field: InputField, collection: Optional[List[CollectionEntry]] = None) -> Markup:
        config = field.form.config
        attrs = {"cols": config.text_area_cols, "rows": config.text_area_rows, **field.attrs}
        return build_tag("textarea", attrs, stringify(field.value))


class CheckBoxField(SimpleField):
    """Checkbox preceded by a hidden "0" so an unchecked box still submits a value."""

    def render(self, field: InputField, collection: Optional[List[CollectionEntry]] = None) -> Markup:
        hidden = build_tag(
            "input",
            {
                "type": "hidden",
                "name": field.base_name,
                "value": "0",
                "disabled": field.attrs.get("disabled"),
            },
        )
        checkbox = build_tag(
            "input",
            {
                "type": "checkbox",
                **field.attrs,
                "value": "1",
                "checked": stringify(field.value).lower() in CHECKED_VALUES,
            },
        )
        return hidden + checkbox


class CollectionField(WidgetStrategy):
    uses_collection = True

    def is_selected(self, field: InputField, entry: CollectionEntry) -> bool:
        return field.value is not None and entry.value == stringify(field.value)


class RadioCollectionField(CollectionField):
    """One radio per entry, each followed by its label."""

    def render(self, field: InputField, collection: Optional[List[CollectionEntry]] = None) -> Markup:
        fragments = []
        for entry in collection or []:
            radio_id = f"{field.base_id}_{sanitize_id(entry.value)}"
            fragments.append(
                build_tag(
                    "input",
                    {
                        "type": "radio",
                        **field.attrs,
                        "id": radio_id,
                        "value": entry.value,
                        "checked": self.is_selected(field, entry),
                    },
                )
            )
            fragments.append(
                build_tag("label", {"for": radio_id, "class": field.input_type}, entry.label)
            )
        return join(fragments, "\n")


class SelectCollectionField(CollectionField):
    def render(self, field: InputField, collection: Optional[List[CollectionEntry]] = None) -> Markup:
        options = []
        if field.options.include_blank:
            options.append(build_tag("option", {"value": ""}, ""))
        for entry in collection or []:
            options.append(
                build_tag(
                    "option",
                    {"value": entry.value, "selected": self.is_selected(field, entry)},
                    entry.label,
                )
            )
        return build_tag("select", field.attrs, join(options, "\n"))


class CompositeField(WidgetStrategy):
    """Date, datetime and time inputs split into sub-position selects."""

    def __init__(self, kind: str) -> None:
        self.kind = kind

    def render(self, field: InputField, collection: Optional[List[CollectionEntry]] = None) -> Markup:
        form = field.form
        builder = CompositeDateTimeBuilder(form.translations, form.locale, form.config)
        controls = builder.build(
            self.kind,
            field.base_id,
            field.base_name,
            field.value,
            field.options.options,
            field.html_attrs("id", "name"),
        )
        return builder.render(controls, self.kind)


def default_widgets() -> Dict[str, WidgetStrategy]:
    return {
        "string": SimpleField("text"),
        "text": TextAreaField(),
        "numeric": SimpleField("text"),
        "password": SimpleField("password", echo_value=False),
        "hidden": SimpleField("hidden"),
        "boolean": CheckBoxField(),
        "date": CompositeField("date"),
        "datetime": CompositeField("datetime"),
        "time": CompositeField("time"),
        "radio": RadioCollectionField(),
        "select": SelectCollectionField(),
    }


class WidgetRegistry:
    """
    Lookup table from input type to widget strategy.

    New types are added with ``register``; the dispatcher only ever calls
    ``resolve``.
    """

    def __init__(self, widgets: Optional[Dict[str, WidgetStrategy]] = None) -> None:
        self._widgets: Dict[str, WidgetStrategy] = dict(
            default_widgets() if widgets is None else widgets
        )

    def register(self, input_type: str, strategy: WidgetStrategy) -> None:
        if not isinstance(strategy, WidgetStrategy):
            raise TypeError(f"Widget for '{input_type}' must be a WidgetStrategy, got {strategy!r}")
        if input_type in self._widgets:
            logger.info(f"Replacing widget for input type '{input_type}'")
        self._widgets[input_type] = strategy

    def resolve(self, input_type: str) -> WidgetStrategy:
        try:
            return self._widgets[input_type]
        except KeyError:
            raise UnknownTypeError(input_type) from None

    def __contains__(self, input_type: str) -> bool:
        return input_type in self._widgets

    @property
    def types(self) -> Iterable[str]:
        return tuple(self._widgets)
