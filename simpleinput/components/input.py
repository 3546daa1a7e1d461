from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Union
import logging

from markupsafe import Markup

from ..html import class_names
from ..schemas.input import CollectionEntry, InputSpec, RenderOptions
from .collection import normalize_collection
from .field import InputField
from .widgets import WidgetRegistry

if TYPE_CHECKING:
    from ..form.builder import FormBuilder

logger = logging.getLogger(__name__)


class InputDispatcher:
    """
    Renders one attribute of a form as the control registered for its type.

    Computed attributes:
    - id ``{object_name}_{attribute}`` and name ``{object_name}[{attribute}]``
    - class: the input type, then ``required`` unless ``required=False``

    ``html`` overrides win over computed attributes, except ``class`` which
    is appended to the computed classes.
    """

    def __init__(self, registry: WidgetRegistry) -> None:
        self.registry = registry

    def render(
        self,
        form: "FormBuilder",
        attribute: str,
        declared_type: str,
        options: Union[RenderOptions, Mapping[str, Any], None] = None,
    ) -> Markup:
        if not isinstance(options, RenderOptions):
            options = RenderOptions.model_validate(dict(options or {}))
        spec = InputSpec(attribute=attribute, declared_type=declared_type, options=options)

        strategy = self.registry.resolve(declared_type)
        field = InputField(form, spec, self.html_attributes(form, spec), form.value_of(attribute))

        collection = self.collection_for(form, spec) if strategy.uses_collection else None
        logger.debug(
            f"Rendering {form.object_name}.{attribute} as {declared_type} "
            f"with {type(strategy).__name__}"
        )
        return strategy.render(field, collection)

    def is_required(self, form: "FormBuilder", options: RenderOptions) -> bool:
        if options.required is None:
            return form.config.required_by_default
        return options.required

    def html_attributes(self, form: "FormBuilder", spec: InputSpec) -> Dict[str, Any]:
        html = dict(spec.options.html)
        css = class_names(
            spec.declared_type,
            "required" if self.is_required(form, spec.options) else None,
            html.pop("class", None),
        )
        return {
            "id": f"{form.object_name}_{spec.attribute}",
            "name": f"{form.object_name}[{spec.attribute}]",
            **html,
            "class": css,
        }

    def collection_for(self, form: "FormBuilder", spec: InputSpec) -> List[CollectionEntry]:
        options = spec.options
        if options.collection is None:
            true_label, false_label = form.translation_cache.get_boolean_labels(form.locale)
            return normalize_collection([(true_label, True), (false_label, False)])
        return normalize_collection(options.collection, options.label_method, options.value_method)
