from typing import TYPE_CHECKING, Any, Dict

from ..schemas.input import InputSpec, RenderOptions

if TYPE_CHECKING:
    from ..form.builder import FormBuilder


class InputField:
    """One attribute ready to render: its spec, computed html attributes and current value."""

    def __init__(self, form: "FormBuilder", spec: InputSpec, attrs: Dict[str, Any], value: Any) -> None:
        self.form = form
        self.spec = spec
        self.attrs = attrs
        self.value = value

    @property
    def input_type(self) -> str:
        return self.spec.declared_type

    @property
    def options(self) -> RenderOptions:
        return self.spec.options

    @property
    def base_id(self) -> str:
        return self.attrs["id"]

    @property
    def base_name(self) -> str:
        return self.attrs["name"]

    def html_attrs(self, *exclude: str) -> Dict[str, Any]:
        return {k: v for k, v in self.attrs.items() if k not in exclude}
