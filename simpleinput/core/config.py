from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class FormConfig(BaseModel):
    """Rendering defaults shared by every form built from one SimpleForm."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_locale: str = "en"
    required_by_default: bool = True

    text_area_cols: Annotated[int, Field(gt=0)] = 40
    text_area_rows: Annotated[int, Field(gt=0)] = 20
    year_range: Annotated[int, Field(ge=0)] = 5

    wrapper_tag: str = "div"
    wrapper_class: str = "input"
    error_class: str = "error"
    hint_class: str = "hint"
    field_with_errors_class: str = "field_with_errors"
    required_text: str = "*"
