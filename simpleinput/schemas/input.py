from typing import Annotated, Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

PromptOption = Union[bool, str, Dict[str, Union[bool, str]], None]


class SubfieldOptions(BaseModel):
    """Options passed to every sub-control of a composite date/time input."""

    model_config = ConfigDict(extra="forbid")

    disabled: bool = False
    prompt: PromptOption = None
    include_seconds: bool = False
    discard_year: bool = False
    discard_month: bool = False
    discard_day: bool = False
    discard_hour: bool = False
    discard_minute: bool = False
    start_year: Optional[int] = None
    end_year: Optional[int] = None
    minute_step: Annotated[int, Field(gt=0, le=30)] = 1
    use_month_numbers: bool = False


class RenderOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    html: Dict[str, Any] = Field(default_factory=dict)
    collection: Optional[Any] = None
    label_method: Optional[Any] = None
    value_method: Optional[Any] = None
    required: Optional[bool] = None
    include_blank: bool = False
    options: SubfieldOptions = Field(default_factory=SubfieldOptions)

    # Used by the wrapper only, never by the control itself.
    label: Union[str, bool, None] = None
    hint: Optional[str] = None


class InputSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    attribute: str
    declared_type: str
    options: RenderOptions = Field(default_factory=RenderOptions)


class CollectionEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    value: str
