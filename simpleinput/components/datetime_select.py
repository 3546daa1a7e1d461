"""
Composite date, datetime and time selects.

One attribute is split into ordered sub-positions, each bound to a unit::

    1i year   2i month   3i day   4i hour   5i minute   6i second

Sub-controls are ``select`` elements, or hidden inputs for the date portion
of a ``time`` input and for units discarded through options. Ids and names
carry the position: ``user_born_at_1i`` / ``user[born_at(1i)]``.
"""

from datetime import date, datetime, time
from typing import Any, Dict, List, Optional, Tuple
import calendar
import logging

from pydantic import BaseModel, ConfigDict, Field
from markupsafe import Markup

from ..core.config import FormConfig
from ..core.exceptions import InvalidPromptUnitError
from ..html import build_tag, join
from ..i18n.backend import TranslationBackend
from ..schemas.input import SubfieldOptions

logger = logging.getLogger(__name__)

DATE_UNITS = ("year", "month", "day")
TIME_UNITS = ("hour", "minute", "second")
POSITIONS = {unit: index for index, unit in enumerate(DATE_UNITS + TIME_UNITS, start=1)}

COMPOSITE_KINDS = ("date", "datetime", "time")


def sub_position_name(base_name: str, position: int) -> str:
    """``user[born_at]`` -> ``user[born_at(1i)]``; plain names get the suffix appended."""
    if base_name.endswith("]"):
        return f"{base_name[:-1]}({position}i)]"
    return f"{base_name}({position}i)"


class SubControl(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    unit: str
    position: int
    hidden: bool = False
    attrs: Dict[str, Any] = Field(default_factory=dict)
    value: str = ""
    choices: List[Tuple[str, str]] = Field(default_factory=list)

    def render(self) -> Markup:
        if self.hidden:
            return build_tag("input", {"type": "hidden", **self.attrs, "value": self.value})

        options = [
            build_tag("option", {"value": value, "selected": value == self.value}, label)
            for label, value in self.choices
        ]
        return build_tag("select", self.attrs, join(options, "\n"))


class CompositeDateTimeBuilder:
    """Builds the ordered sub-controls of one date/datetime/time input."""

    def __init__(self, translations: TranslationBackend, locale: str, config: FormConfig) -> None:
        self.translations = translations
        self.locale = locale
        self.config = config

    def units_for(self, kind: str, options: SubfieldOptions) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
        """Return (hidden units, select units) for ``kind``, before discards."""
        clock = TIME_UNITS if options.include_seconds else TIME_UNITS[:2]
        if kind == "date":
            return (), DATE_UNITS
        if kind == "datetime":
            return (), DATE_UNITS + clock
        if kind == "time":
            return DATE_UNITS, clock
        raise ValueError(f"Not a composite kind: {kind}")

    def visible_units(self, kind: str, options: SubfieldOptions) -> Tuple[str, ...]:
        """Units rendered as selects once discards are applied."""
        _, select_units = self.units_for(kind, options)
        return tuple(u for u in select_units if not getattr(options, f"discard_{u}", False))

    def first_visible_position(self, kind: str, options: SubfieldOptions) -> Optional[int]:
        visible = self.visible_units(kind, options)
        return POSITIONS[visible[0]] if visible else None

    def build(
        self,
        kind: str,
        base_id: str,
        base_name: str,
        value: Any = None,
        options: Optional[SubfieldOptions] = None,
        html_attrs: Optional[Dict[str, Any]] = None,
    ) -> List[SubControl]:
        options = options or SubfieldOptions()
        hidden_units, select_units = self.units_for(kind, options)
        visible = self.visible_units(kind, options)
        prompts = self._prompts(kind, visible, options.prompt)
        current = self._current_values(value)

        controls = []
        for unit in hidden_units + select_units:
            position = POSITIONS[unit]
            attrs: Dict[str, Any] = {
                "id": f"{base_id}_{position}i",
                "name": sub_position_name(base_name, position),
            }
            hidden = unit not in visible

            if hidden:
                if options.disabled:
                    attrs["disabled"] = True
                controls.append(
                    SubControl(unit=unit, position=position, hidden=True, attrs=attrs, value=str(current[unit]))
                )
                continue

            attrs.update(html_attrs or {})
            if options.disabled:
                attrs["disabled"] = True

            choices = self._choices(unit, current, options)
            if unit in prompts:
                choices.insert(0, (prompts[unit], ""))

            controls.append(
                SubControl(
                    unit=unit,
                    position=position,
                    attrs=attrs,
                    value=self._option_value(unit, current[unit]),
                    choices=choices,
                )
            )

        logger.debug(
            f"Built {kind} composite for {base_id}: "
            f"{[(c.position, 'hidden' if c.hidden else 'select') for c in controls]}"
        )
        return controls

    def render(self, controls: List[SubControl], kind: str) -> Markup:
        date_part = join((c.render() for c in controls if c.unit in DATE_UNITS), "\n")
        clock_part = join((c.render() for c in controls if c.unit in TIME_UNITS), " : ")
        if kind == "date":
            return date_part
        separator = Markup(" &mdash; ") if kind == "datetime" else Markup("\n")
        return join([date_part, clock_part], separator)

    def _prompts(self, kind: str, select_units: Tuple[str, ...], prompt: Any) -> Dict[str, str]:
        if prompt is None or prompt is False:
            return {}
        if not isinstance(prompt, dict):
            prompt = {unit: prompt for unit in select_units}

        prompts = {}
        for unit, text in prompt.items():
            if unit not in select_units:
                raise InvalidPromptUnitError(unit, kind)
            if text is False:
                continue
            if text is True:
                text = self.translations.lookup(
                    self.locale, f"datetime.prompts.{unit}", unit.capitalize()
                )
            prompts[unit] = text
        return prompts

    def _current_values(self, value: Any) -> Dict[str, int]:
        now = datetime.now()
        if isinstance(value, datetime):
            moment = value
        elif isinstance(value, date):
            moment = datetime.combine(value, time())
        elif isinstance(value, time):
            moment = datetime.combine(now.date(), value)
        else:
            moment = now
        return {unit: getattr(moment, unit) for unit in DATE_UNITS + TIME_UNITS}

    def _choices(self, unit: str, current: Dict[str, int], options: SubfieldOptions) -> List[Tuple[str, str]]:
        if unit == "year":
            start = options.start_year if options.start_year is not None else current["year"] - self.config.year_range
            end = options.end_year if options.end_year is not None else current["year"] + self.config.year_range
            step = 1 if end >= start else -1
            return [(str(y), str(y)) for y in range(start, end + step, step)]
        if unit == "month":
            return [(self._month_label(m, options), str(m)) for m in range(1, 13)]
        if unit == "day":
            return [(str(d), str(d)) for d in range(1, 32)]
        if unit == "hour":
            return [(f"{h:02d}", f"{h:02d}") for h in range(24)]
        step = options.minute_step if unit == "minute" else 1
        return [(f"{n:02d}", f"{n:02d}") for n in range(0, 60, step)]

    def _month_label(self, month: int, options: SubfieldOptions) -> str:
        if options.use_month_numbers:
            return str(month)
        return self.translations.lookup(
            self.locale, f"date.month_names.{month}", calendar.month_name[month]
        )

    def _option_value(self, unit: str, number: int) -> str:
        if unit in TIME_UNITS:
            return f"{number:02d}"
        return str(number)
