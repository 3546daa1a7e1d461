"""
Tests for InputDispatcher rendering through FormBuilder.input_field.

Every test renders one attribute of the conftest ``User`` and inspects the
markup with CSS selectors.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from simpleinput import (
    InvalidAccessorError,
    InvalidCollectionError,
    InvalidPromptUnitError,
    UnknownTypeError,
)
from simpleinput.components.widgets import SimpleField


class TestSimpleInputs:
    def test_string_maps_to_text_field(self, input_for):
        """A string input is a text field named after the object and attribute."""
        soup = input_for("name", "string")
        field = soup.select_one('input[name="user[name]"]#user_name')
        assert field is not None
        assert field["type"] == "text"
        assert field["value"] == "New in Simple Form!"
        assert field["class"] == ["string", "required"]

    @pytest.mark.parametrize(
        "attribute,input_type,selector",
        [
            ("name", "string", "input.string"),
            ("description", "text", "textarea.text"),
            ("age", "numeric", "input.numeric"),
            ("born_at", "date", "select.date"),
            ("created_at", "datetime", "select.datetime"),
            ("delivery_time", "time", "select.time"),
            ("active", "boolean", "input.boolean"),
            ("password", "password", "input.password"),
            ("active", "radio", "input.radio"),
            ("active", "select", "select.select"),
        ],
    )
    def test_css_class_follows_input_type(self, input_for, attribute, input_type, selector):
        assert input_for(attribute, input_type).select(selector)

    def test_html_options_override_id_and_extend_class(self, input_for):
        soup = input_for("name", "string", html={"class": "my_input", "id": "my_input"})
        field = soup.select_one("input#my_input.my_input")
        assert field is not None
        assert field["class"] == ["string", "required", "my_input"]
        assert field["name"] == "user[name]"

    def test_html_class_union_drops_duplicates(self, input_for):
        field = input_for("name", "string", html={"class": "string wide"}).select_one("input")
        assert field["class"] == ["string", "required", "wide"]

    def test_html_options_pass_through(self, input_for):
        field = input_for("name", "string", html={"disabled": True, "size": 30}).select_one("input")
        assert field["disabled"] == "disabled"
        assert field["size"] == "30"

    def test_text_area(self, input_for):
        area = input_for("description", "text").select_one("textarea.text#user_description")
        assert area.get_text() == "Hello!"
        assert area["name"] == "user[description]"
        assert area["cols"] == "40"
        assert area["rows"] == "20"

    def test_numeric_text_field(self, input_for):
        field = input_for("age", "numeric").select_one("input.numeric#user_age")
        assert field["type"] == "text"
        assert field["value"] == "19"

    def test_boolean_checkbox(self, input_for):
        soup = input_for("active", "boolean")
        checkbox = soup.select_one("input[type=checkbox].boolean#user_active")
        assert checkbox["value"] == "1"
        assert not checkbox.has_attr("checked")

        hidden = soup.select_one("input[type=hidden]")
        assert hidden["name"] == "user[active]"
        assert hidden["value"] == "0"
        assert not hidden.has_attr("id")

    def test_boolean_checkbox_checked_when_true(self, simple_form, user):
        from bs4 import BeautifulSoup

        user.active = True
        markup = simple_form.form_for(user).input_field("active", as_="boolean")
        checkbox = BeautifulSoup(markup, "html.parser").select_one("input[type=checkbox]")
        assert checkbox["checked"] == "checked"

    @pytest.mark.parametrize("value", ["false", "0", "", None])
    def test_boolean_checkbox_unchecked_for_false_like_values(self, simple_form, user, value):
        from bs4 import BeautifulSoup

        user.active = value
        markup = simple_form.form_for(user).input_field("active", as_="boolean")
        checkbox = BeautifulSoup(markup, "html.parser").select_one("input[type=checkbox]")
        assert not checkbox.has_attr("checked")

    @pytest.mark.parametrize("value", ["true", "1", 1])
    def test_boolean_checkbox_checked_for_true_like_values(self, simple_form, user, value):
        from bs4 import BeautifulSoup

        user.active = value
        markup = simple_form.form_for(user).input_field("active", as_="boolean")
        checkbox = BeautifulSoup(markup, "html.parser").select_one("input[type=checkbox]")
        assert checkbox["checked"] == "checked"

    def test_password_field_never_echoes_value(self, input_for):
        field = input_for("password", "password").select_one("input[type=password].password#user_password")
        assert field is not None
        assert not field.has_attr("value")

    def test_hidden_field(self, input_for):
        soup = input_for("name", "hidden")
        assert not soup.select("input[type=text]")
        field = soup.select_one("input#user_name[type=hidden]")
        assert field["value"] == "New in Simple Form!"

    def test_value_is_escaped(self, simple_form, user):
        user.name = '<b>"bold"</b>'
        markup = simple_form.form_for(user).input_field("name")
        assert "<b>" not in markup
        assert "&lt;b&gt;" in markup


class TestRequired:
    def test_required_by_default(self, input_for):
        assert input_for("name", "string").select_one("input.required#user_name")

    def test_required_can_be_disabled(self, input_for):
        soup = input_for("name", "string", required=False)
        assert not soup.select("input.required")
        assert soup.select_one("input")["class"] == ["string"]

    def test_required_applies_to_composites(self, input_for):
        soup = input_for("born_at", "date", required=False)
        assert len(soup.select("select.date")) == 3
        assert not soup.select("select.required")

    def test_config_default_can_turn_required_off(self, translations, user):
        from bs4 import BeautifulSoup

        from simpleinput import FormConfig, SimpleForm

        simple_form = SimpleForm(FormConfig(required_by_default=False), translations)
        markup = simple_form.form_for(user).input_field("name")
        assert not BeautifulSoup(markup, "html.parser").select("input.required")


class TestDateTimeInputs:
    def test_datetime_select(self, input_for):
        soup = input_for("created_at", "datetime")
        for i in range(1, 6):
            assert soup.select_one(f"select.datetime#user_created_at_{i}i") is not None
        assert soup.select_one("#user_created_at_6i") is None
        assert soup.select_one("select#user_created_at_4i")["name"] == "user[created_at(4i)]"

    def test_datetime_select_with_seconds(self, input_for):
        soup = input_for("created_at", "datetime", options={"include_seconds": True})
        assert soup.select_one("select.datetime#user_created_at_6i") is not None

    def test_datetime_options(self, input_for):
        soup = input_for(
            "created_at",
            "datetime",
            options={"disabled": True, "prompt": {"year": "ano", "month": "mês", "day": "dia"}},
        )
        selects = soup.select("select.datetime")
        assert selects
        assert all(s["disabled"] == "disabled" for s in selects)
        texts = [o.get_text() for o in soup.select("select.datetime option")]
        for prompt in ("ano", "mês", "dia"):
            assert prompt in texts

    def test_date_select(self, input_for):
        soup = input_for("born_at", "date")
        for i in (1, 2, 3):
            assert soup.select_one(f"select.date#user_born_at_{i}i") is not None
        assert soup.select_one("select.date#user_born_at_4i") is None

    def test_sub_position_names_stay_inside_brackets(self, input_for):
        soup = input_for("born_at", "date")
        names = [s["name"] for s in soup.select("select.date")]
        assert names == ["user[born_at(1i)]", "user[born_at(2i)]", "user[born_at(3i)]"]

    def test_time_hidden_names(self, input_for):
        soup = input_for("delivery_time", "time")
        assert soup.select_one("#user_delivery_time_1i")["name"] == "user[delivery_time(1i)]"

    def test_prompt_for_discarded_unit_is_rejected(self, form):
        with pytest.raises(InvalidPromptUnitError):
            form.input_field(
                "born_at", as_="date", options={"discard_day": True, "prompt": {"day": "dia"}}
            )

    def test_date_options(self, input_for):
        soup = input_for(
            "born_at",
            "date",
            options={"disabled": True, "prompt": {"year": "ano", "month": "mês", "day": "dia"}},
        )
        assert len(soup.select("select.date[disabled=disabled]")) == 3
        year_prompt = soup.select_one("select#user_born_at_1i option")
        assert year_prompt.get_text() == "ano"
        assert year_prompt["value"] == ""
        assert soup.select_one("select#user_born_at_2i option").get_text() == "mês"
        assert soup.select_one("select#user_born_at_3i option").get_text() == "dia"

    def test_date_selects_current_value(self, input_for):
        soup = input_for("born_at", "date")
        assert soup.select_one("#user_born_at_1i option[selected]")["value"] == "2009"
        assert soup.select_one("#user_born_at_2i option[selected]").get_text() == "June"
        assert soup.select_one("#user_born_at_3i option[selected]")["value"] == "1"

        years = [o["value"] for o in soup.select("#user_born_at_1i option")]
        assert years[0] == "2004"
        assert years[-1] == "2014"

    def test_time_select(self, input_for):
        soup = input_for("delivery_time", "time")
        for i in (1, 2, 3):
            assert soup.select_one(f"input[type=hidden]#user_delivery_time_{i}i") is not None
        assert soup.select_one("select.time#user_delivery_time_4i") is not None
        assert soup.select_one("select.time#user_delivery_time_5i") is not None

        assert soup.select_one("#user_delivery_time_4i option[selected]")["value"] == "09"
        assert soup.select_one("#user_delivery_time_5i option[selected]")["value"] == "30"

    def test_time_hidden_date_portion_carries_today(self, input_for):
        soup = input_for("delivery_time", "time")
        today = date.today()
        assert soup.select_one("#user_delivery_time_1i")["value"] == str(today.year)
        assert soup.select_one("#user_delivery_time_2i")["value"] == str(today.month)

    def test_time_options(self, input_for):
        soup = input_for(
            "delivery_time", "time", options={"disabled": True, "prompt": {"hour": "hora", "minute": "minuto"}}
        )
        assert len(soup.select("select.time[disabled=disabled]")) == 2
        texts = [o.get_text() for o in soup.select("select.time option")]
        assert "hora" in texts
        assert "minuto" in texts


class TestCollectionInputs:
    def test_boolean_radio_buttons_by_default(self, input_for):
        soup = input_for("active", "radio")
        assert soup.select_one("input[type=radio][value=true].radio#user_active_true") is not None
        assert soup.select_one("input[type=radio][value=false].radio#user_active_false") is not None

    def test_radio_checks_current_value(self, input_for):
        soup = input_for("active", "radio")
        assert soup.select_one("#user_active_false")["checked"] == "checked"
        assert not soup.select_one("#user_active_true").has_attr("checked")

    def test_radio_generates_internal_labels(self, input_for):
        soup = input_for("active", "radio")
        assert soup.select_one("label.radio[for=user_active_true]").get_text() == "Yes"
        assert soup.select_one("label.radio[for=user_active_false]").get_text() == "No"

    def test_radio_labels_follow_their_radio(self, input_for):
        soup = input_for("active", "radio")
        radio = soup.select_one("#user_active_true")
        assert radio.find_next_sibling().name == "label"

    def test_radio_uses_translations(self, translations, input_for):
        with translations.translations("en", {"simple_form": {"true": "Sim", "false": "Não"}}):
            soup = input_for("active", "radio")
        assert soup.select_one("label.radio[for=user_active_true]").get_text() == "Sim"
        assert soup.select_one("label.radio[for=user_active_false]").get_text() == "Não"

    def test_boolean_select_by_default(self, input_for):
        soup = input_for("active", "select")
        assert soup.select_one("select.select#user_active") is not None
        assert soup.select_one("select option[value=true]").get_text() == "Yes"
        assert soup.select_one("select option[value=false]").get_text() == "No"

    def test_select_uses_translations(self, translations, input_for):
        with translations.translations("en", {"simple_form": {"true": "Sim", "false": "Não"}}):
            soup = input_for("active", "select")
        assert soup.select_one("select option[value=true]").get_text() == "Sim"
        assert soup.select_one("select option[value=false]").get_text() == "Não"

    def test_select_collection_override(self, input_for):
        soup = input_for("name", "select", collection=["Jose", "Carlos"])
        assert soup.select_one("select.select#user_name") is not None
        assert [o.get_text() for o in soup.select("select option")] == ["Jose", "Carlos"]
        assert [o["value"] for o in soup.select("select option")] == ["Jose", "Carlos"]

    def test_select_marks_current_value(self, simple_form, user):
        from bs4 import BeautifulSoup

        user.name = "Carlos"
        markup = simple_form.form_for(user).input_field("name", as_="select", collection=["Jose", "Carlos"])
        selected = BeautifulSoup(markup, "html.parser").select("option[selected]")
        assert [o.get_text() for o in selected] == ["Carlos"]

    def test_select_include_blank(self, input_for):
        options = input_for("name", "select", collection=["Jose"], include_blank=True).select("option")
        assert options[0]["value"] == ""
        assert options[0].get_text() == ""
        assert options[1].get_text() == "Jose"

    def test_radio_collection_override(self, input_for):
        soup = input_for("name", "radio", collection=["Jose", "Carlos"])
        assert soup.select_one("input[type=radio][value=Jose]#user_name_jose") is not None
        assert soup.select_one("input[type=radio][value=Carlos]#user_name_carlos") is not None
        assert [l.get_text() for l in soup.select("label.radio")] == ["Jose", "Carlos"]

    def test_collection_of_label_value_pairs(self, input_for):
        soup = input_for("name", "radio", collection=[["Jose", "jose"], ["Carlos", "carlos"]])
        assert soup.select_one("input[type=radio][value=jose]") is not None
        assert soup.select_one("input[type=radio][value=carlos]") is not None
        assert [l.get_text() for l in soup.select("label.radio")] == ["Jose", "Carlos"]

    def test_label_and_value_methods(self, input_for):
        soup = input_for(
            "name", "radio", collection=["Jose", "Carlos"], label_method="upper", value_method="lower"
        )
        assert soup.select_one("input[type=radio][value=jose]") is not None
        assert soup.select_one("input[type=radio][value=carlos]") is not None
        assert [l.get_text() for l in soup.select("label.radio")] == ["JOSE", "CARLOS"]

    def test_collection_of_objects(self, input_for, companies):
        soup = input_for("name", "select", collection=companies, label_method="display_name", value_method="id")
        options = soup.select("option")
        assert [o["value"] for o in options] == ["1", "2"]
        assert [o.get_text() for o in options] == ["Acme Inc.", "Globex Inc."]

    def test_radio_shares_html_options(self, input_for):
        soup = input_for("active", "radio", html={"disabled": True})
        radios = soup.select("input[type=radio]")
        assert len(radios) == 2
        assert all(r["disabled"] == "disabled" for r in radios)
        assert all(r["name"] == "user[active]" for r in radios)


class TestErrors:
    def test_unknown_type(self, form):
        with pytest.raises(UnknownTypeError) as exc_info:
            form.input_field("name", as_="color")
        assert exc_info.value.input_type == "color"

    def test_collection_not_iterable(self, form):
        with pytest.raises(InvalidCollectionError):
            form.input_field("name", as_="select", collection=42)

    def test_missing_accessor(self, form):
        with pytest.raises(InvalidAccessorError) as exc_info:
            form.input_field("name", as_="radio", collection=["Jose"], label_method="nickname")
        assert exc_info.value.element == "Jose"

    def test_unknown_option_key(self, form):
        with pytest.raises(ValidationError):
            form.input_field("name", as_="string", colection=["typo"])

    def test_collection_ignored_by_simple_fields(self, input_for):
        soup = input_for("name", "string", collection=["Jose"])
        assert len(soup.select("input")) == 1


class TestCustomWidgets:
    def test_registered_type_is_dispatched(self, simple_form, form):
        from bs4 import BeautifulSoup

        simple_form.register_widget("email", SimpleField("email"))
        field = BeautifulSoup(form.input_field("name", as_="email"), "html.parser").select_one("input")
        assert field["type"] == "email"
        assert field["class"] == ["email", "required"]
        assert field["id"] == "user_name"

    def test_registering_non_strategy_fails(self, simple_form):
        with pytest.raises(TypeError):
            simple_form.register_widget("email", "email")
