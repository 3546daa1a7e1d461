from datetime import date, datetime, time
from typing import Any, Callable, Dict, List, Optional

import pytest
from bs4 import BeautifulSoup
from pydantic import BaseModel, Field

from simpleinput import SimpleForm, TranslationBackend
from simpleinput.form.builder import FormBuilder


class User(BaseModel):
    name: str = "New in Simple Form!"
    description: Optional[str] = "Hello!"
    age: Optional[int] = 19
    active: bool = False
    password: Optional[str] = "secret"
    born_at: Optional[date] = date(2009, 6, 1)
    created_at: Optional[datetime] = datetime(2009, 6, 1, 13, 45)
    delivery_time: Optional[time] = time(9, 30)
    errors: Dict[str, List[str]] = Field(default_factory=dict)


class Company:
    """Plain object used as a collection element."""

    def __init__(self, id: int, name: str) -> None:
        self.id = id
        self.name = name

    def display_name(self) -> str:
        return f"{self.name} Inc."


@pytest.fixture
def translations() -> TranslationBackend:
    return TranslationBackend()


@pytest.fixture
def simple_form(translations: TranslationBackend) -> SimpleForm:
    return SimpleForm(translations=translations)


@pytest.fixture
def user() -> User:
    return User()


@pytest.fixture
def form(simple_form: SimpleForm, user: User) -> FormBuilder:
    return simple_form.form_for(user)


@pytest.fixture
def input_for(form: FormBuilder) -> Callable[..., BeautifulSoup]:
    """Render a bare input for the test user and parse it."""

    def render(attribute: str, input_type: str, **options: Any) -> BeautifulSoup:
        return BeautifulSoup(form.input_field(attribute, as_=input_type, **options), "html.parser")

    return render


@pytest.fixture
def companies() -> List[Company]:
    return [Company(1, "Acme"), Company(2, "Globex")]
