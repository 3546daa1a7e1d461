from .collection import (
    Accessor,
    AttributeAccessor,
    CallableAccessor,
    IdentityAccessor,
    accessor_for,
    normalize_collection,
)
from .datetime_select import CompositeDateTimeBuilder, SubControl
from .field import InputField
from .input import InputDispatcher
from .widgets import (
    CheckBoxField,
    CollectionField,
    CompositeField,
    RadioCollectionField,
    SelectCollectionField,
    SimpleField,
    TextAreaField,
    WidgetRegistry,
    WidgetStrategy,
)

__all__ = [
    "Accessor",
    "AttributeAccessor",
    "CallableAccessor",
    "IdentityAccessor",
    "accessor_for",
    "normalize_collection",
    "CompositeDateTimeBuilder",
    "SubControl",
    "InputField",
    "InputDispatcher",
    "WidgetRegistry",
    "WidgetStrategy",
    "SimpleField",
    "TextAreaField",
    "CheckBoxField",
    "CollectionField",
    "RadioCollectionField",
    "SelectCollectionField",
    "CompositeField",
]
