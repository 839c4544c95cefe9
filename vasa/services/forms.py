# File: vasa/services/forms.py
"""
Helpers shared by the page services for turning form payloads into records.
"""

import dataclasses
from typing import Any, Dict, Iterable, Mapping, Union

from vasa.core.exceptions import ValidationFailed

FormData = Union[Mapping[str, Any], Any]

# Field names as the page forms send them
FIELD_ALIASES = {
    'dueDate': 'due_date',
    'isPaid': 'is_paid',
}


def normalize_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Rename form-style keys to model field names; the model name wins if both are sent."""
    form = {}
    for key, value in data.items():
        name = FIELD_ALIASES.get(key, key)
        if name != key and name in data:
            continue
        form[name] = value
    return form


def as_form(data: FormData) -> Dict[str, Any]:
    """Accept a dict-like payload or a model instance and return a plain dict."""
    if isinstance(data, Mapping):
        return normalize_keys(data)
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return {f.name: getattr(data, f.name) for f in dataclasses.fields(data)}
    raise TypeError(f"Unsupported form payload: {type(data).__name__}")


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_fields(form: Mapping[str, Any], fields: Iterable[str], record_type: str) -> None:
    """
    Refuse a save when any required field is missing or blank.
    
    Raises:
        ValidationFailed: Listing every missing field, in the order given
    """
    missing = [name for name in fields if is_blank(form.get(name))]
    if missing:
        raise ValidationFailed(missing, record_type)
