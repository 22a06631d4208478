"""Declarative field validation for user transfer objects.

Rules are plain predicates paired with a message template. A rule table maps
a model attribute to the rules it must satisfy; :func:`validate` evaluates a
table against a model and collects every failure, keyed by the field's wire
name (``firstName`` rather than ``first_name``).
"""

import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

from pydantic import BaseModel

from common.exceptions import ValidationFailedError

LOGIN_PATTERN = re.compile(r"^[A-Za-z0-9].*")


@dataclass(frozen=True)
class FieldRule:
    """A predicate over a field value and the message used when it fails."""

    name: str
    check: Callable[[str | None], bool]
    message: str

    def describe(self, field_name: str) -> str:
        return self.message.format(field=field_name)


def _is_present(value: str | None) -> bool:
    return value is not None and bool(value.strip())


def required() -> FieldRule:
    return FieldRule(name="required", check=_is_present, message="The {field} field is required.")


def pattern(regex: re.Pattern[str], message: str) -> FieldRule:
    """Rule that the value matches ``regex`` from its first character.

    Missing or blank values pass; pair with :func:`required` to reject them.
    """

    def check(value: str | None) -> bool:
        if not _is_present(value):
            return True
        return regex.match(value) is not None

    return FieldRule(name="pattern", check=check, message=message)


LOGIN_RULE = pattern(LOGIN_PATTERN, "The {field} field must start with a letter or digit.")

RuleTable = Mapping[str, Sequence[FieldRule]]

CREATE_USER_RULES: RuleTable = {
    "login": (required(), LOGIN_RULE),
}

UPDATE_USER_RULES: RuleTable = {
    "login": (required(), LOGIN_RULE),
    "first_name": (required(),),
    "last_name": (required(),),
}


def _wire_name(model: BaseModel, attribute: str) -> str:
    field = type(model).model_fields.get(attribute)
    if field is not None and field.alias:
        return field.alias
    return attribute


def collect_errors(model: BaseModel, rules: RuleTable) -> dict[str, list[str]]:
    """Evaluate every rule in ``rules`` against ``model``.

    Returns:
        Mapping of wire field name to failure messages, empty when valid
    """
    errors: dict[str, list[str]] = {}
    for attribute, field_rules in rules.items():
        value = getattr(model, attribute)
        field_name = _wire_name(model, attribute)
        for rule in field_rules:
            if not rule.check(value):
                errors.setdefault(field_name, []).append(rule.describe(field_name))
    return errors


def validate(model: BaseModel, rules: RuleTable) -> None:
    """Raise :class:`ValidationFailedError` if any rule in ``rules`` fails."""
    errors = collect_errors(model, rules)
    if errors:
        raise ValidationFailedError(errors)
