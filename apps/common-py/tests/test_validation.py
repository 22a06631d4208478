"""Tests for the field rule tables."""

import pytest

from common.exceptions import ValidationFailedError
from common.models.user import CreateUserDto, UpdateUserDto
from common.services.validation import (
    CREATE_USER_RULES,
    UPDATE_USER_RULES,
    collect_errors,
    validate,
)


@pytest.mark.unit
@pytest.mark.parametrize("login", ["john", "John_Doe", "0day", "a", "Z-9!"])
def test_valid_logins_pass_create_rules(login: str) -> None:
    """Test logins starting with a letter or digit are accepted."""
    assert collect_errors(CreateUserDto(login=login), CREATE_USER_RULES) == {}


@pytest.mark.unit
@pytest.mark.parametrize("login", ["_john", "-john", " john", "!", "@home"])
def test_symbol_leading_login_fails_pattern(login: str) -> None:
    """Test logins starting with a symbol or space are rejected."""
    errors = collect_errors(CreateUserDto(login=login), CREATE_USER_RULES)

    assert list(errors) == ["login"]
    assert errors["login"] == ["The login field must start with a letter or digit."]


@pytest.mark.unit
@pytest.mark.parametrize("login", [None, "", "   "])
def test_missing_login_reports_required_only(login: str | None) -> None:
    """Test a blank login is reported once, as required."""
    errors = collect_errors(CreateUserDto(login=login), CREATE_USER_RULES)

    assert errors == {"login": ["The login field is required."]}


@pytest.mark.unit
def test_create_rules_do_not_require_names() -> None:
    """Test names are optional when creating."""
    assert collect_errors(CreateUserDto(login="john"), CREATE_USER_RULES) == {}


@pytest.mark.unit
def test_update_rules_accumulate_all_failures() -> None:
    """Test every failing field is reported together under its wire name."""
    dto = UpdateUserDto(login="_bad", first_name="", last_name=None)

    errors = collect_errors(dto, UPDATE_USER_RULES)

    assert set(errors) == {"login", "firstName", "lastName"}
    assert errors["firstName"] == ["The firstName field is required."]
    assert errors["lastName"] == ["The lastName field is required."]


@pytest.mark.unit
def test_validate_raises_with_errors() -> None:
    """Test validate raises carrying the collected errors."""
    with pytest.raises(ValidationFailedError) as exc_info:
        validate(UpdateUserDto(login="john", first_name="John"), UPDATE_USER_RULES)

    assert exc_info.value.errors == {"lastName": ["The lastName field is required."]}


@pytest.mark.unit
def test_validate_passes_silently() -> None:
    """Test a fully valid update body raises nothing."""
    validate(UpdateUserDto(login="john", first_name="John", last_name="Doe"), UPDATE_USER_RULES)
