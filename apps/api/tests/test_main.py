"""Tests for application wiring in api.main."""

import importlib
import warnings

import pytest


@pytest.mark.unit
def test_app_module_uses_no_deprecated_status_names() -> None:
    """Test loading the app module emits no deprecation for status constants."""
    import api.main

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        importlib.reload(api.main)

    deprecated = [w for w in caught if issubclass(w.category, DeprecationWarning) and "422" in str(w.message)]
    assert deprecated == []
    assert api.main._STATUS_BY_ERROR[api.main.ValidationFailedError] == 422
