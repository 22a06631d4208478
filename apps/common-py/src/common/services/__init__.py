"""Common services package."""

from common.services.pagination import calculate_page, normalize_page_params
from common.services.patch_engine import apply_patch
from common.services.user_store import InMemoryUserStore, UpsertOutcome, UpsertResult, UserStore
from common.services.validation import CREATE_USER_RULES, UPDATE_USER_RULES, collect_errors, validate

__all__ = [
    "CREATE_USER_RULES",
    "UPDATE_USER_RULES",
    "InMemoryUserStore",
    "UpsertOutcome",
    "UpsertResult",
    "UserStore",
    "apply_patch",
    "calculate_page",
    "collect_errors",
    "normalize_page_params",
    "validate",
]
