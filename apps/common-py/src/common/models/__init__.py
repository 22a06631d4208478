"""Common models package."""

from common.models.page import Page, PageInfo, PaginationHeader
from common.models.patch import PatchOperation
from common.models.user import CreateUserDto, UpdateUserDto, User, UserDto

__all__ = [
    "CreateUserDto",
    "Page",
    "PageInfo",
    "PaginationHeader",
    "PatchOperation",
    "UpdateUserDto",
    "User",
    "UserDto",
]
