"""User entity and transfer models for the Users API."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """Stored user entity.

    Two users are equal when their ids are equal; the remaining fields are
    payload and take no part in identity.
    """

    id: UUID | None = Field(None, description="Unique identifier, assigned by the store when absent")
    login: str = Field(..., description="Login, starts with a letter or digit")
    first_name: str = Field("", alias="firstName", description="First name")
    last_name: str = Field("", alias="lastName", description="Last name")

    model_config = ConfigDict(populate_by_name=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


class UserDto(BaseModel):
    """User representation returned to clients."""

    id: UUID = Field(..., description="Unique identifier")
    login: str = Field(..., description="Login")
    first_name: str = Field(..., alias="firstName", description="First name")
    last_name: str = Field(..., alias="lastName", description="Last name")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_user(cls, user: User) -> "UserDto":
        return cls(id=user.id, login=user.login, first_name=user.first_name, last_name=user.last_name)


class CreateUserDto(BaseModel):
    """Body of a create request.

    Fields are optional at parse time so that missing or empty values are
    reported by the validation rules rather than by the deserializer.
    """

    login: str | None = Field(None, description="Login, starts with a letter or digit")
    first_name: str | None = Field(None, alias="firstName", description="First name")
    last_name: str | None = Field(None, alias="lastName", description="Last name")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "login": "johndoe",
                "firstName": "John",
                "lastName": "Doe",
            }
        },
    )


class UpdateUserDto(BaseModel):
    """Body of a full update and the working copy of a partial update."""

    login: str | None = Field(None, description="Login, starts with a letter or digit")
    first_name: str | None = Field(None, alias="firstName", description="First name")
    last_name: str | None = Field(None, alias="lastName", description="Last name")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "login": "johndoe",
                "firstName": "John",
                "lastName": "Doe",
            }
        },
    )

    @classmethod
    def from_user(cls, user: User) -> "UpdateUserDto":
        return cls(login=user.login, first_name=user.first_name, last_name=user.last_name)
