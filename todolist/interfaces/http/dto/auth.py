from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from todolist.domain.users.password_policy import MIN_PASSWORD_LENGTH

# argon2 accepts any length; this only bounds the work a single request can cause
MAX_PASSWORD_LENGTH = 1024


class LoginRequestDTO(BaseModel):
    invalid_detail: ClassVar[str] = "Username and password must be non-empty strings"

    username: StrictStr = Field(min_length=1, max_length=64)
    password: StrictStr = Field(min_length=1, max_length=MAX_PASSWORD_LENGTH)


class ChangePasswordRequestDTO(BaseModel):
    """Body of ``POST /change-password``.

    Absent or null fields decode to ``""`` so the use case reports them with
    its own message; values that are not strings fail decoding.
    """

    invalid_detail: ClassVar[str] = (
        "Current password and new password must be strings of at most "
        f"{MAX_PASSWORD_LENGTH} characters"
    )

    current_password: StrictStr = Field("", alias="currentPassword", max_length=MAX_PASSWORD_LENGTH)
    new_password: StrictStr = Field("", alias="newPassword", max_length=MAX_PASSWORD_LENGTH)

    model_config = ConfigDict(validate_by_name=True, extra="ignore")

    @field_validator("current_password", "new_password", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class PageDTO(BaseModel):
    title: str
    description: str | None = None


class ChangePasswordPageDTO(PageDTO):
    title: str = "Change Password"
    description: str | None = "Enter your current password and choose a new one."
    password_min_length: int = MIN_PASSWORD_LENGTH


class UserDTO(BaseModel):
    id: int
    username: str
