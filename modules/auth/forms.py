"""Login form validation."""

import re
from typing import Mapping

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from errors import ValidationError
from modules.nominations.schemas import clean_form, collect_errors

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

REQUIRED_MESSAGES = {
    "email": "Email is required",
    "password": "Password is required",
}


class LoginCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: str
    password: str

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        if not EMAIL_RE.match(value):
            raise PydanticCustomError("email", "Incorrect mail format")
        return value.lower()


def validate_login(form: Mapping) -> LoginCredentials:
    data = clean_form(form, ("email", "password"))
    try:
        return LoginCredentials.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(collect_errors(exc, REQUIRED_MESSAGES)) from None
