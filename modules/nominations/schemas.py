"""Validation rules for nomination forms and listing filters.

Form data arrives as strings.  Values are trimmed and blank values are
treated as missing before the pydantic models run, so a whitespace-only
field reports the "please provide ..." message rather than a length error.
All failing fields are reported together.
"""

from typing import Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from errors import ValidationError
from modules.nominations.models import EXPERTISE, PROVINCES

NOMINATION_FIELDS = ("name", "from", "expertise", "link", "reason")

REQUIRED_MESSAGES = {
    "name": "Please provide the nominee’s name",
    "from": "Please select a province where the nominee is from",
    "expertise": "Please select an area of expertise",
    "link": "Please provide a link to their work",
    "reason": "Please take a moment to explain why you are nominating this person",
}

NAME_MAX = 100
LINK_MAX = 200
REASON_MIN = 70
REASON_MAX = 300

_url_adapter = TypeAdapter(HttpUrl)


def clean_form(form: Mapping, fields) -> Dict[str, str]:
    """Trimmed copy of ``fields`` from ``form`` with blank values dropped."""
    data = {}
    for field in fields:
        value = form.get(field)
        if isinstance(value, str):
            value = value.strip()
        if value:
            data[field] = value
    return data


def collect_errors(exc: PydanticValidationError, required_messages: Mapping[str, str],
                   aliases: Mapping[str, str] | None = None) -> Dict[str, List[str]]:
    """Flatten a pydantic error into ``{field: [message, ...]}``."""
    aliases = aliases or {}
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__all__"
        field = aliases.get(field, field)
        if error["type"] == "missing":
            message = required_messages.get(field, "This field is required")
        else:
            message = error["msg"]
        errors.setdefault(field, []).append(message)
    return errors


class NominationPayload(BaseModel):
    """A nomination (or edit) that passed every rule."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, frozen=True)

    name: str
    province: str = Field(alias="from")
    expertise: str
    link: str
    reason: str

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("too_short", "Name should have at least 1 (one) character")
        if len(value) > NAME_MAX:
            raise PydanticCustomError("too_long", "Name should have at most 100 (hundred) characters")
        return value

    @field_validator("province")
    @classmethod
    def _check_province(cls, value: str) -> str:
        if value not in PROVINCES:
            raise PydanticCustomError("enum", "Please select one of the listed provinces")
        return value

    @field_validator("expertise")
    @classmethod
    def _check_expertise(cls, value: str) -> str:
        if value not in EXPERTISE:
            raise PydanticCustomError("enum", "Please select one of the listed areas of expertise")
        return value

    @field_validator("link")
    @classmethod
    def _check_link(cls, value: str) -> str:
        if len(value) > LINK_MAX:
            raise PydanticCustomError("too_long", "Link should have at most 200 (two hundred) characters")
        try:
            url = _url_adapter.validate_python(value)
        except PydanticValidationError:
            raise PydanticCustomError("url", "Invalid URL") from None
        if not url.host:
            raise PydanticCustomError("url", "Invalid URL")
        # keep what the user typed; HttpUrl would normalise it
        return value

    @field_validator("reason")
    @classmethod
    def _check_reason(cls, value: str) -> str:
        if len(value) < REASON_MIN:
            raise PydanticCustomError(
                "too_short", "Your explanation should have at least 70 (seventy) characters"
            )
        if len(value) > REASON_MAX:
            raise PydanticCustomError(
                "too_long", "Your explanation should have at most 300 (three hundred) characters"
            )
        return value

    def record_fields(self) -> dict:
        """Column values for :class:`~modules.nominations.models.Record`."""
        return {
            "name": self.name,
            "province": self.province,
            "expertise": self.expertise,
            "link": self.link,
            "reason": self.reason,
        }


def validate_nomination(form: Mapping) -> NominationPayload:
    """Return a clean payload or raise :class:`errors.ValidationError`."""
    data = clean_form(form, NOMINATION_FIELDS)
    try:
        return NominationPayload.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(
            collect_errors(exc, REQUIRED_MESSAGES, aliases={"province": "from"})
        ) from None


class ListingFilter(BaseModel):
    """Search box and expertise facets of a listing page."""

    model_config = ConfigDict(frozen=True)

    query: Optional[str] = None
    expertise: Tuple[str, ...] = ()

    @field_validator("query")
    @classmethod
    def _blank_query(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None

    @field_validator("expertise")
    @classmethod
    def _known_expertise(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        seen = []
        for item in value:
            if item not in EXPERTISE:
                raise PydanticCustomError(
                    "enum", "Unknown expertise '{value}'", {"value": item}
                )
            if item not in seen:
                seen.append(item)
        return tuple(seen)

    @property
    def active(self) -> bool:
        return bool(self.query or self.expertise)


def parse_listing_filter(args) -> ListingFilter:
    """Build a filter from query-string args (``query`` and repeated ``expertise``)."""
    data = {"query": args.get("query"), "expertise": tuple(args.getlist("expertise"))}
    try:
        return ListingFilter.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(collect_errors(exc, {})) from None
