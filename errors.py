"""Domain errors raised by the nomination lifecycle.

Routes never build error responses for these by hand; ``create_app``
registers handlers that turn them into 404 / 429 pages.
"""

from typing import Dict, List


class NominationError(Exception):
    """Base class for lifecycle failures."""


class ValidationError(NominationError):
    """One or more submitted fields broke the nomination rules."""

    def __init__(self, errors: Dict[str, List[str]], form_errors: List[str] | None = None) -> None:
        self.errors = errors
        self.form_errors = form_errors or []
        super().__init__(", ".join(sorted(errors)) or "invalid submission")


class RecordNotFound(NominationError):
    """The targeted record is not (or no longer) in the expected bucket."""

    def __init__(self, bucket: str, record_id: int) -> None:
        self.bucket = bucket
        self.record_id = record_id
        label = "Nominee" if bucket == "nominees" else "Dev"
        super().__init__(f"{label} with id {record_id} was not found")


class RateLimited(NominationError):
    """The action was attempted again inside its rate-limit window."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__("Exceeded the rate limit")


class DependencyFailure(NominationError):
    """An outbound collaborator (the e-mail provider) failed."""
