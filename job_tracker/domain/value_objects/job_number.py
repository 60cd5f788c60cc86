"""
Job number value object.
"""

from dataclasses import dataclass
from typing import Sequence

from job_tracker.domain.exceptions.validation_error import (
    InvalidFieldValueError,
    RequiredFieldError,
)

DEFAULT_PREFIXES = ("ROPR", "DIGFI")


@dataclass(frozen=True)
class JobNumber:
    """Job number composed of a selectable prefix and a user-assigned number."""

    prefix: str
    number: str

    def __post_init__(self):
        if not self.number:
            raise RequiredFieldError("jobNumber")

    @property
    def value(self) -> str:
        return f"{self.prefix}{self.number}"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def compose(
        cls,
        raw: str,
        prefix: str,
        allowed_prefixes: Sequence[str] = DEFAULT_PREFIXES,
    ) -> "JobNumber":
        """
        Build a job number from user input.

        Input that already carries one of the allowed prefixes keeps it
        and the requested prefix is ignored.
        """
        raw = (raw or "").strip()
        if not raw:
            raise RequiredFieldError("jobNumber")

        prefix = (prefix or "").strip().upper()
        allowed = [p.upper() for p in allowed_prefixes]
        if prefix not in allowed:
            raise InvalidFieldValueError(
                "jobPrefix", f"must be one of: {', '.join(allowed)}"
            )

        upper = raw.upper()
        if upper in allowed:
            raise InvalidFieldValueError("jobNumber", "must include a number after the prefix")
        for known in sorted(allowed, key=len, reverse=True):
            if upper.startswith(known) and len(raw) > len(known):
                return cls(prefix=known, number=raw[len(known):])

        return cls(prefix=prefix, number=raw)
