"""Structured description of a single validation failure."""

from typing import Literal

from pydantic import BaseModel

ViolationKind = Literal["missing", "blank", "malformed", "reference", "duplicate"]


class Violation(BaseModel):
    """One rule a record broke."""

    field: str
    kind: ViolationKind
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


def violations_from_errors(errors: list[dict]) -> list[Violation]:
    """Convert pydantic error dicts into malformed-field violations."""
    return [
        Violation(
            field=str(error["loc"][0]) if error.get("loc") else "__root__",
            kind="malformed",
            message=error.get("msg", "Invalid value"),
        )
        for error in errors
    ]
