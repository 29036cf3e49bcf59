from __future__ import annotations


class MissingFieldError(ValueError):
    """Raised when a required field of a domain object is missing."""

    def __init__(self, owner: str, field_name: str) -> None:
        super().__init__(f"{owner}.{field_name} is required.")
        self.owner = owner
        self.field_name = field_name
