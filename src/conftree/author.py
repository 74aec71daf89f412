"""Author of a change: a "Name <email>" identity.

Author is lenient: the email is never validated, and equality is an exact
match on both name and email. Two entries for the same person that differ
only in the spelling of the name are different authors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from conftree.errors import ConfigValidationError

EXPECTED_FORMAT = "name <mail@example.com>"

# Space and ASCII control characters; Unicode spaces such as NBSP are kept
_TRIM_CHARS = "".join(chr(c) for c in range(0x21))


@dataclass(frozen=True)
class Author:
    """The contributor of a change (an individual or a team)."""

    name: str
    email: str

    def __post_init__(self) -> None:
        if self.name is None:
            raise TypeError("Author name must not be None")
        if self.email is None:
            raise TypeError("Author email must not be None")

    def __str__(self) -> str:
        # Standard "Name <email>" form used by most version control systems
        return f"{self.name} <{self.email}>"

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "email": self.email}

    @classmethod
    def parse(cls, author_str: str) -> "Author":
        """
        Parse an author from a string in the format "name <foo@bar.com>".

        The name is everything before the first '<' and the email everything
        up to the next '>', which must end the string. Both are trimmed.
        """
        if not isinstance(author_str, str):
            raise TypeError(f"Expected a string, got {type(author_str).__name__}")
        name, sep, rest = author_str.partition("<")
        email, close, trailing = rest.partition(">")
        if not name or not sep or not email or not close or trailing:
            raise ConfigValidationError(
                f"Author '{author_str}' doesn't match the expected format '{EXPECTED_FORMAT}'"
            )
        return cls(name.strip(_TRIM_CHARS), email.strip(_TRIM_CHARS))
