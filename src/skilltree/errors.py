"""
skilltree.errors - Exception hierarchy.

Every failure raised by the library derives from SkillTreeError so callers
(the CLI in particular) can report it without caring about the specific kind.
"""

from __future__ import annotations


class SkillTreeError(Exception):
    """Base class for all skill tree errors."""


class IoError(SkillTreeError):
    """Reading the source document or writing output failed."""

    def __init__(self, message: str, path: object = None) -> None:
        super().__init__(message)
        self.path = path


class ParseError(SkillTreeError, ValueError):
    """The document is not valid TOML or does not have the expected shape."""

    def __init__(self, message: str, location: str | None = None) -> None:
        if location:
            message = f"{location}: {message}"
        super().__init__(message)
        self.location = location


class ValidationError(SkillTreeError, ValueError):
    """The tree is well-formed but violates a structural rule."""


class InvalidReferenceError(SkillTreeError, KeyError):
    """A requirement token does not name an existing entity or port."""

    def __init__(self, token: str, reason: str | None = None) -> None:
        super().__init__(token)
        self.token = token
        self.reason = reason

    def __str__(self) -> str:
        if self.reason:
            return f"invalid reference {self.token!r}: {self.reason}"
        return f"invalid reference {self.token!r}"


class MissingPortError(SkillTreeError, ValueError):
    """An item with requirements has no port for edges to attach to."""

    def __init__(self, label: str) -> None:
        super().__init__(f"missing port for: {label}")
        self.label = label


class EncodingError(SkillTreeError, ValueError):
    """Rendered output could not be materialized as UTF-8 text."""
