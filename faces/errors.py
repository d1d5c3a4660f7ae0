"""Exceptions raised by the face registry and resolver."""
from __future__ import annotations

from typing import Optional


class FaceError(Exception):
    """Base class for every face subsystem error."""


class UndefinedParentError(FaceError):
    def __init__(self, slug: str, inherit: str):
        self.slug = slug
        self.inherit = inherit
        super().__init__(f"Undefined inheritance parent {inherit!r} for face {slug!r}")


class RootConflictError(FaceError):
    def __init__(self, slug: str, root: str):
        self.slug = slug
        self.root = root
        super().__init__(f"Face {slug!r} has no parent but {root!r} is already the root")


class InheritanceCycleError(FaceError):
    def __init__(self, slug: str, inherit: str):
        self.slug = slug
        self.inherit = inherit
        super().__init__(f"Face {slug!r} cannot inherit {inherit!r}: {inherit!r} descends from it")


class UnknownStyleError(FaceError, KeyError):
    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Unknown face {slug!r}")

    def __str__(self) -> str:
        # KeyError quotes its argument otherwise
        return self.args[0]


class UnknownAttributeError(FaceError, ValueError):
    def __init__(self, attribute: str):
        self.attribute = attribute
        super().__init__(f"Unknown face attribute {attribute!r}")


class NoValueError(FaceError):
    def __init__(self, slug: str, attribute: Optional[str] = None):
        self.slug = slug
        self.attribute = attribute
        super().__init__(f"No value for {attribute!r} anywhere in the chain of {slug!r}")


class IncompleteRootError(NoValueError):
    def __init__(self, slug: str, missing: list[str]):
        self.missing = missing
        FaceError.__init__(self, f"Root face {slug!r} must set every attribute, missing: {', '.join(missing)}")
        self.slug = slug
        self.attribute = missing[0] if missing else None
