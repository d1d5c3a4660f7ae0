"""Attribute resolution along the face inheritance chain."""
from __future__ import annotations

from typing import Any, Dict, Literal, Optional, Protocol, Tuple

import structlog
from pydantic import BaseModel

from .core import ATTRIBUTES, Face, FaceRegistry, check_attribute
from .errors import NoValueError, UnknownStyleError

logger = structlog.get_logger("faces")

Origin = Literal["user", "default", "none"]


class UserOverrideStore(Protocol):
    """Read side of the user configuration; the resolver never writes to it."""

    def get(self, key: str) -> Optional[Any]: ...


class FaceSource(BaseModel):
    slug: Optional[str] = None
    origin: Origin = "none"


def config_key(slug: str, attribute: str) -> str:
    """User configuration key holding the override for one face attribute."""
    return f"style_{slug}_{attribute}"


class FaceResolver:
    """Answers "what is the effective <attribute> of <face>".

    The walk starts at the queried face. At each node the user override wins,
    then the node's own default, then the walk moves to the parent.

    In strict mode an unknown slug raises ``UnknownStyleError``; otherwise the
    walk restarts at the root face so a renamed category cannot break rendering.
    """

    def __init__(self, registry: FaceRegistry, overrides: UserOverrideStore, strict: bool = True):
        self.registry = registry
        self.overrides = overrides
        self.strict = strict

    def resolve(self, slug: str, attribute: str) -> Any:
        value, source = self._walk(slug, attribute)
        if source.origin == "none":
            raise NoValueError(slug, attribute)
        return value

    def resolve_source(self, slug: str, attribute: str) -> FaceSource:
        _, source = self._walk(slug, attribute)
        return source

    def resolve_all(self, slug: str) -> Dict[str, Any]:
        return {attribute: self.resolve(slug, attribute) for attribute in ATTRIBUTES}

    def sources(self, slug: str) -> Dict[str, FaceSource]:
        return {attribute: self.resolve_source(slug, attribute) for attribute in ATTRIBUTES}

    def _start(self, slug: str) -> Face:
        face = self.registry.get(slug)
        if face is not None:
            return face
        root = self.registry.root
        if self.strict or root is None:
            raise UnknownStyleError(slug)
        logger.warning("face_fallback_to_root", slug=slug, root=root.slug)
        return root

    def _walk(self, slug: str, attribute: str) -> Tuple[Any, FaceSource]:
        check_attribute(attribute)
        with self.registry.lock:
            start = self._start(slug)
            for face in self.registry.chain(start.slug):
                override = self.overrides.get(config_key(face.slug, attribute))
                if override is not None:
                    return override, FaceSource(slug=face.slug, origin="user")
                value = face.default_for(attribute)
                if value is not None:
                    return value, FaceSource(slug=face.slug, origin="default")
        return None, FaceSource()


__all__ = ["FaceResolver", "FaceSource", "UserOverrideStore", "config_key"]
