"""Face records and the registry that holds the inheritance forest."""
from __future__ import annotations

from importlib import import_module
import pkgutil
import threading
from typing import Any, Dict, Iterator, List, Optional, Tuple

import structlog
from pydantic import BaseModel, ConfigDict, field_validator

from .errors import (
    IncompleteRootError,
    InheritanceCycleError,
    RootConflictError,
    UndefinedParentError,
    UnknownAttributeError,
)

logger = structlog.get_logger("faces")

ATTRIBUTES: Tuple[str, ...] = ("font", "foreground", "background")
COLOR_ATTRIBUTES: Tuple[str, ...] = ("foreground", "background")
DEFAULT_FACE = "default"
CHANNEL_MAX = 0xFFFF

# 16-bit per channel, as GTK colors are stored
Color = Tuple[int, int, int]


def check_attribute(attribute: str) -> str:
    if attribute not in ATTRIBUTES:
        raise UnknownAttributeError(attribute)
    return attribute


class Face(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    name: str
    inherit: Optional[str] = None
    font: Optional[str] = None
    foreground: Optional[Color] = None
    background: Optional[Color] = None

    @field_validator("foreground", "background")
    @classmethod
    def _channels_in_range(cls, value: Optional[Color]) -> Optional[Color]:
        if value is not None and any(c < 0 or c > CHANNEL_MAX for c in value):
            raise ValueError(f"color channels must be within 0..{CHANNEL_MAX}: {value}")
        return value

    def default_for(self, attribute: str) -> Any:
        """The value set on this face itself, ignoring ancestors and user config."""
        return getattr(self, check_attribute(attribute))

    def __str__(self) -> str:
        return f"Face({self.slug})"


class FaceRegistry:
    """Named faces keyed by slug, kept in definition order.

    Constructed once at process start and mutated only through ``define``.
    A face can only be defined once its parent is registered, so every chain
    ends at the single root face.
    """

    def __init__(self):
        self._faces: Dict[str, Face] = {}
        self._root_slug: Optional[str] = None
        # Held by define and by every chain walk in the resolver
        self.lock = threading.RLock()

    def define(
        self,
        slug: str,
        name: Optional[str] = None,
        inherit: Optional[str] = DEFAULT_FACE,
        **attributes: Any,
    ) -> Face:
        """Register a face, replacing any face already registered under ``slug``.

        Args:
            slug: Face identifier
            name: Display name (defaults to the slug)
            inherit: Slug of the parent face, None only for the root
            **attributes: Defaults for any of ``font``, ``foreground``, ``background``
        """
        for attribute in attributes:
            check_attribute(attribute)

        with self.lock:
            if inherit is None:
                if self._root_slug is not None and self._root_slug != slug:
                    raise RootConflictError(slug, self._root_slug)
                missing = [a for a in ATTRIBUTES if attributes.get(a) is None]
                if missing:
                    raise IncompleteRootError(slug, missing)
            else:
                if inherit not in self._faces:
                    raise UndefinedParentError(slug, inherit)
                # Every chain ends at the root, so re-parenting the root lands here too
                if slug in self._lineage(inherit):
                    raise InheritanceCycleError(slug, inherit)

            face = Face(slug=slug, name=name or slug, inherit=inherit, **attributes)
            self._faces[slug] = face
            if inherit is None:
                self._root_slug = slug

        logger.debug("face_defined", slug=slug, inherit=inherit, attributes=sorted(attributes))
        return face

    def get(self, slug: str) -> Optional[Face]:
        return self._faces.get(slug)

    def all(self) -> List[Face]:
        with self.lock:
            return list(self._faces.values())

    @property
    def root(self) -> Optional[Face]:
        if self._root_slug is None:
            return None
        return self._faces.get(self._root_slug)

    def children(self, slug: str) -> List[Face]:
        with self.lock:
            return [f for f in self._faces.values() if f.inherit == slug]

    def parent(self, face: Face) -> Optional[Face]:
        if face.inherit is None:
            return None
        return self._faces.get(face.inherit)

    def chain(self, slug: str) -> Iterator[Face]:
        """Yield the face registered under ``slug`` followed by its ancestors."""
        current = self._faces.get(slug)
        while current is not None:
            yield current
            current = self.parent(current)

    def _lineage(self, slug: str) -> List[str]:
        return [f.slug for f in self.chain(slug)]

    def __contains__(self, slug: object) -> bool:
        return slug in self._faces

    def __len__(self) -> int:
        return len(self._faces)

    def __iter__(self) -> Iterator[Face]:
        return iter(self.all())


def load_builtin_faces(registry: FaceRegistry) -> FaceRegistry:
    """Register every face shipped under ``faces.definitions``.

    Definition modules expose ``register(registry)`` and are loaded in module
    name order; ``base`` holds the root so it must sort first.
    """
    package_name = f"{__package__}.definitions"
    package = import_module(package_name)

    names = sorted(m.name for m in pkgutil.iter_modules(package.__path__))  # type: ignore[attr-defined]
    for name in names:
        if name.startswith("_"):
            continue
        module = import_module(f"{package_name}.{name}")
        module.register(registry)

    logger.info("builtin_faces_loaded", count=len(registry), modules=names)
    return registry


__all__ = [
    "ATTRIBUTES",
    "COLOR_ATTRIBUTES",
    "DEFAULT_FACE",
    "CHANNEL_MAX",
    "Color",
    "Face",
    "FaceRegistry",
    "check_attribute",
    "load_builtin_faces",
]
