"""Per-category faces derived from the host's retriever list."""
from __future__ import annotations

import threading
from typing import Dict, Iterable, List

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .core import FaceRegistry

logger = structlog.get_logger("faces")

# Path segments under /api/faces that a face slug must not shadow
RESERVED_SLUGS = frozenset({"settings", "dump", "retrievers", "message"})


class Retriever(BaseModel):
    """A content category (post type) announced by the host."""

    model_config = ConfigDict(populate_by_name=True)

    slug: str
    name: str
    is_reply_capable: bool = Field(False, alias="reply")
    has_self_authored_variant: bool = Field(False, alias="myself")
    timeline: bool = True

    @field_validator("slug")
    @classmethod
    def _slug_not_reserved(cls, value: str) -> str:
        if value in RESERVED_SLUGS:
            raise ValueError(f"retriever slug {value!r} is reserved")
        return value


class Generated(BaseModel):
    """Outcome of one generation run."""

    # Model slug => generic face slug => concrete face slug
    models: Dict[str, Dict[str, str]] = Field(default_factory=dict)
    # Faces this run defined, in definition order
    created: List[str] = Field(default_factory=list)


# generic face -> (suffix, display name template)
VARIANTS = {
    "basic_message": ("", "{name}"),
    "left_header": ("_left_header", "{name} header (left)"),
    "right_header": ("_right_header", "{name} header (right)"),
    "mention": ("_mention", "{name} addressed to me"),
    "myself": ("_myself", "My {name}"),
}


class ModelFaces:
    """Which concrete face each model uses in place of a generic one.

    Model slug => generic face slug => concrete face slug
    """

    def __init__(self):
        self._table: Dict[str, Dict[str, str]] = {}
        self._lock = threading.Lock()

    def update(self, mapping: Dict[str, Dict[str, str]]) -> None:
        with self._lock:
            for model, faces in mapping.items():
                self._table.setdefault(model, {}).update(faces)

    def lookup(self, model: str, face: str) -> str | None:
        with self._lock:
            return self._table.get(model, {}).get(face)

    def as_dict(self) -> Dict[str, Dict[str, str]]:
        with self._lock:
            return {model: dict(faces) for model, faces in self._table.items()}

    def __contains__(self, model: object) -> bool:
        with self._lock:
            return model in self._table


def _variants_for(retriever: Retriever) -> List[str]:
    variants = ["basic_message", "left_header", "right_header"]
    if retriever.is_reply_capable:
        variants.append("mention")
    if retriever.has_self_authored_variant:
        variants.append("myself")
    return variants


def define_from_retrievers(registry: FaceRegistry, retrievers: Iterable[Retriever]) -> Generated:
    """Define the per-model faces for every timeline retriever.

    Faces that already exist are left as they are, so running this again with
    the same or a longer retriever list never resets anything. ``models``
    covers every face the retrievers call for, created now or earlier;
    ``created`` only the ones this call defined.
    """
    result = Generated()

    for retriever in retrievers:
        if not retriever.timeline:
            continue
        faces: Dict[str, str] = {}
        for generic in _variants_for(retriever):
            suffix, name_template = VARIANTS[generic]
            slug = f"{retriever.slug}{suffix}"
            with registry.lock:
                if slug not in registry:
                    registry.define(slug, name=name_template.format(name=retriever.name), inherit=generic)
                    result.created.append(slug)
            faces[generic] = slug
        result.models[retriever.slug] = faces

    logger.info("faces_generated", models=sorted(result.models), created=result.created)
    return result


__all__ = ["Generated", "ModelFaces", "RESERVED_SLUGS", "Retriever", "VARIANTS", "define_from_retrievers"]
