"""Face registry, inheritance resolver and per-model face generation."""
from .core import (
    ATTRIBUTES,
    COLOR_ATTRIBUTES,
    DEFAULT_FACE,
    Color,
    Face,
    FaceRegistry,
    check_attribute,
    load_builtin_faces,
)
from .dump import render_dot
from .errors import (
    FaceError,
    IncompleteRootError,
    InheritanceCycleError,
    NoValueError,
    RootConflictError,
    UndefinedParentError,
    UnknownAttributeError,
    UnknownStyleError,
)
from .generation import RESERVED_SLUGS, Generated, ModelFaces, Retriever, define_from_retrievers
from .messages import MessageFilters, MessageInfo, suitable_face
from .resolver import FaceResolver, FaceSource, UserOverrideStore, config_key

__all__ = [
    "ATTRIBUTES",
    "COLOR_ATTRIBUTES",
    "DEFAULT_FACE",
    "Color",
    "Face",
    "FaceRegistry",
    "check_attribute",
    "load_builtin_faces",
    "render_dot",
    "FaceError",
    "IncompleteRootError",
    "InheritanceCycleError",
    "NoValueError",
    "RootConflictError",
    "UndefinedParentError",
    "UnknownAttributeError",
    "UnknownStyleError",
    "Generated",
    "ModelFaces",
    "RESERVED_SLUGS",
    "Retriever",
    "define_from_retrievers",
    "MessageFilters",
    "MessageInfo",
    "suitable_face",
    "FaceResolver",
    "FaceSource",
    "UserOverrideStore",
    "config_key",
]
