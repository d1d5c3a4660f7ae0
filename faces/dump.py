"""Graphviz rendering of the face inheritance forest, for debugging."""
from __future__ import annotations

from io import StringIO

from .core import FaceRegistry


def _quote(slug: str) -> str:
    # Model slugs may carry characters dot IDs cannot
    return '"' + slug.replace("\\", "\\\\").replace('"', '\\"') + '"'


def render_dot(registry: FaceRegistry) -> str:
    io = StringIO()
    io.write("digraph {\n")
    io.write('  rankdir="RL"\n')
    for face in registry.all():
        if face.inherit is None:
            io.write(f"  {_quote(face.slug)};\n")
        else:
            io.write(f"  {_quote(face.slug)} -> {_quote(face.inherit)};\n")
    io.write("}\n")
    return io.getvalue()
