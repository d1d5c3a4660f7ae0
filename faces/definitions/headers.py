"""Faces for the header line above each post."""
from faces.core import DEFAULT_FACE, FaceRegistry


def register(registry: FaceRegistry) -> None:
    registry.define("header", name="Header", inherit=DEFAULT_FACE)
    registry.define("left_header", name="Header (left)", inherit="header")
    registry.define(
        "right_header",
        name="Header (right)",
        inherit="header",
        foreground=(0x9999, 0x9999, 0x9999),
    )
