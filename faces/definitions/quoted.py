"""Faces for content quoted inside another post."""
from faces.core import DEFAULT_FACE, FaceRegistry


def register(registry: FaceRegistry) -> None:
    registry.define("quoted_message", name="Quote", inherit=DEFAULT_FACE, font="Sans 8")
    registry.define("quoted_reply_to", name="Reply target", inherit="quoted_message")
    registry.define("quoted_shared_message", name="Share with comment", inherit="quoted_message")
