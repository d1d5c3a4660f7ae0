"""Root face and the message faces every timeline post uses."""
from faces.core import DEFAULT_FACE, FaceRegistry


def register(registry: FaceRegistry) -> None:
    registry.define(
        DEFAULT_FACE,
        name="Default",
        inherit=None,
        font="Sans 10",
        foreground=(0, 0, 0),
        background=(0xFFFF, 0xFFFF, 0xFFFF),
    )

    registry.define("basic_message", name="All posts", inherit=DEFAULT_FACE)

    registry.define(
        "mention",
        name="Posts addressed to me",
        inherit="basic_message",
        background=(0xFFFF, 0xDEDE, 0xDEDE),
    )

    registry.define(
        "myself",
        name="My posts",
        inherit="basic_message",
        background=(0xFFFF, 0xFFFF, 0xDEDE),
    )
