"""Filters the timeline renderer calls to style a single message."""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel

from .generation import ModelFaces
from .resolver import FaceResolver


class MessageInfo(BaseModel):
    model: str
    from_me: bool = False
    to_me: bool = False


def suitable_face(message: MessageInfo) -> str:
    if message.from_me:
        return "myself"
    if message.to_me:
        return "mention"
    return "basic_message"


class MessageFilters:
    """Each filter keeps a value an earlier host filter already chose and
    otherwise resolves it from the face matching the message."""

    def __init__(self, resolver: FaceResolver, model_faces: ModelFaces):
        self.resolver = resolver
        self.model_faces = model_faces

    def concrete_face(self, model: str, face: str) -> str:
        """The model's own variant of ``face`` when one was generated, else ``face``."""
        concrete = self.model_faces.lookup(model, face)
        if concrete is not None and concrete in self.resolver.registry:
            return concrete
        return face

    def _pick(self, value: Optional[Any], model: str, face: str, attribute: str) -> Any:
        if value is not None:
            return value
        return self.resolver.resolve(self.concrete_face(model, face), attribute)

    def message_font(self, message: MessageInfo, font: Optional[str] = None) -> str:
        return self._pick(font, message.model, suitable_face(message), "font")

    def message_font_color(self, message: MessageInfo, color=None):
        return self._pick(color, message.model, suitable_face(message), "foreground")

    def message_bg_color(self, message: MessageInfo, color=None):
        return self._pick(color, message.model, suitable_face(message), "background")

    def header_left_font(self, message: MessageInfo, font: Optional[str] = None) -> str:
        return self._pick(font, message.model, "left_header", "font")

    def header_left_font_color(self, message: MessageInfo, color=None):
        return self._pick(color, message.model, "left_header", "foreground")

    def header_right_font(self, message: MessageInfo, font: Optional[str] = None) -> str:
        return self._pick(font, message.model, "right_header", "font")

    def header_right_font_color(self, message: MessageInfo, color=None):
        return self._pick(color, message.model, "right_header", "foreground")

    # Quotes are not specialised per model
    def quote_background_color(self, message: MessageInfo, color=None):
        if color is not None:
            return color
        return self.resolver.resolve("quoted_message", "background")

    def replyviewer_background_color(self, message: MessageInfo, color=None):
        if color is not None:
            return color
        return self.resolver.resolve("quoted_reply_to", "background")

    def style(self, message: MessageInfo) -> dict:
        """Everything the renderer needs for one message in a single call."""
        return {
            "face": self.concrete_face(message.model, suitable_face(message)),
            "font": self.message_font(message),
            "foreground": self.message_font_color(message),
            "background": self.message_bg_color(message),
            "left_header": {
                "face": self.concrete_face(message.model, "left_header"),
                "font": self.header_left_font(message),
                "foreground": self.header_left_font_color(message),
            },
            "right_header": {
                "face": self.concrete_face(message.model, "right_header"),
                "font": self.header_right_font(message),
                "foreground": self.header_right_font_color(message),
            },
        }


__all__ = ["MessageFilters", "MessageInfo", "suitable_face"]
