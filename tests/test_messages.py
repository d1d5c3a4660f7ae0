"""Message-level style filters."""

from __future__ import annotations

import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


from faces import (  # noqa: E402
    FaceRegistry,
    FaceResolver,
    MessageFilters,
    MessageInfo,
    ModelFaces,
    Retriever,
    define_from_retrievers,
    load_builtin_faces,
    suitable_face,
)
from stores import UserConfig  # noqa: E402


def make_filters(overrides: UserConfig) -> MessageFilters:
    registry = load_builtin_faces(FaceRegistry())
    model_faces = ModelFaces()
    model_faces.update(define_from_retrievers(registry, [Retriever(slug="toot", name="Toot", reply=True)]).models)
    return MessageFilters(FaceResolver(registry, overrides), model_faces)


def test_suitable_face():
    assert suitable_face(MessageInfo(model="toot", from_me=True, to_me=True)) == "myself"
    assert suitable_face(MessageInfo(model="toot", to_me=True)) == "mention"
    assert suitable_face(MessageInfo(model="toot")) == "basic_message"


def test_concrete_face_falls_back_to_generic():
    filters = make_filters(UserConfig())

    assert filters.concrete_face("toot", "mention") == "toot_mention"
    # toot has no self-authored variant
    assert filters.concrete_face("toot", "myself") == "myself"
    assert filters.concrete_face("unknown_model", "basic_message") == "basic_message"


def test_model_specific_override_only_touches_that_model():
    overrides = UserConfig()
    overrides.set_override("toot_mention", "background", (0, 0, 0xFFFF))
    filters = make_filters(overrides)

    toot = MessageInfo(model="toot", to_me=True)
    other = MessageInfo(model="mail", to_me=True)

    assert filters.message_bg_color(toot) == (0, 0, 0xFFFF)
    assert filters.message_bg_color(other) == (0xFFFF, 0xDEDE, 0xDEDE)
    assert filters.message_font(toot) == "Sans 10"


def test_value_from_earlier_filter_wins():
    filters = make_filters(UserConfig())
    message = MessageInfo(model="toot")

    assert filters.message_font(message, "Mono 7") == "Mono 7"
    assert filters.message_font_color(message, (5, 5, 5)) == (5, 5, 5)
    assert filters.quote_background_color(message, (9, 9, 9)) == (9, 9, 9)


def test_headers_and_quotes():
    overrides = UserConfig()
    overrides.set_override("quoted_reply_to", "background", (1, 2, 3))
    filters = make_filters(overrides)
    message = MessageInfo(model="toot")

    assert filters.header_right_font_color(message) == (0x9999, 0x9999, 0x9999)
    assert filters.header_left_font_color(message) == (0, 0, 0)
    assert filters.header_left_font(message) == "Sans 10"
    assert filters.header_right_font(message) == "Sans 10"
    assert filters.quote_background_color(message) == (0xFFFF, 0xFFFF, 0xFFFF)
    assert filters.replyviewer_background_color(message) == (1, 2, 3)


def test_style_bundle():
    filters = make_filters(UserConfig())

    item = filters.style(MessageInfo(model="toot", from_me=True))

    assert item["face"] == "myself"
    assert item["background"] == (0xFFFF, 0xFFFF, 0xDEDE)
    assert item["left_header"]["face"] == "toot_left_header"
    assert item["right_header"]["foreground"] == (0x9999, 0x9999, 0x9999)
