"""Per-model faces generated from the retriever list."""

from __future__ import annotations

import sys
import threading
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


from faces import (  # noqa: E402
    FaceRegistry,
    ModelFaces,
    Retriever,
    define_from_retrievers,
    load_builtin_faces,
    render_dot,
)


BUILTIN = {
    "default", "basic_message", "mention", "myself", "header", "left_header",
    "right_header", "quoted_message", "quoted_reply_to", "quoted_shared_message",
}


def make_registry() -> FaceRegistry:
    return load_builtin_faces(FaceRegistry())


def test_reply_capable_without_self_variant():
    registry = make_registry()
    foo = Retriever(slug="foo", name="Foo", is_reply_capable=True, has_self_authored_variant=False)

    generated = define_from_retrievers(registry, [foo])

    created = {f.slug for f in registry.all()} - BUILTIN
    assert created == {"foo", "foo_left_header", "foo_right_header", "foo_mention"}
    assert "foo_myself" not in registry
    assert generated.created == ["foo", "foo_left_header", "foo_right_header", "foo_mention"]
    assert generated.models == {
        "foo": {
            "basic_message": "foo",
            "left_header": "foo_left_header",
            "right_header": "foo_right_header",
            "mention": "foo_mention",
        }
    }
    assert registry.get("foo").inherit == "basic_message"
    assert registry.get("foo_left_header").inherit == "left_header"
    assert registry.get("foo_right_header").inherit == "right_header"
    assert registry.get("foo_mention").inherit == "mention"


def test_self_variant_and_display_names():
    registry = make_registry()
    bar = Retriever.model_validate({"slug": "bar", "name": "Bar", "myself": True})

    define_from_retrievers(registry, [bar])

    assert registry.get("bar_myself").inherit == "myself"
    assert registry.get("bar_myself").name == "My Bar"
    assert registry.get("bar_left_header").name == "Bar header (left)"
    assert "bar_mention" not in registry


def test_rerun_is_additive():
    registry = make_registry()
    foo = Retriever(slug="foo", name="Foo", reply=True)
    define_from_retrievers(registry, [foo])

    # Something set after generation must survive a rerun
    registry.define("foo", name="Foo", inherit="basic_message", background=(1, 1, 1))
    before = {f.slug: f for f in registry.all()}

    baz = Retriever(slug="baz", name="Baz")
    define_from_retrievers(registry, [foo])
    generated = define_from_retrievers(registry, [foo, baz])

    after = {f.slug: f for f in registry.all()}
    assert set(before) <= set(after)
    assert all(after[slug] == face for slug, face in before.items())
    assert registry.get("foo").background == (1, 1, 1)
    assert "baz" in registry and "baz_mention" not in registry
    assert generated.created == ["baz", "baz_left_header", "baz_right_header"]
    assert generated.models["foo"]["mention"] == "foo_mention"


def test_non_timeline_retrievers_are_skipped():
    registry = make_registry()
    hidden = Retriever(slug="directmessage", name="DM", timeline=False, reply=True)

    generated = define_from_retrievers(registry, [hidden])
    assert generated.models == {}
    assert generated.created == []
    assert {f.slug for f in registry.all()} == BUILTIN


def test_model_faces_merges_runs():
    model_faces = ModelFaces()
    model_faces.update({"foo": {"basic_message": "foo"}})
    model_faces.update({"foo": {"mention": "foo_mention"}, "bar": {"basic_message": "bar"}})

    assert model_faces.lookup("foo", "basic_message") == "foo"
    assert model_faces.lookup("foo", "mention") == "foo_mention"
    assert model_faces.lookup("foo", "myself") is None
    assert model_faces.lookup("nobody", "basic_message") is None
    assert "bar" in model_faces


def test_model_faces_reads_while_another_thread_updates():
    model_faces = ModelFaces()
    errors: list[Exception] = []
    done = threading.Event()

    def writer():
        try:
            for i in range(5000):
                model_faces.update({f"m{i}": {"basic_message": f"m{i}"}})
        except Exception as exc:
            errors.append(exc)
        finally:
            done.set()

    def reader():
        try:
            while not done.is_set():
                model_faces.as_dict()
                model_faces.lookup("m1", "basic_message")
        except Exception as exc:
            errors.append(exc)

    threads = [threading.Thread(target=writer), threading.Thread(target=reader)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert len(model_faces.as_dict()) == 5000


@pytest.mark.parametrize("slug", ["settings", "dump", "retrievers", "message"])
def test_reserved_slugs_are_rejected(slug):
    with pytest.raises(ValueError):
        Retriever(slug=slug, name="Shadowed")


def test_dump_quotes_model_slugs():
    registry = make_registry()
    define_from_retrievers(registry, [Retriever(slug="rss.feed-item", name="Feed")])

    text = render_dot(registry)

    assert '  "default";' in text
    assert '  "rss.feed-item" -> "basic_message";' in text
    assert '  "rss.feed-item_left_header" -> "left_header";' in text
