# routes/faces.py
# FastAPI router for the face collection, the settings panel and per-message styling.

from fastapi import APIRouter, Body, HTTPException
from fastapi.responses import PlainTextResponse

from app import FACES, logger
from faces import (
    ATTRIBUTES,
    COLOR_ATTRIBUTES,
    FaceError,
    MessageInfo,
    UnknownAttributeError,
    UnknownStyleError,
    config_key,
    render_dot,
)
from models import FaceDetail, OverrideBody, RetrieverList, SettingsSection
from stores import USER_CONFIG
from utils import parse_color, rgb16_to_hex

router = APIRouter(prefix="/api/faces", tags=["faces"])


def _require_face(slug: str):
    face = FACES.registry.get(slug)
    if face is None:
        raise HTTPException(status_code=404, detail="face not found")
    return face


def _require_attribute(attribute: str) -> str:
    if attribute not in ATTRIBUTES:
        raise HTTPException(status_code=422, detail=str(UnknownAttributeError(attribute)))
    return attribute


@router.get("")
def list_faces():
    # Flat collection, definition order
    return {"ok": True, "items": [f.model_dump() for f in FACES.registry.all()]}


@router.get("/settings")
def get_settings_panel():
    """One section per face, as the "Faces" settings panel lays them out."""
    sections = []
    for face in FACES.registry.all():
        parent = FACES.registry.parent(face)
        sections.append(SettingsSection(
            slug=face.slug,
            name=face.name,
            inherit=face.inherit,
            inherit_name=parent.name if parent else None,
            keys={attr: config_key(face.slug, attr) for attr in ATTRIBUTES},
        ))
    return {"ok": True, "items": [s.model_dump() for s in sections]}


@router.get("/dump", response_class=PlainTextResponse)
def dump_faces() -> PlainTextResponse:
    return PlainTextResponse(render_dot(FACES.registry), media_type="text/vnd.graphviz")


@router.post("/retrievers")
def add_retrievers(body: RetrieverList = Body(...)):
    generated = FACES.add_retrievers(body.items)
    return {"ok": True, **generated.model_dump()}


@router.post("/message")
def style_message(message: MessageInfo = Body(...)):
    try:
        item = FACES.filters.style(message)
    except FaceError as exc:
        logger.error("message_style_failed", model=message.model, error=str(exc))
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return {"ok": True, "item": item}


@router.get("/{slug}")
def get_face(slug: str):
    face = _require_face(slug)
    try:
        values = FACES.resolver.resolve_all(slug)
    except UnknownStyleError as exc:  # pragma: no cover - raced with a redefine
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    detail = FaceDetail(
        face=face,
        values=values,
        sources=FACES.resolver.sources(slug),
        children=[c.slug for c in FACES.registry.children(slug)],
    )
    payload = detail.model_dump()
    payload["hex"] = {attr: rgb16_to_hex(values[attr]) for attr in COLOR_ATTRIBUTES}
    return {"ok": True, "item": payload}


@router.put("/{slug}/{attribute}")
def set_override(slug: str, attribute: str, body: OverrideBody = Body(...)):
    _require_face(slug)
    _require_attribute(attribute)
    if attribute in COLOR_ATTRIBUTES:
        try:
            value = parse_color(body.value)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
    else:
        if not isinstance(body.value, str) or not body.value.strip():
            raise HTTPException(status_code=422, detail="font must be a non-empty string")
        value = body.value.strip()

    USER_CONFIG.set_override(slug, attribute, value)
    logger.info("face_override_set", slug=slug, attribute=attribute)
    return {"ok": True, "key": config_key(slug, attribute), "value": value}


@router.delete("/{slug}/{attribute}")
def clear_override(slug: str, attribute: str):
    _require_face(slug)
    _require_attribute(attribute)
    removed = USER_CONFIG.clear_override(slug, attribute)
    return {"ok": True, "key": config_key(slug, attribute), "removed": removed}
