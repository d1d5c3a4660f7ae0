# app.py
# FastAPI service for the timeline "Face" settings: per-category fonts and colors
# with per-attribute inheritance down to the default face.
# - Built-in faces are registered once at startup
# - Retriever lists posted by the host add per-model faces (never removes any)
# - Renderers ask the message filters for font / colors of each post

import json
import logging
import os
from pathlib import Path
from typing import List, Optional

import structlog
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from faces import (
    FaceRegistry,
    FaceResolver,
    Generated,
    MessageFilters,
    ModelFaces,
    Retriever,
    define_from_retrievers,
    load_builtin_faces,
)
from stores import USER_CONFIG

# --- Configure structlog + stdlib logging
logging.basicConfig(format="%(message)s", level=logging.INFO)
structlog.configure(
    wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
    processors=[structlog.processors.TimeStamper(fmt="iso"), structlog.processors.JSONRenderer()],
)
logger = structlog.get_logger("app")

load_dotenv()


# ----------------------------
# Environment & settings
# ----------------------------

def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    env: str = "development"
    # Unknown faces raise in strict mode, fall back to the root face otherwise
    strict: bool = True
    front_origin: str = "http://localhost:3000"
    retrievers_file: Optional[str] = None


def load_settings() -> Settings:
    env = os.getenv("FACES_ENV", "development").strip().lower()
    return Settings(
        env=env,
        strict=_env_flag("FACES_STRICT", env != "production"),
        front_origin=os.getenv("FRONT_ORIGIN", "http://localhost:3000"),
        retrievers_file=os.getenv("FACES_RETRIEVERS_FILE") or None,
    )


settings = load_settings()


def read_retrievers_file(path: str) -> List[Retriever]:
    """Load retriever descriptors from a JSON list (or {"items": [...]})."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("items", [])
    return [Retriever.model_validate(item) for item in data]


# ----------------------------
# Faces (one registry for the process lifetime)
# ----------------------------

class FaceService:
    """Everything the routes need, wired once."""

    def __init__(self, registry: FaceRegistry, resolver: FaceResolver, model_faces: ModelFaces):
        self.registry = registry
        self.resolver = resolver
        self.model_faces = model_faces
        self.filters = MessageFilters(resolver, model_faces)

    def add_retrievers(self, retrievers: List[Retriever]) -> Generated:
        """Generate faces for ``retrievers`` and route their models to them."""
        generated = define_from_retrievers(self.registry, retrievers)
        self.model_faces.update(generated.models)
        return generated


def build_face_service(config: Settings, user_config=USER_CONFIG) -> FaceService:
    registry = load_builtin_faces(FaceRegistry())
    resolver = FaceResolver(registry, user_config, strict=config.strict)
    service = FaceService(registry, resolver, ModelFaces())
    if config.retrievers_file:
        service.add_retrievers(read_retrievers_file(config.retrievers_file))
    logger.info("faces_ready", count=len(registry), strict=config.strict, env=config.env)
    return service


FACES = build_face_service(settings)


# ----------------------------
# FastAPI app
# ----------------------------
from routes.faces import router as faces_router  # noqa: E402

app = FastAPI(title="Faces — Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.front_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(faces_router)
