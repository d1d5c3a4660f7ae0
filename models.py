# /models.py
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from faces import Face, FaceSource, Retriever


# ----------------------------
# Request bodies
# ----------------------------

class OverrideBody(BaseModel):
    # Font description for "font", '#rrggbb' or a 16-bit triple for colors
    value: Union[str, List[int]]


class RetrieverList(BaseModel):
    items: List[Retriever] = Field(default_factory=list)


# ----------------------------
# Responses
# ----------------------------

class FaceDetail(BaseModel):
    face: Face
    values: Dict[str, Any]
    sources: Dict[str, FaceSource]
    children: List[str] = []


class SettingsSection(BaseModel):
    # One block of the "Faces" settings panel
    slug: str
    name: str
    inherit: Optional[str] = None
    inherit_name: Optional[str] = None  # "unset items use <inherit_name>"
    keys: Dict[str, str]  # attribute -> user config key
