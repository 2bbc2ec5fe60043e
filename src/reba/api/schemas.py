from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "OK"
    message: str = "REBA API is running"


class PropertyResponse(BaseModel):
    property: Dict[str, Any]
    warning: Optional[str] = None
    demo: bool = False


class PropertyListResponse(BaseModel):
    properties: List[Dict[str, Any]] = Field(default_factory=list)
    warning: Optional[str] = None
    demo: bool = False


class SearchResponse(BaseModel):
    kind: str
    query: Dict[str, str]
    properties: List[Dict[str, Any]] = Field(default_factory=list)
    warning: Optional[str] = None
    demo: bool = False
