"""
Scheme, sustainable-method and event listings backed by the document store.
"""
import logging
from typing import Any, Dict, List

import pydantic
from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from soilsense.app.di import get_method_store, get_scheme_store
from soilsense.app.schemas import Scheme
from soilsense.core.adapters.base import DocumentStore
from soilsense.core.errors import DuplicateRecordError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["records"], prefix="/api")

# Extension events shown on the dashboard; no backing store yet
EVENTS: List[Dict[str, str]] = [
    {
        "id": "e1",
        "title": "Soil Health Camp - Block A",
        "date": "2025-12-10",
        "location": "KVK Center",
    },
    {
        "id": "e2",
        "title": "Micro-Irrigation Demo",
        "date": "2025-12-12",
        "location": "Gram Panchayat Field",
    },
]

async def _list(store: DocumentStore, what: str):
    try:
        return await store.find_all()
    except Exception:
        logger.exception("Error fetching %s from store", what)
        return JSONResponse(status_code=500, content={"message": f"Server error while fetching {what}"})

@router.get("/methods")
async def list_methods(store: DocumentStore = Depends(get_method_store)):
    return await _list(store, "methods")

@router.get("/schemes")
async def list_schemes(store: DocumentStore = Depends(get_scheme_store)):
    return await _list(store, "schemes")

@router.post("/schemes", status_code=201)
async def create_scheme(body: Dict[str, Any] = Body(...),
                        store: DocumentStore = Depends(get_scheme_store)):
    try:
        scheme = Scheme.model_validate(body)
        return await store.insert(scheme.model_dump())
    except (pydantic.ValidationError, DuplicateRecordError) as e:
        logger.info("Error creating scheme: %s", e)
        return JSONResponse(status_code=400, content={"message": "Error creating scheme", "error": str(e)})

@router.get("/events")
async def list_events():
    return EVENTS
