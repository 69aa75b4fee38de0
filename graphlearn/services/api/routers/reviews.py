from __future__ import annotations

from http import HTTPStatus
from typing import Dict

from fastapi import APIRouter, Depends, HTTPException, Path

from graphlearn.common.settings import get_settings
from graphlearn.domain.entities.material import Material
from graphlearn.services.api.deps import get_materials_by_id, get_review_backend
from graphlearn.services.mappers.review import to_read_schema
from graphlearn.services.reviews.memory_backend import InMemoryReviewBackend
from graphlearn.services.schemas import ReviewCreate, ReviewEnvelope, ReviewList

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/materials", tags=["comments"])


def _ensure_material(materials: Dict[str, Material], material_id: str) -> None:
    if material_id not in materials:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Material not found")


@router.get("/{material_id}/comments", response_model=ReviewList)
async def list_comments(
    material_id: str = Path(...),
    materials: Dict[str, Material] = Depends(get_materials_by_id),
    backend: InMemoryReviewBackend = Depends(get_review_backend),
) -> ReviewList:
    _ensure_material(materials, material_id)
    reviews = await backend.get_comments(material_id)
    return ReviewList(comments=[to_read_schema(r) for r in reviews])


@router.post("/{material_id}/comments", response_model=ReviewEnvelope, status_code=HTTPStatus.CREATED)
async def add_comment(
    payload: ReviewCreate,
    material_id: str = Path(...),
    materials: Dict[str, Material] = Depends(get_materials_by_id),
    backend: InMemoryReviewBackend = Depends(get_review_backend),
) -> ReviewEnvelope:
    _ensure_material(materials, material_id)
    try:
        review = await backend.add_comment(material_id, payload.text, payload.rating, author_name=payload.author_name)
    except ValueError as e:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(e))
    return ReviewEnvelope(comment=to_read_schema(review))
