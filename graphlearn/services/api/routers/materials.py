from __future__ import annotations

from http import HTTPStatus
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from graphlearn.common.settings import get_settings
from graphlearn.domain.entities.material import Material
from graphlearn.domain.policies.material_filter import ALL_CATEGORIES, category_options, filter_materials
from graphlearn.domain.ports.assessments import AssessmentRegistryPort
from graphlearn.services.api.deps import get_assessment_registry, get_materials_by_id
from graphlearn.services.mappers.material import assessment_to_read_schema, to_read_schema
from graphlearn.services.schemas import AssessmentRead, CategoryOptionRead, MaterialRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/materials", tags=["materials"])


def _get_or_404(materials: Dict[str, Material], material_id: str) -> Material:
    found = materials.get(material_id)
    if not found:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Material not found")
    return found


@router.get("", response_model=List[MaterialRead])
def list_materials(
    q: str = Query("", max_length=200),
    category: str = Query(ALL_CATEGORIES),
    materials: Dict[str, Material] = Depends(get_materials_by_id),
) -> List[MaterialRead]:
    return [to_read_schema(m) for m in filter_materials(materials.values(), q, category)]


@router.get("/categories", response_model=List[CategoryOptionRead])
def list_categories() -> List[CategoryOptionRead]:
    s = get_settings()
    return [CategoryOptionRead.model_validate(o) for o in category_options(s.catalog.category_ids, s.locale)]


@router.get("/{material_id}", response_model=MaterialRead)
def get_material(
    material_id: str = Path(...),
    materials: Dict[str, Material] = Depends(get_materials_by_id),
) -> MaterialRead:
    return to_read_schema(_get_or_404(materials, material_id))


@router.get("/{material_id}/assessment", response_model=AssessmentRead)
def get_material_assessment(
    material_id: str = Path(...),
    materials: Dict[str, Material] = Depends(get_materials_by_id),
    registry: AssessmentRegistryPort = Depends(get_assessment_registry),
) -> AssessmentRead:
    _get_or_404(materials, material_id)
    found = registry.get_by_material_id(material_id)
    if not found:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="No assessment for this material")
    return assessment_to_read_schema(found)
