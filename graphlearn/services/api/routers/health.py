# graphlearn/services/api/routers/health.py
from __future__ import annotations

from typing import Dict

from fastapi import APIRouter, Depends

from graphlearn.common.settings import get_settings
from graphlearn.domain.entities.material import Material
from graphlearn.domain.ports.assessments import AssessmentRegistryPort
from graphlearn.services.api.deps import get_assessment_registry, get_materials_by_id

router = APIRouter()


@router.get("/healthz")
def healthz(
    materials: Dict[str, Material] = Depends(get_materials_by_id),
    registry: AssessmentRegistryPort = Depends(get_assessment_registry),
):
    s = get_settings()
    return {
        "ok": True,
        "app": s.app_name,
        "env": s.app_env,
        "locale": s.locale,
        "materials": len(materials),
        "assessments": sum(1 for m in materials if registry.get_by_material_id(m) is not None),
        "reviews_backend": s.reviews.backend,
    }
