# graphlearn/services/api/deps.py
from __future__ import annotations

from functools import lru_cache
from typing import Dict

from graphlearn.domain.entities.material import Material
from graphlearn.domain.ports.assessments import AssessmentRegistryPort
from graphlearn.services.assessments.registry import InMemoryAssessmentRegistry
from graphlearn.services.catalog.static_source import StaticMaterialSource
from graphlearn.services.reviews.memory_backend import InMemoryReviewBackend


@lru_cache(maxsize=1)
def _material_source() -> StaticMaterialSource:
    return StaticMaterialSource()


def get_materials_by_id() -> Dict[str, Material]:
    """Catalog keyed by id, in catalog order (dicts keep insertion order)."""
    return {m.id: m for m in _material_source().list_materials()}


@lru_cache(maxsize=1)
def get_assessment_registry() -> AssessmentRegistryPort:
    return InMemoryAssessmentRegistry()


@lru_cache(maxsize=1)
def get_review_backend() -> InMemoryReviewBackend:
    """
    Process-wide review store. Swappable through FastAPI dependency
    overrides (tests give every case a fresh backend).
    """
    return InMemoryReviewBackend(material_ids=[m.id for m in _material_source().list_materials()])
