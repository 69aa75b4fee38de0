from __future__ import annotations
from typing import Optional, Protocol
from graphlearn.domain.entities.assessment import Assessment

class AssessmentRegistryPort(Protocol):
    # absent (None) is a normal answer: not every material has an assessment
    def get_by_material_id(self, material_id: str) -> Optional[Assessment]: ...
