from __future__ import annotations
from typing import Protocol, Sequence
from graphlearn.domain.entities.material import Material

class MaterialSourcePort(Protocol):
    def list_materials(self) -> Sequence[Material]: ...
