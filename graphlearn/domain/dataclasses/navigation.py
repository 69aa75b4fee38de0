# graphlearn/domain/dataclasses/navigation.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from graphlearn.domain.entities.assessment import Assessment
from graphlearn.domain.entities.material import Material


# ---------------------------------------------------------------------------
# View states. Exactly one is active; a Detail and an Assessment selection can
# never coexist because they are separate variants, not separate flags.
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ListView:
    pass


@dataclass(frozen=True)
class DetailView:
    material: Material


@dataclass(frozen=True)
class AssessmentView:
    assessment: Assessment
    # material the assessment was reached from (not rendered)
    origin_material_id: str


ViewState = Union[ListView, DetailView, AssessmentView]

LIST_VIEW = ListView()


def selected_material(state: ViewState) -> Optional[Material]:
    return state.material if isinstance(state, DetailView) else None


def selected_assessment(state: ViewState) -> Optional[Assessment]:
    return state.assessment if isinstance(state, AssessmentView) else None
