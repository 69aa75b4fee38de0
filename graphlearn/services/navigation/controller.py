# graphlearn/services/navigation/controller.py
from __future__ import annotations

from typing import Callable, List, Optional

from graphlearn.common.logging import get_logger
from graphlearn.domain.dataclasses.navigation import (
    LIST_VIEW,
    AssessmentView,
    DetailView,
    ListView,
    ViewState,
    selected_assessment,
    selected_material,
)
from graphlearn.domain.entities.assessment import Assessment
from graphlearn.domain.entities.material import Material
from graphlearn.domain.ports.assessments import AssessmentRegistryPort
from graphlearn.domain.ports.presentation import ViewportPort

logger = get_logger(__name__)

StateListener = Callable[[ViewState, ViewState], None]


class NavigationController:
    """
    View-state machine over List | Detail(material) | Assessment(assessment).

        List        --select(m)-------> Detail(m)
        Detail(m)   --back------------> List
        Detail(m)   --take_assessment-> Assessment(a)   iff registry has one for m.id
        Assessment  --back------------> List            (Detail is skipped)

    There is no List -> Assessment edge. Entering Detail and every `back`
    ask the viewport to scroll to the top.
    """

    def __init__(self, assessments: AssessmentRegistryPort, viewport: Optional[ViewportPort] = None) -> None:
        self._assessments = assessments
        self._viewport = viewport
        self._state: ViewState = LIST_VIEW
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def selected_material(self) -> Optional[Material]:
        return selected_material(self._state)

    @property
    def selected_assessment(self) -> Optional[Assessment]:
        return selected_assessment(self._state)

    @property
    def is_list(self) -> bool:
        return isinstance(self._state, ListView)

    def subscribe(self, listener: StateListener) -> None:
        """listener(previous, current) runs after every transition."""
        self._listeners.append(listener)

    # ---------------- transitions ----------------

    def select(self, material: Material) -> ViewState:
        # also used by the "recently viewed" shortcuts
        self._move_to(DetailView(material=material))
        return self._state

    def back(self) -> ViewState:
        if isinstance(self._state, ListView):
            return self._state
        self._move_to(LIST_VIEW)
        return self._state

    def has_assessment(self) -> bool:
        m = self.selected_material
        return m is not None and self._assessments.get_by_material_id(m.id) is not None

    def take_assessment(self) -> bool:
        """Returns False (state untouched) outside Detail or when no assessment exists."""
        m = self.selected_material
        if m is None:
            logger.debug("take_assessment ignored outside detail view (%s)", type(self._state).__name__)
            return False
        assessment = self._assessments.get_by_material_id(m.id)
        if assessment is None:
            logger.debug("no assessment registered for material %s", m.id)
            return False
        self._move_to(AssessmentView(assessment=assessment, origin_material_id=m.id), scroll=False)
        return True

    # ---------------- internals ----------------

    def _move_to(self, new_state: ViewState, *, scroll: bool = True) -> None:
        previous = self._state
        self._state = new_state
        logger.debug("navigation %s -> %s", type(previous).__name__, type(new_state).__name__)
        if scroll and self._viewport is not None:
            self._viewport.scroll_to_top()
        for listener in list(self._listeners):
            listener(previous, new_state)
