# graphlearn/services/assessments/registry.py
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from graphlearn.domain.entities.assessment import Assessment

_ASSESSMENTS: List[Assessment] = [
    Assessment(
        id="test-graph-basics",
        title="Основи теорії графів",
        description="Перевірте розуміння вершин, ребер, степенів та основних типів графів.",
        material_id="intro-graph-theory",
        category="basics",
        difficulty="easy",
        estimated_time=10,
        passing_score=70,
        question_count=8,
    ),
    Assessment(
        id="test-bfs",
        title="Пошук в ширину",
        description="Порядок обходу BFS та найкоротші шляхи в незважених графах.",
        material_id="bfs-algorithm",
        category="algorithms",
        difficulty="easy",
        estimated_time=15,
        passing_score=70,
        question_count=10,
    ),
    Assessment(
        id="test-dfs",
        title="Пошук в глибину",
        description="Обхід DFS, виявлення циклів та топологічне сортування.",
        material_id="dfs-algorithm",
        category="algorithms",
        difficulty="medium",
        estimated_time=15,
        passing_score=70,
        question_count=10,
    ),
    Assessment(
        id="test-dijkstra",
        title="Алгоритм Дейкстри",
        description="Найкоротші шляхи у зважених графах з невід'ємними вагами.",
        material_id="dijkstra-algorithm",
        category="algorithms",
        difficulty="medium",
        estimated_time=20,
        passing_score=75,
        question_count=12,
    ),
    Assessment(
        id="test-mst",
        title="Мінімальні кістякові дерева",
        description="Алгоритми Прима і Крускала та структура Union-Find.",
        material_id="minimum-spanning-trees",
        category="algorithms",
        difficulty="medium",
        estimated_time=25,
        passing_score=75,
        question_count=12,
    ),
]


class InMemoryAssessmentRegistry:
    """Assessments keyed by the material they belong to (at most one each)."""

    def __init__(self, assessments: Optional[Iterable[Assessment]] = None) -> None:
        self._by_material: Dict[str, Assessment] = {}
        for a in (_ASSESSMENTS if assessments is None else assessments):
            if a.material_id in self._by_material:
                raise ValueError(f"Duplicate assessment for material: {a.material_id}")
            self._by_material[a.material_id] = a

    def get_by_material_id(self, material_id: str) -> Optional[Assessment]:
        if not material_id:
            return None
        return self._by_material.get(material_id)

    def all(self) -> List[Assessment]:
        return list(self._by_material.values())
