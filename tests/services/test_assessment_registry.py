import pytest

from graphlearn.domain.entities.assessment import Assessment
from graphlearn.services.assessments.registry import InMemoryAssessmentRegistry


def test_bundled_assessments_by_material():
    reg = InMemoryAssessmentRegistry()
    assert len(reg.all()) == 5
    assert reg.get_by_material_id("bfs-algorithm").id == "test-bfs"
    assert reg.get_by_material_id("graph-coloring") is None
    assert reg.get_by_material_id("") is None


def test_duplicate_material_rejected():
    a = Assessment(id="t1", title="T", material_id="m1", difficulty="easy", estimated_time=5, question_count=3)
    b = Assessment(id="t2", title="T2", material_id="m1", difficulty="easy", estimated_time=5, question_count=3)
    with pytest.raises(ValueError):
        InMemoryAssessmentRegistry([a, b])
