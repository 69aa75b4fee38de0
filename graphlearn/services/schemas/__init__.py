from graphlearn.services.schemas.material import (
    MaterialRead,
    CategoryOptionRead,
)
from graphlearn.services.schemas.review import (
    ReviewCreate,
    ReviewRead,
    ReviewList,
    ReviewEnvelope,
)
from graphlearn.services.schemas.assessment import (
    AssessmentRead,
)
__all__ = [
    "MaterialRead",
    "CategoryOptionRead",
    "ReviewCreate",
    "ReviewRead",
    "ReviewList",
    "ReviewEnvelope",
    "AssessmentRead",
]
