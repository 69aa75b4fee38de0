from graphlearn.domain.enums.material_type import MaterialType
from graphlearn.domain.enums.notice_kind import NoticeKind
from graphlearn.domain.enums.review_load_state import ReviewLoadState
from graphlearn.domain.enums.submit_status import SubmitStatus
from graphlearn.domain.enums.empty_reason import EmptyReason
__all__ = [
    "MaterialType",
    "NoticeKind",
    "ReviewLoadState",
    "SubmitStatus",
    "EmptyReason",
]
