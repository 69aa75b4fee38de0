import asyncio
from datetime import timedelta

import pytest

from graphlearn.domain.dataclasses.reviews import ReviewDraft
from graphlearn.domain.enums.notice_kind import NoticeKind
from graphlearn.domain.enums.review_load_state import ReviewLoadState
from graphlearn.domain.enums.submit_status import SubmitStatus
from graphlearn.services.identity.static_identity import StaticIdentity
from graphlearn.services.reviews.service import ReviewService

from _support import NOW, make_material, make_review, settle

A = make_material("a", rating=4.8)
B = make_material("b", rating=3.9)


@pytest.fixture()
def service(backend, identity, notifier):
    return ReviewService(backend, identity, notifier, clock=lambda: NOW, locale="en")


# ----- loading ----------------------------------------------------------------

@pytest.mark.asyncio
async def test_open_loads_reviews(service, backend):
    backend.comments["a"] = [make_review(2, "a", 4), make_review(1, "a", 5)]
    assert service.state == ReviewLoadState.idle

    assert await service.open(A) is True
    assert service.state == ReviewLoadState.loaded
    assert [r.id for r in service.reviews] == [2, 1]
    assert service.review_count == 2


@pytest.mark.asyncio
async def test_state_is_loading_while_pending(service, backend):
    backend.hold = True
    task = asyncio.create_task(service.open(A))
    await settle()
    assert service.state == ReviewLoadState.loading
    assert service.is_loading
    backend.release("a", [make_review(1, "a")])
    await task
    assert service.state == ReviewLoadState.loaded


@pytest.mark.asyncio
async def test_load_failure_empties_list_and_notifies(service, backend, notifier):
    backend.fail_get.add("a")
    assert await service.open(A) is False
    assert service.state == ReviewLoadState.load_failed
    assert service.reviews == ()
    assert notifier.last().kind == NoticeKind.error
    assert notifier.last().message == "Failed to load comments"
    # no automatic retry
    assert backend.calls == [("get", "a")]


@pytest.mark.asyncio
async def test_reopening_refetches_and_discards_previous_list(service, backend):
    backend.comments["a"] = [make_review(1, "a")]
    backend.comments["b"] = [make_review(7, "b", 2)]
    await service.open(A)
    await service.open(B)
    assert [r.id for r in service.reviews] == [7]
    await service.open(A)
    assert [r.id for r in service.reviews] == [1]
    assert backend.calls == [("get", "a"), ("get", "b"), ("get", "a")]


@pytest.mark.asyncio
async def test_load_for_material_that_is_not_open_is_ignored(service, backend):
    assert await service.load_reviews("a") is False
    assert backend.calls == []


@pytest.mark.asyncio
async def test_late_response_for_previous_material_is_dropped(service, backend):
    backend.hold = True
    first = asyncio.create_task(service.open(A))
    await settle()
    second = asyncio.create_task(service.open(B))
    await settle()

    backend.release("b", [make_review(9, "b", 1)])
    assert await second is True
    backend.release("a", [make_review(1, "a", 5), make_review(2, "a", 5)])
    assert await first is False

    assert service.material is B
    assert [r.id for r in service.reviews] == [9]
    assert service.state == ReviewLoadState.loaded


@pytest.mark.asyncio
async def test_late_failure_for_previous_material_is_dropped(service, backend, notifier):
    backend.hold = True
    first = asyncio.create_task(service.open(A))
    await settle()
    second = asyncio.create_task(service.open(B))
    await settle()
    backend.release("b", [])
    await second
    backend.fail("a")
    await first
    assert service.state == ReviewLoadState.loaded
    assert notifier.notices == []


@pytest.mark.asyncio
async def test_same_material_reopened_only_latest_load_applies(service, backend):
    backend.hold = True
    first = asyncio.create_task(service.open(A))
    await settle()
    second = asyncio.create_task(service.open(A))
    await settle()
    backend.release("a", [make_review(1, "a")])
    backend.release("a", [make_review(2, "a")])
    await asyncio.gather(first, second)
    assert [r.id for r in service.reviews] == [2]


def test_detach_destroys_list(service):
    service.attach(A)
    service.draft = ReviewDraft(text="half written", rating=3)
    service.detach()
    assert service.material is None
    assert service.reviews == ()
    assert service.draft.is_empty


# ----- submission -------------------------------------------------------------

@pytest.mark.asyncio
async def test_unauthenticated_is_rejected_first(backend, notifier):
    svc = ReviewService(backend, StaticIdentity(None), notifier, locale="en")
    svc.attach(A)
    result = await svc.submit_review("a", "", 0)
    assert result.status == SubmitStatus.unauthenticated
    assert result.review is None
    assert backend.calls == []
    assert notifier.last().kind == NoticeKind.warning
    assert notifier.last().message == "Please sign in to leave a review"


@pytest.mark.asyncio
@pytest.mark.parametrize("rating", [0, None, 6, -1])
async def test_rating_is_checked_before_text(service, backend, rating):
    service.attach(A)
    result = await service.submit_review("a", "", rating)
    assert result.status == SubmitStatus.invalid_rating
    assert backend.calls == []


@pytest.mark.asyncio
async def test_blank_text_rejected(service, backend, notifier):
    service.attach(A)
    result = await service.submit_review("a", "   ", 4)
    assert result.status == SubmitStatus.empty_text
    assert backend.calls == []
    assert notifier.last().message == "Please write a review"
    # form keeps what the user typed
    assert service.draft == ReviewDraft(text="   ", rating=4)


@pytest.mark.asyncio
async def test_accepted_review_is_prepended_and_form_reset(service, backend, notifier):
    backend.comments["a"] = [make_review(1, "a", 3)]
    await service.open(A)

    result = await service.submit_review("a", "  Very clear  ", 5)
    assert result.ok
    assert result.review.id == 100
    assert backend.calls[-1] == ("add", "a", "Very clear", 5)
    assert [r.id for r in service.reviews] == [100, 1]
    assert service.draft.is_empty
    assert service.is_submitting is False
    assert notifier.last().kind == NoticeKind.success
    # not re-fetched
    assert backend.calls.count(("get", "a")) == 1


@pytest.mark.asyncio
async def test_failed_submission_keeps_form(service, backend, notifier):
    await service.open(A)
    backend.fail_add = True
    result = await service.submit_review("a", "Nice", 4)
    assert result.status == SubmitStatus.failed
    assert service.draft == ReviewDraft(text="Nice", rating=4)
    assert service.reviews == ()
    assert service.is_submitting is False
    assert notifier.last().kind == NoticeKind.error


@pytest.mark.asyncio
async def test_second_submit_while_in_flight_is_busy(service, backend):
    await service.open(A)
    gate = asyncio.Event()
    original = backend.add_comment

    async def slow_add(material_id, text, rating):
        await gate.wait()
        return await original(material_id, text, rating)

    backend.add_comment = slow_add
    first = asyncio.create_task(service.submit_review("a", "one", 5))
    await settle()
    assert service.is_submitting is True

    second = await service.submit_review("a", "two", 5)
    assert second.status == SubmitStatus.busy

    gate.set()
    assert (await first).ok
    assert [r.text for r in service.reviews] == ["one"]


@pytest.mark.asyncio
async def test_review_saved_after_navigation_does_not_leak_into_other_list(service, backend):
    await service.open(A)
    gate = asyncio.Event()
    original = backend.add_comment

    async def slow_add(material_id, text, rating):
        await gate.wait()
        return await original(material_id, text, rating)

    backend.add_comment = slow_add
    pending = asyncio.create_task(service.submit_review("a", "for A", 5))
    await settle()
    await service.open(B)
    gate.set()
    assert (await pending).ok
    assert service.material is B
    assert service.reviews == ()


@pytest.mark.asyncio
async def test_pending_submission_does_not_block_next_detail_view(service, backend, notifier):
    await service.open(A)
    gates = {"a": asyncio.Event(), "b": asyncio.Event()}
    original = backend.add_comment

    async def gated_add(material_id, text, rating):
        await gates[material_id].wait()
        return await original(material_id, text, rating)

    backend.add_comment = gated_add
    for_a = asyncio.create_task(service.submit_review("a", "for A", 5))
    await settle()
    assert service.is_submitting is True

    service.detach()
    await service.open(B)
    assert service.is_submitting is False

    for_b = asyncio.create_task(service.submit_review("b", "fresh view", 4))
    await settle()
    assert service.is_submitting is True

    # A finishing late must not clear B's in-flight flag
    gates["a"].set()
    assert (await for_a).ok
    assert service.is_submitting is True
    assert service.reviews == ()

    gates["b"].set()
    result = await for_b
    assert result.status == SubmitStatus.accepted
    assert service.is_submitting is False
    assert [r.text for r in service.reviews] == ["fresh view"]
    assert [c[1] for c in backend.calls if c[0] == "add"] == ["a", "b"]
    assert notifier.last().kind == NoticeKind.success


@pytest.mark.asyncio
async def test_review_accepted_during_load_survives_the_load(service, backend):
    backend.hold = True
    loading = asyncio.create_task(service.open(A))
    await settle()

    result = await service.submit_review("a", "posted early", 5)
    assert result.ok
    assert [r.id for r in service.reviews] == [100]

    backend.release("a", [make_review(1, "a", 3)])
    assert await loading is True
    assert [r.id for r in service.reviews] == [100, 1]


@pytest.mark.asyncio
async def test_review_accepted_during_load_is_not_duplicated(service, backend):
    backend.hold = True
    loading = asyncio.create_task(service.open(A))
    await settle()
    result = await service.submit_review("a", "posted early", 5)

    backend.release("a", [result.review, make_review(1, "a", 3)])
    await loading
    assert [r.id for r in service.reviews] == [100, 1]


# ----- derived values ---------------------------------------------------------

@pytest.mark.asyncio
async def test_average_rating_uses_loaded_reviews(service, backend):
    backend.comments["a"] = [make_review(1, "a", 5), make_review(2, "a", 3), make_review(3, "a", 4)]
    await service.open(A)
    assert service.average_rating() == 4.0
    assert service.average_rating(A) == 4.0
    # another material: nothing loaded for it
    assert service.average_rating(B) == 3.9


@pytest.mark.asyncio
async def test_average_rating_falls_back_to_seeded_rating(service):
    await service.open(A)
    assert service.average_rating() == 4.8


def test_average_rating_needs_a_material(service):
    with pytest.raises(ValueError):
        service.average_rating()


def test_format_date_uses_injected_clock(service):
    assert service.format_date(NOW - timedelta(minutes=30)) == "just now"
    assert service.format_date(NOW - timedelta(hours=5)) == "5 hours ago"
    assert service.format_date(NOW - timedelta(days=3)) == "3 days ago"
    assert service.format_date(NOW - timedelta(days=10)) == "10.05.2024"


@pytest.mark.asyncio
async def test_ukrainian_messages(backend, notifier):
    svc = ReviewService(backend, StaticIdentity(None), notifier, clock=lambda: NOW, locale="uk")
    svc.attach(A)
    await svc.submit_review("a", "текст", 5)
    assert notifier.last().message == "Будь ласка, увійдіть в систему, щоб залишити відгук"
    assert svc.format_date(NOW - timedelta(days=2)) == "2 дні тому"
