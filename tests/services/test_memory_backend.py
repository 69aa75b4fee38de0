from datetime import datetime, timezone

import pytest

from graphlearn.services.identity.static_identity import StaticIdentity
from graphlearn.services.reviews.memory_backend import DEFAULT_AUTHOR, InMemoryReviewBackend

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_assigns_ids_and_dates_newest_first():
    be = InMemoryReviewBackend(clock=lambda: T0)
    r1 = await be.add_comment("m1", " first ", 4)
    r2 = await be.add_comment("m1", "second", 5)
    await be.add_comment("m2", "other", 3)

    assert (r1.id, r2.id) == (1, 2)
    assert r1.text == "first"
    assert r1.date == T0
    assert [r.id for r in await be.get_comments("m1")] == [2, 1]
    assert await be.get_comments("m3") == []


@pytest.mark.asyncio
async def test_unknown_material_raises_key_error():
    be = InMemoryReviewBackend(material_ids=["m1"])
    with pytest.raises(KeyError):
        await be.get_comments("nope")
    with pytest.raises(KeyError):
        await be.add_comment("nope", "text", 3)


@pytest.mark.asyncio
async def test_author_resolution():
    ident = StaticIdentity("Olena")
    be = InMemoryReviewBackend(identity=ident)
    assert (await be.add_comment("m1", "a", 3)).author_name == "Olena"
    assert (await be.add_comment("m1", "b", 3, author_name=" Taras ")).author_name == "Taras"
    ident.sign_out()
    assert (await be.add_comment("m1", "c", 3)).author_name == DEFAULT_AUTHOR


@pytest.mark.asyncio
async def test_invalid_review_rejected():
    be = InMemoryReviewBackend()
    with pytest.raises(ValueError):
        await be.add_comment("m1", "text", 9)
    assert await be.get_comments("m1") == []


def test_static_identity_sign_in_out():
    ident = StaticIdentity()
    assert ident.is_authenticated is False
    ident.sign_in("  Ann ")
    assert ident.current_user == "Ann"
    with pytest.raises(ValueError):
        ident.sign_in(" ")
