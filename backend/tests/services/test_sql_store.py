"""SQL Store — tests for SqlSocialStore against SQLite.

Tests cover:
    - User get-or-create, rename uniqueness, case-sensitive search
    - Relation add/remove/exists, irreflexivity, duplicate → ConflictError
    - Photo listing counts, liked flag and order; empty owner set
    - Photo deletion cascades likes and comments
    - Comment listing joins the author's username
"""

import pytest

from wasaphoto.core.domain_types import RelationKind
from wasaphoto.core.errors import ConflictError, ForbiddenError


@pytest.fixture
async def sql_users(sql_store):
    return {
        name: await sql_store.get_or_create_user(name)
        for name in ("alice", "bob", "carol")
    }


# ─── Users ───────────────────────────────────────────────────────

async def test_get_or_create_returns_same_id(sql_store, sql_users):
    assert await sql_store.get_or_create_user("alice") == sql_users["alice"]
    assert await sql_store.user_exists(sql_users["alice"])
    assert not await sql_store.user_exists(999)


async def test_rename_user(sql_store, sql_users):
    await sql_store.rename_user(sql_users["alice"], "alicia")
    assert await sql_store.get_user_id("alicia") == sql_users["alice"]
    assert await sql_store.get_user_id("alice") is None


async def test_rename_to_taken_name_conflicts(sql_store, sql_users):
    with pytest.raises(ConflictError):
        await sql_store.rename_user(sql_users["alice"], "bob")


async def test_search_is_case_sensitive(sql_store, sql_users):
    await sql_store.get_or_create_user("CAROLINE")
    assert await sql_store.search_usernames("aro") == ["carol"]
    assert await sql_store.search_usernames("ARO") == ["CAROLINE"]


async def test_search_escapes_wildcards(sql_store, sql_users):
    await sql_store.get_or_create_user("a_b_c")
    assert await sql_store.search_usernames("_b_") == ["a_b_c"]


# ─── Relations ───────────────────────────────────────────────────

@pytest.mark.parametrize("kind", list(RelationKind))
async def test_relation_lifecycle(sql_store, sql_users, kind):
    alice, bob = sql_users["alice"], sql_users["bob"]
    assert not await sql_store.relation_exists(kind, alice, bob)

    await sql_store.add_relation(kind, alice, bob)
    assert await sql_store.relation_exists(kind, alice, bob)
    assert not await sql_store.relation_exists(kind, bob, alice)

    await sql_store.remove_relation(kind, alice, bob)
    assert not await sql_store.relation_exists(kind, alice, bob)


async def test_follow_and_ban_are_independent(sql_store, sql_users):
    alice, bob = sql_users["alice"], sql_users["bob"]
    await sql_store.add_relation(RelationKind.FOLLOW, alice, bob)
    assert not await sql_store.relation_exists(RelationKind.BAN, alice, bob)


@pytest.mark.parametrize("kind", list(RelationKind))
async def test_reflexive_relation_rejected(sql_store, sql_users, kind):
    with pytest.raises(ForbiddenError):
        await sql_store.add_relation(kind, sql_users["alice"], sql_users["alice"])


async def test_duplicate_relation_conflicts(sql_store, sql_users):
    alice, bob = sql_users["alice"], sql_users["bob"]
    await sql_store.add_relation(RelationKind.FOLLOW, alice, bob)
    with pytest.raises(ConflictError):
        await sql_store.add_relation(RelationKind.FOLLOW, alice, bob)


async def test_follow_counts_and_id_sets(sql_store, sql_users):
    alice, bob, carol = sql_users["alice"], sql_users["bob"], sql_users["carol"]
    await sql_store.add_relation(RelationKind.FOLLOW, alice, bob)
    await sql_store.add_relation(RelationKind.FOLLOW, carol, bob)
    await sql_store.add_relation(RelationKind.BAN, carol, alice)

    assert await sql_store.count_followers(bob) == 2
    assert await sql_store.count_following(alice) == 1
    assert await sql_store.list_followed_ids(alice) == {bob}
    assert await sql_store.list_banner_ids(alice) == {carol}


# ─── Photos, likes, comments ─────────────────────────────────────

async def test_list_photos_annotations(sql_store, sql_users):
    alice, bob, carol = sql_users["alice"], sql_users["bob"], sql_users["carol"]
    first = await sql_store.add_photo(bob, b"one")
    second = await sql_store.add_photo(bob, b"two")
    await sql_store.add_like(alice, first)
    await sql_store.add_like(carol, first)
    await sql_store.add_comment(carol, first, "nice")

    photos = await sql_store.list_photos([bob], alice)

    assert [p.id for p in photos] == [second, first]
    by_id = {p.id: p for p in photos}
    assert by_id[first].like_count == 2
    assert by_id[first].comment_count == 1
    assert by_id[first].liked_by_viewer is True
    assert by_id[second].liked_by_viewer is False
    assert by_id[second].owner_username == "bob"


async def test_list_photos_empty_owner_set(sql_store, sql_users):
    await sql_store.add_photo(sql_users["bob"], b"one")
    assert await sql_store.list_photos([], sql_users["alice"]) == []


async def test_photo_content_round_trip(sql_store, sql_users):
    pid = await sql_store.add_photo(sql_users["bob"], b"\x89PNG\r\n")
    assert await sql_store.get_photo_content(pid) == b"\x89PNG\r\n"
    assert await sql_store.get_photo_owner(pid) == sql_users["bob"]
    assert await sql_store.get_photo_owner(999) is None


async def test_duplicate_like_conflicts(sql_store, sql_users):
    pid = await sql_store.add_photo(sql_users["bob"], b"one")
    await sql_store.add_like(sql_users["alice"], pid)
    with pytest.raises(ConflictError):
        await sql_store.add_like(sql_users["alice"], pid)


async def test_delete_photo_cascades(sql_store, sql_users):
    alice, bob = sql_users["alice"], sql_users["bob"]
    pid = await sql_store.add_photo(bob, b"one")
    await sql_store.add_like(alice, pid)
    cid = await sql_store.add_comment(alice, pid, "hi")

    await sql_store.delete_photo(pid)

    assert await sql_store.get_photo_owner(pid) is None
    assert not await sql_store.like_exists(alice, pid)
    assert await sql_store.get_comment_owner(cid) is None


async def test_comments_newest_first_with_author(sql_store, sql_users):
    alice, carol = sql_users["alice"], sql_users["carol"]
    pid = await sql_store.add_photo(sql_users["bob"], b"one")
    first = await sql_store.add_comment(alice, pid, "first")
    second = await sql_store.add_comment(carol, pid, "second")

    comments = await sql_store.list_comments(pid)

    assert [c.id for c in comments] == [second, first]
    assert [c.owner_username for c in comments] == ["carol", "alice"]
    assert await sql_store.get_comment_owner(first) == alice

    await sql_store.delete_comment(first)
    assert [c.id for c in await sql_store.list_comments(pid)] == [second]
