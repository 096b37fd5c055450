"""Keyset pagination against a real database, through each repository."""

from datetime import datetime, timedelta
from uuid import UUID

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.pitchdesk.core.pagination import (
    PaginationCursor,
    PaginationQuery,
    decode_cursor,
    encode_cursor,
)
from src.pitchdesk.models import Organization, Song, User
from src.pitchdesk.repositories import (
    MemberRepository,
    OrganizationRepository,
    PitchRepository,
    SongRepository,
)
from tests.factories import (
    OrganizationFactory,
    OrganizationMemberFactory,
    PitchFactory,
    SongFactory,
    UserFactory,
)

pytestmark = pytest.mark.integration

T1 = datetime(2026, 2, 18, 10, 0, 0, 100000)
T2 = T1 + timedelta(minutes=1)
T3 = T1 + timedelta(minutes=2)
T5 = T1 + timedelta(minutes=4)

ID_A = UUID(int=0xA)
ID_B = UUID(int=0xB)


async def _seed_songs(
    session: AsyncSession,
    organization: Organization,
    uploader: User,
    rows: list[tuple[datetime, UUID | None]],
) -> list[Song]:
    songs = []
    for created_at, song_id in rows:
        kwargs = {"id": song_id} if song_id is not None else {}
        song = SongFactory.build(
            organization_id=organization.id,
            uploaded_by_id=uploader.id,
            created_at=created_at,
            **kwargs,
        )
        session.add(song)
        songs.append(song)
    await session.commit()
    return songs


async def _collect_all(fetch, limit: int) -> tuple[list, list]:
    """Follow the cursor chain to exhaustion; return items and page sizes."""
    items, sizes = [], []
    cursor = None
    while True:
        page = await fetch(PaginationQuery.from_params(limit, cursor))
        items.extend(page.items)
        sizes.append(len(page.items))
        if not page.has_more:
            assert page.next_cursor is None
            return items, sizes
        cursor = page.next_cursor


class TestSongListing:
    async def test_three_page_walk_with_shared_timestamp(
        self, db_session: AsyncSession, organization: Organization, manager: User
    ):
        """Two rows share a timestamp and are ordered by id descending."""
        songs = await _seed_songs(
            db_session,
            organization,
            manager,
            [(T1, None), (T2, None), (T3, ID_A), (T3, ID_B), (T5, None)],
        )
        t1, t2, _, _, t5 = songs
        repo = SongRepository(db_session)

        page1 = await repo.list_for_organization(organization.id, PaginationQuery(limit=2))
        assert [s.id for s in page1.items] == [t5.id, ID_B]
        assert page1.has_more is True
        assert decode_cursor(page1.next_cursor) == PaginationCursor(T3, str(ID_B))

        page2 = await repo.list_for_organization(
            organization.id, PaginationQuery.from_params(2, page1.next_cursor)
        )
        assert [s.id for s in page2.items] == [ID_A, t2.id]
        assert page2.has_more is True
        assert decode_cursor(page2.next_cursor) == PaginationCursor(T2, str(t2.id))

        page3 = await repo.list_for_organization(
            organization.id, PaginationQuery.from_params(2, page2.next_cursor)
        )
        assert [s.id for s in page3.items] == [t1.id]
        assert page3.has_more is False
        assert page3.next_cursor is None

    async def test_items_carry_uploader_profile(
        self, db_session: AsyncSession, organization: Organization, manager: User
    ):
        await _seed_songs(db_session, organization, manager, [(T1, None)])

        page = await SongRepository(db_session).list_for_organization(
            organization.id, PaginationQuery(limit=10)
        )

        (item,) = page.items
        assert item.uploader_name == manager.name
        assert item.uploader_email == manager.email
        assert item.uploaded_by_id == manager.id

    @pytest.mark.parametrize(
        ("count", "limit"),
        [(7, 3), (9, 3), (1, 1), (12, 5), (10, 100)],
    )
    async def test_cursor_chain_has_no_gaps_or_duplicates(
        self,
        db_session: AsyncSession,
        organization: Organization,
        manager: User,
        count: int,
        limit: int,
    ):
        # Timestamps collide in pairs so page boundaries land inside ties
        rows = [(T1 + timedelta(seconds=i // 2), None) for i in range(count)]
        songs = await _seed_songs(db_session, organization, manager, rows)
        repo = SongRepository(db_session)

        items, sizes = await _collect_all(
            lambda q: repo.list_for_organization(organization.id, q), limit
        )

        expected = sorted(songs, key=lambda s: (s.created_at, str(s.id)), reverse=True)
        assert [s.id for s in items] == [s.id for s in expected]
        full_pages, remainder = divmod(count, limit)
        if remainder:
            assert sizes == [limit] * full_pages + [remainder]
        else:
            assert sizes[:full_pages] == [limit] * full_pages

    async def test_scope_excludes_other_organizations(
        self, db_session: AsyncSession, organization: Organization, manager: User
    ):
        other = OrganizationFactory.build()
        db_session.add(other)
        await db_session.commit()
        await _seed_songs(db_session, other, manager, [(T5, None), (T2, None)])
        mine = await _seed_songs(db_session, organization, manager, [(T3, None), (T1, None)])
        repo = SongRepository(db_session)

        page1 = await repo.list_for_organization(organization.id, PaginationQuery(limit=1))
        page2 = await repo.list_for_organization(
            organization.id, PaginationQuery.from_params(1, page1.next_cursor)
        )

        assert [s.id for s in page1.items + page2.items] == [mine[0].id, mine[1].id]
        assert page2.has_more is False

    async def test_stale_cursor_after_boundary_row_deleted(
        self, db_session: AsyncSession, organization: Organization, manager: User
    ):
        songs = await _seed_songs(
            db_session, organization, manager, [(T5, None), (T3, None), (T2, None), (T1, None)]
        )
        repo = SongRepository(db_session)
        page1 = await repo.list_for_organization(organization.id, PaginationQuery(limit=2))

        await db_session.delete(songs[1])
        await db_session.commit()

        page2 = await repo.list_for_organization(
            organization.id, PaginationQuery.from_params(2, page1.next_cursor)
        )
        assert [s.id for s in page2.items] == [songs[2].id, songs[3].id]
        assert page2.has_more is False

    async def test_cursor_past_the_end_yields_empty_page(
        self, db_session: AsyncSession, organization: Organization, manager: User
    ):
        await _seed_songs(db_session, organization, manager, [(T2, None), (T1, None)])
        cursor = encode_cursor(PaginationCursor(T1 - timedelta(days=1), str(UUID(int=0))))

        page = await SongRepository(db_session).list_for_organization(
            organization.id, PaginationQuery.from_params(10, cursor)
        )

        assert page.items == []
        assert page.has_more is False
        assert page.next_cursor is None


class TestPitchListing:
    async def test_song_and_organization_scopes(
        self, db_session: AsyncSession, organization: Organization, manager: User
    ):
        song_a, song_b = await _seed_songs(
            db_session, organization, manager, [(T1, None), (T2, None)]
        )
        other_org = OrganizationFactory.build()
        db_session.add(other_org)
        await db_session.commit()
        (foreign_song,) = await _seed_songs(db_session, other_org, manager, [(T1, None)])

        pitches = []
        for i, song in enumerate([song_a, song_b, song_a, foreign_song]):
            pitch = PitchFactory.build(
                song_id=song.id, created_by_id=manager.id, created_at=T1 + timedelta(seconds=i)
            )
            db_session.add(pitch)
            pitches.append(pitch)
        await db_session.commit()
        repo = PitchRepository(db_session)

        song_items, _ = await _collect_all(lambda q: repo.list_for_song(song_a.id, q), 1)
        org_items, _ = await _collect_all(
            lambda q: repo.list_for_organization(organization.id, q), 2
        )

        assert [p.id for p in song_items] == [pitches[2].id, pitches[0].id]
        assert [p.id for p in org_items] == [pitches[2].id, pitches[1].id, pitches[0].id]
        assert org_items[0].target_artists == ["Dua Lipa"]


class TestOrganizationAndMemberListing:
    async def test_organizations_for_user_only_include_memberships(
        self, db_session: AsyncSession, outsider: User
    ):
        orgs = [OrganizationFactory.build(created_at=T1 + timedelta(hours=i)) for i in range(3)]
        db_session.add_all(orgs)
        await db_session.flush()
        for org in orgs[:2]:
            db_session.add(
                OrganizationMemberFactory.build(organization_id=org.id, user_id=outsider.id)
            )
        await db_session.commit()

        items, sizes = await _collect_all(
            lambda q: OrganizationRepository(db_session).list_for_user(outsider.id, q), 1
        )

        assert [o.id for o in items] == [orgs[1].id, orgs[0].id]
        assert sizes == [1, 1]

    async def test_members_ordered_by_join_time_with_profile(
        self, db_session: AsyncSession, organization: Organization
    ):
        users = [UserFactory.build(name=f"Member {i}") for i in range(3)]
        db_session.add_all(users)
        await db_session.flush()
        for i, user in enumerate(users):
            db_session.add(
                OrganizationMemberFactory.build(
                    organization_id=organization.id,
                    user_id=user.id,
                    joined_at=T1 + timedelta(minutes=i),
                )
            )
        await db_session.commit()

        items, _ = await _collect_all(
            lambda q: MemberRepository(db_session).list_for_organization(organization.id, q), 2
        )

        assert [m.name for m in items] == ["Member 2", "Member 1", "Member 0"]
        assert items[0].email == users[2].email
        assert items[0].organization_id == organization.id
