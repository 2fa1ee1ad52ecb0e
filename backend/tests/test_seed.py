"""Tests for the development database seeder."""

import pytest

from noteful.repositories import FolderRepository, NoteRepository, TagRepository
from noteful.seed import FOLDERS, NOTES, TAGS, seed_database


@pytest.mark.asyncio
async def test_seed_inserts_sample_data(db_engine, db_session):
    counts = await seed_database(db_engine)

    assert counts == {"folders": len(FOLDERS), "tags": len(TAGS), "notes": len(NOTES)}
    assert [f.name for f in await FolderRepository(db_session).list_all()] == sorted(FOLDERS)
    assert len(await TagRepository(db_session).list_all()) == len(TAGS)

    notes = {n.title: n for n in await NoteRepository(db_session).search()}
    drafts = notes["What the government doesn't want you to know about cats"]
    assert [t.name for t in drafts.tags] == ["domestic", "hybrid"]
    assert notes["7 things Lady Gaga has in common with cats"].folder_id is None


@pytest.mark.asyncio
async def test_seed_replaces_existing_data(db_engine, db_session):
    await seed_database(db_engine)
    await seed_database(db_engine)

    assert len(await NoteRepository(db_session).search()) == len(NOTES)
