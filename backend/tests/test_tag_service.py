"""
Noteful Backend — Tag Service Unit Tests
=========================================

What:  TagService business rules with the repositories patched out.

What we test:
    ✅ Tag writes keep `normalized` in step with `name`
    ✅ Store duplicates are re-raised with the tag message
    ✅ Malformed ids fail before any store call
    ✅ Delete pulls the tag out of every note
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest

from noteful.exceptions import DuplicateKeyError, InvalidIdentifierError, NotFoundError
from noteful.models.tag import Tag
from noteful.services.tag_service import TagService


def make_tag(name="Urgent"):
    now = datetime.now(timezone.utc)
    return Tag(id=uuid4(), name=name, normalized=name.lower(), created_at=now, updated_at=now)


class TestTagService:

    def setup_method(self):
        self.service = TagService()

    @pytest.mark.asyncio
    async def test_create_sets_normalized(self, mock_db_session):
        with patch("noteful.services.tag_service.TagRepository") as repo_cls:
            repo_cls.return_value.insert = AsyncMock(side_effect=lambda tag: _stamp(tag))
            result = await self.service.create_tag(mock_db_session, "Urgent")

        inserted = repo_cls.return_value.insert.await_args.args[0]
        assert inserted.normalized == "urgent"
        assert result.normalized == "urgent"

    @pytest.mark.asyncio
    async def test_update_recomputes_normalized(self, mock_db_session):
        tag = make_tag("Later")
        with patch("noteful.services.tag_service.TagRepository") as repo_cls:
            repo_cls.return_value.update_by_id = AsyncMock(return_value=tag)
            await self.service.update_tag(mock_db_session, str(tag.id), "Someday")

        fields = repo_cls.return_value.update_by_id.await_args.args[1]
        assert fields == {"name": "Someday", "normalized": "someday"}

    @pytest.mark.asyncio
    async def test_create_duplicate_translated(self, mock_db_session):
        with patch("noteful.services.tag_service.TagRepository") as repo_cls:
            repo_cls.return_value.insert = AsyncMock(side_effect=DuplicateKeyError())
            with pytest.raises(DuplicateKeyError, match="That tag already exists"):
                await self.service.create_tag(mock_db_session, "Urgent")

    @pytest.mark.asyncio
    async def test_get_malformed_id(self, mock_db_session):
        with pytest.raises(InvalidIdentifierError, match="The `id` is not valid"):
            await self.service.get_tag(mock_db_session, "99")

    @pytest.mark.asyncio
    async def test_delete_removes_tag_from_notes(self, mock_db_session):
        tag_id = uuid4()
        with patch("noteful.services.tag_service.TagRepository") as repo_cls, \
             patch("noteful.services.tag_service.NoteRepository") as note_repo_cls:
            repo_cls.return_value.delete_by_id = AsyncMock(return_value=True)
            note_repo_cls.return_value.remove_tag_reference = AsyncMock(return_value=3)

            await self.service.delete_tag(mock_db_session, str(tag_id))

        note_repo_cls.return_value.remove_tag_reference.assert_awaited_once_with(tag_id)

    @pytest.mark.asyncio
    async def test_update_missing_tag(self, mock_db_session):
        with patch("noteful.services.tag_service.TagRepository") as repo_cls:
            repo_cls.return_value.update_by_id = AsyncMock(return_value=None)
            with pytest.raises(NotFoundError):
                await self.service.update_tag(mock_db_session, str(uuid4()), "Later")


def _stamp(tag):
    now = datetime.now(timezone.utc)
    tag.id = uuid4()
    tag.created_at = now
    tag.updated_at = now
    return tag
