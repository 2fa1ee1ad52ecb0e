"""
Noteful Backend — Database Seeder
==================================

What:  Drops and recreates every table, then inserts a small sample data set.
How:   python -m noteful.seed   (uses DATABASE_URL like the server does)

Intended for local development and demos; it destroys existing data.
"""

import asyncio
import logging
import sys
from typing import Dict, List

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from noteful.config import settings
from noteful.database import Base, build_engine
from noteful.models import Folder, Note, Tag
from noteful.models.tag import normalize_tag_name
from noteful.repositories import NoteRepository

logger = logging.getLogger(__name__)

FOLDERS: List[str] = ["Archive", "Drafts", "Personal", "Work"]

TAGS: List[str] = ["breed", "hybrid", "domestic", "feral"]

NOTES: List[Dict] = [
    {
        "title": "5 life lessons learned from cats",
        "content": "Lorem ipsum dolor sit amet, consectetur adipiscing elit.",
        "folder": "Archive",
        "tags": ["breed"],
    },
    {
        "title": "What the government doesn't want you to know about cats",
        "content": "Posuere sollicitudin aliquam ultrices sagittis orci a.",
        "folder": "Drafts",
        "tags": ["hybrid", "domestic"],
    },
    {
        "title": "The most boring article about cats you'll ever read",
        "content": "Feugiat in ante metus dictum at tempor commodo ullamcorper.",
        "folder": "Personal",
        "tags": [],
    },
    {
        "title": "7 things Lady Gaga has in common with cats",
        "content": "Nibh venenatis cras sed felis eget velit aliquet sagittis.",
        "folder": None,
        "tags": ["feral"],
    },
]


async def seed_database(engine: AsyncEngine) -> Dict[str, int]:
    """Rebuild the schema and insert the sample data. Returns inserted counts."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        folders = {name: Folder(name=name) for name in FOLDERS}
        tags = {name: Tag(name=name, normalized=normalize_tag_name(name)) for name in TAGS}
        session.add_all([*folders.values(), *tags.values()])
        await session.flush()

        repo = NoteRepository(session)
        for item in NOTES:
            folder = folders.get(item["folder"]) if item["folder"] else None
            note = Note(
                title=item["title"],
                content=item["content"],
                folder_id=folder.id if folder else None,
            )
            await repo.insert_with_tags(note, [tags[name].id for name in item["tags"]])

        await session.commit()

    counts = {"folders": len(FOLDERS), "tags": len(TAGS), "notes": len(NOTES)}
    for table, count in counts.items():
        logger.info("Inserted %d %s", count, table)
    return counts


async def _main() -> None:
    engine = build_engine(settings.database_url)
    try:
        await seed_database(engine)
    finally:
        await engine.dispose()


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    asyncio.run(_main())


if __name__ == "__main__":
    main()
