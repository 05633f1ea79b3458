"""Seed the audio catalog from public storage URLs.

Usage:
    python -m scripts.seed_audio --category workout --duration 3:00 URL [URL ...]

Titles are derived from the file name ("Pose%20-%20ALICE.mp3" -> "Pose - ALICE").
Tracks whose URL is already in the catalog are skipped.
"""

import argparse
import asyncio
from pathlib import PurePosixPath
from urllib.parse import unquote, urlparse

import structlog

from app import models  # noqa: F401
from app.core.database import Base, async_session_factory, engine
from app.models.audio_track import AudioCategory
from app.repositories.audio_repo import AudioRepository

logger = structlog.get_logger()


def title_from_url(url: str) -> str:
    """Decode the last path segment and drop its extension."""
    filename = unquote(PurePosixPath(urlparse(url).path).name)
    return filename.rsplit(".", 1)[0] if "." in filename else filename


async def seed_audio(urls: list[str], category: AudioCategory, duration: str) -> int:
    """Insert missing tracks; return how many were added."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    added = 0
    async with async_session_factory() as session:
        repo = AudioRepository(session)
        for url in urls:
            if await repo.exists_by_url(url):
                logger.info("Track already seeded", url=url)
                continue
            title = title_from_url(url)
            await repo.create(
                title=title, duration=duration, category=category, audio_url=url
            )
            logger.info("Track inserted", title=title, category=category.value)
            added += 1
        await session.commit()

    await engine.dispose()
    return added


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed audio tracks")
    parser.add_argument("urls", nargs="+", help="Public audio file URLs")
    parser.add_argument(
        "--category",
        choices=[c.value for c in AudioCategory],
        default=AudioCategory.RELAXING.value,
        help="Catalog category",
    )
    parser.add_argument("--duration", default="3:00", help="Display duration")
    args = parser.parse_args()

    added = asyncio.run(
        seed_audio(args.urls, AudioCategory(args.category), args.duration)
    )
    print(f"Seeded {added} track(s)")


if __name__ == "__main__":
    main()
