#!/usr/bin/env python3
"""Seed demo users, tags and articles with Logfire error tracking.

Usage:
    python scripts/seed.py [path/to/articles.json]

The path defaults to SEED__ARTICLES_PATH.
"""

import asyncio
import json
import sys
from pathlib import Path

import logfire

from blog.application.usecase.seed import (
    ArticleSeedRow,
    SeedArticlesRequest,
    SeedArticlesUseCase,
)
from blog.config import Settings
from blog.util.di.container import create_container
from blog.util.error import ConfigurationError
from blog.util.logging import get_logger, setup_logging
from blog.util.observability import configure_logfire

logger = get_logger(__name__)


def read_rows(path: Path) -> list[ArticleSeedRow]:
    """Read seed rows from a JSON array.

    Raises:
        ConfigurationError: If the file is missing or not a JSON array
    """
    if not path.exists():
        raise ConfigurationError(f"Seed file not found: {path}")
    rows = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(rows, list):
        raise ConfigurationError(f"Seed file must contain a JSON array: {path}")
    return [ArticleSeedRow.model_validate(row) for row in rows]


async def seed(path: Path) -> int:
    container = create_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(SeedArticlesUseCase)
            result = await use_case.execute(SeedArticlesRequest(rows=read_rows(path)))
    finally:
        await container.close()

    for error in result.errors:
        logger.warning(error)
    logger.info(
        f"Seeded {result.created} articles and {result.users_created} users "
        f"({result.skipped_existing} already present, {result.skipped_invalid} invalid)"
    )
    return 0


def main() -> int:
    """Run the seed and log any errors to Logfire."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    path = Path(sys.argv[1]) if len(sys.argv) > 1 else settings.seed.articles_path

    try:
        logfire.info("Starting seed", path=str(path))
        return asyncio.run(seed(path))
    except Exception as e:
        logfire.error(
            "Seed failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
