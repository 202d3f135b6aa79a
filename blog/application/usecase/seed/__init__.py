"""Seed use cases."""

from .seed_articles import (
    ArticleSeedRow,
    SeedArticlesRequest,
    SeedArticlesResponse,
    SeedArticlesUseCase,
)

__all__ = [
    "ArticleSeedRow",
    "SeedArticlesRequest",
    "SeedArticlesResponse",
    "SeedArticlesUseCase",
]
