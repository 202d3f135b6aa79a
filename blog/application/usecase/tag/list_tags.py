"""List tags use case."""

import logfire
from pydantic import BaseModel

from blog.application.mappers import TagItem, to_tag_item
from blog.application.usecase.base import BaseUseCase
from blog.domain.service import TagService


class ListTagsRequest(BaseModel):
    """List tags request."""

    include_inactive: bool = False


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagItem]
    total: int


class ListTagsUseCase(BaseUseCase):
    """Use case for listing available tags."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            Tags ordered by name, with their count
        """
        with logfire.span(
            "list_tags.execute", include_inactive=request.include_inactive
        ):
            tags = await self.tag_service.get_all_tags(
                active_only=not request.include_inactive
            )
            tag_items = [to_tag_item(tag) for tag in tags]

            logfire.info("Tags listed", count=len(tag_items))
            return ListTagsResponse(tags=tag_items, total=len(tag_items))
