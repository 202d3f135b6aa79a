"""Use case base."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """One application operation: validate input, call services, map output."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        """Run the operation for a request model and return a response model."""
