"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    Use cases translate domain errors into response objects; they do not
    raise for expected failures.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
