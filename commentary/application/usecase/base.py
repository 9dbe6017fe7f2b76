"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Orchestrates domain services for one request/response exchange.

    Requests and responses are pydantic models, so use cases stay
    independent of any transport.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
