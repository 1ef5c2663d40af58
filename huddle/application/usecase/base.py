"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Base use case: turns a request model into a response model by
    orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
