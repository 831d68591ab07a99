"""
Use case contract.

A use case is one caller-facing operation built out of the pipeline
generators. It takes a request object and returns a response object; it does
not know about UIs, storage or transport.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class UseCase(ABC, Generic[RequestT, ResponseT]):
    """Async operation from ``RequestT`` to ``ResponseT``."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        """Run the operation. Domain errors from ``storyreel.core.exceptions`` propagate unchanged."""
        raise NotImplementedError
