"""Async runner utilities for CLI commands."""

import asyncio
from collections.abc import Awaitable, Callable, Coroutine
from typing import Any, TypeVar

from app.services.dictionary import DictionaryService

T = TypeVar("T")


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """Run an async coroutine from synchronous CLI code."""
    return asyncio.run(coro)


async def with_dictionary_service(func: Callable[[DictionaryService], Awaitable[T]]) -> T:
    """Call func with a fresh DictionaryService and close it afterwards.

    CLI invocations are one-shot, so the cache only lives for the command.
    """
    service = DictionaryService()
    try:
        return await func(service)
    finally:
        await service.close()
