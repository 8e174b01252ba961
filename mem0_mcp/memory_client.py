"""
Memory Operations Adapter

Thin wrapper over the hosted Mem0 service. Service failures never raise out
of this module: add_memory reports them as False, search_memories as an
empty result.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from mem0 import AsyncMemoryClient

from .logging_utils import get_logger

logger = get_logger(__name__)

NO_MEMORIES_TEXT = "No memories found"


@dataclass(frozen=True)
class MemoryRecord:
    text: str
    score: Optional[float] = None

    @classmethod
    def from_payload(cls, item: Any) -> "MemoryRecord":
        if isinstance(item, dict):
            return cls(text=str(item.get("memory", "")), score=item.get("score"))
        return cls(text=str(item))


def _format_score(score: Optional[float]) -> str:
    if score is None:
        return "n/a"
    if isinstance(score, float) and score.is_integer():
        return str(int(score))
    return str(score)


def format_memories(records: Iterable[MemoryRecord]) -> str:
    """Render search results as text, one block per record."""
    blocks = [
        f"Memory: {record.text}\nRelevance: {_format_score(record.score)}\n---"
        for record in records
    ]
    return "\n".join(blocks) or NO_MEMORIES_TEXT


def _extract_results(payload: Any) -> List[Any]:
    # v1 search returns a bare list, v2 wraps it as {"results": [...]}
    if isinstance(payload, dict):
        payload = payload.get("results") or []
    return list(payload or [])


class MemoryAdapter:
    """
    add/search against Mem0 for a subject (user_id).

    The SDK client validates its key on construction with a blocking HTTP
    call, so it is built lazily in a worker thread: a missing MEM0_API_KEY
    fails individual requests instead of startup, and the check never stalls
    the event loop.
    """

    def __init__(self, api_key: str = "", client: Optional[Any] = None):
        self._api_key = api_key
        self._client = client

    async def _get_client(self) -> Any:
        if self._client is None:
            self._client = await asyncio.to_thread(AsyncMemoryClient, api_key=self._api_key or None)
        return self._client

    async def add_memory(self, content: str, user_id: str) -> bool:
        messages = [{"role": "user", "content": content}]
        try:
            client = await self._get_client()
            await client.add(messages, user_id=user_id)
            return True
        except Exception as e:
            logger.error(f"Error adding memory for user '{user_id}': {e}")
            return False

    async def search_memories(self, query: str, user_id: str) -> List[MemoryRecord]:
        try:
            client = await self._get_client()
            payload = await client.search(query, user_id=user_id)
        except Exception as e:
            logger.error(f"Error searching memories for user '{user_id}': {e}")
            return []
        return [MemoryRecord.from_payload(item) for item in _extract_results(payload)]
