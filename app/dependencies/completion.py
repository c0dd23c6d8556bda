from functools import lru_cache
from typing import Any, List, Protocol

from openai import AsyncOpenAI

from app.config import HF_ACCESS_TOKEN, HF_BASE_URL


class ChatCompletionClient(Protocol):
    async def complete(self, messages: List[dict], model: str, max_tokens: int) -> Any:
        ...


class OpenAICompletionClient:
    """
    OpenAI 호환 Chat Completion API 클라이언트 래퍼
    """

    def __init__(self, client: AsyncOpenAI):
        self._client = client

    async def complete(self, messages: List[dict], model: str, max_tokens: int) -> Any:
        return await self._client.chat.completions.create(
            model=model,
            messages=messages,
            max_tokens=max_tokens,
        )


@lru_cache()
def get_completion_client() -> ChatCompletionClient:
    # 토큰이 없어도 서버는 시작되며, 호출 시점에 제공자가 요청을 거부합니다.
    return OpenAICompletionClient(AsyncOpenAI(api_key=HF_ACCESS_TOKEN or "", base_url=HF_BASE_URL))
