"""Inference gateway: one chat-completion round trip, no retries."""

from typing import List, Optional, Sequence

from openai import APIError, AsyncOpenAI

from portfolio_ai import config
from portfolio_ai.errors import ConfigurationError, UpstreamServiceError
from portfolio_ai.schemas.chat import ChatMessage
from portfolio_ai.utils.logger import get_logger

logger = get_logger(__name__)


def build_client() -> AsyncOpenAI:
    if not config.OPENAI_API_KEY:
        logger.error("OPENAI_API_KEY is not set; cannot call the completion API")
        raise ConfigurationError("OPENAI_API_KEY is not configured")
    # Single attempt per request; the SDK would otherwise retry on 5xx/429
    return AsyncOpenAI(api_key=config.OPENAI_API_KEY, max_retries=0)


def build_messages(system_prompt: str, messages: Sequence[ChatMessage]) -> List[dict]:
    return [{"role": "system", "content": system_prompt}] + [
        {"role": m.role, "content": m.content} for m in messages
    ]


async def complete(
    system_prompt: str,
    messages: Sequence[ChatMessage],
    max_tokens: int,
    client: Optional[AsyncOpenAI] = None,
) -> str:
    """
    Send the composed system prompt plus conversation and return the text of the
    top choice ("" when the model returned no text). API failures are logged
    with status detail and raised as UpstreamServiceError.
    """
    client = client or build_client()
    try:
        response = await client.chat.completions.create(
            model=config.MODEL_NAME,
            messages=build_messages(system_prompt, messages),
            max_tokens=max_tokens,
        )
    except APIError as e:
        status = getattr(e, "status_code", None)
        logger.error("Completion API error: status=%s type=%s", status, type(e).__name__)
        raise UpstreamServiceError(f"Completion API error: {status}") from e

    choice = response.choices[0] if response.choices else None
    if not choice or not choice.message or not choice.message.content:
        logger.warning("Completion API returned no text (model=%s)", config.MODEL_NAME)
        return ""
    return choice.message.content
