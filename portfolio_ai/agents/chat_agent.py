"""Chat agent: validate history, load candidate data, compose prompt, ask the model."""

from typing import Any, Optional

from openai import AsyncOpenAI
from supabase import AsyncClient

from portfolio_ai.config import CHAT_MAX_TOKENS
from portfolio_ai.prompts.composer import compose_chat_prompt
from portfolio_ai.services.data_store import fetch_candidate_data
from portfolio_ai.services.inference import complete
from portfolio_ai.services.validator import validate_chat_messages
from portfolio_ai.utils.logger import get_logger

logger = get_logger(__name__)

FALLBACK_REPLY = "I'm sorry, I couldn't generate a response."


async def run_chat_agent(
    messages: Any,
    candidate_id: Optional[str] = None,
    store_client: Optional[AsyncClient] = None,
    llm_client: Optional[AsyncOpenAI] = None,
) -> str:
    """
    Answer the latest visitor message in first person as the candidate.
    Raises InputValidationError before any I/O when the history is invalid.
    """
    history = validate_chat_messages(messages).unwrap()
    data = await fetch_candidate_data(candidate_id, client=store_client)
    system_prompt = compose_chat_prompt(data)
    reply = await complete(system_prompt, history, max_tokens=CHAT_MAX_TOKENS, client=llm_client)
    logger.info(
        "Chat agent finished: turns=%s honesty=%s prompt_chars=%s reply_chars=%s",
        len(history),
        data.honesty_level,
        len(system_prompt),
        len(reply),
    )
    return reply or FALLBACK_REPLY
