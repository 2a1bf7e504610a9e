"""Fit agent: honest job-description fit verdict for the candidate."""

from typing import Any, Optional

from openai import AsyncOpenAI
from supabase import AsyncClient

from portfolio_ai.config import FIT_MAX_TOKENS
from portfolio_ai.prompts.composer import compose_fit_prompt
from portfolio_ai.schemas.chat import ChatMessage
from portfolio_ai.schemas.fit_analysis import FitAnalysis
from portfolio_ai.services.data_store import fetch_candidate_data
from portfolio_ai.services.inference import complete
from portfolio_ai.services.response_parser import extract_fit_analysis
from portfolio_ai.services.validator import validate_job_description
from portfolio_ai.utils.logger import get_logger

logger = get_logger(__name__)

FIT_REQUEST_TEMPLATE = "Please analyze this job description and assess my fit:\n\n{job_description}"


def build_fit_request(job_description: str) -> ChatMessage:
    return ChatMessage(role="user", content=FIT_REQUEST_TEMPLATE.format(job_description=job_description))


async def run_fit_agent(
    job_description: Any,
    candidate_id: Optional[str] = None,
    store_client: Optional[AsyncClient] = None,
    llm_client: Optional[AsyncOpenAI] = None,
) -> FitAnalysis:
    """
    Run the fit analysis: validate the JD, load data, compose the verdict prompt,
    call the model once and parse the JSON verdict out of its reply.
    """
    jd = validate_job_description(job_description).unwrap()
    data = await fetch_candidate_data(candidate_id, client=store_client)
    system_prompt = compose_fit_prompt(data)
    raw = await complete(system_prompt, [build_fit_request(jd)], max_tokens=FIT_MAX_TOKENS, client=llm_client)
    analysis = extract_fit_analysis(raw)
    logger.info(
        "Fit agent finished: jd_chars=%s verdict=%s gaps=%s",
        len(jd),
        analysis.verdict,
        len(analysis.gaps),
    )
    return analysis
