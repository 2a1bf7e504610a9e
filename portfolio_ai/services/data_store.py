"""Candidate data aggregator: seven concurrent read-only queries against Supabase."""

import asyncio
from typing import Any, List, NamedTuple, Optional, Type

import httpx
from postgrest.exceptions import APIError
from pydantic import BaseModel, ValidationError
from supabase import AsyncClient, acreate_client

from portfolio_ai import config
from portfolio_ai.errors import ConfigurationError, DataStoreError
from portfolio_ai.schemas.candidate import (
    FAQ,
    AIInstruction,
    CandidateData,
    CandidateProfile,
    Experience,
    Gap,
    Skill,
    ValuesCulture,
)
from portfolio_ai.utils.logger import get_logger

logger = get_logger(__name__)


class TableQuery(NamedTuple):
    table: str
    model: Type[BaseModel]
    single: bool = False
    # Ascending sort column
    order: Optional[str] = None
    # Column holding the candidate identifier
    owner_column: str = "candidate_id"


# Keyed by CandidateData field name
CANDIDATE_QUERIES = {
    "profile": TableQuery("candidate_profile", CandidateProfile, single=True, owner_column="id"),
    "experiences": TableQuery("experiences", Experience, order="display_order"),
    "skills": TableQuery("skills", Skill),
    "gaps": TableQuery("gaps_weaknesses", Gap),
    "values": TableQuery("values_culture", ValuesCulture, single=True),
    "faqs": TableQuery("faq_responses", FAQ),
    "instructions": TableQuery("ai_instructions", AIInstruction, order="priority"),
}


async def build_client() -> AsyncClient:
    """Supabase client authenticated with the service role key."""
    if not config.SUPABASE_URL or not config.SUPABASE_SERVICE_ROLE_KEY:
        logger.error("SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is not set; cannot load candidate data")
        raise ConfigurationError("Candidate data store is not configured")
    return await acreate_client(config.SUPABASE_URL, config.SUPABASE_SERVICE_ROLE_KEY)


def _build_query(client: AsyncClient, query: TableQuery, candidate_id: Optional[str]):
    request = client.table(query.table).select("*")
    if candidate_id:
        request = request.eq(query.owner_column, candidate_id)
    if query.order:
        request = request.order(query.order, desc=False)
    if query.single:
        request = request.limit(1)
    return request


def _parse_rows(query: TableQuery, rows: List[dict]) -> List[BaseModel]:
    """Validate rows; a malformed row is logged and skipped rather than failing the request."""
    parsed = []
    for row in rows:
        try:
            parsed.append(query.model.model_validate(row))
        except ValidationError as e:
            logger.warning("Skipping invalid %s row %s: %s", query.table, row.get("id"), e)
    return parsed


async def fetch_table(
    client: AsyncClient,
    query: TableQuery,
    candidate_id: Optional[str] = None,
) -> Any:
    """
    Read one table. Returns a list of models, or for singletons the first model
    or None. Query errors and transport failures raise DataStoreError.
    """
    try:
        response = await _build_query(client, query, candidate_id).execute()
    except APIError as e:
        logger.error("Data store rejected query on %s: code=%s message=%s", query.table, e.code, e.message)
        raise DataStoreError(f"{query.table}: {e.code} {e.message}") from e
    except (httpx.HTTPError, ValueError) as e:
        logger.error("Data store request failed for %s: %s", query.table, e)
        raise DataStoreError(f"{query.table}: {e}") from e

    rows = response.data
    if not isinstance(rows, list):
        rows = [rows] if isinstance(rows, dict) else []
    models = _parse_rows(query, rows)
    if query.single:
        return models[0] if models else None
    return models


async def _gather_or_cancel(coros: List) -> List:
    """Run coroutines concurrently; on the first failure cancel and drain the rest, then re-raise."""
    tasks = [asyncio.create_task(c) for c in coros]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def fetch_candidate_data(
    candidate_id: Optional[str] = None,
    client: Optional[AsyncClient] = None,
) -> CandidateData:
    """
    Load the full candidate snapshot with all seven reads in flight at once.
    `candidate_id` defaults to CANDIDATE_ID from config; when neither is set the
    first row of each table is used (single-candidate deployment).
    """
    candidate_id = candidate_id or config.CANDIDATE_ID
    owns_client = client is None
    if owns_client:
        client = await build_client()
    try:
        names = list(CANDIDATE_QUERIES)
        results = await _gather_or_cancel(
            [fetch_table(client, CANDIDATE_QUERIES[n], candidate_id) for n in names]
        )
    finally:
        if owns_client:
            await client.postgrest.aclose()

    data = CandidateData(**dict(zip(names, results)))
    logger.info(
        "Loaded candidate data: candidate=%s experiences=%s skills=%s gaps=%s faqs=%s instructions=%s",
        candidate_id or "default",
        len(data.experiences),
        len(data.skills),
        len(data.gaps),
        len(data.faqs),
        len(data.instructions),
    )
    return data
