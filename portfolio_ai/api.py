"""
HTTP entry points for the public profile page: chat widget and job-fit analyzer.
Both accept and return JSON; errors are always {"error": "..."}.
"""

import json
from typing import Any, Optional

from fastapi import Depends, FastAPI, Header, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from openai import AsyncOpenAI
from supabase import AsyncClient

from portfolio_ai import __version__
from portfolio_ai.agents.chat_agent import run_chat_agent
from portfolio_ai.agents.fit_agent import run_fit_agent
from portfolio_ai.config import CORS_ALLOW_ORIGINS
from portfolio_ai.errors import GENERIC_ERROR_MESSAGE, InputValidationError, PortfolioAIError
from portfolio_ai.schemas.chat import ChatResponse
from portfolio_ai.schemas.fit_analysis import FitAnalysis
from portfolio_ai.services.validator import validate_request_body
from portfolio_ai.utils.logger import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="Portfolio AI API",
    description="Candidate chat and honest job-fit analysis",
    version=__version__,
)

# Public page and admin panel live on other origins; preflight is answered here
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type", "x-candidate-id"],
)


# ============================================================================
# DEPENDENCIES (overridden in tests)
# ============================================================================


def get_store_client() -> Optional[AsyncClient]:
    """None lets the data store build a client from config per request."""
    return None


def get_llm_client() -> Optional[AsyncOpenAI]:
    return None


def get_candidate_id(x_candidate_id: Optional[str] = Header(None, alias="X-Candidate-ID")) -> Optional[str]:
    return x_candidate_id or None


# ============================================================================
# ERROR HANDLING
# ============================================================================


@app.exception_handler(PortfolioAIError)
async def portfolio_error_handler(request: Request, exc: PortfolioAIError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s: %s", request.method, request.url.path, type(exc).__name__, exc)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s crashed", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": GENERIC_ERROR_MESSAGE})


async def read_json_body(request: Request) -> dict:
    """Parse the body as a JSON object or raise a 400."""
    try:
        body: Any = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise InputValidationError("Invalid JSON body")
    return validate_request_body(body).unwrap()


# ============================================================================
# ROUTES
# ============================================================================


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@app.options("/{path:path}")
async def options_ok(path: str) -> Response:
    """Plain OPTIONS without preflight headers; real preflights are answered by CORSMiddleware."""
    return Response(status_code=200)


@app.post("/chat", response_model=ChatResponse)
async def chat(
    request: Request,
    candidate_id: Optional[str] = Depends(get_candidate_id),
    store_client: Optional[AsyncClient] = Depends(get_store_client),
    llm_client: Optional[AsyncOpenAI] = Depends(get_llm_client),
) -> ChatResponse:
    """
    Chat with the candidate's AI representative.

    - **messages**: ordered list of {role: "user"|"assistant", content}
    """
    body = await read_json_body(request)
    reply = await run_chat_agent(
        body.get("messages"),
        candidate_id=candidate_id,
        store_client=store_client,
        llm_client=llm_client,
    )
    return ChatResponse(message=reply)


@app.post("/analyze-jd", response_model=FitAnalysis)
async def analyze_jd(
    request: Request,
    candidate_id: Optional[str] = Depends(get_candidate_id),
    store_client: Optional[AsyncClient] = Depends(get_store_client),
    llm_client: Optional[AsyncOpenAI] = Depends(get_llm_client),
) -> FitAnalysis:
    """
    Honest fit verdict for a pasted job description.

    - **jobDescription**: the job description text (50-50,000 characters)
    """
    body = await read_json_body(request)
    return await run_fit_agent(
        body.get("jobDescription"),
        candidate_id=candidate_id,
        store_client=store_client,
        llm_client=llm_client,
    )
