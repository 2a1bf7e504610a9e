"""Service exports."""

from .data_store import CANDIDATE_QUERIES, fetch_candidate_data, fetch_table
from .inference import complete
from .response_parser import extract_fit_analysis
from .validator import (
    ValidationResult,
    validate_chat_messages,
    validate_job_description,
    validate_request_body,
)

__all__ = [
    "fetch_candidate_data",
    "fetch_table",
    "CANDIDATE_QUERIES",
    "complete",
    "extract_fit_analysis",
    "ValidationResult",
    "validate_chat_messages",
    "validate_job_description",
    "validate_request_body",
]
