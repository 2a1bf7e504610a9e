"""Extract the fit verdict JSON embedded in a model reply."""

import json

from pydantic import ValidationError

from portfolio_ai.errors import ResponseParseError
from portfolio_ai.schemas.fit_analysis import FitAnalysis
from portfolio_ai.utils.helpers import extract_json_object, strip_code_fences
from portfolio_ai.utils.logger import get_logger

logger = get_logger(__name__)


def extract_fit_analysis(text: str) -> FitAnalysis:
    """
    Take the span from the first "{" to the last "}", parse it and validate it
    against FitAnalysis (verdict enum and gap keys included). No repair is tried.
    """
    candidate = extract_json_object(strip_code_fences(text))
    if candidate is None:
        logger.error("No JSON object found in fit analysis reply (%s chars)", len(text or ""))
        raise ResponseParseError("No JSON found in response")
    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as e:
        logger.error("Fit analysis reply is not valid JSON: %s", e)
        raise ResponseParseError("Failed to parse analysis response") from e
    try:
        return FitAnalysis.model_validate(parsed)
    except ValidationError as e:
        logger.error("Fit analysis reply does not match the verdict schema: %s", e)
        raise ResponseParseError("Analysis response does not match schema") from e
