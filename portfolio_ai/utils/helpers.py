"""Helper utilities for the portfolio AI backend."""

import re
from typing import Optional, Union

Number = Union[int, float]


def strip_code_fences(text: str) -> str:
    """Remove an optional markdown code block wrapper (```json ... ```)."""
    raw = (text or "").strip()
    if raw.startswith("```"):
        raw = re.sub(r"^```(?:json)?\s*", "", raw)
        raw = re.sub(r"\s*```$", "", raw)
    return raw


def extract_json_object(text: str) -> Optional[str]:
    """
    Return the substring from the first "{" to the last "}" in `text`,
    or None when there is no such span. Prose and fences around it are dropped.
    """
    if not text:
        return None
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None
    return text[start : end + 1]


def format_salary_range(salary_min: Optional[Number], salary_max: Optional[Number]) -> Optional[str]:
    """"$150,000 - $190,000" when both bounds are set, else None."""
    if not salary_min or not salary_max:
        return None
    return f"${salary_min:,.0f} - ${salary_max:,.0f}"
