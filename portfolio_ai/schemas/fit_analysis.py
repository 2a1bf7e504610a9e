"""Fit verdict returned by the job-description analysis."""

from typing import List, Literal

from pydantic import BaseModel, Field

Verdict = Literal["strong_fit", "worth_conversation", "probably_not"]


class FitGap(BaseModel):
    requirement: str = Field(..., description="What the job description asks for")
    gap_title: str = Field(..., description="Short title")
    explanation: str = Field(..., description="Why this is a gap for the candidate")


class FitAnalysis(BaseModel):
    """Structured verdict the model must answer with."""

    verdict: Verdict
    headline: str
    opening: str
    gaps: List[FitGap]
    transfers: str
    recommendation: str
