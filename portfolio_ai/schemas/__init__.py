"""Schema exports."""

from .candidate import (
    FAQ,
    AIInstruction,
    CandidateData,
    CandidateProfile,
    Experience,
    Gap,
    Skill,
    ValuesCulture,
)
from .chat import ChatMessage, ChatResponse
from .fit_analysis import FitAnalysis, FitGap

__all__ = [
    "CandidateProfile",
    "Experience",
    "Skill",
    "Gap",
    "ValuesCulture",
    "FAQ",
    "AIInstruction",
    "CandidateData",
    "ChatMessage",
    "ChatResponse",
    "FitAnalysis",
    "FitGap",
]
