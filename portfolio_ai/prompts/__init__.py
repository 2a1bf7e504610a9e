"""Prompt composition: honesty policy, section builders, composers."""

from .composer import CHAT_SECTIONS, FIT_SECTIONS, PromptSection, compose_chat_prompt, compose_fit_prompt
from .honesty import (
    HonestyTier,
    clamp_honesty_level,
    honesty_tier,
    poor_fit_guidance,
    select_honesty_directive,
)

__all__ = [
    "compose_chat_prompt",
    "compose_fit_prompt",
    "PromptSection",
    "CHAT_SECTIONS",
    "FIT_SECTIONS",
    "HonestyTier",
    "clamp_honesty_level",
    "honesty_tier",
    "poor_fit_guidance",
    "select_honesty_directive",
]
