"""System prompt composition for the chat and job-fit paths."""

from typing import Callable, NamedTuple, Optional, Sequence

from portfolio_ai.prompts import sections as s
from portfolio_ai.prompts.honesty import (
    clamp_honesty_level,
    poor_fit_guidance,
    select_honesty_directive,
    tone_summary,
)
from portfolio_ai.schemas.candidate import CandidateData


class PromptSection(NamedTuple):
    name: str
    render: Callable[[CandidateData, int], str]


def _honesty(data: CandidateData, level: int) -> str:
    return select_honesty_directive(level, name=s.candidate_name(data.profile))


CHAT_SECTIONS: Sequence[PromptSection] = (
    PromptSection("identity", lambda d, lvl: s.chat_identity_section(d.profile)),
    PromptSection("honesty", _honesty),
    PromptSection(
        "instructions",
        lambda d, lvl: s.instructions_section(
            d.instructions, heading=f"CUSTOM INSTRUCTIONS FROM {s.candidate_name(d.profile)}"
        ),
    ),
    PromptSection("profile", lambda d, lvl: s.profile_section(d.profile, include_logistics=True)),
    PromptSection("experience", lambda d, lvl: s.experience_section(d.experiences, private=True)),
    PromptSection("skills", lambda d, lvl: s.skills_section(d.skills, detailed=True)),
    PromptSection("gaps", lambda d, lvl: s.gaps_section(d.gaps, detailed=True)),
    PromptSection("values", lambda d, lvl: s.values_section(d.values, detailed=True)),
    PromptSection("faq", lambda d, lvl: s.faq_section(d.faqs)),
    PromptSection(
        "guidelines",
        lambda d, lvl: s.chat_guidelines_section(d.profile, tone_summary(lvl), poor_fit_guidance(lvl)),
    ),
)

FIT_SECTIONS: Sequence[PromptSection] = (
    PromptSection("identity", lambda d, lvl: s.fit_identity_section(d.profile)),
    PromptSection("honesty", _honesty),
    PromptSection(
        "instructions",
        lambda d, lvl: s.instructions_section(d.instructions, heading="CUSTOM INSTRUCTIONS", fallback="None"),
    ),
    PromptSection("profile", lambda d, lvl: s.profile_section(d.profile, include_logistics=False)),
    PromptSection("experience", lambda d, lvl: s.experience_section(d.experiences, private=False)),
    PromptSection("skills", lambda d, lvl: s.skills_section(d.skills, detailed=False)),
    PromptSection("gaps", lambda d, lvl: s.gaps_section(d.gaps, detailed=False)),
    PromptSection("values", lambda d, lvl: s.values_section(d.values, detailed=False)),
    PromptSection("output", lambda d, lvl: s.fit_output_section(d.profile, tone_summary(lvl))),
)


def compose(
    sections: Sequence[PromptSection],
    data: CandidateData,
    honesty_level: Optional[int] = None,
) -> str:
    """Render `sections` in order. Same data and level always give the same text."""
    level = clamp_honesty_level(data.honesty_level if honesty_level is None else honesty_level)
    return "\n\n".join(section.render(data, level) for section in sections)


def compose_chat_prompt(data: CandidateData, honesty_level: Optional[int] = None) -> str:
    """System prompt for the first-person chat widget (includes private context and FAQs)."""
    return compose(CHAT_SECTIONS, data, honesty_level)


def compose_fit_prompt(data: CandidateData, honesty_level: Optional[int] = None) -> str:
    """System prompt for a single JSON fit verdict against a job description."""
    return compose(FIT_SECTIONS, data, honesty_level)
