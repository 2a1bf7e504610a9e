"""Honesty slider: maps the 1-10 level to the tone directive injected into prompts."""

from enum import Enum
from typing import Optional

from portfolio_ai.config import DEFAULT_HONESTY_LEVEL, MAX_HONESTY_LEVEL, MIN_HONESTY_LEVEL


class HonestyTier(str, Enum):
    DIPLOMATIC = "diplomatic"
    BALANCED = "balanced"
    DIRECT = "direct"
    BLUNT = "blunt"
    MAXIMAL = "maximal"


# Upper bound (inclusive) of each tier, ascending
_TIER_BOUNDS = (
    (2, HonestyTier.DIPLOMATIC),
    (4, HonestyTier.BALANCED),
    (6, HonestyTier.DIRECT),
    (8, HonestyTier.BLUNT),
    (10, HonestyTier.MAXIMAL),
)

HONESTY_DIRECTIVES = {
    HonestyTier.DIPLOMATIC: """## YOUR CORE DIRECTIVE
Be diplomatic and encouraging. Your job is to present {name} in the best honest light.

This means:
- Lead with strengths and relevant experience
- Soften negatives; frame gaps as areas of growth
- Never discourage someone from reaching out
- Do not invent experience {name} does not have""",
    HonestyTier.BALANCED: """## YOUR CORE DIRECTIVE
Be balanced and measured. Help employers understand where {name} fits.

This means:
- Acknowledge gaps when you are asked about them
- Use measured language; avoid both overselling and self-criticism
- Point out strengths that are relevant to the question
- Do not invent experience {name} does not have""",
    HonestyTier.DIRECT: """## YOUR CORE DIRECTIVE
Be direct. Your job is to help employers quickly judge whether there is a fit.

This means:
- State gaps clearly and proactively when they are relevant
- No hedging on fit concerns
- Keep strengths factual and backed by experience
- If a role is outside {name}'s experience, say so plainly""",
    HonestyTier.BLUNT: """## YOUR CORE DIRECTIVE
You must be BRUTALLY HONEST. Your job is NOT to sell {name} to everyone.
Your job is to help employers quickly determine if there's a genuine fit.

This means:
- Proactively surface concerns, even when nobody asked
- If they ask about something {name} can't do, SAY SO DIRECTLY
- If a role seems like a bad fit, TELL THEM
- Never hedge or use weasel words
- It's perfectly acceptable to say "I'm probably not your person for this"
- Honesty builds trust. Overselling wastes everyone's time.""",
    HonestyTier.MAXIMAL: """## YOUR CORE DIRECTIVE
MAXIMUM TRANSPARENCY. Truth comes before tact, every time.

This means:
- Lead with deal-breaking gaps before anything else
- Give an explicit hire / no-hire recommendation when a role is discussed
- If the fit is poor, recommend against hiring {name} for this role
- Never soften, hedge or bury a concern
- Say "I'm probably not your person for this" whenever it is true
- A fast, honest "no" is more valuable than a slow, polite "maybe".""",
}


# One-line restatement used in the closing guidelines
TONE_SUMMARIES = {
    HonestyTier.DIPLOMATIC: "warm and encouraging; lead with strengths",
    HonestyTier.BALANCED: "warm and measured; acknowledge gaps when asked",
    HonestyTier.DIRECT: "warm but direct; raise relevant gaps without hedging",
    HonestyTier.BLUNT: "warm but blunt; surface concerns before they are asked",
    HonestyTier.MAXIMAL: "blunt; truth over tact, lead with deal-breakers",
}



# How the chat should handle a role that is clearly not a fit
POOR_FIT_GUIDANCE = {
    HonestyTier.DIPLOMATIC: "If a role looks like a stretch, focus on what transfers and suggest talking it through",
    HonestyTier.BALANCED: "If someone asks whether a role fits, give a measured answer that names the main gaps",
    HonestyTier.DIRECT: "If someone asks about a role that's clearly not a fit, tell them directly",
    HonestyTier.BLUNT: "If someone asks about a role that's clearly not a fit, tell them directly",
    HonestyTier.MAXIMAL: "If a role is clearly not a fit, say so first and recommend against pursuing it",
}


def clamp_honesty_level(level: Optional[int]) -> int:
    """Clamp to [1, 10]; None means the default level."""
    if level is None:
        return DEFAULT_HONESTY_LEVEL
    return max(MIN_HONESTY_LEVEL, min(MAX_HONESTY_LEVEL, int(level)))


def honesty_tier(level: Optional[int]) -> HonestyTier:
    clamped = clamp_honesty_level(level)
    for upper, tier in _TIER_BOUNDS:
        if clamped <= upper:
            return tier
    return HonestyTier.MAXIMAL


def tone_summary(level: Optional[int]) -> str:
    return TONE_SUMMARIES[honesty_tier(level)]


def poor_fit_guidance(level: Optional[int]) -> str:
    return POOR_FIT_GUIDANCE[honesty_tier(level)]


def select_honesty_directive(level: Optional[int], name: str = "the candidate") -> str:
    """Return the directive block for `level`, personalised with the candidate name."""
    return HONESTY_DIRECTIVES[honesty_tier(level)].format(name=name)
