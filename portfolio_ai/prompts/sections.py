"""
Prompt sections. Each builder is a pure function of one record (or list of
records) and returns a block of text with its own fallback wording, so the
composer only decides which sections go in and in what order.
"""

from typing import Iterable, List, Optional

from portfolio_ai.schemas.candidate import (
    FAQ,
    AIInstruction,
    CandidateProfile,
    Experience,
    Gap,
    Skill,
    ValuesCulture,
)
from portfolio_ai.utils.date_format import format_month_year
from portfolio_ai.utils.helpers import format_salary_range

NOT_SPECIFIED = "Not specified"
NONE_LISTED = "None listed"
NO_EXPERIENCES = "No experiences listed."
NO_PITCH = "No elevator pitch provided."
STILL_HERE = "N/A - still here"
DEFAULT_NAME = "the candidate"
DEFAULT_TITLE = "professional"

SKILL_CATEGORIES = (
    ("strong", "Strong"),
    ("moderate", "Moderate"),
)

FIT_RESPONSE_SCHEMA = """{
  "verdict": "strong_fit" | "worth_conversation" | "probably_not",
  "headline": "Brief headline for the assessment",
  "opening": "1-2 sentence direct assessment in first person",
  "gaps": [
    {
      "requirement": "What the JD asks for",
      "gap_title": "Short title",
      "explanation": "Why this is a gap for me"
    }
  ],
  "transfers": "What skills/experience DO transfer",
  "recommendation": "Direct advice - can be 'don't hire me for this'"
}"""


def _or(value: Optional[str], fallback: str = NOT_SPECIFIED) -> str:
    if value is None:
        return fallback
    text = str(value).strip()
    return text or fallback


def _number(value: float) -> str:
    """5.0 -> "5", 2.5 -> "2.5"."""
    return str(int(value)) if float(value).is_integer() else f"{value:g}"


def candidate_name(profile: Optional[CandidateProfile]) -> str:
    return _or(profile.name if profile else None, DEFAULT_NAME)


def candidate_title(profile: Optional[CandidateProfile]) -> str:
    return _or(profile.title if profile else None, DEFAULT_TITLE)


# ---- Framing ----


def chat_identity_section(profile: Optional[CandidateProfile]) -> str:
    name = candidate_name(profile)
    return (
        f"You are an AI assistant representing {name}, a {candidate_title(profile)}.\n"
        f"You speak in first person AS {name}."
    )


def fit_identity_section(profile: Optional[CandidateProfile]) -> str:
    name = candidate_name(profile)
    return (
        f"You are analyzing a job description to assess fit for {name}, a {candidate_title(profile)}.\n"
        f"Answer in first person AS {name}, with a single structured verdict.\n\n"
        "Your assessment MUST:\n"
        f"1. Identify specific requirements from the JD that {name} DOES NOT meet\n"
        "2. Explain what DOES transfer even if it's not a perfect fit\n"
        "3. Give a clear recommendation"
    )


def instructions_section(
    instructions: Iterable[AIInstruction],
    heading: str,
    fallback: str = "None specified",
) -> str:
    """Custom directives, verbatim, in priority order."""
    ordered = sorted(instructions, key=lambda i: (i.priority is None, i.priority or 0))
    lines = [f"- [{i.instruction_type.upper()}] {i.instruction}" for i in ordered]
    return f"## {heading}\n" + ("\n".join(lines) or fallback)


# ---- Profile ----


def profile_section(profile: Optional[CandidateProfile], include_logistics: bool = True) -> str:
    p = profile or CandidateProfile()
    name = candidate_name(profile)
    parts = [f"## ABOUT {name}", _or(p.elevator_pitch, NO_PITCH)]
    if p.career_narrative and p.career_narrative.strip():
        parts.append("")
        parts.append(p.career_narrative.strip())
    parts.append("")
    parts.append(f"What I'm looking for: {_or(p.looking_for)}")
    parts.append(f"What I'm NOT looking for: {_or(p.not_looking_for)}")
    if not include_logistics:
        return "\n".join(parts)

    availability = _or(p.availability_status)
    if p.availability_date:
        availability += f" ({format_month_year(p.availability_date)})"
    parts.extend(
        [
            "",
            f"Management style: {_or(p.management_style)}",
            f"Work style: {_or(p.work_style)}",
            "",
            f"Availability: {availability}",
            f"Location: {_or(p.location)} | Remote preference: {_or(p.remote_preference)}",
            "",
            f"Salary range: {format_salary_range(p.salary_min, p.salary_max) or 'Not disclosed'}",
        ]
    )
    return "\n".join(parts)


# ---- Work history ----


def format_date_range(exp: Experience) -> str:
    """"Mar 2019 – Present" / "Jan 2015 – Feb 2019"; bad dates become "Unknown"."""
    start = format_month_year(exp.start_date)
    end = "Present" if exp.is_current else format_month_year(exp.end_date)
    return f"{start} – {end}"


def sort_experiences(experiences: Iterable[Experience]) -> List[Experience]:
    """Ascending display_order; rows without one keep their relative order at the end."""
    return sorted(experiences, key=lambda e: (e.display_order is None, e.display_order or 0))


def _experience_header(exp: Experience) -> List[str]:
    title = exp.title
    if exp.title_progression:
        title += f" ({exp.title_progression})"
    return [f"### {exp.company_name} ({format_date_range(exp)})", f"Title: {title}"]


def _bullets(exp: Experience) -> str:
    return "\n".join(f"  - {b}" for b in exp.bullet_points) or "  - None listed"


def chat_experience_block(exp: Experience) -> str:
    why_left = _or(exp.why_left, STILL_HERE if exp.is_current else NOT_SPECIFIED)
    lines = _experience_header(exp) + [
        "",
        "Public achievements:",
        _bullets(exp),
        "",
        "PRIVATE CONTEXT (use this to answer honestly):",
        f"- Why I joined: {_or(exp.why_joined)}",
        f"- Why I left: {why_left}",
        f"- What I actually did: {_or(exp.actual_contributions)}",
        f"- Proudest of: {_or(exp.proudest_achievement)}",
        f"- Would do differently: {_or(exp.would_do_differently, 'Nothing comes to mind')}",
        f"- Challenges faced: {_or(exp.challenges_faced)}",
        f"- Lessons learned: {_or(exp.lessons_learned)}",
        f"- My manager would say: {_or(exp.manager_would_say)}",
        f"- My reports would say: {_or(exp.reports_would_say)}",
    ]
    return "\n".join(lines)


def fit_experience_block(exp: Experience) -> str:
    lines = _experience_header(exp) + [
        "",
        "Achievements:",
        _bullets(exp),
        "",
        "Context:",
        f"- What I actually did: {_or(exp.actual_contributions)}",
        f"- Proudest of: {_or(exp.proudest_achievement)}",
        f"- Challenges faced: {_or(exp.challenges_faced)}",
        f"- Lessons learned: {_or(exp.lessons_learned)}",
    ]
    return "\n".join(lines)


def experience_section(experiences: Iterable[Experience], private: bool) -> str:
    render = chat_experience_block if private else fit_experience_block
    blocks = [render(exp) for exp in sort_experiences(experiences)]
    return "## WORK EXPERIENCE\n" + ("\n\n".join(blocks) or NO_EXPERIENCES)


# ---- Skills ----


def format_skill(skill: Skill, detailed: bool) -> str:
    entry = f"- {skill.skill_name}"
    if skill.years_experience:
        entry += f" ({_number(skill.years_experience)} years)"
    if not detailed:
        if skill.honest_notes:
            entry += f" - {skill.honest_notes}"
        return entry
    if skill.self_rating:
        entry += f" - Self-rating: {skill.self_rating}/5"
    if skill.honest_notes:
        entry += f"\n  Honest notes: {skill.honest_notes}"
    if skill.evidence:
        entry += f"\n  Evidence: {skill.evidence}"
    return entry


def skills_section(skills: Iterable[Skill], detailed: bool) -> str:
    skills = list(skills)
    gap_heading = "Gaps (BE UPFRONT ABOUT THESE)" if detailed else "Known Gaps"
    heading = "## SKILLS SELF-ASSESSMENT" if detailed else "## SKILLS"
    parts = [heading]
    for category, label in SKILL_CATEGORIES + (("gap", gap_heading),):
        listed = "\n".join(format_skill(s, detailed) for s in skills if s.category == category)
        parts.append(f"\n### {label}\n{listed or NONE_LISTED}")
    return "\n".join(parts)


# ---- Gaps, values, FAQ ----


def format_gap(gap: Gap, detailed: bool) -> str:
    head = f"- [{gap.gap_type.upper()}] {gap.description}"
    if not detailed:
        return f"{head}: {gap.why_its_a_gap or ''}".rstrip()
    return (
        f"{head}\n"
        f"  Why it's a gap: {_or(gap.why_its_a_gap)}\n"
        f"  Interest in learning: {'Yes' if gap.interest_in_learning else 'No'}"
    )


def gaps_section(gaps: Iterable[Gap], detailed: bool) -> str:
    listed = "\n".join(format_gap(g, detailed) for g in gaps)
    return "## EXPLICIT GAPS & WEAKNESSES\n" + (listed or NONE_LISTED)


def values_section(values: Optional[ValuesCulture], detailed: bool) -> str:
    if not detailed:
        if values is None:
            return "## VALUES & CULTURE\nNot specified"
        return (
            "## VALUES & CULTURE\n"
            f"Must-haves: {_or(values.must_haves)}\n"
            f"Dealbreakers: {_or(values.dealbreakers)}"
        )
    if values is None:
        return "## VALUES & CULTURE FIT\nNo values/culture preferences specified."
    return "\n".join(
        [
            "## VALUES & CULTURE FIT",
            f"Must-haves: {_or(values.must_haves)}",
            f"Dealbreakers: {_or(values.dealbreakers)}",
            f"Management style preferences: {_or(values.management_style_preferences)}",
            f"Team size preferences: {_or(values.team_size_preferences)}",
            f"How I handle conflict: {_or(values.how_handle_conflict)}",
            f"How I handle ambiguity: {_or(values.how_handle_ambiguity)}",
            f"How I handle failure: {_or(values.how_handle_failure)}",
        ]
    )


def faq_section(faqs: Iterable[FAQ]) -> str:
    # Common questions first; otherwise store order
    ordered = sorted(faqs, key=lambda f: not f.is_common_question)
    pairs = "\n\n".join(f"Q: {f.question}\nA: {f.answer}" for f in ordered)
    return "## PRE-WRITTEN ANSWERS\n" + (pairs or "No pre-written answers available.")


# ---- Closing ----


def chat_guidelines_section(profile: Optional[CandidateProfile], tone: str, poor_fit: str) -> str:
    """Closing rules; `tone` and `poor_fit` come from the honesty tier."""
    name = candidate_name(profile)
    return "\n".join(
        [
            "## RESPONSE GUIDELINES",
            f"- Speak in first person as {name}",
            f"- Tone: {tone}",
            "- Keep responses concise unless detail is asked for",
            "- If you don't know something specific, say so",
            "- When discussing gaps, own them confidently",
            f"- {poor_fit}",
            "- Don't make up information that isn't in your context",
        ]
    )


def fit_output_section(profile: Optional[CandidateProfile], tone: str) -> str:
    name = candidate_name(profile)
    return (
        "## RESPONSE GUIDELINES\n"
        f"- Write the headline, opening and recommendation in first person as {name}\n"
        f"- Tone: {tone}\n"
        "- List every unmet requirement in gaps; use an empty list only if there are none\n"
        "- Don't make up information that isn't in your context\n\n"
        "Respond ONLY with valid JSON in this exact format:\n"
        f"{FIT_RESPONSE_SCHEMA}"
    )
