"""Candidate records read from the data store (owned by the admin panel)."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from portfolio_ai.config import DEFAULT_HONESTY_LEVEL

SkillCategory = Literal["strong", "moderate", "gap"]
GapType = Literal["skill", "experience", "environment", "role_type"]
InstructionType = Literal["honesty", "tone", "boundaries"]


class CandidateProfile(BaseModel):
    """Singleton profile row. Every field may be null until the admin fills it in."""

    name: Optional[str] = None
    email: Optional[str] = None
    title: Optional[str] = None
    target_titles: List[str] = Field(default_factory=list)
    target_company_stages: List[str] = Field(default_factory=list)
    elevator_pitch: Optional[str] = None
    career_narrative: Optional[str] = None
    looking_for: Optional[str] = Field(default=None, description="Desired role text")
    not_looking_for: Optional[str] = Field(default=None, description="Anti-desired role text")
    management_style: Optional[str] = None
    work_style: Optional[str] = None
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    availability_status: Optional[str] = None
    availability_date: Optional[str] = None
    location: Optional[str] = None
    remote_preference: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    twitter_url: Optional[str] = None

    @field_validator("target_titles", "target_company_stages", mode="before")
    @classmethod
    def _none_to_list(cls, v):
        return v or []


class Experience(BaseModel):
    """One role. Bullet points are public; the narrative fields are private context."""

    company_name: str = ""
    title: str = ""
    title_progression: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    is_current: bool = False
    bullet_points: List[str] = Field(default_factory=list)
    why_joined: Optional[str] = None
    why_left: Optional[str] = None
    actual_contributions: Optional[str] = None
    proudest_achievement: Optional[str] = None
    would_do_differently: Optional[str] = None
    challenges_faced: Optional[str] = None
    lessons_learned: Optional[str] = None
    manager_would_say: Optional[str] = None
    reports_would_say: Optional[str] = None
    display_order: Optional[int] = None

    @field_validator("bullet_points", mode="before")
    @classmethod
    def _bullets(cls, v):
        if not isinstance(v, list):
            return []
        return [str(b) for b in v if b is not None]

    @field_validator("is_current", mode="before")
    @classmethod
    def _is_current(cls, v):
        return bool(v)

    @field_validator("company_name", "title", mode="before")
    @classmethod
    def _required_text(cls, v):
        return v or ""


class Skill(BaseModel):
    skill_name: str
    category: SkillCategory
    self_rating: Optional[int] = Field(default=None, description="Self-rating 1-5")
    evidence: Optional[str] = None
    honest_notes: Optional[str] = None
    years_experience: Optional[float] = None
    last_used: Optional[str] = None


class Gap(BaseModel):
    gap_type: GapType
    description: str
    why_its_a_gap: Optional[str] = None
    interest_in_learning: bool = False

    @field_validator("interest_in_learning", mode="before")
    @classmethod
    def _interest(cls, v):
        return bool(v)


class ValuesCulture(BaseModel):
    """Values/culture singleton; also carries the honesty slider."""

    must_haves: Optional[str] = None
    dealbreakers: Optional[str] = None
    management_style_preferences: Optional[str] = None
    team_size_preferences: Optional[str] = None
    how_handle_conflict: Optional[str] = None
    how_handle_ambiguity: Optional[str] = None
    how_handle_failure: Optional[str] = None
    honesty_level: Optional[int] = Field(default=DEFAULT_HONESTY_LEVEL, description="1-10 tone slider")


class FAQ(BaseModel):
    question: str
    answer: str
    is_common_question: bool = False

    @field_validator("is_common_question", mode="before")
    @classmethod
    def _common(cls, v):
        return bool(v)


class AIInstruction(BaseModel):
    instruction_type: InstructionType
    instruction: str
    priority: Optional[int] = None


class CandidateData(BaseModel):
    """Read-only snapshot of everything the prompts are built from."""

    profile: Optional[CandidateProfile] = None
    experiences: List[Experience] = Field(default_factory=list)
    skills: List[Skill] = Field(default_factory=list)
    gaps: List[Gap] = Field(default_factory=list)
    values: Optional[ValuesCulture] = None
    faqs: List[FAQ] = Field(default_factory=list)
    instructions: List[AIInstruction] = Field(default_factory=list)

    @property
    def honesty_level(self) -> int:
        """Slider value from the values record; 7 when unset."""
        if self.values is None or self.values.honesty_level is None:
            return DEFAULT_HONESTY_LEVEL
        return self.values.honesty_level
