"""Shared fixtures: canned data store rows, a fake Supabase client and a fake LLM client."""

import asyncio
import json
from types import SimpleNamespace
from typing import Dict, List, Optional, Tuple

import httpx
import openai
import pytest
from postgrest.exceptions import APIError

from portfolio_ai.schemas.candidate import CandidateData

PROFILE_ROW = {
    "id": "cand-1",
    "name": "Dana Reyes",
    "title": "Staff Engineer",
    "elevator_pitch": "I build platform teams and the systems they run.",
    "career_narrative": "Ten years across fintech and dev tooling.",
    "looking_for": "Staff or principal platform roles",
    "not_looking_for": "Pure people management",
    "management_style": None,
    "work_style": "Async first",
    "salary_min": 180000,
    "salary_max": 220000,
    "availability_status": "Open to offers",
    "availability_date": "2026-01-15",
    "location": "Lisbon",
    "remote_preference": "Remote",
    "linkedin_url": "https://linkedin.com/in/dana",
    "created_at": "2025-01-01T00:00:00Z",
}

EXPERIENCE_ROWS = [
    {
        "id": "exp-2",
        "company_name": "Ledgerly",
        "title": "Staff Engineer",
        "title_progression": "Senior → Staff",
        "start_date": "2021-03-01",
        "end_date": None,
        "is_current": True,
        "bullet_points": ["Led the ledger rewrite", "Cut p99 latency by 60%"],
        "why_joined": "Hard distributed systems problems",
        "why_left": None,
        "display_order": 1,
    },
    {
        "id": "exp-1",
        "company_name": "Toolsmith",
        "title": "Senior Engineer",
        "start_date": "2017-06-01",
        "end_date": "2021-02-01",
        "is_current": False,
        "bullet_points": None,
        "why_left": None,
        "display_order": 2,
    },
]

SKILL_ROWS = [
    {"skill_name": "TypeScript", "category": "strong", "self_rating": 5, "years_experience": 8,
     "honest_notes": "Daily driver", "evidence": "Ledger rewrite"},
    {"skill_name": "Kubernetes", "category": "moderate", "self_rating": 3, "years_experience": 2.5},
    {"skill_name": "PyTorch", "category": "gap", "self_rating": 1},
]

GAP_ROWS = [
    {"gap_type": "experience", "description": "No ML research background",
     "why_its_a_gap": "Never published", "interest_in_learning": False},
]

VALUES_ROW = {
    "must_haves": "Written culture",
    "dealbreakers": "Five days in office",
    "how_handle_conflict": "Talk early",
    "honesty_level": 7,
}

FAQ_ROWS = [
    {"question": "Do you sponsor visas?", "answer": "I don't need one.", "is_common_question": False},
    {"question": "Are you open to relocation?", "answer": "No.", "is_common_question": True},
]

INSTRUCTION_ROWS = [
    {"instruction_type": "tone", "instruction": "Be warm but not salesy", "priority": 2},
    {"instruction_type": "honesty", "instruction": "Never oversell me", "priority": 1},
]

FULL_TABLES = {
    "candidate_profile": [PROFILE_ROW],
    "experiences": EXPERIENCE_ROWS,
    "skills": SKILL_ROWS,
    "gaps_weaknesses": GAP_ROWS,
    "values_culture": [VALUES_ROW],
    "faq_responses": FAQ_ROWS,
    "ai_instructions": INSTRUCTION_ROWS,
}

FIT_REPLY = {
    "verdict": "probably_not",
    "headline": "Platform engineer, not an ML researcher",
    "opening": "I'm probably not your person for this.",
    "gaps": [
        {
            "requirement": "PhD in Machine Learning",
            "gap_title": "No research background",
            "explanation": "I have never published.",
        }
    ],
    "transfers": "Training pipeline infrastructure.",
    "recommendation": "Don't hire me for this role.",
}


class FakeQuery:
    """Chainable stand-in for a postgrest request builder."""

    def __init__(self, store: "FakeSupabase", table: str):
        self.store = store
        self.table = table
        self.filters: Dict[str, str] = {}
        self.order_by: Optional[Tuple[str, bool]] = None
        self.row_limit: Optional[int] = None

    def select(self, *columns):
        self.columns = columns
        return self

    def eq(self, column: str, value: str):
        self.filters[column] = value
        return self

    def order(self, column: str, desc: bool = False):
        self.order_by = (column, desc)
        return self

    def limit(self, size: int):
        self.row_limit = size
        return self

    async def execute(self):
        self.store.queries.append(self)
        error = self.store.errors.get(self.table)
        if error is not None:
            raise error
        if self.store.delay:
            await asyncio.sleep(self.store.delay)
        self.store.completed.append(self.table)
        return SimpleNamespace(data=self.store.tables.get(self.table, []))


class FakeSupabase:
    """Stands in for supabase's AsyncClient: serves rows per table and remembers queries."""

    def __init__(self, tables: Dict[str, List[dict]], errors: Optional[Dict[str, Exception]] = None, delay: float = 0):
        self.tables = tables
        self.errors = errors or {}
        self.delay = delay
        self.queries: List[FakeQuery] = []
        self.completed: List[str] = []

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def query_for(self, table: str) -> FakeQuery:
        for q in self.queries:
            if q.table == table:
                return q
        raise KeyError(table)


def api_error(message: str = "boom", code: str = "PGRST000") -> APIError:
    return APIError({"message": message, "code": code, "details": None, "hint": None})


class FakeCompletions:
    def __init__(self, reply: Optional[str] = None, error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.calls: List[dict] = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeLLM:
    """Stands in for AsyncOpenAI: exposes chat.completions.create."""

    def __init__(self, reply: Optional[str] = None, error: Optional[Exception] = None):
        self.completions = FakeCompletions(reply, error)
        self.chat = SimpleNamespace(completions=self.completions)


@pytest.fixture
def full_store():
    return FakeSupabase(FULL_TABLES)


@pytest.fixture
def empty_store():
    return FakeSupabase({})


@pytest.fixture
def candidate_data() -> CandidateData:
    return CandidateData(
        profile=PROFILE_ROW,
        experiences=EXPERIENCE_ROWS,
        skills=SKILL_ROWS,
        gaps=GAP_ROWS,
        values=VALUES_ROW,
        faqs=FAQ_ROWS,
        instructions=INSTRUCTION_ROWS,
    )


@pytest.fixture
def fit_reply_text() -> str:
    return "Here is my assessment:\n```json\n" + json.dumps(FIT_REPLY, indent=2) + "\n```\nHope that helps."


def status_error(status: int) -> openai.APIStatusError:
    """An SDK error as raised for a non-2xx completion response."""
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    response = httpx.Response(status, request=request, text="upstream said no")
    return openai.APIStatusError("upstream said no", response=response, body=None)
