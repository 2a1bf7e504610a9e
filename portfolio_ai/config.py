"""Configuration loaded from environment variables."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# API keys – never hardcode
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "").strip()
MODEL_NAME: str = os.getenv("MODEL_NAME", "gpt-4o-mini")

# Candidate data store (Supabase)
SUPABASE_URL: str = os.getenv("SUPABASE_URL", "").strip().rstrip("/")
SUPABASE_SERVICE_ROLE_KEY: str = os.getenv("SUPABASE_SERVICE_ROLE_KEY", "").strip()
# Empty means single-tenant: the first row of each table is the candidate
CANDIDATE_ID: Optional[str] = os.getenv("CANDIDATE_ID") or None

# Completion limits
CHAT_MAX_TOKENS: int = 1024
FIT_MAX_TOKENS: int = 2048

# Chat request limits
MAX_MESSAGES: int = 50
MAX_MESSAGE_LENGTH: int = 10_000
MAX_TOTAL_CONTENT_LENGTH: int = 100_000

# Job description limits
MIN_JD_LENGTH: int = 50
MAX_JD_LENGTH: int = 50_000

# Honesty slider
DEFAULT_HONESTY_LEVEL: int = 7
MIN_HONESTY_LEVEL: int = 1
MAX_HONESTY_LEVEL: int = 10

# CORS (the public profile page is served from a different origin)
CORS_ALLOW_ORIGINS: list = [
    o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()
]
