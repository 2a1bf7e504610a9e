"""Agent exports."""

from .chat_agent import run_chat_agent
from .fit_agent import run_fit_agent

__all__ = ["run_chat_agent", "run_fit_agent"]
