"""Portfolio AI: candidate chat and honest job-fit analysis backed by a hosted LLM."""

__version__ = "0.1.0"
