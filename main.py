"""Run the API from project root. Use: python main.py"""
import os

import uvicorn

from portfolio_ai.api import app

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
