"""PremStats HTTP API (FastAPI)."""
