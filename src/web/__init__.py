"""Interface HTTP FastAPI de City Explorer."""
