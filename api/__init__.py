"""
API module - FastAPI routes, schemas và settings
"""
