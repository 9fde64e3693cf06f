"""
Main API application
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from api.placement_api import router as placement_router
from api.settings import settings
from api.shared import get_question_bank, get_bank_summary
from models.cefr_level import CEFRLevel

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup và shutdown events"""
    logger.info("Starting server - Loading question bank into cache...")
    
    try:
        bank = get_question_bank()
        for tier in CEFRLevel:
            logger.info("Tier %s: %d questions", tier.value, len(bank.items_by_difficulty(tier)))
        get_bank_summary()
        logger.info("Loaded %d placement questions. Server is ready.", len(bank))
    except Exception:
        logger.exception("Error loading question bank")
        raise
    
    yield
    
    logger.info("Shutting down server...")


app = FastAPI(
    title="Placement Assessment API",
    description="API để sinh ra bài kiểm tra xếp lớp và tính trình độ CEFR",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(placement_router)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Placement Assessment API",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
