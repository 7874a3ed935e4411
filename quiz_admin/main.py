# FastAPI entry point for the quiz question administration API
# quiz_admin/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from quiz_admin.endpoints import admin as admin_router
from quiz_admin.state_manager import seed_admins
from quiz_admin.utils.config import settings
from quiz_admin.utils.db import create_tables
from quiz_admin.utils.logger import logger

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages application startup and shutdown events.
    """
    logger.info("Quiz Admin API starting up...")

    # Create database tables if they don't exist
    await create_tables()

    if settings.admin_ids:
        seeded = await seed_admins(settings.admin_ids)
        logger.info(f"Granted admin role to {seeded} configured user(s).")

    logger.info("Startup complete.")
    yield
    logger.info("Quiz Admin API shutting down...")

# --- FastAPI App Initialization ---
app = FastAPI(
    title="Quiz Admin API",
    description="Administration API for the quiz question bank.",
    version="0.1.0",
    lifespan=lifespan
)

# --- CORS Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict this to your frontend's domain
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- API Routers ---
app.include_router(admin_router.router, prefix="/admin/questions", tags=["Admin"])

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {"message": "Welcome to the Quiz Admin API"}
