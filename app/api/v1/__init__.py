"""API v1 router."""
from fastapi import APIRouter

from app.api.v1 import mcqs, attempts

api_router = APIRouter()

api_router.include_router(mcqs.router, prefix="/mcqs", tags=["MCQs"])
api_router.include_router(attempts.router, prefix="/mcqs", tags=["Attempts"])
