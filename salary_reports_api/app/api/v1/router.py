"""
Top‑level router for version 1 of the API.
"""

from fastapi import APIRouter

from .endpoints import insights, reports

router = APIRouter()

router.include_router(reports.router, prefix="/reports", tags=["reports"])
router.include_router(insights.router, prefix="/insights", tags=["insights"])
