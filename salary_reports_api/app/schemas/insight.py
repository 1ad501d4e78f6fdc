"""
Pydantic schemas for the insights proxy.
"""

from pydantic import BaseModel, Field


class InsightRequest(BaseModel):
    question: str = Field(..., example="Which job title pays best in 2023?")


class InsightResponse(BaseModel):
    result: str
