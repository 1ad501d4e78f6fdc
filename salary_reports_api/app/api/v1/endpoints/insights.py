"""
Insights endpoint for API v1.

Forwards a free‑text question to the configured external inference
endpoint and relays its answer.  This route is independent of the
salary records.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from salary_reports_api.app.core.errors import InsightsUnavailable
from salary_reports_api.app.schemas.insight import InsightRequest, InsightResponse
from salary_reports_api.app.services.insight_service import InsightService

router = APIRouter()


def get_insight_service() -> InsightService:
    return InsightService()


@router.post("", response_model=InsightResponse)
async def ask_question(
    body: InsightRequest,
    service: InsightService = Depends(get_insight_service),
) -> InsightResponse:
    """Relay ``question`` to the inference endpoint.

    Returns HTTP 503 if the endpoint is not configured and HTTP 502 if
    the upstream call fails.
    """
    try:
        answer = await service.ask(body.question)
    except InsightsUnavailable as exc:
        code = status.HTTP_502_BAD_GATEWAY if exc.configured else status.HTTP_503_SERVICE_UNAVAILABLE
        raise HTTPException(status_code=code, detail=str(exc))
    return InsightResponse(result=answer)
