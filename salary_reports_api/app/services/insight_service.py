"""
Service relaying free‑text questions to an external inference endpoint.

The insights proxy has no dependency on the salary records: it forwards
the question as ``params.long_text`` together with the configured
project id and relays the answer text.  Endpoint URL, credential and
timeout come from ``Settings``; when the URL or the credential is
missing the service refuses to call out.

Network errors, non‑2xx statuses and non‑JSON bodies are reported as
:class:`InsightsUnavailable`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from salary_reports_api.app.core.config import Settings, settings as default_settings
from salary_reports_api.app.core.errors import InsightsUnavailable

logger = logging.getLogger(__name__)

CREDITS_EXHAUSTED = "The credits are over for today."
NO_ANSWER = "No response from model"


class InsightService:
    """Client for the external question‑answering endpoint."""

    def __init__(
        self,
        config: Settings = default_settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.config.insights_url and self.config.insights_api_key)

    async def ask(self, question: str) -> str:
        """Return the answer to ``question`` or a fallback text."""
        if not self.configured:
            raise InsightsUnavailable("Insights endpoint is not configured", configured=False)

        headers = {
            "Content-Type": "application/json",
            "Authorization": self.config.insights_api_key,
        }
        payload: Dict[str, Any] = {
            "params": {"long_text": question},
            "project": self.config.insights_project,
        }
        try:
            async with httpx.AsyncClient(
                timeout=self.config.insights_timeout, transport=self._transport
            ) as client:
                response = await client.post(self.config.insights_url, headers=headers, json=payload)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as exc:
            logger.error("Insights request failed: %s", exc)
            raise InsightsUnavailable(f"Insights request failed: {exc}") from exc
        except ValueError as exc:
            logger.error("Insights endpoint returned a non‑JSON body: %s", exc)
            raise InsightsUnavailable("Insights endpoint returned an invalid response") from exc

        if not isinstance(data, dict):
            raise InsightsUnavailable("Insights endpoint returned an invalid response")
        if data.get("status") == "failed":
            logger.warning("Insights endpoint reported a failed run")
            return CREDITS_EXHAUSTED
        output = data.get("output") or {}
        answer = output.get("answer") if isinstance(output, dict) else None
        return str(answer) if answer else NO_ANSWER
