"""Text generation API client with exponential backoff retry logic"""

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from exitum_gateway.config import settings
from exitum_gateway.domain.exceptions import GenerationAPIError
from exitum_gateway.infrastructure.observability.metrics import (
    generation_failure_counter,
    generation_latency_histogram,
)

logger = logging.getLogger(__name__)


class GenerationClient:
    """Client for the external text generation API (Gemini generateContent)"""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_base: float | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.generation_api_base
        self.api_key = api_key if api_key is not None else settings.generation_api_key
        self.model = model or settings.generation_model
        self.timeout = timeout or settings.http_timeout_seconds
        self.max_retries = max_retries if max_retries is not None else settings.generation_max_retries
        self.backoff_base = backoff_base if backoff_base is not None else settings.generation_backoff_base
        self.transport = transport

    def _build_payload(self, message: str, system_instruction: str) -> Dict[str, Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": message}]}],
            "systemInstruction": {"parts": [{"text": system_instruction}]},
            "generationConfig": {"temperature": settings.generation_temperature},
        }

    @staticmethod
    def _extract_text(data: Dict[str, Any]) -> str:
        candidates = data.get("candidates") or []
        if not candidates:
            return ""
        parts = candidates[0].get("content", {}).get("parts") or []
        return "".join(part.get("text", "") for part in parts)

    async def generate_reply(self, message: str, system_instruction: str) -> str:
        """
        Generate an assistant reply for a visitor message.

        Retry strategy:
        - Exponential backoff: base * 2^(attempt-1) between attempts
        - Retries on 5xx errors and network failures, 4xx fails immediately
        - Tracks latency histogram and failure counter

        Returns:
            Generated text, possibly empty if the API produced no candidates

        Raises:
            GenerationAPIError: missing API key, client error, malformed
                response, or all retries exhausted
        """
        if not self.api_key:
            raise GenerationAPIError("Generation API key is not configured")

        url = f"{self.base_url}/models/{self.model}:generateContent"
        payload = self._build_payload(message, system_instruction)

        attempt = 0
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            while True:
                try:
                    with generation_latency_histogram.time():
                        response = await client.post(url, params={"key": self.api_key}, json=payload)
                        response.raise_for_status()
                    return self._extract_text(response.json())

                except httpx.HTTPStatusError as e:
                    generation_failure_counter.inc()
                    if e.response.status_code < 500:
                        raise GenerationAPIError(f"Generation API error: {e.response.status_code}") from e
                    attempt += 1
                    if attempt >= self.max_retries:
                        raise GenerationAPIError(
                            f"Generation API error: {e.response.status_code} after {attempt} attempts"
                        ) from e

                except httpx.RequestError as e:
                    generation_failure_counter.inc()
                    attempt += 1
                    if attempt >= self.max_retries:
                        raise GenerationAPIError(f"Generation API unreachable after {attempt} attempts") from e

                except (KeyError, ValueError, TypeError, AttributeError) as e:
                    raise GenerationAPIError(f"Invalid response from generation API: {e}") from e

                backoff = self.backoff_base * (2 ** (attempt - 1))
                logger.warning("Generation attempt %s failed, retrying in %.1fs", attempt, backoff)
                await asyncio.sleep(backoff)
