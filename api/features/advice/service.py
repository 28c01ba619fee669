"""Advice proxy: forwards one question to Gemini and relays the raw answer.

One POST per call: no retry, no caching and no request timeout.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

import httpx
import structlog
from pydantic import SecretStr

from api.features.advice.exceptions import ProviderError
from api.shared.exceptions import ConfigError, ValidationError
from prompts.advice.maternal_advice import build_advice_prompt

logger = structlog.get_logger("maternal.advice.service")


class AdviceService:
    """Calls the Gemini ``generateContent`` endpoint."""

    def __init__(
        self,
        *,
        api_key: SecretStr | str | None,
        model: str,
        base_url: str,
        prompt_template: str,
        temperature: float = 0.7,
        top_k: int = 40,
        top_p: float = 0.95,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if isinstance(api_key, SecretStr):
            api_key = api_key.get_secret_value()
        self._api_key = api_key or ""
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.prompt_template = prompt_template
        self.generation_config = {
            "temperature": temperature,
            "topK": top_k,
            "topP": top_p,
        }
        self.transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def build_payload(self, user_input: str) -> Dict[str, Any]:
        prompt = build_advice_prompt(
            template=self.prompt_template, user_input=user_input
        )
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": dict(self.generation_config),
        }

    async def generate_advice(self, user_input: Optional[str]) -> Dict[str, Any]:
        """Return the provider's response body unchanged."""
        if not user_input:
            raise ValidationError("userInput is required")
        if not self._api_key:
            logger.error("GEMINI_API_KEY is not set")
            raise ConfigError("API key not configured")

        headers = {
            "Content-Type": "application/json",
            "Cache-Control": "no-cache",
        }
        logger.info("Calling Gemini API", model=self.model, input_chars=len(user_input))
        try:
            async with httpx.AsyncClient(timeout=None, transport=self.transport) as client:
                resp = await client.post(
                    self.endpoint,
                    params={"key": self._api_key},
                    json=self.build_payload(user_input),
                    headers=headers,
                )
            data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.exception("Gemini request failed")
            raise ProviderError("Internal server error", details={"message": str(e)}) from e

        logger.info("Gemini API responded", status=resp.status_code)

        if resp.is_error:
            error = data.get("error") if isinstance(data, dict) else None
            message = (error or {}).get("message") if isinstance(error, dict) else None
            logger.error("Gemini API error", status=resp.status_code, message=message)
            raise ProviderError(
                message or "Gemini API error",
                status_code=resp.status_code,
                details=data if isinstance(data, dict) else {"body": data},
            )

        if not isinstance(data, dict) or not data.get("candidates"):
            logger.error("No candidates in Gemini response")
            raise ProviderError(
                "No response generated",
                details=data if isinstance(data, dict) else {"body": data},
            )

        return data
