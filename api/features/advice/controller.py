"""Controller for the Advice feature."""
import logging
from typing import Any, Dict

from api.features.advice.dtos import GenerateAdviceRequest
from api.features.advice.service import AdviceService

logger = logging.getLogger("maternal.advice")


class AdviceController:
    """Controller for advice generation."""

    def __init__(self, advice_service: AdviceService):
        self.advice_service = advice_service

    async def generate(self, request: GenerateAdviceRequest) -> Dict[str, Any]:
        logger.info("Advice requested")
        data = await self.advice_service.generate_advice(request.user_input)
        logger.info("Advice generated")
        return data
