"""Router for the Advice feature."""
from typing import Any, Dict

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from api.features.advice.controller import AdviceController
from api.features.advice.dtos import GenerateAdviceRequest
from di.container import ApplicationContainer as DependencyContainer

router = APIRouter()


@router.post("/generate", response_model=Dict[str, Any])
@inject
async def generate_advice(
    request: GenerateAdviceRequest,
    controller: AdviceController = Depends(
        Provide[DependencyContainer.controllers.advice_controller]
    ),
):
    """Relay the question to Gemini and return its raw response."""
    return await controller.generate(request)
