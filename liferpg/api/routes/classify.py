"""
Classification Endpoint

Stateless brain dump classification: text in, ClassificationResult out.
"""
from fastapi import APIRouter, Depends

from liferpg.api.dependencies import get_processor
from liferpg.api.models.brain_dump import ClassifyRequest
from liferpg.core.brain_dump_processor import BrainDumpProcessor
from liferpg.models.classification import ClassificationResult

router = APIRouter(tags=["Classification"])


@router.post("/classify", response_model=ClassificationResult)
async def classify_text(
    payload: ClassifyRequest,
    processor: BrainDumpProcessor = Depends(get_processor),
):
    """
    Classify text without storing it. Works without MongoDB.
    """
    return processor.classify(payload.text)
