"""
Brain Dump Endpoints

Submission, processing and result retrieval for brain dumps, plus quest
drafts built from processed dumps.
"""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from loguru import logger

from liferpg.api.dependencies import get_ready_processor
from liferpg.api.models.brain_dump import CreateBrainDumpRequest, GenerateQuestRequest
from liferpg.core.brain_dump_processor import (
    BrainDumpAlreadyProcessedError,
    BrainDumpNotFoundError,
    BrainDumpProcessor,
    ProcessingOutcome,
)
from liferpg.core.quest_generator import brain_dump_xp_reward, generate_quest_draft
from liferpg.utils.observability import log_business_event

router = APIRouter(prefix="/brain-dumps", tags=["Brain Dumps"])


def _outcome_payload(outcome: Optional[ProcessingOutcome]) -> Optional[dict]:
    if outcome is None:
        return None
    return {
        "brain_dump": outcome.brain_dump.model_dump(mode="json"),
        "processing_record": outcome.record.model_dump(mode="json"),
    }


@router.get("")
async def list_brain_dumps(
    processed: Optional[bool] = Query(None, description="Filter by processed flag"),
    limit: Optional[int] = Query(None, ge=1, le=500),
    processor: BrainDumpProcessor = Depends(get_ready_processor),
):
    """
    List brain dumps, newest first, with dashboard totals.
    """
    dumps = await processor.list_brain_dumps(processed=processed, limit=limit)
    stats = await processor.stats()

    return {
        "dumps": [dump.model_dump(mode="json") for dump in dumps],
        "total": len(dumps),
        "stats": stats,
    }


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_brain_dump(
    payload: CreateBrainDumpRequest,
    processor: BrainDumpProcessor = Depends(get_ready_processor),
):
    """
    Save a new brain dump; classify it right away when requested.
    """
    brain_dump, outcome = await processor.submit(
        raw_text=payload.content,
        input_method=payload.input_method,
        dump_category=payload.dump_category,
        process_immediately=payload.process_immediately,
    )

    return {
        "status": "created",
        "brain_dump": brain_dump.model_dump(mode="json"),
        "processing": _outcome_payload(outcome),
    }


@router.post("/{brain_dump_id}/process")
async def process_brain_dump(
    brain_dump_id: str,
    processor: BrainDumpProcessor = Depends(get_ready_processor),
):
    """
    Classify a stored brain dump.

    Returns 404 for unknown ids and 409 when the dump was already processed.
    """
    try:
        outcome = await processor.process(brain_dump_id)
    except BrainDumpNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except BrainDumpAlreadyProcessedError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    return {"status": "processed", **_outcome_payload(outcome)}


@router.get("/{brain_dump_id}/results")
async def get_brain_dump_results(
    brain_dump_id: str,
    processor: BrainDumpProcessor = Depends(get_ready_processor),
):
    try:
        results = await processor.get_results(brain_dump_id)
    except BrainDumpNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return {
        "brain_dump": results.brain_dump.model_dump(mode="json"),
        "processing_records": [record.model_dump(mode="json") for record in results.records],
        "is_processed": results.is_processed,
        "processing_status": results.brain_dump.processing_status.value,
    }


@router.post("/{brain_dump_id}/generate-quest")
async def generate_quest(
    brain_dump_id: str,
    payload: GenerateQuestRequest,
    processor: BrainDumpProcessor = Depends(get_ready_processor),
):
    """
    Propose a quest from the latest classification of a brain dump.
    The draft is returned, not stored.
    """
    try:
        results = await processor.get_results(brain_dump_id)
    except BrainDumpNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    if results.latest is None:
        logger.warning(f"Quest requested for unprocessed brain dump {brain_dump_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Brain dump {brain_dump_id} has no processing results"
        )

    draft = generate_quest_draft(
        results.latest.result,
        quest_name=payload.quest_name,
        quest_type=payload.quest_type,
        difficulty=payload.difficulty,
    )

    # Turning the dump into one quest earns the character the brain dump reward
    dump_xp = brain_dump_xp_reward(quests_generated=1)

    log_business_event(
        "quest_draft_generated",
        brain_dump_id,
        quest_type=draft.quest_type.value,
        objectives=len(draft.objectives),
        xp_reward=draft.xp_reward,
        brain_dump_xp=dump_xp,
    )

    return {
        "quest": draft.model_dump(mode="json"),
        "brain_dump_id": brain_dump_id,
        "brain_dump_xp": dump_xp,
    }
