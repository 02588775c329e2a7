from fastapi import APIRouter, HTTPException, Depends, Query
from typing import Optional
import logging

from pydantic import ValidationError

from src.core.config import QuizSettings, get_settings
from src.schemas.quiz import QuizContent, ResultView
from services.voter_type_engine.loader import get_quiz_data, QuizDataValidationError
from services.voter_type_engine.models import QuizDataset
from services.voter_type_engine.result_images import get_result_image
from services.voter_type_engine.scoring import resolve_result_type
from services.voter_type_engine.share import (
    ShareCard,
    build_result_metadata,
    build_share_caption,
    build_share_card,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def get_quiz_dataset(settings: QuizSettings = Depends(get_settings)) -> QuizDataset:
    try:
        return get_quiz_data(settings.data_path)
    except (QuizDataValidationError, ValidationError) as e:
        logger.exception(f"Quiz data could not be loaded from {settings.data_path}: {e}")
        raise HTTPException(status_code=500, detail="Quiz data unavailable")


@router.get("/quiz", response_model=QuizContent)
async def read_quiz(dataset: QuizDataset = Depends(get_quiz_dataset)):
    """
    Returns the quiz meta and the nine questions. Result copy is only
    served per voter type through /results/{result_type}.
    """
    return dataset.public_questions()


@router.get("/results/{result_type}", response_model=ResultView)
async def read_result(
    result_type: str,
    dataset: QuizDataset = Depends(get_quiz_dataset),
    settings: QuizSettings = Depends(get_settings),
):
    """Result page data for a voter type. The path segment is matched case-insensitively."""
    resolved = resolve_result_type(result_type)
    if resolved is None:
        logger.info(f"Unknown voter type requested: {result_type!r}")
        raise HTTPException(status_code=404, detail=f"Unknown voter type: {result_type}")

    result = dataset.result_for(resolved)
    return ResultView(
        result_type=resolved,
        result=result,
        image=get_result_image(resolved.value),
        share_caption=build_share_caption(result, dataset.meta),
        metadata=build_result_metadata(resolved, dataset, settings.site_url),
    )


@router.get("/og", response_model=ShareCard)
async def read_share_card(
    result_type: Optional[str] = Query(default=None, alias="type"),
    dataset: QuizDataset = Depends(get_quiz_dataset),
    settings: QuizSettings = Depends(get_settings),
):
    """Social preview card payload for a voter type (?type=ProcessPro)."""
    if not result_type:
        raise HTTPException(status_code=400, detail="Missing type parameter")

    resolved = resolve_result_type(result_type)
    if resolved is None:
        raise HTTPException(status_code=400, detail="Invalid type")

    return build_share_card(resolved, dataset, settings.site_url)
