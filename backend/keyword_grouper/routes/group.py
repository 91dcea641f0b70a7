"""
Keyword Grouping API Route
POST /api/group — group near-duplicate keywords, text result + stats.
POST /api/group/preview — only the groups that merged several keywords.
POST /api/group/export — CSV download of the grouped keywords.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel

from keyword_grouper.core.async_helpers import async_cluster_text
from keyword_grouper.core.config import get_settings
from keyword_grouper.modules.grouping import (
    format_groups,
    preview_groups,
    summarize,
    to_csv,
)
from keyword_grouper.utils.validators import validate_input_text, validate_mode, validate_threshold

logger = logging.getLogger(__name__)

router = APIRouter()


class GroupRequest(BaseModel):
    text: str = ""
    threshold: Optional[float] = None   # percent; settings default when missing
    mode: Optional[str] = None


def _serialize_groups(groups) -> list:
    return [[e.model_dump() for e in group] for group in groups]


async def _run(req: GroupRequest):
    """Validate the request and run the grouping. Returns (result or None, skipped lines, threshold %)."""
    settings = get_settings()
    percent = req.threshold if req.threshold is not None else settings.default_threshold
    try:
        threshold = validate_threshold(percent)
        text = validate_input_text(req.text, settings.max_input_chars)
        mode = validate_mode(req.mode or settings.grouping_mode)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        result, skipped = await async_cluster_text(
            text,
            threshold,
            mode=mode,
            length_prefilter=settings.length_prefilter,
        )
    except Exception as e:
        logger.error(f"❌ Grouping failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Grouping failed: {str(e)}")

    return result, skipped, percent


@router.post("/group")
async def group_endpoint(req: GroupRequest):
    """
    Groups the submitted keywords.
    Blank input or input without a valid line is not an error: status is "empty".
    """
    result, skipped, percent = await _run(req)

    if result is None:
        return {
            "status": "empty",
            "threshold": percent,
            "result": "",
            "stats": {"total": 0, "groups": 0, "grouped": 0},
            "skipped": skipped,
            "groups": [],
        }

    return {
        "status": "ok",
        "threshold": percent,
        "result": format_groups(result.groups),
        "stats": summarize(result),
        "skipped": skipped,
        "groups": _serialize_groups(result.groups),
    }


@router.post("/group/preview")
async def preview_endpoint(req: GroupRequest):
    """Merged groups only (what the preview dialog shows)."""
    result, _, percent = await _run(req)
    groups = preview_groups(result.groups) if result is not None else []
    return {
        "status": "ok" if result is not None else "empty",
        "threshold": percent,
        "groups": _serialize_groups(groups),
    }


@router.post("/group/export")
async def export_endpoint(req: GroupRequest):
    """CSV attachment, one row per group, at most csv_max_members keyword/value pairs."""
    settings = get_settings()
    result, _, _ = await _run(req)
    if result is None:
        raise HTTPException(status_code=400, detail="No valid keyword lines to export")

    csv_content = to_csv(result.groups, max_members=settings.csv_max_members)
    return Response(
        content=csv_content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{settings.csv_filename}"'},
    )
