# app/generation/api.py
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.shared.db import get_db
from app.shared.errors import MemoServiceError
from app.shared.http import err, err_from
from .client import GenerationClient, get_generation_client
from .schemas import GenerationResult, SummaryIn, SummaryOut, TagsIn, TagsOut
from .service import request_summary, request_tags

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/memos", tags=["Memos: AI"])

def _respond(result: GenerationResult) -> SummaryOut | TagsOut:
    if result.kind == "summary":
        return SummaryOut(summary=result.text)
    return TagsOut(tags=result.items)

@router.post("/summary", response_model=SummaryOut)
def api_memo_summary(
    inb: SummaryIn,
    client: GenerationClient = Depends(get_generation_client),
    db: Session = Depends(get_db),
):
    try:
        return _respond(request_summary(client, inb.title, inb.content, memo_id=inb.memo_id, db=db))
    except MemoServiceError as e:
        return err_from(e)
    except Exception:
        logger.exception("summary request failed")
        return err("Summary generation failed.", code="tool_failed", status=500)

@router.post("/tags", response_model=TagsOut)
def api_memo_tags(inb: TagsIn, client: GenerationClient = Depends(get_generation_client)):
    try:
        return _respond(request_tags(client, inb.title, inb.content))
    except MemoServiceError as e:
        return err_from(e)
    except Exception:
        logger.exception("tag request failed")
        return err("Tag generation failed.", code="tool_failed", status=500)
