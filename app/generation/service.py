import logging

from sqlalchemy.orm import Session

from app.generation.client import GenerationClient
from app.generation.parsing import parse_summary, parse_tags
from app.generation.prompts import build_summary_prompt, build_tag_prompt
from app.generation.schemas import GenerationRequest, Summary, Tags
from app.memos.schemas import SummaryPatch
from app.memos.service import write_summary
from app.shared.errors import ValidationError
from app.shared.side_effects import run_best_effort

logger = logging.getLogger(__name__)


def validate_request(title: str | None, content: str | None) -> GenerationRequest:
    if not title or not title.strip() or not content or not content.strip():
        raise ValidationError()
    return GenerationRequest(title=title, content=content)


def request_summary(
    client: GenerationClient,
    title: str | None,
    content: str | None,
    memo_id: str | None = None,
    db: Session | None = None,
) -> Summary:
    """
    Generate a summary and, when `memo_id` is given, save it best-effort.
    A failed save is logged and never changes the returned result.
    """
    req = validate_request(title, content)
    raw = client.generate(build_summary_prompt(req.title, req.content))
    summary = Summary(text=parse_summary(raw))

    if memo_id and db is not None:
        run_best_effort(
            f"summary write-back for memo {memo_id}",
            write_summary, db, memo_id, SummaryPatch(summary=summary.text),
        )
    return summary


def request_tags(client: GenerationClient, title: str | None, content: str | None) -> Tags:
    req = validate_request(title, content)
    raw = client.generate(build_tag_prompt(req.title, req.content))
    tags = Tags(items=parse_tags(raw))
    logger.debug("generated %d tag(s)", len(tags.items))
    return tags
