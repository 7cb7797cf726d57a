import logging
from sqlalchemy.orm import Session
from sqlalchemy import select, desc, delete
from sqlalchemy.exc import SQLAlchemyError
from app.memos.models import Memo
from app.memos.schemas import MemoCreate, MemoUpdate, SummaryPatch

logger = logging.getLogger(__name__)

def _commit(db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

def create_memo(db: Session, payload: MemoCreate) -> Memo:
    memo = Memo(title=payload.title, content=payload.content, category=payload.category)
    memo.tags = payload.tags
    db.add(memo)
    _commit(db)
    db.refresh(memo)
    return memo

def get_memo(db: Session, memo_id: str) -> Memo | None:
    return db.get(Memo, memo_id)

def list_memos(db: Session) -> list[Memo]:
    stmt = select(Memo).order_by(desc(Memo.created_at))
    return list(db.scalars(stmt).all())

def update_memo(db: Session, memo_id: str, payload: MemoUpdate) -> Memo | None:
    memo = db.get(Memo, memo_id)
    if not memo:
        return None
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in changes.items():
        setattr(memo, field, value)  # `tags` goes through the JSON setter
    _commit(db)
    db.refresh(memo)
    return memo

def write_summary(db: Session, memo_id: str, patch: SummaryPatch) -> Memo | None:
    """Touch only the `summary` column of an existing memo."""
    memo = db.get(Memo, memo_id)
    if not memo:
        return None
    memo.summary = patch.summary
    _commit(db)
    db.refresh(memo)
    logger.info("summary saved for memo %s", memo_id)
    return memo

def delete_memo(db: Session, memo_id: str) -> bool:
    memo = db.get(Memo, memo_id)
    if not memo:
        return False
    db.delete(memo)
    _commit(db)
    return True

def delete_all_memos(db: Session) -> int:
    res = db.execute(delete(Memo))
    _commit(db)
    return res.rowcount or 0
