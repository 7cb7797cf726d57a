from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.shared.db import get_db
from app.shared.http import ok
from app.memos.schemas import CATEGORIES, MemoCreate, MemoUpdate, MemoOut, MemoList, MemoStats
from app.memos.search import filter_memos, memo_stats, ALL
from app.memos.service import (
    create_memo,
    get_memo,
    list_memos,
    update_memo,
    delete_memo,
    delete_all_memos,
)

router = APIRouter(prefix="/memos", tags=["Memos"])

@router.post("", response_model=MemoOut, status_code=201)
def create_m(payload: MemoCreate, db: Session = Depends(get_db)):
    return create_memo(db, payload)

@router.get("", response_model=MemoList)
def list_m(
    q: str | None = Query(None, description="Case-insensitive match on title, content or tags"),
    category: str = Query(ALL, description="Category name, or 'all'"),
    db: Session = Depends(get_db),
):
    if category != ALL and category not in CATEGORIES:
        raise HTTPException(422, f"Unknown category: {category}")
    memos = list_memos(db)
    items = filter_memos(memos, query=q, category=category)
    return {"items": items, "stats": memo_stats(memos, items)}

@router.get("/stats", response_model=MemoStats)
def stats_m(db: Session = Depends(get_db)):
    memos = list_memos(db)
    return memo_stats(memos, memos)

@router.delete("")
def delete_all_m(db: Session = Depends(get_db)):
    return ok({"deleted": delete_all_memos(db)})

@router.get("/{memo_id}", response_model=MemoOut)
def get_m(memo_id: str, db: Session = Depends(get_db)):
    memo = get_memo(db, memo_id)
    if not memo:
        raise HTTPException(404, "Memo not found")
    return memo

@router.patch("/{memo_id}", response_model=MemoOut)
def patch_m(memo_id: str, payload: MemoUpdate, db: Session = Depends(get_db)):
    memo = update_memo(db, memo_id, payload)
    if not memo:
        raise HTTPException(404, "Memo not found")
    return memo

@router.delete("/{memo_id}", status_code=204)
def delete_m(memo_id: str, db: Session = Depends(get_db)):
    if not delete_memo(db, memo_id):
        raise HTTPException(404, "Memo not found")
    return
