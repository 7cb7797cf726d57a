from fastapi import HTTPException
from typing import Any, Optional

from app.shared.errors import MemoServiceError

def ok(data: Any = None, **extra):
    return {"ok": True, "data": data, **extra}

def err(message: str, code: str = "bad_request", status: int = 400, details: Optional[Any] = None):
    # raise OR return; pick one style. I prefer raising to short-circuit.
    raise HTTPException(status_code=status, detail={"ok": False, "error": {"code": code, "message": message, "details": details}})

def err_from(exc: MemoServiceError):
    return err(exc.message, code=exc.code, status=exc.status, details=exc.details)
