import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

def run_best_effort(label: str, fn: Callable[..., Any], *args, **kwargs) -> bool:
    """
    Run a secondary side effect whose failure must not fail the caller.
    Errors are logged with traceback and reported as False; a falsy return
    from `fn` (e.g. a gateway returning None for an unknown id) is also False.
    """
    try:
        result = fn(*args, **kwargs)
    except Exception:
        logger.warning("best-effort %s failed", label, exc_info=True)
        return False
    if result is None or result is False:
        logger.warning("best-effort %s had no effect", label)
        return False
    logger.info("best-effort %s done", label)
    return True
