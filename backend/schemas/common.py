# backend/schemas/common.py
from typing import Any, Dict, List, Optional


def success_response(message: str, data: Any = None, count: Optional[int] = None,
                     warnings: Optional[List[str]] = None, **extra: Any) -> Dict[str, Any]:
    """Standard envelope: {success, message, data?, count?, warnings?}."""
    body: Dict[str, Any] = {"success": True, "message": message}
    if data is not None:
        body["data"] = data
    if count is not None:
        body["count"] = count
    body.update(extra)
    if warnings:
        body["warnings"] = warnings
    return body
