"""Audit logging utilities.

Audit events are emitted as single-line JSON on the ``healthscript.audit`` logger.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional


logger = logging.getLogger("healthscript.audit")


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


async def audit_log_event(
    *,
    event: str,
    uhid: Optional[str] = None,
    user_id: Optional[str] = None,
    role: Optional[str] = None,
    resource_id: Optional[int] = None,
    payload: Optional[Dict[str, Any]] = None,
    level: int = logging.INFO,
) -> None:
    record = {
        "ts": _now_iso(),
        "event": event,
        "uhid": uhid,
        "user_id": user_id,
        "role": role,
        "resource_id": resource_id,
        "payload": payload or {},
    }
    logger.log(level, "AUDIT %s", json.dumps(record, ensure_ascii=False, default=str))
