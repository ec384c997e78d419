import logging
from typing import Any, Dict, Optional

audit_logger = logging.getLogger("core.audit")


def log_action(*, user_id: Optional[int], action: str, object_type: Optional[str]=None,
               object_id: Optional[int]=None, detail: Optional[Dict[str, Any]]=None) -> None:
    audit_logger.info(
        "action=%s user=%s object=%s:%s detail=%s",
        action, user_id, object_type or "-", object_id if object_id is not None else "-", detail or {},
    )
