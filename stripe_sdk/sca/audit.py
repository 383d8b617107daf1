"""
Audit trail for redirect authentication attempts.

Every state change of an attempt gets a single log line with the attempt id,
the action and a short JSON blob of details. Attempts are never persisted,
so the log is the only record of how a given 3-D Secure round trip went.
"""

import json
import logging
from typing import Any, Optional

logger = logging.getLogger("stripe_sdk.audit")


def log_event(
    attempt_id: str,
    action: str,
    details: Optional[dict[str, Any]] = None,
    level: int = logging.INFO,
) -> None:
    """
    Write one audit line for an attempt.

    Args:
        attempt_id: The attempt the event belongs to.
        action: What happened (e.g. "attempt_started", "link_matched").
        details: Arbitrary context, serialized to JSON and truncated.
        level: Logging level, INFO unless the event is noise.
    """
    logger.log(
        level,
        "AUDIT | attempt=%s action=%s | %s",
        attempt_id[:8],
        action,
        json.dumps(details, default=str)[:200] if details else "",
    )
