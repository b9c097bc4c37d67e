"""Audit recorder — emits an audit line for objects whose type is auditable."""

from datetime import datetime
from typing import Any, Optional

import structlog

from governance.config import get_settings
from governance.introspection import describe_type, read_identity
from governance.policies import AuditPolicy

logger = structlog.get_logger()

UNKNOWN_ID = "unknown"


def render_audit_message(
    obj: Any,
    action: str,
    policy: AuditPolicy,
    timestamp: Optional[datetime] = None,
    identity_accessor: Optional[str] = None,
) -> str:
    """Render ``[prefix: ][LEVEL] action - TypeName (ID: id) at timestamp``."""
    accessor = identity_accessor or get_settings().IDENTITY_ACCESSOR
    object_id = read_identity(obj, accessor) or UNKNOWN_ID
    when = (timestamp or datetime.now()).isoformat()

    prefix = f"{policy.audit_prefix}: " if policy.audit_prefix else ""
    return (
        f"{prefix}[{policy.level.value}] {action} - "
        f"{type(obj).__name__} (ID: {object_id}) at {when}"
    )


class AuditRecorder:
    """Writes audit lines to the process-wide structlog sink.

    The policy's ``track_*`` flags are not consulted; the caller's action
    label decides what gets recorded.
    """

    def __init__(self, identity_accessor: Optional[str] = None):
        self.identity_accessor = identity_accessor or get_settings().IDENTITY_ACCESSOR

    def record(self, obj: Any, action: str) -> None:
        if obj is None:
            return

        policy = describe_type(type(obj))
        if policy is None:
            return

        message = render_audit_message(obj, action, policy, identity_accessor=self.identity_accessor)
        logger.info(
            "audit_recorded",
            audit_message=message,
            action=action,
            entity=type(obj).__name__,
            audit_level=policy.level.value,
        )


# Module-level singleton
audit_recorder = AuditRecorder()


def process_audit(obj: Any, action: str) -> None:
    """Record an audit event for ``obj`` if its type carries an audit policy."""
    audit_recorder.record(obj, action)
