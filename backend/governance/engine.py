"""Governance engine — one entry point for validation, auditing and rule execution.

This is the facade hosts use when they want a single object to pass around.
It knows nothing about domain types; everything goes through the policy
registry and the introspection layer.

Usage:
    engine = GovernanceEngine()
    result = engine.validate(part)
    engine.audit(part, "CREATED")
    outcome = engine.execute_rule(part, "reduce_stock", 2)
"""

from typing import Any, Optional

from governance.audit import AuditRecorder
from governance.models import RuleDescriptor, RuleExecutionResult, ValidationResult
from governance.rules import RuleInvoker
from governance.validator import ObjectValidator


class GovernanceEngine:
    """Bundles the validator, audit recorder and rule invoker.

    Every entry point is safe to call from several threads at once: results
    are created per call and the only shared sink is the logger.
    """

    def __init__(
        self,
        validator: Optional[ObjectValidator] = None,
        recorder: Optional[AuditRecorder] = None,
        invoker: Optional[RuleInvoker] = None,
    ):
        self.validator = validator or ObjectValidator()
        self.recorder = recorder or AuditRecorder()
        self.invoker = invoker or RuleInvoker()

    def validate(self, obj: Any) -> ValidationResult:
        return self.validator.validate(obj)

    def audit(self, obj: Any, action: str) -> None:
        self.recorder.record(obj, action)

    def execute_rule(self, obj: Any, operation_name: str, *args, **kwargs) -> RuleExecutionResult:
        return self.invoker.execute(obj, operation_name, *args, **kwargs)

    def rules_for(self, cls: type) -> list[RuleDescriptor]:
        return self.invoker.rules_for(cls)

    def validate_and_audit(self, obj: Any, action: str) -> ValidationResult:
        """Validate an object and audit it only if it passed.

        Mirrors the usual construction flow of a governed entity: reject
        invalid state first, then record the lifecycle event.
        """
        result = self.validate(obj)
        if result.is_valid:
            self.audit(obj, action)
        return result


# Module-level singleton
governance_engine = GovernanceEngine()
