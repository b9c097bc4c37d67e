"""Rule invoker — runs named operations and reports their outcome.

Rule policies are advisory: an operation without one still runs, it just
isn't logged. Failures never propagate to the caller; they come back as a
``RuleExecutionResult`` with ``success=False``.

Usage:
    outcome = execute_business_rule(service_request, "calculate_cost")
    if outcome.success:
        total = outcome.result
"""

from typing import Any

import structlog

from governance.declarations import RULE_POLICY_ATTR
from governance.introspection import describe_operations
from governance.models import RuleDescriptor, RuleExecutionResult
from governance.policies import RulePolicy
from governance.registry import policy_registry

logger = structlog.get_logger()

NO_RULE_MESSAGE = "No business rule annotation found"
SUCCESS_MESSAGE = "Business rule executed successfully"
FAILURE_PREFIX = "Failed to execute business rule: "


class RuleInvoker:
    """Invokes operations by name and introspects rule-tagged operations."""

    def execute(self, obj: Any, operation_name: str, *args, **kwargs) -> RuleExecutionResult:
        policy = None
        try:
            operation = getattr(obj, operation_name)
            if not callable(operation):
                raise TypeError(f"'{operation_name}' of {type(obj).__name__} is not an operation")

            policy = policy_registry.describe(type(obj)).rule_policy(operation_name)
            if policy is None:
                # Private operations are not listed but may still carry a tag
                tagged = getattr(operation, RULE_POLICY_ATTR, None)
                policy = tagged if isinstance(tagged, RulePolicy) else None
            if policy is None:
                return RuleExecutionResult(
                    success=True,
                    message=NO_RULE_MESSAGE,
                    result=operation(*args, **kwargs),
                )

            if policy.log_execution:
                logger.info(
                    "business_rule_executing",
                    rule=policy.category.value,
                    priority=policy.priority,
                    operation=operation_name,
                    entity=type(obj).__name__,
                )

            return RuleExecutionResult(
                success=True,
                message=SUCCESS_MESSAGE,
                result=operation(*args, **kwargs),
            )

        except Exception as e:
            message = f"{FAILURE_PREFIX}{e}"
            logger.error(
                "business_rule_failed",
                operation=operation_name,
                entity=type(obj).__name__,
                error=str(e),
                error_type=type(e).__name__,
                critical=policy.critical if policy else False,
                rule_error_message=policy.error_message if policy else "",
            )
            return RuleExecutionResult(success=False, message=message)

    def rules_for(self, cls: type) -> list[RuleDescriptor]:
        """All rule-tagged operations of a type, inherited ones included."""
        return [
            RuleDescriptor(operation_name=name, policy=policy)
            for name, policy in describe_operations(cls)
            if policy is not None
        ]


# Module-level singleton
rule_invoker = RuleInvoker()


def execute_business_rule(obj: Any, operation_name: str, *args, **kwargs) -> RuleExecutionResult:
    """Invoke ``obj.<operation_name>(*args, **kwargs)`` and report the outcome."""
    return rule_invoker.execute(obj, operation_name, *args, **kwargs)


def get_business_rules(cls: type) -> list[RuleDescriptor]:
    """List the rule-tagged operations of a type."""
    return rule_invoker.rules_for(cls)
