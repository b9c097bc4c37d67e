"""Governance engine — policy metadata for domain objects, applied by introspection.

Usage:
    from governance import validate_object, process_audit, execute_business_rule

    result = validate_object(part)
    process_audit(part, "CREATED")
    outcome = execute_business_rule(part, "reduce_stock", 2)
"""

from governance.audit import AuditRecorder, process_audit, render_audit_message
from governance.declarations import auditable, business_rule, governed_members
from governance.engine import GovernanceEngine, governance_engine
from governance.identifiers import UniqueIdGenerator, id_generator
from governance.introspection import describe_members, describe_operations, describe_type
from governance.models import RuleDescriptor, RuleExecutionResult, ValidationResult
from governance.policies import (
    AuditLevel,
    AuditPolicy,
    RuleCategory,
    RulePolicy,
    ValidationCategory,
    ValidationPolicy,
)
from governance.registry import PolicyRegistry, policy_registry
from governance.rules import RuleInvoker, execute_business_rule, get_business_rules
from governance.validator import ObjectValidator, validate_object

__all__ = [
    "AuditLevel",
    "AuditPolicy",
    "AuditRecorder",
    "GovernanceEngine",
    "ObjectValidator",
    "PolicyRegistry",
    "RuleCategory",
    "RuleDescriptor",
    "RuleExecutionResult",
    "RuleInvoker",
    "RulePolicy",
    "UniqueIdGenerator",
    "ValidationCategory",
    "ValidationPolicy",
    "ValidationResult",
    "auditable",
    "business_rule",
    "describe_members",
    "describe_operations",
    "describe_type",
    "execute_business_rule",
    "get_business_rules",
    "governance_engine",
    "governed_members",
    "id_generator",
    "policy_registry",
    "process_audit",
    "render_audit_message",
    "validate_object",
]
