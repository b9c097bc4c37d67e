"""Decorators that attach policies to types, members and operations.

Usage:
    @auditable(level=AuditLevel.DETAILED, audit_prefix="INVENTORY")
    @governed_members(
        name=ValidationPolicy(min_length=1, max_length=100),
        unit_price=ValidationPolicy(min_value=0.0),
    )
    class Part:
        @business_rule(RuleCategory.INVENTORY_MANAGEMENT, priority=2)
        def reduce_stock(self, quantity): ...

Pydantic models declare member policies with ``Annotated[T, ValidationPolicy(...)]``
and dataclasses with ``field(metadata={"validation": ValidationPolicy(...)})``.
"""

from typing import Callable, TypeVar

from governance.policies import AuditLevel, AuditPolicy, RuleCategory, RulePolicy, ValidationPolicy

# Attribute names the registry looks for
AUDIT_POLICY_ATTR = "__audit_policy__"
MEMBER_POLICIES_ATTR = "__member_policies__"
RULE_POLICY_ATTR = "__rule_policy__"

# Key used in dataclasses.field(metadata=...)
DATACLASS_METADATA_KEY = "validation"

T = TypeVar("T", bound=type)
F = TypeVar("F", bound=Callable)


def auditable(
    level: AuditLevel = AuditLevel.STANDARD,
    track_field_changes: bool = True,
    track_creation: bool = True,
    track_modification: bool = True,
    track_deletion: bool = True,
    audit_prefix: str = "",
) -> Callable[[T], T]:
    """Mark a type as audited."""
    policy = AuditPolicy(
        level=level,
        track_field_changes=track_field_changes,
        track_creation=track_creation,
        track_modification=track_modification,
        track_deletion=track_deletion,
        audit_prefix=audit_prefix,
    )

    def decorator(cls: T) -> T:
        # Stored in the class' own __dict__ so subclasses inherit via the MRO walk
        setattr(cls, AUDIT_POLICY_ATTR, policy)
        return cls

    return decorator


def governed_members(**policies: ValidationPolicy) -> Callable[[T], T]:
    """Attach validation policies to members of a plain class.

    Keyword order is the member declaration order used for reporting. The
    member may be stored publicly, as ``_name`` or name-mangled as ``__name``.
    """
    for member, policy in policies.items():
        if not isinstance(policy, ValidationPolicy):
            raise TypeError(
                f"Policy for member '{member}' must be a ValidationPolicy, got {type(policy).__name__}"
            )

    def decorator(cls: T) -> T:
        setattr(cls, MEMBER_POLICIES_ATTR, dict(policies))
        return cls

    return decorator


def business_rule(
    category: RuleCategory,
    priority: int = 3,
    critical: bool = False,
    error_message: str = "",
    log_execution: bool = True,
) -> Callable[[F], F]:
    """Tag an operation as a business rule.

    The function is returned unchanged apart from the attached policy, so it
    remains an ordinary method (and an ordinary attribute on pydantic models).
    """
    policy = RulePolicy(
        category=category,
        priority=priority,
        critical=critical,
        error_message=error_message,
        log_execution=log_execution,
    )

    def decorator(func: F) -> F:
        setattr(func, RULE_POLICY_ATTR, policy)
        return func

    return decorator
