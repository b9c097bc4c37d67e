"""Policy registry — per-type descriptor tables, built once per type.

A descriptor table maps member names to validation policies, operation names
to rule policies and the type itself to its audit policy. Tables are compiled
from declarations (decorators, pydantic ``Annotated`` metadata, dataclass field
metadata) the first time a type is seen and cached for the life of the process.
Types that cannot be decorated register their policies explicitly:

    policy_registry.register(
        ThirdPartyInvoice,
        members={"total": ValidationPolicy(min_value=0.0)},
        audit=AuditPolicy(level=AuditLevel.COMPLIANCE),
        operations={"finalize": RulePolicy(category=RuleCategory.PAYMENT_VALIDATION)},
    )
"""

import dataclasses
import threading
import weakref
from dataclasses import dataclass
from typing import Mapping, Optional

import structlog
from pydantic import BaseModel

from governance.declarations import (
    AUDIT_POLICY_ATTR,
    DATACLASS_METADATA_KEY,
    MEMBER_POLICIES_ATTR,
    RULE_POLICY_ATTR,
)
from governance.policies import AuditPolicy, RulePolicy, ValidationPolicy

logger = structlog.get_logger()


@dataclass(frozen=True)
class TypeDescriptor:
    """Compiled policy table for one type."""

    type_name: str
    members: tuple[tuple[str, Optional[ValidationPolicy]], ...] = ()
    audit_policy: Optional[AuditPolicy] = None
    operations: tuple[tuple[str, Optional[RulePolicy]], ...] = ()

    def member_names(self) -> list[str]:
        return [name for name, _ in self.members]

    def rule_policy(self, operation_name: str) -> Optional[RulePolicy]:
        """Policy of the operation as resolved on this type (most-derived first)."""
        for name, policy in self.operations:
            if name == operation_name:
                return policy
        return None


def _is_framework_class(klass: type) -> bool:
    """Base classes whose own members are not part of a governed type."""
    if klass is object or klass in BaseModel.__mro__:
        return True
    module = klass.__module__ or ""
    return module == "pydantic" or module.startswith("pydantic.")


def _unwrap_operation(attr):
    """Return the underlying function of a class attribute, or None if it is not an operation."""
    if isinstance(attr, (staticmethod, classmethod)):
        attr = attr.__func__
    if callable(attr) and not isinstance(attr, type):
        return attr
    return None


class PolicyRegistry:
    """Thread-safe cache of descriptor tables keyed by type.

    Types are held weakly so dynamically created classes can be collected.
    """

    def __init__(self):
        self._descriptors: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()
        self._explicit_members: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()
        self._explicit_audit: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()
        self._explicit_operations: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()
        self._lock = threading.Lock()

    def register(
        self,
        cls: type,
        members: Optional[Mapping[str, ValidationPolicy]] = None,
        audit: Optional[AuditPolicy] = None,
        operations: Optional[Mapping[str, RulePolicy]] = None,
    ) -> None:
        """Explicitly attach policies to a type without decorating it.

        Explicit policies take precedence over declared ones for the same name.
        """
        with self._lock:
            if members:
                self._explicit_members.setdefault(cls, {}).update(members)
            if audit is not None:
                self._explicit_audit[cls] = audit
            if operations:
                self._explicit_operations.setdefault(cls, {}).update(operations)
            # Subclass tables may embed this type's policies
            self._descriptors.clear()

        logger.debug(
            "policy_registered",
            type_name=cls.__name__,
            members=sorted(members or {}),
            audit=audit is not None,
            operations=sorted(operations or {}),
        )

    def describe(self, cls: type) -> TypeDescriptor:
        """Get the descriptor table for a type, compiling it on first use."""
        descriptor = self._descriptors.get(cls)
        if descriptor is not None:
            return descriptor

        with self._lock:
            descriptor = self._descriptors.get(cls)
            if descriptor is None:
                descriptor = self._compile(cls)
                self._descriptors[cls] = descriptor
        return descriptor

    def clear(self) -> None:
        """Drop all cached tables and explicit registrations."""
        with self._lock:
            self._descriptors.clear()
            self._explicit_members.clear()
            self._explicit_audit.clear()
            self._explicit_operations.clear()

    # ── Compilation ──

    def _compile(self, cls: type) -> TypeDescriptor:
        return TypeDescriptor(
            type_name=cls.__name__,
            members=tuple(self._compile_members(cls).items()),
            audit_policy=self._compile_audit(cls),
            operations=tuple(self._compile_operations(cls)),
        )

    def _compile_members(self, cls: type) -> dict[str, Optional[ValidationPolicy]]:
        members: dict[str, Optional[ValidationPolicy]] = {}

        if isinstance(cls, type) and issubclass(cls, BaseModel):
            for name, info in cls.model_fields.items():
                members[name] = next(
                    (m for m in info.metadata if isinstance(m, ValidationPolicy)), None
                )
        elif dataclasses.is_dataclass(cls):
            for f in dataclasses.fields(cls):
                members[f.name] = f.metadata.get(DATACLASS_METADATA_KEY)

        # Decorator and explicit policies, base classes first so subclasses override
        for klass in reversed(cls.__mro__):
            if _is_framework_class(klass):
                continue
            declared = vars(klass).get(MEMBER_POLICIES_ATTR)
            if declared:
                members.update(declared)
            explicit = self._explicit_members.get(klass)
            if explicit:
                members.update(explicit)

        return members

    def _compile_audit(self, cls: type) -> Optional[AuditPolicy]:
        for klass in cls.__mro__:
            if _is_framework_class(klass):
                continue
            if klass in self._explicit_audit:
                return self._explicit_audit[klass]
            policy = vars(klass).get(AUDIT_POLICY_ATTR)
            if policy is not None:
                return policy
        return None

    def _compile_operations(self, cls: type) -> list[tuple[str, Optional[RulePolicy]]]:
        """Public operations in MRO order; an override and its base both appear."""
        explicit: dict[str, RulePolicy] = {}
        for klass in reversed(cls.__mro__):
            explicit.update(self._explicit_operations.get(klass, {}))

        is_model = issubclass(cls, BaseModel)
        operations = []
        for klass in cls.__mro__:
            if _is_framework_class(klass):
                continue
            for name, attr in vars(klass).items():
                if name.startswith("_") or (is_model and name.startswith("model_")):
                    continue
                func = _unwrap_operation(attr)
                if func is None:
                    continue
                policy = explicit.get(name) or getattr(func, RULE_POLICY_ATTR, None)
                operations.append((name, policy))
        return operations


# Module-level singleton
policy_registry = PolicyRegistry()
