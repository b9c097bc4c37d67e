"""Introspection layer — reads members, operations and policies of any object.

Purely observational. Member values are read whether they live in a public
attribute, a ``_name`` attribute or a name-mangled ``__name`` attribute, so
plain classes, frozen dataclasses and pydantic models are all handled the same
way. A member whose value cannot be read is reported with ``error`` set rather
than aborting the walk.
"""

from dataclasses import dataclass
from typing import Any, Optional

from governance.policies import AuditPolicy, RulePolicy, ValidationPolicy
from governance.registry import policy_registry

# Optional capability hook: obj.get_member_value(name) -> value
MEMBER_VALUE_HOOK = "get_member_value"


@dataclass(frozen=True)
class MemberDescription:
    """One data member of an object as seen at introspection time."""

    name: str
    value: Any = None
    policy: Optional[ValidationPolicy] = None
    error: Optional[str] = None

    @property
    def readable(self) -> bool:
        return self.error is None


def _storage_names(cls: type, name: str) -> list[str]:
    """Attribute names a member may be stored under, most public first."""
    if name.startswith("_"):
        return [name]
    names = [name, f"_{name}"]
    for klass in cls.__mro__:
        if klass is object:
            continue
        mangled = f"_{klass.__name__.lstrip('_')}__{name}"
        if mangled not in names:
            names.append(mangled)
    return names


def _read_member(obj: Any, name: str) -> tuple[Any, Optional[str]]:
    """Read a member's current value. Returns (value, error)."""
    hook = getattr(obj, MEMBER_VALUE_HOOK, None)
    if callable(hook):
        try:
            return hook(name), None
        except Exception as e:
            return None, str(e)

    first_error: Optional[str] = None
    for attr in _storage_names(type(obj), name):
        try:
            return getattr(obj, attr), None
        except AttributeError as e:
            if first_error is None:
                first_error = str(e)
        except Exception as e:
            # A property that fails is an unreadable member, not a missing one
            return None, str(e)
    return None, first_error


def describe_members(obj: Any) -> list[MemberDescription]:
    """List the object's data members with their current values and policies.

    Declared members come first in declaration order, followed by any
    remaining instance attributes (without policy) of plain objects.
    """
    cls = type(obj)
    descriptor = policy_registry.describe(cls)

    descriptions: list[MemberDescription] = []
    covered: set[str] = set()
    for name, policy in descriptor.members:
        value, error = _read_member(obj, name)
        covered.update(_storage_names(cls, name))
        descriptions.append(MemberDescription(name=name, value=value, policy=policy, error=error))

    for name, value in getattr(obj, "__dict__", {}).items():
        if name not in covered:
            descriptions.append(MemberDescription(name=name, value=value))

    return descriptions


def describe_type(cls: type) -> Optional[AuditPolicy]:
    """Audit policy carried by a type, if any."""
    return policy_registry.describe(cls).audit_policy


def describe_operations(cls: type) -> list[tuple[str, Optional[RulePolicy]]]:
    """Public operations of a type with their rule policies, in MRO order."""
    return list(policy_registry.describe(cls).operations)


def read_identity(obj: Any, accessor: str) -> Optional[str]:
    """Stringified result of the object's zero-argument identity accessor.

    Returns None when the accessor is missing, fails, or yields None.
    """
    method = getattr(obj, accessor, None)
    if not callable(method):
        return None
    try:
        identity = method()
    except Exception:
        return None
    return None if identity is None else str(identity)
