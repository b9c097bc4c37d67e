"""Object validator — applies member validation policies to current values.

Usage:
    result = validate_object(part)
    if not result.is_valid:
        print(result.errors)
"""

from typing import Any, Optional

from governance.checks import BaseCheck, default_checks
from governance.introspection import MemberDescription, describe_members
from governance.models import ValidationResult

NULL_OBJECT_ERROR = "Object cannot be null"


class ObjectValidator:
    """Runs the check chain over every policy-carrying member of an object.

    Errors accumulate in member declaration order. The validator holds no
    per-call state, so one instance can serve concurrent callers.
    """

    def __init__(self, checks: Optional[list[BaseCheck]] = None):
        self.checks = default_checks() if checks is None else checks

    def validate(self, obj: Any) -> ValidationResult:
        result = ValidationResult()

        if obj is None:
            result.add_error(NULL_OBJECT_ERROR)
            return result

        for member in describe_members(obj):
            if member.policy is not None:
                self._validate_member(member, result)

        return result

    def _validate_member(self, member: MemberDescription, result: ValidationResult) -> None:
        if not member.readable:
            result.add_error(f"Cannot access field {member.name}: {member.error}")
            return

        if member.value is None:
            if member.policy.required:
                result.add_error(f"{member.name} is required but is null")
            return

        for check in self.checks:
            if not check.applies(member.value):
                continue
            try:
                for error in check.check(member.name, member.value, member.policy):
                    result.add_error(error)
            except Exception as e:
                # Don't let one broken check kill the rest of the object
                result.add_error(f"Check '{check.name}' failed for {member.name}: {e}")

    def add_check(self, check: BaseCheck) -> None:
        """Add a custom check to the chain."""
        self.checks.append(check)

    def remove_check(self, check_name: str) -> None:
        """Remove a check by name."""
        self.checks = [c for c in self.checks if c.name != check_name]


# Module-level singleton
object_validator = ObjectValidator()


def validate_object(obj: Any) -> ValidationResult:
    """Validate an object against the validation policies on its members."""
    return object_validator.validate(obj)
