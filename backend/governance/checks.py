"""Member checks — one strategy per kind of value a policy can constrain.

Each check is a standalone, independently testable unit. New checks are added
without modifying the validator.
"""

import numbers
from abc import ABC, abstractmethod
from typing import Any

from governance.policies import ValidationPolicy


class BaseCheck(ABC):
    """Abstract base for member checks.

    Contract:
        - applies() decides whether the value is of the kind this check handles
        - check() is deterministic and returns error strings (empty = no issues)
        - check() is only called with values that are not None
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for error reports."""
        ...

    @abstractmethod
    def applies(self, value: Any) -> bool:
        ...

    @abstractmethod
    def check(self, member: str, value: Any, policy: ValidationPolicy) -> list[str]:
        """Check a present value against the member's policy.

        Args:
            member: Member name used in messages
            value: Current member value
            policy: The member's validation policy

        Returns:
            List of error messages
        """
        ...


class StringLengthCheck(BaseCheck):
    """Length bounds for textual members."""

    @property
    def name(self) -> str:
        return "StringLengthCheck"

    def applies(self, value: Any) -> bool:
        return isinstance(value, str)

    def check(self, member: str, value: Any, policy: ValidationPolicy) -> list[str]:
        errors = []
        length = len(value)

        if length < policy.min_length:
            errors.append(f"{member} must be at least {policy.min_length} characters long")

        if policy.max_length is not None and length > policy.max_length:
            errors.append(f"{member} must be no more than {policy.max_length} characters long")

        return errors


class NumericRangeCheck(BaseCheck):
    """Value bounds for numeric members. Booleans and complex numbers are not numeric here."""

    @property
    def name(self) -> str:
        return "NumericRangeCheck"

    def applies(self, value: Any) -> bool:
        return isinstance(value, numbers.Number) and not isinstance(value, (bool, complex))

    def check(self, member: str, value: Any, policy: ValidationPolicy) -> list[str]:
        errors = []

        # Compare the value itself; big ints and Decimals may not fit a float.
        # Bounds are reported as floats, e.g. "must be at least 0.0"
        if value < policy.min_value:
            errors.append(f"{member} must be at least {float(policy.min_value)}")

        if value > policy.max_value:
            errors.append(f"{member} must be no more than {float(policy.max_value)}")

        return errors


def default_checks() -> list[BaseCheck]:
    """The default check chain, in execution order."""
    return [
        StringLengthCheck(),
        NumericRangeCheck(),
    ]
