"""Result models returned by the engine's entry points."""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from governance.policies import RulePolicy


class ValidationResult(BaseModel):
    """Accumulates validation findings for one object.

    Created fresh for every validation call and owned by the caller.
    """

    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    def add_error(self, error: str) -> None:
        self.errors.append(error)

    def add_warning(self, warning: str) -> None:
        self.warnings.append(warning)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def __str__(self) -> str:
        parts = []
        if self.errors:
            parts.append(f"Errors: {self.errors}")
        if self.warnings:
            parts.append(f"Warnings: {self.warnings}")
        return "; ".join(parts)


class RuleExecutionResult(BaseModel):
    """Outcome of a single business-rule invocation."""

    model_config = ConfigDict(frozen=True)

    success: bool
    message: str
    result: Any = None


@dataclass(frozen=True)
class RuleDescriptor:
    """A rule-tagged operation found on a type."""

    operation_name: str
    policy: RulePolicy

    def __str__(self) -> str:
        return f"{self.operation_name} -> {self.policy.category.value} (Priority: {self.policy.priority})"
