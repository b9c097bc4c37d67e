"""Policy descriptors — inert metadata attached to members, operations and types.

Policies describe constraints and expectations. They carry no behavior; the
validator, audit recorder and rule invoker are the only consumers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

MIN_PRIORITY = 1
MAX_PRIORITY = 5


class ValidationCategory(str, Enum):
    """Business area a member-level validation belongs to."""

    STANDARD = "STANDARD"
    COST = "COST"
    TIME = "TIME"
    INVENTORY = "INVENTORY"
    CUSTOMER = "CUSTOMER"
    VEHICLE = "VEHICLE"


class AuditLevel(str, Enum):
    """How much of an entity's lifecycle is expected to be audited."""

    NONE = "NONE"              # No auditing
    BASIC = "BASIC"            # Creation/deletion only
    STANDARD = "STANDARD"      # Adds modifications
    DETAILED = "DETAILED"      # Adds field-level changes
    COMPLIANCE = "COMPLIANCE"  # Full compliance trail


class RuleCategory(str, Enum):
    """Kind of business rule an operation implements."""

    COST_CALCULATION = "COST_CALCULATION"
    INVENTORY_MANAGEMENT = "INVENTORY_MANAGEMENT"
    CUSTOMER_VALIDATION = "CUSTOMER_VALIDATION"
    VEHICLE_VALIDATION = "VEHICLE_VALIDATION"
    SERVICE_VALIDATION = "SERVICE_VALIDATION"
    PAYMENT_VALIDATION = "PAYMENT_VALIDATION"
    TIME_ESTIMATION = "TIME_ESTIMATION"
    QUALITY_ASSURANCE = "QUALITY_ASSURANCE"
    COMPLIANCE_CHECK = "COMPLIANCE_CHECK"
    CUSTOM = "CUSTOM"


@dataclass(frozen=True)
class ValidationPolicy:
    """Constraints for a single data member.

    Numeric bounds apply to real numbers, length bounds to strings. Bounds are
    not cross-checked: ``min_value > max_value`` is a declaration error the
    engine will faithfully report on every value.

    Must stay a plain dataclass: pydantic reads a model instance found in
    ``Annotated[...]`` metadata as the field schema.
    """

    category: ValidationCategory = ValidationCategory.STANDARD
    required: bool = True
    message: str = ""
    min_value: float = float("-inf")
    max_value: float = float("inf")
    min_length: int = 0
    max_length: Optional[int] = None  # None = unbounded


@dataclass(frozen=True)
class AuditPolicy:
    """Audit expectations for a whole type.

    The ``track_*`` flags are descriptive only; callers pick the action label.
    """

    level: AuditLevel = AuditLevel.STANDARD
    track_field_changes: bool = True
    track_creation: bool = True
    track_modification: bool = True
    track_deletion: bool = True
    audit_prefix: str = ""


@dataclass(frozen=True)
class RulePolicy:
    """Business-rule metadata for an operation."""

    category: RuleCategory
    priority: int = 3  # 1 = highest, 5 = lowest
    critical: bool = False
    error_message: str = ""
    log_execution: bool = True

    def __post_init__(self):
        if not MIN_PRIORITY <= self.priority <= MAX_PRIORITY:
            raise ValueError(
                f"Rule priority must be between {MIN_PRIORITY} and {MAX_PRIORITY}, got {self.priority}"
            )
