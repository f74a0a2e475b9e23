"""Domain entities for Passwarden.

Entities are frozen Python dataclasses that represent validation inputs
and outcomes. They have no dependencies on infrastructure or frameworks.
"""

from passwarden.domain.entities.password_data import PasswordData
from passwarden.domain.entities.rule_result import (
    AggregateResult,
    CountCategory,
    RuleResult,
    RuleResultDetail,
)

__all__ = [
    "AggregateResult",
    "CountCategory",
    "PasswordData",
    "RuleResult",
    "RuleResultDetail",
]
