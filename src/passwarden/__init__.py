"""Passwarden - password policy validation engine.

Evaluates a configurable set of independent password rules and reports,
per rule, whether a password complies along with structured details for
message resolution.
"""

__version__ = "0.1.0"

from passwarden.domain.entities import (
    AggregateResult,
    CountCategory,
    PasswordData,
    RuleResult,
    RuleResultDetail,
)
from passwarden.domain.services import (
    MessageResolver,
    PasswordValidator,
    build_default_validator,
)

__all__ = [
    "AggregateResult",
    "CountCategory",
    "MessageResolver",
    "PasswordData",
    "PasswordValidator",
    "RuleResult",
    "RuleResultDetail",
    "__version__",
    "build_default_validator",
]
