"""Rule result entities.

A RuleResult is the value produced by evaluating one rule against one
PasswordData. An AggregateResult folds the results of every rule of a
validator into a single verdict.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Mapping


class CountCategory(str, Enum):
    """Keys for count-style metadata reported by character oriented rules."""

    LENGTH = "length"
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    DIGIT = "digit"
    SPECIAL = "special"
    WHITESPACE = "whitespace"
    ALLOWED = "allowed"
    ILLEGAL = "illegal"


@dataclass(frozen=True)
class RuleResultDetail:
    """A single reason why a password failed a rule.

    Attributes:
        message_key: Stable identifier of the failure reason, e.g. TOO_SHORT.
        parameters: Named values used when rendering the message.
        error_codes: Codes ordered most specific first; the last one is
            always message_key.
    """

    message_key: str
    parameters: Mapping[str, Any] = field(default_factory=dict)
    error_codes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.message_key:
            raise ValueError("message_key cannot be empty")
        codes = tuple(code for code in self.error_codes if code != self.message_key)
        if any(not code for code in codes):
            raise ValueError("error codes cannot be empty")
        object.__setattr__(self, "error_codes", codes + (self.message_key,))
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "message_key": self.message_key,
            "parameters": dict(self.parameters),
            "error_codes": list(self.error_codes),
        }

    def __str__(self) -> str:
        return f"{self.message_key}:{dict(self.parameters)}"


@dataclass(frozen=True)
class RuleResult:
    """Outcome of one rule evaluation.

    Attributes:
        valid: Whether the password complies with the rule.
        details: Failure details in the order the rule found them.
        metadata: Rule specific facts, e.g. character counts.
    """

    valid: bool = True
    details: tuple[RuleResultDetail, ...] = ()
    metadata: Mapping[Any, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "details", tuple(self.details))
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @classmethod
    def from_details(
        cls,
        details: Iterable[RuleResultDetail],
        metadata: Mapping[Any, Any] | None = None,
    ) -> "RuleResult":
        """Create a result that is valid exactly when no details were found."""
        details = tuple(details)
        return cls(valid=not details, details=details, metadata=metadata or {})

    @property
    def message_keys(self) -> list[str]:
        """Message keys of all details, in order."""
        return [detail.message_key for detail in self.details]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "valid": self.valid,
            "details": [detail.to_dict() for detail in self.details],
            "metadata": {
                (key.value if isinstance(key, Enum) else key): value
                for key, value in self.metadata.items()
            },
        }


@dataclass(frozen=True)
class AggregateResult(RuleResult):
    """Combined outcome of every rule configured on a validator.

    valid is the conjunction of all per-rule flags and details is the
    concatenation of per-rule details in rule registration order.

    Attributes:
        results: Per-rule results in registration order.
    """

    results: tuple[RuleResult, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "results", tuple(self.results))

    @classmethod
    def combine(cls, results: Iterable[RuleResult]) -> "AggregateResult":
        """Fold per-rule results into one aggregate.

        Args:
            results: Per-rule results in registration order.

        Returns:
            AggregateResult: The folded verdict.
        """
        results = tuple(results)
        details: list[RuleResultDetail] = []
        metadata: dict[Any, Any] = {}
        for result in results:
            details.extend(result.details)
            metadata.update(result.metadata)
        return cls(
            valid=all(result.valid for result in results),
            details=tuple(details),
            metadata=metadata,
            results=results,
        )
