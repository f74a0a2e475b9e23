"""Exceptions raised while configuring password rules.

Policy violations are never exceptions; they are reported through
RuleResult values. Exceptions are reserved for programmer error detected
while building rules, searchers and validators.
"""


class RuleError(Exception):
    """Base class for all rule-related errors."""
    pass


class RuleConfigurationError(RuleError, ValueError):
    """Raised when a rule or one of its collaborators is misconfigured."""

    def __init__(self, message: str, option: str | None = None):
        self.option = option
        super().__init__(f"{option}: {message}" if option is not None else message)
