"""Message resolution service.

Turns rule result details into human readable text. Templates are plain
str.format strings whose placeholders are the detail parameter names.
"""

from string import Formatter
from typing import Any, Iterable, Mapping

from passwarden.domain.entities import RuleResultDetail

DEFAULT_MESSAGES: dict[str, str] = {
    "HISTORY_VIOLATION": "Password matches one of {history_size} previous passwords.",
    "ILLEGAL_WORD": "Password contains the dictionary word '{matching_word}'.",
    "ILLEGAL_WORD_REVERSED": "Password contains the reversed dictionary word '{matching_word}'.",
    "ILLEGAL_MATCH": "Password matches the illegal pattern '{match}'.",
    "ALLOWED_MATCH": "Password must match pattern '{pattern}'.",
    "ILLEGAL_CHAR": "Password {match_behavior} the illegal character '{illegal_character}'.",
    "ALLOWED_CHAR": "Password {match_behavior} the illegal character '{illegal_character}'.",
    "ILLEGAL_QWERTY_SEQUENCE": "Password contains the illegal QWERTY sequence '{sequence}'.",
    "ILLEGAL_ALPHABETICAL_SEQUENCE": "Password contains the illegal alphabetical sequence '{sequence}'.",
    "ILLEGAL_NUMERICAL_SEQUENCE": "Password contains the illegal numerical sequence '{sequence}'.",
    "ILLEGAL_USERNAME": "Password {match_behavior} the user id '{username}'.",
    "ILLEGAL_USERNAME_REVERSED": "Password {match_behavior} the user id '{username}' in reverse.",
    "USERNAME_UNDEFINED": "Password cannot be checked against an undefined user id.",
    "ILLEGAL_WHITESPACE": "Password {match_behavior} a whitespace character.",
    "ILLEGAL_NUMBER_RANGE": "Password {match_behavior} the number '{number}'.",
    "ILLEGAL_REPEATED_CHARS": "Password contains {matches_count} sequences of {sequence_length} or more repeated characters, but only {sequence_count} allowed: {matches}.",
    "INSUFFICIENT_UPPERCASE": "Password must contain {minimum_required} or more uppercase characters.",
    "INSUFFICIENT_LOWERCASE": "Password must contain {minimum_required} or more lowercase characters.",
    "INSUFFICIENT_ALPHABETICAL": "Password must contain {minimum_required} or more alphabetical characters.",
    "INSUFFICIENT_DIGIT": "Password must contain {minimum_required} or more digit characters.",
    "INSUFFICIENT_SPECIAL": "Password must contain {minimum_required} or more special characters.",
    "INSUFFICIENT_WHITESPACE": "Password must contain {minimum_required} or more whitespace characters.",
    "INSUFFICIENT_CHARACTERISTICS": "Password matches {success_count} of {rule_count} character rules, but {minimum_required} are required.",
    "INSUFFICIENT_COMPLEXITY": "Password meets {success_count} of {rule_count} complexity rules, but all are required.",
    "INSUFFICIENT_COMPLEXITY_RULES": "No complexity rules are configured for a password of length {password_length}.",
    "SOURCE_VIOLATION": "Password cannot be the same as your {source} password.",
    "TOO_LONG": "Password must be no more than {max} characters in length.",
    "TOO_SHORT": "Password must be {min} or more characters in length.",
    "TOO_MANY_OCCURRENCES": "Password contains {matching_character_count} occurrences of the character '{matching_character}', but at most {maximum_occurrences} are allowed.",
}


class MessageResolver:
    """Resolves RuleResultDetail values into messages.

    Each detail's error codes are tried most specific first, so a catalog can
    override e.g. ILLEGAL_CHAR.35 while ILLEGAL_CHAR covers the rest.
    Details without a usable template are rendered as KEY:{parameters}.
    """

    def __init__(self, messages: Mapping[str, str] | None = None) -> None:
        """Initialize the resolver.

        Args:
            messages: Templates keyed by message key. Defaults to the
                built-in English catalog.
        """
        self.messages: dict[str, str] = dict(DEFAULT_MESSAGES if messages is None else messages)

    def _template_for(self, detail: RuleResultDetail) -> str | None:
        for code in detail.error_codes:
            template = self.messages.get(code)
            if template is not None:
                return template
        return None

    def resolve(self, detail: RuleResultDetail) -> str:
        """Resolve the message for one detail.

        Args:
            detail: The detail to render.

        Returns:
            The rendered message.
        """
        template = self._template_for(detail)
        if template is None:
            return str(detail)
        parameters = {key: _render(value) for key, value in detail.parameters.items()}
        fields = {name for _, name, _, _ in Formatter().parse(template) if name}
        if not fields.issubset(parameters):
            return str(detail)
        return template.format(**parameters)

    def resolve_all(self, details: Iterable[RuleResultDetail]) -> list[str]:
        """Resolve messages for several details, preserving order."""
        return [self.resolve(detail) for detail in details]


def _render(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return value
