"""Domain services for Passwarden.

Services contain the evaluation logic: dictionary search, sequence
detection, message resolution and rule orchestration.
"""

from passwarden.domain.services.dictionary_searcher import (
    DictionaryMatch,
    DictionarySearcher,
    WordList,
)
from passwarden.domain.services.sequence_detector import (
    STANDARD_TABLES,
    Direction,
    SequenceDetector,
    SequenceMatch,
    SequenceTable,
)
from passwarden.domain.services.message_resolver import DEFAULT_MESSAGES, MessageResolver
from passwarden.domain.services.password_validator import (
    PasswordValidator,
    build_default_validator,
)

__all__ = [
    "DEFAULT_MESSAGES",
    "DictionaryMatch",
    "DictionarySearcher",
    "Direction",
    "MessageResolver",
    "PasswordValidator",
    "STANDARD_TABLES",
    "SequenceDetector",
    "SequenceMatch",
    "SequenceTable",
    "WordList",
    "build_default_validator",
]
