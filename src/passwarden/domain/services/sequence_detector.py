"""Illegal sequence detection service.

Finds runs of characters that follow an adjacency table (alphabet, digits,
keyboard rows) forwards or backwards anywhere inside a password.

Each table is indexed once at construction time (character -> position),
so scanning a password is a single pass per table.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from passwarden.core.exceptions import RuleConfigurationError

ALPHABETICAL_SEQUENCE = "ILLEGAL_ALPHABETICAL_SEQUENCE"
NUMERICAL_SEQUENCE = "ILLEGAL_NUMERICAL_SEQUENCE"
QWERTY_SEQUENCE = "ILLEGAL_QWERTY_SEQUENCE"

DEFAULT_SEQUENCE_LENGTH = 5
MINIMUM_SEQUENCE_LENGTH = 2

Lookup = dict[str, tuple[int, frozenset[int]]]
_NO_FORMS: frozenset[int] = frozenset()


class Direction(str, Enum):
    """Direction of a run relative to its table's natural order."""

    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass(frozen=True)
class SequenceTable:
    """An ordered adjacency row.

    A table has one or more forms of equal length; position i of every form
    denotes the same key, e.g. "qwerty" and "QWERTY", or "12345" and "!@#$%".

    Attributes:
        name: Identifier reported with matches, e.g. "qwerty_top_row".
        forms: Equal length strings, one per form.
        message_key: Message key used when a run of this table is found.
    """

    name: str
    forms: tuple[str, ...]
    message_key: str = ALPHABETICAL_SEQUENCE

    def __post_init__(self) -> None:
        forms = (self.forms,) if isinstance(self.forms, str) else tuple(self.forms)
        if not forms or not forms[0]:
            raise RuleConfigurationError(
                f"table {self.name!r} must define at least one non-empty form",
                option="forms",
            )
        if any(len(form) != len(forms[0]) for form in forms):
            raise RuleConfigurationError(
                f"table {self.name!r} has forms of unequal length",
                option="forms",
            )
        object.__setattr__(self, "forms", forms)

    def __len__(self) -> int:
        return len(self.forms[0])

    def lookup(self, ignore_case: bool) -> Lookup:
        """Map every character of every form to its position and forms.

        When a character occurs at several positions the first one wins.
        The forms are the indexes of every form holding the character at
        that position.
        """
        table: Lookup = {}
        for form_index, form in enumerate(self.forms):
            for position, char in enumerate(form):
                keys = (char, char.lower()) if ignore_case else (char,)
                for key in keys:
                    found = table.get(key)
                    if found is None:
                        table[key] = (position, frozenset((form_index,)))
                    elif found[0] == position:
                        table[key] = (position, found[1] | {form_index})
        return table

    def positions(self, ignore_case: bool) -> dict[str, int]:
        """Map every character of every form to its position."""
        return {char: position for char, (position, _) in self.lookup(ignore_case).items()}


@dataclass(frozen=True)
class SequenceMatch:
    """A run of adjacent characters found in a password.

    Attributes:
        start: Offset of the first character of the run.
        length: Number of characters in the run.
        table_name: Name of the table the run follows.
        direction: Forward or backward relative to the table.
        text: The run as it appears in the password.
        message_key: Message key of the table.
    """

    start: int
    length: int
    table_name: str
    direction: Direction
    text: str
    message_key: str


class SequenceDetector:
    """Detects illegal character sequences in passwords."""

    def __init__(
        self,
        tables: Iterable[SequenceTable],
        threshold: int = DEFAULT_SEQUENCE_LENGTH,
        match_backwards: bool = True,
        ignore_case: bool = True,
        wrap: bool = False,
    ) -> None:
        """Initialize the detector.

        Args:
            tables: Adjacency tables to check, in reporting order.
            threshold: Minimum run length reported.
            match_backwards: Also report runs in reverse table order.
            ignore_case: Compare characters case-insensitively. When False a
                run must stay within one form of a table, so "aBcDe" is not
                an alphabetical run.
            wrap: Treat each table as circular (last key adjacent to first).

        Raises:
            RuleConfigurationError: If no tables are given or threshold < 2.
        """
        self.tables: tuple[SequenceTable, ...] = tuple(tables)
        if not self.tables:
            raise RuleConfigurationError("at least one table is required", option="tables")
        if threshold < MINIMUM_SEQUENCE_LENGTH:
            raise RuleConfigurationError(
                f"must be at least {MINIMUM_SEQUENCE_LENGTH}, got {threshold}",
                option="threshold",
            )
        self.threshold = threshold
        self.match_backwards = match_backwards
        self.ignore_case = ignore_case
        self.wrap = wrap
        self._lookups = tuple(table.lookup(ignore_case) for table in self.tables)

    def _entry(self, lookup: Lookup, char: str) -> tuple[int, frozenset[int]] | None:
        if self.ignore_case:
            return lookup.get(char, lookup.get(char.lower()))
        return lookup.get(char)

    def _step(self, table: SequenceTable, previous: int | None, current: int | None) -> int:
        """Signed distance between two positions, 0 when not adjacent."""
        if previous is None or current is None:
            return 0
        step = current - previous
        size = len(table)
        if self.wrap and size > 2 and step in (size - 1, 1 - size):
            step = -1 if step > 0 else 1
        if step == 1 or (step == -1 and self.match_backwards):
            return step
        return 0

    def _scan(self, password: str, table: SequenceTable, lookup: Lookup) -> list[SequenceMatch]:
        matches: list[SequenceMatch] = []
        run_start = 0
        direction = 0
        previous: int | None = None
        previous_forms: frozenset[int] = _NO_FORMS
        run_forms: frozenset[int] = _NO_FORMS

        def emit(end: int) -> None:
            if direction != 0 and end - run_start >= self.threshold:
                matches.append(
                    SequenceMatch(
                        start=run_start,
                        length=end - run_start,
                        table_name=table.name,
                        direction=Direction.FORWARD if direction > 0 else Direction.BACKWARD,
                        text=password[run_start:end],
                        message_key=table.message_key,
                    )
                )

        for index, char in enumerate(password):
            entry = self._entry(lookup, char)
            current, forms = entry if entry is not None else (None, _NO_FORMS)
            step = self._step(table, previous, current)
            if step != 0 and not self.ignore_case:
                # Case-sensitive runs stay within a single form
                carried = run_forms if step == direction else previous_forms
                if not carried & forms:
                    step = 0
            if step == 0:
                emit(index)
                run_start = index
                direction = 0
                run_forms = forms
            elif step != direction:
                # The turning character starts the new run
                emit(index)
                run_start = index - 1
                direction = step
                run_forms = previous_forms & forms
            else:
                run_forms = run_forms & forms
            previous = current
            previous_forms = forms
        emit(len(password))
        return matches

    def find_sequences(self, password: str) -> list[SequenceMatch]:
        """Find every maximal run of at least threshold adjacent characters.

        Args:
            password: Text to scan.

        Returns:
            Matches grouped by table (in table order) and ordered by offset.
        """
        found: list[SequenceMatch] = []
        for table, lookup in zip(self.tables, self._lookups):
            found.extend(self._scan(password, table, lookup))
        return found


ALPHABETICAL = SequenceTable(
    name="alphabetical",
    forms=("abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"),
    message_key=ALPHABETICAL_SEQUENCE,
)

NUMERICAL = SequenceTable(
    name="numerical",
    forms=("0123456789",),
    message_key=NUMERICAL_SEQUENCE,
)

US_QWERTY: tuple[SequenceTable, ...] = (
    SequenceTable("qwerty_number_row", ("`1234567890-=", "~!@#$%^&*()_+"), QWERTY_SEQUENCE),
    SequenceTable("qwerty_top_row", ("qwertyuiop[]\\", "QWERTYUIOP{}|"), QWERTY_SEQUENCE),
    SequenceTable("qwerty_home_row", ("asdfghjkl;'", 'ASDFGHJKL:"'), QWERTY_SEQUENCE),
    SequenceTable("qwerty_bottom_row", ("zxcvbnm,./", "ZXCVBNM<>?"), QWERTY_SEQUENCE),
)

GERMAN_ALPHABETICAL = SequenceTable(
    name="german_alphabetical",
    forms=("abcdefghijklmnopqrstuvwxyzäöüß", "ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÜẞ"),
    message_key=ALPHABETICAL_SEQUENCE,
)

DE_QWERTZ: tuple[SequenceTable, ...] = (
    SequenceTable("qwertz_number_row", ("^1234567890\\´", '°!"§$%&/()=?`'), QWERTY_SEQUENCE),
    SequenceTable("qwertz_top_row", ("qwertzuiopü+", "QWERTZUIOPÜ*"), QWERTY_SEQUENCE),
    SequenceTable("qwertz_home_row", ("asdfghjklöä#", "ASDFGHJKLÖÄ'"), QWERTY_SEQUENCE),
    SequenceTable("qwertz_bottom_row", ("<yxcvbnm,.-", ">YXCVBNM;:_"), QWERTY_SEQUENCE),
)

POLISH_ALPHABETICAL = SequenceTable(
    name="polish_alphabetical",
    forms=("aąbcćdeęfghijklmnoópqrsśtuwxyzźż", "AĄBCĆDEĘFGHIJKLMNOÓPQRSŚTUWXYZŹŻ"),
    message_key=ALPHABETICAL_SEQUENCE,
)

CZECH_ALPHABETICAL = SequenceTable(
    name="czech_alphabetical",
    forms=(
        "aábcčdďeěéfghiíjklmnňoópqrřsštťuúůvwxyýzž",
        "AÁBCČDĎEĚÉFGHIÍJKLMNŇOÓPQRŘSŠTŤUÚŮVWXYÝZŽ",
    ),
    message_key=ALPHABETICAL_SEQUENCE,
)

CYRILLIC_ALPHABETICAL = SequenceTable(
    name="cyrillic_alphabetical",
    forms=(
        "абвгдеёжзийклмнопрстуфхцчшщъыьэюяіѣѳѵ",
        "АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯІѢѲѴ",
    ),
    message_key=ALPHABETICAL_SEQUENCE,
)

STANDARD_TABLES: dict[str, Sequence[SequenceTable]] = {
    "alphabetical": (ALPHABETICAL,),
    "numerical": (NUMERICAL,),
    "us_qwerty": US_QWERTY,
    "german_alphabetical": (GERMAN_ALPHABETICAL,),
    "de_qwertz": DE_QWERTZ,
    "polish_alphabetical": (POLISH_ALPHABETICAL,),
    "czech_alphabetical": (CZECH_ALPHABETICAL,),
    "cyrillic_alphabetical": (CYRILLIC_ALPHABETICAL,),
}
