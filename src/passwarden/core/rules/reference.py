"""History and source rules.

Both compare the password against reference values supplied with the
password data: previous passwords for HistoryRule and labelled source
values for SourceRule.
"""

from typing import Callable

from passwarden.domain.entities import PasswordData, RuleResult, RuleResultDetail

HISTORY_VIOLATION = "HISTORY_VIOLATION"
SOURCE_VIOLATION = "SOURCE_VIOLATION"

ReferenceMatcher = Callable[[str, str], bool]


def _default_matcher(ignore_case: bool) -> ReferenceMatcher:
    if ignore_case:
        return lambda password, reference: password.casefold() == reference.casefold()
    return lambda password, reference: password == reference


class HistoryRule:
    """Rejects passwords that match a previously used password.

    Args:
        report_all: Report one detail per matching entry instead of one in total.
        ignore_case: Compare case-insensitively with the default matcher.
        matcher: Custom comparison (password, reference) -> bool, e.g. for
            references stored in a transformed form.
    """

    def __init__(
        self,
        report_all: bool = True,
        ignore_case: bool = False,
        matcher: ReferenceMatcher | None = None,
    ) -> None:
        self.report_all = report_all
        self.ignore_case = ignore_case
        self.matcher = matcher or _default_matcher(ignore_case)

    def evaluate(self, data: PasswordData) -> RuleResult:
        history_size = len(data.history)
        details = []
        for reference in data.history:
            if self.matcher(data.password, reference):
                details.append(RuleResultDetail(HISTORY_VIOLATION, {"history_size": history_size}))
                if not self.report_all:
                    break
        return RuleResult.from_details(details)


class SourceRule:
    """Rejects passwords that match a labelled source value.

    Takes the same options as HistoryRule; details name the matching source.
    """

    def __init__(
        self,
        report_all: bool = True,
        ignore_case: bool = False,
        matcher: ReferenceMatcher | None = None,
    ) -> None:
        self.report_all = report_all
        self.ignore_case = ignore_case
        self.matcher = matcher or _default_matcher(ignore_case)

    def evaluate(self, data: PasswordData) -> RuleResult:
        details = []
        for label, reference in data.sources.items():
            if self.matcher(data.password, reference):
                details.append(RuleResultDetail(SOURCE_VIOLATION, {"source": label}))
                if not self.report_all:
                    break
        return RuleResult.from_details(details)
