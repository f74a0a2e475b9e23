"""Username rule."""

from passwarden.core.rules.base import MatchBehavior
from passwarden.domain.entities import PasswordData, RuleResult, RuleResultDetail

ILLEGAL_USERNAME = "ILLEGAL_USERNAME"
ILLEGAL_USERNAME_REVERSED = "ILLEGAL_USERNAME_REVERSED"
USERNAME_UNDEFINED = "USERNAME_UNDEFINED"


class UsernameRule:
    """Rejects passwords that contain the owning username.

    Password data without a username cannot be checked and yields a
    USERNAME_UNDEFINED violation.
    """

    def __init__(
        self,
        match_backwards: bool = False,
        ignore_case: bool = True,
        match_behavior: MatchBehavior = MatchBehavior.CONTAINS,
    ) -> None:
        self.match_backwards = match_backwards
        self.ignore_case = ignore_case
        self.match_behavior = MatchBehavior(match_behavior)

    def evaluate(self, data: PasswordData) -> RuleResult:
        if not data.username:
            return RuleResult.from_details([RuleResultDetail(USERNAME_UNDEFINED)])

        password = data.password
        username = data.username
        if self.ignore_case:
            password = password.lower()
            username = username.lower()

        parameters = {"username": data.username, "match_behavior": self.match_behavior.value}
        details = []
        if self.match_behavior.matches(password, username):
            details.append(RuleResultDetail(ILLEGAL_USERNAME, parameters))
        if self.match_backwards and self.match_behavior.matches(password, username[::-1]):
            details.append(RuleResultDetail(ILLEGAL_USERNAME_REVERSED, parameters))
        return RuleResult.from_details(details)
