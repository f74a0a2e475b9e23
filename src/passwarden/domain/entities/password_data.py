"""Password data entity.

Bundles a candidate password with the contextual values rules may need.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping


@dataclass(frozen=True)
class PasswordData:
    """Password and its validation context.

    Attributes:
        password: The candidate password text.
        username: Owning username, if known.
        history: Previously used password values, most recent first.
        sources: Reference values keyed by source label (e.g. "email").
    """

    password: str
    username: str | None = None
    history: tuple[str, ...] = ()
    sources: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.password, str):
            raise TypeError(
                f"password must be a str, got {type(self.password).__name__}"
            )
        if self.username is not None and not isinstance(self.username, str):
            raise TypeError(
                f"username must be a str or None, got {type(self.username).__name__}"
            )
        # Freeze caller-supplied containers
        object.__setattr__(self, "history", tuple(self.history))
        object.__setattr__(self, "sources", MappingProxyType(dict(self.sources)))

    @classmethod
    def create(
        cls,
        password: str,
        username: str | None = None,
        history: Iterable[str] = (),
        sources: Mapping[str, str] | None = None,
    ) -> "PasswordData":
        """Build password data from arbitrary iterables.

        Args:
            password: The candidate password.
            username: Optional owning username.
            history: Any iterable of previous passwords.
            sources: Optional mapping of source label to reference text.

        Returns:
            PasswordData: Frozen password data.
        """
        return cls(
            password=password,
            username=username,
            history=tuple(history),
            sources=dict(sources or {}),
        )

    def __repr__(self) -> str:
        # Never expose password material in reprs or tracebacks
        return (
            f"PasswordData(password=<{len(self.password)} chars>, "
            f"username={'<set>' if self.username else None}, "
            f"history=<{len(self.history)} entries>, "
            f"sources={sorted(self.sources)})"
        )
