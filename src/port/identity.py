from typing import Protocol


class Identity(Protocol):
    """Caller-scoped session that remembers a signed token across requests."""
    def remember(self, token: str) -> None: ...

    def forget(self) -> None: ...

    def identity(self) -> str | None: ...
