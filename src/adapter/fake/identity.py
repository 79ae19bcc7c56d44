"""In-memory implementation of Identity for testing."""


class FakeIdentity:
    def __init__(self, token: str | None = None):
        self.token = token

    def remember(self, token: str) -> None:
        self.token = token

    def forget(self) -> None:
        self.token = None

    def identity(self) -> str | None:
        return self.token
