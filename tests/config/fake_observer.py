"""Fake ConfigObserver for use in tests: records events without mocking."""


class FakeConfigObserver:
    def __init__(self) -> None:
        self.loaded: list[dict[str, str]] = []

    def config_loaded(self, base_url: str, timeout_seconds: float) -> None:
        self.loaded.append(
            {"base_url": base_url, "timeout_seconds": str(timeout_seconds)}
        )
