"""Configuration classes for NerdBook."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NerdBookConfig:
    """Immutable configuration for lookup operations.

    All configuration is frozen (immutable) so it can be shared between the
    caller's thread and the executor threads that run network requests.
    """

    # Datamuse API settings
    api_base_url: str = "https://api.datamuse.com"
    request_timeout: float = 10.0  # Seconds per HTTP request
    max_results: int | None = None  # None = service default (100)

    # Autocomplete settings
    debounce_delay: float = 0.5  # Quiet period before a suggestion lookup fires

    # Performance settings
    max_workers: int = 4  # Threads used for concurrent requests

    # Display settings
    definition_placeholder: str = "no definition available"

    def __post_init__(self):
        """Normalize the base URL so endpoint paths can be appended."""
        if self.api_base_url.endswith("/"):
            object.__setattr__(self, "api_base_url", self.api_base_url.rstrip("/"))
