"""Client configuration: endpoint, headers, target school and output path."""

from dataclasses import dataclass, field, replace
from pathlib import Path

DEFAULT_ENDPOINT = "https://www.ratemyprofessors.com/graphql"
DEFAULT_SCHOOL_NAME = "Santa Cruz California"
DEFAULT_OUTPUT_PATH = Path("professors.json")
DEFAULT_TIMEOUT = 30
DEFAULT_PAGE_SIZE = 50

# Browser-like headers; the endpoint accepts the static test:test basic auth.
DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:129.0) Gecko/20100101 Firefox/129.0",
    "Accept": "*/*",
    "Accept-Language": "en-US,en;q=0.5",
    "Content-Type": "application/json",
    "Authorization": "Basic dGVzdDp0ZXN0",
    "Sec-GPC": "1",
    "Sec-Fetch-Dest": "empty",
    "Sec-Fetch-Mode": "cors",
    "Sec-Fetch-Site": "same-origin",
    "Priority": "u=4",
}


@dataclass(frozen=True)
class ClientConfig:
    endpoint: str = DEFAULT_ENDPOINT
    headers: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    school_name: str = DEFAULT_SCHOOL_NAME
    output_path: Path = DEFAULT_OUTPUT_PATH
    professor_name: str = ""
    page_size: int = DEFAULT_PAGE_SIZE
    request_timeout: float = DEFAULT_TIMEOUT
    fetch_timeout: float | None = None

    def __post_init__(self):
        if self.page_size < 1:
            raise ValueError(f"page_size must be positive, got {self.page_size}")
        if self.request_timeout <= 0:
            raise ValueError(f"request_timeout must be positive, got {self.request_timeout}")
        if self.fetch_timeout is not None and self.fetch_timeout <= 0:
            raise ValueError(f"fetch_timeout must be positive, got {self.fetch_timeout}")
        object.__setattr__(self, "output_path", Path(self.output_path))

    def with_overrides(self, **overrides) -> "ClientConfig":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)
