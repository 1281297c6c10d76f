from dataclasses import dataclass
from typing import Optional

@dataclass
class FetchResult:
    url: str
    status_code: int
    html: Optional[str]

    @property
    def ok(self) -> bool:
        return self.status_code == 200

class BaseFetcher:
    def fetch(self, url: str) -> FetchResult:
        raise NotImplementedError
