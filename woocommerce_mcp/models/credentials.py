"""Backend credentials bound to a client instance"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Credentials:
    """WooCommerce store URL plus REST API consumer key/secret"""
    url: str = ""
    key: str = ""
    secret: str = ""

    @property
    def is_complete(self) -> bool:
        """True when all three fields are present and non-empty"""
        return bool(self.url and self.key and self.secret)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "Credentials":
        """Build credentials from a loose mapping such as an initialize payload"""
        if not isinstance(data, Mapping):
            return cls()
        return cls(
            url=str(data.get("url") or ""),
            key=str(data.get("key") or ""),
            secret=str(data.get("secret") or "")
        )

    def __repr__(self) -> str:
        return f"Credentials(url={self.url!r}, key={'***' if self.key else ''!r}, secret=***)"
