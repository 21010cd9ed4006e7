from typing import Any, Optional, Protocol

from ..core.cache import CachePolicy


class ICacheService(Protocol):
    def get(self, key: str) -> Optional[Any]: ...

    def set(self, key: str, value: Any, policy: CachePolicy) -> None: ...

    def remove(self, key: str) -> None: ...

    def clear(self) -> None: ...
