"""MultiValueMapping protocol, the shared interface for parameter maps.

A structural protocol so the encoders accept any multi-valued mapping
(``MultiValueMap`` or a caller's own type) without coupling to the
concrete class.
"""

from collections.abc import Iterator, Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """A read-only mapping where each key owns an ordered value sequence.

    ``__getitem__`` returns the whole sequence for a key.
    ``get_list`` returns the wire texts for a key.

    Defined with explicit dunder methods because Protocols cannot
    inherit from non-Protocol ABCs like ``Mapping``.
    """

    def __getitem__(self, key: str) -> Sequence[Any]: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def get_list(self, key: str) -> list[str]: ...
