"""Ordered multi-valued parameter map.

Implements ``Mapping[str, tuple[Value, ...]]`` and the
``MultiValueMapping`` protocol. Key order and per-key value order are
both insertion order and survive every encode/decode round trip.

A present key always owns a tuple, possibly empty. ``None`` passed as a
value list is normalized to an empty sequence on the way in, so "no
values" has exactly one representation.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from wireparams._internal.multimap import MultiValueMapping
from wireparams.values import IntegerValue, StringValue, Value, render, to_value

_SCALARS = (str, bytes, int, IntegerValue, StringValue)


def _normalize(values: Any) -> list[Value]:
    if values is None:
        return []
    if isinstance(values, _SCALARS):
        return [to_value(values)]
    return [to_value(v) for v in values]


class MultiValueMap(Mapping[str, tuple[Value, ...]]):
    """Ordered mapping from parameter name to an ordered value sequence.

    Usage::

        params = MultiValueMap({"tag": ["a", "b"], "page": 2, "flag": None})
        params["tag"]          # (StringValue('a'), StringValue('b'))
        params.get_list("page")  # ['2']
        params["flag"]         # ()
    """

    __slots__ = ("_data",)

    def __init__(
        self,
        data: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
    ) -> None:
        self._data: dict[str, list[Value]] = {}
        if data is None:
            return
        items = data.items() if isinstance(data, Mapping) else data
        for key, values in items:
            self.put(key, values)

    # -- building ---------------------------------------------------------

    def put(self, key: str, values: Any) -> None:
        """Replace the values for *key*. ``None`` means no values.

        New keys go to the end; an existing key keeps its position.
        """
        self._data[key] = _normalize(values)

    def add(self, key: str, value: Any) -> None:
        """Append one value, creating *key* on first sighting."""
        self._data.setdefault(key, []).append(to_value(value))

    def ensure(self, key: str) -> None:
        """Create *key* with no values if it is not present yet."""
        self._data.setdefault(key, [])

    # -- Mapping ----------------------------------------------------------

    def __getitem__(self, key: str) -> tuple[Value, ...]:
        return tuple(self._data[key])

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        try:
            return multi_value_map_equals(self, other)
        except TypeError:
            # other holds scalars a MultiValueMap cannot carry
            return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self.get_list(k)!r}" for k in self)
        return f"MultiValueMap({{{items}}})"

    def get(self, key: str, default: Any = None) -> Any:  # type: ignore[override]
        """Return the value tuple for *key*, or *default* if absent.

        A present key with no values returns ``()``, not *default*.
        """
        values = self._data.get(key)
        if values is None:
            return default
        return tuple(values)

    def get_first(self, key: str, default: Value | None = None) -> Value | None:
        """Return the first value for *key*, or *default*."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return the wire text of every value for *key*."""
        return [render(v) for v in self._data.get(key, ())]

    def to_dict(self) -> dict[str, list[int | str]]:
        """Plain ``dict`` of native scalars, suitable for ``json.dumps``."""
        return {key: [v.value for v in values] for key, values in self._data.items()}


def multi_value_map_equals(a: Mapping[str, Any] | None, b: Mapping[str, Any] | None) -> bool:
    """Compare two multi-valued maps structurally.

    Equal when both have the same set of keys and, for every key, the
    same ordered sequence of typed values. ``None`` for either map, or
    for any value list, counts as empty. Key order is not compared.
    """
    left = a if isinstance(a, MultiValueMap) else MultiValueMap(a)
    right = b if isinstance(b, MultiValueMap) else MultiValueMap(b)
    if left._data.keys() != right._data.keys():
        return False
    return all(left._data[key] == right._data[key] for key in left._data)


def as_multi_value_mapping(
    params: Mapping[str, Any] | MultiValueMapping | None,
) -> MultiValueMapping:
    """Return *params* ready for encoding.

    Anything satisfying ``MultiValueMapping`` is used as-is, since the
    encoders only read keys and ``get_list`` texts. Plain mappings and
    ``None`` are normalized through ``MultiValueMap``.
    """
    if isinstance(params, MultiValueMapping):
        return params
    return MultiValueMap(params)
