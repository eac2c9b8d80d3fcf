"""Ordered multi-valued field collection used for requests and responses."""

from enum import Enum
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from .state import GatewayField


FieldItems = Union[Mapping[str, object], Iterable[Tuple[str, object]], "FieldSet"]

# Fields whose values must never appear in logs
_MASKED_FIELDS = (GatewayField.CARD_CVV2, "SECRET_KEY")


def _to_value(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return value.value
    return str(value)

class FieldSet:
    """Ordered collection of name/value string pairs.

    Names may repeat; every ``add`` appends a new pair and insertion order is
    kept, so repeated keys reach the wire as repeated ``name=value`` pairs.
    Lookups are case-sensitive.

    Example:
        fields = FieldSet({"ACCOUNT_ID": "100200300400"})
        fields.add("CUSTOM_ID", "a")
        fields.add("CUSTOM_ID", "b")
        fields.get_all("CUSTOM_ID")   # ["a", "b"]
        fields.get("CUSTOM_ID")       # "a,b"
    """

    def __init__(self, items: Optional[FieldItems] = None):
        self._pairs: List[Tuple[str, str]] = []
        if items is not None:
            self.extend(items)

    def add(self, name: str, value: object) -> None:
        """Appends a pair, keeping any existing values for ``name``."""
        self._pairs.append((str(name), _to_value(value)))

    def set(self, name: str, value: object) -> None:
        """Replaces every value of ``name`` with a single value.

        The new pair takes the position of the first existing one, or is
        appended when the name is absent.
        """
        name = str(name)
        value = _to_value(value)
        replaced = False
        pairs = []
        for key, current in self._pairs:
            if key != name:
                pairs.append((key, current))
            elif not replaced:
                pairs.append((name, value))
                replaced = True
        if not replaced:
            pairs.append((name, value))
        self._pairs = pairs

    def remove(self, name: str) -> None:
        self._pairs = [(key, value) for key, value in self._pairs if key != name]

    def extend(self, items: FieldItems) -> None:
        """Appends pairs from a mapping, an iterable of pairs or a FieldSet."""
        if isinstance(items, FieldSet):
            pairs: Iterable[Tuple[str, object]] = items.items()
        elif isinstance(items, Mapping):
            pairs = items.items()
        else:
            pairs = items
        for name, value in pairs:
            self.add(name, value)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Returns the value of ``name``; repeated values are joined with commas."""
        values = self.get_all(name)
        if not values:
            return default
        return ",".join(values)

    def get_all(self, name: str) -> List[str]:
        return [value for key, value in self._pairs if key == name]

    def names(self) -> List[str]:
        """Distinct names in first-insertion order."""
        seen: Dict[str, None] = {}
        for key, _ in self._pairs:
            seen.setdefault(key, None)
        return list(seen)

    def items(self) -> List[Tuple[str, str]]:
        """All pairs in insertion order, repeats included."""
        return list(self._pairs)

    def to_dict(self) -> Dict[str, str]:
        """Single-valued view; the last value wins for repeated names."""
        return dict(self._pairs)

    def copy(self) -> "FieldSet":
        return FieldSet(self._pairs)

    def redacted(self) -> "FieldSet":
        """Copy safe for logging: card number cut to its last four digits,
        CVV2 and secrets masked."""
        masked = FieldSet()
        for name, value in self._pairs:
            if name == GatewayField.PAYMENT_ACCOUNT and value:
                value = "*" * max(len(value) - 4, 0) + value[-4:]
            elif name in _MASKED_FIELDS and value:
                value = "***"
            masked.add(name, value)
        return masked

    def __getitem__(self, name: str) -> str:
        value = self.get(name)
        if value is None:
            raise KeyError(name)
        return value

    def __setitem__(self, name: str, value: object) -> None:
        self.set(name, value)

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _ in self._pairs)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._pairs)

    def __bool__(self) -> bool:
        return bool(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldSet):
            return NotImplemented
        return self._pairs == other._pairs

    def __repr__(self) -> str:
        return f"FieldSet({self.redacted()._pairs!r})"
