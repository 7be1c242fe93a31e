# formatting/parameters/collection.py
"""
Parameter bags: string keys mapped to FormattingParameter instances.

``ReadOnlyFormattingParameters`` exposes the query surface only.
``FormattingParameters`` adds insertion, removal and clearing on top of the
same kind of store, and can hand out a read-only facade over its own store
with ``as_read_only()``.

Every constructor copies its source into a fresh dict and rejects repeated
keys with ``DuplicateKeyError``. Nothing is published unless the whole
source was accepted.
"""

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any, Dict, List, Optional, Tuple, Union

from formatting.exceptions import DuplicateKeyError, InvalidArgumentError, ParameterNotFoundError
from formatting.parameters.parameter import IDENTITY_COMPARER, FormattingParameter
from utils.logging_config import get_logger

logger = get_logger(__name__)

ParameterPair = Tuple[str, FormattingParameter]
ParameterSource = Union[Mapping, Iterable, Iterator, None]


def _check_entry(key: Any, value: Any) -> None:
    if not isinstance(key, str):
        logger.error("Parameter key must be a string, got %s.", type(key).__name__)
        raise InvalidArgumentError(f"Parameter key must be a string, got {type(key).__name__}.")
    if not isinstance(value, FormattingParameter):
        logger.error("Value for key '%s' is not a FormattingParameter: %r", key, value)
        raise InvalidArgumentError(f"Value for key '{key}' must be a FormattingParameter, got {type(value).__name__}.")


def _insert_unique(store: Dict[str, FormattingParameter], key: str, value: FormattingParameter) -> None:
    _check_entry(key, value)
    if key in store:
        logger.error("Duplicate parameter key '%s'.", key)
        raise DuplicateKeyError(f"Parameter key '{key}' is already present.")
    store[key] = value


def _populate(source: ParameterSource, overwrite: bool = False) -> Dict[str, FormattingParameter]:
    """
    Copy ``source`` into a new dict.

    ``source`` may be a mapping (including another parameter bag) or any
    iterable or iterator of ``(key, value)`` pairs. Iterators are drained.
    Repeated keys raise ``DuplicateKeyError`` unless ``overwrite`` is set,
    in which case the last occurrence wins.
    """
    store: Dict[str, FormattingParameter] = {}
    if source is None:
        return store
    pairs = source.items() if isinstance(source, Mapping) else source
    try:
        iterator = iter(pairs)
    except TypeError:
        logger.error("Cannot build parameters from %s.", type(source).__name__)
        raise InvalidArgumentError(f"Cannot build parameters from {type(source).__name__}.")
    for pair in iterator:
        try:
            key, value = pair
        except (TypeError, ValueError):
            logger.error("Malformed parameter pair: %r", pair)
            raise InvalidArgumentError(f"Expected a (key, value) pair, got {pair!r}.")
        if overwrite:
            _check_entry(key, value)
            store[key] = value
        else:
            _insert_unique(store, key, value)
    return store


class ReadOnlyFormattingParameters(Mapping):
    """Immutable view of string keys to formatting parameters."""

    def __init__(self, source: ParameterSource = None) -> None:
        self._parameters: Dict[str, FormattingParameter] = _populate(source)
        logger.debug("Built %s with %d parameter(s).", type(self).__name__, len(self._parameters))

    @classmethod
    def from_pairs(cls, *pairs: ParameterPair):
        """Build a bag from literal ``(key, value)`` pairs."""
        return cls(pairs)

    @classmethod
    def _over(cls, store: Dict[str, FormattingParameter]) -> "ReadOnlyFormattingParameters":
        view = cls.__new__(cls)
        view._parameters = store
        return view

    def __getitem__(self, key: str) -> FormattingParameter:
        try:
            return self._parameters[key]
        except KeyError:
            raise ParameterNotFoundError(f"Parameter '{key}' not found.") from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._parameters)

    def __len__(self) -> int:
        return len(self._parameters)

    def __contains__(self, key: object) -> bool:
        return key in self._parameters

    def contains_key(self, key: str) -> bool:
        return key in self._parameters

    def try_get(self, key: str) -> Tuple[bool, Optional[FormattingParameter]]:
        """Return ``(True, parameter)`` if ``key`` is present, else ``(False, None)``."""
        if key in self._parameters:
            return True, self._parameters[key]
        return False, None

    def __repr__(self) -> str:
        entries = ", ".join(f"{key!r}: {value.value!r}" for key, value in self._parameters.items())
        return f"{type(self).__name__}({{{entries}}})"


class FormattingParameters(ReadOnlyFormattingParameters, MutableMapping):
    """Mutable parameter bag."""

    def add(self, key: str, value: FormattingParameter) -> None:
        """Insert ``key``; raises ``DuplicateKeyError`` if it is already present."""
        _insert_unique(self._parameters, key, value)
        logger.debug("Added parameter '%s' = %r.", key, value.value)

    def remove(self, key: str) -> bool:
        """Remove ``key`` and report whether it was present."""
        if key not in self._parameters:
            return False
        del self._parameters[key]
        logger.debug("Removed parameter '%s'.", key)
        return True

    def __setitem__(self, key: str, value: FormattingParameter) -> None:
        _check_entry(key, value)
        self._parameters[key] = value
        logger.debug("Set parameter '%s' = %r.", key, value.value)

    def update(self, source: ParameterSource = None, **kwargs: FormattingParameter) -> None:
        """
        Upsert every pair from ``source`` and ``kwargs``.

        The whole input is checked before anything is written, so a bad entry
        leaves the bag unchanged.
        """
        staged = _populate(source, overwrite=True)
        staged.update(_populate(kwargs, overwrite=True))
        self._parameters.update(staged)
        logger.debug("Updated %d parameter(s).", len(staged))

    def __delitem__(self, key: str) -> None:
        if not self.remove(key):
            raise ParameterNotFoundError(f"Parameter '{key}' not found.")

    def clear(self) -> None:
        self._parameters.clear()
        logger.debug("Cleared all parameters.")

    def contains_item(self, pair: ParameterPair) -> bool:
        """True if ``pair[0]`` maps to a parameter identity-equal to ``pair[1]``."""
        key, value = pair
        found, current = self.try_get(key)
        return found and IDENTITY_COMPARER.equals(current, value)

    def copy_to(self, destination: List[Any], start_index: int = 0) -> None:
        """
        Write every ``(key, value)`` pair into ``destination`` starting at ``start_index``.

        Raises:
            InvalidArgumentError: If ``destination`` is None, ``start_index`` is
                negative, or fewer than ``len(self)`` slots remain from
                ``start_index``.
        """
        if destination is None:
            logger.error("copy_to called without a destination.")
            raise InvalidArgumentError("Destination must not be None.")
        if start_index < 0:
            logger.error("copy_to called with negative start index %d.", start_index)
            raise InvalidArgumentError(f"Start index must be non-negative, got {start_index}.")
        if len(destination) - start_index < len(self._parameters):
            logger.error("copy_to destination too small: %d slot(s) from index %d, %d needed.",
                         max(len(destination) - start_index, 0), start_index, len(self._parameters))
            raise InvalidArgumentError(
                f"Destination has {max(len(destination) - start_index, 0)} slot(s) from index "
                f"{start_index} but {len(self._parameters)} are needed."
            )
        for offset, pair in enumerate(self._parameters.items()):
            destination[start_index + offset] = pair

    def as_read_only(self) -> ReadOnlyFormattingParameters:
        """Return a read-only facade over this bag's own store (not a copy)."""
        return ReadOnlyFormattingParameters._over(self._parameters)
