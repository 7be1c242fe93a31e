# formatting/parameters/parameter.py
"""
Base value type for formatting parameters.

A parameter carries two independent notions of equality:

* identity equality against another parameter, decided by ``id``;
* value equality against a raw string, decided by ``value``.

Hashing follows the identity notion. Parameters compared by value must be
looked up through ``ParameterValueComparer`` (or by their ``value``), never
mixed with strings inside a single set or dict.
"""

import uuid
from abc import ABCMeta, abstractmethod
from typing import Optional, Union


class _ParameterMeta(ABCMeta):
    """Runs the value derivation step once the full ``__init__`` chain is done."""

    def __call__(cls, *args, **kwargs):
        instance = super().__call__(*args, **kwargs)
        instance._finalize()
        return instance


class FormattingParameter(metaclass=_ParameterMeta):
    """
    Abstract formatting parameter with a stable identity and a fixed string value.

    Subclasses set up their own state in ``__init__`` and implement
    ``to_value_string()``. When no explicit value is passed to the base
    initializer, the value is derived from ``to_value_string()`` after the
    subclass initializer has returned, so overrides always see fully
    initialized state.
    """
    kind_name: str = "undefined"  # Override in subclasses

    def __init__(self, value: Union[str, "FormattingParameter", None] = None) -> None:
        """
        Args:
            value: ``None`` to derive the value from ``to_value_string()``,
                a string to use verbatim, or another parameter whose value is
                copied. The copy always receives a fresh ``id``. Other objects
                are converted with ``str()``.
        """
        self._id = uuid.uuid4()
        if isinstance(value, FormattingParameter):
            self._value: Optional[str] = value.value
        elif value is None:
            self._value = None
        else:
            self._value = str(value)

    def _finalize(self) -> None:
        if self._value is None:
            self._value = str(self.to_value_string())

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def value(self) -> str:
        return self._value

    @abstractmethod
    def to_value_string(self) -> str:
        """Return the canonical string form of this parameter's content."""
        pass

    def equals_parameter(self, other: Optional["FormattingParameter"]) -> bool:
        return other is not None and self._id == other.id

    def equals_value(self, other: Optional[str]) -> bool:
        return other is not None and self._value == other

    def __eq__(self, other: object):
        if isinstance(other, FormattingParameter):
            return self.equals_parameter(other)
        if isinstance(other, str):
            return self.equals_value(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self._id} value={self._value!r}>"


class ParameterIdentityComparer:
    """Equality and hashing of parameters by ``id``."""

    def equals(self, x: Optional[FormattingParameter], y: Optional[FormattingParameter]) -> bool:
        if x is y:
            return True
        if x is None or y is None:
            return False
        return x.id == y.id

    def hash(self, obj: FormattingParameter) -> int:
        return hash(obj.id)


class ParameterValueComparer:
    """Equality and hashing by string value; parameters are reduced to ``value``."""

    @staticmethod
    def _as_text(obj: Union[FormattingParameter, str, None]) -> Optional[str]:
        if isinstance(obj, FormattingParameter):
            return obj.value
        return obj

    def equals(self, x: Union[FormattingParameter, str, None], y: Union[FormattingParameter, str, None]) -> bool:
        x_text, y_text = self._as_text(x), self._as_text(y)
        if x_text is None or y_text is None:
            return x_text is None and y_text is None
        return x_text == y_text

    def hash(self, obj: Union[FormattingParameter, str]) -> int:
        return hash(self._as_text(obj))


IDENTITY_COMPARER = ParameterIdentityComparer()
VALUE_COMPARER = ParameterValueComparer()
