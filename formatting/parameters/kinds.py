# formatting/parameters/kinds.py
from typing import Iterable, Tuple, Union

from formatting.exceptions import InvalidArgumentError
from formatting.parameters.parameter import FormattingParameter


class TextParameter(FormattingParameter):
    kind_name = "text"

    def __init__(self, text: str) -> None:
        self.text = str(text)
        super().__init__()

    def to_value_string(self) -> str:
        return self.text


class IntegerParameter(FormattingParameter):
    kind_name = "integer"

    def __init__(self, number: Union[int, str]) -> None:
        if isinstance(number, bool):
            raise InvalidArgumentError(f"Cannot read {number!r} as an integer.")
        if isinstance(number, float) and not number.is_integer():
            raise InvalidArgumentError(f"Cannot read {number!r} as an integer without truncating.")
        self.number = int(number)
        super().__init__()

    def to_value_string(self) -> str:
        return str(self.number)


class BooleanParameter(FormattingParameter):
    """Boolean switch rendered as ``"true"`` or ``"false"``."""
    kind_name = "boolean"

    def __init__(self, flag: Union[bool, str]) -> None:
        if isinstance(flag, str):
            if flag.lower() not in ("true", "false"):
                raise InvalidArgumentError(f"Cannot read '{flag}' as a boolean.")
            flag = flag.lower() == "true"
        self.flag = bool(flag)
        super().__init__()

    def to_value_string(self) -> str:
        return "true" if self.flag else "false"


class ChoiceParameter(FormattingParameter):
    """
    One option out of a fixed set, e.g. a brace style.

    Raises:
        InvalidArgumentError: If ``choice`` is not one of ``choices``.
    """
    kind_name = "choice"

    def __init__(self, choice: str, choices: Iterable[str]) -> None:
        self.choices: Tuple[str, ...] = tuple(choices)
        if choice not in self.choices:
            raise InvalidArgumentError(f"'{choice}' is not one of {list(self.choices)}.")
        self.choice = choice
        super().__init__()

    def to_value_string(self) -> str:
        return self.choice
