# formatting/parameters/factory.py
from typing import Any, Dict, Iterable, Optional, Type

from formatting.exceptions import ConfigurationError
from formatting.parameters.kinds import BooleanParameter, ChoiceParameter, IntegerParameter, TextParameter
from formatting.parameters.parameter import FormattingParameter

# Use the kind_name attributes from each class.
_parameter_registry: Dict[str, Type[FormattingParameter]] = {
    TextParameter.kind_name: TextParameter,
    IntegerParameter.kind_name: IntegerParameter,
    BooleanParameter.kind_name: BooleanParameter,
    ChoiceParameter.kind_name: ChoiceParameter,
}

def get_parameter_class(kind: str) -> Type[FormattingParameter]:
    if not isinstance(kind, str):
        raise ConfigurationError("Parameter kind must be a string.")
    param_class = _parameter_registry.get(kind.lower())
    if param_class is None:
        raise ConfigurationError(f"Unknown parameter kind: {kind}")
    return param_class

def register_parameter_kind(kind: str, param_class: Type[FormattingParameter]) -> None:
    if not isinstance(kind, str):
        raise ConfigurationError("Parameter kind must be a string.")
    if not (isinstance(param_class, type) and issubclass(param_class, FormattingParameter)):
        raise ConfigurationError("Registered kind must be a subclass of FormattingParameter.")
    _parameter_registry[kind.lower()] = param_class

def create_parameter(kind: str, raw: Any, choices: Optional[Iterable[str]] = None) -> FormattingParameter:
    """
    Build a parameter of the registered ``kind`` from a raw configuration value.

    ``choices`` is passed through only for kinds that take it.
    """
    param_class = get_parameter_class(kind)
    try:
        if choices is not None:
            return param_class(raw, choices)
        return param_class(raw)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Cannot build '{kind}' parameter from {raw!r}: {e}") from e
