from formatting.parameters.parameter import (
    IDENTITY_COMPARER,
    VALUE_COMPARER,
    FormattingParameter,
    ParameterIdentityComparer,
    ParameterValueComparer,
)
from formatting.parameters.collection import FormattingParameters, ReadOnlyFormattingParameters
from formatting.parameters.kinds import BooleanParameter, ChoiceParameter, IntegerParameter, TextParameter

__all__ = [
    "FormattingParameter",
    "ParameterIdentityComparer",
    "ParameterValueComparer",
    "IDENTITY_COMPARER",
    "VALUE_COMPARER",
    "ReadOnlyFormattingParameters",
    "FormattingParameters",
    "TextParameter",
    "IntegerParameter",
    "BooleanParameter",
    "ChoiceParameter",
]
