import pytest
from formatting.parameters.kinds import IntegerParameter, TextParameter
from formatting.parameters.parameter import FormattingParameter


class FixedParameter(FormattingParameter):
    """A parameter whose derived value is set by the test."""
    kind_name = "fixed"

    def __init__(self, derived="derived", value=None):
        self.derived = derived
        self.derive_calls = 0
        super().__init__(value)

    def to_value_string(self):
        self.derive_calls += 1
        return self.derived


@pytest.fixture
def indent():
    return IntegerParameter(4)

@pytest.fixture
def width():
    return IntegerParameter(80)

@pytest.fixture
def brace():
    return TextParameter("allman")

@pytest.fixture
def pairs(indent, width, brace):
    return [("indent", indent), ("width", width), ("brace", brace)]

@pytest.fixture
def dummy_logger(caplog):
    caplog.set_level("DEBUG")
    return caplog
