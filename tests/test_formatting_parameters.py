import pytest
from formatting.exceptions import DuplicateKeyError, InvalidArgumentError, ParameterNotFoundError
from formatting.parameters.collection import FormattingParameters, ReadOnlyFormattingParameters
from formatting.parameters.kinds import IntegerParameter, TextParameter


def test_indent_width_scenario():
    p1 = IntegerParameter(4)
    p2 = IntegerParameter(80)
    bag = FormattingParameters([("indent", p1), ("width", p2)])
    assert len(bag) == 2
    assert bag["indent"] == p1
    assert bag["indent"] == "4"
    assert bag["indent"] != p2
    assert bag.remove("width")
    assert len(bag) == 1
    assert not bag.contains_key("width")

def test_upgrade_from_read_only_copies(pairs, indent):
    read_only = ReadOnlyFormattingParameters(pairs)
    bag = FormattingParameters(read_only)
    bag.remove("indent")
    assert "indent" in read_only
    assert list(bag.keys()) == ["width", "brace"]

def test_duplicate_key_on_construction():
    x, y = TextParameter("x"), TextParameter("y")
    with pytest.raises(DuplicateKeyError):
        FormattingParameters([("a", x), ("b", x), ("a", y)])

def test_add(indent):
    bag = FormattingParameters()
    bag.add("indent", indent)
    assert bag["indent"] is indent
    with pytest.raises(DuplicateKeyError, match="indent"):
        bag.add("indent", IntegerParameter(2))
    assert bag["indent"] is indent
    assert len(bag) == 1

def test_add_rejects_bad_types(indent):
    bag = FormattingParameters()
    with pytest.raises(InvalidArgumentError):
        bag.add(3, indent)
    with pytest.raises(InvalidArgumentError):
        bag.add("indent", 4)
    assert len(bag) == 0

def test_add_then_remove_round_trip(pairs, indent):
    bag = FormattingParameters(pairs[1:])
    before = list(bag.items())
    bag.add("indent", indent)
    assert bag.remove("indent")
    assert list(bag.items()) == before

def test_remove_absent_key_reports_false(pairs):
    bag = FormattingParameters(pairs)
    assert not bag.remove("missing")
    assert len(bag) == 3

def test_setitem_overwrites_or_inserts(pairs):
    bag = FormattingParameters(pairs)
    replacement = IntegerParameter(2)
    bag["indent"] = replacement
    assert len(bag) == 3
    assert bag["indent"] is replacement
    bag["tabs"] = TextParameter("false")
    assert len(bag) == 4
    with pytest.raises(InvalidArgumentError):
        bag["tabs"] = "false"

def test_delitem(pairs):
    bag = FormattingParameters(pairs)
    del bag["brace"]
    assert "brace" not in bag
    with pytest.raises(ParameterNotFoundError):
        del bag["brace"]

def test_clear(pairs):
    bag = FormattingParameters(pairs)
    bag.clear()
    assert len(bag) == 0
    assert list(bag) == []

def test_mutable_mapping_helpers(pairs, width):
    bag = FormattingParameters(pairs)
    assert bag.pop("width") is width
    bag.update({"width": width})
    assert bag["width"] is width
    assert isinstance(bag, ReadOnlyFormattingParameters)

def test_contains_item_uses_identity(pairs, indent):
    bag = FormattingParameters(pairs)
    assert bag.contains_item(("indent", indent))
    assert not bag.contains_item(("indent", IntegerParameter(4)))
    assert not bag.contains_item(("missing", indent))
    assert ("indent", indent) in bag.items()

def test_copy_to_exact_size(pairs):
    bag = FormattingParameters(pairs)
    destination = [None] * 3
    bag.copy_to(destination)
    assert destination == pairs

def test_copy_to_with_offset(pairs):
    bag = FormattingParameters(pairs)
    destination = ["keep"] + [None] * 4
    bag.copy_to(destination, 1)
    assert destination[0] == "keep"
    assert destination[1:4] == pairs
    assert destination[4] is None

def test_copy_to_empty_bag_into_empty_list():
    destination = []
    FormattingParameters().copy_to(destination)
    assert destination == []

@pytest.mark.parametrize("destination, start_index, message", [
    (None, 0, "None"),
    ([None] * 3, -1, "non-negative"),
    ([None] * 2, 0, "needed"),
    ([None] * 3, 1, "needed"),
    ([None] * 3, 5, "needed"),
])
def test_copy_to_invalid_arguments(pairs, destination, start_index, message):
    bag = FormattingParameters(pairs)
    with pytest.raises(InvalidArgumentError, match=message):
        bag.copy_to(destination, start_index)

def test_copy_to_failure_leaves_destination_untouched(pairs):
    destination = [None, None]
    with pytest.raises(InvalidArgumentError):
        FormattingParameters(pairs).copy_to(destination)
    assert destination == [None, None]

def test_as_read_only_shares_store(pairs, indent):
    bag = FormattingParameters(pairs)
    view = bag.as_read_only()
    assert type(view) is ReadOnlyFormattingParameters
    assert view["indent"] is indent
    bag.remove("indent")
    assert "indent" not in view
    assert len(view) == 2
    with pytest.raises(TypeError):
        view["indent"] = indent

def test_mutations_are_logged(dummy_logger, indent):
    bag = FormattingParameters()
    bag.add("indent", indent)
    bag.remove("indent")
    messages = [record.getMessage() for record in dummy_logger.records]
    assert "Added parameter 'indent' = '4'." in messages
    assert "Removed parameter 'indent'." in messages

def test_duplicate_key_is_logged_as_error(dummy_logger, indent):
    bag = FormattingParameters([("indent", indent)])
    with pytest.raises(DuplicateKeyError):
        bag.add("indent", indent)
    assert any(record.levelname == "ERROR" and "indent" in record.getMessage()
               for record in dummy_logger.records)

def test_update_upserts_pairs_and_keywords(pairs, indent):
    bag = FormattingParameters(pairs)
    replacement = IntegerParameter(2)
    tabs = TextParameter("false")
    bag.update([("indent", replacement)], tabs=tabs)
    assert bag["indent"] is replacement
    assert bag["tabs"] is tabs
    assert len(bag) == 4

def test_failed_update_leaves_bag_unchanged(pairs):
    bag = FormattingParameters(pairs)
    before = list(bag.items())
    with pytest.raises(InvalidArgumentError):
        bag.update([("extra", TextParameter("x")), ("bad", "not a parameter")])
    assert list(bag.items()) == before
    assert "extra" not in bag

def test_key_errors_have_plain_messages(indent):
    bag = FormattingParameters([("indent", indent)])
    with pytest.raises(ParameterNotFoundError) as missing:
        bag["x"]
    assert str(missing.value) == "Parameter 'x' not found."
    with pytest.raises(DuplicateKeyError) as duplicate:
        bag.add("indent", indent)
    assert str(duplicate.value) == "Parameter key 'indent' is already present."
