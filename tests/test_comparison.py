from dataclasses import dataclass
from decimal import Decimal

from dataobject import ComparisonResult, Map, compare_objects, exclude_names, is_equal_to
from tests.models import (
    Asset,
    FieldState,
    InputField,
    Plain,
    PriceRecord,
    PriceView,
    UserData,
    UserSummary,
    UserView,
)


@dataclass
class Tagged:
    username: str = ""
    full_name: list = None


def test_field_state_scenario(field_mappings):
    source = InputField(Validate=True, NumberOfChars=5)
    other = FieldState(IsValid="true", IsEmpty=True)

    assert is_equal_to(source, other, field_mappings)


def test_field_state_scenario_detects_difference(field_mappings):
    source = InputField(Validate=True, NumberOfChars=0)
    other = FieldState(IsValid="true", IsEmpty=True)

    assert not is_equal_to(source, other, field_mappings)


def test_identity_comparison_across_types(user_record):
    view = UserView(id=7, username="jdoe", full_name="Jane Doe", is_active=True, group_id="server")

    assert is_equal_to(user_record, view)
    assert is_equal_to(view, user_record)

    view.full_name = "Jane Smith"
    assert not is_equal_to(user_record, view)


def test_extra_target_properties_are_ignored():
    summary = UserSummary(username="jdoe", full_name="Jane Doe")
    data = UserData(id=3, username="jdoe", full_name="Jane Doe")

    assert is_equal_to(summary, data)
    # The other way round `id` has no counterpart on the summary
    assert not is_equal_to(data, summary)


def test_missing_counterpart_fails_soft():
    result = compare_objects(UserData(), UserSummary())

    assert isinstance(result, ComparisonResult)
    assert not result.is_identical
    assert result.unresolved == "id"
    assert result.compared == []
    assert result.to_dict()["unresolved"] == "id"


def test_mapping_used_when_no_identity_match():
    mappings = [Map("name", "asset_name")]

    assert is_equal_to(Plain(name="fw-01", size=2), Asset(asset_name="fw-01"), mappings,
                       exclude=exclude_names("size"))
    assert not is_equal_to(Plain(name="fw-01", size=2), Asset(asset_name="fw-01"),
                           exclude=exclude_names("size"))


def test_mapping_overrides_same_named_property():
    source = UserSummary(username="jdoe", full_name="Jane Doe")
    other = UserData(username="Jane Doe", full_name="jdoe")
    mappings = [Map("username", "full_name"), Map("full_name", "username")]

    assert is_equal_to(source, other, mappings)
    assert not is_equal_to(source, other)


def test_comparison_is_not_symmetric(field_mappings):
    source = InputField(Validate=True, NumberOfChars=5)
    other = FieldState(IsValid="true", IsEmpty=True)

    assert is_equal_to(source, other, field_mappings)
    assert not is_equal_to(other, source, field_mappings)


def test_exclusion_makes_objects_equal():
    first = UserData(id=1, username="jdoe", full_name="Jane Doe")
    second = UserData(id=2, username="jdoe", full_name="Jane Doe")

    assert not is_equal_to(first, second)
    assert is_equal_to(first, second, exclude=exclude_names("id"))


def test_non_comparable_identity_target_fails():
    assert not is_equal_to(UserSummary(username="a", full_name="b"), Tagged(username="a"))


def test_comparison_against_none():
    assert not is_equal_to(UserData(), None)


def test_result_hashes():
    result = compare_objects(UserData(id=1), UserView(id=1))

    assert result
    assert result.source_hash == result.other_hash
    assert len(result.source_hash) == 64
    assert result.compared_count == 5
    assert "unresolved" not in result.to_dict()


def test_converter_applies_to_source_side_only():
    mappings = [Map("size", "size", convert=lambda value: value * 10)]

    assert is_equal_to(Plain(size=2), Plain(size=20), mappings)
    assert not is_equal_to(Plain(size=2), Plain(size=2), mappings)


def test_numeric_values_compare_by_value():
    record = PriceRecord(id=1, price=Decimal("1.50"))

    assert is_equal_to(record, PriceView(id=1, price=1.5))
    assert is_equal_to(PriceView(id=1, price=1.5), record)
    assert not is_equal_to(record, PriceView(id=1, price=1.25))
