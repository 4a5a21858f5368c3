"""Unit tests for the wire optional decoder."""

import pytest

from attachment_core.domain.models.wire_value import (
    AbsentValue,
    BareValue,
    EmptySequence,
    OverfullSequence,
    SingletonSequence,
    TaggedNone,
    TaggedSome,
    UnrecognizedWrapper,
)
from attachment_core.domain.services.wire_decoder import (
    MAX_UNWRAP_DEPTH,
    classify_optional,
    decode_optional,
    normalize_string,
    unwrap_bytes_field,
    unwrap_optional,
)


class TestClassifyOptional:
    """Each raw shape parses into exactly one variant."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, AbsentValue()),
            ([], EmptySequence()),
            ((), EmptySequence()),
            (["x"], SingletonSequence(value="x")),
            (["x", "y"], OverfullSequence(length=2)),
            ({"__kind__": "none"}, TaggedNone()),
            ({"__kind__": "some", "value": 3}, TaggedSome(value=3, has_value=True)),
            ({"__kind__": "some"}, TaggedSome(value=None, has_value=False)),
            ({"kind": "none"}, TaggedNone()),
            ({"kind": "Some", "value": "v"}, TaggedSome(value="v", has_value=True)),
            ({"__kind__": "maybe"}, UnrecognizedWrapper(tag="maybe")),
            ("bare", BareValue(value="bare")),
            (0, BareValue(value=0)),
        ],
    )
    def test_shapes(self, value: object, expected: object) -> None:
        """Raw value classifies into the documented variant."""
        assert classify_optional(value) == expected

    def test_loose_discriminator_with_other_tag_is_bare(self) -> None:
        """A plain record with an unrelated 'kind' field is not a wrapper."""
        record = {"kind": "invoice", "value": 1}
        assert classify_optional(record) == BareValue(value=record)


class TestDecodeOptional:
    """decode_optional never raises and returns the documented result."""

    def test_absent_is_none(self) -> None:
        assert decode_optional(None) is None

    def test_empty_sequence_is_none(self) -> None:
        assert decode_optional([]) is None

    def test_singleton_is_element(self) -> None:
        assert decode_optional(["x"]) == "x"

    def test_overfull_is_none(self) -> None:
        """Overfull sequence is a malformed response, not a crash."""
        assert decode_optional(["x", "y"]) is None

    def test_tagged_none(self) -> None:
        assert decode_optional({"kind": "none"}) is None

    def test_tagged_some(self) -> None:
        assert decode_optional({"kind": "some", "value": "x"}) == "x"

    def test_tagged_some_without_value_is_none(self) -> None:
        assert decode_optional({"__kind__": "some"}) is None

    def test_unrecognized_tag_is_none(self) -> None:
        assert decode_optional({"__kind__": 42}) is None

    def test_bare_value_is_present(self) -> None:
        """Values without any wrapper count as present."""
        assert decode_optional("x") == "x"
        assert decode_optional({"filename": "a.pdf"}) == {"filename": "a.pdf"}

    def test_single_level_only(self) -> None:
        assert decode_optional([["x"]]) == ["x"]

    def test_singleton_none(self) -> None:
        assert decode_optional([None]) is None


class TestUnwrapOptional:
    """unwrap_optional peels wrappers to any depth."""

    def test_nested_sequences(self) -> None:
        assert unwrap_optional([[["x"]]]) == "x"

    def test_mixed_wrappers(self) -> None:
        value = [{"__kind__": "some", "value": [{"kind": "some", "value": "x"}]}]
        assert unwrap_optional(value) == "x"

    def test_nested_absence(self) -> None:
        assert unwrap_optional([[[]]]) is None
        assert unwrap_optional([{"kind": "none"}]) is None

    def test_bare_mapping_returned(self) -> None:
        record = {"applicationId": "X"}
        assert unwrap_optional([record]) is record

    def test_too_deep_is_none(self) -> None:
        value: object = "x"
        for _ in range(MAX_UNWRAP_DEPTH + 1):
            value = [value]
        assert unwrap_optional(value) is None


class TestUnwrapBytesField:
    """Byte payloads are not mistaken for optionals."""

    def test_raw_integer_list_is_payload(self) -> None:
        """A multi-element int list is a payload, not an overfull optional."""
        assert unwrap_bytes_field([37, 80, 68]) == [37, 80, 68]

    def test_wrapped_integer_list(self) -> None:
        assert unwrap_bytes_field([[37, 80, 68]]) == [37, 80, 68]

    def test_single_integer_list_is_payload(self) -> None:
        assert unwrap_bytes_field([7]) == [7]

    def test_tagged_buffer(self) -> None:
        assert unwrap_bytes_field({"__kind__": "some", "value": b"abc"}) == b"abc"

    def test_indexed_object_is_payload(self) -> None:
        payload = {"0": 1, "1": 2}
        assert unwrap_bytes_field([payload]) == payload

    def test_empty_is_none(self) -> None:
        assert unwrap_bytes_field([]) is None
        assert unwrap_bytes_field(None) is None


class TestNormalizeString:
    """Blank strings collapse to None."""

    def test_strips(self) -> None:
        assert normalize_string("  a.pdf ") == "a.pdf"

    def test_blank(self) -> None:
        assert normalize_string("   ") is None

    def test_non_string(self) -> None:
        assert normalize_string(5) is None
        assert normalize_string(None) is None
