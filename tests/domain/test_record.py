from __future__ import annotations

import pytest

from record_scan.domain.record import (
    KEY_LENGTH,
    PAYLOAD_LENGTH,
    RECORD_LENGTH,
    Record,
    RecordLayoutError,
)


def test_layout_constants_add_up() -> None:
    # Key and payload together make the fixed 150-character record.
    assert (KEY_LENGTH, PAYLOAD_LENGTH, RECORD_LENGTH) == (16, 134, 150)


def test_from_bytes_splits_key_and_payload() -> None:
    raw = b"CUST000000000001" + b"X" * 134
    record = Record.from_bytes(raw)
    assert record.key == "CUST000000000001"
    assert record.payload == "X" * 134


def test_text_is_raw_content_without_stripping() -> None:
    # Trailing spaces in the payload are part of the displayed record.
    record = Record.from_fields("K1", "hello")
    assert record.text == "K1" + " " * 14 + "hello" + " " * 129
    assert len(record.text) == RECORD_LENGTH


@pytest.mark.parametrize("length", [0, 149, 151])
def test_from_bytes_rejects_wrong_length(length: int) -> None:
    with pytest.raises(RecordLayoutError):
        Record.from_bytes(b"A" * length)


def test_from_bytes_decodes_ebcdic() -> None:
    # cp037 keeps one byte per character, so mainframe dumps fit the same layout.
    raw = Record.from_fields("ABC", "payload").to_bytes("cp037")
    assert raw[:3] == b"\xc1\xc2\xc3"
    assert Record.from_bytes(raw, "cp037").key.rstrip() == "ABC"


def test_record_rejects_wrong_field_widths() -> None:
    with pytest.raises(RecordLayoutError):
        Record(key="short", payload=" " * PAYLOAD_LENGTH)
    with pytest.raises(RecordLayoutError):
        Record.from_fields("K" * (KEY_LENGTH + 1))


def test_to_bytes_rejects_multibyte_encoding() -> None:
    record = Record.from_fields("K1", "café")
    with pytest.raises(RecordLayoutError):
        record.to_bytes("utf-8")


def test_record_is_immutable() -> None:
    record = Record.from_fields("K1")
    with pytest.raises(AttributeError):
        record.key = "K2"  # type: ignore[misc]
