from __future__ import annotations

from dataclasses import dataclass

# Fixed record layout: 16-char key followed by a 134-char opaque payload.
KEY_LENGTH = 16
PAYLOAD_LENGTH = 134
RECORD_LENGTH = KEY_LENGTH + PAYLOAD_LENGTH


class RecordLayoutError(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class Record:
    # Record is immutable and lives for exactly one read of the scan loop.
    key: str
    payload: str

    def __post_init__(self) -> None:
        if len(self.key) != KEY_LENGTH:
            raise RecordLayoutError(f"key must be {KEY_LENGTH} characters, got {len(self.key)}")
        if len(self.payload) != PAYLOAD_LENGTH:
            raise RecordLayoutError(
                f"payload must be {PAYLOAD_LENGTH} characters, got {len(self.payload)}"
            )

    @property
    def text(self) -> str:
        # Displayed form is the raw record content, nothing stripped.
        return self.key + self.payload

    @classmethod
    def from_bytes(cls, raw: bytes, encoding: str = "latin-1") -> Record:
        if len(raw) != RECORD_LENGTH:
            raise RecordLayoutError(f"record must be {RECORD_LENGTH} bytes, got {len(raw)}")
        text = raw.decode(encoding)
        return cls(key=text[:KEY_LENGTH], payload=text[KEY_LENGTH:])

    @classmethod
    def from_fields(cls, key: str, payload: str = "") -> Record:
        # Pads short fields with spaces the way fixed-width writers do.
        if len(key) > KEY_LENGTH or len(payload) > PAYLOAD_LENGTH:
            raise RecordLayoutError("field value longer than its fixed width")
        return cls(key=key.ljust(KEY_LENGTH), payload=payload.ljust(PAYLOAD_LENGTH))

    def to_bytes(self, encoding: str = "latin-1") -> bytes:
        raw = self.text.encode(encoding)
        if len(raw) != RECORD_LENGTH:
            raise RecordLayoutError(f"encoding {encoding!r} does not keep one byte per character")
        return raw
