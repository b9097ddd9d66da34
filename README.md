# rapidtlv

A small library for building, encoding and parsing binary type-length-value
(TLV) messages.

## Wire format

A message is laid out like this:

| Bytes | Meaning                                                     |
|-------|-------------------------------------------------------------|
| 4     | Total message length, big-endian, including these 4 bytes   |
| 1     | Event type                                                  |
| ...   | Zero or more fields                                         |

Each field is laid out like this:

| Bytes | Meaning                      |
|-------|------------------------------|
| 1     | Field type                   |
| 4     | Value length, big-endian     |
| n     | Value                        |

A message holds at most one field per field type. Field types and event types
each run from 0 to 255. Fields are encoded in ascending order of field type.

## Installation

```
pip install .
```

## Usage

```python
from rapidtlv.message import Message

EVT_SET = 0x10
FIELD_KEY = 0x01
FIELD_VALUE = 0x02

msg = Message(EVT_SET)
msg.add_field(FIELD_KEY, b"user:42")
msg.add_field(FIELD_VALUE, b"hello")

data = msg.encode()          # bytes ready to send

parsed = Message.parse(data)
assert parsed.event_type == EVT_SET
assert parsed.get_field(FIELD_VALUE).value == b"hello"

parsed.remove_field(FIELD_KEY)
assert parsed.get_field(FIELD_KEY) is None
```

- `get_field` returns `None` when a field is absent.
- `add_field` replaces any field that already has the same type.
- `remove_field` always returns `True`, whether or not the field was present.
- `Message.fields()` returns a list of the present fields, in order of field type.

`encode` caches its result. Adding or removing a field clears the cache. A
message made by `Message.parse` keeps the bytes it was parsed from, so
encoding it unchanged returns those bytes exactly.

A single field can also be encoded on its own:

```python
from rapidtlv.field import Field

field = Field(0x01, b"test")
field.encode()   # b"\x01\x00\x00\x00\x04test"
len(field)       # 9: type byte + 4 length bytes + value
```

A `Field` has two attributes, `field_type` and `value`. Two fields compare
equal when both attributes are equal.

## Errors

A malformed input to `Message.parse` raises `rapidtlv.errors.RapidTlvError`
with code `ErrorCode.MALFORMED`. This happens in two cases:

- the input is shorter than 5 bytes;
- a field claims more bytes than remain.

The exception has a `code` attribute, which is a member of
`rapidtlv.errors.ErrorCode`, and a `message` attribute. `ErrorCode` is an
`IntEnum`. It also lists codes for application, cluster, system and client
errors. This library does not raise those itself.

`Message.parse` does not check the 4-byte length header against the real
input length. It also ignores trailing bytes that are too few to form a field
header. If a field type appears more than once, the last occurrence wins.

A `ValueError` is raised for an event type or field type outside 0–255.

## What it does not do

The library only turns messages into bytes and bytes back into messages. It
opens no connections and reads or writes no files or sockets. It does not
attach any meaning to event types or field types. Framing messages on a stream
and acting on them are left to the caller.

## Running the tests

```
pip install ".[test]"
pytest
```