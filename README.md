# avtpkit

avtpkit reads and writes the header fields of IEEE 1722 Audio Video
Transport Protocol (AVTP) packets. It uses only the standard library.

## Modules

- `avtpkit.fields`: the field engine. A `FieldDescriptor` gives a field's
  quadlet index, bit offset and width. `get_field(descriptors, data, field)`
  and `set_field(descriptors, data, field, value)` read and write
  big-endian fields in a byte buffer. `Pdu` is the base class of every
  header type. An unknown field, an invalid descriptor or a buffer too
  short for the field raises `FieldError` (a `ValueError`).
- `avtpkit.common`: `CommonHeader`, `Udp` (the encapsulation sequence
  number) and `AcfCommon`, plus the `Subtype` and `AcfMessageType`
  enumerations.
- `avtpkit.crf`: Clock Reference Format, `Crf`.
- `avtpkit.rvf`: Raw Video Format, `Rvf`.
- `avtpkit.aaf`: AVTP Audio Format, `AafCommonStream` and `AafPcmStream`.
- `avtpkit.cvf`: Compressed Video Format, `Cvf`, with the `H264`,
  `Jpeg2000` and `Mjpeg` headers that follow it, and the `CvfFormat` and
  `CvfFormatSubtype` enumerations.
- `avtpkit.control`: `Ntscf` and `Tscf` control format headers.
- `avtpkit.can`: ACF CAN messages, `Can` and `CanBrief`, and `CanVariant`.
- `avtpkit.sensor`: ACF sensor messages, `Sensor` and `SensorBrief`.
- `avtpkit.talker` and `avtpkit.listener`: helpers for carrying H.264
  over CVF.

Each header type has a field enumeration named after it (`CvfField` for
`Cvf`, `CanField` for `Can`, and so on). Its members are what `get` and
`set` take.

## Headers

`Pdu()` with no argument makes a zeroed header of the type's size and
fills in its defaults: `Crf`, `Rvf`, `AafPcmStream`, `Cvf`, `Ntscf` and
`Tscf` get their subtype and the SV bit set; `Can`, `CanBrief`, `Sensor`
and `SensorBrief` get their ACF message type. `Pdu(data)` wraps existing
bytes instead. A `bytearray` or `memoryview` is used in place, and any
other bytes are copied. Too few bytes for the header raise `FieldError`.

```python
from avtpkit.cvf import Cvf, CvfField

pdu = Cvf()
pdu.set(CvfField.SEQUENCE_NUM, 7)
assert pdu.get(CvfField.SEQUENCE_NUM) == 7
wire = bytes(pdu)
```

A value wider than its field is cut to the field's width. Neighbouring
fields are left as they were. `pdu.payload` is a writable view of the
bytes after the header, and `len(pdu)` is the length of the buffer.

## CAN messages

`Can.set_payload(frame_id, payload, can_variant)` and
`CanBrief.set_payload(...)` copy the frame data in. They set the EFF flag
when the identifier is above 0x7FF, and set the identifier and the FDF
flag from the `CanVariant`. They then call `finalize`. `finalize(payload_length)`
pads the payload to a four-byte boundary and sets the message length (in
quadlets) and pad fields. Both return the total message length in bytes.
A `bytearray` buffer grows as needed. Other buffers that are too short
raise `FieldError`. `Can.get_payload()` returns the frame data without
header and padding.

## H.264 over CVF

Sending side (`avtpkit.talker`):

- `parse_mac_address("02:00:00:00:00:01")` returns the six bytes of the
  address and raises `ValueError` on anything else.
- `find_start_code(buffer, offset)` returns the position of the next
  `00 00 01` start code, or `None`.
- `NalSplitter` takes the byte stream through `feed(data)`. `pop(final)`
  returns the next whole NAL unit, start code included, or `None`. With
  `final=True` the last unit runs to the end of the data. A unit longer
  than 1400 bytes raises `ValueError`.
- `CvfTalker(stream_id)` keeps an 8-bit sequence number. Its
  `build_packet(nal, avtp_time)` returns the bytes of one CVF H.264 packet.

Receiving side (`avtpkit.listener`):

- `CvfListener(stream_id).validate(cvf)` checks subtype, version, the TV
  flag, stream ID, format and format subtype, and raises `PacketRejected`
  on a mismatch. A gap in sequence numbers is only logged.
- `CvfListener.receive(packet)` checks the packet size and the stream data
  length as well, and returns a tuple `(avtp_timestamp, nal)`.
- `PresentationQueue` keeps NAL units in arrival order.
  `push(when, nal)` returns `True` when the new entry is at the head.
  There are also `next_deadline()`, `pop()` and `len(queue)`.

## What it does not do

avtpkit has no command-line program and opens no sockets. Sending and
receiving Ethernet frames is left to the application, and so is choosing
AVTP timestamps and turning them into presentation times.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.