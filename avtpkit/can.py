"""ACF CAN and abbreviated CAN (CAN brief) message headers."""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar, Type, Union

from .common import AcfMessageType
from .fields import FieldDescriptor, FieldError, Pdu

QUADLET_SIZE = 4
_STANDARD_ID_MAX = 0x7FF

_Payload = Union[bytes, bytearray, memoryview]


class CanVariant(IntEnum):
    """Whether a frame is a classic CAN frame or a CAN FD frame."""

    CLASSIC_CAN = 0
    CAN_FD = 1


class CanField(IntEnum):
    ACF_MSG_TYPE = 0
    ACF_MSG_LENGTH = 1
    PAD = 2
    MTV = 3
    RTR = 4
    EFF = 5
    BRS = 6
    FDF = 7
    ESI = 8
    CAN_BUS_ID = 9
    MESSAGE_TIMESTAMP = 10
    CAN_IDENTIFIER = 11


class CanBriefField(IntEnum):
    ACF_MSG_TYPE = 0
    ACF_MSG_LENGTH = 1
    PAD = 2
    MTV = 3
    RTR = 4
    EFF = 5
    BRS = 6
    FDF = 7
    ESI = 8
    CAN_BUS_ID = 9
    CAN_IDENTIFIER = 10


def _descriptors(fields: Type[IntEnum], identifier_quadlet: int) -> dict:
    table = {
        fields.ACF_MSG_TYPE: FieldDescriptor(quadlet=0, offset=0, bits=7),
        fields.ACF_MSG_LENGTH: FieldDescriptor(quadlet=0, offset=7, bits=9),
        fields.PAD: FieldDescriptor(quadlet=0, offset=16, bits=2),
        fields.MTV: FieldDescriptor(quadlet=0, offset=18, bits=1),
        fields.RTR: FieldDescriptor(quadlet=0, offset=19, bits=1),
        fields.EFF: FieldDescriptor(quadlet=0, offset=20, bits=1),
        fields.BRS: FieldDescriptor(quadlet=0, offset=21, bits=1),
        fields.FDF: FieldDescriptor(quadlet=0, offset=22, bits=1),
        fields.ESI: FieldDescriptor(quadlet=0, offset=23, bits=1),
        fields.CAN_BUS_ID: FieldDescriptor(quadlet=0, offset=27, bits=5),
        fields.CAN_IDENTIFIER: FieldDescriptor(
            quadlet=identifier_quadlet, offset=3, bits=29
        ),
    }
    if hasattr(fields, "MESSAGE_TIMESTAMP"):
        table[fields.MESSAGE_TIMESTAMP] = FieldDescriptor(quadlet=1, offset=0, bits=64)
    return table


class _CanMessage(Pdu):
    """Behaviour shared by the full and the abbreviated CAN message."""

    _FIELDS: ClassVar[Type[IntEnum]]
    _MESSAGE_TYPE: ClassVar[int]

    def _initialize(self) -> None:
        self.set(self._FIELDS.ACF_MSG_TYPE, self._MESSAGE_TYPE)

    def _reserve(self, length: int) -> None:
        if len(self.data) >= length:
            return
        if isinstance(self.data, bytearray):
            self.data.extend(bytes(length - len(self.data)))
            return
        raise FieldError(
            f"buffer of {len(self.data)} bytes cannot hold a message of {length} bytes"
        )

    def _set_payload(self, frame_id: int, payload: _Payload, can_variant: CanVariant) -> int:
        payload = bytes(payload)
        end = self.SIZE + len(payload)
        self._reserve(end)
        self.data[self.SIZE:end] = payload
        self.set(self._FIELDS.EFF, 1 if frame_id > _STANDARD_ID_MAX else 0)
        self.set(self._FIELDS.CAN_IDENTIFIER, frame_id)
        self.set(self._FIELDS.FDF, int(can_variant))
        return self._finalize(len(payload))

    def _finalize(self, payload_length: int) -> int:
        remainder = payload_length % QUADLET_SIZE
        pad = QUADLET_SIZE - remainder if remainder else 0
        length = self.SIZE + payload_length
        if pad:
            self._reserve(length + pad)
            self.data[length:length + pad] = bytes(pad)
            length += pad
        self.set(self._FIELDS.ACF_MSG_LENGTH, length // QUADLET_SIZE)
        self.set(self._FIELDS.PAD, pad)
        return length


class Can(_CanMessage):
    """An ACF CAN message with a message timestamp; a fresh one has the CAN type."""

    _FIELDS = CanField
    _MESSAGE_TYPE = AcfMessageType.CAN
    DESCRIPTORS = _descriptors(CanField, identifier_quadlet=3)
    SIZE = 16

    def set_payload(self, frame_id: int, payload: _Payload, can_variant: CanVariant) -> int:
        """Copy ``payload`` in, set identifier and variant, and finalize.

        Returns the total message length in bytes, padding included.
        """
        return self._set_payload(frame_id, payload, can_variant)

    def finalize(self, payload_length: int) -> int:
        """Pad the payload to a quadlet boundary and set length and pad fields.

        Returns the total message length in bytes, padding included.
        """
        return self._finalize(payload_length)

    def get_payload(self) -> bytes:
        """Return the frame data, without header and padding."""
        quadlets = self.get(CanField.ACF_MSG_LENGTH)
        pad = self.get(CanField.PAD)
        length = quadlets * QUADLET_SIZE - self.SIZE - pad
        if length < 0:
            raise FieldError(
                f"message length of {quadlets} quadlets is shorter than the header"
            )
        end = self.SIZE + length
        if len(self.data) < end:
            raise FieldError(
                f"buffer of {len(self.data)} bytes is shorter than the message ({end})"
            )
        return bytes(self.data[self.SIZE:end])


class CanBrief(_CanMessage):
    """An abbreviated ACF CAN message; a fresh one has the CAN brief type."""

    _FIELDS = CanBriefField
    _MESSAGE_TYPE = AcfMessageType.CAN_BRIEF
    DESCRIPTORS = _descriptors(CanBriefField, identifier_quadlet=1)
    SIZE = 8

    def set_payload(self, frame_id: int, payload: _Payload, can_variant: CanVariant) -> int:
        """Copy ``payload`` in, set identifier and variant, and finalize.

        Returns the total message length in bytes, padding included.
        """
        return self._set_payload(frame_id, payload, can_variant)

    def finalize(self, payload_length: int) -> int:
        """Pad the payload to a quadlet boundary and set length and pad fields.

        Returns the total message length in bytes, padding included.
        """
        return self._finalize(payload_length)