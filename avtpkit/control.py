"""Non-time-synchronous (NTSCF) and time-synchronous (TSCF) control format headers."""

from __future__ import annotations

from enum import IntEnum

from .common import Subtype
from .fields import FieldDescriptor, Pdu


class NtscfField(IntEnum):
    SUBTYPE = 0
    SV = 1
    VERSION = 2
    NTSCF_DATA_LENGTH = 3
    SEQUENCE_NUM = 4
    STREAM_ID = 5


class Ntscf(Pdu):
    """An NTSCF PDU header; a fresh one carries the NTSCF subtype and a valid stream id."""

    DESCRIPTORS = {
        NtscfField.SUBTYPE: FieldDescriptor(quadlet=0, offset=0, bits=8),
        NtscfField.SV: FieldDescriptor(quadlet=0, offset=8, bits=1),
        NtscfField.VERSION: FieldDescriptor(quadlet=0, offset=9, bits=3),
        NtscfField.NTSCF_DATA_LENGTH: FieldDescriptor(quadlet=0, offset=13, bits=11),
        NtscfField.SEQUENCE_NUM: FieldDescriptor(quadlet=0, offset=24, bits=8),
        NtscfField.STREAM_ID: FieldDescriptor(quadlet=1, offset=0, bits=64),
    }
    SIZE = 12

    def _initialize(self) -> None:
        self.set(NtscfField.SUBTYPE, Subtype.NTSCF)
        self.set(NtscfField.SV, 1)


class TscfField(IntEnum):
    SUBTYPE = 0
    SV = 1
    VERSION = 2
    MR = 3
    TV = 4
    SEQUENCE_NUM = 5
    TU = 6
    STREAM_ID = 7
    AVTP_TIMESTAMP = 8
    STREAM_DATA_LENGTH = 9


class Tscf(Pdu):
    """A TSCF PDU header; a fresh one carries the TSCF subtype and a valid stream id."""

    DESCRIPTORS = {
        TscfField.SUBTYPE: FieldDescriptor(quadlet=0, offset=0, bits=8),
        TscfField.SV: FieldDescriptor(quadlet=0, offset=8, bits=1),
        TscfField.VERSION: FieldDescriptor(quadlet=0, offset=9, bits=3),
        TscfField.MR: FieldDescriptor(quadlet=0, offset=12, bits=1),
        TscfField.TV: FieldDescriptor(quadlet=0, offset=15, bits=1),
        TscfField.SEQUENCE_NUM: FieldDescriptor(quadlet=0, offset=16, bits=8),
        TscfField.TU: FieldDescriptor(quadlet=0, offset=31, bits=1),
        TscfField.STREAM_ID: FieldDescriptor(quadlet=1, offset=0, bits=64),
        TscfField.AVTP_TIMESTAMP: FieldDescriptor(quadlet=3, offset=0, bits=32),
        TscfField.STREAM_DATA_LENGTH: FieldDescriptor(quadlet=5, offset=0, bits=16),
    }
    SIZE = 24

    def _initialize(self) -> None:
        self.set(TscfField.SUBTYPE, Subtype.TSCF)
        self.set(TscfField.SV, 1)