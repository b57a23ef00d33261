"""AVTP Audio Format (AAF) headers: the common stream layout and the PCM stream."""

from __future__ import annotations

from enum import IntEnum

from .common import Subtype
from .fields import FieldDescriptor, Pdu


class AafCommonStreamField(IntEnum):
    SUBTYPE = 0
    SV = 1
    VERSION = 2
    MR = 3
    TV = 4
    SEQUENCE_NUM = 5
    TU = 6
    STREAM_ID = 7
    AVTP_TIMESTAMP = 8
    FORMAT = 9
    AAF_FORMAT_SPECIFIC_DATA_1 = 10
    STREAM_DATA_LENGTH = 11
    AFSD = 12
    SP = 13
    EVT = 14
    AAF_FORMAT_SPECIFIC_DATA_2 = 15


class AafCommonStream(Pdu):
    """The AAF header with its format-specific parts left opaque."""

    DESCRIPTORS = {
        AafCommonStreamField.SUBTYPE: FieldDescriptor(quadlet=0, offset=0, bits=8),
        AafCommonStreamField.SV: FieldDescriptor(quadlet=0, offset=8, bits=1),
        AafCommonStreamField.VERSION: FieldDescriptor(quadlet=0, offset=9, bits=3),
        AafCommonStreamField.MR: FieldDescriptor(quadlet=0, offset=12, bits=1),
        AafCommonStreamField.TV: FieldDescriptor(quadlet=0, offset=15, bits=1),
        AafCommonStreamField.SEQUENCE_NUM: FieldDescriptor(quadlet=0, offset=16, bits=8),
        AafCommonStreamField.TU: FieldDescriptor(quadlet=0, offset=31, bits=1),
        AafCommonStreamField.STREAM_ID: FieldDescriptor(quadlet=1, offset=0, bits=64),
        AafCommonStreamField.AVTP_TIMESTAMP: FieldDescriptor(quadlet=3, offset=0, bits=32),
        AafCommonStreamField.FORMAT: FieldDescriptor(quadlet=4, offset=0, bits=8),
        AafCommonStreamField.AAF_FORMAT_SPECIFIC_DATA_1: FieldDescriptor(
            quadlet=4, offset=8, bits=24
        ),
        AafCommonStreamField.STREAM_DATA_LENGTH: FieldDescriptor(
            quadlet=5, offset=0, bits=16
        ),
        AafCommonStreamField.AFSD: FieldDescriptor(quadlet=5, offset=16, bits=3),
        AafCommonStreamField.SP: FieldDescriptor(quadlet=5, offset=19, bits=1),
        AafCommonStreamField.EVT: FieldDescriptor(quadlet=5, offset=20, bits=4),
        AafCommonStreamField.AAF_FORMAT_SPECIFIC_DATA_2: FieldDescriptor(
            quadlet=5, offset=24, bits=8
        ),
    }
    SIZE = 24


class AafPcmStreamField(IntEnum):
    SUBTYPE = 0
    SV = 1
    VERSION = 2
    MR = 3
    TV = 4
    SEQUENCE_NUM = 5
    TU = 6
    STREAM_ID = 7
    AVTP_TIMESTAMP = 8
    FORMAT = 9
    NSR = 10
    CHANNELS_PER_FRAME = 11
    BIT_DEPTH = 12
    STREAM_DATA_LENGTH = 13
    SP = 14
    EVT = 15


class AafPcmStream(Pdu):
    """An AAF PCM stream header; a fresh one carries the AAF subtype and a valid stream id."""

    DESCRIPTORS = {
        AafPcmStreamField.SUBTYPE: FieldDescriptor(quadlet=0, offset=0, bits=8),
        AafPcmStreamField.SV: FieldDescriptor(quadlet=0, offset=8, bits=1),
        AafPcmStreamField.VERSION: FieldDescriptor(quadlet=0, offset=9, bits=3),
        AafPcmStreamField.MR: FieldDescriptor(quadlet=0, offset=12, bits=1),
        AafPcmStreamField.TV: FieldDescriptor(quadlet=0, offset=15, bits=1),
        AafPcmStreamField.SEQUENCE_NUM: FieldDescriptor(quadlet=0, offset=16, bits=8),
        AafPcmStreamField.TU: FieldDescriptor(quadlet=0, offset=31, bits=1),
        AafPcmStreamField.STREAM_ID: FieldDescriptor(quadlet=1, offset=0, bits=64),
        AafPcmStreamField.AVTP_TIMESTAMP: FieldDescriptor(quadlet=3, offset=0, bits=32),
        AafPcmStreamField.FORMAT: FieldDescriptor(quadlet=4, offset=0, bits=8),
        AafPcmStreamField.NSR: FieldDescriptor(quadlet=4, offset=8, bits=4),
        AafPcmStreamField.CHANNELS_PER_FRAME: FieldDescriptor(
            quadlet=4, offset=14, bits=10
        ),
        AafPcmStreamField.BIT_DEPTH: FieldDescriptor(quadlet=4, offset=24, bits=8),
        AafPcmStreamField.STREAM_DATA_LENGTH: FieldDescriptor(
            quadlet=5, offset=0, bits=16
        ),
        AafPcmStreamField.SP: FieldDescriptor(quadlet=5, offset=19, bits=1),
        AafPcmStreamField.EVT: FieldDescriptor(quadlet=5, offset=20, bits=4),
    }
    SIZE = 24

    def _initialize(self) -> None:
        self.set(AafPcmStreamField.SUBTYPE, Subtype.AAF)
        self.set(AafPcmStreamField.SV, 1)