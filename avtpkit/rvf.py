"""The Raw Video Format (RVF) header."""

from __future__ import annotations

from enum import IntEnum

from .common import Subtype
from .fields import FieldDescriptor, Pdu


class RvfField(IntEnum):
    SUBTYPE = 0
    SV = 1
    VERSION = 2
    MR = 3
    RESERVED = 4
    TV = 5
    SEQUENCE_NUM = 6
    RESERVED_2 = 7
    TU = 8
    STREAM_ID = 9
    AVTP_TIMESTAMP = 10
    ACTIVE_PIXELS = 11
    TOTAL_LINES = 12
    STREAM_DATA_LENGTH = 13
    AP = 14
    RESERVED_3 = 15
    F = 16
    EF = 17
    EVT = 18
    PD = 19
    I = 20  # noqa: E741
    RESERVED_4 = 21
    RESERVED_5 = 22
    PIXEL_DEPTH = 23
    PIXEL_FORMAT = 24
    FRAME_RATE = 25
    COLORSPACE = 26
    NUM_LINES = 27
    RESERVED_6 = 28
    I_SEQ_NUM = 29
    LINE_NUMBER = 30


class Rvf(Pdu):
    """An RVF PDU header; a fresh one carries the RVF subtype and a valid stream id."""

    DESCRIPTORS = {
        RvfField.SUBTYPE: FieldDescriptor(quadlet=0, offset=0, bits=8),
        RvfField.SV: FieldDescriptor(quadlet=0, offset=8, bits=1),
        RvfField.VERSION: FieldDescriptor(quadlet=0, offset=9, bits=3),
        RvfField.MR: FieldDescriptor(quadlet=0, offset=12, bits=1),
        RvfField.RESERVED: FieldDescriptor(quadlet=0, offset=13, bits=2),
        RvfField.TV: FieldDescriptor(quadlet=0, offset=15, bits=1),
        RvfField.SEQUENCE_NUM: FieldDescriptor(quadlet=0, offset=16, bits=8),
        RvfField.RESERVED_2: FieldDescriptor(quadlet=0, offset=24, bits=7),
        RvfField.TU: FieldDescriptor(quadlet=0, offset=31, bits=1),
        RvfField.STREAM_ID: FieldDescriptor(quadlet=1, offset=0, bits=64),
        RvfField.AVTP_TIMESTAMP: FieldDescriptor(quadlet=3, offset=0, bits=32),
        RvfField.ACTIVE_PIXELS: FieldDescriptor(quadlet=4, offset=0, bits=16),
        RvfField.TOTAL_LINES: FieldDescriptor(quadlet=4, offset=16, bits=16),
        RvfField.STREAM_DATA_LENGTH: FieldDescriptor(quadlet=5, offset=0, bits=16),
        RvfField.AP: FieldDescriptor(quadlet=5, offset=16, bits=1),
        RvfField.RESERVED_3: FieldDescriptor(quadlet=5, offset=17, bits=1),
        RvfField.F: FieldDescriptor(quadlet=5, offset=18, bits=1),
        RvfField.EF: FieldDescriptor(quadlet=5, offset=19, bits=1),
        RvfField.EVT: FieldDescriptor(quadlet=5, offset=20, bits=4),
        RvfField.PD: FieldDescriptor(quadlet=5, offset=24, bits=1),
        RvfField.I: FieldDescriptor(quadlet=5, offset=25, bits=1),
        RvfField.RESERVED_4: FieldDescriptor(quadlet=5, offset=26, bits=6),
        RvfField.RESERVED_5: FieldDescriptor(quadlet=6, offset=0, bits=8),
        RvfField.PIXEL_DEPTH: FieldDescriptor(quadlet=6, offset=8, bits=4),
        RvfField.PIXEL_FORMAT: FieldDescriptor(quadlet=6, offset=12, bits=4),
        RvfField.FRAME_RATE: FieldDescriptor(quadlet=6, offset=16, bits=8),
        RvfField.COLORSPACE: FieldDescriptor(quadlet=6, offset=24, bits=4),
        RvfField.NUM_LINES: FieldDescriptor(quadlet=6, offset=28, bits=4),
        RvfField.RESERVED_6: FieldDescriptor(quadlet=7, offset=0, bits=8),
        RvfField.I_SEQ_NUM: FieldDescriptor(quadlet=7, offset=8, bits=8),
        RvfField.LINE_NUMBER: FieldDescriptor(quadlet=7, offset=16, bits=16),
    }
    SIZE = 32

    def _initialize(self) -> None:
        self.set(RvfField.SUBTYPE, Subtype.RVF)
        self.set(RvfField.SV, 1)