"""Compressed Video Format (CVF) header and its H.264, JPEG 2000 and MJPEG headers."""

from __future__ import annotations

from enum import IntEnum

from .common import Subtype
from .fields import FieldDescriptor, Pdu


class CvfFormat(IntEnum):
    """Values of the CVF format field."""

    RFC = 0x02


class CvfFormatSubtype(IntEnum):
    """Values of the CVF format subtype field."""

    MJPEG = 0x00
    H264 = 0x01
    JPEG2000 = 0x02


class CvfField(IntEnum):
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
    FORMAT = 11
    FORMAT_SUBTYPE = 12
    RESERVED_3 = 13
    STREAM_DATA_LENGTH = 14
    RESERVED_4 = 15
    PTV = 16
    M = 17
    EVT = 18
    RESERVED_5 = 19


class Cvf(Pdu):
    """A CVF PDU header; a fresh one carries the CVF subtype and a valid stream id."""

    DESCRIPTORS = {
        CvfField.SUBTYPE: FieldDescriptor(quadlet=0, offset=0, bits=8),
        CvfField.SV: FieldDescriptor(quadlet=0, offset=8, bits=1),
        CvfField.VERSION: FieldDescriptor(quadlet=0, offset=9, bits=3),
        CvfField.MR: FieldDescriptor(quadlet=0, offset=12, bits=1),
        CvfField.RESERVED: FieldDescriptor(quadlet=0, offset=13, bits=2),
        CvfField.TV: FieldDescriptor(quadlet=0, offset=15, bits=1),
        CvfField.SEQUENCE_NUM: FieldDescriptor(quadlet=0, offset=16, bits=8),
        CvfField.RESERVED_2: FieldDescriptor(quadlet=0, offset=24, bits=7),
        CvfField.TU: FieldDescriptor(quadlet=0, offset=31, bits=1),
        CvfField.STREAM_ID: FieldDescriptor(quadlet=1, offset=0, bits=64),
        CvfField.AVTP_TIMESTAMP: FieldDescriptor(quadlet=3, offset=0, bits=32),
        CvfField.FORMAT: FieldDescriptor(quadlet=4, offset=0, bits=8),
        CvfField.FORMAT_SUBTYPE: FieldDescriptor(quadlet=4, offset=8, bits=8),
        CvfField.RESERVED_3: FieldDescriptor(quadlet=4, offset=16, bits=16),
        CvfField.STREAM_DATA_LENGTH: FieldDescriptor(quadlet=5, offset=0, bits=16),
        CvfField.RESERVED_4: FieldDescriptor(quadlet=5, offset=16, bits=2),
        CvfField.PTV: FieldDescriptor(quadlet=5, offset=18, bits=1),
        CvfField.M: FieldDescriptor(quadlet=5, offset=19, bits=1),
        CvfField.EVT: FieldDescriptor(quadlet=5, offset=20, bits=4),
        CvfField.RESERVED_5: FieldDescriptor(quadlet=5, offset=24, bits=8),
    }
    SIZE = 24

    def _initialize(self) -> None:
        self.set(CvfField.SUBTYPE, Subtype.CVF)
        self.set(CvfField.SV, 1)


class H264Field(IntEnum):
    TIMESTAMP = 0


class H264(Pdu):
    """The H.264 specific header that follows a CVF header."""

    DESCRIPTORS = {
        H264Field.TIMESTAMP: FieldDescriptor(quadlet=0, offset=0, bits=32),
    }
    SIZE = 4


class Jpeg2000Field(IntEnum):
    TP = 0
    MHF = 1
    MH_ID = 2
    T = 3
    PRIORITY = 4
    TILE_NUMBER = 5
    RESERVED = 6
    FRAGMENT_OFFSET = 7


class Jpeg2000(Pdu):
    """The JPEG 2000 specific header that follows a CVF header."""

    DESCRIPTORS = {
        Jpeg2000Field.TP: FieldDescriptor(quadlet=0, offset=0, bits=2),
        Jpeg2000Field.MHF: FieldDescriptor(quadlet=0, offset=2, bits=2),
        Jpeg2000Field.MH_ID: FieldDescriptor(quadlet=0, offset=4, bits=3),
        Jpeg2000Field.T: FieldDescriptor(quadlet=0, offset=7, bits=1),
        Jpeg2000Field.PRIORITY: FieldDescriptor(quadlet=0, offset=8, bits=8),
        Jpeg2000Field.TILE_NUMBER: FieldDescriptor(quadlet=0, offset=16, bits=16),
        Jpeg2000Field.RESERVED: FieldDescriptor(quadlet=1, offset=0, bits=8),
        Jpeg2000Field.FRAGMENT_OFFSET: FieldDescriptor(quadlet=1, offset=8, bits=24),
    }
    SIZE = 8


class MjpegField(IntEnum):
    TYPE_SPECIFIC = 0
    FRAGMENT_OFFSET = 1
    TYPE = 2
    Q = 3
    WIDTH = 4
    HEIGHT = 5


class Mjpeg(Pdu):
    """The MJPEG specific header that follows a CVF header."""

    DESCRIPTORS = {
        MjpegField.TYPE_SPECIFIC: FieldDescriptor(quadlet=0, offset=0, bits=8),
        MjpegField.FRAGMENT_OFFSET: FieldDescriptor(quadlet=0, offset=8, bits=24),
        MjpegField.TYPE: FieldDescriptor(quadlet=1, offset=0, bits=8),
        MjpegField.Q: FieldDescriptor(quadlet=1, offset=8, bits=8),
        MjpegField.WIDTH: FieldDescriptor(quadlet=1, offset=16, bits=8),
        MjpegField.HEIGHT: FieldDescriptor(quadlet=1, offset=24, bits=8),
    }
    SIZE = 8