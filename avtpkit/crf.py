"""The Clock Reference Format (CRF) header."""

from __future__ import annotations

from enum import IntEnum

from .common import Subtype
from .fields import FieldDescriptor, Pdu


class CrfField(IntEnum):
    SUBTYPE = 0
    SV = 1
    VERSION = 2
    MR = 3
    RESERVED = 4
    FS = 5
    TU = 6
    SEQUENCE_NUM = 7
    TYPE = 8
    STREAM_ID = 9
    PULL = 10
    BASE_FREQUENCY = 11
    CRF_DATA_LENGTH = 12
    TIMESTAMP_INTERVAL = 13


class Crf(Pdu):
    """A CRF PDU header; a fresh one carries the CRF subtype and a valid stream id."""

    DESCRIPTORS = {
        CrfField.SUBTYPE: FieldDescriptor(quadlet=0, offset=0, bits=8),
        CrfField.SV: FieldDescriptor(quadlet=0, offset=8, bits=1),
        CrfField.VERSION: FieldDescriptor(quadlet=0, offset=9, bits=3),
        CrfField.MR: FieldDescriptor(quadlet=0, offset=12, bits=1),
        CrfField.RESERVED: FieldDescriptor(quadlet=0, offset=13, bits=1),
        CrfField.FS: FieldDescriptor(quadlet=0, offset=14, bits=1),
        CrfField.TU: FieldDescriptor(quadlet=0, offset=15, bits=1),
        CrfField.SEQUENCE_NUM: FieldDescriptor(quadlet=0, offset=16, bits=8),
        CrfField.TYPE: FieldDescriptor(quadlet=0, offset=24, bits=8),
        CrfField.STREAM_ID: FieldDescriptor(quadlet=1, offset=0, bits=64),
        CrfField.PULL: FieldDescriptor(quadlet=3, offset=0, bits=3),
        CrfField.BASE_FREQUENCY: FieldDescriptor(quadlet=3, offset=3, bits=29),
        CrfField.CRF_DATA_LENGTH: FieldDescriptor(quadlet=4, offset=0, bits=16),
        CrfField.TIMESTAMP_INTERVAL: FieldDescriptor(quadlet=4, offset=16, bits=16),
    }
    SIZE = 20

    def _initialize(self) -> None:
        self.set(CrfField.SUBTYPE, Subtype.CRF)
        self.set(CrfField.SV, 1)