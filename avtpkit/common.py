"""The AVTP common header, the UDP encapsulation header and the ACF common header."""

from __future__ import annotations

from enum import IntEnum

from .fields import FieldDescriptor, Pdu


class Subtype(IntEnum):
    """AVTP subtype values."""

    IIDC_61883 = 0x00
    MMA_STREAM = 0x01
    AAF = 0x02
    CVF = 0x03
    CRF = 0x04
    TSCF = 0x05
    SVF = 0x06
    RVF = 0x07
    AEF_CONTINUOUS = 0x6E
    VSF_STREAM = 0x6F
    EF_STREAM = 0x7F
    NTSCF = 0x82
    ESCF = 0xEC
    EECF = 0xED
    AEF_DISCRETE = 0xEE
    ADP = 0xFA
    AECP = 0xFB
    ACMP = 0xFC
    MAAP = 0xFE
    EF_CONTROL = 0xFF


class AcfMessageType(IntEnum):
    """ACF message type values."""

    FLEXRAY = 0x00
    CAN = 0x01
    CAN_BRIEF = 0x02
    LIN = 0x03
    MOST = 0x04
    GPC = 0x05
    SERIAL = 0x06
    PARALLEL = 0x07
    SENSOR = 0x08
    SENSOR_BRIEF = 0x09
    AECP = 0x0A
    ANCILLARY = 0x0B
    USER0 = 0x78
    USER1 = 0x79
    USER2 = 0x7A
    USER3 = 0x7B
    USER4 = 0x7C
    USER5 = 0x7D
    USER6 = 0x7E
    USER7 = 0x7F


class CommonHeaderField(IntEnum):
    SUBTYPE = 0
    H = 1
    VERSION = 2


class CommonHeader(Pdu):
    """The first quadlet shared by every AVTP PDU."""

    DESCRIPTORS = {
        CommonHeaderField.SUBTYPE: FieldDescriptor(quadlet=0, offset=0, bits=8),
        CommonHeaderField.H: FieldDescriptor(quadlet=0, offset=8, bits=1),
        CommonHeaderField.VERSION: FieldDescriptor(quadlet=0, offset=9, bits=3),
    }
    SIZE = 4


class UdpField(IntEnum):
    ENCAPSULATION_SEQ_NO = 0


class Udp(Pdu):
    """The encapsulation header that precedes AVTP PDUs carried over UDP."""

    DESCRIPTORS = {
        UdpField.ENCAPSULATION_SEQ_NO: FieldDescriptor(quadlet=0, offset=0, bits=32),
    }
    SIZE = 4

    def _initialize(self) -> None:
        self.set(UdpField.ENCAPSULATION_SEQ_NO, 0)


class AcfCommonField(IntEnum):
    ACF_MSG_TYPE = 0
    ACF_MSG_LENGTH = 1


class AcfCommon(Pdu):
    """The header shared by every ACF message."""

    DESCRIPTORS = {
        AcfCommonField.ACF_MSG_TYPE: FieldDescriptor(quadlet=0, offset=0, bits=7),
        AcfCommonField.ACF_MSG_LENGTH: FieldDescriptor(quadlet=0, offset=7, bits=9),
    }
    SIZE = 4