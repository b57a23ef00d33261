"""ACF sensor and abbreviated sensor (sensor brief) message headers."""

from __future__ import annotations

from enum import IntEnum

from .common import AcfMessageType
from .fields import FieldDescriptor, Pdu


class SensorField(IntEnum):
    ACF_MSG_TYPE = 0
    ACF_MSG_LENGTH = 1
    MTV = 2
    NUM_SENSOR = 3
    SZ = 4
    SENSOR_GROUP = 5
    MESSAGE_TIMESTAMP = 6


class Sensor(Pdu):
    """An ACF sensor message with a message timestamp; a fresh one has the sensor type."""

    DESCRIPTORS = {
        SensorField.ACF_MSG_TYPE: FieldDescriptor(quadlet=0, offset=0, bits=7),
        SensorField.ACF_MSG_LENGTH: FieldDescriptor(quadlet=0, offset=7, bits=9),
        SensorField.MTV: FieldDescriptor(quadlet=0, offset=16, bits=1),
        SensorField.NUM_SENSOR: FieldDescriptor(quadlet=0, offset=17, bits=7),
        SensorField.SZ: FieldDescriptor(quadlet=0, offset=24, bits=2),
        SensorField.SENSOR_GROUP: FieldDescriptor(quadlet=0, offset=26, bits=6),
        SensorField.MESSAGE_TIMESTAMP: FieldDescriptor(quadlet=1, offset=0, bits=64),
    }
    SIZE = 12

    def _initialize(self) -> None:
        self.set(SensorField.ACF_MSG_TYPE, AcfMessageType.SENSOR)


class SensorBriefField(IntEnum):
    ACF_MSG_TYPE = 0
    ACF_MSG_LENGTH = 1
    MTV = 2
    NUM_SENSOR = 3
    SZ = 4
    SENSOR_GROUP = 5


class SensorBrief(Pdu):
    """An abbreviated ACF sensor message; a fresh one has the sensor brief type."""

    DESCRIPTORS = {
        SensorBriefField.ACF_MSG_TYPE: FieldDescriptor(quadlet=0, offset=0, bits=7),
        SensorBriefField.ACF_MSG_LENGTH: FieldDescriptor(quadlet=0, offset=7, bits=9),
        SensorBriefField.MTV: FieldDescriptor(quadlet=0, offset=16, bits=1),
        SensorBriefField.NUM_SENSOR: FieldDescriptor(quadlet=0, offset=17, bits=7),
        SensorBriefField.SZ: FieldDescriptor(quadlet=0, offset=24, bits=2),
        SensorBriefField.SENSOR_GROUP: FieldDescriptor(quadlet=0, offset=26, bits=6),
    }
    SIZE = 4

    def _initialize(self) -> None:
        self.set(SensorBriefField.ACF_MSG_TYPE, AcfMessageType.SENSOR_BRIEF)