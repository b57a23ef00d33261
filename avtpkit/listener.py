"""Receiving CVF H.264 packets and queueing their NAL units for presentation."""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Deque, Optional, Tuple, Union

from .common import Subtype
from .cvf import Cvf, CvfField, CvfFormat, CvfFormatSubtype
from .talker import DATA_LEN, FULL_HEADER_LEN, H264_HEADER_LEN, MAX_PDU_SIZE, STREAM_ID

log = logging.getLogger(__name__)


class PacketRejected(ValueError):
    """Raised when a received packet is not one this listener accepts."""


class CvfListener:
    """Checks packets of one CVF H.264 stream and extracts their NAL units."""

    def __init__(self, stream_id: int = STREAM_ID) -> None:
        self.stream_id = stream_id
        self.expected_seq = 0

    @staticmethod
    def _expect(cvf: Cvf, field: CvfField, expected: int, name: str) -> None:
        value = cvf.get(field)
        if value != expected:
            raise PacketRejected(f"{name} mismatch: expected {expected}, got {value}")

    def validate(self, cvf: Cvf) -> None:
        """Raise PacketRejected unless ``cvf`` belongs to this stream.

        A sequence number gap is only logged; the expected number then
        follows the received one.
        """
        self._expect(cvf, CvfField.SUBTYPE, Subtype.CVF, "subtype")
        self._expect(cvf, CvfField.VERSION, 0, "version")
        self._expect(cvf, CvfField.TV, 1, "tv")
        self._expect(cvf, CvfField.STREAM_ID, self.stream_id, "stream ID")

        sequence = cvf.get(CvfField.SEQUENCE_NUM)
        if sequence != self.expected_seq:
            log.warning(
                "sequence number mismatch: expected %d, got %d",
                self.expected_seq,
                sequence,
            )
            self.expected_seq = sequence
        self.expected_seq = (self.expected_seq + 1) & 0xFF

        self._expect(cvf, CvfField.FORMAT, CvfFormat.RFC, "format")
        self._expect(cvf, CvfField.FORMAT_SUBTYPE, CvfFormatSubtype.H264, "format subtype")

    def receive(self, packet: Union[bytes, bytearray, memoryview]) -> Tuple[int, bytes]:
        """Validate ``packet`` and return its AVTP timestamp and NAL unit."""
        packet = bytes(packet)
        if len(packet) > MAX_PDU_SIZE:
            raise PacketRejected(f"packet of {len(packet)} bytes exceeds {MAX_PDU_SIZE}")
        if len(packet) < FULL_HEADER_LEN:
            raise PacketRejected(f"packet of {len(packet)} bytes is shorter than the header")
        cvf = Cvf(packet)
        self.validate(cvf)
        avtp_time = cvf.get(CvfField.AVTP_TIMESTAMP)
        length = cvf.get(CvfField.STREAM_DATA_LENGTH) - H264_HEADER_LEN
        if length < 0 or length > DATA_LEN or FULL_HEADER_LEN + length > len(packet):
            raise PacketRejected(f"invalid stream data length {length + H264_HEADER_LEN}")
        return avtp_time, packet[FULL_HEADER_LEN:FULL_HEADER_LEN + length]


class PresentationQueue:
    """NAL units waiting for their presentation time, in arrival order."""

    def __init__(self) -> None:
        self._entries: Deque[Tuple[Any, bytes]] = deque()

    def push(self, when: Any, nal: bytes) -> bool:
        """Queue ``nal`` for ``when``; True if it is now the head (arm the timer)."""
        self._entries.append((when, bytes(nal)))
        return len(self._entries) == 1

    def next_deadline(self) -> Optional[Any]:
        """Presentation time of the head entry, or None when empty."""
        return self._entries[0][0] if self._entries else None

    def pop(self) -> bytes:
        """Remove and return the head NAL unit."""
        if not self._entries:
            raise IndexError("pop from an empty presentation queue")
        return self._entries.popleft()[1]

    def __len__(self) -> int:
        return len(self._entries)