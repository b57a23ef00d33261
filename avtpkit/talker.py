"""Building CVF H.264 packets from an H.264 byte-stream."""

from __future__ import annotations

import logging
import re
from typing import Optional, Union

from .cvf import Cvf, CvfField, CvfFormat, CvfFormatSubtype, H264, H264Field

log = logging.getLogger(__name__)

STREAM_ID = 0xAABBCCDDEEFF0001
DATA_LEN = 1400
H264_HEADER_LEN = H264.SIZE
FULL_HEADER_LEN = Cvf.SIZE + H264.SIZE
MAX_PDU_SIZE = FULL_HEADER_LEN + DATA_LEN

START_CODE = b"\x00\x00\x01"

_MAC_PATTERN = re.compile(r"^\s*([0-9A-Fa-f]{1,2})" + r":([0-9A-Fa-f]{1,2})" * 5 + r"\s*$")

Buffer = Union[bytes, bytearray, memoryview]


def parse_mac_address(text: str) -> bytes:
    """Parse a colon separated MAC address such as ``02:00:5e:10:00:01``."""
    match = _MAC_PATTERN.match(text)
    if match is None:
        raise ValueError(f"invalid MAC address: {text!r}")
    return bytes(int(part, 16) for part in match.groups())


def find_start_code(buffer: Buffer, offset: int = 0) -> Optional[int]:
    """Return the position of the first ``00 00 01`` start code at or after ``offset``."""
    position = bytes(buffer).find(START_CODE, offset)
    return None if position < 0 else position


class NalSplitter:
    """Cuts an H.264 byte-stream into NAL units, start code included."""

    def __init__(self, max_nal_size: int = DATA_LEN) -> None:
        self.max_nal_size = max_nal_size
        self._buffer = bytearray()

    def feed(self, data: Buffer) -> None:
        """Append more of the byte-stream."""
        self._buffer.extend(data)

    def pop(self, final: bool = False) -> Optional[bytes]:
        """Return the next complete NAL unit, or None if none is complete yet.

        A NAL unit ends where the next start code begins; with ``final`` set,
        the last unit runs to the end of the buffered data.
        """
        if not self._buffer:
            return None
        start = find_start_code(self._buffer, 0)
        if start is None:
            log.debug("unable to find NAL start")
            return None
        end = find_start_code(self._buffer, start + 1)
        if end is None:
            if not final:
                return None
            end = len(self._buffer)
        length = end - start
        if length > self.max_nal_size:
            raise ValueError(
                f"NAL length bigger than expected: expected {self.max_nal_size}, "
                f"found {length}"
            )
        nal = bytes(self._buffer[start:end])
        del self._buffer[:end]
        return nal


class CvfTalker:
    """Wraps NAL units into CVF H.264 packets of one stream."""

    def __init__(self, stream_id: int = STREAM_ID) -> None:
        self.stream_id = stream_id
        self.sequence_num = 0
        self._cvf = Cvf()
        self._cvf.set(CvfField.FORMAT, CvfFormat.RFC)
        self._cvf.set(CvfField.FORMAT_SUBTYPE, CvfFormatSubtype.H264)
        self._cvf.set(CvfField.TV, 1)
        self._cvf.set(CvfField.STREAM_ID, stream_id)
        self._cvf.set(CvfField.M, 1)
        self._cvf.set(CvfField.PTV, 0)
        self._h264 = H264()
        self._h264.set(H264Field.TIMESTAMP, 0)

    def build_packet(self, nal: Buffer, avtp_time: int) -> bytes:
        """Return the wire bytes of a packet carrying ``nal`` at ``avtp_time``."""
        nal = bytes(nal)
        if len(nal) > DATA_LEN:
            raise ValueError(
                f"NAL length bigger than expected: expected {DATA_LEN}, found {len(nal)}"
            )
        self._cvf.set(CvfField.AVTP_TIMESTAMP, avtp_time)
        self._cvf.set(CvfField.SEQUENCE_NUM, self.sequence_num)
        self.sequence_num = (self.sequence_num + 1) & 0xFF
        self._cvf.set(CvfField.STREAM_DATA_LENGTH, len(nal) + H264_HEADER_LEN)
        return bytes(self._cvf) + bytes(self._h264) + nal