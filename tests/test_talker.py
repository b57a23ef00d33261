import pytest

from avtpkit.cvf import Cvf, CvfField, CvfFormat, CvfFormatSubtype, H264, H264Field
from avtpkit.talker import (
    DATA_LEN,
    FULL_HEADER_LEN,
    STREAM_ID,
    CvfTalker,
    NalSplitter,
    find_start_code,
    parse_mac_address,
)


def test_parse_mac_address():
    assert parse_mac_address("02:aa:BB:0c:00:ff") == bytes([0x02, 0xAA, 0xBB, 0x0C, 0x00, 0xFF])


def test_parse_mac_address_single_digits():
    assert parse_mac_address("2:0:5e:1:0:1") == bytes([2, 0, 0x5E, 1, 0, 1])


@pytest.mark.parametrize("text", ["", "02:00:5e:10:00", "zz:00:5e:10:00:01", "020:00:5e:10:00:01"])
def test_parse_mac_address_invalid(text):
    with pytest.raises(ValueError):
        parse_mac_address(text)


def test_find_start_code():
    assert find_start_code(b"\x00\x00\x01\x65", 0) == 0
    assert find_start_code(b"\xff\x00\x00\x01\x65", 0) == 1
    assert find_start_code(b"\x00\x00\x01\x65\x00\x00\x01", 1) == 4
    assert find_start_code(b"\x00\x01\x00\x02", 0) is None


def test_splitter_waits_for_next_start_code():
    first = b"\x00\x00\x01\x67\x42"
    second = b"\x00\x00\x01\x68\xce"
    splitter = NalSplitter()
    splitter.feed(first + second)
    assert splitter.pop(False) == first
    assert splitter.pop(False) is None
    assert splitter.pop(True) == second
    assert splitter.pop(True) is None


def test_splitter_across_feeds():
    splitter = NalSplitter()
    splitter.feed(b"\x00\x00\x01\x65\x11")
    assert splitter.pop(False) is None
    splitter.feed(b"\x22\x00\x00\x01\x41")
    assert splitter.pop(False) == b"\x00\x00\x01\x65\x11\x22"


def test_splitter_without_start_code():
    splitter = NalSplitter()
    splitter.feed(b"\x12\x34\x56")
    assert splitter.pop(True) is None


def test_splitter_rejects_large_nal():
    splitter = NalSplitter()
    splitter.feed(b"\x00\x00\x01" + b"\xaa" * DATA_LEN)
    with pytest.raises(ValueError):
        splitter.pop(True)


def test_packet_header():
    talker = CvfTalker()
    nal = b"\x00\x00\x01\x65\x88"
    packet = talker.build_packet(nal, 1234)
    assert len(packet) == FULL_HEADER_LEN + len(nal)
    assert packet[0] == 0x03
    assert packet[1] == 0x81
    assert packet[4:12] == STREAM_ID.to_bytes(8, "big")
    cvf = Cvf(packet)
    assert cvf.get(CvfField.AVTP_TIMESTAMP) == 1234
    assert cvf.get(CvfField.FORMAT) == CvfFormat.RFC
    assert cvf.get(CvfField.FORMAT_SUBTYPE) == CvfFormatSubtype.H264
    assert cvf.get(CvfField.M) == 1
    assert cvf.get(CvfField.PTV) == 0
    assert cvf.get(CvfField.STREAM_DATA_LENGTH) == len(nal) + H264.SIZE
    assert H264(packet[Cvf.SIZE:]).get(H264Field.TIMESTAMP) == 0
    assert packet[FULL_HEADER_LEN:] == nal


def test_sequence_numbers_wrap():
    talker = CvfTalker(stream_id=7)
    numbers = [Cvf(talker.build_packet(b"\x01", 0)).get(CvfField.SEQUENCE_NUM) for _ in range(257)]
    assert numbers[:256] == list(range(256))
    assert numbers[256] == 0


def test_custom_stream_id():
    talker = CvfTalker(stream_id=42)
    assert Cvf(talker.build_packet(b"", 0)).get(CvfField.STREAM_ID) == 42


def test_build_packet_rejects_large_nal():
    with pytest.raises(ValueError):
        CvfTalker().build_packet(b"\x00" * (DATA_LEN + 1), 0)