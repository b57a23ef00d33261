import pytest

from avtpkit.common import CommonHeader, CommonHeaderField, Subtype
from avtpkit.cvf import (
    H264,
    Cvf,
    CvfField,
    CvfFormat,
    CvfFormatSubtype,
    H264Field,
    Jpeg2000,
    Jpeg2000Field,
    Mjpeg,
    MjpegField,
)
from avtpkit.fields import FieldError

STREAM_ID = 0xAABBCCDDEEFF0001


def test_fresh_cvf_has_subtype_and_stream_valid():
    cvf = Cvf()
    assert cvf.get(CvfField.SUBTYPE) == Subtype.CVF
    assert cvf.get(CvfField.SV) == 1
    assert bytes(cvf)[0] == Subtype.CVF
    assert len(cvf) == Cvf.SIZE


def test_fresh_cvf_reads_as_common_header():
    header = CommonHeader(bytes(Cvf()))
    assert header.get(CommonHeaderField.SUBTYPE) == Subtype.CVF
    assert header.get(CommonHeaderField.H) == 1
    assert header.get(CommonHeaderField.VERSION) == 0


def test_stream_id_is_big_endian_on_the_wire():
    cvf = Cvf()
    cvf.set(CvfField.STREAM_ID, STREAM_ID)
    assert cvf.get(CvfField.STREAM_ID) == STREAM_ID
    assert bytes(cvf)[4:12] == STREAM_ID.to_bytes(8, "big")


def test_format_and_subtype_bytes():
    cvf = Cvf()
    cvf.set(CvfField.FORMAT, CvfFormat.RFC)
    cvf.set(CvfField.FORMAT_SUBTYPE, CvfFormatSubtype.H264)
    data = bytes(cvf)
    assert data[16] == CvfFormat.RFC
    assert data[17] == CvfFormatSubtype.H264
    assert cvf.get(CvfField.FORMAT_SUBTYPE) == CvfFormatSubtype.H264


@pytest.mark.parametrize(
    "field,value",
    [
        (CvfField.TV, 1),
        (CvfField.SEQUENCE_NUM, 255),
        (CvfField.TU, 1),
        (CvfField.AVTP_TIMESTAMP, 0xFFFFFFFF),
        (CvfField.STREAM_DATA_LENGTH, 1404),
        (CvfField.PTV, 1),
        (CvfField.M, 1),
        (CvfField.EVT, 15),
    ],
)
def test_cvf_field_round_trip_keeps_subtype(field, value):
    cvf = Cvf()
    cvf.set(field, value)
    assert cvf.get(field) == value
    assert cvf.get(CvfField.SUBTYPE) == Subtype.CVF
    assert Cvf(bytes(cvf)).get(field) == value


def test_sequence_number_wraps_to_field_width():
    cvf = Cvf()
    cvf.set(CvfField.SEQUENCE_NUM, 256 + 7)
    assert cvf.get(CvfField.SEQUENCE_NUM) == 7
    assert cvf.get(CvfField.RESERVED_2) == 0


def test_cvf_unknown_field_raises():
    with pytest.raises(FieldError):
        Cvf().set(100, 1)


def test_cvf_short_buffer_raises():
    with pytest.raises(FieldError):
        Cvf(bytes(Cvf.SIZE - 4))


def test_h264_header_inside_cvf_payload():
    nal = b"\x00\x00\x01\x65abc"
    buffer = bytearray(Cvf.SIZE + H264.SIZE + len(nal))
    cvf = Cvf(buffer)
    h264 = H264(cvf.payload)
    h264.set(H264Field.TIMESTAMP, 0x12345678)
    h264.payload[: len(nal)] = nal
    cvf.set(CvfField.STREAM_DATA_LENGTH, len(nal) + H264.SIZE)
    data = bytes(cvf)
    assert data[Cvf.SIZE:Cvf.SIZE + H264.SIZE] == (0x12345678).to_bytes(4, "big")
    assert data[Cvf.SIZE + H264.SIZE:] == nal
    assert cvf.get(CvfField.STREAM_DATA_LENGTH) - H264.SIZE == len(nal)


def test_fresh_h264_is_zeroed():
    h264 = H264()
    assert bytes(h264) == bytes(H264.SIZE)
    assert h264.get(H264Field.TIMESTAMP) == 0


@pytest.mark.parametrize(
    "field,value",
    [
        (Jpeg2000Field.TP, 3),
        (Jpeg2000Field.MHF, 2),
        (Jpeg2000Field.MH_ID, 7),
        (Jpeg2000Field.T, 1),
        (Jpeg2000Field.PRIORITY, 200),
        (Jpeg2000Field.TILE_NUMBER, 0xBEEF),
        (Jpeg2000Field.RESERVED, 0x5A),
        (Jpeg2000Field.FRAGMENT_OFFSET, 0xABCDEF),
    ],
)
def test_jpeg2000_field_round_trip_isolated(field, value):
    header = Jpeg2000()
    header.set(field, value)
    for other in Jpeg2000Field:
        assert header.get(other) == (value if other is field else 0)


@pytest.mark.parametrize(
    "field,value",
    [
        (MjpegField.TYPE_SPECIFIC, 0x11),
        (MjpegField.FRAGMENT_OFFSET, 0x123456),
        (MjpegField.TYPE, 1),
        (MjpegField.Q, 80),
        (MjpegField.WIDTH, 24),
        (MjpegField.HEIGHT, 18),
    ],
)
def test_mjpeg_field_round_trip_isolated(field, value):
    header = Mjpeg()
    header.set(field, value)
    for other in MjpegField:
        assert header.get(other) == (value if other is field else 0)


def test_mjpeg_fragment_offset_bytes():
    header = Mjpeg()
    header.set(MjpegField.FRAGMENT_OFFSET, 0x123456)
    assert bytes(header)[1:4] == (0x123456).to_bytes(3, "big")


def test_jpeg2000_has_no_ninth_field():
    with pytest.raises(FieldError):
        Jpeg2000().get(8)