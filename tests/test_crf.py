import pytest

from avtpkit.common import Subtype
from avtpkit.crf import Crf, CrfField
from avtpkit.fields import FieldError

STREAM_ID = 0xAABBCCDDEEFF0001


def test_fresh_header_has_crf_subtype_and_sv():
    crf = Crf()
    assert crf.get(CrfField.SUBTYPE) == Subtype.CRF
    assert crf.get(CrfField.SV) == 1
    assert crf.get(CrfField.VERSION) == 0
    assert bytes(crf)[:2] == b"\x04\x80"


def test_fresh_header_rest_is_zero():
    crf = Crf()
    assert len(crf) == Crf.SIZE
    assert bytes(crf)[2:] == bytes(Crf.SIZE - 2)


@pytest.mark.parametrize("field", list(CrfField))
def test_each_field_round_trips_its_maximum_in_isolation(field):
    crf = Crf(bytes(Crf.SIZE))
    maximum = (1 << Crf.DESCRIPTORS[field].bits) - 1
    crf.set(field, maximum)
    assert crf.get(field) == maximum
    for other in CrfField:
        if other is not field:
            assert crf.get(other) == 0


def test_stream_id_spans_two_quadlets():
    crf = Crf()
    crf.set(CrfField.STREAM_ID, STREAM_ID)
    assert crf.get(CrfField.STREAM_ID) == STREAM_ID
    assert bytes(crf)[4:12] == STREAM_ID.to_bytes(8, "big")


def test_pull_and_base_frequency_share_a_quadlet():
    crf = Crf()
    crf.set(CrfField.PULL, 5)
    crf.set(CrfField.BASE_FREQUENCY, 48000)
    assert crf.get(CrfField.PULL) == 5
    assert crf.get(CrfField.BASE_FREQUENCY) == 48000


def test_value_wider_than_field_is_truncated():
    crf = Crf()
    crf.set(CrfField.SEQUENCE_NUM, 0x1FF)
    assert crf.get(CrfField.SEQUENCE_NUM) == 0xFF
    assert crf.get(CrfField.SV) == 1


def test_parsing_existing_bytes():
    source = Crf()
    source.set(CrfField.TIMESTAMP_INTERVAL, 160)
    parsed = Crf(bytes(source))
    assert parsed.get(CrfField.TIMESTAMP_INTERVAL) == 160
    assert parsed.get(CrfField.SUBTYPE) == Subtype.CRF


def test_short_buffer_is_rejected():
    with pytest.raises(FieldError):
        Crf(bytes(Crf.SIZE - 1))


def test_unknown_field_is_rejected():
    with pytest.raises(FieldError):
        Crf().get(len(CrfField))