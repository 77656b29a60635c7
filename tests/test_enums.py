import enum

from utf8codec.enums import SEQUENCE_LENGTH, OctetType


def test_octet_type_is_closed_enum():
    assert issubclass(OctetType, enum.Enum)
    assert not issubclass(OctetType, int)


def test_octet_type_members_exist():
    expected = {"ONE", "TWO", "THREE", "FOUR", "NEXT", "INVALID"}
    assert set(OctetType.__members__.keys()) == expected


def test_sequence_length_covers_lead_types_only():
    assert SEQUENCE_LENGTH == {
        OctetType.ONE: 1,
        OctetType.TWO: 2,
        OctetType.THREE: 3,
        OctetType.FOUR: 4,
    }
    assert OctetType.NEXT not in SEQUENCE_LENGTH
    assert OctetType.INVALID not in SEQUENCE_LENGTH
