from visol.ids import INVALID_ID, get_type_uuid, get_uuid


def test_uuid_is_never_invalid():
    values = [get_uuid() for _ in range(200)]
    assert min(values) > INVALID_ID


def test_uuid_fits_in_64_bits():
    for _ in range(200):
        uuid = get_uuid()
        assert 0 < uuid < 2**64


def test_uuids_are_distinct():
    values = {get_uuid() for _ in range(100)}
    assert len(values) == 100


def test_type_uuid_is_stable():
    class Marker:
        pass

    first = get_type_uuid(Marker)
    assert get_type_uuid(Marker) == first
    assert first > INVALID_ID


def test_type_uuid_differs_between_types():
    class First:
        pass

    class Second:
        pass

    assert get_type_uuid(First) != get_type_uuid(Second)


def test_subclass_has_own_type_uuid():
    class Base:
        pass

    class Derived(Base):
        pass

    assert get_type_uuid(Base) != get_type_uuid(Derived)