from bytesupply.errors import (
    ByteSupplyError,
    ConstructionError,
    EmptyInputError,
    InsufficientBytesError,
    ShiftFailureError,
)


def test_error_hierarchy():
    assert issubclass(ConstructionError, ByteSupplyError)
    assert issubclass(EmptyInputError, ConstructionError)
    assert issubclass(ShiftFailureError, ConstructionError)
    assert issubclass(InsufficientBytesError, ByteSupplyError)
    assert not issubclass(InsufficientBytesError, ConstructionError)


def test_insufficient_bytes_fields():
    err = InsufficientBytesError(4, 1)
    assert err.requested == 4
    assert err.available == 1
    assert str(err) == "insufficient bytes: requested 4, 1 available"
