import pytest

from vroomrender.colour import Colour
from vroomrender.serialize import MAIN_SEPARATOR, SerializationError, Serializer


def test_written_format():
    writer = Serializer()
    writer.write(5).write(True).write("abc").write(Colour(1, 2, 3))
    assert writer.getvalue() == "5|1|abc|rgb(1, 2, 3)|"


def test_every_field_ends_with_separator():
    writer = Serializer()
    writer.write(0).write(False)
    assert writer.getvalue().count(MAIN_SEPARATOR) == 2
    assert writer.getvalue().endswith(MAIN_SEPARATOR)


def test_round_trip():
    colour = Colour(10, 20, 30, 128)
    writer = Serializer()
    writer.write(-7).write(False).write(True).write("layer").write(colour)
    assert writer.is_storing()
    reader = Serializer(writer.getvalue())
    assert not reader.is_storing()
    assert reader.read_int() == -7
    assert reader.read_bool() is False
    assert reader.read_bool() is True
    assert reader.read_str() == "layer"
    assert reader.read_colour() == colour


def test_bool_reads_positive_as_true():
    reader = Serializer("0|2|-1|")
    assert [reader.read_bool() for _ in range(3)] == [False, True, False]


def test_empty_middle_field():
    reader = Serializer("1||2")
    assert reader.read_int() == 1
    assert reader.read_str() == ""
    assert reader.read_int() == 2


def test_read_past_end_raises():
    reader = Serializer("4|")
    assert reader.read_int() == 4
    with pytest.raises(SerializationError):
        reader.read_int()


def test_read_empty_stream_raises():
    with pytest.raises(SerializationError):
        Serializer("").read_str()


def test_read_in_writing_mode_raises():
    with pytest.raises(SerializationError):
        Serializer().read_int()


def test_write_in_reading_mode_raises():
    with pytest.raises(SerializationError):
        Serializer("1|").write(3)


def test_invalid_integer_raises():
    with pytest.raises(SerializationError):
        Serializer("abc|").read_int()


def test_invalid_colour_gives_none():
    reader = Serializer("not a colour|rgb(4, 5, 6)|")
    assert reader.read_colour() is None
    assert reader.read_colour() == Colour(4, 5, 6)


def test_unsupported_type():
    with pytest.raises(TypeError):
        Serializer().write(1.5)