from texstream.errors import OutOfRangeError, StreamerError


def test_streamer_error_keeps_message():
    error = StreamerError("broken shader")
    assert str(error) == "broken shader"


def test_out_of_range_message():
    error = OutOfRangeError("x", 5, 0, 3)
    assert str(error) == "Value x=5 is out of range [0, 3]"


def test_out_of_range_attributes():
    error = OutOfRangeError("y", 10, 2, 7)
    assert (error.name, error.value, error.min_value, error.max_value) == ("y", 10, 2, 7)


def test_out_of_range_is_streamer_and_index_error():
    error = OutOfRangeError("x", 1, 0, 0)
    assert isinstance(error, StreamerError)
    assert isinstance(error, IndexError)
    assert str(error) == "Value x=1 is out of range [0, 0]"