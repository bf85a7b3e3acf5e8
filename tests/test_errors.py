from hipack.errors import ErrorCode, HiPackEncodingError, HiPackError, HiPackIOError, HiPackSyntaxError


def test_syntax_error_message_and_location() -> None:
    err = HiPackSyntaxError(ErrorCode.INVALID_KEY, 10, 2, 5)
    assert str(err) == "Invalid key at line 2 column 5"
    assert (err.code, err.offset, err.line, err.column) == (ErrorCode.INVALID_KEY, 10, 2, 5)
    assert isinstance(err, HiPackError)
    assert isinstance(err, ValueError)


def test_io_error_keeps_the_sink_failure() -> None:
    cause = OSError(32, "Broken pipe")
    err = HiPackIOError(cause)
    assert err.error is cause
    assert isinstance(err, HiPackError)
    assert "Broken pipe" in str(err)


def test_encoding_error_keeps_the_unicode_failure() -> None:
    try:
        "\ud800".encode("utf-8")
    except UnicodeEncodeError as exc:
        err = HiPackEncodingError(exc, "\ud800")
    assert isinstance(err.error, UnicodeEncodeError)
    assert err.text == "\ud800"
    assert isinstance(err, HiPackError)


def test_error_codes_describe_themselves() -> None:
    assert str(ErrorCode.UNREPRESENTABLE_VALUE) == "Value cannot be represented"
