"""Tests for wireparams.errors: exception hierarchy and error messages."""

import pytest

from wireparams.errors import (
    ConfigurationError,
    DecodeError,
    EncodeError,
    MalformedPartError,
    MissingBoundaryError,
    UnsupportedContentTypeError,
    WireParamsError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls",
        [ConfigurationError, DecodeError, EncodeError, MissingBoundaryError, UnsupportedContentTypeError],
    )
    def test_is_wireparams_error(self, cls: type) -> None:
        assert issubclass(cls, WireParamsError)

    def test_malformed_part_is_decode_error(self) -> None:
        assert issubclass(MalformedPartError, DecodeError)

    def test_value_errors(self) -> None:
        assert issubclass(MissingBoundaryError, ValueError)
        assert issubclass(UnsupportedContentTypeError, ValueError)


class TestMalformedPartError:
    def test_fields(self) -> None:
        err = MalformedPartError(index=2, reason="no name")
        assert err.index == 2
        assert err.reason == "no name"

    def test_str(self) -> None:
        assert str(MalformedPartError(index=0, reason="no name")) == "part 0: no name"

    def test_raisable(self) -> None:
        with pytest.raises(DecodeError, match="part 1"):
            raise MalformedPartError(index=1, reason="bad")
