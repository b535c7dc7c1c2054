# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import pytest

from textbookrsa import errors

core_errors = [
    errors.RangeExhausted,
    errors.KeyTooSmall,
    errors.NotInvertible,
    errors.PlaintextOutOfRange,
    errors.CiphertextOutOfRange,
    errors.DecodedNotAscii,
]


@pytest.mark.parametrize("exc", core_errors)
def test_core_errors_hierarchy(exc):
    assert issubclass(exc, errors.RSAError)
    assert issubclass(exc, ValueError)


@pytest.mark.parametrize("exc", core_errors)
def test_core_errors_distinct(exc):
    others = [other for other in core_errors if other is not exc]
    assert not any(issubclass(exc, other) for other in others)


def test_catch_by_base():
    with pytest.raises(errors.RSAError, match="boom"):
        raise errors.KeyTooSmall("boom")
