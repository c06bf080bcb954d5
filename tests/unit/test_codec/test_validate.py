# SPDX-FileCopyrightText: 2022 b64kit developers
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for validation helpers."""


# external libs
import pytest
from hypothesis import given, strategies as st

# internal libs
from b64kit.codec import ALPHABET, encode, is_base64_byte, is_base64_sequence


@pytest.mark.unit
class TestIsBase64Byte:
    """Unit tests for `is_base64_byte`."""

    def test_alphabet(self) -> None:
        assert all(is_base64_byte(code) for code in ALPHABET)

    def test_pad(self) -> None:
        assert is_base64_byte(ord('='))
        assert is_base64_byte('=')

    @pytest.mark.parametrize('value', [' ', '\n', '-', '_', '!', '.', 0, 127, 255])
    def test_invalid(self, value) -> None:
        assert not is_base64_byte(value)

    def test_characters_and_bytes(self) -> None:
        """Single characters and single bytes are accepted as well as integers."""
        assert is_base64_byte('A')
        assert is_base64_byte(b'/')
        assert not is_base64_byte(b'~')

    @pytest.mark.parametrize('value', [memoryview(b'A'), bytearray(b'A'), memoryview(b'=')])
    def test_single_item_buffers(self, value) -> None:
        """Single-byte buffers are accepted like single bytes."""
        assert is_base64_byte(value)

    def test_single_item_buffer_invalid(self) -> None:
        assert not is_base64_byte(memoryview(b'~'))

    @pytest.mark.parametrize('value', [-1, 256, 0x141])
    def test_out_of_range(self, value: int) -> None:
        """Values outside a single byte are never valid."""
        assert not is_base64_byte(value)

    def test_multiple_characters(self) -> None:
        with pytest.raises(ValueError) as exc_info:
            is_base64_byte('AB')
        response, = exc_info.value.args
        assert response == 'Expected single character, found length 2'


@pytest.mark.unit
class TestIsBase64Sequence:
    """Unit tests for `is_base64_sequence`."""

    @pytest.mark.parametrize('data', [b'', '', bytearray(), memoryview(b'')])
    def test_empty(self, data) -> None:
        """Empty input is never valid."""
        assert is_base64_sequence(data) is False

    @pytest.mark.parametrize('data', [b'TWFu', 'TWFu', bytearray(b'TQ=='), memoryview(b'TWE=')])
    def test_valid(self, data) -> None:
        assert is_base64_sequence(data) is True

    @pytest.mark.parametrize('data', [b'TW Fu', 'TWFu\n', b'TW-u', 'TWFŁ'])
    def test_invalid(self, data) -> None:
        assert is_base64_sequence(data) is False

    def test_only_characters_checked(self) -> None:
        """Validation is per-character; padding position and length are not checked."""
        assert is_base64_sequence(b'==AB=')

    @given(data=st.binary(min_size=1, max_size=256))
    def test_encoded(self, data: bytes) -> None:
        """Encoder output is always a valid sequence."""
        assert is_base64_sequence(encode(data))
