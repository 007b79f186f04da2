import os
import sys

import pytest

sys.path.append(os.getcwd())

from wordmem.errors import OutOfBoundsError, UnalignedAddressError
from wordmem.hardware.addressing import AddressMode, effective_mode, resolve_address


def test_word_mode_uses_address_as_index():
    res = resolve_address(7, AddressMode.WORD, 16)
    assert res.index == 7
    assert res.mode is AddressMode.WORD
    assert not res.unaligned


@pytest.mark.parametrize("addr", [16, 17, 0xFFFFFFFF, -1])
def test_word_mode_rejects_out_of_range(addr):
    with pytest.raises(OutOfBoundsError) as info:
        resolve_address(addr, AddressMode.WORD, 16)
    assert info.value.mode is AddressMode.WORD
    assert info.value.size_words == 16


def test_byte_mode_divides_aligned_address():
    res = resolve_address(60, AddressMode.BYTE, 16)
    assert res == (15, AddressMode.BYTE, False)


def test_byte_mode_bounds_checks_resolved_index():
    with pytest.raises(OutOfBoundsError) as info:
        resolve_address(64, AddressMode.BYTE, 16)
    assert info.value.index == 16


def test_unaligned_byte_address_is_rejected_by_default():
    with pytest.raises(UnalignedAddressError) as info:
        resolve_address(6, AddressMode.BYTE, 16)
    assert info.value.addr == 6
    assert isinstance(info.value, ValueError)


def test_unaligned_byte_address_floors_when_allowed():
    res = resolve_address(6, AddressMode.BYTE, 16, allow_unaligned_byte=True)
    assert res.index == 1
    assert res.unaligned


def test_allowed_unaligned_address_is_still_bounds_checked():
    with pytest.raises(OutOfBoundsError):
        resolve_address(65, AddressMode.BYTE, 16, allow_unaligned_byte=True)


def test_auto_prefers_word_index_for_small_addresses():
    # 8 is also an aligned byte address (index 2) but resolves as index 8.
    res = resolve_address(8, AddressMode.AUTO, 1024)
    assert res == (8, AddressMode.WORD, False)


def test_auto_falls_back_to_byte_interpretation():
    assert resolve_address(0, AddressMode.AUTO, 1024).index == 0
    res = resolve_address(2000, AddressMode.AUTO, 1024)
    assert res.index == 500
    assert res.mode is AddressMode.BYTE


def test_auto_fallback_applies_alignment_policy():
    with pytest.raises(UnalignedAddressError):
        resolve_address(1025, AddressMode.AUTO, 1024)
    assert resolve_address(1025, AddressMode.AUTO, 1024, True).index == 256


def test_auto_fallback_out_of_range():
    with pytest.raises(OutOfBoundsError) as info:
        resolve_address(4096, AddressMode.AUTO, 1024)
    assert info.value.mode is AddressMode.BYTE


def test_effective_mode_prefers_override():
    assert effective_mode(None, AddressMode.BYTE) is AddressMode.BYTE
    assert effective_mode(AddressMode.WORD, AddressMode.BYTE) is AddressMode.WORD


def test_mode_parse_accepts_names():
    assert AddressMode.parse("byte") is AddressMode.BYTE
    assert AddressMode.parse(" Word ") is AddressMode.WORD
    with pytest.raises(ValueError):
        AddressMode.parse("dword")
