from mif16_asm.utils import (
    u8, u16, sign_extend, to_s8, to_s16, is_unsigned_nbit, is_signed_nbit,
    fits_nbit, to_hex,
)

def test_masks_and_formats():
    assert u8(-1) == 0xFF
    assert u16(-1) == 0xFFFF
    assert u16(0x10000) == 0
    assert to_hex(0x528) == "528"
    assert to_hex(0) == "0"
    assert to_hex(0xabc) == "ABC"

def test_sign_extend():
    assert sign_extend(0x80, 8) == -128
    assert sign_extend(0x7F, 8) == 127
    assert to_s8(0xFF) == -1
    assert to_s8(255) == -1
    assert to_s16(0xFFFF) == -1
    assert to_s16(0x100) == 256

def test_nbit_checks():
    assert is_unsigned_nbit(4095, 12)
    assert not is_unsigned_nbit(4096, 12)
    assert is_signed_nbit(31, 6)
    assert is_signed_nbit(-32, 6)
    assert not is_signed_nbit(32, 6)
    assert fits_nbit(63, 6) and fits_nbit(-32, 6)
    assert not fits_nbit(64, 6) and not fits_nbit(-33, 6)
