import pytest
from mif16_asm.ast import Register
from mif16_asm.regs import normalize_reg

@pytest.mark.parametrize("name, reg, num", [
    ("$0", Register.ZERO, 0),
    ("$at", Register.AT, 1),
    ("$v0", Register.V0, 2),
    ("$v1", Register.V1, 3),
    ("$a0", Register.A0, 4),
    ("$a1", Register.A1, 5),
    ("$sp", Register.SP, 6),
    ("$ra", Register.RA, 7),
])
def test_register_names(name, reg, num):
    assert normalize_reg(name) == reg
    assert normalize_reg(name).num == num

def test_trailing_comma_and_case():
    assert normalize_reg("$v0,") == Register.V0
    assert normalize_reg("$RA") == Register.RA

def test_none_encodes_as_zero():
    assert Register.NONE.num == 0

def test_invalid():
    with pytest.raises(ValueError):
        normalize_reg("$t0")
    with pytest.raises(ValueError):
        normalize_reg("v0")
    with pytest.raises(ValueError):
        normalize_reg("None")
