import pytest
from mif16_asm.lexer import (
    strip_comment, tokenize, split_label, split_directive,
    split_operands, split_mem,
)

# --- strip_comment ---
@pytest.mark.parametrize("src, expected", [
    ("add $v0, $a0, $a1 # cmt", "add $v0, $a0, $a1"),
    ("# full comment", ""),
    ("   add $v0, $a0, $a1   ", "add $v0, $a0, $a1"),
    ("\t", ""),
    ("", ""),
])
def test_strip_comment(src, expected):
    assert strip_comment(src) == expected

# --- split_label ---
@pytest.mark.parametrize("src, label", [
    ("loop:", "loop"),
    ("loop: add", "loop"),
    ("abc:def", "abc"),
    ("add $v0, $a0, $a1", None),
    ("", None),
])
def test_split_label(src, label):
    assert split_label(tokenize(src)) == label

# --- split_directive ---
@pytest.mark.parametrize("src, kw", [
    (".org 0x10", "org"),
    (".ASCIIZ \"a\"", "asciiz"),
    ("add $v0, $a0, $a1", None),
])
def test_split_directive(src, kw):
    assert split_directive(tokenize(src)) == kw

# --- split_operands ---
@pytest.mark.parametrize("tokens, expected", [
    (["$v0,", "$a0,", "$a1"], ["$v0", "$a0", "$a1"]),
    (["$v0,$a0,$a1"], ["$v0", "$a0", "$a1"]),
    (["$v0", "$a0", "$a1"], ["$v0", "$a0", "$a1"]),
    (["$v0,", "2($a0)"], ["$v0", "2($a0)"]),
    ([], []),
])
def test_split_operands(tokens, expected):
    assert split_operands(tokens) == expected

# --- split_mem ---
@pytest.mark.parametrize("src, expected", [
    ("2($a0)", ("2", "$a0")),
    ("0xA($v0)", ("0xA", "$v0")),
    ("-4($sp)", ("-4", "$sp")),
    ("($ra)", ("0", "$ra")),
])
def test_split_mem(src, expected):
    assert split_mem(src) == expected

def test_split_mem_invalid():
    with pytest.raises(ValueError):
        split_mem("2$a0")
