import pytest
from mif16_asm.parser import parse, parse_line
from mif16_asm.linker import first_pass, second_pass
from mif16_asm.encoding import encode, encode_word, encode_line, encode_data
from mif16_asm.ast import (
    Register, RType, JType, IType, RInstr, JumpAddr, IInstr,
    Label, BlankLine, JumpLabel, LoadImm, Org, Space, Word, Byte, Asciiz,
)

def _pipe(src: str):
    nodes, diags = parse(src, filename="<mem>")
    assert not diags
    link = first_pass(nodes)
    res = second_pass(link.placed, link.symtab)
    assert not res.diagnostics
    return encode(res.instrs)

@pytest.mark.parametrize("src, word", [
    ("add $v0, $a0, $a1", 0x528),
    ("sra $ra, $sp, $at", (7 << 9) | (6 << 6) | (1 << 3) | 7),
    ("jmp 1", 0x1001),
    ("jal 0xABC", 0x2ABC),
    ("lw $v0, 2($a0)", 0x3502),
    ("sw $v1, 0($sp)", (4 << 12) | (3 << 9) | (6 << 6)),
    ("addi $v0, $a0, -2", 0x753E),
    ("jmpi 2($v0)", 0x8402),
    ("jali 0xA($ra)", (9 << 12) | (7 << 9) | 10),
    ("lli $v0, 5", (10 << 12) | (2 << 9) | 5),
    (".word 0xFFFF", 0xFFFF),
    (".byte 0x41", 0x41),
])
def test_encode_word(src, word):
    assert encode_word(parse_line(src)) == word

@pytest.mark.parametrize("op", list(RType))
@pytest.mark.parametrize("regs", [
    (Register.V0, Register.A0, Register.A1),
    (Register.RA, Register.ZERO, Register.SP),
])
def test_rtype_fields(op, regs):
    w = encode_word(RInstr(op, *regs))
    top, r1, r2, r3, opc = w >> 12, (w >> 9) & 0x7, (w >> 6) & 0x7, (w >> 3) & 0x7, w & 0x7
    assert top == 0
    assert (r1, r2, r3) == tuple(r.num for r in regs)
    assert opc == list(RType).index(op)

def test_immediate_keeps_low_six_bits():
    # 0x7F -> byte 0x7F -> 6 bits 0x3F; bit 6 se pierde
    w = encode_word(IInstr(IType.ADDI, Register.V0, Register.A0, 0x7F))
    assert w & 0x3F == 0x3F
    assert (w >> 6) & 0x7 == Register.A0.num

def test_jump_address_masked_to_twelve_bits():
    assert encode_word(JumpAddr(JType.JAL, 0x1234)) == 0x2234

def test_asciiz_bytes_and_listing():
    node = Asciiz("AB")
    assert encode_data(node) == (0x41, 0x42)
    assert encode_line(7, node) == '7 : 41 42; -- .asciiz "AB"'
    with pytest.raises(TypeError):
        encode_word(node)

def test_encode_line_format():
    assert encode_line(0, parse_line("add $v0, $a0, $a1")) == "0 : 528; -- add $v0, $a0, $a1"
    assert encode_line(0x1F, parse_line("lw $v0, 2($a0)")) == "1F : 3502; -- lw $v0, 2($a0)"
    assert encode_line(0, parse_line("jmpi 2($v0)")) == "0 : 8402; -- jmpi 2($v0)"

@pytest.mark.parametrize("node", [
    Label("x"), BlankLine(), JumpLabel(JType.JMP, "x"),
    LoadImm(Register.V0, 1), Org(0), Space(1),
])
def test_non_encodable_forms_raise(node):
    with pytest.raises(TypeError):
        encode_data(node)

def test_li_pipeline_positive_and_negative():
    enc = _pipe("nop_slot:\nli $v0, 0x100\nli $v1, -256\n")
    assert [(w.addr, w.word) for w in enc.words] == [
        (1, (10 << 12) | (2 << 9) | 0),      # lli $v0, 0
        (2, (11 << 12) | (2 << 9) | 1),      # lui $v0, 1
        (2, (10 << 12) | (3 << 9) | 0),      # lli $v1, 0
        (3, (11 << 12) | (3 << 9) | 0x3F),   # lui $v1, -1
    ]
    assert [w.text for w in enc.words] == [
        "lli $v0, 0", "lui $v0, 1", "lli $v1, 0", "lui $v1, -1",
    ]

def test_warnings_for_lost_bits():
    enc = encode([
        (0, IInstr(IType.ADDI, Register.V0, Register.A0, 100)),
        (1, IInstr(IType.ADDI, Register.V0, Register.A0, -32)),
        (2, JumpAddr(JType.JMP, 0x1000)),
    ])
    assert len(enc.words) == 3
    assert [d.severity for d in enc.diagnostics] == ["advertencia", "advertencia"]
    assert enc.words[2].word == 0x1000
