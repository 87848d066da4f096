from __future__ import annotations
from typing import Iterable, List
from .encoding import Encoded

MIF_DEPTH = 16384
MIF_WIDTH = 16

def mif_header(*, depth: int = MIF_DEPTH, width: int = MIF_WIDTH) -> str:
    return (
        f"DEPTH = {depth};\n"
        f"WIDTH = {width};\n"
        "ADDRESS_RADIX = HEX;\n"
        "DATA_RADIX = BIN;\n"
        "CONTENT\n"
        "BEGIN\n"
    )

MIF_FOOTER = "END;\n"

def to_mif_lines(words: Iterable[Encoded]) -> List[str]:
    return [w.listing() for w in words]

def to_mif(words: Iterable[Encoded], *, depth: int = MIF_DEPTH, width: int = MIF_WIDTH) -> str:
    """Documento MIF completo: preámbulo, una línea por entrada y 'END;'."""
    body = "\n".join(to_mif_lines(words))
    return mif_header(depth=depth, width=width) + body + "\n" + MIF_FOOTER

def write_mif(words: Iterable[Encoded], path: str) -> None:
    text = to_mif(words)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
