from __future__ import annotations
import argparse, logging, sys
from typing import List, Optional, TextIO, Tuple

from .ast import BlankLine, Label, Org, Space, JumpLabel
from .parser import parse, parse_line
from .pseudo import expand
from .linker import first_pass, second_pass, LinkResult, ResolveResult
from .encoding import encode, encode_line, EncodeResult
from .writers import write_mif
from .diagnostics import AsmError, Diagnostic, error, has_errors

log = logging.getLogger(__name__)

USAGE = "%(prog)s [ input_file | --repl ] [ output_file ]?"

def assemble_text(
    text: str, *, filename: str | None = None, origin: int = 0,
) -> Tuple[list, List[Diagnostic], Optional[LinkResult], Optional[EncodeResult]]:
    """Parsea, hace PASADA 1, PASADA 2 (resolución + pseudos) y codifica.
    Devuelve (instrucciones_resueltas, diagnostics_totales, link_result, enc_result).
    Se detiene en la primera etapa con errores; las etapas no alcanzadas quedan en None."""
    nodes, diags = parse(text, filename=filename)
    if has_errors(diags):
        return [], diags, None, None

    link = first_pass(nodes, origin=origin, filename=filename)
    diags += link.diagnostics

    res: ResolveResult = second_pass(link.placed, link.symtab, filename=filename)
    diags += res.diagnostics
    if has_errors(diags):
        return [], diags, link, None

    enc = encode(res.instrs, filename=filename)
    diags += enc.diagnostics
    log.debug("ensamblado: %d entradas, %d diagnósticos", len(enc.words), len(diags))
    return res.instrs, diags, link, enc

def repl(stdin: TextIO, stdout: TextIO) -> int:
    """Codifica cada línea de 'stdin' en la dirección 0 y la imprime al momento."""
    for lineno, raw in enumerate(stdin, start=1):
        warnings: List[Diagnostic] = []
        try:
            node = parse_line(raw.rstrip("\n"), lineno=lineno, filename="<stdin>", diags=warnings)
        except AsmError as ex:
            print(ex.diagnostic, file=sys.stderr)
            return 1
        for d in warnings:
            print(d, file=sys.stderr)
        if isinstance(node, (BlankLine, Label, Org, Space)):
            continue
        if isinstance(node, JumpLabel):
            print(error(f"Etiqueta no resoluble en modo REPL: {node.label}",
                        line=lineno, file="<stdin>", hint="use una dirección numérica"),
                  file=sys.stderr)
            return 1
        for addr, ins in expand(0, node):
            print(encode_line(addr, ins), file=stdout, flush=True)
    return 0

def assemble_file(source: str, output: str) -> int:
    try:
        with open(source, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as ex:
        print(f"ERROR: no pude leer {source}: {ex}", file=sys.stderr)
        return 2

    instrs, diags, link, enc = assemble_text(text, filename=source)

    had_error = False
    for d in diags:
        # imprimimos todo; si hay error, devolvemos código 1
        print(d, file=sys.stderr)
        if d.is_error:
            had_error = True

    if had_error or enc is None:
        return 1

    try:
        write_mif(enc.words, output)
    except OSError as ex:
        print(f"ERROR al escribir salida: {ex}", file=sys.stderr)
        return 3

    print(f"OK: {len(enc.words)} palabras → {output}")
    return 0

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="mif16-asm", usage=USAGE, add_help=False, allow_abbrev=False,
                                 description="Ensamblador de dos pasadas a MIF (16 bits)")
    ap.add_argument("-v", "--verbose", action="store_true", help="muestra el detalle de las pasadas")
    # el resto se despacha por cantidad: [entrada | --repl] [salida]?
    args, rest = ap.parse_known_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if rest == ["--repl"]:
        return repl(sys.stdin, sys.stdout)
    if len(rest) == 1 and not rest[0].startswith("-"):
        return assemble_file(rest[0], rest[0] + ".mif")
    if len(rest) == 2:
        return assemble_file(rest[0], rest[1])

    ap.print_usage(sys.stdout)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
