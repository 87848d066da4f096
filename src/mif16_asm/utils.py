'''
 bit-twiddling (u8/u16, sign_extend, rangos, formato hex)
'''

from __future__ import annotations

# Máscaras para 8 y 16 bits sin signo
U8_MASK = 0xFF
U16_MASK = 0xFFFF

def u8(x: int) -> int:
    """Fuerza el valor al rango de 8 bits sin signo."""
    return x & U8_MASK

def u16(x: int) -> int:
    """Fuerza el valor al rango de 16 bits sin signo."""
    return x & U16_MASK

def sign_extend(x: int, bits: int) -> int:
    """Extiende el signo de x, asumiendo que cabe en 'bits' bits (complemento a dos)."""
    if bits <= 0:
        raise ValueError("bits debe ser positivo")
    mask = (1 << bits) - 1
    x &= mask
    sign_bit = 1 << (bits - 1)
    return (x ^ sign_bit) - sign_bit

def to_s8(x: int) -> int:
    """Reinterpreta los 8 bits bajos de x como entero con signo."""
    return sign_extend(x, 8)

def to_s16(x: int) -> int:
    """Reinterpreta los 16 bits bajos de x como entero con signo."""
    return sign_extend(x, 16)

def is_unsigned_nbit(x: int, n: int) -> bool:
    """Devuelve True si x está en [0, 2^n) (sin signo de n bits)."""
    if n <= 0:
        raise ValueError("n debe ser positivo")
    return 0 <= x < (1 << n)

def is_signed_nbit(x: int, n: int) -> bool:
    """Devuelve True si x está en [-(2^(n-1)), 2^(n-1)-1] (con signo de n bits)."""
    if n <= 0:
        raise ValueError("n debe ser positivo")
    lo = -(1 << (n - 1))
    hi = (1 << (n - 1)) - 1
    return lo <= x <= hi

def fits_nbit(x: int, n: int) -> bool:
    """True si x cabe en n bits, leído con o sin signo."""
    return is_signed_nbit(x, n) or is_unsigned_nbit(x, n)

def to_hex(x: int) -> str:
    """Hexadecimal en mayúsculas, sin prefijo ni relleno (formato del listado MIF)."""
    return format(x, "X")
