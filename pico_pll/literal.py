# parse the integer literal a frequency is given as, e.g. "480_000" or
# "125000u32". these are written as Rust integer literals in the build input,
# so we accept the same spellings.

import re

__all__ = ["parse_int_literal", "khz_to_mhz"]

_SUFFIXES = ("u8", "u16", "u32", "u64", "u128", "usize",
    "i8", "i16", "i32", "i64", "i128", "isize")

_RADIXES = {"0x": 16, "0o": 8, "0b": 2}

_DIGITS = {
    16: re.compile(r"[0-9a-fA-F_]*[0-9a-fA-F][0-9a-fA-F_]*"),
    10: re.compile(r"[0-9][0-9_]*"),
    8: re.compile(r"[0-7_]*[0-7][0-7_]*"),
    2: re.compile(r"[01_]*[01][01_]*"),
}

def parse_int_literal(text):
    if not isinstance(text, str):
        raise TypeError("literal must be a str, not {!r}".format(text))
    body = text.strip()

    radix = 10
    prefix = body[:2]
    if prefix in _RADIXES:
        radix = _RADIXES[prefix]
        body = body[2:]

    # 'u' and 'i' aren't hex digits, so stripping is safe for any radix
    for suffix in _SUFFIXES:
        if body.endswith(suffix):
            body = body[:-len(suffix)]
            break

    if not _DIGITS[radix].fullmatch(body):
        raise ValueError("invalid integer literal {!r}".format(text))

    return int(body.replace("_", ""), radix)

def khz_to_mhz(freq_khz):
    return freq_khz / 1000.0
