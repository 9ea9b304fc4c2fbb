# ABOUTME: EAN-13/ISBN-13 validation and legacy ISBN-10 derivation.
# ABOUTME: Pure check-digit math used by the scan pipeline and the metadata resolver.

_BOOKLAND_PREFIXES = ("978", "979")
_ISBN10_PREFIX = "978"


def is_isbn13(code: object) -> bool:
    """Check whether a decoded barcode is a book-land EAN-13.

    True iff the code is exactly 13 ASCII digits starting with 978 or 979.
    The EAN check digit itself is not verified; decoders already reject
    codes whose checksum fails.
    """
    if not isinstance(code, str) or len(code) != 13:
        return False
    if not (code.isascii() and code.isdigit()):
        return False
    return code.startswith(_BOOKLAND_PREFIXES)


def to_isbn10(ean13: str) -> str | None:
    """Derive the ISBN-10 equivalent of a 978-prefixed ISBN-13.

    979 codes have no ISBN-10 form. Returns None for those and for
    anything that is not an ISBN-13.
    """
    if not is_isbn13(ean13) or not ean13.startswith(_ISBN10_PREFIX):
        return None

    core9 = ean13[3:12]
    total = sum((10 - i) * int(digit) for i, digit in enumerate(core9))
    check = (11 - total % 11) % 11
    check_char = "X" if check == 10 else str(check)
    return core9 + check_char
