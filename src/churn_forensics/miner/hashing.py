"""Stable file identity hash and the link encoding built on it.

Links handed to rendering layers have the form ``fileName.<hash>``. The hash
must be reproducible across processes and implementations, so Python's
salted ``hash()`` is never used. Instead this is the classic 31-multiplier
polynomial over the UTF-16 code units of the name, wrapped to a signed 32-bit
integer:

    h = s[0]*31^(n-1) + s[1]*31^(n-2) + ... + s[n-1]   (mod 2^32, signed)

This matches ``java.lang.String#hashCode``, so links produced by JVM tooling
resolve to the same files.
"""

from ..exceptions import InvalidFileLinkError

FILE_LINK_PREFIX = "fileName."

_MASK = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def file_name_hash(file_name: str) -> int:
    """Return the stable signed 32-bit hash of a file name."""
    encoded = file_name.encode("utf-16-be", errors="surrogatepass")
    h = 0
    for i in range(0, len(encoded), 2):
        unit = (encoded[i] << 8) | encoded[i + 1]
        h = (31 * h + unit) & _MASK
    if h & _SIGN_BIT:
        return h - (1 << 32)
    return h


def file_link(file_name: str) -> str:
    """Build the outbound link identifier for a file."""
    return f"{FILE_LINK_PREFIX}{file_name_hash(file_name)}"


def parse_file_link(link: str) -> int:
    """Extract the file hash from a ``fileName.<hash>`` link.

    Raises:
        InvalidFileLinkError: If the prefix is missing or the hash is not an integer
    """
    if not link.startswith(FILE_LINK_PREFIX):
        raise InvalidFileLinkError(link, f"expected prefix '{FILE_LINK_PREFIX}'")
    raw = link[len(FILE_LINK_PREFIX):]
    try:
        return int(raw)
    except ValueError:
        raise InvalidFileLinkError(link, f"hash '{raw}' is not an integer") from None
