"""
ncode - Conversion between catalog numbers and N-codes.

Quick start:
    import ncode
    code = ncode.Ncode(530947)
    str(code)                            # 'n1000cb'
    ncode.Ncode.from_str("N1000CB")      # Ncode(530947)
    ncode.encode(530947)                 # 'n1000cb'
    ncode.decode("n1000cb")              # 530947

Invalid text raises ncode.ParseNcodeError (a ValueError subclass).
"""

from ncode.codec import MAX_VALUE, decode, encode
from ncode.errors import ParseNcodeError
from ncode.types import Ncode, NcodeSpec, as_ncode

__version__ = "0.1.0"

__all__ = [
    "MAX_VALUE",
    "Ncode",
    "NcodeSpec",
    "ParseNcodeError",
    "as_ncode",
    "decode",
    "encode",
]
