from .base32 import Base32Codec
from .base64 import Base64Codec
from .basex import BaseXCodec
from .rfc4648 import Rfc4648Codec

__all__ = [
    'Base32Codec',
    'Base64Codec',
    'BaseXCodec',
    'Rfc4648Codec',
]
