class MultiformatError(ValueError):
    """Base class for every input-driven failure raised by libmultiformats."""


class VarintError(MultiformatError):
    pass


class VarintOverflowError(VarintError):
    pass


class VarintNotMinimalError(VarintError):
    pass


class EndOfStreamError(MultiformatError):
    """The source was exhausted before the first byte of a record."""


class UnexpectedEndOfStreamError(MultiformatError):
    """The source was exhausted in the middle of a record."""


class UnknownCodecError(MultiformatError):
    pass


class UnknownBaseError(UnknownCodecError):
    pass


class DigestLengthError(MultiformatError):
    pass


class HasherRegistrationError(MultiformatError):
    pass


class MultihashFramingError(MultiformatError):
    pass


class AlphabetCorruptionError(MultiformatError):
    def __init__(self, offset: int, encoding: str) -> None:
        super().__init__(f'Invalid base string: illegal {encoding} data at input byte {offset}')
        self.offset = offset
        self.encoding = encoding


class CidFormatError(MultiformatError):
    pass


class CidVersionError(MultiformatError):
    pass


class CidConversionError(MultiformatError):
    pass


class CidBuilderError(MultiformatError):
    pass
