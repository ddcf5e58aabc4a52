"""Errors raised while decoding .vox files."""


class VoxError(ValueError):
    """Base class for all .vox decoding errors."""


class InvalidMagic(VoxError):
    """The file does not start with the .vox magic tag."""

    def __init__(self, magic: bytes):
        self.magic = magic
        super().__init__(f"Invalid .vox file header: {magic!r}; expected b'VOX '")


class UnexpectedEndOfData(VoxError):
    """A fixed-size read ran past the end of the available bytes."""

    def __init__(self, offset: int, wanted: int, available: int):
        self.offset = offset
        self.wanted = wanted
        self.available = available
        super().__init__(
            f"Unexpected end of data at offset {offset}: "
            f"wanted {wanted} bytes, {available} available"
        )


class MalformedChunk(VoxError):
    """A chunk payload does not fit the layout its tag requires."""

    def __init__(self, tag: str, reason: str):
        self.tag = tag
        self.reason = reason
        super().__init__(f"Malformed {tag!r} chunk: {reason}")
