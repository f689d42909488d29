class VexError(ValueError):
    """Base class for every error raised by the codec."""


class UnrecognizedFormat(VexError):
    def __init__(self, tag=None):
        self.tag = tag
        if tag is None:
            msg = "Malformed stream: missing header byte"
        else:
            msg = f"Unrecognized format header: 0x{tag:02X}"
        super().__init__(msg)


class TruncatedStream(VexError):
    def __init__(self, offset: int, needed: int, available: int):
        self.offset = offset
        self.needed = needed
        self.available = available
        super().__init__(
            f"Malformed stream: token at offset {offset} needs {needed} bytes, "
            f"only {available} left"
        )


class ValueOutOfRange(VexError):
    def __init__(self, index: int, value: int):
        self.index = index
        self.value = value
        super().__init__(f"value {value} at index {index} out of range [0, 65535]")
