class CommCidError(Exception):
    """Base class for commitment CID errors."""


# Encode-side validation
class InvalidLength(CommCidError):
    def __init__(self, length: int):
        super().__init__(f"commitments must be 32 bytes long, got {length}")
        self.length = length


class InvalidSize(CommCidError):
    pass


# Decode-side validation
class IncorrectCodec(CommCidError):
    def __init__(self, message: str = "unexpected commitment codec"):
        super().__init__(message)


class IncorrectHash(CommCidError):
    def __init__(self, message: str = "incorrect hashing function for data commitment"):
        super().__init__(message)


MALFORMED_DIGEST_PREFIX = "Error decoding data commitment hash: "


class MalformedDigest(CommCidError):
    """The multihash (or the piece payload inside it) could not be parsed.

    The underlying error is kept on ``cause`` and chained as ``__cause__`` by
    the raising site.
    """

    def __init__(self, cause: Exception):
        super().__init__(MALFORMED_DIGEST_PREFIX + str(cause))
        self.cause = cause


# Container parsing
class CidFormatError(CommCidError):
    pass
