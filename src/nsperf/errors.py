"""
Exception types raised while resolving API requests
"""


class InvalidIdentifierError(ValueError):
    """Raised when a client-supplied identifier is not a valid ObjectId string."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid identifier: {value!r} is not a 24-character hex ObjectId")
