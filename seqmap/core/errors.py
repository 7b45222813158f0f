"""Exceptions raised by seqmap."""


class InvalidArgumentError(TypeError):
    """Raised when a sequence or transform does not satisfy the call contract.

    Always raised before the transform is invoked for any element.
    """
