class GenerationError(Exception):
    """Base class for matrix generation errors."""


# Construction
class InvalidParameter(GenerationError):
    pass


# Per-call input
class InvalidSeedLength(GenerationError):
    pass


# Backend (PyCryptodomex) rejected the operation
class PrimitiveFailure(GenerationError):
    pass
