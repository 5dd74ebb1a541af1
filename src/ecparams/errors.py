"""
ecparams - Error Types
Exceptions raised while resolving and converting EC algorithm parameters.
"""


class ECParametersError(Exception):
    """Base class for all errors raised by this package."""


class InvalidParameterSpecError(ECParametersError, ValueError):
    """A parameter descriptor could not be resolved to a registered curve."""


class ParameterDecodeError(ECParametersError, ValueError):
    """Encoded parameters do not name a registered curve."""


class ParametersNotInitializedError(ECParametersError, RuntimeError):
    """A read accessor was used before any successful initialization."""

    def __init__(self, message="Not initialized"):
        super().__init__(message)


class CurveLookupError(ECParametersError, LookupError):
    # raised inside the registry only, ECParameters narrows it away
    pass
