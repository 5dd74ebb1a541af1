"""
ecparams - EC Algorithm Parameters
Resolve elliptic curve parameter descriptors to one canonical curve and
convert it between curve name, DER encoding and explicit domain parameters.
"""

from .config import ParametersConfig, configure_logging, get_config, set_config
from .core import ECParameters, classify
from .curves import CurveRecord, CurveRegistry, SUPPORTED_CURVES, get_default_registry
from .errors import (
    CurveLookupError,
    ECParametersError,
    InvalidParameterSpecError,
    ParameterDecodeError,
    ParametersNotInitializedError,
)
from .specs import (
    AlgorithmParameterSpec,
    ECFieldFp,
    ECGenParameterSpec,
    ECParameterSpec,
    ECPoint,
    EllipticCurve,
)

__version__ = "1.0.0"

configure_logging(get_config().log_level)

__all__ = [
    'ECParameters',
    'classify',
    'AlgorithmParameterSpec',
    'ECFieldFp',
    'ECPoint',
    'EllipticCurve',
    'ECParameterSpec',
    'ECGenParameterSpec',
    'CurveRecord',
    'CurveRegistry',
    'get_default_registry',
    'SUPPORTED_CURVES',
    'ParametersConfig',
    'configure_logging',
    'get_config',
    'set_config',
    'ECParametersError',
    'InvalidParameterSpecError',
    'ParameterDecodeError',
    'ParametersNotInitializedError',
    'CurveLookupError',
]
