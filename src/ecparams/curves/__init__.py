from .curve_data import CURVE_ALIASES, CURVE_PARAMS, PREFERRED_BY_KEY_SIZE
from .registry import (
    CurveRecord,
    CurveRegistry,
    build_record,
    decode_curve_oid,
    encode_named_curve,
    get_default_registry,
)

SUPPORTED_CURVES = list(CURVE_PARAMS.keys())

__all__ = [
    'CurveRecord',
    'CurveRegistry',
    'build_record',
    'decode_curve_oid',
    'encode_named_curve',
    'get_default_registry',
    'CURVE_PARAMS',
    'CURVE_ALIASES',
    'PREFERRED_BY_KEY_SIZE',
    'SUPPORTED_CURVES',
]
