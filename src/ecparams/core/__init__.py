from .classifier import classify, probe_key_size
from .lookup import CurveLookup
from .parameters import ECParameters

__all__ = [
    'classify',
    'probe_key_size',
    'CurveLookup',
    'ECParameters',
]
