"""
ecparams - EC Algorithm Parameters
Holds one curve record and serves it back as a name, a DER encoding or an
explicit parameter spec.
"""

import logging

from ..config import get_config
from ..curves.registry import get_default_registry
from ..errors import (
    InvalidParameterSpecError,
    ParameterDecodeError,
    ParametersNotInitializedError,
)
from ..specs import ECGenParameterSpec, ECParameterSpec
from .classifier import UNSUPPORTED_MESSAGE, classify
from .lookup import CurveLookup

logger = logging.getLogger("ECParameters")

NOT_INITIALIZED = "Not initialized"


class ECParameters:
    """
    EC algorithm parameters.

    Initialize with ``init`` (a descriptor) or ``init_encoded`` (DER bytes).
    A later initialization replaces the held curve; a failed one leaves it
    unchanged. Instances are not meant to be shared between threads while
    being initialized.

    Example::

        params = ECParameters()
        params.init(ECGenParameterSpec("secp256r1"))
        der = params.get_encoded()
        spec = params.get_parameter_spec(ECParameterSpec)
    """

    def __init__(self, registry=None, config=None):
        if registry is None:
            registry = get_default_registry()
        if config is None:
            config = get_config()
        self._lookup = CurveLookup(registry)
        self._use_legacy_curve_names = config.use_legacy_curve_names
        self._ec_info = None

    def init(self, param_spec):
        """
        Initialize from a parameter descriptor.

        Args:
            param_spec: ECParameterSpec, ECGenParameterSpec or any object
                with a ``get_key_size()`` method

        Raises:
            InvalidParameterSpecError: If the descriptor is None, unsupported,
                or resolves to a curve the registry does not hold
        """
        name = classify(param_spec, self._lookup, self._use_legacy_curve_names)

        ec_info = self._lookup.record_for(name)
        if ec_info is None:
            raise InvalidParameterSpecError(f"Unknown curve: {param_spec}")

        self._ec_info = ec_info
        logger.debug(f"Initialized from {type(param_spec).__name__} as {ec_info.name}")

    def init_encoded(self, params, encoding_method=None):
        """
        Initialize from DER-encoded ``EcpkParameters``.

        Only the named curve form is supported, so ``encoding_method`` is
        accepted and ignored.

        Args:
            params: DER bytes
            encoding_method: Ignored

        Raises:
            ParameterDecodeError: If the bytes do not name a registered curve
        """
        name = self._lookup.name_for_encoded(params)
        if name is None:
            raise ParameterDecodeError("Only named EcParameters supported")

        ec_info = self._lookup.record_for(name)
        if ec_info is None:
            raise ParameterDecodeError(f"Unknown named curve: {name}")

        self._ec_info = ec_info
        logger.debug(f"Initialized from encoding as {ec_info.name}")

    def get_parameter_spec(self, spec_type):
        """
        Return the held curve as an instance of ``spec_type``.

        Args:
            spec_type: ECParameterSpec, ECGenParameterSpec or a base class of either

        Returns:
            ECParameterSpec or ECGenParameterSpec, whichever is checked first
            and is a subclass of ``spec_type``
        """
        ec_info = self._require_initialized()

        if isinstance(spec_type, type):
            if issubclass(ECParameterSpec, spec_type):
                return ec_info.spec
            if issubclass(ECGenParameterSpec, spec_type):
                return ECGenParameterSpec(ec_info.name)

        raise InvalidParameterSpecError(UNSUPPORTED_MESSAGE)

    def get_encoded(self, encoding_method=None):
        """
        Return the DER encoding of the held curve.

        A new ``bytearray`` is returned on every call, so callers may modify
        it freely. ``encoding_method`` is ignored.
        """
        ec_info = self._require_initialized()
        return bytearray(ec_info.der_encoding)

    @property
    def is_initialized(self):
        return self._ec_info is not None

    @property
    def curve_name(self):
        return self._require_initialized().name

    def to_string(self):
        if self._ec_info is None:
            return NOT_INITIALIZED
        return self._ec_info.name

    def _require_initialized(self):
        if self._ec_info is None:
            raise ParametersNotInitializedError()
        return self._ec_info

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"<ECParameters {self.to_string()}>"
