"""
ecparams - Registry Lookups
Thin layer between the parameter classes and the curve registry.

Every lookup answers with a value or ``None``. Registry failures such as
unparseable DER are logged at debug level and reported as ``None``, so the
callers only ever raise their own two error kinds. Do not let
``CurveLookupError`` through here: callers match on the messages of
``InvalidParameterSpecError`` and ``ParameterDecodeError`` only.
"""

import logging

from ..errors import CurveLookupError

logger = logging.getLogger("ECParameters")


class CurveLookup:

    def __init__(self, registry):
        self.registry = registry

    def name_for_spec(self, spec):
        return self.registry.name_for_spec(spec)

    def record_for(self, name):
        if name is None:
            return None
        return self.registry.get_by_name(name)

    def legacy_identifier_for(self, name):
        return self.registry.legacy_identifier_for(name)

    def name_for_encoded(self, data):
        try:
            return self.registry.name_for_encoded(data)
        except CurveLookupError as e:
            logger.debug(f"Encoded parameters not resolved: {e}")
            return None

    def name_for_key_size(self, bits):
        return self.registry.name_for_key_size(bits)
