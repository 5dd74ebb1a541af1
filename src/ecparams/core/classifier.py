"""
ecparams - Descriptor Classification
Maps a parameter descriptor to a curve name. Three shapes are accepted, and
checked in this order, first match wins:

1. ``ECParameterSpec``: explicit domain parameters, reverse-looked-up in the
   registry. With legacy naming on, the name is swapped for the curve's
   legacy identifier (its OID).
2. ``ECGenParameterSpec``: the requested name is used as is.
3. Anything with a callable ``get_key_size()`` returning an int: the
   registry's preferred curve for that size. Descriptors of other libraries
   reach the provider this way without sharing our types.

A descriptor that yields no name is rejected as unsupported. Whether the
name is actually registered is checked by the caller.
"""

import logging

from ..errors import InvalidParameterSpecError
from ..specs import ECGenParameterSpec, ECParameterSpec

logger = logging.getLogger("ECParameters")

UNSUPPORTED_MESSAGE = "Only ECParameterSpec and ECGenParameterSpec supported"
NULL_MESSAGE = "paramSpec must not be null"


def probe_key_size(descriptor):
    """
    Call the descriptor's ``get_key_size()`` if it has one.

    Args:
        descriptor: Any object

    Returns:
        int: The reported bit length, or None when there is no accessor,
        it raised, or it returned something other than an int
    """
    try:
        accessor = getattr(descriptor, "get_key_size", None)
        if not callable(accessor):
            return None
        key_size = accessor()
    except Exception as e:
        logger.debug(f"Key size probe failed on {type(descriptor).__name__}: {e!r}")
        return None

    if isinstance(key_size, bool) or not isinstance(key_size, int):
        logger.debug(f"Key size probe on {type(descriptor).__name__} returned {type(key_size).__name__}")
        return None
    return key_size


def classify(descriptor, lookup, use_legacy_curve_names=False):
    """
    Resolve a descriptor to a curve name.

    Args:
        descriptor: ECParameterSpec, ECGenParameterSpec or a key size carrier
        lookup: CurveLookup used for the reverse and key size lookups
        use_legacy_curve_names: Report legacy identifiers for explicit parameters

    Returns:
        str: The curve name (not yet checked against the registry)

    Raises:
        InvalidParameterSpecError: If the descriptor is None or unsupported
    """
    if descriptor is None:
        raise InvalidParameterSpecError(NULL_MESSAGE)

    name = None
    if isinstance(descriptor, ECParameterSpec):
        name = lookup.name_for_spec(descriptor)
        if name is not None and use_legacy_curve_names:
            name = lookup.legacy_identifier_for(name)
    elif isinstance(descriptor, ECGenParameterSpec):
        name = descriptor.name
    else:
        key_size = probe_key_size(descriptor)
        if key_size is not None:
            name = lookup.name_for_key_size(key_size)

    if name is None:
        raise InvalidParameterSpecError(UNSUPPORTED_MESSAGE)
    return name
