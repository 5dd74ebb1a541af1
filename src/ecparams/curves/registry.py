#!/usr/bin/env python3
"""
ecparams - Curve Registry
Lookup table of canonical curve records, indexed by name, legacy
identifier, alias, explicit domain parameters, DER encoding and key size.

The registry is read-only once built. Records are shared between every
caller, which is why their encodings are kept as immutable ``bytes``.
"""

import logging
import threading
from dataclasses import dataclass, field

from cryptography.hazmat.primitives.asymmetric import ec
from pyasn1.codec.der import decoder as der_decoder
from pyasn1.codec.der import encoder as der_encoder
from pyasn1.error import PyAsn1Error
from pyasn1.type import univ
from pyasn1_modules import rfc3279

from ..errors import CurveLookupError
from ..specs import ECParameterSpec
from .curve_data import CURVE_ALIASES, CURVE_PARAMS, PREFERRED_BY_KEY_SIZE

logger = logging.getLogger("ECParameters")


@dataclass(frozen=True)
class CurveRecord:
    name: str
    legacy_identifier: str
    spec: ECParameterSpec
    der_encoding: bytes
    oid: str
    key_size: int
    curve: ec.EllipticCurve = field(compare=False, repr=False)
    aliases: tuple = ()


def encode_named_curve(oid):
    """
    DER-encode the ``namedCurve`` choice of ``EcpkParameters`` (RFC 3279).

    Args:
        oid: Dotted curve OID, e.g. "1.2.840.10045.3.1.7"

    Returns:
        bytes: The encoding, which is the OID TLV itself
    """
    params = rfc3279.EcpkParameters()
    params["namedCurve"] = univ.ObjectIdentifier(oid)
    return der_encoder.encode(params)


def decode_curve_oid(data):
    """
    Decode ``EcpkParameters`` and return the named curve OID.

    Args:
        data: DER bytes

    Returns:
        str: Dotted OID, or None for explicit or implicit parameters

    Raises:
        CurveLookupError: If the data is not a well-formed encoding
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise CurveLookupError(f"Expected DER bytes, got {type(data).__name__}")
    if not data:
        raise CurveLookupError("Empty EC parameters")

    try:
        value, rest = der_decoder.decode(bytes(data), asn1Spec=rfc3279.EcpkParameters())
    except PyAsn1Error as e:
        raise CurveLookupError(f"Malformed EC parameters: {e}") from e

    if rest:
        raise CurveLookupError(f"{len(rest)} trailing bytes after EC parameters")

    if value.getName() != "namedCurve":
        return None
    return str(value["namedCurve"])


def build_record(name, params=None, aliases=None):
    """
    Build a curve record for a curve known to ``cryptography``.

    Args:
        name: Canonical curve name, e.g. "secp256r1"
        params: Domain parameter dict (see curve_data), defaults to the bundled set
        aliases: Alternate names, defaults to the bundled aliases

    Returns:
        CurveRecord: The assembled record
    """
    if params is None:
        params = CURVE_PARAMS[name]
    if aliases is None:
        aliases = CURVE_ALIASES.get(name, ())

    oid = getattr(ec.EllipticCurveOID, name.upper(), None)
    if oid is None:
        raise ValueError(f"No OID known for curve: {name}")

    curve = ec.get_curve_for_oid(oid)()
    if curve.name != name:
        raise ValueError(f"OID {oid.dotted_string} names {curve.name}, not {name}")

    spec = ECParameterSpec.from_values(
        params["p"], params["a"], params["b"],
        params["G_x"], params["G_y"], params["n"], params["h"]
    )
    if spec.curve.field.field_size != curve.key_size:
        raise ValueError(f"{name}: field size {spec.curve.field.field_size} does not match key size {curve.key_size}")
    if params.get("bits", curve.key_size) != curve.key_size:
        raise ValueError(f"{name}: declared {params['bits']} bits, key size is {curve.key_size}")
    return CurveRecord(
        name=name,
        # older runtimes report the OID where newer ones report the name
        legacy_identifier=oid.dotted_string,
        spec=spec,
        der_encoding=encode_named_curve(oid.dotted_string),
        oid=oid.dotted_string,
        key_size=curve.key_size,
        curve=curve,
        aliases=tuple(aliases),
    )


class CurveRegistry:
    """
    Canonical curve records and the indexes used to find them.

    Misses are reported as ``None``. Only ``name_for_encoded`` raises, with
    ``CurveLookupError``, when the bytes cannot be parsed at all.
    """

    def __init__(self, preferred_sizes=None):
        self._records = {}
        self._identifiers = {}
        self._domains = {}
        self._oids = {}
        self._preferred_sizes = dict(PREFERRED_BY_KEY_SIZE if preferred_sizes is None else preferred_sizes)

    def register(self, record):
        # every identifier must stay unique across the registry
        identifiers = (record.name, record.legacy_identifier) + tuple(record.aliases)
        for identifier in identifiers:
            if identifier in self._identifiers:
                raise ValueError(f"Curve identifier already registered: {identifier}")
        domain = record.spec.domain_key()
        if domain in self._domains:
            raise ValueError(f"Domain parameters already registered as {self._domains[domain]}")

        self._records[record.name] = record
        for identifier in identifiers:
            self._identifiers[identifier] = record
        self._domains[domain] = record.name
        self._oids[record.oid] = record.name
        logger.debug(f"Registered curve {record.name} ({record.oid})")
        return record

    def get_by_name(self, name):
        if not isinstance(name, str):
            return None
        return self._identifiers.get(name)

    def name_for_spec(self, spec):
        try:
            domain = spec.domain_key()
        except (AttributeError, TypeError, ZeroDivisionError):
            # missing parts, p of zero or non-integer fields, cannot be a registered curve
            return None
        return self._domains.get(domain)

    def legacy_identifier_for(self, name):
        record = self.get_by_name(name)
        if record is None:
            return None
        return record.legacy_identifier

    def name_for_encoded(self, data):
        oid = decode_curve_oid(data)
        if oid is None:
            return None
        # an unregistered OID is still a name, just not one we hold
        return self._oids.get(oid, oid)

    def name_for_key_size(self, bits):
        name = self._preferred_sizes.get(bits)
        if name not in self._records:
            return None
        return name

    def names(self):
        return list(self._records.keys())

    def __iter__(self):
        return iter(list(self._records.values()))

    def __len__(self):
        return len(self._records)

    def __contains__(self, name):
        return self.get_by_name(name) is not None


_default_registry = None
_default_registry_lock = threading.Lock()


def get_default_registry():
    """Return the shared registry holding every bundled curve."""
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            # another thread may have built it while we waited
            if _default_registry is None:
                registry = CurveRegistry()
                for name in CURVE_PARAMS:
                    registry.register(build_record(name))
                _default_registry = registry
                logger.debug(f"Default curve registry ready: {', '.join(registry.names())}")
    return _default_registry
