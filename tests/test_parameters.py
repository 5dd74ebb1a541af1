import pytest

from ecparams import (
    AlgorithmParameterSpec,
    ECGenParameterSpec,
    ECParameterSpec,
    ECParameters,
    InvalidParameterSpecError,
    ParameterDecodeError,
    ParametersConfig,
    ParametersNotInitializedError,
    CurveRegistry,
    ECPoint,
    EllipticCurve,
    set_config,
)
from ecparams.curves import build_record, encode_named_curve
from ecparams.curves.curve_data import CURVE_PARAMS

from conftest import KNOWN_ENCODINGS, KeySizeSpec


def test_not_initialized(params):
    assert params.to_string() == "Not initialized"
    assert str(params) == "Not initialized"
    assert not params.is_initialized
    with pytest.raises(ParametersNotInitializedError):
        params.get_encoded()
    with pytest.raises(ParametersNotInitializedError):
        params.get_parameter_spec(ECParameterSpec)
    with pytest.raises(ParametersNotInitializedError):
        params.curve_name


def test_default_construction_uses_shared_config(monkeypatch):
    monkeypatch.setenv("ECPARAMS_LEGACY_CURVE_NAMES", "true")
    params = ECParameters()
    params.init(params_spec("secp256r1"))
    assert params.curve_name == "secp256r1"
    assert params._use_legacy_curve_names


def params_spec(name):
    values = CURVE_PARAMS[name]
    return ECParameterSpec.from_values(values["p"], values["a"], values["b"],
                                       values["G_x"], values["G_y"], values["n"], values["h"])


@pytest.mark.parametrize("name", sorted(KNOWN_ENCODINGS))
def test_encoding_round_trip(params, registry, name):
    params.init_encoded(registry.get_by_name(name).der_encoding)
    assert params.curve_name == name
    assert params.get_encoded() == KNOWN_ENCODINGS[name]


@pytest.mark.parametrize("name", sorted(KNOWN_ENCODINGS))
def test_explicit_and_named_reach_same_record(params, legacy_params, registry, name):
    by_name = ECParameters(registry=registry, config=ParametersConfig())
    by_name.init(ECGenParameterSpec(name))

    params.init(params_spec(name))
    legacy_params.init(params_spec(name))

    assert params._ec_info is by_name._ec_info
    assert legacy_params._ec_info is by_name._ec_info
    assert str(legacy_params) == name


def test_named_request_by_alias(params):
    params.init(ECGenParameterSpec("P-521"))
    assert str(params) == "secp521r1"
    assert params.get_parameter_spec(ECGenParameterSpec) == ECGenParameterSpec("secp521r1")


def test_key_size_descriptor(params):
    params.init(KeySizeSpec(224))
    assert params.curve_name == "secp224r1"


def test_get_encoded_returns_independent_copies(params, registry):
    params.init(ECGenParameterSpec("secp256r1"))
    first = params.get_encoded()
    second = params.get_encoded("ASN.1")
    assert first == second
    assert first is not second

    first[0] ^= 0xFF
    assert second == KNOWN_ENCODINGS["secp256r1"]
    assert params.get_encoded() == KNOWN_ENCODINGS["secp256r1"]
    assert registry.get_by_name("secp256r1").der_encoding == KNOWN_ENCODINGS["secp256r1"]


def test_get_parameter_spec_types(params, registry):
    params.init(ECGenParameterSpec("secp384r1"))
    spec = params.get_parameter_spec(ECParameterSpec)
    assert spec == registry.get_by_name("secp384r1").spec
    # base classes are satisfied by the explicit parameters first
    assert params.get_parameter_spec(AlgorithmParameterSpec) == spec
    assert params.get_parameter_spec(object) == spec
    assert params.get_parameter_spec(ECGenParameterSpec).name == "secp384r1"


@pytest.mark.parametrize("spec_type", [str, KeySizeSpec, "ECParameterSpec", None])
def test_get_parameter_spec_rejects_other_types(params, spec_type):
    params.init(ECGenParameterSpec("secp384r1"))
    with pytest.raises(InvalidParameterSpecError, match="^Only ECParameterSpec and ECGenParameterSpec supported$"):
        params.get_parameter_spec(spec_type)


def test_null_descriptor(params):
    with pytest.raises(InvalidParameterSpecError, match="^paramSpec must not be null$"):
        params.init(None)


def test_unknown_named_request(params):
    spec = ECGenParameterSpec("secp192r1")
    with pytest.raises(InvalidParameterSpecError) as excinfo:
        params.init(spec)
    assert str(excinfo.value) == f"Unknown curve: {spec}"


def test_unregistered_explicit_parameters(params):
    values = CURVE_PARAMS["secp256r1"]
    spec = ECParameterSpec.from_values(values["p"], values["a"], values["b"] + 1,
                                       values["G_x"], values["G_y"], values["n"], 1)
    with pytest.raises(InvalidParameterSpecError, match="^Only ECParameterSpec and ECGenParameterSpec supported$"):
        params.init(spec)


def test_legacy_names_with_partial_registry():
    # the legacy identifier is looked up again after the reverse lookup
    registry = CurveRegistry()
    registry.register(build_record("secp256r1"))
    params = ECParameters(registry=registry, config=ParametersConfig(use_legacy_curve_names=True))
    params.init(params_spec("secp256r1"))
    assert params.curve_name == "secp256r1"
    with pytest.raises(InvalidParameterSpecError, match="^Only"):
        params.init(params_spec("secp384r1"))


@pytest.mark.parametrize("data", [
    b"\x05\x00",
    b"\x30\x03\x02\x01\x01",
    b"\xff\xff",
    b"",
    KNOWN_ENCODINGS["secp256r1"] + b"\x00",
    None,
])
def test_decode_rejects_unnamed_parameters(params, data):
    with pytest.raises(ParameterDecodeError, match="^Only named EcParameters supported$"):
        params.init_encoded(data)


@pytest.mark.parametrize("oid", ["1.2.3.4", "1.2.840.10045.3.1.1"])
def test_decode_unknown_named_curve(params, oid):
    with pytest.raises(ParameterDecodeError) as excinfo:
        params.init_encoded(encode_named_curve(oid))
    assert str(excinfo.value) == f"Unknown named curve: {oid}"


def test_decode_ignores_encoding_method(params):
    params.init_encoded(KNOWN_ENCODINGS["secp521r1"], "ASN.1")
    assert params.curve_name == "secp521r1"


def test_failed_init_keeps_previous_record(params):
    params.init(ECGenParameterSpec("secp256k1"))
    with pytest.raises(InvalidParameterSpecError):
        params.init(ECGenParameterSpec("nope"))
    with pytest.raises(InvalidParameterSpecError):
        params.init(object())
    with pytest.raises(ParameterDecodeError):
        params.init_encoded(b"\x05\x00")
    assert params.curve_name == "secp256k1"


def test_reinit_replaces_record(params):
    params.init(ECGenParameterSpec("secp256r1"))
    params.init_encoded(KNOWN_ENCODINGS["secp384r1"])
    assert str(params) == "secp384r1"
    assert params.get_parameter_spec(ECGenParameterSpec).name == "secp384r1"


def test_config_is_read_at_construction(registry):
    set_config(ParametersConfig(use_legacy_curve_names=True))
    params = ECParameters(registry=registry)
    set_config(ParametersConfig())
    assert params._use_legacy_curve_names


def test_repr(params):
    assert repr(params) == "<ECParameters Not initialized>"
    params.init(ECGenParameterSpec("secp256r1"))
    assert repr(params) == "<ECParameters secp256r1>"


@pytest.mark.parametrize("spec", [
    ECParameterSpec(params_spec("secp256r1").curve, None, params_spec("secp256r1").order, 1),
    ECParameterSpec(None, params_spec("secp256r1").generator, params_spec("secp256r1").order, 1),
    ECParameterSpec(EllipticCurve(None, 1, 2), ECPoint(3, 4), 5, 1),
])
def test_incomplete_explicit_parameters(params, spec):
    with pytest.raises(InvalidParameterSpecError, match="^Only ECParameterSpec and ECGenParameterSpec supported$"):
        params.init(spec)
