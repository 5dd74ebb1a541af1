import pytest

import ecparams.config as config_module
from ecparams import ECParameters, ParametersConfig, get_default_registry

# DER of the namedCurve choice, i.e. the OID TLV of each curve
KNOWN_ENCODINGS = {
    "secp224r1": bytes.fromhex("06052b81040021"),
    "secp256r1": bytes.fromhex("06082a8648ce3d030107"),
    "secp384r1": bytes.fromhex("06052b81040022"),
    "secp521r1": bytes.fromhex("06052b81040023"),
    "secp256k1": bytes.fromhex("06052b8104000a"),
}


class KeySizeSpec:
    """Foreign descriptor exposing only a key size accessor."""

    def __init__(self, bits):
        self.bits = bits

    def get_key_size(self):
        return self.bits


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    monkeypatch.setattr(config_module, "_config", None)
    monkeypatch.delenv(config_module.ENV_LEGACY_CURVE_NAMES, raising=False)
    monkeypatch.delenv(config_module.ENV_LOG_LEVEL, raising=False)


@pytest.fixture
def registry():
    return get_default_registry()


@pytest.fixture
def params(registry):
    return ECParameters(registry=registry, config=ParametersConfig())


@pytest.fixture
def legacy_params(registry):
    return ECParameters(registry=registry, config=ParametersConfig(use_legacy_curve_names=True))
