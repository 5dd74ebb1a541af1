#!/usr/bin/env python3
"""
ecparams - Command Line
Inspect the curve registry and convert between curve names and DER.
"""

import argparse
import binascii
import json
import logging
import sys

from .config import ParametersConfig, configure_logging, get_config
from .core import ECParameters
from .curves import get_default_registry
from .errors import ECParametersError
from .specs import ECGenParameterSpec

logger = logging.getLogger("ECParameters")


class _KeySizeSpec:
    # carries only a bit length, resolved through the key size probe
    def __init__(self, bits):
        self.bits = bits

    def get_key_size(self):
        return self.bits

    def __str__(self):
        return f"{self.bits}-bit key size"


def build_parser():
    parser = argparse.ArgumentParser(prog="ecparams", description="EC parameter conversion")
    parser.add_argument("--config", help="Path to a JSON configuration file")
    parser.add_argument("--legacy-names", action="store_true",
                        help="Report legacy identifiers for explicit parameters")
    parser.add_argument("--log-level", help="Logging level (default from configuration)")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("list", help="List registered curves")

    encode = subparsers.add_parser("encode", help="Print the DER encoding of a named curve")
    encode.add_argument("name", help="Curve name, legacy identifier or alias")

    decode = subparsers.add_parser("decode", help="Print the curve named by a DER encoding")
    decode.add_argument("hex", help="Hex encoded DER bytes")

    resolve = subparsers.add_parser("resolve", help="Print the curve chosen for a key size")
    resolve.add_argument("--key-size", type=int, required=True, help="Key size in bits")
    return parser


def _load_config(args):
    if args.config:
        config = ParametersConfig.load(args.config)
    else:
        config = ParametersConfig.from_dict(get_config().to_dict())
    if args.legacy_names:
        config.use_legacy_curve_names = True
    if args.log_level:
        config.log_level = args.log_level
    return config


def _describe(params):
    # summary of an initialized ECParameters
    return {
        "name": params.curve_name,
        "der": binascii.hexlify(params.get_encoded()).decode("ascii"),
    }


def run(args):
    config = _load_config(args)
    configure_logging(config.log_level)
    registry = get_default_registry()

    if args.command == "list":
        return [
            {
                "name": record.name,
                "legacy_identifier": record.legacy_identifier,
                "key_size": record.key_size,
                "aliases": list(record.aliases),
            }
            for record in registry
        ]

    params = ECParameters(registry=registry, config=config)
    if args.command == "encode":
        params.init(ECGenParameterSpec(args.name))
    elif args.command == "decode":
        try:
            data = binascii.unhexlify(args.hex.strip())
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"Invalid hex input: {e}") from e
        params.init_encoded(data)
    elif args.command == "resolve":
        params.init(_KeySizeSpec(args.key_size))
    return _describe(params)


def _print_result(result, as_json):
    if as_json:
        print(json.dumps(result, indent=2))
        return
    if isinstance(result, list):
        for entry in result:
            aliases = ", ".join(entry["aliases"]) or "-"
            print(f"{entry['name']:<10} {entry['legacy_identifier']:<22} {entry['key_size']:>4}  {aliases}")
    else:
        print(f"{result['name']} {result['der']}")


def main(argv=None):
    """Command-line entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        result = run(args)
    except (ECParametersError, ValueError, OSError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    _print_result(result, args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
