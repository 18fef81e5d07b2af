"""
WOTS+ Command-Line Tool

Usage:
    wotsplus keygen [--private-seed HEX] [--public-seed HEX] [--output-dir DIR]
    wotsplus sign --private-key HEX --public-seed HEX (--message HEX | --message-file PATH)
    wotsplus verify --public-key HEX --signature HEX (--message HEX | --message-file PATH)
    wotsplus vectors generate OUT [--count N]
    wotsplus vectors check FILE

Global options:
    --params <name>     Parameter set (default: WOTS+-KECCAK256-W16)
    -v, --verbose       Debug logging

A file given with --message-file is hashed with the parameter set's hash
function; --message takes the digest itself. Each key pair signs one message.

Examples:
    wotsplus keygen --output-dir /keys
    wotsplus --params WOTS+-KECCAK256-W4 vectors generate vectors.json --count 4
"""

import argparse
import json
import logging
import os
import secrets
import sys
from datetime import datetime, timezone
from typing import List, Optional

from . import __version__
from .errors import InvalidLengthError, WOTSPlusError
from .parameters import DEFAULT_PARAMETER_SET, PARAMETER_SETS, get_parameter_set
from .vectors import (
    dump_test_vectors,
    from_hex,
    generate_test_vector,
    load_test_vectors,
    verify_test_vector,
)
from .wots import WOTSPlus, deserialize_signature, serialize_signature

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def _read_message(scheme: WOTSPlus, args: argparse.Namespace) -> bytes:
    if args.message_file:
        with open(args.message_file, "rb") as f:
            return scheme.hash_funcs.F(f.read())
    return from_hex(args.message)


def cmd_keygen(scheme: WOTSPlus, args: argparse.Namespace) -> int:
    n = scheme.hash_len
    private_seed = from_hex(args.private_seed) if args.private_seed else secrets.token_bytes(n)
    public_seed = from_hex(args.public_seed) if args.public_seed else secrets.token_bytes(n)

    public_key, private_key = scheme.generate_key_pair(private_seed, public_seed)

    result = {
        "algorithm": scheme.params.name,
        "publicKey": public_key.hex(),
        "privateKey": private_key.hex(),
        "publicSeed": public_seed.hex(),
    }

    if args.output_dir:
        os.makedirs(args.output_dir, exist_ok=True)
        prefix = os.path.join(args.output_dir, "wotsplus")

        with open(f"{prefix}_public.key", "wb") as f:
            f.write(public_key)

        with open(f"{prefix}_secret.key", "wb") as f:
            f.write(private_key)

        now = datetime.now(timezone.utc)
        metadata = {
            "version": 1,
            "algorithm": scheme.params.name,
            "type": "WOTS+",
            "oneTime": True,
            "keyInfo": {
                "publicKeySize": len(public_key),
                "secretKeySize": len(private_key),
                "signatureSize": scheme.signature_size,
                "publicKeyFile": "wotsplus_public.key",
                "secretKeyFile": "wotsplus_secret.key",
            },
            "publicSeed": public_seed.hex(),
            "created": now.strftime("%Y-%m-%dT%H:%M:%SZ"),
        }
        with open(f"{prefix}_key.json", "w") as f:
            json.dump(metadata, f, indent=2)
        log.info("Wrote key pair to %s", args.output_dir)

    print(json.dumps(result, indent=2))
    return EXIT_OK


def cmd_sign(scheme: WOTSPlus, args: argparse.Namespace) -> int:
    message = _read_message(scheme, args)
    signature = scheme.sign(from_hex(args.private_key), from_hex(args.public_seed), message)
    print(serialize_signature(signature).hex())
    return EXIT_OK


def cmd_verify(scheme: WOTSPlus, args: argparse.Namespace) -> int:
    message = _read_message(scheme, args)
    signature = deserialize_signature(from_hex(args.signature), scheme.params)
    if scheme.verify(from_hex(args.public_key), message, signature):
        print("Signature valid")
        return EXIT_OK
    print("Signature INVALID")
    return EXIT_INVALID


def cmd_vectors_generate(scheme: WOTSPlus, args: argparse.Namespace) -> int:
    n = scheme.hash_len
    vectors = {}
    for i in range(args.count):
        vectors[f"vector_{i}"] = generate_test_vector(
            scheme,
            private_seed=secrets.token_bytes(n),
            public_seed=secrets.token_bytes(n),
            message=scheme.hash_funcs.F(f"Hello World{i}".encode()),
        )
    dump_test_vectors(vectors, args.output)
    print(f"Wrote {len(vectors)} vectors to {args.output}")
    return EXIT_OK


def cmd_vectors_check(scheme: WOTSPlus, args: argparse.Namespace) -> int:
    failed = []
    vectors = load_test_vectors(args.file)
    for name, vector in vectors.items():
        try:
            valid = verify_test_vector(scheme, vector)
        except InvalidLengthError as e:
            log.warning("Vector %s does not fit %s: %s", name, scheme.params.name, e)
            valid = False
        if not valid:
            failed.append(name)

    for name in failed:
        print(f"FAIL {name}")
    print(f"{len(vectors) - len(failed)}/{len(vectors)} vectors verified")
    return EXIT_INVALID if failed else EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wotsplus", description="WOTS+ one-time signatures")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--params", default=DEFAULT_PARAMETER_SET.name,
                        choices=sorted(PARAMETER_SETS), help="Parameter set")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    keygen = subparsers.add_parser("keygen", help="Generate a key pair")
    keygen.add_argument("--private-seed", help="Private seed (hex, random if omitted)")
    keygen.add_argument("--public-seed", help="Public seed (hex, random if omitted)")
    keygen.add_argument("--output-dir", help="Also write key files to this directory")
    keygen.set_defaults(func=cmd_keygen)

    sign = subparsers.add_parser("sign", help="Sign a message digest")
    sign.add_argument("--private-key", required=True, help="Private key (hex)")
    sign.add_argument("--public-seed", required=True, help="Public seed (hex)")
    sign_msg = sign.add_mutually_exclusive_group(required=True)
    sign_msg.add_argument("--message", help="Message digest (hex)")
    sign_msg.add_argument("--message-file", help="File to hash and sign")
    sign.set_defaults(func=cmd_sign)

    verify = subparsers.add_parser("verify", help="Verify a signature")
    verify.add_argument("--public-key", required=True, help="Public key (hex)")
    verify.add_argument("--signature", required=True, help="Serialized signature (hex)")
    verify_msg = verify.add_mutually_exclusive_group(required=True)
    verify_msg.add_argument("--message", help="Message digest (hex)")
    verify_msg.add_argument("--message-file", help="File to hash and verify")
    verify.set_defaults(func=cmd_verify)

    vectors = subparsers.add_parser("vectors", help="Generate or check test vectors")
    vector_commands = vectors.add_subparsers(dest="vectors_command", required=True)

    generate = vector_commands.add_parser("generate", help="Write random test vectors")
    generate.add_argument("output", help="Output JSON file")
    generate.add_argument("--count", type=int, default=1, help="Number of vectors")
    generate.set_defaults(func=cmd_vectors_generate)

    check = vector_commands.add_parser("check", help="Verify every vector in a file")
    check.add_argument("file", help="Test-vector JSON file")
    check.set_defaults(func=cmd_vectors_check)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        scheme = WOTSPlus.from_parameter_set(get_parameter_set(args.params))
        return args.func(scheme, args)
    except (WOTSPlusError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
