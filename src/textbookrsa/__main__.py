"""The Command Line Interface for textbook RSA.

Exposes key generation, encryption, decryption and key validation as subcommands. Keys are either read from PKCS1
PEM files or given directly as decimal numbers.

Typical usage example:

    textbookrsa keygen --seed 42
    textbookrsa encrypt --n 10403 --e 5 --message "Hi"
    textbookrsa decrypt --n 10403 --d 7997 --ciphertext "[2423, 1450]"
    OR
    python -m textbookrsa
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import pathlib
import random
import sys
import typing
import warnings

from pyasn1 import error

import textbookrsa
from textbookrsa import keygen
from textbookrsa import rsa

logger = logging.getLogger("textbookrsa")


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    default: typing.Any = None


help_dict: dict[str, HelpData] = {
    "keygen": HelpData("Key generation utility."),
    "encrypt": HelpData("Encryption utility."),
    "decrypt": HelpData("Decryption utility."),
    "validate": HelpData("Key pair self-check utility."),
    "public_key": HelpData(
        description="Location of the public key file.",
        format=pathlib.Path,
    ),
    "private_key": HelpData(
        description="Location of the private key file.",
        format=pathlib.Path,
    ),
    "n": HelpData(description="Key modulus, in decimal.", format=int),
    "e": HelpData(description="Public exponent, in decimal.", format=int),
    "d": HelpData(description="Private exponent, in decimal.", format=int),
    "message": HelpData(description="ASCII message or path to file containing it. If Path start with `P:`"),
    "ciphertext": HelpData(description="Comma separated ciphertext values, e.g. `[123, 456, 789]`."),
    "prime_min": HelpData(
        description="Lower bound of the prime sampling range.",
        format=int,
        default=keygen.DEFAULT_PRIME_RANGE[0],
    ),
    "prime_max": HelpData(
        description="Upper bound of the prime sampling range.",
        format=int,
        default=keygen.DEFAULT_PRIME_RANGE[1],
    ),
    "seed": HelpData(description="Seed for reproducible key generation. Not for real use!", format=int),
    "overwrite": HelpData(description="Overwrite specified destination files if they exist?"),
}


def _arg(parser: argparse.ArgumentParser, name: str, *flags: str, **kwargs) -> None:
    helper_data = help_dict[name]
    if "action" not in kwargs:
        kwargs["type"] = helper_data.format
        kwargs["default"] = helper_data.default
    parser.add_argument(f"--{name.replace('_', '-')}", *flags, dest=name, help=helper_data.description, **kwargs)


pubkey = argparse.ArgumentParser(add_help=False)
_arg(pubkey, "public_key", "-p")
privkey = argparse.ArgumentParser(add_help=False)
_arg(privkey, "private_key", "-P")
modulus = argparse.ArgumentParser(add_help=False)
_arg(modulus, "n")
pubexp = argparse.ArgumentParser(add_help=False)
_arg(pubexp, "e")
privexp = argparse.ArgumentParser(add_help=False)
_arg(privexp, "d")

corep = argparse.ArgumentParser(prog="textbookrsa")
corep.add_argument("--version", "-V", action="version", version=f"%(prog)s {textbookrsa.__version__}")
corep.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands", required=True)

keygen_cmd = commands.add_parser("keygen", parents=[pubkey, privkey], help=help_dict["keygen"].description)
_arg(keygen_cmd, "prime_min")
_arg(keygen_cmd, "prime_max")
_arg(keygen_cmd, "seed", "-s")
_arg(keygen_cmd, "overwrite", "-o", action="store_true")

encrypt_cmd = commands.add_parser("encrypt", parents=[pubkey, modulus, pubexp], help=help_dict["encrypt"].description)
_arg(encrypt_cmd, "message", "-m", required=True)

decrypt_cmd = commands.add_parser("decrypt",
                                  parents=[privkey, modulus, privexp],
                                  help=help_dict["decrypt"].description)
_arg(decrypt_cmd, "ciphertext", "-c", required=True)

validate_cmd = commands.add_parser("validate",
                                   parents=[privkey, modulus, pubexp, privexp],
                                   help=help_dict["validate"].description)


def check_message(mess: str) -> str:
    """Parse message for path-notice."""
    if mess.startswith("P:"):
        with open(mess[2:], "r", encoding="ascii") as f:
            mess = f.read()
    return mess


def load_public_key(args: argparse.Namespace) -> keygen.PublicKey:
    """Public key from `--public-key`, else from `--n` and `--e`."""
    if getattr(args, "public_key", None) is not None:
        return rsa.import_public_key(args.public_key)
    if args.n is None or args.e is None:
        raise ValueError("Provide either --public-key or both --n and --e.")
    return keygen.PublicKey(args.n, args.e)


def load_key_pair(args: argparse.Namespace) -> tuple[keygen.PublicKey | None, keygen.PrivateKey]:
    """Private key (and public key when known) from `--private-key`, else from `--n`, `--d` and maybe `--e`."""
    if args.private_key is not None:
        kp = rsa.import_key_pair(args.private_key)
        return kp.public_key, kp.private_key
    if args.n is None or args.d is None:
        raise ValueError("Provide either --private-key or both --n and --d.")
    if args.n <= 0 or args.d <= 0:
        raise ValueError("Private key values must be greater than 0.")
    e = getattr(args, "e", None)
    pub = keygen.PublicKey(args.n, e) if e is not None else None
    return pub, keygen.PrivateKey(args.n, args.d)


def run_keygen(args: argparse.Namespace) -> None:
    targets = [f for f in (args.public_key, args.private_key) if f is not None]
    if not args.overwrite and any(f.exists() for f in targets):
        raise FileExistsError("Destination private or public key already exists! Use --overwrite.")
    rng = random.Random(args.seed) if args.seed is not None else None
    kp = keygen.generate_key_pair((args.prime_min, args.prime_max), rng)
    print(f"p: {kp.p}")
    print(f"q: {kp.q}")
    print(f"n: {kp.public_key.n}")
    print(f"e: {kp.public_key.e}")
    print(f"d: {kp.private_key.d}")
    if args.public_key is not None:
        rsa.export_public_key(kp.public_key, args.public_key)
        logger.info("Public key written to %s", args.public_key)
    if args.private_key is not None:
        rsa.export_key_pair(kp, args.private_key)
        logger.info("Private key written to %s", args.private_key)


def run_encrypt(args: argparse.Namespace) -> None:
    warnings.warn("Textbook RSA is unsecure! Please use with care.", RuntimeWarning)
    pub = load_public_key(args)
    print(rsa.format_ciphertext(rsa.encrypt(check_message(args.message), pub), brackets=True))


def run_decrypt(args: argparse.Namespace) -> None:
    ciphertext = rsa.parse_ciphertext(args.ciphertext)
    _, priv = load_key_pair(args)
    print(rsa.decrypt(ciphertext, priv))


def run_validate(args: argparse.Namespace) -> None:
    pub, priv = load_key_pair(args)
    if pub is None:
        raise ValueError("Validation needs the public exponent, provide --e or --private-key.")
    if not rsa.validate_keys(pub, priv):
        print("Key pair is invalid!")
        sys.exit(1)
    print("Key pair is valid.")


handlers: dict[str, typing.Callable[[argparse.Namespace], None]] = {
    "keygen": run_keygen,
    "encrypt": run_encrypt,
    "decrypt": run_decrypt,
    "validate": run_validate,
}


def main(argv: list[str] | None = None) -> None:
    """Parse the command line and run the requested subcommand."""
    args = corep.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        handlers[args.subcommand](args)
    except (textbookrsa.RSAError, ValueError, OSError, error.PyAsn1Error) as exc:
        logger.debug("Command %s failed", args.subcommand, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
