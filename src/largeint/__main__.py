"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that prompts for whatever the command
line left out, unless told to stay non-interactive. Covers key generation and the `s`/`v` (sign/verify) drivers.

Typical usage example:

    largeint keygen --bits 256
    largeint s report.pdf
    largeint v report.pdf
    OR
    python -m largeint
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import pathlib
import sys
import typing

import largeint
from largeint import errors
from largeint import keygen
from largeint import rsa


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in LargeInt RSA.",
            choices=["keygen", "sign", "verify"],
        ),
    "keygen":
        HelpData("Key generation utility."),
    "sign":
        HelpData("File signing utility. Short form: s"),
    "verify":
        HelpData("Signature verification utility. Short form: v"),
    "public_key":
        HelpData(
            description="Location of the public key file.",
            format=pathlib.Path,
            default=pathlib.Path(rsa.PUBLIC_KEY_FILE),
        ),
    "private_key":
        HelpData(
            description="Location of the private key file.",
            format=pathlib.Path,
            default=pathlib.Path(rsa.PRIVATE_KEY_FILE),
        ),
    "file":
        HelpData(
            description="The file to sign or verify. Its signature lives beside it with a .sig suffix.",
            format=pathlib.Path,
        ),
    "bits":
        HelpData(
            description="Bit length of each of the two primes.",
            format=int,
            default=keygen.DEFAULT_PRIME_BITS,
        ),
    "seed":
        HelpData(
            description="First public exponent candidate, odd and at least 3.",
            format=int,
            advanced=True,
            default=keygen.DEFAULT_EXPONENT_SEED,
        ),
    "sha":
        HelpData(description="Specific SHA algorithm to use",
                 choices=list(rsa.HASH_TLL),
                 advanced=True,
                 default=rsa.DEFAULT_HASH),
    "overwrite":
        HelpData(
            description="Overwrite specified destination files if they exist?",
            choices=["Y", "N"],
            default="N",
        )
}

needs = {
    "keygen": ("public_key", "private_key", "bits", "seed"),
    "sign": ("private_key", "file", "sha"),
    "verify": ("public_key", "file"),
}

aliases = {"s": "sign", "v": "verify"}

pubkey = argparse.ArgumentParser(add_help=False)
pubkey.add_argument("--public_key", "-p", type=help_dict["public_key"].format, help=help_dict["public_key"].description)
privkey = argparse.ArgumentParser(add_help=False)
privkey.add_argument("--private_key",
                     "-P",
                     type=help_dict["private_key"].format,
                     help=help_dict["private_key"].description)
target = argparse.ArgumentParser(add_help=False)
target.add_argument("file", nargs="?", type=help_dict["file"].format, help=help_dict["file"].description)
corep = argparse.ArgumentParser(prog="largeint")
corep.add_argument("--version", "-V", action="version", version=f"%(prog)s {largeint.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", "-a", action="store_true", help="Enable advanced mode, for interactive mode")
corep.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

keygen_cmd = commands.add_parser("keygen", parents=[privkey, pubkey], help=help_dict["keygen"].description)
keygen_cmd.add_argument("--bits", "-b", type=help_dict["bits"].format, help=help_dict["bits"].description)
keygen_cmd.add_argument("--seed", type=help_dict["seed"].format, help=help_dict["seed"].description)
keygen_cmd.add_argument("--overwrite", "-o", action="store_const", const="Y", help=help_dict["overwrite"].description)

sign_cmd = commands.add_parser("sign", aliases=["s"], parents=[privkey, target], help=help_dict["sign"].description)
sign_cmd.add_argument("--sha", "-s", choices=help_dict["sha"].choices, help=help_dict["sha"].description)
verify_cmd = commands.add_parser("verify",
                                 aliases=["v"],
                                 parents=[pubkey, target],
                                 help=help_dict["verify"].description)


def preset(arg: str, mode: tuple[bool, bool]) -> typing.Any:
    """Value to use without asking, or None when the user has to be prompted.

    Non-interactive runs and advanced options outside advanced mode fall back to the default.

    Raises:
        IOError: If a value is needed in non-interactive mode and there is no default.
    """
    entry = help_dict[arg]
    non_interactive, advanced = mode
    if (non_interactive or (entry.advanced and not advanced)) and entry.default is not None:
        return entry.default
    if non_interactive:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return None


def _describe(arg: str, entry: HelpData, prntr: typing.Callable) -> None:
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + entry.description)
    for choice in entry.choices or ():
        detail = f" - {help_dict[choice].description}" if choice in help_dict else ""
        marker = " (Default)" if choice == entry.default else ""
        prntr(f"{choice}{detail}{marker}")
    if entry.default is None:
        return
    if not entry.choices:
        prntr(f"Default value: {entry.default}")
    prntr("To accept default just click enter. Otherwise specify value.")


def _convert(entry: HelpData, raw: str) -> typing.Any:
    """Turns an answer into a value, the ValueError message is the hint shown to the user."""
    if entry.choices is not None:
        if raw not in entry.choices:
            raise ValueError("Please select an option from the list.")
        return raw
    if not raw:
        raise ValueError("Please provide a value.")
    try:
        return entry.format(raw)
    except ValueError:
        raise ValueError(f"We could not convert your value to {entry.format.__name__}.") from None


def ask(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print) -> typing.Any:
    """Resolves a missing argument, prompting until a usable answer is given.

    Args:
        arg: Key into `help_dict`.
        mode: (non-interactive, advanced) flags.
        prntr: Printer for the prompt text.

    Returns:
        The default, a listed choice, or the answer converted by the entry's format.
    """
    value = preset(arg, mode)
    if value is not None:
        return value
    entry = help_dict[arg]
    _describe(arg, entry, prntr)
    while True:
        raw = input(f"{arg}: ")
        if not raw and entry.default is not None:
            return entry.default
        try:
            return _convert(entry, raw)
        except ValueError as exc:
            prntr(str(exc))


def main():
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args()
    pstatus = (args.non_interactive, args.advanced)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    pspr("Welcome to LargeInt RSA!\n")
    if not args.subcommand:
        args.subcommand = ask("subcommand", pstatus)
    args.subcommand = aliases.get(args.subcommand, args.subcommand)
    for reqs in needs[args.subcommand]:
        if getattr(args, reqs, None) is None:
            setattr(args, reqs, ask(reqs, pstatus))
        else:
            pspr(f"{reqs}: {getattr(args, reqs)}")
    pspr("\nInput Complete! Executing...")
    try:
        match args.subcommand:
            case "keygen":
                if args.private_key.exists() or args.public_key.exists():
                    rs = getattr(args, "overwrite", None)
                    if rs is None:
                        rs = ask("overwrite", pstatus, pspr)
                    if rs == "N":
                        print("Destination private or public key already exists!")
                        return
                rpk = largeint.RSAPrivKey.generate(args.bits, args.seed)
                rpk.export(args.private_key)
                rpk.pub.export(args.public_key)
                pspr("\nKey pair generated!")
            case "sign":
                rpk = largeint.RSAPrivKey.import_key(args.private_key)
                destination = rsa.sign_file(rpk, args.file, args.sha)
                pspr(f"Signature written to {destination}")
            case "verify":
                rpu = largeint.RSAPubKey.import_key(args.public_key)
                if rsa.verify_file(rpu, args.file):
                    print("Signature is valid.")
                else:
                    print("Signature is NOT valid!")
                    sys.exit(1)
    except (errors.LargeIntError, ValueError, RuntimeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    pspr("Thank you for using LargeInt RSA!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
