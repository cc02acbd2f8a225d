#!/usr/bin/env python3
import argparse
import json
import sys
from pathlib import Path

import znn_abi
from znn_abi.abi import Abi
from znn_abi.builtin_contracts import get_builtin_contracts, load_builtin_abi
from znn_abi.exceptions import AbiException, _BaseAbiException
from znn_abi.primitives import Address, Hash, TokenStandard
from znn_abi.settings import DEFAULT_SETTINGS, VALID_WARNINGS_CONTROL
from znn_abi.utils import hex_to_bytes
from znn_abi.warnings import warnings_filter

commands_help = """Command to run, one of:
signatures - List the selector and signature of every function
encode     - Encode a call: encode <function> [arg ...]
decode     - Decode a call: decode <0x-prefixed call data>

Arguments to `encode` are read as JSON where possible (numbers, booleans,
arrays) and as plain strings otherwise (addresses, hex strings).
"""


def _parse_cli_args():
    return _parse_args(sys.argv[1:])


def _parse_args(argv):
    parser = argparse.ArgumentParser(
        description="Encode and decode calls to Zenon embedded contracts",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=znn_abi.__version__)

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--abi", help="Path to a JSON ABI description", dest="abi_file")
    source.add_argument(
        "--contract",
        help="Name of a built-in embedded contract, one of:\n"
        + ", ".join(get_builtin_contracts()),
    )
    parser.add_argument(
        "-W",
        help="Control warnings: 'error' turns them into errors, 'none' silences them",
        choices=VALID_WARNINGS_CONTROL,
        default=DEFAULT_SETTINGS.warnings_control,
        dest="warnings_control",
    )
    parser.add_argument(
        "--strict",
        help="Reject calls with fewer arguments than the function declares",
        action="store_true",
    )
    parser.add_argument("command", help=commands_help, choices=("signatures", "encode", "decode"))
    parser.add_argument("operands", nargs="*", help="Operands of the command")

    args = parser.parse_args(argv)

    try:
        with warnings_filter(args.warnings_control):
            for line in run(args):
                print(line)
    except (_BaseAbiException, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def load_abi(args) -> Abi:
    if args.abi_file is not None:
        return Abi.from_json(Path(args.abi_file).read_text(encoding="utf-8"))
    return load_builtin_abi(args.contract)


def run(args):
    abi = load_abi(args)
    strict = True if args.strict else None

    if args.command == "signatures":
        return [f"0x{entry.selector().hex()} {entry}" for entry in abi]

    if args.command == "encode":
        if len(args.operands) < 1:
            raise AbiException("encode requires a function name")
        name, *raw_args = args.operands
        values = [parse_argument(a) for a in raw_args]
        return ["0x" + abi.encode_function(name, values, strict=strict).hex()]

    # decode
    if len(args.operands) != 1:
        raise AbiException("decode requires exactly one hex string")
    decoded = abi.decode_function(hex_to_bytes(args.operands[0]))
    return [json.dumps(to_json_value(decoded))]


def parse_argument(text: str):
    """
    Read a command line operand as JSON, falling back to the raw string.
    """
    try:
        return json.loads(text)
    except ValueError:
        return text


def to_json_value(value):
    if isinstance(value, (list, tuple)):
        return [to_json_value(v) for v in value]
    if isinstance(value, (Address, Hash, TokenStandard)):
        return str(value)
    if isinstance(value, bytes):
        return "0x" + value.hex()
    return value
