#!/usr/bin/env python3

import base64
import cProfile
import sys
import warnings

from argparse import ArgumentParser, FileType

import block_tools
import util
import xor_cracking


warnings.simplefilter("default", BytesWarning)


def print_scored_result(result, line_num=None):
    prefix = "" if line_num is None else "line: {}  ".format(line_num)
    print("{}key: {}  score: {}".format(prefix, result.key, result.score))
    print(util.bytes_to_string(result.message))


def hex2b64_command(args):
    print(util.hex_to_base64(args.hex).decode())


def fixed_xor_command(args):
    print(util.xor_bytes(bytes.fromhex(args.hex1), bytes.fromhex(args.hex2)).hex())


def single_command(args):
    ciphertext = bytes.fromhex(args.hex)
    if args.verbose:
        for result in xor_cracking.improving_single_byte_keys(ciphertext):
            print_scored_result(result)
        print()
    print_scored_result(xor_cracking.break_single_byte(ciphertext))


def detect_command(args):
    ciphertexts = util.decode_hex_lines(args.file)
    if args.verbose:
        for index, result in xor_cracking.improving_detections(ciphertexts):
            print_scored_result(result, index + 1)
        print()
    index, result = xor_cracking.detect_single_byte_xor(ciphertexts)
    print_scored_result(result, index + 1)


def encrypt_command(args):
    print(util.xor_encrypt(args.file.read(), args.key.encode()).hex())


def repeating_command(args):
    ciphertext = base64.b64decode(args.file.read())
    if args.key_length is not None:
        key_length = args.key_length
    else:
        estimates = xor_cracking.key_length_distances(
            ciphertext, args.min_length, args.max_length, args.trials)
        if args.verbose:
            for estimate in estimates:
                print("key length {:3}: {:.4f}".format(*estimate))
            print()
        key_length = min(estimates, key=lambda estimate: estimate.distance).key_length
    print("key length: {}".format(key_length))
    key = xor_cracking.recover_repeating_key(ciphertext, key_length, thread_count=args.threads)
    print("key: {!r}".format(util.bytes_to_string(key)))
    print()
    print(util.bytes_to_string(util.xor_encrypt(ciphertext, key)))


def aes_ecb_command(args):
    ciphertext = base64.b64decode(args.file.read())
    plaintext = block_tools.aes_ecb_decrypt(ciphertext, args.key.encode(), unpad=True)
    print(util.bytes_to_string(plaintext))


def make_parser():
    parser = ArgumentParser(description="Break single-byte and repeating-key XOR ciphers.")
    parser.add_argument(
        "-p", "--profile", help="Profile the command.", action="store_true")
    subparsers = parser.add_subparsers(title="commands", dest="command_name", required=True)

    hex2b64 = subparsers.add_parser("hex2b64", help="Convert hex to Base64.")
    hex2b64.add_argument("hex")
    hex2b64.set_defaults(command=hex2b64_command)

    fixed_xor = subparsers.add_parser("fixed-xor", help="XOR two equal-length hex strings.")
    fixed_xor.add_argument("hex1")
    fixed_xor.add_argument("hex2")
    fixed_xor.set_defaults(command=fixed_xor_command)

    single = subparsers.add_parser("single", help="Break a hex string encrypted with one byte.")
    single.add_argument("hex")
    single.add_argument(
        "-v", "--verbose", help="Show every key that beat the keys before it.",
        action="store_true")
    single.set_defaults(command=single_command)

    detect = subparsers.add_parser(
        "detect", help="Find the line of a hex file that was encrypted with one byte.")
    detect.add_argument("file", nargs="?", type=FileType("r"), default="-")
    detect.add_argument(
        "-v", "--verbose", help="Show every line and key that beat the ones before it.",
        action="store_true")
    detect.set_defaults(command=detect_command)

    encrypt = subparsers.add_parser("encrypt", help="Encrypt a file with repeating-key XOR.")
    encrypt.add_argument("file", nargs="?", type=FileType("rb"), default="-")
    encrypt.add_argument("-k", "--key", required=True)
    encrypt.set_defaults(command=encrypt_command)

    repeating = subparsers.add_parser(
        "repeating", help="Break a Base64 file encrypted with repeating-key XOR.")
    repeating.add_argument("file", nargs="?", type=FileType("r"), default="-")
    repeating.add_argument(
        "--min-length", type=int, default=xor_cracking.MIN_KEY_LENGTH,
        help="Shortest key length to try (default: %(default)s).")
    repeating.add_argument(
        "--max-length", type=int, default=xor_cracking.MAX_KEY_LENGTH,
        help="Key lengths below this are tried (default: %(default)s).")
    repeating.add_argument(
        "--trials", type=int, default=xor_cracking.HAMMING_TRIALS,
        help="Number of block pairs to compare for each key length (default: %(default)s).")
    repeating.add_argument(
        "--key-length", type=int, help="Skip key length estimation and use this length.")
    repeating.add_argument(
        "--threads", type=int, help="Break the key bytes in this many threads.")
    repeating.add_argument(
        "-v", "--verbose", help="Show the distance for every key length.", action="store_true")
    repeating.set_defaults(command=repeating_command)

    aes_ecb = subparsers.add_parser("aes-ecb", help="Decrypt a Base64 file with AES in ECB mode.")
    aes_ecb.add_argument("file", nargs="?", type=FileType("r"), default="-")
    aes_ecb.add_argument("-k", "--key", required=True)
    aes_ecb.set_defaults(command=aes_ecb_command)

    return parser


def main(args=None):
    parser = make_parser()
    args = parser.parse_args(args)

    profile = cProfile.Profile() if args.profile else None
    try:
        if profile:
            profile.runcall(args.command, args)
        else:
            args.command(args)
    except xor_cracking.InvalidParametersError as e:
        parser.error(str(e))
    except xor_cracking.XorCrackingError as e:
        print("error: {}".format(e), file=sys.stderr)
        return 1
    except ValueError as e:
        # malformed hex or Base64, or a bad AES key or padding
        parser.error(str(e))
    finally:
        if profile:
            print()
            profile.print_stats(sort="cumulative")
    return 0


if __name__ == "__main__":
    sys.exit(main())
