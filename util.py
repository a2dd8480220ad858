import base64

from itertools import cycle

# _single_byte_xor_tables[k] maps every byte to itself XORed with k. Speed
# optimization: bytes.translate runs in C, which makes trying all 255 keys on
# a buffer much faster than XORing one byte at a time in a generator.
_single_byte_xor_tables = [bytes(b ^ k for b in range(256)) for k in range(256)]


def xor_bytes(*bytes_objects):
    lengths = [len(b) for b in bytes_objects]
    if len(set(lengths)) > 1:
        raise ValueError("inputs must be of equal length")
    result = bytearray([0]) * lengths[0]
    for b in bytes_objects:
        for i, byte in enumerate(b):
            result[i] ^= byte
    return bytes(result)


def xor_single_byte(input_bytes, key):
    return bytes(input_bytes).translate(_single_byte_xor_tables[key])


def xor_encrypt(input_bytes, key):
    """XOR input_bytes with key repeated as many times as needed.

    Applying the same key twice gives back the original bytes, so this
    function is also used for decryption.
    """
    if not key:
        raise ValueError("key must not be empty")
    return bytes(a ^ b for a, b in zip(input_bytes, cycle(key)))


def bit_hamming_distance(bytes1, bytes2):
    if len(bytes1) != len(bytes2):
        raise ValueError("inputs must be of equal length")
    return sum(bin(b1 ^ b2).count("1") for b1, b2 in zip(bytes1, bytes2))


def transpose(input_bytes, n):
    """input_bytes -> [input_bytes[0::n], input_bytes[1::n], ..., input_bytes[n-1::n]]"""
    return [bytes(input_bytes[i::n]) for i in range(n)]


def hex_to_base64(hex_string):
    return base64.b64encode(bytes.fromhex(hex_string))


def decode_hex_lines(lines):
    """Decode one hex string per line, skipping blank lines."""
    return [bytes.fromhex(line.strip()) for line in lines if line.strip()]


def bytes_to_string(b):
    return b.decode("utf-8", errors="replace")
