#!/usr/bin/env python3

from setuptools import setup

setup(
    author="Elias Zamaria",
    description="This package breaks single-byte and repeating-key XOR ciphers.",
    entry_points={"console_scripts": ["xorcrack = xorcrack:main"]},
    extras_require={"test": ["pytest >= 6.0"]},
    install_requires="pycryptodomex >= 3.4.2",
    license="MIT",
    name="xorcrack",
    py_modules=["block_tools", "english", "util", "xor_cracking", "xorcrack"],
    python_requires=">=3.7",
    url="https://github.com/mikez302/cryptopals_solutions",
    version="1.0.0",
)
