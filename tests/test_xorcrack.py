import base64

import pytest

from block_tools import aes_ecb_encrypt
from util import xor_encrypt, xor_single_byte
from xorcrack import main


def run(capsys, *args):
    status = main(list(args))
    out, err = capsys.readouterr()
    return status, out, err


def test_hex2b64(capsys):
    status, out, _ = run(
        capsys, "hex2b64",
        "49276d206b696c6c696e6720796f757220627261696e206c696b65206120706f69736f6e6f7573206d757368726f6f6d")
    assert status == 0
    assert out == "SSdtIGtpbGxpbmcgeW91ciBicmFpbiBsaWtlIGEgcG9pc29ub3VzIG11c2hyb29t\n"


def test_fixed_xor(capsys):
    status, out, _ = run(capsys, "fixed-xor", "1c0111001f010100061a024b53535009181c",
                         "686974207468652062756c6c277320657965")
    assert status == 0
    assert out == "746865206b696420646f6e277420706c6179\n"


def test_single(capsys):
    status, out, _ = run(
        capsys, "single", "1b37373331363f78151b7f2b783431333d78397828372d363c78373e783a393b3736")
    assert status == 0
    assert out == "key: 88  score: 167728\nCooking MC's like a pound of bacon\n"


def test_single_verbose_shows_each_improvement(capsys):
    status, out, _ = run(
        capsys, "single", "-v",
        "1b37373331363f78151b7f2b783431333d78397828372d363c78373e783a393b3736")
    assert status == 0
    assert out.count("key: 88  score: 167728") == 2
    assert out.count("key: ") > 2


def test_single_bad_hex(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["single", "not hex"])
    assert excinfo.value.code == 2


def test_single_empty_input(capsys):
    status, out, err = run(capsys, "single", "")
    assert status == 1
    assert out == ""
    assert err.startswith("error: ")


def test_detect(capsys, tmp_path):
    path = tmp_path / "lines.txt"
    path.write_text("\n".join([
        bytes(range(30)).hex(),
        xor_single_byte(b"Now that the party is jumping\n", 0x35).hex(),
        bytes(range(200, 230)).hex(),
    ]) + "\n")
    status, out, _ = run(capsys, "detect", str(path))
    assert status == 0
    assert out.startswith("line: 2  key: 53  score: 152005\nNow that the party is jumping\n")


def test_encrypt(capsys, tmp_path, ice_stanza):
    path = tmp_path / "stanza.txt"
    path.write_bytes(ice_stanza)
    status, out, _ = run(capsys, "encrypt", "-k", "ICE", str(path))
    assert status == 0
    assert out == ("0b3637272a2b2e63622c2e69692a23693a2a3c6324202d623d63343c2a26226324"
                   "272765272a282b2f20430a652e2c652a3124333a653e2b2027630c692b20283165"
                   "286326302e27282f\n")


def write_base64(path, data):
    encoded = base64.b64encode(data).decode()
    # wrapped at 60 columns like the usual challenge files
    path.write_text("\n".join(encoded[i : i + 60] for i in range(0, len(encoded), 60)) + "\n")


def test_repeating(capsys, tmp_path, long_english_text):
    path = tmp_path / "ciphertext.txt"
    write_base64(path, xor_encrypt(long_english_text, b"Terminator X"))
    status, out, _ = run(capsys, "repeating", "--max-length", "16", "--threads", "3", str(path))
    assert status == 0
    assert "key length: 12\n" in out
    assert "key: 'Terminator X'\n" in out
    assert long_english_text.decode() in out


def test_repeating_verbose(capsys, tmp_path, ice_stanza):
    path = tmp_path / "ciphertext.txt"
    write_base64(path, xor_encrypt(ice_stanza, b"ICE"))
    status, out, _ = run(
        capsys, "repeating", "-v", "--max-length", "8", "--trials", "4", str(path))
    assert status == 0
    assert "key length   3: 2.5000\n" in out
    assert out.count("key length ") == 6
    assert "key: 'ICE'\n" in out
    assert ice_stanza.decode() in out


def test_repeating_with_known_key_length(capsys, tmp_path, ice_stanza):
    path = tmp_path / "ciphertext.txt"
    write_base64(path, xor_encrypt(ice_stanza, b"ICE"))
    status, out, _ = run(capsys, "repeating", "--key-length", "3", str(path))
    assert status == 0
    assert "key: 'ICE'\n" in out


def test_repeating_insufficient_data(capsys, tmp_path, ice_stanza):
    path = tmp_path / "ciphertext.txt"
    write_base64(path, xor_encrypt(ice_stanza, b"ICE"))
    status, _, err = run(capsys, "repeating", str(path))
    assert status == 1
    assert "bytes are needed" in err


def test_repeating_bad_key_length(capsys, tmp_path, ice_stanza):
    path = tmp_path / "ciphertext.txt"
    write_base64(path, xor_encrypt(ice_stanza, b"ICE"))
    status, _, err = run(capsys, "repeating", "--key-length", "0", str(path))
    assert status == 1
    assert err.startswith("error: ")


def test_repeating_invalid_parameters(tmp_path, ice_stanza):
    path = tmp_path / "ciphertext.txt"
    write_base64(path, xor_encrypt(ice_stanza, b"ICE"))
    with pytest.raises(SystemExit) as excinfo:
        main(["repeating", "--min-length", "0", "--max-length", "4", str(path)])
    assert excinfo.value.code == 2


def test_aes_ecb(capsys, tmp_path, ice_stanza):
    path = tmp_path / "ciphertext.txt"
    write_base64(path, aes_ecb_encrypt(ice_stanza, b"YELLOW SUBMARINE", pad=True))
    status, out, _ = run(capsys, "aes-ecb", "-k", "YELLOW SUBMARINE", str(path))
    assert status == 0
    assert out == ice_stanza.decode() + "\n"


def test_aes_ecb_bad_key(tmp_path, ice_stanza):
    path = tmp_path / "ciphertext.txt"
    write_base64(path, aes_ecb_encrypt(ice_stanza, b"YELLOW SUBMARINE", pad=True))
    with pytest.raises(SystemExit) as excinfo:
        main(["aes-ecb", "-k", "too short", str(path)])
    assert excinfo.value.code == 2
