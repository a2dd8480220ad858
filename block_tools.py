from Cryptodome.Cipher import AES


def aes_ecb_encrypt(plaintext, key, pad=False):
    cipher = AES.new(key, AES.MODE_ECB)
    return cipher.encrypt(pkcs7_pad(plaintext) if pad else plaintext)


def aes_ecb_decrypt(ciphertext, key, unpad=False):
    if len(ciphertext) % AES.block_size != 0:
        raise ValueError("ciphertext length must be a multiple of {}".format(AES.block_size))
    cipher = AES.new(key, AES.MODE_ECB)
    plaintext = cipher.decrypt(ciphertext)
    return pkcs7_unpad(plaintext) if unpad else plaintext


def pkcs7_pad(input_bytes, block_size=16):
    padding_length = -len(input_bytes) % block_size
    if padding_length == 0:
        padding_length = block_size
    return input_bytes + bytes([padding_length] * padding_length)


def pkcs7_unpad(input_bytes, block_size=16):
    if not input_bytes:
        raise ValueError("Invalid padding")
    padding_length = input_bytes[-1]
    expected_padding = bytes([padding_length]) * padding_length
    padding = input_bytes[-padding_length:]
    if padding_length == 0 or padding_length > block_size or padding != expected_padding:
        raise ValueError("Invalid padding")
    return input_bytes[:-padding_length]
