from collections import namedtuple
from functools import partial
from multiprocessing.dummy import Pool as ThreadPool

from english import english_scorer
from util import bit_hamming_distance, transpose, xor_encrypt, xor_single_byte

# Key lengths from MIN_KEY_LENGTH up to but not including MAX_KEY_LENGTH are
# tried when looking for the length of a repeating key.
MIN_KEY_LENGTH = 2
MAX_KEY_LENGTH = 41
HAMMING_TRIALS = 8

ScoredResult = namedtuple("ScoredResult", ["key", "score", "message"])
KeyLengthEstimate = namedtuple("KeyLengthEstimate", ["key_length", "distance"])
RepeatingKeyResult = namedtuple("RepeatingKeyResult", ["key", "plaintext"])


class XorCrackingError(ValueError):
    pass


class InsufficientDataError(XorCrackingError):
    pass


class NoKeyFoundError(XorCrackingError):
    pass


class UndeterminableKeyLengthError(XorCrackingError):
    pass


class InvalidParametersError(XorCrackingError):
    pass


def improving_single_byte_keys(ciphertext, score_fn=english_scorer, floor=0):
    """Try every non-zero key byte on ciphertext, in ascending order.

    Yield a ScoredResult each time a key scores strictly higher than every
    key before it and than floor. The last result yielded is the best one,
    and when two keys tie, the lower one is kept.
    """
    best_score = floor
    for key in range(1, 256):
        message = xor_single_byte(ciphertext, key)
        score = score_fn(message)
        if score > best_score:
            best_score = score
            yield ScoredResult(key, score, message)


def break_single_byte(ciphertext, score_fn=english_scorer, floor=0):
    if not ciphertext:
        raise NoKeyFoundError("cannot break an empty ciphertext")
    results = list(improving_single_byte_keys(ciphertext, score_fn, floor))
    if not results:
        raise NoKeyFoundError("no key scored higher than {}".format(floor))
    return results[-1]


def improving_detections(ciphertexts, score_fn=english_scorer, floor=0):
    """Like improving_single_byte_keys, but over several ciphertexts.

    All ciphertexts share one running best score, so a later ciphertext only
    shows up if it scores strictly higher than everything before it. Yield
    (index, result) pairs.
    """
    for index, ciphertext in enumerate(ciphertexts):
        for result in improving_single_byte_keys(ciphertext, score_fn, floor):
            floor = result.score
            yield index, result


def detect_single_byte_xor(ciphertexts, score_fn=english_scorer, floor=0):
    detections = list(improving_detections(ciphertexts, score_fn, floor))
    if not detections:
        raise NoKeyFoundError("no ciphertext had a key scoring higher than {}".format(floor))
    return detections[-1]


def average_block_distance(ciphertext, key_length, trials=HAMMING_TRIALS):
    total = 0
    for trial in range(trials):
        start = 2 * trial * key_length
        middle = start + key_length
        total += bit_hamming_distance(
            ciphertext[start:middle], ciphertext[middle : middle + key_length])
    return total / trials


def key_length_distances(ciphertext, min_length=MIN_KEY_LENGTH,
                         max_length=MAX_KEY_LENGTH, trials=HAMMING_TRIALS):
    """Return a KeyLengthEstimate for each key length in [min_length, max_length).

    The distance for a key length is the average bit Hamming distance between
    adjacent blocks of that length, divided by the length. Ciphertext blocks
    that are a whole number of key periods apart were XORed with the same key
    bytes, so the true key length tends to have the lowest distance.
    """
    if min_length < 1:
        raise InvalidParametersError("min_length must be at least 1")
    if max_length <= min_length:
        raise InvalidParametersError("max_length must be greater than min_length")
    if trials < 1:
        raise InvalidParametersError("trials must be at least 1")
    required_length = 2 * trials * (max_length - 1)
    if len(ciphertext) < required_length:
        raise InsufficientDataError(
            "ciphertext is {} bytes long, but {} bytes are needed for {} trial(s) "
            "with key lengths below {}".format(
                len(ciphertext), required_length, trials, max_length))
    return [KeyLengthEstimate(key_length,
                              average_block_distance(ciphertext, key_length, trials) / key_length)
            for key_length in range(min_length, max_length)]


def estimate_key_length(ciphertext, min_length=MIN_KEY_LENGTH,
                        max_length=MAX_KEY_LENGTH, trials=HAMMING_TRIALS):
    # min returns the first of several equal items, so shorter lengths win ties.
    return min(key_length_distances(ciphertext, min_length, max_length, trials),
               key=lambda estimate: estimate.distance)


def recover_repeating_key(ciphertext, key_length, score_fn=english_scorer, thread_count=None):
    if not 0 < key_length < len(ciphertext):
        raise UndeterminableKeyLengthError(
            "can't use key length {} on a ciphertext of {} bytes".format(
                key_length, len(ciphertext)))
    # Byte i of the key only ever touches column i, so each column is a
    # separate single-byte XOR problem.
    columns = transpose(ciphertext, key_length)
    break_column = partial(break_single_byte, score_fn=score_fn)
    if thread_count:
        with ThreadPool(thread_count) as pool:
            results = pool.map(break_column, columns)
    else:
        results = [break_column(column) for column in columns]
    return bytes(result.key for result in results)


def break_repeating_key(ciphertext, min_length=MIN_KEY_LENGTH, max_length=MAX_KEY_LENGTH,
                        trials=HAMMING_TRIALS, score_fn=english_scorer, thread_count=None):
    key_length = estimate_key_length(ciphertext, min_length, max_length, trials).key_length
    key = recover_repeating_key(ciphertext, key_length, score_fn, thread_count)
    return RepeatingKeyResult(key, xor_encrypt(ciphertext, key))
