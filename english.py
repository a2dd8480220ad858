from collections import Counter

# Weight of each byte value in typical English text, indexed by byte. The
# weights are raw occurrence counts from a sample of English prose, so they
# are only meaningful relative to each other. Control characters and
# anything outside of 7-bit ASCII get a weight of 0, which is enough to sink
# a bad decryption without needing negative weights.
ENGLISH_BYTE_SCORES = (
    # \x00 - \x1f
        0,    0,    0,    0,    0,    0,    0,    0,    0,    0,    0,    0,    0,    0,    0,    0,
        0,    0,    0,    0,    0,    0,    0,    0,    0,    0,    0,    0,    0,    0,    0,    0,
    # " " - "/"
    14000,    2,  285,    0,   52,    2,    7,  204,   53,   54,   21,    0,  985,  252,  946,    8,
    # "0" - "?"
      546,  461,  333,  188,  193,  374,  154,  120,  183,  282,   54,   37,    0,    0,    0,   12,
    # "@" - "O"
        0,  281,  169,  229,  130,  138,  101,   93,  124,  223,   79,   47,  107,  259,  205,  106,
    # "P" - "_"
      144,   12,  146,  305,  325,   57,   31,  107,    8,   94,    6,    0,    0,    0,    0,    0,
    # "`" - "o"
        0, 5264,  866, 1960, 2370, 7742, 1297, 1207, 2956, 4527,   66,  461, 2553, 1467, 4536, 4729,
    # "p" - "\x7f"
     1256,   54, 4138, 4186, 5508, 1613,  653, 1016,  124, 1062,   66,    0,    0,    0,    0,    0,
) + (0,) * 128


class ByteScorer:
    """Score byte strings by how much they look like a given language.

    The score of a byte string is the sum of the table weights of its bytes,
    so the score of a concatenation is the sum of the scores of its parts.
    """

    def __init__(self, table):
        table = tuple(table)
        if len(table) != 256:
            raise ValueError("table must have exactly 256 entries")
        if any(not isinstance(weight, int) or weight < 0 for weight in table):
            raise ValueError("table weights must be non-negative integers")
        self.table = table

    @classmethod
    def from_sample(cls, sample_bytes):
        """Build a scorer whose weights are the byte counts of sample_bytes."""
        byte_counts = Counter(sample_bytes)
        return cls(byte_counts[i] for i in range(256))

    def __call__(self, text_bytes):
        table = self.table
        return sum(table[byte] for byte in text_bytes)


english_scorer = ByteScorer(ENGLISH_BYTE_SCORES)


def english_like_score(text_bytes):
    return english_scorer(text_bytes)
