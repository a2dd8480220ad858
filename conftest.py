import pytest

ICE_STANZA = (b"Burning 'em, if you ain't quick and nimble\n"
              b"I go crazy when I hear a cymbal")

# Opening of "Nineteen Eighty-Four", long enough to estimate key lengths with
# the default search range and number of trials.
LONG_ENGLISH_TEXT = b" ".join([
    b"It was a bright cold day in April, and the clocks were striking thirteen.",
    b"Winston Smith, his chin nuzzled into his breast in an effort to escape the vile wind,",
    b"slipped quickly through the glass doors of Victory Mansions, though not quickly enough",
    b"to prevent a swirl of gritty dust from entering along with him.",
    b"The hallway smelt of boiled cabbage and old rag mats. At one end of it a coloured poster,",
    b"too large for indoor display, had been tacked to the wall. It depicted simply an enormous face,",
    b"more than a metre wide: the face of a man of about forty-five, with a heavy black moustache",
    b"and ruggedly handsome features. Winston made for the stairs. It was no use trying the lift.",
    b"Even at the best of times it was seldom working, and at present the electric current was cut off",
    b"during daylight hours. It was part of the economy drive in preparation for Hate Week.",
])


@pytest.fixture
def ice_stanza():
    return ICE_STANZA


@pytest.fixture
def long_english_text():
    return LONG_ENGLISH_TEXT
