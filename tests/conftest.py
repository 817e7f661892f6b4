import pytest

from lottogen.analysis import draws_to_frame


SAMPLE_RECORDS = [
    {"drwNo": 1, "date": "2002-12-07", "numbers": [10, 23, 29, 33, 37, 40], "bonus": 16},
    {"drwNo": 2, "date": "2002-12-14", "numbers": [9, 13, 21, 25, 32, 42], "bonus": 2},
    {"drwNo": 3, "date": "2002-12-21", "numbers": [11, 16, 19, 21, 27, 31], "bonus": 30},
    {"drwNo": 4, "date": "2002-12-28", "numbers": [14, 27, 30, 31, 40, 42], "bonus": 2},
    {"drwNo": 5, "date": "2003-01-04", "numbers": [16, 24, 29, 40, 41, 42], "bonus": 3},
]


@pytest.fixture
def records():
    return [dict(r) for r in SAMPLE_RECORDS]


@pytest.fixture
def draws(records):
    return draws_to_frame(records)
