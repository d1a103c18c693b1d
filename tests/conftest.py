from datetime import date

import pytest

from activity import InternshipRecord, LevelClassifier


@pytest.fixture
def classifier():
    return LevelClassifier()


@pytest.fixture
def scenario_records():
    """One closed SMK internship and one ongoing university internship."""
    return [
        InternshipRecord(start=date(2024, 1, 1), end=date(2024, 3, 31), level="SMK", name="Ayu", institution="SMKN 1"),
        InternshipRecord(start=date(2024, 2, 15), end=None, level="Universitas", name="Budi", institution="UNPAD"),
    ]


@pytest.fixture
def scenario_now():
    return date(2024, 4, 1)
