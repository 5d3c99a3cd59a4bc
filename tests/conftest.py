import pytest

from tests.helpers import award, feed_document


@pytest.fixture
def sample_document():
    return feed_document(
        [award("GOLD", "Kenya"), award("SILVER", "Ethiopia"), award("BRONZE", "Kenya")],
        [award("GOLD", "Jamaica"), award("SILVER", "Kenya"), award("BRONZE", "United States")],
        [award("GOLD", "Kenya"), award("SILVER", title="Neutral Athlete"), award("BRONZE", "Jamaica")],
    )
