import pytest


@pytest.fixture
def group_data():
    """Valid payload for creating a chit group."""
    return {
        'name': 'Monthly Savers',
        'value': 100000,
        'duration': 10,
        'members_count': 5,
        'start_date': '2024-01-01',
    }
