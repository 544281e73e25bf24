import pytest

from dataobject import Map
from tests.models import GroupRecord, UserRecord


@pytest.fixture()
def field_mappings():
    """Input field -> field state mapping with type converting functions."""
    return [
        Map("Validate", "IsValid", convert=lambda value: str(value).lower()),
        Map("NumberOfChars", "IsEmpty", convert=lambda value: value > 0),
    ]


@pytest.fixture()
def user_record():
    record = UserRecord(
        id=7,
        username="jdoe",
        full_name="Jane Doe",
        is_active=True,
        group_id="server",
    )
    record.group = GroupRecord(id="server", name="Server Team")
    return record
