import pytest

from deckcore.exceptions import DeleteError, FetchError


class FakeStore:
    """In-memory tabular store mirroring a single sheet."""

    def __init__(self, values=None):
        self.values = [list(row) for row in (values or [])]
        self.fetch_calls = []
        self.delete_calls = []
        self.fetch_error = None
        self.delete_error = None
        self.payload = None

    def fetch_range(self, store_id, range_):
        self.fetch_calls.append((store_id, range_))
        if self.fetch_error:
            raise self.fetch_error
        if self.payload is not None:
            return self.payload
        return {"range": range_, "values": [list(row) for row in self.values]}

    def delete_rows(self, store_id, row_start_index, row_end_index):
        self.delete_calls.append((store_id, row_start_index, row_end_index))
        if self.delete_error:
            raise self.delete_error
        del self.values[row_start_index:row_end_index]


@pytest.fixture
def jobs_table():
    return [
        ["title", "Company_Name", "location", "currentDate", "skills"],
        ["A", "Acme", "Berlin", "2024-01-05", '["python","sql"]'],
        ["B", "Beta", "Paris", "2024-02-10", "[]"],
        ["C", "Gamma", "Remote", "", "not json"],
    ]


@pytest.fixture
def store(jobs_table):
    return FakeStore(jobs_table)


@pytest.fixture
def failing_fetch_store():
    store = FakeStore()
    store.fetch_error = FetchError("Failed to fetch data", status_code=403)
    return store


@pytest.fixture
def failing_delete_error():
    return DeleteError("Failed to delete row", status_code=500)
