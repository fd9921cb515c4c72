import os
import sys

import pytest

# Ensure project root is on sys.path so 'domain', 'services', ... are importable during tests
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from services.persistence import StoreError, UserStore  # noqa: E402


class FakeStore(UserStore):
    """In-memory store recording every call; `fail` makes the named operations raise."""

    def __init__(self, docs=None, collection='users'):
        self.collection = collection
        self.docs = [dict(d) for d in (docs or [])]
        self.calls = []
        self.fail = set()
        self._next = 1

    def _maybe_fail(self, op):
        if op in self.fail:
            raise StoreError(f"{op} denied")

    def create(self, fields):
        self.calls.append(('create', dict(fields)))
        self._maybe_fail('create')
        doc_id = f"new{self._next}"
        self._next += 1
        self.docs.append({**fields, 'id': doc_id, 'createdAt': '2024-01-01T00:00:00Z'})
        return doc_id

    def read_all(self):
        self.calls.append(('read_all',))
        self._maybe_fail('read_all')
        return [dict(d) for d in self.docs]

    def update(self, doc_id, fields):
        self.calls.append(('update', doc_id, dict(fields)))
        self._maybe_fail('update')

    def delete(self, doc_id):
        self.calls.append(('delete', doc_id))
        self._maybe_fail('delete')


class Recorder:
    def __init__(self):
        self.notes = []

    def __call__(self, note):
        self.notes.append(note)

    @property
    def kinds(self):
        return [n.kind for n in self.notes]

    @property
    def messages(self):
        return [n.message for n in self.notes]


def make_doc(doc_id, name='Kim', profession='Engineer'):
    doc = {
        'id': doc_id,
        'fullName': name,
        'email': f'{doc_id}@example.com',
        'phone': '0101234567',
        'address': 'Seoul',
        'createdAt': '2024-05-01T09:00:00Z',
    }
    if profession is not None:
        doc['profession'] = profession
    return doc


@pytest.fixture()
def store():
    return FakeStore()


@pytest.fixture()
def notes():
    return Recorder()
