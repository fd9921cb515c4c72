"""End-to-end page flows driven through Streamlit's AppTest against the file store."""
import json
import os

import pytest
from streamlit.testing.v1 import AppTest

from domain import constants as C
from services import persistence
from services.config import get_settings
from services.persistence import JsonFileStore

APP_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'app.py'))


def _doc(doc_id, name):
    return {
        'id': doc_id, 'fullName': name, 'email': f'{doc_id}@example.com', 'phone': '0101234567',
        'address': 'Seoul', 'profession': '', 'createdAt': '2024-05-01T09:00:00Z',
    }


@pytest.fixture()
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv('STORE_BACKEND', 'file')
    monkeypatch.setenv('DATA_DIR', str(tmp_path))
    get_settings.cache_clear()
    persistence.reset_store()
    yield tmp_path
    get_settings.cache_clear()
    persistence.reset_store()


def _seed(data_dir, docs):
    with open(os.path.join(str(data_dir), 'users.json'), 'w', encoding='utf-8') as f:
        json.dump(docs, f)


def _stored_ids(data_dir):
    return [d['id'] for d in JsonFileStore(str(data_dir)).read_all()]


def _open_users(data_dir):
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    at.button(key='goto_users').click().run()
    return at


def test_listing_renders_one_row_with_actions_per_user(data_dir):
    _seed(data_dir, [_doc('u1', 'Kim'), _doc('u2', 'Lee')])
    at = _open_users(data_dir)
    assert not at.exception
    assert any('Total Users: 2' in m.value for m in at.markdown)
    for uid in ('u1', 'u2'):
        assert at.button(key=f'edit_{uid}') is not None
        assert at.button(key=f'delete_{uid}') is not None


def test_empty_collection_shows_no_records(data_dir):
    at = _open_users(data_dir)
    assert [i.value for i in at.info] == [C.EMPTY_TEXT]
    assert at.sidebar.caption[0].value.startswith('👥 Registered Users | Store: file')


def test_delete_then_no_keeps_store_unchanged(data_dir):
    _seed(data_dir, [_doc('u1', 'Kim'), _doc('u2', 'Lee')])
    at = _open_users(data_dir)

    at.button(key='delete_u2').click().run()
    assert [w.value for w in at.warning] == [C.CONFIRM_DELETE]
    at.button(key='confirm_delete_u2_no').click().run()

    assert not at.exception
    assert _stored_ids(data_dir) == ['u1', 'u2']
    assert len(at.success) == 0
    assert len(at.warning) == 0
    assert 'confirm_answer' not in at.session_state


def test_delete_then_yes_removes_row_and_notifies_once(data_dir):
    _seed(data_dir, [_doc('u1', 'Kim'), _doc('u2', 'Lee')])
    at = _open_users(data_dir)

    at.button(key='delete_u2').click().run()
    at.button(key='confirm_delete_u2_yes').click().run()

    assert not at.exception
    assert _stored_ids(data_dir) == ['u1']
    assert [s.value for s in at.success] == [C.MSG_DELETED]
    assert any('Total Users: 1' in m.value for m in at.markdown)
    assert 'confirm_answer' not in at.session_state

    # Notifications are drained once shown
    at.run()
    assert len(at.success) == 0


def test_leaving_and_reentering_users_reloads(data_dir, monkeypatch):
    _seed(data_dir, [_doc('u1', 'Kim')])
    reads = []
    original = JsonFileStore.read_all

    def counting_read_all(self):
        reads.append(1)
        return original(self)

    monkeypatch.setattr(JsonFileStore, 'read_all', counting_read_all)

    at = _open_users(data_dir)
    at.run()
    assert len(reads) == 1

    at.button(key='goto_register').click().run()
    assert 'users_controller' not in at.session_state
    at.button(key='goto_users').click().run()
    assert len(reads) == 2


def test_edit_and_save_through_table(data_dir):
    _seed(data_dir, [_doc('u1', 'Kim')])
    at = _open_users(data_dir)

    at.button(key='edit_u1').click().run()
    at.text_input(key='edit_u1_fullName').input('Park').run()
    assert [s.value for s in at.success] == []
    at.button(key='save_u1').click().run()

    assert not at.exception
    assert [s.value for s in at.success] == [C.MSG_UPDATED]
    assert JsonFileStore(str(data_dir)).read_all()[0]['fullName'] == 'Park'


def test_valid_submit_clears_form_widgets(data_dir):
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    at.text_input(key='reg_fullName').input('Jane Doe')
    at.text_input(key='reg_email').input('jane@example.com')
    at.text_input(key='reg_phone').input('0123456789')
    at.text_area(key='reg_address').input('1 Main St')
    at.button(key='reg_submit').click().run()

    assert not at.exception
    assert [s.value for s in at.success] == [C.MSG_REGISTERED]
    for name in ('fullName', 'email', 'phone', 'profession'):
        assert at.text_input(key=f'reg_{name}').value == ''
    assert at.text_area(key='reg_address').value == ''
    docs = JsonFileStore(str(data_dir)).read_all()
    assert [d['fullName'] for d in docs] == ['Jane Doe']


def test_invalid_submit_shows_inline_errors_and_stores_nothing(data_dir):
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    at.button(key='reg_submit').click().run()

    errors = ' '.join(m.value for m in at.markdown)
    assert C.ERR_FULL_NAME_REQUIRED in errors
    assert C.ERR_ADDRESS_REQUIRED in errors
    assert JsonFileStore(str(data_dir)).read_all() == []
