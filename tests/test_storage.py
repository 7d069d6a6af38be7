import logging

import pytest

from student_portal.services.admin_service import check_admin_credentials, ensure_default_admin
from student_portal.core.config import Settings


def student_fields(student_id="S1", email="s1@school.edu", **extra):
    fields = {"student_id": student_id, "name": "Lee Park", "email": email,
              "phone": None, "age": "18", "password": "secret"}
    fields.update(extra)
    return fields


def test_create_and_lookup(storage):
    created = storage.create_student(student_fields())
    assert created.id
    assert created.is_active is True
    assert created.created_at is not None

    assert storage.get_student(created.id).student_id == "S1"
    assert storage.get_student_by_student_id("S1").id == created.id
    assert storage.get_student_by_email("s1@school.edu").id == created.id
    assert storage.get_student_by_student_id("S2") is None
    assert storage.get_student_by_email("nobody@school.edu") is None


def test_get_all_students(storage):
    assert storage.get_all_students() == []
    storage.create_student(student_fields("S1", "s1@school.edu"))
    storage.create_student(student_fields("S2", "s2@school.edu"))
    assert {s.student_id for s in storage.get_all_students()} == {"S1", "S2"}


def test_unique_constraints_back_the_prechecks(storage):
    storage.create_student(student_fields("S1", "s1@school.edu"))
    with pytest.raises(Exception):
        storage.create_student(student_fields("S1", "other@school.edu"))
    with pytest.raises(Exception):
        storage.create_student(student_fields("S2", "s1@school.edu"))
    assert len(storage.get_all_students()) == 1


def test_update_student(storage):
    created = storage.create_student(student_fields())
    updated = storage.update_student(created.id, {"name": "Lee P.", "phone": "555"})
    assert updated.name == "Lee P."
    assert updated.phone == "555"
    assert updated.email == created.email
    assert updated.student_id == created.student_id

    deactivated = storage.update_student(created.id, {"is_active": False})
    assert deactivated.is_active is False


def test_update_and_get_missing_ids(storage):
    for missing in ("64b7f0c2a1b2c3d4e5f60718", "not-an-id", ""):
        assert storage.get_student(missing) is None
        assert storage.update_student(missing, {"name": "x"}) is None
        assert storage.get_admin(missing) is None


def test_delete_is_normalized_to_true(storage):
    created = storage.create_student(student_fields())
    assert storage.delete_student(created.id) is True
    assert storage.get_student(created.id) is None
    # already gone, still True
    assert storage.delete_student(created.id) is True
    assert storage.delete_student("not-an-id") is True


def test_init_is_idempotent(storage):
    storage.init()
    storage.create_student(student_fields())
    storage.init()
    assert storage.get_student_by_student_id("S1") is not None


def test_ensure_default_admin_creates_once(storage):
    settings = Settings(admin_username="boss", admin_password="pw", admin_name="Head")
    first = ensure_default_admin(storage, settings)
    second = ensure_default_admin(storage, settings)
    assert first.id == second.id
    assert first.username == "boss"
    assert first.name == "Head"
    assert first.password == "pw"
    assert storage.get_admin(first.id).username == "boss"


def test_admin_username_is_unique(storage):
    storage.create_admin({"username": "admin", "password": "12345", "name": "Administrator"})
    with pytest.raises(Exception):
        storage.create_admin({"username": "admin", "password": "x", "name": "Other"})


def test_check_admin_credentials():
    settings = Settings(admin_username="admin", admin_password="12345")
    assert check_admin_credentials("admin", "12345", settings)
    assert not check_admin_credentials("admin", "1234", settings)
    assert not check_admin_credentials("admin ", "12345", settings)


def test_inserts_and_deletes_are_logged(storage, caplog):
    caplog.set_level(logging.DEBUG, logger="student_portal.services")
    created = storage.create_student(student_fields())
    storage.delete_student(created.id)

    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("Inserted student") and created.id in m for m in messages)
    assert any(m.startswith("Deleted 1 student") for m in messages)
