import mongomock
from fastapi.testclient import TestClient

from student_portal.core.config import Settings
from student_portal.core.errors import format_validation_errors
from student_portal.main import app
from student_portal.services import storage as storage_module
from student_portal.services.storage import get_storage
from student_portal.services.mongo_storage import MongoStorage
from student_portal.services.postgres_storage import PostgresStorage
from tests.conftest import make_mongo_storage, make_sql_storage, make_test_settings


def test_health_reports_backend(client, storage):
    r = client.get('/health')
    assert r.status_code == 200
    body = r.json()
    assert body['status'] == 'healthy'
    assert body['backend'] == storage.name
    if storage.name == 'postgres':
        assert body['storage'] == 'connected'


def test_backend_failure_is_generic_500():
    class BrokenStorage(PostgresStorage):
        def get_all_students(self):
            raise RuntimeError('connection reset by peer')

    broken = BrokenStorage(make_sql_storage().engine)
    app.dependency_overrides[get_storage] = lambda: broken
    try:
        client = TestClient(app, raise_server_exceptions=False)
        r = client.get('/api/students')
        assert r.status_code == 500
        assert r.json() == {'message': 'Internal server error'}
        assert 'connection reset' not in r.text
    finally:
        app.dependency_overrides.clear()


def test_lost_create_race_surfaces_as_500(new_student):
    # pre-checks see nothing, the unique constraint rejects the insert
    class RacingStorage(PostgresStorage):
        def get_student_by_student_id(self, student_id):
            return None

        def get_student_by_email(self, email):
            return None

    racing = RacingStorage(make_sql_storage().engine)
    app.dependency_overrides[get_storage] = lambda: racing
    try:
        client = TestClient(app, raise_server_exceptions=False)
        assert client.post('/api/students', json=new_student()).status_code == 201
        r = client.post('/api/students', json=new_student())
        assert r.status_code == 500
        assert r.json() == {'message': 'Internal server error'}
    finally:
        app.dependency_overrides.clear()


def test_malformed_json_is_400(client):
    r = client.post('/api/admin/login', content=b'{not json', headers={'Content-Type': 'application/json'})
    assert r.status_code == 400
    assert r.json()['message'].startswith('Validation error')


def test_unknown_route_uses_message_body(client):
    r = client.get('/api/nothing-here')
    assert r.status_code == 404
    assert 'message' in r.json()


def test_format_validation_errors():
    errors = [
        {'loc': ('body', 'username'), 'msg': 'Field required'},
        {'loc': ('body', 'password'), 'msg': 'String should have at least 1 character'},
        {'loc': ('body',), 'msg': 'Field required'},
    ]
    assert format_validation_errors(errors) == (
        'Validation error: Field required at "username"; '
        'String should have at least 1 character at "password"; Field required'
    )


def test_settings_defaults_and_url():
    settings = Settings(postgres_user='u', postgres_password='p', postgres_host='db', postgres_port=6543, postgres_db='d')
    assert settings.postgres_url == 'postgresql://u:p@db:6543/d'
    assert Settings().storage_backend in ('mongodb', 'postgres')


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv('STORAGE_BACKEND', 'postgres')
    monkeypatch.setenv('ADMIN_PASSWORD', 'changed')
    settings = Settings()
    assert settings.storage_backend == 'postgres'
    assert settings.admin_password == 'changed'


def test_get_storage_builds_configured_backend(monkeypatch):
    sql_engine = make_sql_storage().engine
    mongo_db = mongomock.MongoClient()['factory_test']
    monkeypatch.setattr('student_portal.db.postgres.get_engine', lambda: sql_engine)
    monkeypatch.setattr('student_portal.db.mongodb.get_mongo_db', lambda: mongo_db)

    try:
        monkeypatch.setattr(storage_module, 'get_settings', lambda: Settings(storage_backend='postgres'))
        get_storage.cache_clear()
        built = get_storage()
        assert isinstance(built, PostgresStorage)
        assert get_storage() is built

        monkeypatch.setattr(storage_module, 'get_settings', lambda: Settings(storage_backend='mongodb'))
        get_storage.cache_clear()
        assert isinstance(get_storage(), MongoStorage)
    finally:
        get_storage.cache_clear()


def test_startup_prepares_storage_and_seeds_admin(monkeypatch):
    storage = make_mongo_storage()
    monkeypatch.setattr('student_portal.main.get_storage', lambda: storage)
    monkeypatch.setattr('student_portal.main.settings', make_test_settings(admin_username='head'))

    assert storage.get_admin_by_username('head') is None
    with TestClient(app):
        admin = storage.get_admin_by_username('head')
        assert admin is not None
        assert admin.name == 'Administrator'

    # a second start finds the existing admin
    with TestClient(app):
        assert storage.get_admin_by_username('head').id == admin.id


def test_startup_failure_does_not_stop_the_app(monkeypatch):
    class UnreachableStorage(PostgresStorage):
        def init(self):
            raise ConnectionError('database is down')

    storage = UnreachableStorage(make_sql_storage().engine)
    monkeypatch.setattr('student_portal.main.get_storage', lambda: storage)
    monkeypatch.setattr('student_portal.main.settings', make_test_settings())
    app.dependency_overrides[get_storage] = lambda: storage
    try:
        with TestClient(app) as client:
            r = client.get('/health')
            assert r.status_code == 200
            assert r.json()['status'] == 'healthy'
        # seeding never ran
        assert storage.get_admin_by_username('admin') is None
    finally:
        app.dependency_overrides.clear()
