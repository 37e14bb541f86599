from fastapi.testclient import TestClient

from mentorship.auth.jwt_handler import TokenIssuer
from mentorship.auth.store import SqlAlchemyIdentityStore
from mentorship.core.config import Settings, get_settings
from mentorship.main import app
from mentorship.models.user import User

ALICE = {
    'firstName': 'Alice',
    'lastName': 'Liddell',
    'phone': '5551234567',
    'role': 'student',
    'email': 'alice@example.com',
    'password': 'pw123456',
}
ALICE_PROFILE = {
    'firstname': 'Alice',
    'lastname': 'Liddell',
    'email': 'alice@example.com',
    'role': 'student',
}


def _set_cookie_headers(response) -> list[str]:
    return [value.lower() for value in response.headers.get_list('set-cookie')]


def test_signup_returns_created_profile_without_secret(client: TestClient, db) -> None:
    response = client.post('/auth/signup', json=ALICE)

    assert response.status_code == 201
    assert response.json() == {'message': 'User registered successfully', 'user': ALICE_PROFILE}
    assert 'password' not in response.text
    assert 'hashed_password' not in response.text
    assert db.query(User).one().hashed_password != 'pw123456'


def test_signup_sets_token_and_id_cookies(client: TestClient, settings: Settings, db) -> None:
    response = client.post('/auth/signup', json=ALICE)

    user = db.query(User).one()
    assert TokenIssuer.from_settings(settings).decode(response.cookies['token']) == user.id
    assert response.cookies['id'] == str(user.id)
    token_header = next(header for header in _set_cookie_headers(response) if header.startswith('token='))
    assert 'httponly' in token_header
    assert 'samesite=lax' in token_header
    assert 'secure' not in token_header
    assert 'max-age=3600' in token_header


def test_signup_rejects_duplicate_email(client: TestClient, db) -> None:
    client.post('/auth/signup', json=ALICE)

    response = client.post('/auth/signup', json={**ALICE, 'firstName': 'Mallory'})

    assert response.status_code == 401
    assert response.json() == {'message': 'User already registered'}
    assert db.query(User).count() == 1


def test_signup_returns_field_errors_for_invalid_input(client: TestClient, db) -> None:
    response = client.post('/auth/signup', json={**ALICE, 'email': 'nope'})

    assert response.status_code == 400
    assert [error['field'] for error in response.json()['errors']] == ['email']
    assert db.query(User).count() == 0


def test_signup_rejects_malformed_json_as_bad_request(client: TestClient) -> None:
    response = client.post(
        '/auth/signup',
        content='{"email": ',
        headers={'content-type': 'application/json'},
    )

    assert response.status_code == 400
    assert 'errors' in response.json()


def test_signin_with_valid_credentials_sets_cookie(client: TestClient) -> None:
    client.post('/auth/signup', json=ALICE)
    client.cookies.clear()

    response = client.post('/auth/signin', json={'email': 'alice@example.com', 'password': 'pw123456'})

    assert response.status_code == 200
    assert response.json() == ALICE_PROFILE
    assert response.cookies.get('token')


def test_signin_with_wrong_password_returns_401(client: TestClient) -> None:
    client.post('/auth/signup', json=ALICE)
    client.cookies.clear()

    response = client.post('/auth/signin', json={'email': 'alice@example.com', 'password': 'wrongpw'})

    assert response.status_code == 401
    assert response.json() == {'message': 'Invalid password'}
    assert 'token' not in response.cookies


def test_signin_with_unknown_email_returns_409(client: TestClient) -> None:
    response = client.post('/auth/signin', json={'email': 'ghost@example.com', 'password': 'pw123456'})

    assert response.status_code == 409
    assert response.json() == {'message': 'User not registered'}


def test_signin_rejects_password_that_is_not_valid_text(client: TestClient) -> None:
    client.post('/auth/signup', json=ALICE)
    client.cookies.clear()

    response = client.post(
        '/auth/signin',
        content=r'{"email": "alice@example.com", "password": "\ud800x"}',
        headers={'content-type': 'application/json'},
    )

    assert response.status_code == 400
    assert response.json()['errors'] == [{'field': 'password', 'message': 'Password must be valid text.'}]
    assert 'token' not in response.cookies


def test_signup_rejects_password_that_is_not_valid_text(client: TestClient, db) -> None:
    body = r'{"firstName": "Alice", "lastName": "Liddell", "phone": "5551234567", "role": "student", '
    body += r'"email": "alice@example.com", "password": "\ud800abcdefg"}'

    response = client.post('/auth/signup', content=body, headers={'content-type': 'application/json'})

    assert response.status_code == 400
    assert response.json()['errors'] == [{'field': 'password', 'message': 'Password must be valid text.'}]
    assert 'codec' not in response.text
    assert db.query(User).count() == 0


def test_signin_without_password_returns_400(client: TestClient) -> None:
    response = client.post('/auth/signin', json={'email': 'alice@example.com'})

    assert response.status_code == 400
    assert response.json()['errors'] == [{'field': 'password', 'message': 'Field required'}]


def test_who_am_i_returns_profile_of_cookie_holder(client: TestClient) -> None:
    client.post('/auth/signup', json=ALICE)

    response = client.post('/auth/')

    assert response.status_code == 200
    assert response.json() == ALICE_PROFILE


def test_who_am_i_ignores_the_id_cookie(client: TestClient, db) -> None:
    client.post('/auth/signup', json=ALICE)
    client.post('/auth/signup', json={**ALICE, 'email': 'bob@example.com', 'firstName': 'Bob'})
    bob = db.query(User).filter(User.email == 'bob@example.com').one()
    alice = db.query(User).filter(User.email == 'alice@example.com').one()
    client.cookies.set('id', str(alice.id))

    response = client.post('/auth/')

    assert response.json()['email'] == bob.email


def test_who_am_i_returns_empty_response_when_user_is_gone(client: TestClient, settings: Settings) -> None:
    client.cookies.set('token', TokenIssuer.from_settings(settings).issue(404))

    response = client.post('/auth/')

    assert response.status_code == 204
    assert response.content == b''


def test_who_am_i_requires_session(client: TestClient) -> None:
    response = client.post('/auth/')

    assert response.status_code == 401
    assert response.json() == {'message': 'Not authenticated'}


def test_who_am_i_rejects_forged_token(client: TestClient) -> None:
    client.cookies.set('token', TokenIssuer('attacker-secret').issue(1))

    response = client.post('/auth/')

    assert response.status_code == 401
    assert response.json() == {'message': 'Invalid token'}


def test_logout_without_session_returns_401(client: TestClient) -> None:
    response = client.post('/auth/logout')

    assert response.status_code == 401


def test_logout_clears_cookie_and_can_be_repeated_with_same_token(client: TestClient) -> None:
    signup = client.post('/auth/signup', json=ALICE)
    token = signup.cookies['token']

    first = client.post('/auth/logout')

    assert first.status_code == 200
    assert first.json() == {'message': 'Logged out successfully'}
    assert any(header.startswith('token=') and 'max-age=0' in header for header in _set_cookie_headers(first))
    assert 'token' not in client.cookies

    client.cookies.set('token', token)
    second = client.post('/auth/logout')

    assert second.status_code == 200


def test_production_cookies_are_secure_and_strict(client: TestClient, settings: Settings) -> None:
    app.dependency_overrides[get_settings] = lambda: Settings(
        jwt_secret_key=settings.jwt_secret_key,
        app_env='production',
        bcrypt_rounds=4,
    )

    response = client.post('/auth/signup', json=ALICE)

    token_header = next(header for header in _set_cookie_headers(response) if header.startswith('token='))
    assert 'secure' in token_header
    assert 'samesite=strict' in token_header


def test_unexpected_store_failure_returns_generic_internal_error(client: TestClient, monkeypatch) -> None:
    def broken_lookup(self, email):
        raise RuntimeError('connection refused by db-host:5432')

    monkeypatch.setattr(SqlAlchemyIdentityStore, 'get_by_email', broken_lookup)
    safe_client = TestClient(app, raise_server_exceptions=False)

    response = safe_client.post('/auth/signin', json={'email': 'alice@example.com', 'password': 'pw123456'})

    assert response.status_code == 500
    assert response.json() == {'message': 'Internal server error'}
    assert 'db-host' not in response.text
