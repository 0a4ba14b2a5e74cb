import pytest

from users_app.models import UserRole


def login(api, email, password="pass1234"):
    return api.post(
        "/users/login/", {"email": email, "password": password}, format="json")


@pytest.mark.django_db
def test_login_success_sets_cookies_and_returns_role(api, dashboard_admin, settings):
    resp = login(api, "admin@example.com")
    assert resp.status_code == 200
    assert resp.data["role"] == "ADMIN"
    assert resp.cookies[settings.JWT_ACCESS_COOKIE_NAME].value
    assert resp.cookies[settings.JWT_REFRESH_COOKIE_NAME].value


@pytest.mark.django_db
def test_login_by_email_when_username_differs(api, User):
    User.objects.create_user(
        username="evan",
        email="evan@example.com",
        password="pass1234",
        role=UserRole.ADMIN,
    )
    resp = login(api, "Evan@Example.com")
    assert resp.status_code == 200
    assert resp.data["username"] == "evan"
    assert resp.data["role"] == "ADMIN"


@pytest.mark.django_db
def test_login_fails_for_unknown_email(api):
    resp = login(api, "nobody@example.com")
    assert resp.status_code == 400


@pytest.mark.django_db
def test_login_fails_for_inactive(api, user_inactive):
    resp = login(api, "inactive@example.com")
    assert resp.status_code == 400


@pytest.mark.django_db
def test_login_fails_for_wrong_password(api, user_active):
    resp = login(api, "active@example.com", password="wrong")
    assert resp.status_code == 400


@pytest.mark.django_db
def test_me_is_anonymous_without_session(api):
    resp = api.get("/users/me/")
    assert resp.status_code == 200
    assert resp.data == {"role": "ANONYMOUS", "user": None}


@pytest.mark.django_db
def test_me_resolves_role_from_cookie_session(api, dashboard_admin):
    login(api, "admin@example.com")
    resp = api.get("/users/me/")
    assert resp.status_code == 200
    assert resp.data["role"] == "ADMIN"
    assert resp.data["user"]["email"] == "admin@example.com"


@pytest.mark.django_db
def test_me_for_regular_user(api, user_active):
    login(api, "active@example.com")
    resp = api.get("/users/me/")
    assert resp.data["role"] == "USER"


@pytest.mark.django_db
def test_refresh_issues_new_access_cookie(api, user_active, settings):
    login(api, "active@example.com")
    resp = api.post("/users/refresh/")
    assert resp.status_code == 200
    assert resp.cookies[settings.JWT_ACCESS_COOKIE_NAME].value


@pytest.mark.django_db
def test_refresh_without_cookie_is_401(api):
    resp = api.post("/users/refresh/")
    assert resp.status_code == 401


@pytest.mark.django_db
def test_logout_clears_cookies(api, user_active, settings):
    login(api, "active@example.com")
    resp = api.post("/users/logout/")
    assert resp.status_code == 200
    assert resp.cookies[settings.JWT_ACCESS_COOKIE_NAME].value == ""
    assert resp.cookies[settings.JWT_REFRESH_COOKIE_NAME].value == ""
