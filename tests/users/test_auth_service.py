import pytest

from src.worktime_tracker.worktime_tracker.core.exceptions import AuthenticationError
from src.worktime_tracker.worktime_tracker.users.service import AuthService


def test_authenticate_returns_session_user(users_repo):
    auth = AuthService(users_repo)

    user = auth.authenticate("  John@Example.com ", "password1")

    assert user.email == "john@example.com"
    assert user.name == "John Smith"


@pytest.mark.parametrize(
    "email,password",
    [
        ("john@example.com", "wrong"),
        ("nobody@example.com", "password1"),
        ("", "password1"),
        ("jane@example.com", "password2"),  # inactive account
    ],
)
def test_authenticate_rejects_invalid_credentials(users_repo, email, password):
    auth = AuthService(users_repo)

    with pytest.raises(AuthenticationError, match="Invalid email or password"):
        auth.authenticate(email, password)
