import pytest

from app.core.services.auth_service import AuthService
from app.infrastructure.config.config import AdminConfig
from tests.conftest import ADMIN_PASSWORD, ADMIN_USERNAME


@pytest.fixture
def auth_service(admin_config):
    return AuthService(admin_config)


class TestAuthService:

    async def test_correct_credentials(self, auth_service):
        assert await auth_service.verify(ADMIN_USERNAME, ADMIN_PASSWORD) is True

    async def test_wrong_password(self, auth_service):
        assert await auth_service.verify(ADMIN_USERNAME, "wrong") is False

    async def test_wrong_username(self, auth_service):
        assert await auth_service.verify("someone", ADMIN_PASSWORD) is False

    async def test_non_ascii_username(self, auth_service):
        assert await auth_service.verify("Ädmin", ADMIN_PASSWORD) is False

    def test_username_mismatch_still_hashes(self, auth_service, monkeypatch):
        checked = []
        original = auth_service._verify_password

        def spy(plain_password, hashed_password):
            checked.append(hashed_password)
            return original(plain_password, hashed_password)

        monkeypatch.setattr(auth_service, "_verify_password", spy)

        assert auth_service.verify_sync("someone", ADMIN_PASSWORD) is False
        assert auth_service.verify_sync(ADMIN_USERNAME, "wrong") is False
        assert len(checked) == 2

    def test_missing_hash_never_authenticates(self):
        service = AuthService(AdminConfig(ADMIN_USERNAME=ADMIN_USERNAME, ADMIN_PASSWORD_HASH=""))

        assert service.verify_sync(ADMIN_USERNAME, "") is False
        assert service.verify_sync(ADMIN_USERNAME, ADMIN_PASSWORD) is False

    def test_malformed_hash_never_authenticates(self):
        service = AuthService(AdminConfig(ADMIN_USERNAME=ADMIN_USERNAME, ADMIN_PASSWORD_HASH="not-a-hash"))

        assert service.verify_sync(ADMIN_USERNAME, ADMIN_PASSWORD) is False
