"""
Tests for CredentialIssuer (register / login).
"""

import pytest

from api.schemas import LoginRequest, RegisterRequest
from auth.issuer import CredentialIssuer
from auth.tokens import decode_token
from utils.errors import AuthenticationError, PersistenceError, ValidationError


def _register_request(**overrides) -> RegisterRequest:
    data = {
        "firstName": "Ana",
        "lastName": "Silva",
        "phone": "123",
        "cityState": "SP",
        "email": "a@b.com",
        "password": "secret1",
    }
    data.update(overrides)
    return RegisterRequest.model_validate(data)


class TestRegister:
    @pytest.mark.asyncio
    async def test_stores_hash_and_default_tier(self, settings, repo):
        issuer = CredentialIssuer(settings)
        user_id = await issuer.register(repo, _register_request())

        user = await repo.get_by_id(user_id)
        assert user.password_hash != "secret1"
        assert user.password_hash.startswith("$2b$")
        assert user.user_type == "Free"
        assert user.first_name == "Ana"
        assert user.city_state == "SP"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["firstName", "lastName", "phone", "cityState", "email", "password"])
    async def test_missing_field(self, settings, repo, field):
        issuer = CredentialIssuer(settings)
        with pytest.raises(ValidationError) as info:
            await issuer.register(repo, _register_request(**{field: None}))
        assert info.value.message == "Todos os campos são obrigatórios."
        assert repo.users == {}

    @pytest.mark.asyncio
    async def test_blank_field(self, settings, repo):
        with pytest.raises(ValidationError):
            await CredentialIssuer(settings).register(repo, _register_request(lastName="   "))

    @pytest.mark.asyncio
    async def test_duplicate_email_is_persistence_error(self, settings, repo):
        issuer = CredentialIssuer(settings)
        await issuer.register(repo, _register_request())
        with pytest.raises(PersistenceError) as info:
            await issuer.register(repo, _register_request(firstName="Bia"))
        assert info.value.status_code == 500
        assert info.value.message == "Erro ao registrar usuário."


class TestLogin:
    @pytest.mark.asyncio
    async def test_round_trip(self, settings, repo):
        issuer = CredentialIssuer(settings)
        user_id = await issuer.register(repo, _register_request())

        result = await issuer.login(repo, LoginRequest(email="a@b.com", password="secret1"))

        assert result.user_type == "Free"
        assert result.user_id == user_id
        assert result.expires_in == settings.jwt_expiry_seconds
        claims = decode_token(settings, result.token)
        assert claims["userId"] == user_id
        assert claims["userType"] == "Free"

    @pytest.mark.asyncio
    async def test_unknown_email(self, settings, repo):
        with pytest.raises(AuthenticationError) as info:
            await CredentialIssuer(settings).login(repo, LoginRequest(email="x@y.com", password="secret1"))
        assert info.value.status_code == 400
        assert info.value.message == "Usuário não encontrado."

    @pytest.mark.asyncio
    async def test_wrong_password(self, settings, repo):
        issuer = CredentialIssuer(settings)
        await issuer.register(repo, _register_request())
        with pytest.raises(AuthenticationError) as info:
            await issuer.login(repo, LoginRequest(email="a@b.com", password="wrong"))
        assert info.value.message == "Senha incorreta."

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email,password", [(None, "x"), ("a@b.com", None), ("", "")])
    async def test_missing_credentials(self, settings, repo, email, password):
        with pytest.raises(ValidationError) as info:
            await CredentialIssuer(settings).login(repo, LoginRequest(email=email, password=password))
        assert info.value.message == "E-mail e senha são obrigatórios."

    @pytest.mark.asyncio
    async def test_store_failure(self, settings, repo):
        repo.fail = True
        with pytest.raises(PersistenceError) as info:
            await CredentialIssuer(settings).login(repo, LoginRequest(email="a@b.com", password="secret1"))
        assert info.value.message == "Erro ao fazer login."


class TestInputEdgeCases:
    @pytest.mark.asyncio
    async def test_register_and_login_with_80_byte_password(self, settings, repo):
        issuer = CredentialIssuer(settings)
        password = "x" * 80
        user_id = await issuer.register(repo, _register_request(password=password))

        result = await issuer.login(repo, LoginRequest(email="a@b.com", password=password))
        assert result.user_id == user_id

    @pytest.mark.asyncio
    async def test_numeric_phone_is_stored_as_text(self, settings, repo):
        user_id = await CredentialIssuer(settings).register(repo, _register_request(phone=11999999999))
        user = await repo.get_by_id(user_id)
        assert user.phone == "11999999999"
