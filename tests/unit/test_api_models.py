"""Tests for authentication data models."""
import pytest

from pysbss.core.api.models import AuthRequest, AuthResponse, ApiKeyData, AuthSession


class TestAuthRequest:
    """Test suite for AuthRequest."""
    
    def test_create_defaults(self):
        """Test default flags of a new request."""
        auth = AuthRequest.create('user1', 'password1')
        
        assert auth.login == 'user1'
        assert auth.password == 'password1'
        assert auth.async_mode is True
        assert auth.remember is False
        assert auth.signed is False
    
    def test_authorize_is_login_before_signing(self):
        """Test authorize field carries the plain login."""
        auth = AuthRequest.create('user1', 'password1')
        
        assert auth.authorize == 'user1'
    
    def test_to_form_excludes_password(self):
        """Test password never appears in form fields."""
        auth = AuthRequest.create('user1', 'password1')
        form = auth.to_form()
        
        assert form == {
            'async': '1',
            'authorize': 'user1',
            'login': 'user1',
            'remember': '0',
        }
        assert 'password1' not in form.values()
    
    def test_apply_signature(self):
        """Test signature replaces login in authorize field."""
        auth = AuthRequest.create('user1', 'password1')
        auth.apply_signature('abc123')
        
        assert auth.signed
        assert auth.authorize == 'abc123'
        assert auth.to_form()['login'] == 'user1'
    
    def test_clear_signature_restores_login(self):
        """Test clearing the signature restores the unsigned shape."""
        auth = AuthRequest.create('user1', 'password1')
        before = auth.to_form()
        
        auth.apply_signature('abc123')
        auth.clear_signature()
        
        assert auth.to_form() == before
        assert not auth.signed
    
    def test_repr_hides_secrets(self):
        """Test repr does not leak password or signature."""
        auth = AuthRequest.create('user1', 'password1')
        auth.apply_signature('deadbeef')
        
        text = repr(auth)
        
        assert 'password1' not in text
        assert 'deadbeef' not in text
        assert 'user1' in text
    
    def test_remember_flag(self):
        auth = AuthRequest('user1', 'password1', remember=True, async_mode=False)
        
        form = auth.to_form()
        
        assert form['remember'] == '1'
        assert form['async'] == '0'


class TestAuthResponse:
    """Test suite for AuthResponse."""
    
    def test_from_dict_challenge(self):
        """Test parsing a challenge response."""
        data = {
            'success': False,
            'authorized': False,
            'login': None,
            'challenge': 8545724,
            'cname': '3b47a663b0765fe1',
        }
        
        result = AuthResponse.from_dict(data)
        
        assert result.success is False
        assert result.authorized is False
        assert result.login is None
        assert result.challenge == 8545724
        assert result.cname == '3b47a663b0765fe1'
    
    def test_from_dict_minimal(self):
        """Test missing fields fall back to defaults."""
        result = AuthResponse.from_dict({'success': True})
        
        assert result.success is True
        assert result.challenge == 0
        assert result.cname == ''
        assert result.login is None
    
    def test_from_dict_null_challenge(self):
        result = AuthResponse.from_dict({'success': False, 'challenge': None})
        
        assert result.challenge == 0
    
    def test_from_dict_large_challenge(self):
        """Test 64-bit challenges are kept intact."""
        result = AuthResponse.from_dict({'challenge': 7374616523})
        
        assert result.challenge == 7374616523
    
    def test_from_dict_rejects_list(self):
        with pytest.raises(TypeError):
            AuthResponse.from_dict([1, 2])
    
    @pytest.mark.parametrize("data", [
        {'success': 'false'},
        {'success': 1},
        {'authorized': 'true'},
        {'login': 42},
        {'cname': ['x']},
    ])
    def test_from_dict_rejects_wrong_types(self, data):
        """Test values are never coerced by truthiness."""
        with pytest.raises(TypeError):
            AuthResponse.from_dict(data)
    
    @pytest.mark.parametrize("challenge", [5698316.9, 5698316.0, '5698316', True])
    def test_from_dict_rejects_non_integer_challenge(self, challenge):
        """Test challenges are not truncated or parsed from strings."""
        with pytest.raises(ValueError):
            AuthResponse.from_dict({'success': False, 'challenge': challenge})
    
    def test_from_dict_null_fields(self):
        result = AuthResponse.from_dict({'success': None, 'cname': None})
        
        assert result.success is False
        assert result.cname == ''


class TestAuthSession:
    """Test suite for AuthSession."""
    
    def test_starts_unauthorized(self):
        assert AuthSession().authorized is False
    
    def test_mark_authorized(self):
        session = AuthSession()
        session.mark_authorized()
        
        assert session.authorized is True
    
    def test_mark_authorized_is_idempotent(self):
        session = AuthSession()
        session.mark_authorized()
        session.mark_authorized()
        
        assert session.authorized is True
    
    def test_authorized_is_read_only(self):
        """Test the flag cannot be reset through the property."""
        session = AuthSession()
        session.mark_authorized()
        
        with pytest.raises(AttributeError):
            session.authorized = False


class TestApiKeyData:
    """Test suite for ApiKeyData."""
    
    def test_headers_and_cookies(self):
        key = ApiKeyData(login='admin', cookie_name='sbss_key', cookie_value='secret')
        
        assert key.headers() == {'X-Sbss-Auth': 'admin'}
        assert key.cookies() == {'sbss_key': 'secret'}
    
    def test_repr_hides_key(self):
        key = ApiKeyData(login='admin', cookie_name='sbss_key', cookie_value='secret')
        
        assert 'secret' not in repr(key)
