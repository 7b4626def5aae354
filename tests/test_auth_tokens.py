"""
Tests for JWT payload decoding and expiry checks.
"""

from pricewatch.auth_tokens import decode_jwt, get_token_data, is_token_expired


class TestDecodeJwt:
    def test_decodes_payload(self, make_token):
        token = make_token(sub="a@b.com", role="ADMIN", id=3, exp=2000000000)
        assert decode_jwt(token) == {"sub": "a@b.com", "role": "ADMIN", "id": 3, "exp": 2000000000}

    def test_malformed_tokens_return_none(self):
        assert decode_jwt(None) is None
        assert decode_jwt("") is None
        assert decode_jwt("no-dots") is None
        assert decode_jwt("a.!!!notbase64!!!.c") is None


class TestExpiry:
    def test_future_exp_is_valid(self, make_token):
        assert not is_token_expired(make_token(exp=1000), now=999)

    def test_past_exp_is_expired(self, make_token):
        assert is_token_expired(make_token(exp=1000), now=1001)

    def test_missing_exp_counts_as_expired(self, make_token):
        assert is_token_expired(make_token(sub="x"))

    def test_garbage_counts_as_expired(self):
        assert is_token_expired("garbage")


def test_get_token_data_reads_identity(make_token):
    data = get_token_data(make_token(id=42, role="ADMIN", sub="admin@example.com"))
    assert data.id == "42"
    assert data.role == "ADMIN"
    assert data.email == "admin@example.com"
    assert get_token_data("bad") is None
