"""
Tests unitaires du hachage des mots de passe.
"""

from app.services.password_service import hash_password, hash_password_field, verify_password


def test_hash_different_du_mot_de_passe():
    hashed = hash_password("password123")
    assert hashed != "password123"
    assert hashed.startswith("$2")


def test_verify_password():
    hashed = hash_password("password123")
    assert verify_password("password123", hashed)
    assert not verify_password("mauvais", hashed)


def test_hash_sel_aleatoire():
    assert hash_password("password123") != hash_password("password123")


def test_mot_de_passe_long_tronque_a_72_octets():
    long_password = "a" * 100
    hashed = hash_password(long_password)
    assert verify_password("a" * 72, hashed)


def test_hash_password_field_remplace_la_cle():
    payload = hash_password_field({"name": "Caio", "password": "secret"})
    assert "password" not in payload
    assert verify_password("secret", payload["password_hash"])
    assert payload["name"] == "Caio"


def test_hash_password_field_sans_mot_de_passe():
    payload = {"status": "off"}
    assert hash_password_field(payload) == {"status": "off"}
