"""
Hachage des mots de passe utilisateurs avec bcrypt.
Seul le hash est persisté ; le mot de passe en clair n'est jamais stocké ni renvoyé.
"""

import bcrypt

from app.config import settings

# Limite imposée par bcrypt : les octets au-delà de 72 sont ignorés
BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    """Retourne le hash bcrypt (chaîne) du mot de passe fourni."""
    password_bytes = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password_bytes, salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Vérifie un mot de passe en clair contre un hash bcrypt existant."""
    password_bytes = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.checkpw(password_bytes, password_hash.encode("utf-8"))


def hash_password_field(payload: dict) -> dict:
    """
    Remplace la clé `password` d'un payload utilisateur par `password_hash`.
    Sans mot de passe dans le payload (mise à jour partielle), il est renvoyé tel quel.
    """
    if "password" not in payload:
        return payload
    prepared = dict(payload)
    prepared["password_hash"] = hash_password(prepared.pop("password"))
    return prepared
