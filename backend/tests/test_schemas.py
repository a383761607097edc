"""
Tests unitaires des schémas Pydantic : champs obligatoires, nettoyage, dates UTC.
"""

import datetime as dt

import pytest
from pydantic import ValidationError

from app.schemas.event import EventCreate, EventResponse, EventUpdate
from app.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from app.schemas.teacher import TeacherCreate
from app.schemas.user import UserCreate, UserResponse, UserUpdate


def test_student_create_statut_par_defaut():
    s = StudentCreate(name="  Bingo Heeler ", age="6", parents="Bandit", phone="48 9696 5858")
    assert s.name == "Bingo Heeler"  # strip appliqué
    assert s.status == "on"
    assert s.special_needs is None


def test_student_create_champ_manquant():
    with pytest.raises(ValidationError):
        StudentCreate(name="Bingo", age="6", parents="Bandit")


def test_student_update_partiel():
    u = StudentUpdate(status="off")
    assert u.model_dump(exclude_unset=True) == {"status": "off"}


def test_student_update_besoins_speciaux_effacables():
    u = StudentUpdate(special_needs=None)
    assert u.model_dump(exclude_unset=True) == {"special_needs": None}


def test_student_update_nom_null_rejete():
    with pytest.raises(ValidationError):
        StudentUpdate(name=None)


def test_teacher_create_email_invalide():
    with pytest.raises(ValidationError):
        TeacherCreate(name="Xavier", subject="Ciências", phone="48", email="xavier", status="ativo")


def test_teacher_create_statut_vide():
    with pytest.raises(ValidationError):
        TeacherCreate(name="Xavier", subject="Ciências", phone="48", email="x@escola.com", status="  ")


def test_user_create_mot_de_passe_vide():
    with pytest.raises(ValidationError):
        UserCreate(name="Caio", email="caio@nextfit.com.br", username="caio",
                   password="   ", access_level="admin", status="on")


def test_user_update_mot_de_passe_null_rejete():
    with pytest.raises(ValidationError):
        UserUpdate(password=None)


def test_user_response_sans_mot_de_passe():
    assert "password" not in UserResponse.model_fields
    assert "password_hash" not in UserResponse.model_fields


def test_event_create_date_convertie_en_utc_naive():
    e = EventCreate(description="Festa", comment="Pátio", date="2023-11-05T20:00:00-03:00")
    assert e.date == dt.datetime(2023, 11, 5, 23, 0, 0)
    assert e.date.tzinfo is None


def test_event_create_date_naive_consideree_utc():
    e = EventCreate(description="Festa", comment="Pátio", date="2023-11-05T14:00:00")
    assert e.date == dt.datetime(2023, 11, 5, 14, 0, 0)


def test_event_update_date_null_rejetee():
    with pytest.raises(ValidationError):
        EventUpdate(date=None)


def test_event_response_date_en_utc():
    r = EventResponse(id="6f1c8f0e-7a8e-4d8e-9a37-0d5c1f6d2b11", description="Festa",
                      comment="Pátio", date=dt.datetime(2023, 11, 5, 23, 59, 59))
    assert r.date.tzinfo == dt.timezone.utc
    assert r.model_dump(mode="json")["date"] == "2023-11-05T23:59:59Z"


def test_event_create_date_hors_limites_apres_conversion():
    """23h à UTC-5 le 9999-12-31 dépasse l'an 9999 en UTC."""
    with pytest.raises(ValidationError) as exc:
        EventCreate(description="Fim", comment="Limite", date="9999-12-31T23:00:00-05:00")
    assert "hors limites" in str(exc.value)


def test_student_create_caractere_nul_rejete():
    with pytest.raises(ValidationError):
        StudentCreate(name="Bingo\x00", age="6", parents="Bandit", phone="48")


def test_student_update_besoins_speciaux_caractere_nul_rejete():
    with pytest.raises(ValidationError):
        StudentUpdate(special_needs="TEA\x00")


def test_user_create_mot_de_passe_caractere_nul_rejete():
    with pytest.raises(ValidationError):
        UserCreate(name="Caio", email="caio@nextfit.com.br", username="caio",
                   password="secret\x00", access_level="admin", status="on")


def test_student_response_horodatages_en_utc():
    r = StudentResponse(id="6f1c8f0e-7a8e-4d8e-9a37-0d5c1f6d2b11", name="Bingo Heeler", age="6",
                        parents="Bandit Heeler", phone="48", special_needs=None, status="on",
                        created_at=dt.datetime(2023, 11, 5, 14, 0, 0),
                        updated_at=dt.datetime(2023, 11, 5, 15, 30, 0))
    data = r.model_dump(mode="json")
    assert data["created_at"] == "2023-11-05T14:00:00Z"
    assert data["updated_at"] == "2023-11-05T15:30:00Z"
