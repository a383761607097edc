"""
Déclaration des six ressources exposées par l'API.
L'ordre de RESOURCES est l'ordre de montage des routers et des tags dans la documentation.
"""

from app.models import Appointment, Event, HealthProfessional, Student, Teacher, User
from app.schemas.appointment import AppointmentCreate, AppointmentResponse, AppointmentUpdate
from app.schemas.event import EventCreate, EventResponse, EventUpdate
from app.schemas.health_professional import (
    HealthProfessionalCreate,
    HealthProfessionalResponse,
    HealthProfessionalUpdate,
)
from app.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from app.schemas.teacher import TeacherCreate, TeacherResponse, TeacherUpdate
from app.schemas.user import UserCreate, UserResponse, UserUpdate
from app.services.crud_service import ResourceDescriptor, SearchMode
from app.services.password_service import hash_password_field

USERS = ResourceDescriptor(
    prefix="users",
    model=User,
    create_schema=UserCreate,
    update_schema=UserUpdate,
    response_schema=UserResponse,
    search_param="name",
    search_field="name",
    search_mode=SearchMode.SUBSTRING,
    tag="Utilisateurs",
    label="Utilisateur",
    label_plural="utilisateurs",
    prepare=hash_password_field,
)

TEACHERS = ResourceDescriptor(
    prefix="teachers",
    model=Teacher,
    create_schema=TeacherCreate,
    update_schema=TeacherUpdate,
    response_schema=TeacherResponse,
    search_param="name",
    search_field="name",
    search_mode=SearchMode.SUBSTRING,
    tag="Enseignants",
    label="Enseignant",
    label_plural="enseignants",
)

STUDENTS = ResourceDescriptor(
    prefix="students",
    model=Student,
    create_schema=StudentCreate,
    update_schema=StudentUpdate,
    response_schema=StudentResponse,
    search_param="name",
    search_field="name",
    search_mode=SearchMode.SUBSTRING,
    tag="Élèves",
    label="Élève",
    label_plural="élèves",
)

HEALTH_PROFESSIONALS = ResourceDescriptor(
    prefix="prof-saude",
    model=HealthProfessional,
    create_schema=HealthProfessionalCreate,
    update_schema=HealthProfessionalUpdate,
    response_schema=HealthProfessionalResponse,
    search_param="name",
    search_field="name",
    search_mode=SearchMode.SUBSTRING,
    tag="Professionnels de santé",
    label="Professionnel de santé",
    label_plural="professionnels de santé",
)

EVENTS = ResourceDescriptor(
    prefix="events",
    model=Event,
    create_schema=EventCreate,
    update_schema=EventUpdate,
    response_schema=EventResponse,
    search_param="date",
    search_field="date",
    search_mode=SearchMode.DAY_RANGE,
    tag="Événements",
    label="Événement",
    label_plural="événements",
)

APPOINTMENTS = ResourceDescriptor(
    prefix="appointments",
    model=Appointment,
    create_schema=AppointmentCreate,
    update_schema=AppointmentUpdate,
    response_schema=AppointmentResponse,
    search_param="date",
    search_field="date",
    search_mode=SearchMode.DAY_RANGE,
    tag="Rendez-vous de santé",
    label="Rendez-vous",
    label_plural="rendez-vous",
)

RESOURCES = [USERS, TEACHERS, STUDENTS, HEALTH_PROFESSIONALS, EVENTS, APPOINTMENTS]
