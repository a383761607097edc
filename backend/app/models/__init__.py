# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant l'appel à Base.metadata.create_all() au démarrage.

from app.models.user import User  # noqa: F401
from app.models.teacher import Teacher  # noqa: F401
from app.models.student import Student  # noqa: F401
from app.models.health_professional import HealthProfessional  # noqa: F401
from app.models.event import Event  # noqa: F401
from app.models.appointment import Appointment  # noqa: F401
