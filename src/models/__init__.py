from src.models.patient_db import Patient
from src.models.physician_db import Physician
from src.models.appointments_db import Appointment
from src.models.user_db import User
