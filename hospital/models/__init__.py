from hospital.models.user_models import User
from hospital.models.patient_models import Patient
from hospital.models.admission_models import Admission, VitalSign
from hospital.models.doctor_models import Doctor
from hospital.models.appointment_models import Appointment
from hospital.models.system_models import AuditLog, EntitySequence
