from hospital.extensions import db
from hospital.utils.time_utils import utcnow, isoformat

APPOINTMENT_TYPES = ('consultation', 'follow-up', 'emergency', 'routine-checkup')
APPOINTMENT_STATUSES = ('scheduled', 'confirmed', 'completed', 'cancelled', 'no-show')

class Appointment(db.Model):
    """Model for a scheduled visit between a patient and a doctor."""
    __tablename__ = 'appointments'

    id = db.Column(db.Integer, primary_key=True)
    appointment_code = db.Column(db.String(9), unique=True, nullable=False, index=True)

    patient_id = db.Column(db.Integer, db.ForeignKey('patients.id'), nullable=False, index=True)
    doctor_id = db.Column(db.Integer, db.ForeignKey('doctors.id'), nullable=False, index=True)

    appointment_date = db.Column(db.Date, nullable=False, index=True)
    appointment_time = db.Column(db.String(5), nullable=False)  # HH:MM, 24-hour
    reason = db.Column(db.Text)
    type = db.Column(db.String(30), nullable=False, default='consultation')
    booked_by_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    status = db.Column(db.String(20), nullable=False, default='scheduled')

    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    patient = db.relationship('Patient', back_populates='appointments')
    doctor = db.relationship('Doctor', back_populates='appointments')
    booked_by = db.relationship('User')

    def to_dict(self):
        return {
            'id': self.id,
            'appointmentId': self.appointment_code,
            'patient': self.patient.to_summary() if self.patient else None,
            'doctor': self.doctor.to_summary() if self.doctor else None,
            'appointmentDate': isoformat(self.appointment_date),
            'appointmentTime': self.appointment_time,
            'reason': self.reason,
            'type': self.type,
            'bookedBy': self.booked_by.to_summary() if self.booked_by else None,
            'status': self.status,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }
