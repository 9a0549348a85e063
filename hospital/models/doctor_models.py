from hospital.extensions import db
from hospital.utils.time_utils import utcnow, isoformat

SPECIALIZATIONS = (
    'General Medicine', 'Surgery', 'Orthopedics', 'Pediatrics', 'ENT',
    'Ophthalmology', 'Gynecology', 'Dermatology', 'Oncology', 'Cardiology'
)
WEEKDAYS = ('Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday')
DOCTOR_STATUSES = ('active', 'inactive', 'on-leave')

class Doctor(db.Model):
    """Model for storing doctor-specific profile information."""
    __tablename__ = 'doctors'

    id = db.Column(db.Integer, primary_key=True)
    doctor_code = db.Column(db.String(9), unique=True, nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, unique=True)

    specialization = db.Column(db.String(50), nullable=False, index=True)
    department = db.Column(db.String(100), nullable=False)
    qualification = db.Column(db.String(255), nullable=False)
    experience = db.Column(db.Integer, nullable=False)
    contact_number = db.Column(db.String(50), nullable=False)
    available_days = db.Column(db.JSON, default=list)
    available_from = db.Column(db.String(5))
    available_until = db.Column(db.String(5))
    consultation_fee = db.Column(db.Float, nullable=False)
    status = db.Column(db.String(20), nullable=False, default='active')

    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    user = db.relationship('User', back_populates='doctor_profile')
    appointments = db.relationship('Appointment', back_populates='doctor', lazy='dynamic')

    def to_summary(self):
        return {
            'id': self.id,
            'doctorId': self.doctor_code,
            'name': self.user.name if self.user else None,
            'specialization': self.specialization,
        }

    def to_dict(self):
        return {
            'id': self.id,
            'doctorId': self.doctor_code,
            'user': self.user.to_summary() if self.user else None,
            'specialization': self.specialization,
            'department': self.department,
            'qualification': self.qualification,
            'experience': self.experience,
            'contactNumber': self.contact_number,
            'availability': {
                'days': self.available_days or [],
                'startTime': self.available_from,
                'endTime': self.available_until,
            },
            'consultationFee': self.consultation_fee,
            'status': self.status,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }
