from hospital.extensions import db
from hospital.utils.time_utils import utcnow, isoformat

GENDERS = ('male', 'female', 'other')
BLOOD_GROUPS = ('A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-', 'Unknown')
PATIENT_STATUSES = ('active', 'discharged', 'referred')

class Patient(db.Model):
    """Model for registered patients."""
    __tablename__ = 'patients'

    id = db.Column(db.Integer, primary_key=True)
    patient_code = db.Column(db.String(9), unique=True, nullable=False, index=True)

    name = db.Column(db.String(255), nullable=False)
    age = db.Column(db.Integer, nullable=False)
    gender = db.Column(db.String(10), nullable=False)
    contact_number = db.Column(db.String(50), nullable=False)
    address = db.Column(db.JSON)  # street, city, state, zipCode
    blood_group = db.Column(db.String(10))
    known_diseases = db.Column(db.JSON, default=list)
    allergies = db.Column(db.JSON, default=list)
    current_complaints = db.Column(db.Text)

    registered_by_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    registration_date = db.Column(db.DateTime, nullable=False, default=utcnow)
    status = db.Column(db.String(20), nullable=False, default='active')

    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    registered_by = db.relationship('User')
    admissions = db.relationship(
        'Admission',
        back_populates='patient',
        cascade="all, delete-orphan"
    )
    appointments = db.relationship(
        'Appointment',
        back_populates='patient',
        cascade="all, delete-orphan"
    )

    def to_summary(self):
        return {'id': self.id, 'patientId': self.patient_code, 'name': self.name}

    def to_dict(self):
        return {
            'id': self.id,
            'patientId': self.patient_code,
            'name': self.name,
            'age': self.age,
            'gender': self.gender,
            'contactNumber': self.contact_number,
            'address': self.address,
            'bloodGroup': self.blood_group,
            'knownDiseases': self.known_diseases or [],
            'allergies': self.allergies or [],
            'currentComplaints': self.current_complaints,
            'registeredBy': self.registered_by.to_summary() if self.registered_by else None,
            'registrationDate': isoformat(self.registration_date),
            'status': self.status,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }
