from hospital.extensions import db
from hospital.utils.time_utils import utcnow, isoformat

DEPARTMENTS = (
    'Medicine', 'Surgery', 'Orthopedics', 'Pediatrics', 'ENT',
    'Ophthalmology', 'Gynecology', 'Dermatology', 'Oncology'
)
ADMISSION_STATUSES = ('active', 'discharged')

class Admission(db.Model):
    """An inpatient stay. Status only ever moves from active to discharged."""
    __tablename__ = 'admissions'

    id = db.Column(db.Integer, primary_key=True)
    admission_code = db.Column(db.String(9), unique=True, nullable=False, index=True)

    patient_id = db.Column(db.Integer, db.ForeignKey('patients.id'), nullable=False, index=True)
    department = db.Column(db.String(50), nullable=False)
    ward = db.Column(db.String(100), nullable=False)
    bed_number = db.Column(db.String(50), nullable=False)
    admission_date = db.Column(db.DateTime, nullable=False, default=utcnow)
    admitted_by_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    reason_for_admission = db.Column(db.Text, nullable=False)

    status = db.Column(db.String(20), nullable=False, default='active')
    discharge_date = db.Column(db.DateTime)
    discharge_summary = db.Column(db.Text)

    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    patient = db.relationship('Patient', back_populates='admissions')
    admitted_by = db.relationship('User')
    vital_signs = db.relationship(
        'VitalSign',
        back_populates='admission',
        order_by='VitalSign.id',
        cascade="all, delete-orphan"
    )

    def to_dict(self):
        return {
            'id': self.id,
            'admissionId': self.admission_code,
            'patient': self.patient.to_summary() if self.patient else None,
            'department': self.department,
            'ward': self.ward,
            'bedNumber': self.bed_number,
            'admissionDate': isoformat(self.admission_date),
            'admittedBy': self.admitted_by.to_summary() if self.admitted_by else None,
            'reasonForAdmission': self.reason_for_admission,
            'vitalSigns': [reading.to_dict() for reading in self.vital_signs],
            'status': self.status,
            'dischargeDate': isoformat(self.discharge_date),
            'dischargeSummary': self.discharge_summary,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }

class VitalSign(db.Model):
    """A single reading in an admission's append-only vital-sign log."""
    __tablename__ = 'vital_signs'

    id = db.Column(db.Integer, primary_key=True)
    admission_id = db.Column(db.Integer, db.ForeignKey('admissions.id'), nullable=False, index=True)
    temperature = db.Column(db.Float)
    systolic = db.Column(db.Integer)
    diastolic = db.Column(db.Integer)
    pulse_rate = db.Column(db.Integer)
    recorded_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    recorded_by_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)

    admission = db.relationship('Admission', back_populates='vital_signs')
    recorded_by = db.relationship('User')

    def to_dict(self):
        return {
            'temperature': self.temperature,
            'bloodPressure': {
                'systolic': self.systolic,
                'diastolic': self.diastolic,
            },
            'pulseRate': self.pulse_rate,
            'recordedAt': isoformat(self.recorded_at),
            'recordedBy': self.recorded_by.to_summary() if self.recorded_by else None,
        }
