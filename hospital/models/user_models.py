from hospital.extensions import db, bcrypt
from hospital.utils.time_utils import utcnow, isoformat

ROLES = ('admin', 'doctor', 'nurse', 'registration_clerk')

MIN_PASSWORD_LENGTH = 6

class User(db.Model):
    """Staff identity used for authentication and attribution."""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(50), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(50), nullable=False, default='registration_clerk')
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    doctor_profile = db.relationship('Doctor', back_populates='user', uselist=False)

    @staticmethod
    def normalize_email(email: str) -> str:
        """Emails are unique regardless of case and surrounding whitespace."""
        return (email or '').strip().lower()

    def set_password(self, password: str) -> None:
        """Hashes and sets the user's password."""
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password: str) -> bool:
        if not self.password_hash or not password:
            return False
        return bcrypt.check_password_hash(self.password_hash, password)

    def to_summary(self):
        return {'id': self.id, 'name': self.name, 'email': self.email}

    def to_dict(self):
        """Serializes the User for API responses. The password hash is never included."""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'role': self.role,
            'isActive': self.is_active,
            'createdAt': isoformat(self.created_at),
        }
