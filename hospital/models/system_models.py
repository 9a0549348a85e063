# /hospital/models/system_models.py
from hospital.extensions import db
from hospital.utils.time_utils import utcnow

class AuditLog(db.Model):
    """Record of every API call and who made it"""
    __tablename__ = 'audit_logs'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'))
    timestamp = db.Column(db.DateTime, default=utcnow, nullable=False)
    action = db.Column(db.String(100), nullable=False)
    resource = db.Column(db.String(100))
    ip_address = db.Column(db.String(45))
    user_agent = db.Column(db.String(255))
    success = db.Column(db.Boolean, default=True)
    details = db.Column(db.Text)

class EntitySequence(db.Model):
    """Last number issued for each generated identifier prefix"""
    __tablename__ = 'entity_sequences'

    name = db.Column(db.String(50), primary_key=True)
    value = db.Column(db.Integer, nullable=False, default=0)
