"""
Human-readable identifiers such as ``PAT000001``.

Numbers come from a per-entity counter row bumped with a single
``UPDATE ... SET value = value + 1`` so concurrent creations never observe
the same value. The bump joins the caller's transaction and is rolled back
with it.
"""
from sqlalchemy import func, select, update

from hospital.extensions import db
from hospital.models.admission_models import Admission
from hospital.models.appointment_models import Appointment
from hospital.models.doctor_models import Doctor
from hospital.models.patient_models import Patient
from hospital.models.system_models import EntitySequence

ENTITY_PREFIXES = {
    'patient': ('PAT', Patient),
    'admission': ('ADM', Admission),
    'appointment': ('APT', Appointment),
    'doctor': ('DOC', Doctor),
}

PAD_WIDTH = 6


def format_identifier(prefix, number):
    return f"{prefix}{number:0{PAD_WIDTH}d}"


def _seed_value(model):
    # Tables populated before the counter existed continue from their row count
    return db.session.scalar(select(func.count()).select_from(model)) or 0


def next_identifier(entity_type):
    """Reserve the next identifier for ``entity_type``."""
    if entity_type not in ENTITY_PREFIXES:
        raise ValueError(f"Unknown entity type: {entity_type}")
    prefix, model = ENTITY_PREFIXES[entity_type]

    result = db.session.execute(
        update(EntitySequence)
        .where(EntitySequence.name == entity_type)
        .values(value=EntitySequence.value + 1)
    )
    if result.rowcount == 0:
        db.session.add(EntitySequence(name=entity_type, value=_seed_value(model) + 1))
        db.session.flush()

    value = db.session.scalar(
        select(EntitySequence.value).where(EntitySequence.name == entity_type)
    )
    return format_identifier(prefix, value)


def ensure_sequences():
    """Create any missing counter rows, continuing from existing row counts."""
    for entity_type, (_, model) in ENTITY_PREFIXES.items():
        if not db.session.get(EntitySequence, entity_type):
            db.session.add(EntitySequence(name=entity_type, value=_seed_value(model)))
    db.session.flush()
