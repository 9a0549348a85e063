from flask import request, jsonify
from hospital.services import admission_service
from hospital.utils.decorators import get_current_identity
from hospital.utils.request_utils import get_json_body, list_response

def admit_patient():
    admission = admission_service.admit_patient(get_json_body(), get_current_identity())
    return jsonify({'success': True, 'data': admission.to_dict()}), 201

def get_admissions():
    admissions = admission_service.list_admissions(status=request.args.get('status'))
    return jsonify(list_response(admissions)), 200

def get_admission(admission_ref):
    admission = admission_service.get_admission(admission_ref)
    return jsonify({'success': True, 'data': admission.to_dict()}), 200

def add_vital_signs(admission_ref):
    """Appends one reading to the admission's vital-sign log."""
    admission = admission_service.record_vital_signs(admission_ref, get_json_body(), get_current_identity())
    return jsonify({'success': True, 'data': admission.to_dict()}), 200

def discharge_patient(admission_ref):
    data = get_json_body()
    admission = admission_service.discharge_patient(admission_ref, data.get('dischargeSummary'))
    return jsonify({'success': True, 'data': admission.to_dict()}), 200
