from flask import request, jsonify
from hospital.services import patient_service
from hospital.utils.decorators import get_current_identity
from hospital.utils.request_utils import get_json_body, list_response

def register_patient():
    patient = patient_service.register_patient(get_json_body(), get_current_identity())
    return jsonify({'success': True, 'data': patient.to_dict()}), 201

def get_patients():
    patients = patient_service.list_patients(status=request.args.get('status'))
    return jsonify(list_response(patients)), 200

def get_patient(patient_ref):
    patient = patient_service.get_patient(patient_ref)
    return jsonify({'success': True, 'data': patient.to_dict()}), 200

def update_patient(patient_ref):
    patient = patient_service.update_patient(patient_ref, get_json_body())
    return jsonify({'success': True, 'data': patient.to_dict()}), 200

def delete_patient(patient_ref):
    patient_service.delete_patient(patient_ref)
    return jsonify({'success': True, 'data': {}}), 200
