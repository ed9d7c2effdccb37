"""Analysis data routes"""

from flask import Blueprint, current_app, jsonify, send_file

from sniffer_core.error_handler import create_error_response
from sniffer_core.errors import AnalysisDataError
from sniffer_core.result_store import RESULT_FILENAME, load_analysis

api_bp = Blueprint('api', __name__)


@api_bp.route(f'/{RESULT_FILENAME}')
def raw_analysis():
    """Serve the primary artifact exactly as the analyzer wrote it"""
    path = current_app.config['DATA_PATH']
    if path.exists() and path.is_file():
        return send_file(path.resolve(), mimetype='application/json')
    return jsonify({'error': 'Analysis data not found'}), 404


@api_bp.route('/api/analysis')
def get_analysis():
    """Latest analysis, normalized to {"components": [...]}"""
    try:
        result = load_analysis(current_app.config['DATA_PATH'])
    except AnalysisDataError as e:
        return jsonify(create_error_response(e, context="viewer")), 404
    return jsonify({'success': True, 'components': result.to_list()})
