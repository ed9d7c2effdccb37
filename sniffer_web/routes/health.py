"""Health check route"""

from datetime import datetime

from flask import Blueprint, current_app, jsonify

from sniffer_core.result_store import list_snapshots

health_bp = Blueprint('health', __name__)


@health_bp.route('/health')
def health():
    """Health check endpoint"""
    return jsonify({
        'status': 'ok',
        'timestamp': datetime.now().isoformat(),
        'data_available': current_app.config['DATA_PATH'].is_file(),
        'snapshots_count': len(list_snapshots(current_app.config['ARCHIVE_DIR'])),
    })
