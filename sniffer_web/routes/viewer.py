"""Viewer page - rendered component previews"""

from flask import Blueprint, current_app, render_template

from sniffer_web.rendering import render_category
from sniffer_web.state import load_viewer_state

viewer_bp = Blueprint('viewer', __name__)


@viewer_bp.route('/')
def index():
    """Render every category of the latest analysis"""
    state = load_viewer_state(current_app.config['DATA_PATH'])
    sections = []
    if state.has_data:
        sections = [
            {'category': category, 'demos': render_category(category)}
            for category in state.data
        ]
    return render_template('index.html', state=state, sections=sections)
