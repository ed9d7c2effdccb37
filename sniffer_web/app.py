"""Flask application setup for sniffer_web"""

import logging
from pathlib import Path
from typing import Optional

from flask import Flask
from flask_cors import CORS

from sniffer_web.config import ARCHIVE_DIR, DATA_PATH
from sniffer_web.routes import api_bp, health_bp, viewer_bp

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def create_app(data_path: Optional[Path] = None, archive_dir: Optional[Path] = None) -> Flask:
    """Build the viewer app; paths default to the analyzer's output locations."""
    app = Flask(__name__)
    CORS(app)

    app.config['DATA_PATH'] = Path(data_path) if data_path else DATA_PATH
    app.config['ARCHIVE_DIR'] = Path(archive_dir) if archive_dir else ARCHIVE_DIR

    app.register_blueprint(viewer_bp)
    app.register_blueprint(api_bp)
    app.register_blueprint(health_bp)
    return app


app = create_app()
