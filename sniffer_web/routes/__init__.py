"""Routes module for sniffer_web"""

from sniffer_web.routes.viewer import viewer_bp
from sniffer_web.routes.api import api_bp
from sniffer_web.routes.health import health_bp

__all__ = ['viewer_bp', 'api_bp', 'health_bp']
