"""
sniffer_web - Viewer for design-sniffer results
Renders the extracted components of the latest analysis as live previews
"""

from sniffer_web.app import app, create_app
from sniffer_web.main import main

__all__ = ['app', 'create_app', 'main']
