"""Main entry point for sniffer_web"""

import logging
import sys

from sniffer_web.config import DEBUG, HOST, PORT

logger = logging.getLogger(__name__)


def main() -> int:
    """Run the viewer development server"""
    if len(sys.argv) > 1 and sys.argv[1] in ['--help', '-h', 'help']:
        print("design-sniffer-web - Viewer for design-sniffer results")
        print()
        print("Usage:")
        print("  design-sniffer-web       Start the viewer")
        print()
        print("Environment variables:")
        print("  SNIFFER_WEB_PORT        Server port (default: 5000)")
        print("  SNIFFER_WEB_HOST        Server host (default: 127.0.0.1)")
        print("  SNIFFER_PUBLIC_DIR      Directory holding computed-styles.json")
        print("  SNIFFER_DEBUG           Enable debug mode (default: false)")
        return 0

    # Import here so --help works without building the app
    from sniffer_web.app import app

    logger.info(f"Reading analysis data from {app.config['DATA_PATH'].absolute()}")
    print(f"✅ design-sniffer viewer on http://{HOST}:{PORT}")
    print("   Press Ctrl+C to stop")
    try:
        app.run(host=HOST, port=PORT, debug=DEBUG)
    except KeyboardInterrupt:
        print("\n⏹️  Stopping server...")
    return 0


if __name__ == '__main__':
    sys.exit(main())
