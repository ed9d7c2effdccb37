"""
sniffer_logs - Markdown run logs for design-sniffer

Usage:
    from sniffer_logs import create_run_logger

    run_logger = create_run_logger(url="https://example.com", log_dir="logs")
    run_logger.log_heading("Button")
    run_logger.finalize(success=True, duration_ms=1200)
"""

from .run_logger import RunLogger, create_run_logger

__all__ = [
    'RunLogger',
    'create_run_logger',
]

__version__ = '0.1.0'
