"""
deskvault: account and audit-log persistence for the desktop companion service.
"""

__version__ = "0.1.0"
