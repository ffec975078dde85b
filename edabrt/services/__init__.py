"""
Services module for aberration reports.
"""

from . import lib_service_report

__all__ = ['lib_service_report']
