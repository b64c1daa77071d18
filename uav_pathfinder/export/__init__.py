"""
Export Module
=============

Result serialization and performance logging.
"""

from .exporters import (
    FORMATS,
    export_csv,
    export_json,
    export_text,
    export_binary,
    append_performance_log,
    export_result,
    export_all,
)

__all__ = [
    'FORMATS',
    'export_csv',
    'export_json',
    'export_text',
    'export_binary',
    'append_performance_log',
    'export_result',
    'export_all',
]
