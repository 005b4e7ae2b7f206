"""
OneDoc command parser
"""

from .command_parser import (
    CommandGrammar,
    CommandPattern,
    CommandTransformer,
    PATIENT_PATTERNS,
    VISIT_PATTERNS,
    PRESCRIPTION_PATTERNS,
    VIEW_ALL_USAGE,
)

__all__ = [
    'CommandGrammar',
    'CommandPattern',
    'CommandTransformer',
    'PATIENT_PATTERNS',
    'VISIT_PATTERNS',
    'PRESCRIPTION_PATTERNS',
    'VIEW_ALL_USAGE',
]
