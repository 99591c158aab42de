"""
jsonscribe - An incremental, streaming JSON writer with a fluent builder API.
"""

from .errors import ScribeError, StructuralMisuseError
from .inscribe import dumps_with, inscribe_array, inscribe_object, inscribe_value
from .nodes import JsonArrayNode, JsonObjectNode, JsonValue
from .scribe import JsonScribe

__all__ = [
    'JsonScribe',
    'JsonArrayNode',
    'JsonObjectNode',
    'JsonValue',
    'ScribeError',
    'StructuralMisuseError',
    'inscribe_array',
    'inscribe_object',
    'inscribe_value',
    'dumps_with',
]
__version__ = '0.1.0'
