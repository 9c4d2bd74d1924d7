"""
Prebid Server bidder adapters.

Translates OpenRTB bid requests into demand-partner specific HTTP requests
and the partners' responses back into typed bids.
"""

from .errors import AdapterError, BadInput, BadServerResponse, InvalidAdapterConfigError

__version__ = '1.0.0'

__all__ = [
    'AdapterError',
    'BadInput',
    'BadServerResponse',
    'InvalidAdapterConfigError',
]
