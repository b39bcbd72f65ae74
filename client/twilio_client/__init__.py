"""
Twilio Client

A Python client library for Twilio's phone number lookup and SMS APIs.
"""

from .client import Client, COUNTRY_CODE_NONE
from .errors import TwilioClientError, UnexpectedStatusError, ResponseDecodeError
from .lookup import (
    Lookup,
    LookupPhoneNumberBuilder,
    LookupPhoneNumberResponse,
    LookupPhoneNumberCallerNameResponse,
    LookupPhoneNumberCarrierResponse,
)
from .options import Options, get_default_config_path
from .sms import SMS, SMSSendMessageBuilder, SMSSendMessageResponse
from .transport import execute

__all__ = [
    'Client',
    'COUNTRY_CODE_NONE',
    'Options',
    'get_default_config_path',
    'Lookup',
    'LookupPhoneNumberBuilder',
    'LookupPhoneNumberResponse',
    'LookupPhoneNumberCallerNameResponse',
    'LookupPhoneNumberCarrierResponse',
    'SMS',
    'SMSSendMessageBuilder',
    'SMSSendMessageResponse',
    'execute',
    'TwilioClientError',
    'UnexpectedStatusError',
    'ResponseDecodeError',
]

__version__ = "0.1.0"
