"""
Phone Number Lookup Module

Builders and response models for Twilio's lookups service, which resolves a
phone number to its national format and, optionally, carrier and caller name
information.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple
from urllib.parse import quote

import requests

from .options import Options
from .transport import execute, get_field, require_object

logger = logging.getLogger(__name__)

# Reserved characters allowed unescaped inside a single path segment
_PATH_SEGMENT_SAFE = "$&+:=@"


@dataclass
class LookupPhoneNumberCallerNameResponse:
    """The optional caller name part of the response"""
    caller_name: str = ""
    caller_type: str = ""
    error_code: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "LookupPhoneNumberCallerNameResponse":
        data = require_object(data, cls.__name__)
        return cls(
            caller_name=get_field(data, "caller_name", ""),
            caller_type=get_field(data, "caller_type", ""),
            error_code=get_field(data, "error_code", ""),
        )


@dataclass
class LookupPhoneNumberCarrierResponse:
    """The optional carrier information part of the response"""
    mobile_country_code: str = ""
    mobile_network_code: str = ""
    name: str = ""
    type: str = ""
    error_code: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "LookupPhoneNumberCarrierResponse":
        data = require_object(data, cls.__name__)
        return cls(
            mobile_country_code=get_field(data, "mobile_country_code", ""),
            mobile_network_code=get_field(data, "mobile_network_code", ""),
            name=get_field(data, "name", ""),
            type=get_field(data, "type", ""),
            error_code=get_field(data, "error_code", ""),
        )


@dataclass
class LookupPhoneNumberResponse:
    """The response for requests to lookup phone numbers"""
    country_code: str = ""
    phone_number: str = ""
    national_format: str = ""
    caller_name: LookupPhoneNumberCallerNameResponse = field(
        default_factory=LookupPhoneNumberCallerNameResponse)
    carrier: LookupPhoneNumberCarrierResponse = field(
        default_factory=LookupPhoneNumberCarrierResponse)
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "LookupPhoneNumberResponse":
        data = require_object(data, cls.__name__)
        caller_name = data.get("caller_name")
        carrier = data.get("carrier")
        return cls(
            country_code=get_field(data, "country_code", ""),
            phone_number=get_field(data, "phone_number", ""),
            national_format=get_field(data, "national_format", ""),
            caller_name=(LookupPhoneNumberCallerNameResponse.from_dict(caller_name)
                         if caller_name is not None else LookupPhoneNumberCallerNameResponse()),
            carrier=(LookupPhoneNumberCarrierResponse.from_dict(carrier)
                     if carrier is not None else LookupPhoneNumberCarrierResponse()),
            url=get_field(data, "url", ""),
        )


class LookupPhoneNumberBuilder:
    """Helper to build requests to lookup phone numbers.

    A builder is meant for a single lookup: configure it, then call
    ``do()`` (or ``build()`` to get the request without sending it).
    """

    def __init__(self, opts: Options, phone_number: str):
        self._opts = opts
        self._phone_number = phone_number
        self._country_code = ""
        self._include_carrier_in_response = False
        self._include_caller_name_in_response = False

    def with_country_code(self, country_code: str) -> "LookupPhoneNumberBuilder":
        """
        Add the ISO country code of the phone number. Optional; used to
        specify the country when the number is provided in a national format.
        """
        self._country_code = country_code
        return self

    def include_carrier_in_response(self) -> "LookupPhoneNumberBuilder":
        """Return carrier information with the response. Extra charges may apply."""
        self._include_carrier_in_response = True
        return self

    def include_caller_name_in_response(self) -> "LookupPhoneNumberBuilder":
        """Return caller name information with the response. Extra charges may apply."""
        self._include_caller_name_in_response = True
        return self

    def _query_params(self) -> List[Tuple[str, str]]:
        params = []

        if self._country_code:
            params.append(("CountryCode", self._country_code))

        # caller-name always precedes carrier
        if self._include_caller_name_in_response:
            params.append(("Type", "caller-name"))

        if self._include_carrier_in_response:
            params.append(("Type", "carrier"))

        return params

    def build(self) -> requests.PreparedRequest:
        """Build the lookup request"""
        url = (self._opts.lookup_base_url + "/v1/PhoneNumbers/"
               + quote(self._phone_number, safe=_PATH_SEGMENT_SAFE))
        return requests.Request("GET", url, params=self._query_params()).prepare()

    def do(self) -> LookupPhoneNumberResponse:
        """Build and perform the request, and return the response"""
        request = self.build()
        logger.debug(f"Looking up phone number {self._phone_number}")
        return execute(self._opts, request, True, 200, LookupPhoneNumberResponse)


class Lookup:
    """Group of APIs related to Twilio's phone number lookup service"""

    def __init__(self, opts: Options):
        self._opts = opts

    def phone_number(self, phone_number: str) -> LookupPhoneNumberBuilder:
        """Create a builder to lookup a phone number"""
        return LookupPhoneNumberBuilder(self._opts, phone_number)
