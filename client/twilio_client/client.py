"""
Twilio Client Module

Entry point of the library. A ``Client`` wraps a set of ``Options`` and hands
them to the service groups, which create request builders:

    client = Client(Options(sid, token))
    resp = client.lookup().phone_number("+15108675310").include_carrier_in_response().do()
"""

import logging

from .lookup import Lookup, LookupPhoneNumberResponse
from .options import Options
from .sms import SMS, SMSSendMessageResponse

logger = logging.getLogger(__name__)

# Can be used when the country code is optional
COUNTRY_CODE_NONE = ""


class Client:
    """Client for the Twilio lookups and SMS APIs"""

    def __init__(self, opts: Options):
        self.opts = opts

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - close the transport"""
        self.close()

    def close(self):
        """Release connections held by the HTTP transport"""
        logger.debug("Closing HTTP transport")
        self.opts.http_client.close()

    def lookup(self) -> Lookup:
        """Group of APIs related to Twilio's phone number lookup service"""
        return Lookup(self.opts)

    def sms(self) -> SMS:
        """Group of APIs related to Twilio's SMS service"""
        return SMS(self.opts)

    def lookup_phone_number(
        self,
        phone_number: str,
        country_code: str = COUNTRY_CODE_NONE,
        include_carrier: bool = False,
        include_caller_name: bool = False,
    ) -> LookupPhoneNumberResponse:
        """
        Lookup a phone number in one call.

        Args:
            phone_number: Number to lookup, E.164 or national format
            country_code: ISO country code, or COUNTRY_CODE_NONE
            include_carrier: Also return carrier information
            include_caller_name: Also return caller name information

        Returns:
            LookupPhoneNumberResponse: The decoded response
        """
        builder = self.lookup().phone_number(phone_number).with_country_code(country_code)
        if include_carrier:
            builder.include_carrier_in_response()
        if include_caller_name:
            builder.include_caller_name_in_response()
        return builder.do()

    def send_sms_message(self, from_: str, to: str, body: str) -> SMSSendMessageResponse:
        """
        Send an SMS message in one call.

        Args:
            from_: Twilio number the message is sent from
            to: Recipient phone number
            body: Message text

        Returns:
            SMSSendMessageResponse: The decoded response
        """
        return self.sms().send_message(from_, to, body).do()
