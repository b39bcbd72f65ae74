"""
SMS Module

Builder and response model for sending SMS messages through Twilio's
account-scoped Messages endpoint.
"""

import logging
from dataclasses import dataclass
from typing import Any

import requests

from .options import Options
from .transport import execute, get_field, require_object

logger = logging.getLogger(__name__)


@dataclass
class SMSSendMessageResponse:
    """Twilio's response after sending an SMS message.

    Only the delivery outcome is modeled; the other fields Twilio returns
    (sid, price, dates, ...) are ignored.
    """
    status: str = ""
    error_code: int = 0
    error_message: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "SMSSendMessageResponse":
        data = require_object(data, cls.__name__)
        return cls(
            status=get_field(data, "status", ""),
            error_code=get_field(data, "error_code", 0),
            error_message=get_field(data, "error_message", ""),
        )


class SMSSendMessageBuilder:
    """Builds an SMS message to send"""

    def __init__(self, opts: Options, from_: str, to: str, body: str):
        self._opts = opts
        self._from = from_
        self._to = to
        self._body = body

    def build(self) -> requests.PreparedRequest:
        """Build the send request"""
        url = self._opts.api_base_url + "/Accounts/" + self._opts.sid + "/Messages.json"
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/x-www-form-urlencoded",
        }
        data = {
            "From": self._from,
            "To": self._to,
            "Body": self._body,
        }
        return requests.Request("POST", url, headers=headers, data=data).prepare()

    def do(self) -> SMSSendMessageResponse:
        """Build and perform the request, and return the response"""
        request = self.build()
        logger.debug(f"Sending SMS from {self._from} to {self._to}")
        return execute(self._opts, request, True, 200, SMSSendMessageResponse)


class SMS:
    """Group of APIs related to Twilio's SMS service"""

    def __init__(self, opts: Options):
        self._opts = opts

    def send_message(self, from_: str, to: str, body: str) -> SMSSendMessageBuilder:
        """Create a builder to send an SMS message"""
        return SMSSendMessageBuilder(self._opts, from_, to, body)
