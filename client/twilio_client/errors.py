"""Errors raised by the Twilio client."""


class TwilioClientError(Exception):
    """Base class for errors raised by this package"""


class UnexpectedStatusError(TwilioClientError):
    """The service answered with a status code other than the expected one"""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Unexpected response. Expected {expected} but found {actual}")


class ResponseDecodeError(TwilioClientError, ValueError):
    """The body was valid JSON but did not have the shape of the response"""
