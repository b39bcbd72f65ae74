import argparse
import json
import os
import sys
from dataclasses import asdict
from typing import Optional

from .client import Client, COUNTRY_CODE_NONE
from .errors import UnexpectedStatusError
from .logging_config import setup_logging, log_api_event
from .options import Options, get_default_config_path


def load_options(config_path: Optional[str] = None) -> Options:
    """Load options from the given config file, the default one, or the environment"""
    if config_path:
        return Options.from_config_file(config_path)

    default_path = get_default_config_path()
    if os.path.exists(default_path):
        return Options.from_config_file(default_path)

    return Options.from_env()


def _status_of(error: Exception) -> Optional[int]:
    if isinstance(error, UnexpectedStatusError):
        return error.actual
    return None


def cmd_lookup(args: argparse.Namespace) -> int:
    """Lookup a phone number"""
    try:
        opts = load_options(args.config)

        with Client(opts) as client:
            response = client.lookup_phone_number(
                args.number,
                country_code=args.country_code or COUNTRY_CODE_NONE,
                include_carrier=args.carrier,
                include_caller_name=args.caller_name,
            )
    except Exception as e:
        log_api_event('lookup', endpoint=args.number, status_code=_status_of(e),
                      success=False, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log_api_event('lookup', endpoint=args.number, status_code=200)
    if args.verbose:
        print(json.dumps(asdict(response), indent=2))
    else:
        line = f"{response.phone_number} ({response.national_format})"
        if response.carrier.name:
            line += f" carrier: {response.carrier.name}"
        if response.caller_name.caller_name:
            line += f" caller: {response.caller_name.caller_name}"
        print(line)
    return 0


def cmd_send_sms(args: argparse.Namespace) -> int:
    """Send an SMS message"""
    try:
        opts = load_options(args.config)

        with Client(opts) as client:
            response = client.send_sms_message(args.from_number, args.to, args.body)
    except Exception as e:
        log_api_event('sms_send', endpoint=args.to, status_code=_status_of(e),
                      success=False, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log_api_event('sms_send', endpoint=args.to, status_code=200)
    if args.verbose:
        print(json.dumps(asdict(response), indent=2))
    else:
        print(f"SMS status: {response.status}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="twilio-cli", description="Twilio lookup and SMS utilities")
    p.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_lookup = sub.add_parser("lookup", help="Lookup a phone number", description="Resolve a phone number to its national format and, optionally, carrier and caller name.")
    p_lookup.add_argument("number", help="Phone number to lookup")
    p_lookup.add_argument("--country-code", default=None, help="ISO country code when the number is in national format")
    p_lookup.add_argument("--carrier", action="store_true", help="Include carrier information (extra charges may apply)")
    p_lookup.add_argument("--caller-name", action="store_true", help="Include caller name information (extra charges may apply)")
    p_lookup.add_argument("--config", default=None, help="Config file path (default: auto-detect, then TWILIO_* environment variables)")
    p_lookup.add_argument("--verbose", "-v", action="store_true", help="Print the full response as JSON (default: False)")
    p_lookup.set_defaults(func=cmd_lookup)

    p_send = sub.add_parser("send", help="Send an SMS message", description="Send an SMS message through the Twilio Messages API.")
    p_send.add_argument("body", help="Message to send")
    p_send.add_argument("--from", dest="from_number", required=True, help="Twilio number to send from")
    p_send.add_argument("--to", required=True, help="Recipient phone number")
    p_send.add_argument("--config", default=None, help="Config file path (default: auto-detect, then TWILIO_* environment variables)")
    p_send.add_argument("--verbose", "-v", action="store_true", help="Print the full response as JSON (default: False)")
    p_send.set_defaults(func=cmd_send_sms)

    return p


def main(argv=None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    # stdout carries command output, logs go to stderr
    setup_logging(log_level=args.log_level or os.environ.get('LOG_LEVEL', 'WARNING'), stream=sys.stderr)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
