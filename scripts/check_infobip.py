#!/usr/bin/env python3
"""
Smoke test against a live Infobip account.

Credentials and endpoint come from the environment / .env file
(INFOBIP_AUTH_TYPE, INFOBIP_API_KEY, INFOBIP_USERNAME, ...).
"""

import os
import sys
import json
import logging

# Add the project root to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from infobip_methods import (
    EnvSettings,
    InfobipError,
    RemoteError,
    Settings,
    SMS,
    TwoFA,
    status,
)

logger = logging.getLogger(__name__)


def _print(result):
    print(json.dumps(result, indent=2) if not isinstance(result, str) else result)


def main():
    """Run one read-only call per service, or send an SMS when asked."""
    import argparse

    parser = argparse.ArgumentParser(description='Check Infobip credentials and endpoints')
    parser.add_argument('--action',
                       choices=['status', 'api-keys', '2fa-apps', 'report', 'send'],
                       default='status',
                       help='Action to perform')
    parser.add_argument('--to', help='Destination number for --action send')
    parser.add_argument('--text', default='Hello from infobip_methods!', help='Text for --action send')
    parser.add_argument('--message-id', help='Message ID for --action report')
    args = parser.parse_args()

    env = EnvSettings()
    env.setup_logging()

    try:
        if args.action == 'status':
            _print(status(env.base_url, env.content_type))
            return 0

        auth = env.auth()

        if args.action == 'api-keys':
            settings = Settings(config=env.settings_config())
            settings.authorize(auth)
            _print(settings.get_api_keys())
        elif args.action == '2fa-apps':
            two_fa = TwoFA(config=env.two_fa_config())
            two_fa.authorize(auth)
            _print(two_fa.get_apps())
        else:
            sms = SMS(config=env.sms_config())
            sms.authorize(auth)
            if args.action == 'report':
                _print(sms.get_report_by_message_id(args.message_id))
            else:
                _print(sms.single(args.to, args.text))
    except RemoteError as e:
        logger.error(f"API call failed: {e}")
        _print(e.payload if isinstance(e.payload, (dict, list, str)) else str(e.payload))
        return 1
    except InfobipError as e:
        logger.error(str(e))
        return 1

    logger.info("Check done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
