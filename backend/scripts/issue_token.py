"""CLI script to print a bearer token for local testing with AUTH_ENABLED=true.
Usage: python scripts/issue_token.py SUBJECT [--hours HOURS]
"""
import sys
import argparse
import pathlib
from typing import Optional
# Ensure `backend/` is on sys.path so `central_api` imports work when running this script directly
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from central_api.auth import create_access_token

def main(subject: str, hours: Optional[int] = None):
    """Sign a token for `subject` with the configured JWT secret and print it."""
    print(create_access_token(subject, expire_hours=hours))

if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('subject', help='Value stored in the token `sub` claim')
    parser.add_argument('--hours', type=int, help='Token lifetime (defaults to JWT_EXPIRE_HOURS)')
    args = parser.parse_args()
    main(args.subject, hours=args.hours)
