from __future__ import annotations

import argparse
import logging
from datetime import timedelta

from careerforge.core.security import create_session_token
from careerforge.db.session import SessionLocal, init_db
from careerforge.services.insights import refresh_stale_insights


def cmd_init_db(args) -> None:
    init_db()
    print("✅ Tables created")


def cmd_issue_token(args) -> None:
    claims = {}
    if args.email:
        claims["email"] = args.email
    if args.name:
        claims["name"] = args.name
    token = create_session_token(args.subject, expires_delta=timedelta(minutes=args.minutes), **claims)
    print(token)


def cmd_refresh_insights(args) -> None:
    db = SessionLocal()
    try:
        count = refresh_stale_insights(db)
    finally:
        db.close()
    print(f"✅ Refreshed insights: {count}")


def main(argv=None):
    p = argparse.ArgumentParser(description="CareerForge - operator CLI")
    p.add_argument("--log-level", default="INFO")
    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create database tables").set_defaults(func=cmd_init_db)

    t = sub.add_parser("issue-token", help="Mint a dev session token (HS256 secret)")
    t.add_argument("subject", help="Identity-provider user id (token 'sub')")
    t.add_argument("--email", default="")
    t.add_argument("--name", default="")
    t.add_argument("--minutes", type=int, default=60)
    t.set_defaults(func=cmd_issue_token)

    sub.add_parser("refresh-insights", help="Regenerate stale industry insights").set_defaults(func=cmd_refresh_insights)

    args = p.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())
    args.func(args)

if __name__ == "__main__":
    main()
