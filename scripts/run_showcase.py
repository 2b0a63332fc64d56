#!/usr/bin/env python3
"""
CLI script for running the Evenue database showcase.
"""
import argparse
import logging
import sys
from pathlib import Path

# Add the project directory to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy.exc import SQLAlchemyError

from evenue.config import settings
from evenue.database import SessionLocal, engine
from evenue.services.account_service import AccountService
from evenue.services.party_queries import QUERIES
from evenue.services.schema_manager import create_schema_manager
from evenue.services.showcase import STAGES, ShowcaseRunner, error_message


COMMAND_STAGES = {
    "all": STAGES,
    "structure": ("structure",),
    "truncate": ("truncate",),
    "seed": ("seed",),
    "query": ("query",),
}


def setup_logging(level: str = "INFO", log_file: str = None):
    """Setup logging configuration."""
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def list_tables():
    """List the tables present in the database."""
    tables = create_schema_manager(engine).list_tables()
    print(f"\n🗄️  {len(tables)} tables:")
    for table in tables:
        print(f"  - {table}")


def check_login(email: str, password: str) -> bool:
    """Verify a login against the stored password hash."""
    db = SessionLocal()
    try:
        valid = AccountService(db).verify_login(email, password)
        print(f"{'✅' if valid else '❌'} Login for {email}: {'valid' if valid else 'invalid'}")
        return valid
    finally:
        db.close()


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="Evenue Database Showcase CLI")
    parser.add_argument("command", nargs="?", default="all", choices=[
        "all", "structure", "truncate", "seed", "query", "tables", "login"
    ], help="Command to execute")

    parser.add_argument("--query", type=int, nargs="+", choices=sorted(QUERIES), help="Specific queries to run")
    parser.add_argument("--year", type=int, help="Year the sample parties take place in")
    parser.add_argument("--email", help="Email for the login command")
    parser.add_argument("--password", help="Password for the login command")
    parser.add_argument("--log-level", default=settings.log_level, choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")

    args = parser.parse_args()

    # Setup logging
    setup_logging(args.log_level, settings.log_file)

    # Validate arguments
    if args.command == "login" and not (args.email and args.password):
        parser.error("--email and --password are required for login command")

    try:
        if args.command == "tables":
            list_tables()
        elif args.command == "login":
            if not check_login(args.email, args.password):
                sys.exit(1)
        else:
            runner = ShowcaseRunner(engine, SessionLocal, args.year)
            if not runner.run(COMMAND_STAGES[args.command], args.query):
                sys.exit(1)

    except SQLAlchemyError as e:
        print(f"Exception: {error_message(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
