"""
Seeds test data in Firestore.

    python seed_database.py --email student@example.com --days 14
    python seed_database.py --email student@example.com --streak 10
    python seed_database.py --catalog
    python seed_database.py --duplicate DOC_ID --collection textbook
"""
import argparse
import logging
import sys
from dotenv import load_dotenv

from backend import config
from backend.sample_data import (
    create_catalog_sample,
    create_sample_data_for_user,
    create_streak_activities,
    duplicate_document,
    get_user_uid_by_email,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate sample and test data in Firestore.")
    parser.add_argument("--email", help="Email of a user in the 'users' collection to generate history for.")
    parser.add_argument("--days", type=int, default=14, help="Days of mood history to generate (0 to skip).")
    parser.add_argument("--streak", type=int, default=0, help="Consecutive daily activities to add for streak testing.")
    parser.add_argument("--catalog", action="store_true",
                        help="Seed a board/standard/subject/chapter/test catalog branch.")
    parser.add_argument("--duplicate", metavar="DOC_ID", help="Copy a document, appending ' (Copy)' to its title.")
    parser.add_argument("--collection", default="textbook", help="Collection for --duplicate (default: textbook).")
    args = parser.parse_args(argv)
    if not (args.email or args.catalog or args.duplicate):
        parser.error("nothing to do: pass --email, --catalog or --duplicate")
    return args


def main(argv=None, db=None):
    load_dotenv()
    args = parse_args(argv)

    try:
        if db is None:
            db = config.init_firestore()
        if args.email:
            uid = get_user_uid_by_email(db, args.email)
            if args.days > 0:
                create_sample_data_for_user(db, uid, args.days)
            if args.streak > 0:
                create_streak_activities(db, uid, args.streak)
        if args.catalog:
            create_catalog_sample(db)
        if args.duplicate:
            duplicate_document(db, args.collection, args.duplicate)
    except Exception as e:
        logger.error(f"Error: {e}")
        return 1

    logger.info("Done!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
