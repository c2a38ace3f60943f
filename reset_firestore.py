"""
Wipes every Firestore collection and writes the placeholder documents back.

Usage:
    python reset_firestore.py              # asks for confirmation
    python reset_firestore.py --yes --page-size 200
    python reset_firestore.py --collections users tests
"""
import argparse
import logging
import sys
from dotenv import load_dotenv

from backend import config
from backend.reset import KNOWN_COLLECTIONS, build_reset_orchestrator

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(name)s - %(message)s')
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Delete ALL Firestore data and recreate placeholder documents.")
    parser.add_argument("--yes", action="store_true", help="Skip the confirmation prompt.")
    parser.add_argument("--page-size", type=int, default=None,
                        help=f"Documents per delete batch (default: RESET_PAGE_SIZE or {config.DEFAULT_PAGE_SIZE}).")
    parser.add_argument("--collections", nargs="+", default=None, metavar="NAME",
                        help="Collections to reseed with placeholders (default: all known collections).")
    return parser.parse_args(argv)


def main(argv=None, db=None, prompt=input):
    load_dotenv()
    args = parse_args(argv)

    logger.warning("WARNING: This will delete ALL existing data in Firestore!")
    if not args.yes:
        confirmation = prompt("Type 'RESET' to confirm: ")
        if confirmation != 'RESET':
            logger.info("Confirmation mismatch. Aborting, no changes made.")
            return 1

    try:
        if db is None:
            db = config.init_firestore()
        orchestrator = build_reset_orchestrator(db, args.page_size)
        report = orchestrator.reset_all(args.collections or KNOWN_COLLECTIONS)
    except Exception as e:
        logger.error(f"Error resetting Firestore: {e}")
        return 1

    for name, message in report.errors.items():
        logger.error(f"  {name}: {message}")
    print(f"Collections purged:   {', '.join(report.collections_purged) or '(none)'}")
    print(f"Documents deleted:    {report.documents_deleted}")
    print(f"Collections reseeded: {', '.join(report.collections_reseeded) or '(none)'}")

    if not report.ok:
        logger.error(f"Firestore reset finished with {len(report.errors)} errors.")
        return 1
    logger.info("Firestore reset complete.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
