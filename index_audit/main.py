import sys
import argparse
from index_audit.services.index_auditor import run_audit
from index_audit.services.report import render_report
from index_audit.utils.logger import CustomLogger

# Initialize logger
logger = CustomLogger("main")

def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Find and drop text indexes in every collection of the configured MongoDB database'
    )
    parser.add_argument('--dry-run', action='store_true',
                      help='Report text indexes without dropping them')
    args = parser.parse_args(argv)

    try:
        logger.info("Checking all collections for text indexes...")
        report = run_audit(dry_run=args.dry_run)
    except KeyboardInterrupt:
        logger.info("Audit stopped by user")
        sys.exit(130)
    except Exception as e:
        logger.exception(f"Error running audit: {str(e)}")
        sys.exit(1)

    print("\n".join(render_report(report)))

    if not report.succeeded:
        logger.error(f"Audit aborted: {report.connection_error}")
        sys.exit(1)
    return 0

if __name__ == "__main__":
    main()
