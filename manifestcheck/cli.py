import argparse
import sys
from typing import List, Optional

from manifestcheck.config import load_settings
from manifestcheck.config.constants import EXIT_SETUP_FAILURE, EXIT_USAGE
from manifestcheck.exceptions import ConfigError
from manifestcheck.orchestrator import run
from manifestcheck.utils import get_logger

logger = get_logger(__name__)


def _parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Check Kubernetes YAML manifests for missing required fields.",
        epilog="Configured through MANIFESTCHECK_* environment variables or a YAML file named by MANIFESTCHECK_CONFIG.",
    )
    parser.add_argument("path", nargs="?", metavar="file_or_directory_path", help="Manifest file or directory of manifests")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)
    if args.path is None:
        parser.print_usage(sys.stderr)
        return EXIT_USAGE

    try:
        settings = load_settings()
    except ConfigError as e:
        logger.error("%s", e)
        return EXIT_SETUP_FAILURE
    return run(args.path, settings)


if __name__ == "__main__":
    sys.exit(main())
