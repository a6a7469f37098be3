#!/usr/bin/env python3

"""
Command-line interface for the hexamer classifier.

Classification lines go to standard output; timestamped diagnostics go to
standard error.
"""

import argparse
import sys
import logging

from hexamer_classifier.core.config import load_config
from hexamer_classifier.core.exceptions import HexamerClassifierError, SequenceFileError
from hexamer_classifier.core.pipeline import HexamerPipeline

LOG_FORMAT = '%(asctime)s %(message)s'
LOG_DATE_FORMAT = '%Y/%m/%d %H:%M:%S'


def setup_logging(log_level: str = "INFO") -> None:
    """Set up logging configuration."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
        force=True
    )


def create_argument_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Classify sequences as coding or intronic from hexamer log-odds",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Basic usage
  python hexamer_cli.py intronic.fasta coding.fasta unknown.fasta > labels.txt

  # Append scores and silence unknown-hexamer warnings
  python hexamer_cli.py intronic.fasta coding.fasta unknown.fasta --show-scores --quiet-unknown
        """
    )

    # Required arguments
    parser.add_argument('intronic', help='Reference intronic sequences (FASTA)')
    parser.add_argument('coding', help='Reference coding sequences (FASTA)')
    parser.add_argument('unknown', help='Sequences to classify (FASTA)')

    # Optional parameters
    parser.add_argument(
        '--config',
        help='Configuration file (JSON or YAML)'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='INFO',
        help='Logging level (default: INFO)'
    )
    parser.add_argument(
        '--show-scores',
        action='store_true',
        help='Append the normalized log-odds score to every classification line'
    )
    parser.add_argument(
        '--quiet-unknown',
        action='store_true',
        help='Do not warn about hexamers missing from a reference set'
    )
    parser.add_argument(
        '--memory-limit',
        type=int,
        help='Memory limit in MB (default: 4096)'
    )

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    try:
        config = load_config(config_path=args.config, use_env=True)

        # Override config with command line arguments
        if args.show_scores:
            config.show_scores = True
        if args.quiet_unknown:
            config.warn_unknown_hexamers = False
        if args.memory_limit is not None:
            config.memory_limit_mb = args.memory_limit

        # Re-validate after CLI overrides.
        config.validate()

        if config.debug_mode:
            logging.getLogger().setLevel(logging.DEBUG)

        HexamerPipeline(config).run(args.intronic, args.coding, args.unknown, output=sys.stdout)
        return 0

    except SequenceFileError as e:
        logger.error(f"File error: {e}")
        return 1
    except HexamerClassifierError as e:
        logger.error(f"Classifier error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
