################################################################################
# File Name: cli.py
# Purpose/Description: Command line interface for VIN validation and decoding
# Author: Michael Cornelison
# Creation Date: 2026-10-14
# Copyright: (c) 2026 VIN Codec Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-14    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Reject empty VIN input, report errors via handleError
# ================================================================================
################################################################################

"""
VIN codec command line interface.

Provides:
- Validation and decoding of VINs given as arguments or in a file
- Optional JSON configuration with .env placeholder resolution
- Text or JSON report output
- Exit codes reflecting configuration errors and invalid VINs

Usage:
    vincodec 1HGCM82633A004352
    vincodec --file vins.txt --json
    vincodec --config vincodec_config.json --reference-year 2000 WBA3A5C51CF256651
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from common.config_loader import loadConfig
from common.config_validator import ConfigValidationError, ConfigValidator
from common.error_handler import ConfigurationError, handleError
from common.logging_config import getLogger, setupLogging

from . import __version__
from .helpers import createVinCodecFromConfig, decodeVins
from .types import VinReport

# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1
EXIT_INVALID_VIN = 2
EXIT_UNKNOWN_ERROR = 3


def parseArgs(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog='vincodec',
        description='Validate VIN check digits and decode model year and manufacturer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  vincodec 1HGCM82633A004352                 Check a single VIN
  vincodec --file vins.txt --json            Check VINs listed in a file
  vincodec --reference-year 2000 <VIN>       Decode years from the 2000 cycle
        '''
    )

    parser.add_argument(
        'vins',
        nargs='*',
        metavar='VIN',
        help='VINs to check'
    )

    parser.add_argument(
        '--file', '-f',
        help='File with one VIN per line (blank lines and # comments ignored)'
    )

    parser.add_argument(
        '--config', '-c',
        help='Path to configuration file'
    )

    parser.add_argument(
        '--env-file', '-e',
        default='.env',
        help='Path to environment file (default: .env)'
    )

    parser.add_argument(
        '--reference-year', '-r',
        type=int,
        help='Base year for model year decoding (default: start of current 30-year cycle)'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print reports as JSON'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose (debug) logging'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    args = parser.parse_args(argv)
    if not args.vins and not args.file:
        parser.error('provide at least one VIN or --file')

    return args


def loadConfiguration(
    configPath: str | None,
    envPath: str | None = None
) -> dict[str, Any]:
    """
    Load and validate configuration.

    Args:
        configPath: Path to configuration file, or None for defaults only
        envPath: Path to environment file

    Returns:
        Validated configuration dictionary

    Raises:
        ConfigurationError: If configuration is invalid
    """
    try:
        config = loadConfig(configPath, envPath) if configPath else {}
        return ConfigValidator().validate(config)

    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file not found: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Configuration file is not valid JSON: {e}") from e
    except ConfigValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e


def readVinFile(filePath: str) -> list[str]:
    """
    Read VINs from a file, one per line.

    Surrounding whitespace is stripped; blank lines and lines starting
    with '#' are skipped.

    Raises:
        ConfigurationError: If the file cannot be read
    """
    try:
        lines = Path(filePath).read_text(encoding='utf-8').splitlines()
    except OSError as e:
        raise ConfigurationError(
            f"VIN file not readable: {filePath}",
            details={'error': str(e)}
        ) from e

    return [
        line.strip() for line in lines
        if line.strip() and not line.strip().startswith('#')
    ]


def formatReport(report: VinReport) -> str:
    """Format a report as indented text lines."""
    lines = [report.getSummary()]
    lines.append(f"  check digit : {'ok' if report.valid else 'mismatch'}"
                 f" (expected {report.expectedCheckCharacter or '-'})")
    lines.append(f"  model year  : {report.modelYear or '-'}")
    lines.append(f"  legacy year : {report.legacyYear or '-'}")
    lines.append(f"  manufacturer: {report.manufacturer or '-'}")
    return '\n'.join(lines)


def printReports(reports: list[VinReport], asJson: bool = False) -> None:
    """Print reports to stdout as text or JSON."""
    if asJson:
        print(json.dumps([report.toDict() for report in reports], indent=2))
        return

    for report in reports:
        print(formatReport(report))


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 if every VIN is valid, non-zero otherwise)
    """
    args = parseArgs(argv)

    logLevel = 'DEBUG' if args.verbose else 'WARNING'
    setupLogging(level=logLevel, stream=sys.stderr)
    logger = getLogger(__name__)

    try:
        config = loadConfiguration(args.config, args.env_file)

        loggingConfig = config.get('logging', {})
        setupLogging(
            level=logLevel if args.verbose else loggingConfig.get('level', 'WARNING'),
            logFile=loggingConfig.get('file'),
            enablePIIMasking=loggingConfig.get('maskPII', True),
            stream=sys.stderr
        )

        if args.reference_year is not None:
            config['vinCodec']['referenceYear'] = args.reference_year

        vins = list(args.vins)
        if args.file:
            vins.extend(readVinFile(args.file))
        if not vins:
            raise ConfigurationError(
                f"No VINs to check in {args.file}",
                details={'file': args.file}
            )
        logger.debug(f"Checking {len(vins)} VINs")

        codec = createVinCodecFromConfig(config)
        reports = decodeVins(vins, codec)
        printReports(reports, asJson=args.json)

        if all(report.valid for report in reports):
            return EXIT_SUCCESS
        return EXIT_INVALID_VIN

    except ConfigurationError as e:
        handleError(e, reraise=False)
        return EXIT_CONFIG_ERROR

    except Exception as e:
        handleError(e, reraise=False)
        return EXIT_UNKNOWN_ERROR


if __name__ == '__main__':
    sys.exit(main())
