"""
Moody Plate - Main Entry Point

Command-line interface for the surface plate analysis.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..parsers import read_config, load_readings
from ..validators import check_station_counts
from ..engine.analysis import MoodyAnalyzer
from ..engine.plate_errors import PlateInputError
from ..exporters import WorksheetExporter, format_measurement_report
from ..plot import export_gnuplot
from ..config.models import PlateSurvey, ConsistencyReport
from ..config.settings import get_settings


logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False):
    """Configure logging for command-line use."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def print_warnings(report: ConsistencyReport):
    """Print consistency warnings, if any."""
    for warning in report.warnings:
        print(f"Warning: {warning}")
    if report.warnings:
        print()


def print_summary(survey: PlateSurvey):
    """Print a per-line summary of the analysis."""
    config = survey.config
    print("\n" + "=" * 64)
    print("SURFACE PLATE SUMMARY")
    print("=" * 64)

    print(f"\n{'Line':<10}{'Stations':>10}{'Low':>14}{'High':>14}")
    print("-" * 48)
    for line_id, line in survey.lines.items():
        heights = survey.heights(line_id)
        print(
            f"{line_id.name:<10}"
            f"{line.num_stations:>10}"
            f"{heights.min():>14.2f}"
            f"{heights.max():>14.2f}"
        )
    print("-" * 48)
    print(
        f"Foot spacing: {config.foot_spacing:.2f} {config.spacing_unit}; "
        f"maximum height: {survey.max_height:.2f} {config.height_unit}"
    )


def run_analysis(args) -> int:
    """Read all input, analyze the plate and write the outputs."""
    settings = get_settings()
    data_dir = Path(args.data_dir)
    config_path = Path(args.config) if args.config else data_dir / settings.files.config_file

    try:
        config = read_config(str(config_path))
        lines = load_readings(str(data_dir))
    except PlateInputError as e:
        logger.error(str(e))
        return 1

    readings = {line_id: line.readings for line_id, line in lines.items()}
    sources = {line_id: line.source_file for line_id, line in lines.items()}
    survey = MoodyAnalyzer(config).analyze(readings, sources)

    print_warnings(survey.report)
    print(format_measurement_report(survey))

    exporter = WorksheetExporter()
    try:
        if args.tables:
            exporter.export(args.tables, survey)
        else:
            exporter.write(sys.stdout, survey)

        print_summary(survey)

        if not args.no_plot:
            output_files = export_gnuplot(args.output_dir or str(data_dir), survey)
            print("\nExported gnuplot files:")
            for key, path in output_files.items():
                print(f"  {key}: {path}")
    except OSError as e:
        logger.error(f"Unable to open/write output file {e.filename}: {e.strerror}")
        return 1

    return 0


def run_check(args) -> int:
    """Read the line files and run only the station count checks."""
    try:
        lines = load_readings(args.data_dir)
    except PlateInputError as e:
        logger.error(str(e))
        return 1

    report = check_station_counts(lines)
    print_warnings(report)
    for line_id, line in lines.items():
        print(f"  {line_id.filename:<12}{line.num_stations:>6} stations")
    if report.is_consistent:
        print("\nStation counts are consistent.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Moody Surface Plate Analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze the readings in the current directory
  moody-plate analyze

  # Analyze a measurement folder, write tables and plot elsewhere
  moody-plate analyze -d plate_2024 -o results --tables results/tables.txt

  # Only check the station counts of the input files
  moody-plate check -d plate_2024
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Compute the plate worksheets')
    analyze_parser.add_argument('-d', '--data-dir', default='.', help='Folder with the eight line files')
    analyze_parser.add_argument('-c', '--config', help='Configuration file (default: DATA_DIR/Config.txt)')
    analyze_parser.add_argument('-o', '--output-dir', help='Folder for the gnuplot files (default: DATA_DIR)')
    analyze_parser.add_argument('--tables', help='Write worksheets to this file instead of stdout')
    analyze_parser.add_argument('--no-plot', action='store_true', help='Skip the gnuplot files')
    analyze_parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')

    # Check command
    check_parser = subparsers.add_parser('check', help='Check station counts only')
    check_parser.add_argument('-d', '--data-dir', default='.', help='Folder with the eight line files')
    check_parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    configure_logging(args.verbose)

    if args.command == 'analyze':
        return run_analysis(args)

    elif args.command == 'check':
        return run_check(args)

    return 0


if __name__ == '__main__':
    sys.exit(main())
