#!/usr/bin/env python3
"""Assignment export to iCalendar converter.

Reads assignment and class records exported from LEB2 as JSON and
generates an iCalendar (.ics) file with a reminder-carrying event
for every due date.
"""

import argparse
import logging
import sys
from typing import Optional

from records import load_assignments, load_classes
from transformer import DEFAULT_FILENAME, IcsTransformer, map_assignments


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the converter."""
    parser = argparse.ArgumentParser(
        description="Convert LEB2 assignment exports to iCalendar format.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 assignments2iCal.py --assignments activities.json --classes classes.json
  python3 assignments2iCal.py -A activities.json -C classes.json --output my_assignments.ics
        """
    )

    parser.add_argument(
        "-A", "--assignments",
        required=True,
        help="JSON file with assignment records"
    )

    parser.add_argument(
        "-C", "--classes",
        required=True,
        help="JSON file with class records"
    )

    parser.add_argument(
        "-o", "--output",
        default=DEFAULT_FILENAME,
        help=f"Output file path, or - for stdout (default: {DEFAULT_FILENAME})"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    # Ensure output file has .ics extension
    output_path = args.output
    if output_path != "-" and not output_path.lower().endswith(".ics"):
        output_path = f"{output_path}.ics"

    try:
        assignments = load_assignments(args.assignments)
        classes = load_classes(args.classes)

        if not assignments:
            print("Warning: No assignments found. The calendar will be empty.",
                  file=sys.stderr)

        transformer = IcsTransformer()
        document = transformer.transform(map_assignments(assignments, classes))

        if output_path == "-":
            sys.stdout.write(document)
            return

        transformer.save(output_path)

        print(f"Found {len(assignments)} assignments.")
        print(f"Calendar saved to: {output_path}")

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
