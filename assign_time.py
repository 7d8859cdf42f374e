#!/usr/bin/env python3
"""
Task Tree Time Assigner - Command Line Entry Point
"""

import os
import sys
from typing import List, Optional

from time_assigner import TimeAssigner


def create_parser():
    import argparse
    parser = argparse.ArgumentParser(
        prog='assign-time',
        description='Assign estimated times to the leaves of a task tree JSON file.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python assign_time.py tasks.json
  python assign_time.py tasks.json -o tasks-estimated.json
        """
    )
    parser.add_argument('input_file', nargs='?', help='The input JSON file')
    parser.add_argument('-o', '--output', dest='output_file', default=None,
                        help='(Optional) The output JSON file. Default: <input>-assigned.json')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    
    if args.input_file is None:
        parser.print_help()
        return 0
    
    if os.path.splitext(args.input_file)[1].lower() != '.json':
        print("Please drop a .json file.")
        return 0
    
    assigner = TimeAssigner()
    
    try:
        print(f"\nConfiguration:")
        print(f"  Input file: {args.input_file}")
        print(f"  Output file: {args.output_file or assigner.writer.default_output_path(args.input_file)}\n")
        assigner.process_file(args.input_file, args.output_file)
        print("done.")
    except FileNotFoundError:
        print(f"Error: File '{args.input_file}' not found.")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        import traceback
        traceback.print_exc()
        return 1
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
