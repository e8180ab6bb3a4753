#!/usr/bin/env python3
"""
Command-line entry point for invoking weathertool plugins.
"""

import argparse
import json
import logging
import sys
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Import after loading env vars to ensure proper configuration
from . import __version__
from .domain.models.tool import InvalidArgument, ToolNotFoundError
from .infrastructure.config.settings import get_settings
from .plugin_loader import get_catalog
from .utils import setup_logging


def main(argv=None):
    """Main entry point for the weathertool CLI."""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Invoke weathertool plugins from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --city Paris                                  # Weather report
  %(prog)s --tool get_weather --args '{"city": "Oslo"}'  # Any loaded tool
  %(prog)s --list-tools                                  # Print tool schemas
        """
    )

    parser.add_argument('--city',
                       help='City for the get_weather tool')
    parser.add_argument('--tool',
                       help='Name of a loaded tool to invoke')
    parser.add_argument('--args',
                       default='{}',
                       help='JSON object of arguments for --tool (default: {})')
    parser.add_argument('--list-tools',
                       action='store_true',
                       help='Print the loaded tool schemas as JSON and exit')
    parser.add_argument('--log-level',
                       default=settings.log_level,
                       choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                       help='Set logging level')
    parser.add_argument('--version',
                       action='version',
                       version=f'%(prog)s {__version__}')

    args = parser.parse_args(argv)

    setup_logging(args.log_level, settings.log_format)
    logger = logging.getLogger(__name__)

    catalog = get_catalog()

    if args.list_tools:
        print(json.dumps(catalog.schemas(), indent=2, ensure_ascii=False))
        return 0

    if args.city is not None:
        tool_name, arguments = 'get_weather', {'city': args.city}
    elif args.tool:
        tool_name = args.tool
        try:
            arguments = json.loads(args.args)
        except json.JSONDecodeError as e:
            print(f"❌ Error: --args is not valid JSON: {e}")
            return 2
        if not isinstance(arguments, dict):
            print("❌ Error: --args must be a JSON object")
            return 2
    else:
        parser.print_usage()
        print("❌ Error: one of --city, --tool or --list-tools is required")
        return 2

    try:
        result = catalog.get(tool_name).invoke(arguments)
    except (InvalidArgument, ToolNotFoundError) as e:
        logger.debug(f"Tool '{tool_name}' rejected the call: {e}")
        print(f"❌ Error: {e}")
        return 2
    except Exception as e:
        logger.error(f"Tool '{tool_name}' failed: {e}")
        print(f"❌ Fatal error: {e}")
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
