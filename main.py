"""
Entry point — runs one AQL query against the configured database.

Connection details come from ParadoxSettings (environment or .env).

Usage:
    python main.py "FOR u IN users FILTER u.age > @age RETURN u" '{"age": 30}'
"""

import json
import sys

from paradox import ParadoxSettings, Toolbox
from paradox.shared.exceptions import ParadoxError
from paradox.shared.logging import setup_logging


def main(argv: list[str]) -> int:
    if not argv or len(argv) > 2:
        print(__doc__.strip(), file=sys.stderr)
        return 2

    settings = ParadoxSettings()
    logger = setup_logging("paradox", settings.log_level)
    try:
        parameters = json.loads(argv[1]) if len(argv) == 2 else {}
    except json.JSONDecodeError as exc:
        logger.error("Bind variables are not valid JSON: %s", exc)
        parameters = None
    if not isinstance(parameters, dict):
        print(__doc__.strip(), file=sys.stderr)
        return 2

    try:
        with Toolbox.from_settings(settings) as toolbox:
            rows = toolbox.query.get_all(argv[0], parameters)
    except ParadoxError as exc:
        logger.error("%s", exc)
        return 1

    print(json.dumps(rows, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
