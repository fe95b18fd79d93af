"""Run one find-programs search from the command line and print the JSON envelope."""

import argparse
import asyncio
import json
import sys

from config.config import Settings
from models.errors import FinderError
from models.preferences import (
    ANY_STATE,
    DEFAULT_BUDGET,
    DEFAULT_FIELD,
    DEFAULT_GPA,
    PARAM_BUDGET,
    PARAM_EXTRACTION,
    PARAM_FIELD,
    PARAM_GPA,
    PARAM_STATE,
    PARAM_STEM_ONLY,
    PreferenceSet,
)
from orchestrator.core import ProgramFinder
from server.schemas.responses import FindProgramsResponseDTO


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find graduate programs matching your preferences")
    parser.add_argument("--gpa", default=DEFAULT_GPA, help="Undergraduate GPA")
    parser.add_argument("--budget", default=DEFAULT_BUDGET, help="Annual tuition budget (USD)")
    parser.add_argument("--program", default=DEFAULT_FIELD, help="Field of study")
    parser.add_argument("--state", default=ANY_STATE, help="US state, or 'Any'")
    parser.add_argument("--stem-only", action="store_true", help="Only STEM-designated programs")
    parser.add_argument("--no-ai", action="store_true", help="Skip AI extraction, show raw results")
    return parser


def preferences_from_args(args: argparse.Namespace) -> PreferenceSet:
    return PreferenceSet.from_params(
        {
            PARAM_GPA: args.gpa,
            PARAM_BUDGET: args.budget,
            PARAM_FIELD: args.program,
            PARAM_STATE: args.state,
            PARAM_STEM_ONLY: "true" if args.stem_only else "false",
            PARAM_EXTRACTION: "off" if args.no_ai else "on",
        }
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    finder = ProgramFinder.from_settings(Settings.from_env())

    try:
        result = asyncio.run(finder.find(preferences_from_args(args)))
    except FinderError as exc:
        print(json.dumps({"ok": False, "error": exc.message}, indent=2, ensure_ascii=False))
        return 1

    body = FindProgramsResponseDTO.from_finder_result(result).to_body()
    print(json.dumps(body, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
