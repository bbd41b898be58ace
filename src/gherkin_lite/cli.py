from __future__ import annotations

import json
import logging

from typing import Any, Dict, List
from argparse import Namespace as Arguments
from dataclasses import asdict
from enum import Enum
from pathlib import Path

from colorama import init, Fore

from gherkin_lite.constants import FEATURE_FILE_GLOB
from gherkin_lite.model import AnyScenario, Feature, ScenarioErrorPolicy, ScenarioOutline, Step
from gherkin_lite.parser import load_feature
from gherkin_lite.result import Err


logger = logging.getLogger(__name__)


class Severity(Enum):
    ERROR = 'error'
    WARNING = 'warning'


def _get_severity_color(severity: Severity) -> str:
    if severity == Severity.ERROR:
        return Fore.RED
    elif severity == Severity.WARNING:
        return Fore.YELLOW

    return Fore.RESET  # pragma: no cover


def error_to_text(filename: str, error: Err, severity: Severity = Severity.ERROR) -> str:
    color = _get_severity_color(severity)

    return '\t'.join(
        [
            filename,
            f'{color}{severity.value}{Fore.RESET}',
            str(error),
        ]
    )


def _relative_name(file: Path) -> str:
    return file.as_posix().replace(Path.cwd().as_posix(), '').lstrip('/\\')


def find_feature_files(paths: List[str]) -> List[Path]:
    files: List[Path]

    if paths == ['.']:
        files = sorted(Path.cwd().rglob(FEATURE_FILE_GLOB))
    else:
        files = []

        for path in paths:
            file = Path(path)

            if file.is_dir():
                files.extend(sorted(file.rglob(FEATURE_FILE_GLOB)))
            else:
                files.append(file)

    return files


def lint(args: Arguments) -> int:
    """Parse all feature files in `args.files`, and print every error.

    Scenarios that could not be parsed are reported as warnings, unless `args.strict` is set,
    in which case they are errors. Returns 1 if any file had errors.
    """
    init()

    scenario_severity = Severity.ERROR if args.strict else Severity.WARNING
    rc: int = 0

    for file in find_feature_files(args.files):
        filename = _relative_name(file)

        try:
            result = load_feature(file, on_error=ScenarioErrorPolicy.COLLECT)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f'unable to read {filename}: {e}')
            rc = 1
            continue

        if isinstance(result, Err):
            print(error_to_text(filename, result, Severity.ERROR))
            rc = 1
            continue

        for error in result.value.errors:
            print(error_to_text(filename, error, scenario_severity))

        if len(result.value.errors) > 0 and scenario_severity == Severity.ERROR:
            rc = 1

    return rc


def step_to_dict(step: Step) -> Dict[str, Any]:
    return {
        'keyword': step.keyword,
        'text': step.text,
        'block_text': step.block_text,
    }


def scenario_to_dict(scenario: AnyScenario) -> Dict[str, Any]:
    value: Dict[str, Any] = {
        'type': 'scenario_outline' if isinstance(scenario, ScenarioOutline) else 'scenario',
        'description': scenario.description,
        'tags': list(scenario.tags),
        'steps': [step_to_dict(step) for step in scenario.steps],
    }

    if isinstance(scenario, ScenarioOutline):
        value.update(
            {
                'placeholders': list(scenario.placeholders),
                'examples': [list(column) for column in scenario.examples],
            }
        )

    return value


def feature_to_dict(feature: Feature) -> Dict[str, Any]:
    return {
        'header': asdict(feature.header),
        'scenarios': [scenario_to_dict(scenario) for scenario in feature.scenarios],
        'errors': [asdict(error) for error in feature.errors],
    }


def dump(args: Arguments) -> int:
    init()

    file = Path(args.file)
    filename = _relative_name(file)
    on_error = ScenarioErrorPolicy.from_string(args.on_error)

    try:
        result = load_feature(file, on_error=on_error)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f'unable to read {filename}: {e}')
        return 1

    if isinstance(result, Err):
        print(error_to_text(filename, result, Severity.ERROR))
        return 1

    print(json.dumps(feature_to_dict(result.value), indent=2))

    return 0
