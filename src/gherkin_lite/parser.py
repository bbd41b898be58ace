from __future__ import annotations

import logging

from typing import List, Optional, Set, Type, Union
from pathlib import Path

from gherkin_lite.constants import (
    KEYWORD_AND,
    KEYWORD_GIVEN,
    KEYWORD_WHEN,
    KEYWORD_THEN,
    PATTERN_BLOCK_TEXT,
    PATTERN_EXAMPLES,
    PATTERN_FEATURE,
    PATTERN_PLACEHOLDER,
    PATTERN_SCENARIO,
    PATTERN_SCENARIO_OUTLINE,
    PATTERN_STEP,
    REASON_BAD_EXAMPLES_TABLE,
    REASON_BAD_STEP_ORDER,
    REASON_INVALID_STEP,
    REASON_LEADING_AND,
    REASON_UNEXPECTED_CONSTRUCT,
    SYMBOL_AND_STEP,
    SYMBOL_BLOCK_TEXT,
    SYMBOL_EXAMPLE_ROW,
    SYMBOL_EXAMPLES,
    SYMBOL_FEATURE,
    SYMBOL_GIVEN,
    SYMBOL_INVALID_STEP_DEFINITION,
    SYMBOL_MISSING_EXAMPLES,
    SYMBOL_NOT_GIVEN,
    SYMBOL_NOT_WHEN,
    SYMBOL_PLACEHOLDERS,
    SYMBOL_SCENARIO,
    SYMBOL_SPECIFIC_STEP,
    SYMBOL_STEP_DEFINITION,
    SYMBOL_UNKNOWN_CONSTRUCT,
    SYMBOL_WHEN,
)
from gherkin_lite.model import (
    AnyScenario,
    Feature,
    FeatureHeader,
    Given,
    Scenario,
    ScenarioErrorPolicy,
    ScenarioOutline,
    Step,
    Then,
    When,
)
from gherkin_lite.result import Err, Ok, ParseResult
from gherkin_lite.text import LineCursor, find_tags, split_table_row


logger = logging.getLogger(__name__)


def parse_tags(cursor: LineCursor) -> List[str]:
    tags: List[str] = []

    while not cursor.exhausted:
        tag_match = find_tags(cursor.current)
        if len(tag_match) < 1:
            break

        cursor.advance()
        tags.extend(tag_match)

    return tags


def _is_scenario_start(line: str) -> bool:
    if line.lstrip().startswith('@'):
        return True

    return PATTERN_SCENARIO.search(line) is not None or PATTERN_SCENARIO_OUTLINE.search(line) is not None


def parse_feature_header(cursor: LineCursor) -> ParseResult[FeatureHeader]:
    feature_tags = parse_tags(cursor)

    description_match = PATTERN_FEATURE.search(cursor.current)
    if description_match is None:
        return Err(REASON_UNEXPECTED_CONSTRUCT, SYMBOL_FEATURE, SYMBOL_SCENARIO)
    cursor.advance()

    long_description: List[str] = []
    while not cursor.exhausted:
        if cursor.is_current_line_empty():
            cursor.advance()
            break

        # no empty line between title and first scenario
        if _is_scenario_start(cursor.current):
            break

        long_description.append(cursor.current.strip())
        cursor.advance()

    return Ok(FeatureHeader(description_match.group('description'), long_description, feature_tags))


def parse_block_text(cursor: LineCursor) -> ParseResult[str]:
    """Cursor is expected to be on the opening `\"\"\"`. An unterminated block collects the rest of the input."""
    cursor.advance()

    block_text_lines: List[str] = []
    while not cursor.exhausted:
        line = cursor.current
        cursor.advance()
        if PATTERN_BLOCK_TEXT.search(line):
            break

        block_text_lines.append(line.strip())

    return Ok('\n'.join(block_text_lines))


def parse_scenario_steps(cursor: LineCursor) -> ParseResult[List[Step]]:
    """Parse steps until an empty line (which is consumed), an `Examples:` line, the start of
    the next scenario or end of input.

    Once a `When` step has been seen no more `Given` steps are allowed, and once a `Then`
    step has been seen neither `Given` nor `When` is allowed. `And` inherits the kind of
    the previous step.
    """
    steps: List[Step] = []
    allowed_step_types: Set[Type[Step]] = {Given, When, Then}

    while not cursor.exhausted:
        if cursor.is_current_line_empty():
            cursor.advance()
            break

        # examples or next scenario without an empty line in between, left for the caller
        if PATTERN_EXAMPLES.search(cursor.current) is not None or _is_scenario_start(cursor.current):
            break

        if PATTERN_BLOCK_TEXT.search(cursor.current) is not None:
            if len(steps) < 1:
                return Err(REASON_INVALID_STEP, SYMBOL_SPECIFIC_STEP, SYMBOL_BLOCK_TEXT)

            block_text = parse_block_text(cursor).unwrap()
            steps[-1] = steps[-1].with_block_text(block_text)
            continue

        step_match = PATTERN_STEP.search(cursor.current)
        if step_match is None:
            return Err(REASON_INVALID_STEP, SYMBOL_STEP_DEFINITION, SYMBOL_INVALID_STEP_DEFINITION)

        step_type = step_match.group('step_type')
        step_definition = step_match.group('step_definition')
        step: Step

        if step_type == KEYWORD_GIVEN:
            if Given not in allowed_step_types:
                return Err(REASON_BAD_STEP_ORDER, SYMBOL_NOT_GIVEN, SYMBOL_GIVEN)
            step = Given(step_definition)
        elif step_type == KEYWORD_WHEN:
            if When not in allowed_step_types:
                return Err(REASON_BAD_STEP_ORDER, SYMBOL_NOT_WHEN, SYMBOL_WHEN)
            step = When(step_definition)
            allowed_step_types.discard(Given)
        elif step_type == KEYWORD_THEN:
            step = Then(step_definition)
            allowed_step_types.discard(Given)
            allowed_step_types.discard(When)
        elif step_type == KEYWORD_AND:
            if len(steps) < 1:
                return Err(REASON_LEADING_AND, SYMBOL_SPECIFIC_STEP, SYMBOL_AND_STEP)
            step = type(steps[-1])(step_definition)
        else:  # pragma: no cover
            raise ValueError(f'unhandled step type {step_type}')

        steps.append(step)
        cursor.advance()

    return Ok(steps)


def _parse_examples(cursor: LineCursor, placeholders: List[str]) -> Union[List[List[str]], Err]:
    examples: List[List[str]] = [[] for _ in placeholders]

    while not cursor.is_current_line_empty():
        example = split_table_row(cursor.current)
        if len(example) != len(placeholders):
            return Err(REASON_BAD_EXAMPLES_TABLE, SYMBOL_PLACEHOLDERS, SYMBOL_EXAMPLE_ROW)

        for column, value in zip(examples, example):
            column.append(value)

        cursor.advance()

    return examples


def parse_scenario(cursor: LineCursor) -> ParseResult[AnyScenario]:
    tags = parse_tags(cursor)

    scenario_outline_match = PATTERN_SCENARIO_OUTLINE.search(cursor.current)
    if scenario_outline_match is not None:
        description = scenario_outline_match.group('description')
        cursor.advance()

        steps_result = parse_scenario_steps(cursor)
        if isinstance(steps_result, Err):
            return steps_result

        if PATTERN_EXAMPLES.search(cursor.current) is None:
            return Err(REASON_UNEXPECTED_CONSTRUCT, SYMBOL_EXAMPLES, SYMBOL_MISSING_EXAMPLES)
        cursor.advance()

        placeholders: List[str] = PATTERN_PLACEHOLDER.findall(cursor.current)
        cursor.advance()

        examples = _parse_examples(cursor, placeholders)
        if isinstance(examples, Err):
            return examples

        return Ok(ScenarioOutline(description, tags, steps_result.value, placeholders, examples))

    scenario_match = PATTERN_SCENARIO.search(cursor.current)
    if scenario_match is None:
        cursor.advance()
        return Err(REASON_UNEXPECTED_CONSTRUCT, SYMBOL_SCENARIO, SYMBOL_UNKNOWN_CONSTRUCT)

    description = scenario_match.group('description')
    cursor.advance()

    steps_result = parse_scenario_steps(cursor)
    if isinstance(steps_result, Err):
        return steps_result

    return Ok(Scenario(description, tags, steps_result.value))


def _skip_scenario(cursor: LineCursor) -> None:
    # a failed scenario has always consumed its header line, so stopping on the next one is safe
    while not cursor.exhausted and not cursor.is_current_line_empty() and not _is_scenario_start(cursor.current):
        cursor.advance()


def parse_feature(text: str, *, on_error: ScenarioErrorPolicy = ScenarioErrorPolicy.IGNORE) -> ParseResult[Feature]:
    """Parse a complete feature.

    `on_error` decides what happens with scenarios that could not be parsed; they are either
    dropped (`IGNORE`), kept in `Feature.errors` (`COLLECT`) or the first one is returned as the
    result of the whole parse (`FAIL`).
    """
    cursor = LineCursor(text)

    feature_header_result = parse_feature_header(cursor)
    if isinstance(feature_header_result, Err):
        return feature_header_result

    feature = Feature(feature_header_result.value)

    while not cursor.exhausted:
        if cursor.is_current_line_empty():
            cursor.advance()
            continue

        scenario_result = parse_scenario(cursor)
        if isinstance(scenario_result, Ok):
            feature.scenarios.append(scenario_result.value)
            continue

        if on_error == ScenarioErrorPolicy.FAIL:
            return scenario_result

        if on_error == ScenarioErrorPolicy.COLLECT:
            feature.errors.append(scenario_result)

        logger.debug(f'skipping scenario in "{feature.header.description}": {scenario_result}')
        _skip_scenario(cursor)

    return Ok(feature)


def load_feature(path: Union[str, Path], *, on_error: Optional[ScenarioErrorPolicy] = None) -> ParseResult[Feature]:
    feature_file = Path(path)
    logger.debug(f'loading {feature_file.as_posix()}')

    text = feature_file.read_text(encoding='utf-8')

    return parse_feature(text, on_error=on_error or ScenarioErrorPolicy.IGNORE)
