from __future__ import annotations

from typing import ClassVar, List, Union
from dataclasses import dataclass, field, replace
from enum import Enum

from gherkin_lite.constants import KEYWORD_GIVEN, KEYWORD_WHEN, KEYWORD_THEN
from gherkin_lite.result import Err


@dataclass(frozen=True)
class Step:
    """One clause of a scenario.

    Equality requires the same kind, but the hash only covers `text` and `block_text`.
    """

    keyword: ClassVar[str]

    text: str
    block_text: str = field(default='')

    def with_block_text(self, block_text: str) -> Step:
        return replace(self, block_text=block_text)


@dataclass(frozen=True)
class Given(Step):
    keyword: ClassVar[str] = KEYWORD_GIVEN


@dataclass(frozen=True)
class When(Step):
    keyword: ClassVar[str] = KEYWORD_WHEN


@dataclass(frozen=True)
class Then(Step):
    keyword: ClassVar[str] = KEYWORD_THEN


@dataclass
class Scenario:
    description: str
    tags: List[str] = field(default_factory=list)
    steps: List[Step] = field(default_factory=list)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags


@dataclass
class ScenarioOutline:
    description: str
    tags: List[str] = field(default_factory=list)
    steps: List[Step] = field(default_factory=list)
    placeholders: List[str] = field(default_factory=list)
    examples: List[List[str]] = field(default_factory=list)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def expand(self) -> List[Scenario]:
        """Create one scenario per example row, with `<placeholder>` replaced in step text and block text."""
        scenarios: List[Scenario] = []
        rows = len(self.examples[0]) if len(self.examples) > 0 else 0

        for row in range(rows):
            values = {placeholder: column[row] for placeholder, column in zip(self.placeholders, self.examples)}
            steps: List[Step] = []

            for step in self.steps:
                text = step.text
                block_text = step.block_text
                for placeholder, value in values.items():
                    text = text.replace(f'<{placeholder}>', value)
                    block_text = block_text.replace(f'<{placeholder}>', value)

                steps.append(replace(step, text=text, block_text=block_text))

            scenarios.append(Scenario(self.description, list(self.tags), steps))

        return scenarios


AnyScenario = Union[Scenario, ScenarioOutline]


@dataclass
class FeatureHeader:
    description: str
    long_description: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)


@dataclass
class Feature:
    header: FeatureHeader
    scenarios: List[AnyScenario] = field(default_factory=list)
    errors: List[Err] = field(default_factory=list)

    def has_tag(self, tag: str) -> bool:
        return tag in self.header.tags


class ScenarioErrorPolicy(Enum):
    IGNORE = 'ignore'
    COLLECT = 'collect'
    FAIL = 'fail'

    @classmethod
    def from_string(cls, value: str) -> ScenarioErrorPolicy:
        for policy in cls:
            if policy.value == value.lower():
                return policy

        raise ValueError(f'{value} is not a valid scenario error policy')
