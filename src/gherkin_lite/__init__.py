from importlib.metadata import version, PackageNotFoundError

from gherkin_lite.model import (
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
from gherkin_lite.parser import load_feature, parse_feature
from gherkin_lite.result import Err, Ok, ParseError, ParseResult


try:
    __version__ = version('gherkin-lite')
except PackageNotFoundError:
    __version__ = 'unknown'


__all__ = [
    'Err',
    'Feature',
    'FeatureHeader',
    'Given',
    'Ok',
    'ParseError',
    'ParseResult',
    'Scenario',
    'ScenarioErrorPolicy',
    'ScenarioOutline',
    'Step',
    'Then',
    'When',
    'load_feature',
    'parse_feature',
]
