import re


KEYWORD_FEATURE = 'Feature'
KEYWORD_SCENARIO = 'Scenario'
KEYWORD_SCENARIO_OUTLINE = 'Scenario Outline'
KEYWORD_EXAMPLES = 'Examples'
KEYWORD_GIVEN = 'Given'
KEYWORD_WHEN = 'When'
KEYWORD_THEN = 'Then'
KEYWORD_AND = 'And'

MARKER_BLOCK_TEXT = '"""'

PATTERN_TAG = re.compile(r'(@[^\s]+)')
PATTERN_FEATURE = re.compile(r'Feature: (?P<description>.+)')
PATTERN_SCENARIO = re.compile(r'Scenario: (?P<description>.+)')
PATTERN_SCENARIO_OUTLINE = re.compile(r'Scenario Outline: (?P<description>.+)')
PATTERN_EXAMPLES = re.compile(r'Examples:')
PATTERN_STEP = re.compile(r'(?P<step_type>Given|When|Then|And) (?P<step_definition>.+)')
PATTERN_BLOCK_TEXT = re.compile(r'"""')
PATTERN_PLACEHOLDER = re.compile(r'(\w+)')

# reasons
REASON_UNEXPECTED_CONSTRUCT = 'unexpected_construct'
REASON_BAD_STEP_ORDER = 'bad_step_order'
REASON_LEADING_AND = 'leading_and'
REASON_INVALID_STEP = 'invalid_step'
REASON_BAD_EXAMPLES_TABLE = 'bad_examples_table'

# expected / actual
SYMBOL_FEATURE = 'feature'
SYMBOL_SCENARIO = 'scenario'
SYMBOL_EXAMPLES = 'examples'
SYMBOL_MISSING_EXAMPLES = 'missing_examples'
SYMBOL_UNKNOWN_CONSTRUCT = 'unknown_construct'
SYMBOL_NOT_GIVEN = 'NotGiven'
SYMBOL_NOT_WHEN = 'NotWhen'
SYMBOL_GIVEN = 'Given'
SYMBOL_WHEN = 'When'
SYMBOL_SPECIFIC_STEP = 'specific_step'
SYMBOL_AND_STEP = 'and_step'
SYMBOL_BLOCK_TEXT = 'block_text'
SYMBOL_STEP_DEFINITION = 'step_definition'
SYMBOL_INVALID_STEP_DEFINITION = 'invalid_step_definition'
SYMBOL_PLACEHOLDERS = 'placeholders'
SYMBOL_EXAMPLE_ROW = 'example_row'

FEATURE_FILE_GLOB = '*.feature'
