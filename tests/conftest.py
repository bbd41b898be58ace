from pathlib import Path

import pytest


FEATURE_LOGIN = '''@smoke @login
@regression
Feature: User login
    As a registered user
    I want to log in

    @happy
    Scenario: Successful login
        Given a registered user "alice"
        And the login page is open
        When the user submits valid credentials
        Then the dashboard is shown
        And a welcome message is shown
            """
            Welcome back,
              alice!
            """

    Scenario Outline: Login attempts
        Given a user <name>
        When the user logs in with <password>
        Then the result is <result>

    Examples:
        | name  | password | result  |
        | alice | secret   | success |
        | bob   | wrong    | failure |
'''

FEATURE_BROKEN_SCENARIOS = '''Feature: Broken
    Scenario: Good one
        Given a
        Then b

    Scenario: Wrong order
        When w
        Given g

    Scenario: Leading and
        And x

    Scenario: Another good one
        Given c
'''


@pytest.fixture
def feature_file(tmp_path: Path) -> Path:
    file = tmp_path / 'login.feature'
    file.write_text(FEATURE_LOGIN, encoding='utf-8')

    return file
