import pytest

from gherkin_lite.model import (
    Feature,
    FeatureHeader,
    Given,
    Scenario,
    ScenarioErrorPolicy,
    ScenarioOutline,
    Then,
    When,
)


class TestStep:
    def test_keyword(self) -> None:
        assert Given.keyword == 'Given'
        assert When.keyword == 'When'
        assert Then.keyword == 'Then'

    def test_equality(self) -> None:
        assert Given('a') == Given('a')
        assert Given('a') == Given('a', block_text='')
        assert Given('a', block_text='b') != Given('a')
        assert Given('a') != Given('b')
        assert Given('a') != When('a')
        assert When('a') != Then('a')

    def test_hash(self) -> None:
        assert hash(Given('a', block_text='b')) == hash(Given('a', block_text='b'))
        # kind is not part of the hash
        assert hash(Given('a')) == hash(When('a')) == hash(Then('a'))
        assert len({Given('a'), Given('a'), When('a')}) == 2

    def test_with_block_text(self) -> None:
        step = Then('a message is shown')
        patched = step.with_block_text('hello\nworld')

        assert isinstance(patched, Then)
        assert patched.text == 'a message is shown'
        assert patched.block_text == 'hello\nworld'
        assert step.block_text == ''

    def test_immutable(self) -> None:
        step = Given('a')

        with pytest.raises(AttributeError):
            step.text = 'b'  # type: ignore[misc]


def test_has_tag() -> None:
    scenario = Scenario('S', ['@foo', '@bar'], [])
    outline = ScenarioOutline('O', ['@baz'])
    feature = Feature(FeatureHeader('F', [], ['@Feature']))

    assert scenario.has_tag('@foo')
    assert scenario.has_tag('@bar')
    assert not scenario.has_tag('foo')
    assert not scenario.has_tag('@fo')
    assert outline.has_tag('@baz')
    assert not outline.has_tag('@foo')
    assert feature.has_tag('@Feature')
    assert not feature.has_tag('@feature')


class TestScenarioOutline:
    def test_expand(self) -> None:
        outline = ScenarioOutline(
            'Login attempts',
            ['@outline'],
            [
                Given('a user <name>'),
                When('the user logs in', block_text='password: <password>'),
                Then('<name> sees <result>'),
            ],
            ['name', 'password', 'result'],
            [['alice', 'bob'], ['secret', 'wrong'], ['success', 'failure']],
        )

        scenarios = outline.expand()

        assert scenarios == [
            Scenario(
                'Login attempts',
                ['@outline'],
                [
                    Given('a user alice'),
                    When('the user logs in', block_text='password: secret'),
                    Then('alice sees success'),
                ],
            ),
            Scenario(
                'Login attempts',
                ['@outline'],
                [
                    Given('a user bob'),
                    When('the user logs in', block_text='password: wrong'),
                    Then('bob sees failure'),
                ],
            ),
        ]

        # outline is left untouched
        assert outline.steps[0] == Given('a user <name>')

    def test_expand_no_examples(self) -> None:
        assert ScenarioOutline('O', [], [Given('a <x>')], ['x'], [[]]).expand() == []
        assert ScenarioOutline('O', [], [Given('a')], [], []).expand() == []


class TestScenarioErrorPolicy:
    def test_from_string(self) -> None:
        assert ScenarioErrorPolicy.from_string('ignore') == ScenarioErrorPolicy.IGNORE
        assert ScenarioErrorPolicy.from_string('COLLECT') == ScenarioErrorPolicy.COLLECT
        assert ScenarioErrorPolicy.from_string('Fail') == ScenarioErrorPolicy.FAIL

        with pytest.raises(ValueError) as ve:
            ScenarioErrorPolicy.from_string('explode')
        assert str(ve.value) == 'explode is not a valid scenario error policy'
