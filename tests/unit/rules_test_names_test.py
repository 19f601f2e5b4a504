"""Unit tests for the test function naming rule."""

import time

import pytest

from solconv.core.rules import TestNameRule, is_valid_test_name
from solconv.models import FileRole, Validator
from tests.unit.rules_helpers import function, source_file, variable

ALLOWED_NAMES = [
    "test_Description",
    "test_Increment",
    "testFuzz_Description",
    "testFork_Description",
    "testForkFuzz_Description",
    "testForkFuzz_Description_MoreInfo",
    "test_RevertIf_Condition",
    "test_RevertWhen_Condition",
    "test_RevertOn_Condition",
    "test_RevertOn_Condition_MoreInfo",
    "testFuzz_RevertIf_Condition",
    "testFuzz_RevertWhen_Condition",
    "testFuzz_RevertOn_Condition",
    "testFuzz_RevertOn_Condition_MoreInfo",
    "testForkFuzz_RevertIf_Condition",
    "testForkFuzz_RevertWhen_Condition",
    "testForkFuzz_RevertOn_Condition",
    "testForkFuzz_RevertOn_Condition_MoreInfo",
    "testForkFuzz_RevertOn_Condition_MoreInfo_Wow",
    "testForkFuzz_RevertOn_Condition_MoreInfo_Wow_As_Many_Underscores_As_You_Want",
]

DISALLOWED_NAMES = [
    "test",
    "testDescription",
    "testDescriptionMoreInfo",
]


@pytest.mark.parametrize("name", ALLOWED_NAMES)
def test_allowed_test_names(name: str) -> None:
    assert is_valid_test_name(name) is True


@pytest.mark.parametrize("name", DISALLOWED_NAMES)
def test_disallowed_test_names(name: str) -> None:
    assert is_valid_test_name(name) is False


@pytest.mark.parametrize("name", ["setUp", "helper", "run", "Test_lowercase", "_testHelper"])
def test_non_test_functions_are_exempt(name: str) -> None:
    assert is_valid_test_name(name) is True


def test_revert_without_separator_is_not_caught() -> None:
    # Known limitation: the trailing description group swallows the missing separator.
    assert is_valid_test_name("test_RevertIfCondition") is True


class TestTestNameRule:
    def test_reports_invalid_test_name(self) -> None:
        content = b"contract T {\n  function testIncrement() public {}\n}\n"
        offset = content.index(b"function")
        source = source_file(
            FileRole.TEST,
            function("testIncrement", start_byte=offset),
            content=content,
            path="test/T.t.sol",
        )

        violations = TestNameRule().check(source)

        assert len(violations) == 1
        assert violations[0].validator is Validator.TEST
        assert violations[0].item == "testIncrement"
        assert violations[0].line == 2
        assert violations[0].file == "test/T.t.sol"

    def test_valid_names_produce_nothing(self) -> None:
        source = source_file(FileRole.TEST, function("setUp"), function("test_Increment"))
        assert TestNameRule().check(source) == []

    def test_ignores_state_variables(self) -> None:
        source = source_file(FileRole.TEST, variable("testValue"))
        assert TestNameRule().check(source) == []

    @pytest.mark.parametrize(
        "role", [FileRole.SOURCE, FileRole.SCRIPT_EXECUTABLE, FileRole.SCRIPT_HELPER]
    )
    def test_only_applies_to_test_files(self, role: FileRole) -> None:
        source = source_file(role, function("testIncrement"))
        assert TestNameRule().check(source) == []


@pytest.mark.parametrize(
    "name",
    [
        "test_" + "a" * 40 + "$",
        "test_RevertWhen_CallerIsNotTheOwnerOfTheVault$",
        "testForkFuzz_" + "Condition_" * 20 + "-",
    ],
)
def test_long_invalid_names_are_rejected_quickly(name: str) -> None:
    started = time.perf_counter()
    assert is_valid_test_name(name) is False
    assert time.perf_counter() - started < 1.0


def test_dollar_in_description_is_invalid() -> None:
    assert is_valid_test_name("test_Value$") is False
