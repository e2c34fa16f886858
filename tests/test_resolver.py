"""Tests for ${VAR} resolution against layered build variables."""

from __future__ import annotations

import pytest

from sonarpush.resolver import build_environment, resolve_variables


@pytest.fixture
def environment():
    return build_environment(
        {"GIT_BRANCH": "develop", "JOB": "from-env", "HOME": "/root"},
        {"JOB": "from-params", "BUILD_NUMBER": "17"},
    )


class TestBuildEnvironment:
    def test_build_params_override_env(self, environment) -> None:
        assert environment["JOB"] == "from-params"

    def test_both_layers_present(self, environment) -> None:
        assert environment["GIT_BRANCH"] == "develop"
        assert environment["BUILD_NUMBER"] == "17"

    def test_read_only(self, environment) -> None:
        with pytest.raises(TypeError):
            environment["JOB"] = "changed"


class TestResolveVariables:
    @pytest.mark.parametrize("template", ["plain-name", "", "   ", "dollar $ and {braces}"])
    def test_no_tokens_unchanged(self, environment, template: str) -> None:
        assert resolve_variables(template, environment) == template

    def test_single_token(self, environment) -> None:
        assert resolve_variables("${GIT_BRANCH}", environment) == "develop"

    def test_token_inside_text(self, environment) -> None:
        assert resolve_variables("feature-${BUILD_NUMBER}-x", environment) == "feature-17-x"

    def test_multiple_tokens(self, environment) -> None:
        assert resolve_variables("${JOB}/${GIT_BRANCH}", environment) == "from-params/develop"

    def test_missing_token_invalidates_whole_template(self, environment) -> None:
        assert resolve_variables("${GIT_BRANCH}-${NOPE}", environment) is None

    def test_substituted_value_not_rescanned(self) -> None:
        env = build_environment({"A": "${B}", "B": "boom"}, {})
        assert resolve_variables("x-${A}", env) == "x-${B}"

    def test_unterminated_token_is_literal(self, environment) -> None:
        assert resolve_variables("broken ${GIT_BRANCH", environment) == "broken ${GIT_BRANCH"

    def test_empty_value(self) -> None:
        env = build_environment({"EMPTY": ""}, {})
        assert resolve_variables("a${EMPTY}b", env) == "ab"
