"""Behaviour tests for code block annotations.

These pytest-bdd scenarios render a typical API reference snippet: a ``curl``
request captioned with ``{: codeblock-file="..."}`` followed by a JSON
response hidden with ``{: code="hidden"}``. The feature file
``code_annotations.feature`` drives the scenario.

Usage
-----
Run ``pytest tests/bdd/test_code_annotations.py -v`` after installing the dev
dependencies (``uv sync --group dev``). No network access is required.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from docs_renderer import render
from docs_renderer._constants import HIDDEN_CODE_SUMMARY

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "code_annotations.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("markdown with a captioned curl request and a hidden response")
def given_markdown(scenario_state: dict[str, object]) -> None:
    """Store an API example with both code directives."""
    scenario_state["markdown"] = (
        "## Get a build\n\n"
        "```\n"
        "curl https://api.example.com/v2/organizations/{org.slug}/builds/{build.number}\n"
        "```\n"
        '{: codeblock-file="request.sh"}\n\n'
        "```json\n"
        '{"id": "b1", "state": "passed"}\n'
        "```\n"
        '{: code="hidden"}\n'
    )


@when("I render the markdown")
def when_render(scenario_state: dict[str, object]) -> None:
    """Render the stored markdown and parse the HTML."""
    html = render(typ.cast("str", scenario_state["markdown"]))
    scenario_state["soup"] = BeautifulSoup(html, "html.parser")


def _soup(scenario_state: dict[str, object]) -> BeautifulSoup:
    return typ.cast("BeautifulSoup", scenario_state["soup"])


@then("the request is wrapped in a figure captioned with its filename")
def then_figure(scenario_state: dict[str, object]) -> None:
    """The curl block sits inside a captioned figure."""
    figure = _soup(scenario_state).find("figure")
    assert figure is not None, "expected a figure around the request"
    assert figure.find("figcaption").get_text() == "request.sh"
    assert figure.find("code").get_text().startswith("curl ")


@then("the request highlights its URI template placeholders")
def then_templates(scenario_state: dict[str, object]) -> None:
    """Both placeholders are wrapped in operator spans."""
    code = _soup(scenario_state).find("figure").find("code")
    spans = [span.get_text() for span in code.find_all("span", class_="o")]
    assert spans == ["{org.slug}", "{build.number}"]


@then("the response is collapsed behind a disclosure")
def then_details(scenario_state: dict[str, object]) -> None:
    """The JSON response is wrapped in details with the fixed summary."""
    details = _soup(scenario_state).find("details")
    assert details is not None, "expected the response inside a details element"
    assert details.find("summary").get_text() == HIDDEN_CODE_SUMMARY
    assert '"state"' in details.find("code").get_text()
    assert details.find("figure") is None, "hidden block must not be the figure"


@then("no directive text remains in the page")
def then_no_directives(scenario_state: dict[str, object]) -> None:
    """Every directive paragraph was consumed."""
    assert "{:" not in _soup(scenario_state).get_text()
