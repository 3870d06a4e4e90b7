"""Shared test fixtures for templatelint."""

from __future__ import annotations

import pytest

from templatelint.models.options import ValidationOptions
from templatelint.validator.engine import TemplateValidator

SAMPLE_TEMPLATE = """\
<!doctype html>
<div class="todo-list" id="todo-list">
  <!-- items rendered by the controller -->
  <label for="new-todo">New item</label>
  <input id="new-todo" class="todo-input" type="text">
  <ul class="todo-items">
    <li class="todo-item {{ item.done }}">{{ item.title }} &amp; more</li>
  </ul>
  <br>
</div>
"""

SAMPLE_CONTROLLER = """\
export default class TodoController {
    attach(root) {
        this.list = root.querySelector("#todo-list");
        this.input = root.querySelector(".todo-input");
        root.querySelectorAll(".todo-list .todo-items");
    }
}
"""

SAMPLE_AMBIENT = """\
window.legacy = function () {
    return by.id("legacy_Panel");
};
"""


@pytest.fixture
def validator() -> TemplateValidator:
    return TemplateValidator()


@pytest.fixture
def sample_options() -> ValidationOptions:
    return ValidationOptions(
        controller_source=SAMPLE_CONTROLLER,
        ambient_source=SAMPLE_AMBIENT,
    )
