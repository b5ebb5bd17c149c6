from pathlib import Path

import pytest
from jinja2 import UndefinedError

from jsxmarkup import h
from jsxmarkup.templating import render_string, template_env


def test_nodes_are_not_escaped_twice():
    markup = render_string(
        "{{ h('a', {'href': url}, label) }}", url="/x?a=1&b=2", label="<go>"
    )
    assert markup == '<a href="/x?a=1&amp;b=2">&lt;go&gt;</a>'


def test_plain_values_are_still_autoescaped():
    assert render_string("{{ value }}", value="<b>") == "&lt;b&gt;"


def test_components_are_exposed_as_globals():
    def badge(attributes, contents):
        return h("span", {"dataKind": attributes["kind"]}, contents)

    env = template_env(components={"Badge": badge})
    assert render_string("{{ h(Badge, {'kind': 'new'}, 'x') }}", env) == '<span data-kind="new">x</span>'


def test_kebab_filter():
    assert render_string("{{ 'ariaLabel'|kebab }}") == "aria-label"


def test_templates_load_from_directories(tmp_path: Path):
    (tmp_path / "page.html").write_text(
        "<main>{{ h('p', none, body) }}</main>", encoding="utf-8"
    )
    env = template_env([tmp_path])
    assert env.get_template("page.html").render(body="a & b") == "<main><p>a &amp; b</p></main>"


def test_undefined_values_fail_loudly():
    with pytest.raises(UndefinedError):
        render_string("{{ missing }}")
