from pathlib import Path

import pytest
from jinja2 import UndefinedError

from htmlbuild.elements import ContainerElement, ImageElement
from htmlbuild.templating import render_template, template_environment


def _env(tmp_path: Path, name: str, source: str):
    templates_dir = tmp_path / "templates"
    templates_dir.mkdir(parents=True, exist_ok=True)
    (templates_dir / name).write_text(source, encoding="utf-8")
    return template_environment(templates_dir)


def test_elements_are_inserted_without_double_escaping(tmp_path: Path) -> None:
    env = _env(tmp_path, "page.html", "<main>{{ card }}</main><p>{{ note }}</p>")
    card = ContainerElement("div").with_class("card").with_text("a & b")

    output = render_template(env, "page.html", card=card, note="<b>bold</b>")

    assert output == (
        '<main><div class="card"><span>a &amp; b</span></div></main>'
        "<p>&lt;b&gt;bold&lt;/b&gt;</p>"
    )


def test_render_filter(tmp_path: Path) -> None:
    env = _env(tmp_path, "img.html", "{{ image | render }}")
    output = render_template(env, "img.html", image=ImageElement("a.png").with_alt("A"))
    assert output == '<img src="a.png" alt="A" />'


def test_strict_undefined(tmp_path: Path) -> None:
    env = _env(tmp_path, "strict.jinja", "{{ missing_value }}")
    with pytest.raises(UndefinedError):
        env.get_template("strict.jinja").render()
