"""Pure rendering functions: structured data -> console text.

All renderers follow the same pattern:
  - Input: a schema model (``WeatherRecord``)
  - Output: str, ready to print
  - No side effects, no I/O

Public API:
  - report: build_report_text

Adding a renderer
-----------------
1. Create ``renderers/{name}.py`` with a build function::

       from weather_cli.renderers import render_template

       def build_something_text(record: WeatherRecord) -> str:
           return render_template("something.txt.j2", record=record)

2. Create a Jinja2 template in ``templates/{name}.txt.j2``.

3. Add tests: call your build function with a sample record and assert
   the returned text contains expected content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers; output is plain text
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=False,
    keep_trailing_newline=False,
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=jinja2.StrictUndefined,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
