"""Substitute a finished GridOutput into a static document template.

The template is plain text with two placeholders: ``{{TITLE}}`` (replaced
by the HTML-escaped title) and ``{{INLINE_JSON}}`` (replaced by the JSON
encoding of the output record). No other processing is done.
"""

import html
import logging
from importlib import resources
from pathlib import Path
from typing import Optional, Union

from grovegrid.model import GridOutput

__all__ = ["load_template", "output_json", "script_safe_json", "render_document",
           "write_text", "write_json", "write_document"]

logger = logging.getLogger(__name__)

TITLE_PLACEHOLDER = "{{TITLE}}"
JSON_PLACEHOLDER = "{{INLINE_JSON}}"

# Unicode escapes for characters that could close or confuse a script
# element. All three only occur inside JSON strings.
_SCRIPT_ESCAPES = (("&", "\\u0026"), ("<", "\\u003c"), (">", "\\u003e"))


def load_template(template_path: Optional[Union[str, Path]] = None) -> str:
    """Read a template file, or the packaged default when no path is given."""
    if template_path is None:
        return (
            resources.files("grovegrid.visualization")
            .joinpath("templates")
            .joinpath("index.html")
            .read_text(encoding="utf-8")
        )
    return Path(template_path).read_text(encoding="utf-8")


def output_json(output: GridOutput, indent: int = 2) -> str:
    return output.model_dump_json(indent=indent or None)


def script_safe_json(text: str) -> str:
    r"""Escape ``<``, ``>`` and ``&`` so JSON can sit inside a script element.

    >>> script_safe_json('{"note": "</script>"}')
    '{"note": "\\u003c/script\\u003e"}'
    """
    for char, escaped in _SCRIPT_ESCAPES:
        text = text.replace(char, escaped)
    return text


def render_document(template: str, output: GridOutput, title: str, indent: int = 2) -> str:
    """Return the template with title and inline JSON substituted.

    Examples
    --------
    >>> render_document("<title>{{TITLE}}</title>", output, "A & B")
    '<title>A &amp; B</title>'
    """
    text = template.replace(TITLE_PLACEHOLDER, html.escape(title, quote=True))
    return text.replace(JSON_PLACEHOLDER, script_safe_json(output_json(output, indent)))


def write_text(path: Union[str, Path], text: str) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def write_json(output: GridOutput, path: Union[str, Path], indent: int = 2) -> Path:
    """Write the raw output record for inspection or reuse by other tools."""
    path = write_text(path, output_json(output, indent))
    logger.info("Wrote data: %s", path)
    return path


def write_document(
    output: GridOutput,
    path: Union[str, Path],
    title: str,
    template_path: Optional[Union[str, Path]] = None,
    indent: int = 2,
) -> Path:
    text = render_document(load_template(template_path), output, title, indent)
    path = write_text(path, text)
    logger.info("Wrote document: %s", path)
    return path
