"""Write a self-navigating artifact pointing at another artifact."""

import os
from pathlib import Path

from .INFOBAR_ATTRIBUTE import INFOBAR_ATTRIBUTE
from .render_template import render_template

_STUB_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{{ title }}</title>
<meta http-equiv="refresh" content="0; url={{ target }}">
</head>
<body>
<a {{ attribute }} href="{{ url }}">{{ url }}</a>
<p>Archived copy: <a href="{{ target }}">{{ target }}</a></p>
</body>
</html>
"""


def write_redirect_stub(path: Path, target_path: Path, title: str, url: str) -> None:
    """Create ``path`` as a redirect to ``target_path`` (written relative to ``path``)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    target = Path(os.path.relpath(target_path, path.parent)).as_posix()
    html = render_template(_STUB_TEMPLATE, {"title": title, "target": target, "url": url, "attribute": INFOBAR_ATTRIBUTE})
    path.write_text(html, encoding="utf-8")
