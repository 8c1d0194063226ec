"""Link syntaxes package."""

from pathlib import Path

from ._BaseSyntax import BaseSyntax
from ._MarkdownSyntax import MarkdownSyntax
from ._OrgSyntax import OrgSyntax

_SYNTAXES: dict[str, type[BaseSyntax]] = {
    "markdown": MarkdownSyntax,
    "org": OrgSyntax,
}

_EXTENSIONS: dict[str, str] = {
    ".md": "markdown",
    ".markdown": "markdown",
    ".org": "org",
}


def get_syntax(syntax_name: str | None = None, file_path: Path | None = None) -> BaseSyntax:
    """Get a syntax instance by name or file extension."""

    syntax_cls = None

    # 1. By explicit name
    if syntax_name:
        syntax_cls = _SYNTAXES.get(syntax_name)
        if not syntax_cls:
            raise ValueError(f"Unknown syntax: {syntax_name}")

    # 2. By extension
    elif file_path:
        syntax_name = _EXTENSIONS.get(Path(file_path).suffix.lower())
        if syntax_name:
            syntax_cls = _SYNTAXES.get(syntax_name)

    # 3. Fallback to Markdown
    if not syntax_cls:
        syntax_cls = MarkdownSyntax

    return syntax_cls()


__all__ = ["BaseSyntax", "MarkdownSyntax", "OrgSyntax", "get_syntax"]
