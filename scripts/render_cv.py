#!/usr/bin/env python3
"""
CV Rendering CLI

Compiles style configurations to CSS and renders CVs to HTML and PDF.

Commands:
    css      - Compile a style.json to the print stylesheet
    html     - Render the CV HTML (stylesheet embedded) without printing
    render   - Render the CV to PDF
    presets  - List available style presets
    defaults - Print a style.json with every default spelled out

Examples:\n

    render_cv.py css configs/style.json                              # Stylesheet to stdout

    render_cv.py css configs/style.json -p theme_brutalist           # With a preset

    render_cv.py html configs/personal.json configs/style.json -o cv.html

    render_cv.py render configs/personal.json configs/style.json     # PDF to output/cv.pdf

    render_cv.py render configs/personal.json configs/style.json --no-sandbox

    render_cv.py render                                              # Inputs default to configs/
"""

import json
import os
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from vitae.contexts.rendering import build_document, generate_cv
from vitae.contexts.styling import apply_presets, build_css, get_default_style, load_style_presets
from vitae.contexts.templating import DocumentLoadError, TemplateRenderError, load_json

load_dotenv()
CONFIGS_PATH = Path(os.getenv("CONFIGS_PATH", Path(__file__).resolve().parents[1] / "configs"))
DEFAULT_PERSONAL_PATH = CONFIGS_PATH / "personal.json"
DEFAULT_STYLE_PATH = CONFIGS_PATH / "style.json"

app = typer.Typer(
    help="Render curriculum vitae PDFs from personal and style JSON",
    add_completion=False,
    invoke_without_command=True,
)

PresetOption = Annotated[
    Optional[List[str]],
    typer.Option(
        "--preset",
        "-p",
        help="Style preset applied over style.json (repeatable, later wins)",
    ),
]


def _write_or_echo(text: str, out: Optional[Path]) -> None:
    if out is None:
        typer.echo(text)
        return
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8")
    except OSError as e:
        _fail(e)
    typer.secho(f"✓ Written: {out}", fg=typer.colors.GREEN, bold=True)


def _fail(error: Exception) -> None:
    typer.secho(f"Error: {error}\n", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("css")
def css_command(
    style_path: Annotated[Path, typer.Argument(help="Style configuration JSON")] = DEFAULT_STYLE_PATH,
    preset: PresetOption = None,
    out: Annotated[
        Optional[Path],
        typer.Option("--out", "-o", help="Write the stylesheet here instead of stdout"),
    ] = None,
):
    """
    Compile a style configuration to the print stylesheet.

    Examples:\n

        $ render_cv.py css configs/style.json

        $ render_cv.py css configs/style.json -p layout_single_column -o cv.css
    """
    try:
        style = apply_presets(load_json(style_path) or {}, preset or [])
    except (DocumentLoadError, ValueError) as e:
        _fail(e)

    _write_or_echo(build_css(style), out)


@app.command("html")
def html_command(
    personal_path: Annotated[Path, typer.Argument(help="Personal data JSON")] = DEFAULT_PERSONAL_PATH,
    style_path: Annotated[Path, typer.Argument(help="Style configuration JSON")] = DEFAULT_STYLE_PATH,
    template: Annotated[
        Optional[Path],
        typer.Option("--template", "-t", help="Custom Jinja2 HTML template"),
    ] = None,
    preset: PresetOption = None,
    out: Annotated[
        Optional[Path],
        typer.Option("--out", "-o", help="Write the HTML here instead of stdout"),
    ] = None,
):
    """
    Render the CV HTML document without printing it to PDF.

    Examples:\n

        $ render_cv.py html configs/personal.json configs/style.json -o output/cv.html
    """
    try:
        html = build_document(personal_path, style_path, preset or [], template)
    except (DocumentLoadError, TemplateRenderError, ValueError) as e:
        _fail(e)

    _write_or_echo(html, out)


@app.command("render")
def render_command(
    personal_path: Annotated[Path, typer.Argument(help="Personal data JSON")] = DEFAULT_PERSONAL_PATH,
    style_path: Annotated[Path, typer.Argument(help="Style configuration JSON")] = DEFAULT_STYLE_PATH,
    template: Annotated[
        Optional[Path],
        typer.Option("--template", "-t", help="Custom Jinja2 HTML template"),
    ] = None,
    out: Annotated[
        Optional[Path],
        typer.Option("--out", "-o", help="Output PDF path (default: output/cv.pdf)"),
    ] = None,
    html: Annotated[
        Optional[Path],
        typer.Option("--html", help="Where to keep the intermediate HTML (default: beside the PDF)"),
    ] = None,
    preset: PresetOption = None,
    no_sandbox: Annotated[
        bool,
        typer.Option("--no-sandbox", help="Launch Chromium with --no-sandbox"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug output"),
    ] = False,
):
    """
    Render a CV to PDF.

    Examples:\n

        $ render_cv.py render configs/personal.json configs/style.json

        $ render_cv.py render configs/personal.json configs/style.json -o out/me.pdf -p theme_hero
    """
    typer.secho(f"\nRendering: {personal_path}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Style: {style_path}")
    if preset:
        typer.echo(f"Presets: {', '.join(preset)}")
    typer.echo("")

    result = generate_cv(
        personal_path=personal_path,
        style_path=style_path,
        template_path=template,
        out_path=out,
        html_path=html,
        presets=preset or [],
        no_sandbox=no_sandbox,
        verbose=verbose,
    )

    typer.echo("")
    if result.success:
        typer.secho("✓ Render succeeded", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  PDF: {result.pdf_path}")
        typer.echo(f"  HTML: {result.html_path}")
    else:
        typer.secho(f"✗ Render failed with {len(result.errors)} errors", fg=typer.colors.RED, bold=True)
        for error in result.errors:
            typer.secho(f"  - {error}", fg=typer.colors.RED)

    if result.log_dir:
        typer.echo(f"  Log: {result.log_dir / 'render.log'}")
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


@app.command("presets")
def presets_command(
    category: Annotated[
        Optional[str],
        typer.Argument(help="Only list presets in this category (e.g., 'theme')"),
    ] = None,
):
    """
    List available style presets.

    Examples:\n

        $ render_cv.py presets

        $ render_cv.py presets layout
    """
    presets = load_style_presets()
    names = sorted(name for name in presets if category is None or name.startswith(f"{category}_"))

    if not names:
        typer.secho(f"No presets found for category '{category}'", fg=typer.colors.YELLOW)
        raise typer.Exit(code=1)

    for name in names:
        typer.secho(name, fg=typer.colors.CYAN, bold=True)
        typer.echo(f"  {json.dumps(presets[name], ensure_ascii=False)}")


@app.command("defaults")
def defaults_command():
    """Print a style.json with every default value spelled out."""
    typer.echo(json.dumps(get_default_style(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    app()
