"""RGF policy advisor CLI — entry-point for every tool.

Usage:
    python cli/main.py --help

Command groups:
    browse / text / metadata / policy-info   → page extraction (network)
    questionnaire / recommend                → advisor (offline)
    tools / serve                            → tool listing, HTTP API
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that
# `from policy_backend.xxx import ...` works when the CLI is invoked as
# `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import Any, Optional

import typer

from policy_backend.config import configure_logging, settings
from policy_backend.tools import TOOLS, invoke

app = typer.Typer(
    name="rgf-advisor",
    help="RGF car-insurance policy advisor CLI.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override LOG_LEVEL."),
) -> None:
    configure_logging(log_level)


def _run(tool: str, args: Optional[dict[str, Any]] = None) -> None:
    """Invoke *tool* and print its result, or the error and exit 1."""
    result = invoke(tool, args)
    if not result["success"]:
        typer.echo(f"Error: {result['error']}", err=True)
        raise typer.Exit(code=1)
    typer.echo(result["data"])


# ---------------------------------------------------------------------------
# Extraction commands
# ---------------------------------------------------------------------------
@app.command("browse")
def browse(
    include_html: bool = typer.Option(
        False, "--include-html", help="Return a text + raw HTML preview envelope."
    ),
) -> None:
    """Print the policy page body text."""
    _run("browse_page", {"include_html": include_html})


@app.command("text")
def text() -> None:
    """Print the page text split into paragraphs, headings and list items."""
    _run("extract_text")


@app.command("metadata")
def metadata() -> None:
    """Print the page title, description, links and headings as JSON."""
    _run("get_page_metadata")


@app.command("policy-info")
def policy_info() -> None:
    """Print the coverage types and features found on the policy page."""
    _run("get_rgf_policy_info")


# ---------------------------------------------------------------------------
# Advisor commands
# ---------------------------------------------------------------------------
@app.command("questionnaire")
def questionnaire() -> None:
    """Print the profile questionnaire as JSON."""
    _run("get_policy_questionnaire")


@app.command("recommend")
def recommend(
    age: Optional[float] = typer.Option(None, help="Driver's age in years."),
    driving_experience: Optional[float] = typer.Option(None, help="Years of driving experience."),
    vehicle_type: Optional[str] = typer.Option(None, help="Vehicle type, e.g. sedan."),
    annual_mileage: Optional[float] = typer.Option(None, help="Annual mileage in km."),
    driving_habits: Optional[str] = typer.Option(None, help="urban | highway | mixed."),
    has_accidents: Optional[bool] = typer.Option(
        None, "--has-accidents/--no-accidents", help="Accidents in the past 5 years."
    ),
    accident_count: Optional[float] = typer.Option(None, help="Number of accidents."),
    vehicle_value: Optional[float] = typer.Option(None, help="Vehicle value in euros."),
    budget_range: Optional[str] = typer.Option(None, help='Monthly budget, e.g. "€50-100".'),
) -> None:
    """Recommend a policy for the given driver profile."""
    args = {
        "age": age,
        "driving_experience": driving_experience,
        "vehicle_type": vehicle_type,
        "annual_mileage": annual_mileage,
        "driving_habits": driving_habits,
        "has_accidents": has_accidents,
        "accident_count": accident_count,
        "vehicle_value": vehicle_value,
        "budget_range": budget_range,
    }
    _run("recommend_policy", {k: v for k, v in args.items() if v is not None})


# ---------------------------------------------------------------------------
# Tool listing / server
# ---------------------------------------------------------------------------
@app.command("tools")
def tools() -> None:
    """List the available tools."""
    for tool in TOOLS:
        typer.echo(f"  {tool['name']:<26} {tool['description']}")


@app.command("serve")
def serve(
    host: str = typer.Option(settings.api_host, help="Bind address."),
    port: int = typer.Option(settings.api_port, help="Bind port."),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    typer.echo(f"[serve] HTTP API on http://{host}:{port}/api/")
    uvicorn.run("policy_backend.api.app:app", host=host, port=port)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
