"""Shared utility functions for initializr-core.

Provides identifier and naming helpers used to derive application and
package names, JSON I/O, and Rich-based console reporting.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Naming helpers
# ---------------------------------------------------------------------------

_CAMEL_BOUNDARY = re.compile(r"(?<=[^A-Z])(?=[A-Z])|(?<=.)(?=[A-Z][a-z])")
_WORD_SEPARATORS = re.compile(r"[_\- :]+")
_NON_WORD = re.compile(r"\W+")
_LEADING_DIGITS = re.compile(r"^[0-9]+(?!$)")


def capitalize(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched.

    Unlike ``str.capitalize`` this keeps existing capitals::

        capitalize("myApp") -> "MyApp"
    """
    if not text:
        return text
    return text[0].upper() + text[1:]


def split_camel_case(text: str) -> str:
    """Normalise the casing of camel-case words.

    Each camel-case word is lower-cased and then capitalised, so acronyms
    collapse into regular words::

        split_camel_case("HTTPServer") -> "HttpServer"
        split_camel_case("my-app")     -> "My-app"
    """
    return "".join(capitalize(part.lower()) for part in _CAMEL_BOUNDARY.split(text) if part)


def unsplit_words(text: str) -> str:
    """Join words separated by ``_``, ``-``, space or ``:`` in Pascal case.

    Examples::

        unsplit_words("My-cool_app") -> "MyCoolApp"
    """
    return "".join(capitalize(word) for word in _WORD_SEPARATORS.split(text) if word)


def is_java_identifier(text: str) -> bool:
    """Return ``True`` if *text* is a legal Java identifier."""
    if not text:
        return False
    if not (text[0].isalpha() or text[0] in "_$"):
        return False
    return all(char.isalnum() or char in "_$" for char in text[1:])


def clean_package_name(package_name: str) -> str:
    """Turn arbitrary text into a dotted Java package name.

    Hyphens are dropped, every run of non-word characters becomes a segment
    separator and leading digits are stripped from each segment::

        clean_package_name("com.example.my-app")  -> "com.example.myapp"
        clean_package_name("com.example.42foo")   -> "com.example.foo"
    """
    elements = _NON_WORD.split(package_name.strip().replace("-", ""))
    result = ""
    for element in elements:
        element = _LEADING_DIGITS.sub("", element)
        if not element:
            continue
        if not element.isdigit() and result:
            result += "."
        result += element
    return result.lower()


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON file that holds an object.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the top-level value is not an object.
    """
    file_path = Path(path)
    data = json.loads(file_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {file_path}, got {type(data).__name__}")
    return data


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
