"""Demonstration command that shows generated names and word statistics."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from whimsy.core import (
    categories,
    random_animal,
    random_color,
    random_name,
    random_plant,
)


def _lines() -> list[str]:
    lines = [
        "🎲 Whimsy - Random Memorable Names",
        "==================================",
        "",
        "📝 Individual Names:",
        f"🌱 Plant:  {random_plant()}",
        f"🐾 Animal: {random_animal()}",
        f"🎨 Color:  {random_color()}",
        "",
        "🎯 Random Names:",
        f"1 part:  {random_name(1)}",
        f"2 parts: {random_name(2)}",
        f"3 parts: {random_name(3)}",
    ]
    cats = categories()
    max_parts = len(cats)
    lines += [
        f"{max_parts} parts: {random_name(max_parts)}",
        f"Default: {random_name()}",
        "",
        "🏗️  Infrastructure Examples:",
        f"Server:      {random_name(2)}.example.com",
        f"Database:    {random_name(3)}-db",
        f"Cluster:     {random_name(1)}-cluster",
        "",
        "📊 Statistics:",
    ]
    lines += [f"{cat.name.title():<8}: {len(cat.words)} names" for cat in cats]
    lines += [
        f"Total words: {sum(len(cat.words) for cat in cats)}",
        f"Categories:  {len(cats)}",
        "",
        "🔍 Sample Names:",
    ]
    for cat in cats:
        words = cat.words
        n = len(words)
        if n >= 5:
            samples = [words[0], words[n // 4], words[n // 2], words[3 * n // 4], words[-1]]
            lines.append(f"{cat.name.title():<8}: {', '.join(samples)}")
    return lines


def render() -> str:
    """Build the full demonstration report as text."""
    return "\n".join(_lines()) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the demonstration report."""
    parser = argparse.ArgumentParser(
        prog="whimsy-demo",
        description="Show random memorable names and word statistics.",
    )
    parser.parse_args(argv)
    print(render(), end="")
    return 0