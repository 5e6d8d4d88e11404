from __future__ import annotations

import math
import textwrap

from rich.markup import escape
from rich.text import Text

from fuzzypick.benchmark import BenchmarkResult
from fuzzypick.models import Choice

MATCH_STYLE = "bold red"


def format_score(value: float) -> str:
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return f"{value:.3f}"


def format_positions(positions: list[int] | None) -> str:
    if positions is None:
        return "not available"
    if not positions:
        return "none"
    return ", ".join(str(position) for position in positions)


def format_duration(seconds: float) -> str:
    if seconds >= 1.0:
        return f"{seconds:.3f} s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.3f} ms"
    return f"{seconds * 1e6:.3f} µs"


def highlight_choice(choice: Choice, *, style: str = MATCH_STYLE) -> Text:
    text = Text(choice.text)
    for position in choice.positions or []:
        if 0 <= position < len(choice.text):
            text.stylize(style, position, position + 1)
    return text


def format_choice_line(choice: Choice, *, show_score: bool) -> str:
    if not show_score:
        return choice.text
    return f"{format_score(choice.value):>8}  {choice.text}"


def render_kv_box(rows: list[tuple[str, str]], width: int) -> list[str]:
    if not rows:
        return []
    label_width = max(len(label) for label, _ in rows)
    inner_width = max(30, width - 2)
    value_width = max(10, inner_width - label_width - 3)

    lines = ["╭" + ("─" * inner_width) + "╮"]
    for label, value in rows:
        wrapped = textwrap.wrap(value, width=value_width) or [""]
        lines.append(f"│ {label:<{label_width}} {wrapped[0]:<{value_width}} │")
        for continuation in wrapped[1:]:
            lines.append(f"│ {'':<{label_width}} {continuation:<{value_width}} │")
    lines.append("╰" + ("─" * inner_width) + "╯")
    return lines


def render_choice_preview(choice: Choice, query: str, *, content_width: int) -> str:
    table_rows: list[tuple[str, str]] = [
        ("Query", query or "(empty)"),
        ("Score", format_score(choice.value)),
        ("Positions", format_positions(choice.positions)),
        ("Length", str(len(choice.text))),
    ]
    lines = [
        f"# {escape(choice.text)}",
        "",
        *(escape(line) for line in render_kv_box(table_rows, content_width)),
    ]
    return "\n".join(lines)


def render_benchmark_report(result: BenchmarkResult, *, width: int = 60) -> str:
    rows = [
        ("Query", result.query),
        ("Candidates", f"{result.candidate_count:,}"),
        ("Matches", f"{result.match_count:,}"),
        ("Iterations", f"{result.iterations:,}"),
        ("Total", format_duration(result.total_seconds)),
        ("Per iteration", format_duration(result.seconds_per_iteration)),
        ("Per match", format_duration(result.seconds_per_match)),
    ]
    return "\n".join(render_kv_box(rows, width))
