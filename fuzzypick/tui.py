from __future__ import annotations

from collections.abc import Iterable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.events import Key, Paste, Resize
from textual.widgets import OptionList, Static

from fuzzypick.models import Choice
from fuzzypick.rendering import highlight_choice, render_choice_preview
from fuzzypick.search import rank_choices


class FuzzyPickTui(App[str | None]):
    CSS_PATH = "fuzzypick.tcss"
    ENABLE_COMMAND_PALETTE = False
    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
        Binding("ctrl+c", "cancel", show=False),
    ]

    def __init__(
        self,
        candidates: Iterable[str],
        *,
        query: str = "",
        limit: int | None = None,
    ) -> None:
        super().__init__()
        self.theme = "rose-pine"
        self._candidates: list[str] = list(candidates)
        self._query = query
        self._limit = limit
        self._visible_choices: list[Choice] = []
        self._previewed_choice: Choice | None = None

    def compose(self) -> ComposeResult:
        with Horizontal(id="body"):
            with Vertical(id="sidebar"):
                yield OptionList(id="choice-list")
                yield Static("", id="status")
            with Vertical(id="main-panel"):
                yield Static("Type to filter candidates.", id="preview")

    def on_mount(self) -> None:
        self.query_one("#choice-list", OptionList).focus()
        self._filter_choices()

    def _filter_choices(self) -> None:
        self._visible_choices = rank_choices(
            self._query, self._candidates, limit=self._limit
        )
        self._render_choice_options()
        self._update_status()
        self._update_query_indicator()
        self._previewed_choice = None
        if self._visible_choices:
            self._update_preview(self._visible_choices[0])
        else:
            self.query_one("#preview", Static).update(
                "No candidates match the current query."
            )

    def _render_choice_options(self) -> None:
        choice_list = self.query_one("#choice-list", OptionList)
        choice_list.clear_options()
        if self._visible_choices:
            choice_list.add_options(
                [highlight_choice(choice) for choice in self._visible_choices]
            )
            choice_list.action_first()
            return
        choice_list.add_option("No matches")

    def _status_text(self) -> str:
        return f"{len(self._visible_choices)}/{len(self._candidates)} matches"

    def _update_status(self) -> None:
        self.query_one("#status", Static).update(self._status_text())

    def _query_indicator_text(self) -> Text:
        indicator = Text()
        indicator.append(">", style="bold red")
        indicator.append(f" {self._query}_", style="bold white")
        return indicator

    def _update_query_indicator(self) -> None:
        sidebar = self.query_one("#sidebar", Vertical)
        sidebar.styles.border_title_align = "left"
        sidebar.border_title = self._query_indicator_text()

    def _main_panel_content_width(self) -> int:
        main_panel = self.query_one("#main-panel", Vertical)
        if main_panel.size.width <= 0:
            return 60
        return max(40, main_panel.size.width - 6)

    def _update_preview(self, choice: Choice) -> None:
        if self._previewed_choice == choice:
            return
        self.query_one("#preview", Static).update(
            render_choice_preview(
                choice,
                self._query,
                content_width=self._main_panel_content_width(),
            )
        )
        self._previewed_choice = choice

    def _set_query(self, query: str) -> None:
        if query == self._query:
            return
        self._query = query
        self._filter_choices()

    def _append_query_text(self, text: str) -> None:
        self._set_query(self._query + text)

    def _highlighted_choice(self) -> Choice | None:
        highlighted = self.query_one("#choice-list", OptionList).highlighted
        if highlighted is None or not 0 <= highlighted < len(self._visible_choices):
            return None
        return self._visible_choices[highlighted]

    def action_cancel(self) -> None:
        self.exit(None)

    def on_key(self, event: Key) -> None:
        if event.key == "backspace":
            self._set_query(self._query[:-1])
            event.stop()
            return

        if event.key == "ctrl+u":
            self._set_query("")
            event.stop()
            return

        if event.key == "space":
            self._append_query_text(" ")
            event.stop()
            return

        if event.character and event.character.isprintable():
            self._append_query_text(event.character)
            event.stop()
            return

    def on_paste(self, event: Paste) -> None:
        sanitized = event.text.replace("\r", "").replace("\n", "")
        if not sanitized:
            return
        self._append_query_text(sanitized)
        event.stop()

    def on_resize(self, event: Resize) -> None:
        del event
        self.call_after_refresh(self._refresh_after_resize)

    def _refresh_after_resize(self) -> None:
        # The preview box is width-dependent.
        choice = self._highlighted_choice()
        self._previewed_choice = None
        if choice is not None:
            self._update_preview(choice)

    def on_option_list_option_highlighted(
        self, event: OptionList.OptionHighlighted
    ) -> None:
        if event.option_list.id != "choice-list":
            return
        if not 0 <= event.option_index < len(self._visible_choices):
            return
        self._update_preview(self._visible_choices[event.option_index])

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option_list.id != "choice-list":
            return
        if not 0 <= event.option_index < len(self._visible_choices):
            return
        self.exit(self._visible_choices[event.option_index].text)
