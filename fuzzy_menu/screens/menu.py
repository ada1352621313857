"""Menu screen: type to filter, arrows to move, enter to pick.

Searches run after a short quiet period following the last keystroke,
so fast typing does not re-rank the whole list on every key.
"""

from __future__ import annotations

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.message import Message
from textual.reactive import reactive
from textual.screen import Screen
from textual.timer import Timer
from textual.widgets import Input, Static

from ..models.candidate import Candidate, SearchResult
from ..services.config import MenuConfig
from ..services.protocols import SearchEngineProtocol

MATCH_STYLE = "bold underline"


def highlight(result: SearchResult) -> Text:
    """Render a result with its matched characters emphasised."""
    original = result.text
    text = Text(original, no_wrap=True, overflow="ellipsis")
    for position in result.positions:
        if position < len(original):
            text.stylize(MATCH_STYLE, position, position + 1)
    return text


class ResultItem(Static):
    """A single result row in the menu list."""

    class Chosen(Message):
        """Posted when the row is clicked."""

        def __init__(self, item: ResultItem) -> None:
            self.item = item
            super().__init__()

    def __init__(self, result: SearchResult, row: int, **kwargs) -> None:
        super().__init__(highlight(result), classes="list-row", **kwargs)
        self.result = result
        self.row = row

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(self.Chosen(self))


class MenuScreen(Screen[SearchResult | None]):
    """Searchable list of candidate lines."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
        Binding("enter", "select", "Select"),
        Binding("up", "move_up", "Up", show=False),
        Binding("down", "move_down", "Down", show=False),
        Binding("ctrl+p", "move_up", "Up", show=False),
        Binding("ctrl+n", "move_down", "Down", show=False),
    ]

    selected_index: reactive[int] = reactive(0)

    def __init__(self, engine: SearchEngineProtocol, config: MenuConfig) -> None:
        super().__init__()
        self._engine = engine
        self._config = config
        self._candidates: list[Candidate] = []
        self._results: list[SearchResult] = []
        self._loaded = False
        self._debounce_timer: Timer | None = None
        self._updating = False  # Guard flag for DOM updates

    @property
    def results(self) -> list[SearchResult]:
        """Results of the last settled query."""
        return self._results

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def visible_results(self) -> list[SearchResult]:
        return self._results[: self._config.max_results]

    def compose(self) -> ComposeResult:
        with Vertical(id="menu"):
            yield Input(placeholder=f"{self._config.prompt}...", id="query-input")
            yield Static("loading...", id="status")
            yield Vertical(id="results")
            yield Static("↑↓ navigate  enter select  esc cancel", classes="dialog-hint")

    def on_mount(self) -> None:
        self.query_one("#query-input", Input).focus()

    def set_candidates(self, candidates: list[Candidate]) -> None:
        """Install the loaded candidates and show the current ranking."""
        self._candidates = candidates
        self._loaded = True
        self.run_search()

    @property
    def query_text(self) -> str:
        return self.query_one("#query-input", Input).value

    def on_input_changed(self, event: Input.Changed) -> None:
        """Restart the quiet-period timer on every keystroke."""
        if self._debounce_timer is not None:
            self._debounce_timer.stop()
            self._debounce_timer = None

        if self._config.debounce_ms == 0:
            self.run_search()
            return
        self._debounce_timer = self.set_timer(
            self._config.debounce_seconds, self._on_query_settled
        )

    def _on_query_settled(self) -> None:
        self._debounce_timer = None
        self.run_search()

    def run_search(self) -> None:
        """Search with the current query and rebuild the list."""
        if not self._loaded:
            return
        self._results = self._engine.search(self.query_text, self._candidates)
        self._update_results()
        self.selected_index = 0

    def _update_results(self) -> None:
        """Rebuild the results list."""
        self._updating = True
        try:
            status = self.query_one("#status", Static)
            status.update(f"{len(self._results)}/{len(self._candidates)}")

            results = self.query_one("#results", Vertical)
            results.remove_children()

            if not self._results:
                results.mount(Static("no matches", classes="empty-list"))
                return

            items = []
            for row, result in enumerate(self.visible_results):
                item = ResultItem(result, row)
                if row == 0:
                    item.add_class("selected")
                items.append(item)
            results.mount_all(items)
        finally:
            self._updating = False

    def watch_selected_index(self, new_index: int) -> None:
        """Update visual selection."""
        if self._updating:
            return  # Skip during DOM rebuild
        for child in self.query_one("#results", Vertical).children:
            if isinstance(child, ResultItem):
                if child.row == new_index:
                    child.add_class("selected")
                    child.scroll_visible()
                else:
                    child.remove_class("selected")

    def action_move_down(self) -> None:
        """Move selection down."""
        visible = self.visible_results
        if visible:
            self.selected_index = min(self.selected_index + 1, len(visible) - 1)

    def action_move_up(self) -> None:
        """Move selection up."""
        if self.visible_results:
            self.selected_index = max(self.selected_index - 1, 0)

    def action_select(self) -> None:
        """Dismiss with the selected result."""
        # A pending keystroke must be ranked before picking
        if self._debounce_timer is not None:
            self._debounce_timer.stop()
            self._on_query_settled()

        visible = self.visible_results
        if visible and 0 <= self.selected_index < len(visible):
            self.dismiss(visible[self.selected_index])

    def action_cancel(self) -> None:
        self.dismiss(None)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_select()

    def on_result_item_chosen(self, event: ResultItem.Chosen) -> None:
        """Handle click on a result row."""
        self.selected_index = event.item.row
        self.action_select()
