"""Central CSS definitions for the fuzzy-menu design system."""

# Common UI patterns shared across components
COMMON_CSS = """
/* Hint text - bottom of screen */
.dialog-hint {
    text-align: center;
    color: $text-disabled;
}

/* Standard list row styling */
.list-row {
    height: 1;
    padding: 0 1;
}

.list-row:hover {
    background: $surface-lighten-1;
}

.list-row.selected {
    background: $surface-lighten-1;
}

/* Empty list placeholder */
.empty-list {
    color: $text-disabled;
    padding: 2;
    text-align: center;
}
"""

# Menu screen - minimal chrome
MENU_CSS = """
MenuScreen {
    background: $background;
}

MenuScreen #menu {
    height: 1fr;
    padding: 0 1;
}

MenuScreen #query-input {
    width: 100%;
    border: round $surface-lighten-1;
}

MenuScreen #query-input:focus {
    border: round $primary;
}

MenuScreen #results {
    height: 1fr;
    overflow-y: auto;
}

MenuScreen #status {
    height: 1;
    color: $text-muted;
    padding: 0 1;
}
"""

# Combined base CSS for import
BASE_CSS = COMMON_CSS + MENU_CSS
