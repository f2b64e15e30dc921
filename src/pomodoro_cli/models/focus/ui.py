"""Full-screen timer UI for focus mode."""

from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .digits import big_width, render_big
from .state import AppState, SessionType, Stats, TimerState

PURPLE = "#A855F7"
MUTED = "#6B7280"
ACCENT = "#EC4899"

PROGRESS_BAR_WIDTH = 50
MIN_PROGRESS_BAR_WIDTH = 10

SHORTCUTS = [
    ("SPACE / P", "pause/resume"),
    ("N", "next session"),
    ("R", "reset timer"),
    ("+/-", "adjust time"),
    ("C", "configure"),
    ("?", "close help"),
    ("Q", "quit"),
]

CONFIG_ROWS = [
    ("S", SessionType.STUDY),
    ("B", SessionType.BREAK),
    ("L", SessionType.LONG_BREAK),
]


def format_clock(seconds: int) -> str:
    """Format a countdown as MM:SS. Minutes are not capped at 59."""
    seconds = max(0, seconds)
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


def format_duration(seconds: int) -> str:
    """Format accumulated time as e.g. ``1h15m`` or ``50m``."""
    hours = seconds // 3600
    minutes = (seconds // 60) % 60
    if hours > 0:
        return f"{hours}h{minutes}m"
    return f"{minutes}m"


class TimerDisplay:
    """Renders application snapshots. Never mutates the state it is given."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def create_layout(self, state: AppState) -> RenderableType:
        """Build the full frame for *state*."""
        if state.quitting:
            return Align.center(self._create_goodbye(), vertical="middle")

        if state.ui.help_visible:
            if state.ui.editing_config:
                overlay = self._create_config_panel(state)
            else:
                overlay = self._create_help_panel()
            return Align.center(overlay, vertical="middle")

        return Align.center(self._create_body_content(state), vertical="middle")

    def _create_body_content(self, state: AppState) -> Group:
        timer = state.timer
        width = state.ui.width
        components = [
            self._create_label(timer.current_session),
            Text(""),
            self._create_timer(timer.time_left, width),
            Text(""),
        ]

        if timer.paused:
            components.append(Text("⏸  PAUSED", style=f"bold {ACCENT}", justify="center"))
            components.append(Text(""))

        components.append(self._create_progress_bar(timer, width))
        components.append(Text(""))
        components.append(self._create_stats_line(state.stats))
        components.append(Text(""))
        components.append(Text("Press ? for help", style=MUTED, justify="center"))
        return Group(*components)

    def _create_label(self, session: SessionType) -> Text:
        label = session.label
        art = "\n".join(
            [
                "╔" + "═" * (len(label) + 2) + "╗",
                "║ " + label + " ║",
                "╚" + "═" * (len(label) + 2) + "╝",
            ]
        )
        return Text(art, style=f"bold {PURPLE}", justify="center")

    def _create_timer(self, time_left: int, width: int) -> Text:
        clock = format_clock(time_left)
        # Fall back to plain digits when the block art would wrap
        if big_width(clock) > width:
            return Text(clock, style=f"bold {PURPLE}", justify="center")
        rows = render_big(clock)
        return Text("\n".join(rows), style=PURPLE, justify="center")

    def _create_progress_bar(self, timer: TimerState, width: int) -> Text:
        bar_width = max(MIN_PROGRESS_BAR_WIDTH, min(PROGRESS_BAR_WIDTH, width - 8))
        progress = timer.progress()
        filled = int(bar_width * progress)

        text = Text(justify="center")
        text.append("━" * filled, style=PURPLE)
        text.append("━" * (bar_width - filled), style=MUTED)
        text.append(f"  {int(progress * 100)}%")
        return text

    def _create_stats_line(self, stats: Stats) -> Text:
        text = Text(justify="center", style=MUTED)
        value = f"bold {PURPLE}"
        text.append("🍅 ")
        text.append(str(stats.study_sessions_started), style=value)
        text.append("  •  ⏱️  ")
        text.append(format_duration(stats.total_study_seconds), style=value)
        text.append("  •  📊 ")
        text.append(str(stats.sessions_until_long_break), style=value)
        text.append(" until long break")
        return text

    def _create_help_panel(self) -> Panel:
        table = Table.grid(padding=(0, 2))
        table.add_column(style=f"bold {PURPLE}", min_width=15)
        table.add_column(style=MUTED)
        for key, description in SHORTCUTS:
            table.add_row(key, description)

        return Panel(
            table,
            title="KEYBOARD SHORTCUTS",
            title_align="center",
            border_style=PURPLE,
            padding=(2, 4),
            expand=False,
        )

    def _create_config_panel(self, state: AppState) -> Panel:
        table = Table.grid(padding=(0, 2))
        table.add_column(width=1)
        table.add_column(style=f"bold {PURPLE}")
        table.add_column(style=MUTED, min_width=15)
        table.add_column(style=f"bold {PURPLE}")

        for key, session in CONFIG_ROWS:
            marker = "▶" if state.ui.editing_field == session else " "
            table.add_row(
                marker, key, session.label, f"{state.config.minutes_for(session)} min"
            )

        hint = Text(
            "Use +/- to adjust  •  C to exit", style=f"italic {MUTED}", justify="center"
        )
        return Panel(
            Group(table, Text(""), hint),
            title="CONFIGURATION",
            title_align="center",
            border_style=PURPLE,
            padding=(2, 4),
            expand=False,
        )

    def _create_goodbye(self) -> Text:
        return Text(
            "Thanks for staying focused!\n\nSee you next time 👋",
            style=f"bold {PURPLE}",
            justify="center",
        )


def show_goodbye_message(state: AppState, console: Console | None = None):
    """Print a summary once the full-screen display has been torn down."""
    console = console or Console()
    stats = state.stats

    panel = Panel(
        f"""[bold {PURPLE}]Thanks for staying focused![/bold {PURPLE}]

Focus sessions: {stats.study_sessions_completed}
Total focus time: {format_duration(stats.total_study_seconds)}

See you next time 👋""",
        border_style=PURPLE,
        padding=(1, 2),
        expand=False,
    )

    console.print(panel)
