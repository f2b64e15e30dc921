"""Main entry point for Pomodoro CLI."""

import typer

from pomodoro_cli import __version__
from pomodoro_cli.config import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_LONG_BREAK_MINUTES,
    DEFAULT_STUDY_MINUTES,
    MIN_DURATION_MINUTES,
    TimerConfig,
)
from pomodoro_cli.focus import (
    AppState,
    DesktopNotifier,
    FocusLoop,
    TerminalError,
    TimerDisplay,
    show_goodbye_message,
)
from pomodoro_cli.utils.exit_codes import (
    ERROR_GENERAL,
    SUCCESS,
    get_exit_code_description,
    get_exit_code_name,
)
from pomodoro_cli.utils.logger import get_logger, log_file_path
from pomodoro_cli.utils.ui.console import get_console

app = typer.Typer(
    name="pomodoro",
    help="A full-screen Pomodoro focus timer for the terminal",
    add_completion=False,
)

console = get_console()
err_console = get_console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]Pomodoro CLI[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()


def _exit(code: int) -> None:
    get_logger().info(
        "Exiting with %s: %s", get_exit_code_name(code), get_exit_code_description(code)
    )
    if code != SUCCESS:
        raise typer.Exit(code)


@app.command()
def run(
    study: int = typer.Option(
        DEFAULT_STUDY_MINUTES,
        "--study",
        min=MIN_DURATION_MINUTES,
        envvar="POMODORO_STUDY",
        help="Duration of the study session in minutes",
    ),
    break_minutes: int = typer.Option(
        DEFAULT_BREAK_MINUTES,
        "--break",
        min=MIN_DURATION_MINUTES,
        envvar="POMODORO_BREAK",
        help="Duration of the short break in minutes",
    ),
    long_break: int = typer.Option(
        DEFAULT_LONG_BREAK_MINUTES,
        "--lbreak",
        min=MIN_DURATION_MINUTES,
        envvar="POMODORO_LBREAK",
        help="Duration of the long break in minutes",
    ),
    notify: bool = typer.Option(
        True, "--notify/--no-notify", help="Send desktop notifications"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Start the focus timer.

    Keys: SPACE/P pause, N next session, R reset, +/- adjust time,
    ? help (C inside help edits durations), Q quit.
    """
    config = TimerConfig(
        study_minutes=study,
        break_minutes=break_minutes,
        long_break_minutes=long_break,
    )

    get_logger().info(
        "Starting timer (study=%d, break=%d, long_break=%d)",
        config.study_minutes,
        config.break_minutes,
        config.long_break_minutes,
    )

    display = TimerDisplay(console)
    loop = FocusLoop(AppState.initial(config), display, DesktopNotifier(enabled=notify))

    try:
        final_state = loop.run()
    except TerminalError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        err_console.print(f"[dim]Details in {log_file_path()}[/dim]")
        _exit(ERROR_GENERAL)

    show_goodbye_message(final_state, console)
    _exit(SUCCESS)


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
