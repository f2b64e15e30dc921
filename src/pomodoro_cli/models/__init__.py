"""Domain models for Pomodoro CLI."""
