"""Command modules for Pomodoro CLI."""
