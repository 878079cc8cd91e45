"""Configuration — the wall-clock switch and log output for the package logger."""
