"""Configuration: defaults, runtime settings and smell thresholds."""
