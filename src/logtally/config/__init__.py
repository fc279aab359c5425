# topmark:header:start
#
#   project      : LogTally
#   file         : __init__.py
#   file_relpath : src/logtally/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Configuration for LogTally.

- [`logtally.config.logging`][logtally.config.logging]: logging setup (TRACE level, colors).
- [`logtally.config.loaders`][logtally.config.loaders]: TOML tracker configuration.
"""
