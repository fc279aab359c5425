# topmark:header:start
#
#   project      : LogTally
#   file         : __init__.py
#   file_relpath : src/logtally/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Core building blocks shared across LogTally (errors, exit codes, timestamps)."""
