# topmark:header:start
#
#   project      : LogTally
#   file         : __init__.py
#   file_relpath : src/logtally/aggregator/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 LogTally contributors
#
# topmark:header:end

"""Aggregation core: tracker declarations, warning counts and the summarizer."""
