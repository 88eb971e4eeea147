# topmark:header:start
#
#   project      : PromptStream
#   file         : __init__.py
#   file_relpath : src/promptstream/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PromptStream CLI subcommands."""
