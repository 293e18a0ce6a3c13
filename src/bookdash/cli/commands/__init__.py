# ABOUTME: Click subcommands for the Bookdash CLI.
# ABOUTME: Each module defines one command registered on the root group.
