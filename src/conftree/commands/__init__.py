"""CLI subcommands: each module exposes run(args)."""
