"""CLI command modules. Each exposes ``add_subparser`` and ``run``."""
