"""CLI actions (one module per subcommand)."""
