"""UI messages and strings for rps-naming."""

# =============================================================================
# Project Metadata
# =============================================================================

PROJECT_TAGLINE = "Guess namespaces and directories from project names"
PROJECT_URL = "https://github.com/chneukirchen/rps"

HELP_TEXT = f"""
[bold cyan]rps-name[/bold cyan] - {PROJECT_TAGLINE}

[bold]Commands:[/bold]
  [cyan]namespace[/cyan]   Full module namespace (dm-serializer -> DataMapper::Serializer)
  [cyan]modules[/cyan]     Module name per namespace level
  [cyan]dirs[/cyan]        Namespace directory per level
  [cyan]path[/cyan]        Namespace directory path
  [cyan]underscore[/cyan]  Camel-case name to underscored file name
  [cyan]layout[/cyan]      Conventional project directories for a name
  [cyan]config[/cyan]      Show the effective naming config
  [cyan]version[/cyan]     Show version information

[bold]Examples:[/bold]
  [dim]$ rps-name namespace dm-core[/dim]
  [dim]$ rps-name --preset legacy namespace rdoc[/dim]
  [dim]$ rps-name dirs foo-bar_baz --json[/dim]
"""

# =============================================================================
# Error Messages
# =============================================================================

ERROR_MESSAGES = {
    "config_error": "Could not load naming config: {error}",
    "unknown_preset": "Unknown preset '{preset}'. Available: {available}",
}
