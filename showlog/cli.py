"""Command-line interface for showlog."""

import logging
import sys
import click
from typing import Optional

from .config.config_manager import ConfigManager
from .config.glftpd_config import load_glftpd_config
from .core.layout import TEXT_ENCODING, get_layout
from .core.models import LogQuery, NukeStatus
from .core.retriever import LogRetriever
from .utils.formatters import format_dir_entry, format_nuke_entry


def setup_logging(level: str, log_file: Optional[str] = None):
    """Set up logging configuration.
    
    Log records go to stderr, stdout carries the log entries only.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')
    
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
    
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            click.echo(f"Warning: Could not set up file logging: {e}", err=True)


def _remember_action(ctx: click.Context, param: click.Parameter, value: bool) -> bool:
    """Record an action flag, a later flag on the command line replaces an earlier one."""
    if value:
        ctx.meta["showlog.action"] = param.name
    return value


@click.command(
    context_settings={'help_option_names': ['-h', '--help']},
    epilog="Only specify one of the required parameters -l, -n or -u, the last one given is used."
)
@click.option('-f', 'match_full', is_flag=True, default=False,
              help='Match the full path rather than the base name.')
@click.option('-s', 'search_mode', is_flag=True, default=False,
              help='Search mode, display all entries disregarding their status '
                   '(new, deleted, nuked, etc.).')
@click.option('-m', 'max_results', type=int, default=None, metavar='<max #>',
              help='Maximum number of results to display (default 10).')
@click.option('-p', 'pattern', default=None, metavar='<"pattern1 pattern2 ...">',
              help='Display only the matching entries, you may use wildcards (?,*) '
                   'and split patterns with a space.')
@click.option('-r', 'glftpd_config', default=None, metavar='<glconf>',
              help='Path to the glftpd configuration file (default /etc/glftpd.conf).')
@click.option('-c', '--config', 'config_path', default=None,
              help='Path to the showlog settings file.')
@click.option('--log-level', default=None,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
@click.option('--log-file', default=None,
              help='Log file path')
@click.option('-l', 'newdirs', is_flag=True, default=False, expose_value=False,
              callback=_remember_action,
              help='Display the latest dirlog entries.')
@click.option('-n', 'nukes', is_flag=True, default=False, expose_value=False,
              callback=_remember_action,
              help='Display the latest nukes from the nukelog.')
@click.option('-u', 'unnukes', is_flag=True, default=False, expose_value=False,
              callback=_remember_action,
              help='Display the latest unnukes from the nukelog.')
@click.pass_context
def cli(ctx: click.Context, match_full: bool, search_mode: bool, max_results: Optional[int],
        pattern: Optional[str], glftpd_config: Optional[str], config_path: Optional[str],
        log_level: Optional[str], log_file: Optional[str]):
    """Display the latest entries in the glftpd dirlog and nukelog."""
    action = ctx.meta.get("showlog.action")
    if action is None:
        raise click.UsageError("Specify one of -l, -n or -u.")
    
    try:
        settings = ConfigManager(config_path).get_settings()
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    
    setup_logging(log_level or settings.log_level, log_file)
    
    glftpd_config = glftpd_config or settings.glftpd_config
    paths = load_glftpd_config(glftpd_config)
    if not paths.loaded:
        click.echo(f"Unable to open the config file ({glftpd_config}), using default values.", err=True)
    
    retriever = LogRetriever(get_layout(settings.glftpd_version),
                             settings.group_dirs, settings.subdir_list)
    
    if max_results is None:
        max_results = settings.max_results
    
    query = LogQuery(
        max_results=max(1, max_results),
        search_mode=search_mode,
        status=NukeStatus.UNNUKED if action == 'unnukes' else NukeStatus.NUKED,
        patterns=pattern,
        match_full=match_full
    )
    
    if action == 'newdirs':
        log_name, log_path = 'dirlog', paths.dirlog_path
        retrieve, render = retriever.newdirs, format_dir_entry
    else:
        log_name, log_path = 'nukelog', paths.nukelog_path
        retrieve, render = retriever.nukes, format_nuke_entry
    
    try:
        log_file_handle = open(log_path, 'rb')
    except OSError as e:
        click.echo(f"Failed to open {log_name} ({log_path}): {e.strerror}", err=True)
        sys.exit(1)
    
    with log_file_handle:
        for entry in retrieve(log_file_handle, query):
            click.echo(render(entry).encode(TEXT_ENCODING))


def main():
    """Main CLI entry point."""
    cli()


if __name__ == '__main__':
    main()
