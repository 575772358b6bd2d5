"""Command-line interface for file backup."""

import logging
import sys
import time
import click
from typing import Optional

from .core.errors import BackupError, ConfigurationError
from .core.models import BackupConfig
from .core.runner import BackupRunner
from .core.scheduler import BackupScheduler
from .config.config_manager import ConfigManager


def setup_logging(level: str, log_file: Optional[str] = None):
    """Set up logging configuration."""
    # Convert string level to logging constant
    numeric_level = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Add file handler if specified
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            click.echo(f"Warning: Could not set up file logging: {e}", err=True)


def _prepare(ctx, **overrides) -> BackupConfig:
    """Load configuration, apply overrides and set up logging.

    Exits with status 1 on any configuration error, before the source or
    backup directories are touched.
    """
    try:
        config_manager = ConfigManager(ctx.obj.get('config_path'))
        config_manager.load_config()
        backup_config = config_manager.build_backup_config(**overrides)

        logging_config = config_manager.get_logging_config()
        setup_logging(ctx.obj.get('log_level') or logging_config.get('level') or 'INFO',
                      ctx.obj.get('log_file') or logging_config.get('file'))
    except ValueError as e:
        click.echo(f"❌ Configuration error: {e}", err=True)
        sys.exit(1)

    return backup_config


def _selection_options(func):
    """Options shared by commands that perform a backup."""
    func = click.option('--type', 'type_filter',
                        help='Specific file type to backup (e.g. .txt, .pdf)')(func)
    func = click.option('--file', 'file_filter',
                        help='Specific file to backup')(func)
    func = click.option('--backup', 'backup_dir',
                        help='Path to the backup directory')(func)
    func = click.option('--source', 'source_dir',
                        help='Path to the source directory')(func)
    return func


@click.group()
@click.option('--config', '-c', 'config_path',
              help='Path to configuration file')
@click.option('--log-level', default=None,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
@click.option('--log-file',
              help='Log file path')
@click.pass_context
def cli(ctx, config_path: Optional[str], log_level: Optional[str], log_file: Optional[str]):
    """File Backup - copy matching files from a source tree on an interval.

    The scheduled backup is the `run` command:

    \b
      file-backup run --source DIR --backup DIR [--file NAME | --type SUFFIX] [--interval SECONDS]
    """
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path
    ctx.obj['log_level'] = log_level
    ctx.obj['log_file'] = log_file


@cli.command()
@_selection_options
@click.option('--interval', type=int, default=None,
              help='Interval between backups in seconds (default 0)')
@click.pass_context
def run(ctx, source_dir, backup_dir, file_filter, type_filter, interval):
    """Back up files now and then again every interval, until stopped."""
    backup_config = _prepare(ctx, source=source_dir, destination=backup_dir,
                             file=file_filter, type=type_filter, interval=interval)
    logger = logging.getLogger(__name__)

    scheduler = BackupScheduler(BackupRunner(backup_config),
                                interval_seconds=backup_config.interval_seconds,
                                sleep=time.sleep)
    try:
        scheduler.run_forever()
    except KeyboardInterrupt:
        logger.info(f"Backup scheduler stopped after {scheduler.runs} run(s)")


@cli.command()
@_selection_options
@click.pass_context
def once(ctx, source_dir, backup_dir, file_filter, type_filter):
    """Run a single backup and exit."""
    backup_config = _prepare(ctx, source=source_dir, destination=backup_dir,
                             file=file_filter, type=type_filter)
    logger = logging.getLogger(__name__)

    try:
        BackupRunner(backup_config).run()
    except BackupError as e:
        logger.error(f"Error backing up files: {e}")
        sys.exit(1)

    logger.info("File(s) backed up successfully!")


@cli.command()
@_selection_options
@click.option('--interval', type=int, default=None,
              help='Interval between backups in seconds')
@click.pass_context
def validate_config(ctx, source_dir, backup_dir, file_filter, type_filter, interval):
    """Validate configuration and show the effective settings."""
    try:
        config_manager = ConfigManager(ctx.obj.get('config_path'))
        config_manager.load_config()
        backup_config = config_manager.build_backup_config(
            source=source_dir, destination=backup_dir,
            file=file_filter, type=type_filter, interval=interval
        )
    except ConfigurationError as e:
        click.echo(f"❌ Configuration validation failed: {e}", err=True)
        sys.exit(1)

    click.echo("✅ Configuration loaded successfully")
    if config_manager.loaded_from:
        click.echo(f"   Config file: {config_manager.loaded_from}")

    file_filter = backup_config.filter
    click.echo(f"\n📊 Configuration Summary:")
    click.echo(f"   Source: {backup_config.source_dir}")
    click.echo(f"   Backup: {backup_config.backup_dir}")
    if file_filter.name:
        click.echo(f"   Filter: file named {file_filter.name}")
    elif file_filter.suffix:
        click.echo(f"   Filter: files ending in {file_filter.suffix}")
    else:
        click.echo("   Filter: none (all files)")
    click.echo(f"   Interval: {backup_config.interval_seconds}s")


def main():
    """Main CLI entry point."""
    cli()


if __name__ == '__main__':
    main()
