import click
from pathlib import Path

from trendsage import __version__
from trendsage.config.loader import load_config
from trendsage.config.logging import LoggingConfig
from trendsage.utils.logging import setup_logging

from .commands.history_trend import history_trend


class CliContext:
    def __init__(self, raw_config: dict):
        self.raw_config = raw_config


@click.group(context_settings=dict(help_option_names=['-h', '--help']))
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False), help='Config file to use instead of .trendsage.yaml in the current directory.')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging.')
@click.option('--json-logs', is_flag=True, help='Emit log lines as JSON.')
@click.version_option(version=__version__)
@click.pass_context
def main(ctx, config_path, verbose, json_logs):
    """
    trendsage: carries test-run statistics from one report to the next.
    """
    try:
        raw_config = load_config(str(Path.cwd()), config_file=config_path)
        logging_config = LoggingConfig.model_validate(raw_config.get('logging', {}))
    except ValueError as e:
        raise click.ClickException(str(e))

    setup_logging(
        log_level='DEBUG' if verbose else logging_config.level,
        json_logs=json_logs or logging_config.json_logs,
    )

    ctx.obj = CliContext(raw_config=raw_config)


main.add_command(history_trend)

if __name__ == '__main__':
    main()
