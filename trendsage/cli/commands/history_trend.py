from pathlib import Path

import click
from pydantic import ValidationError

from trendsage.config.history import HistoryConfig
from trendsage.core.errors import ParseError
from trendsage.history.codec import TrendCodec
from trendsage.history.executor import ExecutorPlugin
from trendsage.history.store import history_trend_path
from trendsage.history.trend_builder import HistoryTrendPlugin
from trendsage.report.generator import ReportGenerator
from trendsage.results.reader import TestResultReader


@click.command('history-trend', help="Merge the current results into the history trend and write it for the next run.")
@click.argument('results_dirs', nargs=-1, required=True, type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option('--output', '-o', 'output_dir', required=True, type=click.Path(file_okay=False, path_type=Path), help="Report output directory.")
@click.option('--max-items', type=click.IntRange(min=1), help="Keep only the most recent N trend points.")
@click.pass_context
def history_trend(ctx, results_dirs, output_dir, max_items):
    try:
        history_config = HistoryConfig.model_validate(ctx.obj.raw_config.get('history', {}))
    except ValidationError as e:
        raise click.ClickException(f"Invalid history config: {e}")
    if max_items is not None:
        history_config = history_config.model_copy(update={'max_trend_items': max_items})

    trend_plugin = HistoryTrendPlugin(
        codec=TrendCodec(indent=history_config.indent),
        max_items=history_config.max_trend_items,
    )
    generator = ReportGenerator(
        readers=[TestResultReader(), ExecutorPlugin(), trend_plugin],
        aggregators=[trend_plugin],
    )

    try:
        launches = generator.generate(list(results_dirs), output_dir)
    except ParseError as e:
        raise click.ClickException(str(e))

    total = sum(len(launch.results) for launch in launches)
    click.echo(f"History trend for {total} test results saved to {history_trend_path(output_dir)}")
