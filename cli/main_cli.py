"""
Main CLI implementation using Click framework for arc-blog.
"""

import click
import sys
from pathlib import Path

from models.core import FetchResult, DEFAULT_OUT_DIR
from config import setup_logging, get_logger
from config.error_handling import ArcBlogError, ConfigurationError, ErrorHandler
from cli.interfaces import CLIInterface, ArgumentValidator
from cli.output import OutputFormat, OutputOptions, render_json, render_yaml, render_fetch_table, format_bool
from core.application import ArcBlogApp


class ArcBlogCLI(CLIInterface):
    """Main CLI application class using Click framework."""

    def __init__(self):
        """Initialize CLI application."""
        self.logger = get_logger(__name__)
        self.error_handler = ErrorHandler(self.logger)

    def display_fetch_result(self, result: FetchResult, options: OutputOptions) -> None:
        """Render a fetch result on stdout in the resolved output format."""
        data = result.to_dict()

        if options.is_(OutputFormat.JSON):
            click.echo(render_json(data), nl=False)
        elif options.is_(OutputFormat.YAML):
            click.echo(render_yaml(data), nl=False)
        elif options.is_(OutputFormat.QUIET):
            return
        else:
            click.echo(render_fetch_table(data), nl=False)

    def display_error(self, error_message: str) -> None:
        """Display error message to the user."""
        self.error_handler.display_error(error_message)

    def display_success(self, message: str) -> None:
        """Display success message to the user."""
        click.echo(click.style(message, fg='green'))

    def fail(self, error: Exception, context: str) -> None:
        """Report an error and exit with its exit code."""
        sys.exit(self.error_handler.report(error, context))


# Global CLI instance
cli_app = ArcBlogCLI()


@click.group(invoke_without_command=True)
@click.option('--config', '-c',
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Path to configuration file (JSON or YAML)')
@click.option('--log-level',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], case_sensitive=False),
              default='WARNING',
              show_default=True,
              help='Set logging level')
@click.option('--log-file',
              type=click.Path(dir_okay=False, path_type=Path),
              help='Write JSON logs to this file')
@click.pass_context
def main(ctx, config, log_level, log_file):
    """
    Blog and article operations.

    Fetch and manage blog posts or external articles (feature under active
    development).

    \b
    Examples:
      # Fetch and save a single article (Phase 2 placeholder)
      arc-blog fetch --url https://example.com/post
      # Pull a feed into docs/research-external/blog/
      arc-blog fetch --playlist feed.xml --out-dir docs/research-external/blog
      # Pipe the fetched article into an analyzer workflow
      arc-blog fetch --url https://example.com/post --analyze --output json
    """
    ctx.ensure_object(dict)

    setup_logging(
        log_level=log_level,
        log_file=str(log_file) if log_file else None
    )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    ctx.obj['app'] = ArcBlogApp()
    ctx.obj['config_path'] = config


@main.command()
@click.option('--url', default='', help='Article URL to fetch')
@click.option('--playlist', default='', help='Playlist/feed file to ingest (Phase 2 placeholder)')
@click.option('--out-dir', default=None,
              help=f'Destination directory for fetched content  [default: {DEFAULT_OUT_DIR}]')
@click.option('--analyze/--no-analyze', default=None,
              help='Send fetched content into analyzer workflows (placeholder)')
@click.option('--output', '-o', 'output_format', default=None, metavar='FORMAT',
              help=f"Output format: {', '.join(OutputFormat.choices())}  [default: table]")
@click.pass_context
def fetch(ctx, url, playlist, out_dir, analyze, output_format):
    """
    Fetch a blog/article (stub).

    \b
    Examples:
      # Basic fetch placeholder
      arc-blog fetch --url https://example.com/post
      # Write the article into a specific directory
      arc-blog fetch --url https://example.com/post --out-dir docs/research-external/blog
      # Request analysis output (future hook) and emit JSON
      arc-blog fetch --url https://example.com/post --analyze --output json
    """
    app: ArcBlogApp = ctx.obj['app']

    try:
        config = app.load_configuration(ctx.obj['config_path'])
        request = app.build_request(
            config,
            url=url,
            playlist=playlist,
            out_dir=out_dir,
            analyze=analyze
        )
        result = app.fetch(request)

        options = OutputOptions(output_format if output_format is not None else config.output)
        options.resolve()

        if request.url and not ArgumentValidator.validate_url(request.url):
            cli_app.logger.debug(f"URL does not look like an http(s) address: {request.url}")
        if not ArgumentValidator.validate_output_path(request.out_dir):
            cli_app.logger.debug(f"Output directory contains unusual characters: {request.out_dir}")

        cli_app.display_fetch_result(result, options)

    except Exception as e:
        cli_app.fail(e, 'fetch')


@main.command()
@click.option('--output', '-o',
              type=click.Path(dir_okay=False, path_type=Path),
              default='./arc_blog_config.json',
              show_default=True,
              help='Output path for configuration file (.json, .yaml or .yml)')
@click.pass_context
def init_config(ctx, output):
    """Generate a default configuration file."""
    app: ArcBlogApp = ctx.obj['app']
    try:
        app.config_manager.save_default_config(output)
        cli_app.display_success(f"Default configuration saved to: {output}")
        click.echo("You can now edit this file to customize your settings.")
    except ArcBlogError as e:
        cli_app.fail(e, 'init-config')


@main.command()
@click.option('--config', '-c',
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Path to configuration file to validate')
@click.pass_context
def validate_config(ctx, config):
    """Validate a configuration file."""
    app: ArcBlogApp = ctx.obj['app']
    try:
        if not config:
            config = app.config_manager.get_config_path()
            if not config.exists():
                raise ConfigurationError(
                    f"Configuration file not found: {config}",
                    hint="run 'arc-blog init-config' to create one",
                    details={"file_path": str(config)}
                )

        loaded_config = app.load_configuration(config)
        cli_app.display_success(f"Configuration file is valid: {config}")

        click.echo("\nConfiguration Summary:")
        click.echo(f"  Output Directory: {loaded_config.out_dir}")
        click.echo(f"  Output Format: {loaded_config.output}")
        click.echo(f"  Analyze: {format_bool(loaded_config.analyze)}")

    except ArcBlogError as e:
        cli_app.fail(e, 'validate-config')


if __name__ == '__main__':
    main()
