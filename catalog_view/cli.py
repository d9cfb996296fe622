import logging

import click

from .client import ProductClient
from .config import ViewSettings
from .view import CatalogView


def _render(view: CatalogView) -> None:
    if view.loading:
        click.echo("Loading products...")
        return
    if view.error:
        return
    if not view.products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<4} {'Name':<12} {'Description':<40} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 76)
    for p in view.products:
        click.echo(f"{p.id:<4} {p.name:<12} {p.description:<40} {p.price:>10.2f} {p.stock:>6}")


@click.command()
@click.option("--api-url", default=None, help="Catalog Service base URL (default: $CATALOG_API_URL).")
def main(api_url) -> None:
    """Show the product catalog."""
    settings = ViewSettings.from_env()
    logging.basicConfig(level=settings.log_level)

    client = ProductClient(api_url or settings.api_url, timeout=settings.timeout)
    view = CatalogView(client, on_change=_render)
    try:
        view.activate().result()
        if view.error:
            raise click.ClickException(view.error)
    finally:
        view.deactivate()


if __name__ == "__main__":
    main()
