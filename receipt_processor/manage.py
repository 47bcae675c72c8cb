import json
import click
from pydantic import ValidationError
from tabulate import tabulate
from receipt_processor.models.receipt import Receipt
from receipt_processor.services.score import RULES, score_breakdown

@click.group()
def cli():
    pass

@cli.command()
def rules():
    """List the scoring rules in evaluation order"""
    for name in RULES:
        click.echo(name)

@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
def score(paths):
    """Score receipt JSON files and print a per-rule breakdown"""
    failed = False
    for path in paths:
        try:
            with open(path, "r") as f:
                receipt = Receipt.model_validate(json.load(f))
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            click.echo(f"{path}: invalid receipt: {e}", err=True)
            failed = True
            continue

        breakdown = score_breakdown(receipt)
        rows = list(breakdown.items())
        rows.append(("total", sum(breakdown.values())))
        click.echo(f"{path} ({receipt.retailer})")
        click.echo(tabulate(rows, headers=["Rule", "Points"]))
        click.echo()

    if failed:
        raise click.ClickException("one or more receipts could not be scored")

if __name__ == '__main__':
    cli()
