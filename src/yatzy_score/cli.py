"""CLI entry point: yatzy-score score / sheet / table."""
from __future__ import annotations

import json
import logging

import click

from yatzy_score.exceptions import InvalidCategoryError, InvalidRollError


def _parse_roll(dice: tuple[int, ...]) -> tuple[int, ...]:
    from .validators import validate_roll

    try:
        return validate_roll(list(dice))
    except InvalidRollError as e:
        raise click.BadParameter(e.reason, param_hint="DICE") from e


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log every scored category.")
def cli(verbose: bool):
    """Score five-dice rolls under Scandinavian Yatzy rules."""
    from .logger import configure, set_level

    configure()
    if verbose:
        set_level(logging.DEBUG)


@cli.command()
@click.argument("category")
@click.argument("dice", nargs=-1, type=int)
def score(category: str, dice: tuple[int, ...]):
    """Score DICE in a single CATEGORY (e.g. two_pairs, "Full House", sixes)."""
    from .categories import Category
    from .scoring import score as score_roll

    try:
        cat = Category.from_name(category)
    except InvalidCategoryError as e:
        raise click.BadParameter(str(e), param_hint="CATEGORY") from e
    click.echo(score_roll(cat, _parse_roll(dice)))


@cli.command()
@click.argument("dice", nargs=-1, type=int)
@click.option("--json", "as_json", is_flag=True, help="Emit a JSON object instead of a table.")
def sheet(dice: tuple[int, ...], as_json: bool):
    """Score DICE in every category."""
    from .scoring import score_all

    scores = score_all(_parse_roll(dice))
    if as_json:
        click.echo(json.dumps({c.name.lower(): s for c, s in scores.items()}))
        return
    for category, points in scores.items():
        click.echo(f"{category.label:<17}{points:>3d}")


@cli.command()
def table():
    """Max and expected score per category for one throw of five dice."""
    from .tables import (
        build_all_dice_sets,
        compute_dice_set_probabilities,
        expected_category_scores,
        max_category_scores,
        precompute_all_scores,
    )

    all_dice_sets, _ = build_all_dice_sets()
    scores = precompute_all_scores(all_dice_sets)
    probs = compute_dice_set_probabilities(all_dice_sets)
    maxima = max_category_scores(scores)
    expected = expected_category_scores(scores, probs)

    click.echo(f"{'category':<17}{'max':>5}{'expected':>10}")
    for category in maxima:
        click.echo(f"{category.label:<17}{maxima[category]:>5d}{expected[category]:>10.3f}")


if __name__ == "__main__":
    cli()
