"""
Training and Generation with Rich Terminal UI

This module trains a unigram model on a text file (or the Brown corpus)
and prints generated sentences, with status displays and a statistics
table rendered by the Rich library.
"""

import argparse
import logging
from typing import Dict, Iterator, List, Optional, Type

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .corpus import Corpus, get_brown_categories, load_brown_corpus
from .errors import EmptyModelError
from .language import DefaultLanguage, L, Language
from .model import UnigramModel
from .sampler import Sampler


# Number of sentences generated when no count is given
DEFAULT_SENTENCE_COUNT = 10

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Route log records through Rich on standard error."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def create_stats_table(stats: Dict) -> Table:
    """Create a Rich table displaying training statistics."""
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("Metric", style="green")
    table.add_column("Value", style="yellow", justify="right")

    for key, value in stats.items():
        display_key = key.replace('_', ' ').title()

        if isinstance(value, float):
            display_value = f"{value:,.4f}"
        elif isinstance(value, int):
            display_value = f"{value:,}"
        else:
            display_value = str(value)

        table.add_row(display_key, display_value)

    return table


def train_model_cli(corpus: Corpus[L], show_stats: bool = True) -> UnigramModel[L]:
    """
    Train a unigram model with terminal output.

    Args:
        corpus: Tokenized training corpus
        show_stats: Whether to print the training statistics table

    Returns:
        Trained UnigramModel
    """
    with console.status("[cyan]Counting tokens..."):
        model = UnigramModel.from_corpus(corpus)

    if show_stats:
        console.print(f"[green]✓[/green] Trained on {corpus.token_count():,} tokens "
                      f"in {corpus.sentence_count():,} sentences")
        console.print(Panel(
            create_stats_table(model.training_stats),
            title="[bold]Training Statistics[/bold]",
            border_style="yellow"
        ))

        top = ", ".join(f"{token} ({prob:.3f})" for token, prob in model.get_top_words(5))
        if top:
            console.print(f"  Top words: {escape(top)}")
        console.print()

    return model


def generate_sentences(model: UnigramModel[L], count: Optional[int],
                       seed: Optional[int] = None) -> Iterator[str]:
    """
    Generate sentences from a trained model.

    Raises:
        EmptyModelError: If the model observed no sentences
    """
    sampler = Sampler(model, seed=seed)
    return sampler.generate(count)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Train a unigram model on a corpus and generate sentences",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s corpus.txt
  %(prog)s corpus.txt -n 5 --seed 42
  %(prog)s --brown news fiction -n 3 --lowercase
        """
    )

    parser.add_argument(
        'corpus',
        nargs='?',
        default=None,
        help='Path to the training corpus (plain text)'
    )

    parser.add_argument(
        '-n', '--count',
        type=int,
        default=DEFAULT_SENTENCE_COUNT,
        help=f'Number of sentences to generate (default: {DEFAULT_SENTENCE_COUNT})'
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for the random source (default: unseeded)'
    )

    parser.add_argument(
        '--lowercase',
        action='store_true',
        help='Lowercase all tokens before counting'
    )

    parser.add_argument(
        '-b', '--brown',
        type=str,
        nargs='*',
        default=None,
        metavar='CATEGORY',
        help='Train on the NLTK Brown corpus (optionally restricted to categories)'
    )

    parser.add_argument(
        '--no-stats',
        dest='stats',
        action='store_false',
        help='Do not print training statistics'
    )

    parser.add_argument(
        '--list-categories',
        action='store_true',
        help='List available Brown corpus categories and exit'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser


def main(argv: Optional[List[str]] = None, language: Type[Language] = DefaultLanguage) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.list_categories:
        try:
            categories = get_brown_categories()
        except (LookupError, OSError) as e:
            err_console.print(f"[red]✗[/red] Cannot load the Brown corpus: {escape(str(e))}")
            return 1
        console.print("Available Brown corpus categories:")
        for cat in categories:
            console.print(f"  - {cat}")
        return 0

    if args.count < 0:
        parser.error("--count must be non-negative")

    if args.brown is not None:
        try:
            with console.status("[cyan]Loading Brown corpus..."):
                corpus = load_brown_corpus(language, args.brown or None, lowercase=args.lowercase)
        except (LookupError, OSError) as e:
            err_console.print(f"[red]✗[/red] Cannot load the Brown corpus: {escape(str(e))}")
            return 1
    elif args.corpus:
        try:
            corpus = Corpus.from_file(args.corpus, language, lowercase=args.lowercase)
        except OSError as e:
            err_console.print(f"[red]✗[/red] Cannot read {escape(str(args.corpus))}: {escape(str(e))}")
            return 1
    else:
        parser.error("a corpus path or --brown is required")

    logger.debug("Loaded %r", corpus)

    model = train_model_cli(corpus, show_stats=args.stats)

    try:
        sentences = generate_sentences(model, args.count, seed=args.seed)
    except EmptyModelError as e:
        err_console.print(f"[red]✗[/red] {escape(str(e))}")
        return 1

    for sentence in sentences:
        console.print(sentence, markup=False, highlight=False, soft_wrap=True)

    return 0
