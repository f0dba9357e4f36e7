import argparse
from dataclasses import dataclass

from .constants import DEFAULT_PATH_LINE_SEPARATOR, DEFAULT_PUSH_MARKER


@dataclass
class Preferences:
    """Options for a single run, taken from the command line."""
    verbose: bool = False
    dry_run: bool = False
    separator: str = DEFAULT_PATH_LINE_SEPARATOR
    push_marker: str = DEFAULT_PUSH_MARKER
    set_upstream: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'Preferences':
        return cls(
            verbose=args.verbose,
            dry_run=args.dry_run,
            separator=getattr(args, "separator", DEFAULT_PATH_LINE_SEPARATOR),
            push_marker=getattr(args, "marker", DEFAULT_PUSH_MARKER),
            set_upstream=getattr(args, "set_upstream", False),
        )
