"""Game parameter configuration built from the command line."""
import argparse
from dataclasses import dataclass
from typing import Optional

from scrapple.config import game_config


@dataclass
class GameParams:
    """Configuration parameters for a game instance."""
    seed: Optional[int] = None
    dictionary_path: str = game_config.DICTIONARY_PATH
    strict: bool = False
    log_file: Optional[str] = game_config.GAME_LOG_PATH
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'GameParams':
        """Create GameParams from argparse Namespace.

        Args:
            args: Parsed command-line arguments

        Returns:
            GameParams instance with values from args
        """
        return cls(
            seed=args.seed,
            dictionary_path=args.dictionary,
            strict=args.strict,
            log_file=None if args.no_log else args.log_file,
            verbose=args.verbose
        )

    def __str__(self) -> str:
        """Return string representation for logging."""
        return (f"GameParams(seed={self.seed}, dictionary={self.dictionary_path}, "
                f"strict={self.strict}, log_file={self.log_file}, verbose={self.verbose})")
