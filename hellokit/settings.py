"""Command-line settings for the directory file reader."""

import argparse
from dataclasses import dataclass

from hellokit.file_readers import ReaderType


@dataclass
class Settings:
    file_path: str = "e:/1/1"
    status: str = "e:/1/status.txt"
    priority_level: int = 0
    file_pattern: str = "inc_*.gz"
    reader_type: ReaderType = ReaderType.PTAIL

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        """Register the reader's options on parser."""
        defaults = Settings()
        parser.add_argument(
            "-file_path", "--file_path", default=defaults.file_path,
            help="The dir of the data file which we need to process",
        )
        parser.add_argument(
            "-status", "--status", default=defaults.status,
            help="The status file which holds the processing status",
        )
        parser.add_argument(
            "-priority_level", "--priority_level", type=int, default=defaults.priority_level,
            help="The max priority level of the file handler. 0 means that it don't has any priorty",
        )
        parser.add_argument(
            "-file_pattern", "--file_pattern", default=defaults.file_pattern,
            help="The pattern of the name which we need to process",
        )
        parser.add_argument(
            "-reader_type", "--reader_type", type=ReaderType, choices=list(ReaderType),
            default=defaults.reader_type,
            help="The type of the file reader: GzipReader, PTailReader or PcapReader",
        )

    @staticmethod
    def from_args(args: argparse.Namespace) -> "Settings":
        """Build settings from parsed arguments."""
        return Settings(
            file_path=args.file_path,
            status=args.status,
            priority_level=args.priority_level,
            file_pattern=args.file_pattern,
            reader_type=ReaderType(args.reader_type),
        )