import csv
from pathlib import Path
from typing import Iterator, List, Union

from ...common.exceptions import SourceError
from ...common.logging import setup_logger

logger = setup_logger(__name__)

class CSVCollisionSource:
    """
    Reads raw collision records from a CSV file, one list of fields per row.
    """
    def __init__(self, path: Union[str, Path], skip_header: bool = True, encoding: str = "utf-8"):
        self.path = Path(path)
        self.skip_header = skip_header
        self.encoding = encoding
        if not self.path.is_file():
            raise SourceError(f"Collision file not found: {self.path}")

    def __iter__(self) -> Iterator[List[str]]:
        try:
            with open(self.path, mode='r', newline='', encoding=self.encoding) as f:
                reader = csv.reader(f)
                if self.skip_header:
                    header = next(reader, None)
                    logger.debug(f"Skipped header with {len(header or [])} columns")
                for row in reader:
                    # Blank lines come through as empty rows
                    if row:
                        yield row
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise SourceError(f"Failed reading {self.path}: {e}") from e
