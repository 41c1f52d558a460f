"""Byte range partitioning for chunked transfers."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from ..config.settings import get_settings
from ..exceptions import InvalidArgumentError


@dataclass(frozen=True)
class SplitRange:
    """One contiguous slice ``[start, end)`` of a byte stream."""

    part_num: int  # starting from 1
    start: int
    end: int  # exclusive

    @property
    def length(self) -> int:
        return self.end - self.start

    def to_dict(self) -> Dict[str, Any]:
        return {
            "part_num": self.part_num,
            "start": self.start,
            "end": self.end
        }


def _validate(bytes_total: int, bytes_each_part: int) -> None:
    if not isinstance(bytes_total, int) or not isinstance(bytes_each_part, int):
        raise InvalidArgumentError("byte counts must be integers")
    if bytes_each_part <= 0:
        raise InvalidArgumentError(f"bytes_each_part must be positive, got {bytes_each_part}")
    if bytes_total < 0:
        raise InvalidArgumentError(f"bytes_total must not be negative, got {bytes_total}")


def count_parts(bytes_total: int, bytes_each_part: int) -> int:
    """Number of ranges :func:`get_split_ranges` returns for these sizes."""
    _validate(bytes_total, bytes_each_part)
    if bytes_each_part >= bytes_total:
        return 1
    return -(-bytes_total // bytes_each_part)


def get_split_ranges(bytes_total: int, bytes_each_part: int) -> List[SplitRange]:
    """Split ``bytes_total`` bytes into consecutive parts of ``bytes_each_part``.

    The ranges tile ``[0, bytes_total)`` without gaps or overlap; only the
    last one may be shorter. When a single part is big enough, one range
    covering everything is returned, even for an empty stream.

        >>> [r.to_dict() for r in get_split_ranges(10, 4)]
        [{'part_num': 1, 'start': 0, 'end': 4}, {'part_num': 2, 'start': 4, 'end': 8}, {'part_num': 3, 'start': 8, 'end': 10}]

    Raises:
        InvalidArgumentError: If bytes_each_part is not positive or
            bytes_total is negative
    """
    how_many = count_parts(bytes_total, bytes_each_part)
    return [
        SplitRange(
            part_num=i + 1,
            start=bytes_each_part * i,
            end=min(bytes_each_part * (i + 1), bytes_total)
        )
        for i in range(how_many)
    ]


def plan_transfer(bytes_total: int, bytes_each_part: Optional[int] = None) -> List[SplitRange]:
    """Split a stream using the configured part size unless one is given."""
    if bytes_each_part is None:
        bytes_each_part = get_settings().transfer.part_size_bytes
    return get_split_ranges(bytes_total, bytes_each_part)


def iter_file_parts(
    file_path: Union[str, Path],
    ranges: List[SplitRange]
) -> Iterator[Tuple[SplitRange, bytes]]:
    """Read each range of a local file.

    Yields:
        ``(range, data)`` pairs in the order the ranges were given
    """
    with open(file_path, "rb") as f:
        for part in ranges:
            f.seek(part.start)
            yield part, f.read(part.length)
