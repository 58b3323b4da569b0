"""
Duplicate voice detection.

Two voices are duplicates when every byte of their records matches except
the trailing 10-byte name.
"""

import logging
from dataclasses import replace
from typing import Hashable, List, Sequence, Tuple, Union

from dx7dump.models.dump import BulkDump
from dx7dump.models.voice import NAME_LENGTH, Voice
from dx7dump.utils.validation import VOICE_SIZE

logger = logging.getLogger(__name__)


def _content(record: Union[Voice, bytes]) -> Hashable:
    if isinstance(record, Voice):
        if not record.raw:
            # Built without its record bytes: compare the decoded parameters
            return replace(record, number=0, name_raw=b"")
        raw = record.raw
    else:
        raw = bytes(record)

    if len(raw) != VOICE_SIZE:
        raise ValueError(f"Voice record must be {VOICE_SIZE} bytes, got {len(raw)}")
    return raw[: VOICE_SIZE - NAME_LENGTH]


def find_duplicates(voices: Union[BulkDump, Sequence[Union[Voice, bytes]]]) -> List[Tuple[int, int]]:
    """
    Find every pair of voices with identical parameter data.

    Every matching pair is reported, so three identical voices give three
    pairs. Decoded voices are compared on their record bytes; a Voice
    built without them is compared on its decoded parameters instead.

    Args:
        voices: A BulkDump, decoded voices, or raw 128-byte voice records,
            in bank order

    Returns:
        (i, j) pairs of 1-based voice numbers, i < j, in ascending order

    Raises:
        ValueError: If a record is not 128 bytes long
    """
    if isinstance(voices, BulkDump):
        voices = voices.voices

    contents = [_content(v) for v in voices]
    pairs: List[Tuple[int, int]] = []

    for i in range(len(contents) - 1):
        for j in range(i + 1, len(contents)):
            if contents[i] == contents[j]:
                pairs.append((i + 1, j + 1))

    logger.debug("Found %d duplicate pairs among %d voices", len(pairs), len(contents))
    return pairs
