"""Filler content generation.

Content is built in three steps:

1. ``fill`` draws tokens from a vocabulary until the running length reaches
   the target (usually overshooting by one token).
2. ``shrink_to_exact_size`` drops the last token and pads with ``PAD`` so the
   sequence adds up to the target exactly.
3. ``make_string`` concatenates the tokens, in order, optionally across a
   process pool for very long sequences.
"""

from __future__ import annotations

import logging
import multiprocessing as mp
import random
from enum import Enum
from typing import List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

WORDS: Tuple[str, ...] = (
    " ",
    "\n",
    "et",
    "est",
    "elit",
    "wasd",
    " ",
    "dolor",
    "labore",
    "eiusmod",
    "aliquaer",
    "adipisici",
)

NUMBERS: Tuple[str, ...] = (" ", "\n", "0", "1", "2", "3", "4", "5", "6", "7", "8", "9")

PAD = "-"

# Below this many tokens a plain join beats starting a pool.
PARALLEL_THRESHOLD = 1_000_000
DEFAULT_CHUNK_SIZE = 250_000


class VocabularyKind(Enum):
    WORDS = "words"
    NUMBERS = "numbers"

    @property
    def table(self) -> Tuple[str, ...]:
        return WORDS if self is VocabularyKind.WORDS else NUMBERS


def fill(target_bytes: int, table: Sequence[str], rng: Optional[random.Random] = None) -> List[str]:
    """Draw tokens until their total length reaches ``target_bytes``.

    The length check runs one token behind, so the result normally ends with
    the token that crossed the target. At most ``target_bytes`` draws are made.
    """
    rng = rng or random.Random()
    content: List[str] = []
    length = 0
    for _ in range(target_bytes):
        length += len(content[-1]) if content else 0
        if length >= target_bytes:
            break
        content.append(rng.choice(table))
    return content


def shrink_to_exact_size(content: Sequence[str], target_bytes: int) -> List[str]:
    shrunk = list(content[:-1])
    length = sum(len(s) for s in shrunk)
    deficit = max(target_bytes - length, 0)
    shrunk.extend(PAD for _ in range(deficit))
    return shrunk


def _join_chunk(chunk: Sequence[str]) -> str:
    return "".join(chunk)


def make_string(
    content: Sequence[str],
    workers: Optional[int] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    threshold: int = PARALLEL_THRESHOLD,
) -> str:
    """Concatenate ``content`` in order.

    Long sequences are split into contiguous chunks that are joined in a
    process pool; ``Pool.map`` keeps chunk order, so the result is the same
    string a plain join would produce.
    """
    workers = workers if workers is not None else (mp.cpu_count() or 1)
    if workers <= 1 or len(content) < threshold or chunk_size <= 0:
        return "".join(content)

    chunks = [list(content[i:i + chunk_size]) for i in range(0, len(content), chunk_size)]
    logger.debug("Joining %d tokens in %d chunks on %d workers", len(content), len(chunks), workers)
    with mp.Pool(processes=min(workers, len(chunks))) as pool:
        parts = pool.map(_join_chunk, chunks)
    return "".join(parts)


def generate(
    target_bytes: int,
    vocabulary: VocabularyKind = VocabularyKind.WORDS,
    rng: Optional[random.Random] = None,
    workers: Optional[int] = None,
) -> bytes:
    """Return exactly ``target_bytes`` bytes of filler content."""
    if target_bytes < 0:
        raise ValueError(f"target_bytes must be non-negative, got {target_bytes}")
    tokens = fill(target_bytes, vocabulary.table, rng)
    tokens = shrink_to_exact_size(tokens, target_bytes)
    data = make_string(tokens, workers=workers).encode("ascii")
    # exactly target_bytes long after slicing
    return data[:target_bytes]
