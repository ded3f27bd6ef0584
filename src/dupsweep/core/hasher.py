"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements content hashing with pluggable hash algorithms.

The HasherImpl class streams a binary source chunk by chunk, so a file is never
held in memory at once. The default algorithm is xxHash3 with 128-bit output:
not cryptographic, but wide enough that a collision between two different files
is an accepted statistical risk rather than something the pipeline guards against.
"""

from typing import BinaryIO
import logging
import xxhash

from dupsweep.core.interfaces import HashAlgorithm, HashState

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024  # 64KB
MIN_DIGEST_SIZE = 16  # 128 bits


# Use the same way to implement and use any other hashing algorithm
class XXHashAlgorithmImpl(HashAlgorithm):
    digest_size = 16

    @staticmethod
    def new() -> HashState:
        return xxhash.xxh3_128()


class HasherImpl:
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    Consumes its input exactly once, sequentially.
    """

    def __init__(self, algorithm: HashAlgorithm = None, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError(f"Chunk size must be positive: {chunk_size}")
        self.algorithm = algorithm or XXHashAlgorithmImpl()
        if self.algorithm.digest_size < MIN_DIGEST_SIZE:
            raise ValueError(
                f"Digest too narrow: {self.algorithm.digest_size} bytes, need at least {MIN_DIGEST_SIZE}"
            )
        self.chunk_size = chunk_size

    def digest_stream(self, stream: BinaryIO) -> bytes:
        """Computes the digest of everything left in a binary stream."""
        state = self.algorithm.new()
        for chunk in iter(lambda: stream.read(self.chunk_size), b''):
            state.update(chunk)
        return state.digest()

    def digest_file(self, path: str) -> bytes:
        """
        Opens, hashes and closes a file. The handle is released even when reading fails;
        OSError propagates to the caller.
        """
        with open(path, 'rb') as f:
            result = self.digest_stream(f)
        logger.debug(f"Hashed {path}: {result.hex()}")
        return result
