"""Word sources feeding candidate words to the solver."""
from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Iterable, Protocol

import httpx

logger = logging.getLogger("wordgrid")


class WordsSource(Protocol):
    async def get_words(self) -> list[str]: ...


def normalize_words(lines: Iterable[str]) -> list[str]:
    """Strip and lowercase each line, dropping blanks and repeats (first one wins)."""
    words: dict[str, None] = {}
    for line in lines:
        word = line.strip().lower()
        if word:
            words[word] = None
    return list(words)


class InMemoryWordsSource:
    def __init__(self, *words: str):
        self._words = list(words)

    async def get_words(self) -> list[str]:
        return list(self._words)


class FileWordsSource:
    """Line-per-word UTF-8 file, read in a worker thread."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    async def get_words(self) -> list[str]:
        words = await asyncio.to_thread(self._read)
        logger.info("Loaded %d words from %s", len(words), self.path)
        return words

    def _read(self) -> list[str]:
        with open(self.path, "r", encoding="utf-8") as f:
            return normalize_words(f)


class HttpLinesWordsSource:
    """Line-per-word text resource fetched over HTTP."""

    def __init__(self, url: str, timeout: float = 30.0, client: httpx.AsyncClient | None = None):
        self.url = url
        self.timeout = timeout
        self._client = client

    async def get_words(self) -> list[str]:
        if self._client is not None:
            return await self._fetch(self._client)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await self._fetch(client)

    async def _fetch(self, client: httpx.AsyncClient) -> list[str]:
        async with client.stream("GET", self.url) as resp:
            resp.raise_for_status()
            lines = [line async for line in resp.aiter_lines()]
        words = normalize_words(lines)
        logger.info("Fetched %d words from %s (status %d)", len(words), self.url, resp.status_code)
        return words


def default_source(url: str, path: str | Path, timeout: float = 30.0) -> WordsSource:
    """HTTP source for `url`, or the local word file when no URL is configured."""
    if url:
        return HttpLinesWordsSource(url, timeout)
    return FileWordsSource(path)
