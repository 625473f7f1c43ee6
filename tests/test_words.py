import asyncio

import httpx
import pytest
from wordgrid.words import (
    FileWordsSource,
    HttpLinesWordsSource,
    InMemoryWordsSource,
    default_source,
    normalize_words,
)


def test_normalize_words():
    lines = ["  Keg\n", "bee\r\n", "\n", "KEG", "  ", "jeg"]
    assert normalize_words(lines) == ["keg", "bee", "jeg"]


def test_in_memory_source_keeps_duplicates():
    source = InMemoryWordsSource("abdc", "abc", "abdc")
    assert asyncio.run(source.get_words()) == ["abdc", "abc", "abdc"]


def test_file_source(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Keg\nbee\n\nkeg\nJEG\n", encoding="utf-8")
    assert asyncio.run(FileWordsSource(path).get_words()) == ["keg", "bee", "jeg"]


def test_file_source_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        asyncio.run(FileWordsSource(tmp_path / "nope.txt").get_words())


def _run_http(handler, url="https://words.example/list.txt"):
    async def fetch():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await HttpLinesWordsSource(url, client=client).get_words()
    return asyncio.run(fetch())


def test_http_source_normalizes_lines():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, text="Apple\nbanana\r\n\nAPPLE\ncherry")

    assert _run_http(handler) == ["apple", "banana", "cherry"]
    assert seen == ["https://words.example/list.txt"]


def test_http_source_raises_on_error_status():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="not found")

    with pytest.raises(httpx.HTTPStatusError):
        _run_http(handler)


def test_default_source_prefers_url(tmp_path):
    source = default_source("https://words.example/list.txt", tmp_path / "words.txt", timeout=3.0)
    assert isinstance(source, HttpLinesWordsSource)
    assert source.timeout == 3.0


def test_default_source_uses_file_without_url(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Cat\n")
    source = default_source("", path)
    assert isinstance(source, FileWordsSource)
    assert asyncio.run(source.get_words()) == ["cat"]
