# corpus.py
from __future__ import annotations
import logging
import os
import tempfile

import requests

logger = logging.getLogger(__name__)

DICTIONARY_FILE_URL = "http://norvig.com/big.txt"
LOCAL_DICTIONARY_FILE_NAME = "big.txt"

# some servers refuse clients that send no user agent
REQUEST_HEADERS = {
    "User-Agent": "Mozilla/5.0 (compatible; MSIE 10.6; Windows NT 6.1; Trident/5.0)",
    "Accept": "text/html, application/xhtml+xml, */*",
}


class CorpusError(Exception):
    """The corpus file could not be found, downloaded or saved."""


def corpus_available(path: str) -> bool:
    return os.path.isfile(path) and os.path.getsize(path) > 0


def download_corpus(url: str, path: str, timeout: float = 30.0) -> None:
    logger.info(f"Downloading dictionary file from {url}...")
    try:
        response = requests.get(url, headers=REQUEST_HEADERS, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise CorpusError(f"Could not download {url}: {e}") from e

    # write beside `path`, then rename into place
    tmp_path = None
    try:
        parent = os.path.dirname(os.path.abspath(path))
        os.makedirs(parent, exist_ok=True)
        with tempfile.NamedTemporaryFile(dir=parent, suffix=".part", delete=False) as fh:
            tmp_path = fh.name
            fh.write(response.content)
        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise CorpusError(f"Could not save corpus to {path}: {e}") from e
    logger.info(f"Saved {len(response.content)} bytes to {path}")


def load_corpus(
    path: str = LOCAL_DICTIONARY_FILE_NAME,
    url: str = DICTIONARY_FILE_URL,
    timeout: float = 30.0,
    download: bool = True
) -> str:
    """
    Return the corpus text, downloading it to `path` first when no
    non-empty local copy exists.
    """
    if not corpus_available(path):
        if not download:
            raise CorpusError(f"No corpus at {path} and downloading is disabled")
        download_corpus(url, path, timeout)
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            return fh.read()
    except OSError as e:
        raise CorpusError(f"Could not read corpus {path}: {e}") from e
