#file: envmonitor/data_fetch.py

import asyncio
import logging
from pathlib import Path

import aiohttp

from envmonitor.config import FETCH_TIMEOUT
from envmonitor.errors import FetchFailure


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


async def fetch_url_text(url: str, timeout: float = FETCH_TIMEOUT) -> str:
    """Fetch CSV text from a web server asynchronously."""
    try:
        async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=timeout)) as session:
            async with session.get(url) as response:
                if not 200 <= response.status < 300:
                    raise FetchFailure(f"Failed to load CSV file: {response.status} {response.reason}")
                return await response.text()
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logging.error(f"Error loading CSV data from {url}: {e}")
        raise FetchFailure(f"Could not load {url}. Make sure the file exists and you are running from a web server.") from e


def read_file_text(path: str) -> str:
    """Read CSV text from the local filesystem."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logging.error(f"Error loading CSV data from {path}: {e}")
        raise FetchFailure(f"Could not load {path}. Make sure the file exists and is readable.") from e


async def fetch_csv_text(source: str, timeout: float = FETCH_TIMEOUT) -> str:
    """Load the raw CSV document from a URL or a local path."""
    if is_url(source):
        text = await fetch_url_text(source, timeout)
    else:
        text = await asyncio.to_thread(read_file_text, source)
    logging.info(f"CSV file loaded successfully from {source}")
    return text
