"""Orchestrates full ingestion: sheet URL → list of normalized rows."""

import asyncio

import httpx

from src.config import AppConfig
from src.ingest.csv_parser import parse_csv_text
from src.ingest.errors import ConfigError, NetworkError
from src.ingest.normalizer import normalize_row

DEFAULT_TIMEOUT = 30.0


async def fetch_csv_text(url: str, client: httpx.AsyncClient, timeout: float = DEFAULT_TIMEOUT) -> str:
    """GET the CSV export and return its body as text.

    Raises NetworkError on transport failures and non-2xx responses.
    """
    try:
        response = await client.get(url, timeout=timeout, follow_redirects=True)
    except (httpx.RequestError, httpx.InvalidURL) as e:
        raise NetworkError(f"Error de red: {e}") from e

    if not response.is_success:
        raise NetworkError(f"Error HTTP {response.status_code}", status_code=response.status_code)

    # utf-8-sig drops the BOM some exporters prepend
    return response.content.decode("utf-8-sig", errors="replace")


async def load_dataset(
    url: str,
    client: httpx.AsyncClient = None,
    timeout: float = DEFAULT_TIMEOUT,
    url_env_var: str = "SHEET_CSV_URL",
) -> list[dict[str, str]]:
    """Fetch, parse and normalize the request sheet.

    Makes a single attempt; nothing is cached between calls. Raises
    ConfigError, NetworkError or ParseError (all LoadError subclasses).
    """
    if not url or not url.strip():
        raise ConfigError(f"Falta {url_env_var} en la configuración")
    url = url.strip()

    print(f"Fetching {url}...")
    if client is None:
        async with httpx.AsyncClient() as own_client:
            text = await fetch_csv_text(url, own_client, timeout)
    else:
        text = await fetch_csv_text(url, client, timeout)

    raw_rows = parse_csv_text(text)
    rows = [normalize_row(raw) for raw in raw_rows]

    n_cols = len(rows[0]) if rows else 0
    print(f"  {len(rows)} rows, {n_cols} columns")
    return rows


def run_ingestion(config: AppConfig = None) -> list[dict[str, str]]:
    """Run the full ingestion pipeline synchronously.

    Each call runs on its own event loop, so it is safe to call from
    Streamlit's script thread or from the CLI.
    """
    if config is None:
        config = AppConfig()
    return asyncio.run(load_dataset(
        config.csv_url,
        timeout=config.request_timeout,
        url_env_var=config.url_env_var,
    ))
