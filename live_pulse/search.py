"""Tavily Search API wrapper for live consumer-friction scans."""

from __future__ import annotations

import json
import logging
import os

import httpx

log = logging.getLogger(__name__)

API_URL = "https://api.tavily.com/search"
TIMEOUT = 20
MAX_RESULTS = 20


class TavilySearchClient:
    def __init__(self, token: str | None = None, timeout: float = TIMEOUT, api_url: str = API_URL):
        self.token = token if token is not None else os.environ.get("TAVILY_API_KEY", "")
        self.timeout = timeout
        self.api_url = api_url

    def search(self, query: str, max_results: int = MAX_RESULTS, search_depth: str = "advanced") -> dict:
        if not self.token:
            raise RuntimeError("TAVILY_API_KEY environment variable is not set.")

        headers = {"Content-Type": "application/json", "Authorization": f"Bearer {self.token}"}
        payload = {
            "query": query,
            "max_results": min(max(max_results, 1), MAX_RESULTS),
            "search_depth": search_depth,
            "include_answer": True,
        }
        log.debug("Tavily API request: POST %s payload=%s", self.api_url, json.dumps(payload))
        resp = httpx.post(self.api_url, headers=headers, json=payload, timeout=self.timeout)
        log.debug("Tavily API response body: %s", resp.text[:2000])
        if resp.status_code != 200:
            raise RuntimeError(f"Tavily API error: HTTP {resp.status_code} — {resp.text[:500]}")
        return resp.json()

    @staticmethod
    def extract_results(data: dict) -> list[dict]:
        results = data.get("results") or []
        if not isinstance(results, list):
            raise ValueError(f"Malformed Tavily response: 'results' is {type(results).__name__}")
        return [r for r in results if isinstance(r, dict)]
