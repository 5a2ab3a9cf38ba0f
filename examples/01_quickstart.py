#!/usr/bin/env python3
"""
crptclient Quickstart Example

Shows several threads sharing one rate-limited client.

Usage:
    CRPT_TOKEN=... python examples/01_quickstart.py
"""

from concurrent.futures import ThreadPoolExecutor

from crptclient import CrptApi, CrptError, Document, get_settings


def main() -> None:
    """Submit ten documents at two requests per second."""

    settings = get_settings(request_limit=2, time_unit="seconds")

    doc = Document(
        product_document="eyJkZXNjcmlwdGlvbiI6IHt9fQ==",
        product_group="milk",
        document_format="json",
        type="LP_INTRODUCE_GOODS",
    )

    with CrptApi.from_settings(settings) as api:

        def submit(i: int) -> str:
            try:
                return f"#{i}: {api.create_document(doc, signature='c2lnbmF0dXJl')}"
            except CrptError as e:
                return f"#{i}: {type(e).__name__}: {e}"

        # Ten callers, but never more than two requests per second
        with ThreadPoolExecutor(max_workers=10) as pool:
            for line in pool.map(submit, range(10)):
                print(line)


if __name__ == "__main__":
    main()
