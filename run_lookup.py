#!/usr/bin/env python3
"""
Address lookup development runner.
Types the given query into an AddressLookup keystroke by keystroke and prints
the suggestions the geocoding provider returns.

    python run_lookup.py "1600 Amphitheatre"
    BOLIBRO_GEOCODING_PROVIDER=mock python run_lookup.py "Broadway"
"""

import asyncio
import json
import logging
import sys
from pathlib import Path

# Add src to path
root_dir = Path(__file__).parent
sys.path.insert(0, str(root_dir / "src"))

# Load .env file if it exists (values take priority over defaults)
from dotenv import load_dotenv

env_file = root_dir / ".env"
if env_file.exists():
    load_dotenv(env_file)
    print(f"📁 Loaded config from {env_file}")

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

from bolibro.address_lookup import AddressLookup
from bolibro.config import Settings
from bolibro.geocoding import create_geocoding_provider


async def main(query: str) -> int:
    settings = Settings()
    provider = create_geocoding_provider(settings)
    print(f"🔎 Provider: {settings.geocoding_provider}")

    def on_select(address):
        print(json.dumps(address.to_callback_payload(), indent=2))

    try:
        async with AddressLookup.from_settings(settings, provider, on_select) as lookup:
            for i in range(1, len(query) + 1):
                lookup.handle_input(query[:i])
                await asyncio.sleep(0.05)
            await lookup.wait_idle()

            if not lookup.suggestions:
                print("No suggestions.")
                return 1
            for n, suggestion in enumerate(lookup.suggestions, start=1):
                print(f"{n}. {suggestion.label}")
            lookup.select(lookup.suggestions[0])
    finally:
        await provider.aclose()
    return 0


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(2)
    sys.exit(asyncio.run(main(" ".join(sys.argv[1:]))))
