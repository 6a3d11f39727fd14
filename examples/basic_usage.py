"""
Vessot — Basic Usage Example

Demonstrates encrypting a nested record before it reaches a store.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from vessot import LocalConnector, SecureData, generate_key


def main():
    # First-time setup: a fresh key. In production this lives in VESSOT_CRYPT_KEY.
    env = {"VESSOT_CRYPT_KEY": generate_key({})}

    # ── Example 1: Store and read back ──
    print("=" * 50)
    print("  Example 1: Store / Show")
    print("=" * 50)

    store = LocalConnector("./example-store")
    data = SecureData(connector=store, environ=env)

    contacts = {
        "friends": [
            {"name": "Alice", "note": "Met at the conference", "since": 2019},
            {"name": "Bob", "note": "College roommate", "since": 2011},
        ],
        "favourite": True,
    }

    result = data.store("contacts", contacts)
    print(f"Stored: success={result.success}")

    # What the store actually holds
    raw = store.show("contacts").value
    print(f"On the store: {raw['friends'][0]['name'][:24]}...")

    loaded = data.show("contacts")
    print(f"Loaded: {loaded.value}")
    print(f"Integrity check: {'PASS' if loaded.value == contacts else 'FAIL'}")

    # ── Example 2: Partial update and attribute removal ──
    print()
    print("=" * 50)
    print("  Example 2: Update / Destroy")
    print("=" * 50)

    data.update("contacts", attributes={"favourite": False})
    print(f"favourite -> {data.show('contacts', 'favourite').value}")

    data.destroy("contacts", "favourite")
    print(f"Keys left: {list(data.show('contacts').value)}")

    print(f"\nStats: {store.stats()}")

    # ── Cleanup example files ──
    import shutil
    shutil.rmtree("./example-store", ignore_errors=True)
    print("\nCleaned up example files.")


if __name__ == "__main__":
    main()
