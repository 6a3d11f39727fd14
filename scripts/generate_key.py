"""
Generate an encryption key for first-time setup.

Usage:
    python scripts/generate_key.py
    export VESSOT_CRYPT_KEY="<printed key>"

Prints nothing new if VESSOT_CRYPT_KEY is already set: an existing key is
never replaced, since data sealed under it would become unreadable.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from vessot.keys import CRYPT_KEY_ENV, generate_key


def main():
    key = generate_key()
    if key is None:
        print(f"{CRYPT_KEY_ENV} is already set; keeping the existing key.", file=sys.stderr)
        return 1

    print(key)
    return 0


if __name__ == "__main__":
    sys.exit(main())
