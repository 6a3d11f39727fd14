"""
Vessot — Integration Tests
Tests the full load-key/encrypt/store/show/decrypt pipeline.
"""

import base64
import json
import os
import shutil
import sys
from pathlib import Path

# Add parent to path for local development
sys.path.insert(0, str(Path(__file__).parent.parent))

from vessot import LocalConnector, SecureData, decrypt_tree, encrypt_tree, load_key

TEST_KEY = base64.b64encode(b"integration-test-key-32-bytes!!!").decode()
TEST_ENV = {"VESSOT_CRYPT_KEY": TEST_KEY}
TEST_STORE_DIR = Path(__file__).parent / "test-store"


def setup_module():
    """Clean up test directories."""
    if TEST_STORE_DIR.exists():
        shutil.rmtree(TEST_STORE_DIR)


def teardown_module():
    setup_module()


def test_tree_round_trip():
    """Test encrypt/decrypt round-trip of a nested record set."""
    print("Testing tree round-trip...", end=" ")
    key = load_key(TEST_ENV)
    data = {"records": [{"id": 1, "value": "hello"}, {"id": 2, "value": "world"}]}

    encrypted = encrypt_tree(key, data)
    assert encrypted["records"][0]["value"] != "hello"
    assert decrypt_tree(key, encrypted) == data
    print("PASS")


def test_store_and_show():
    """Test a full store/show cycle through the facade."""
    print("Testing store/show...", end=" ")
    client = SecureData(connector=LocalConnector(TEST_STORE_DIR), environ=TEST_ENV)

    data = {
        "notes": {"entries": [{"text": "Private note 1"}, {"text": "Private note 2"}]},
        "config": {"theme": "dark", "lang": "en", "font_size": 14},
        "contacts": {"people": [{"name": "Alice"}, {"name": "Bob"}]},
    }

    result = client.store("everything", data)
    assert result.success, result.error

    # Nothing readable reached the disk
    on_disk = "".join(p.read_text() for p in TEST_STORE_DIR.glob("*.vault"))
    for secret in ("Private note", "Alice", "dark"):
        assert secret not in on_disk

    loaded = client.show("everything")
    assert loaded.success
    assert loaded.value == data
    assert json.dumps(loaded.value) == json.dumps(data)
    print("PASS")


def test_many_keys():
    """Test storing several keys and updating one attribute of each."""
    print("Testing many keys...", end=" ")
    store = LocalConnector(TEST_STORE_DIR / "many")
    client = SecureData(connector=store, environ=TEST_ENV)

    data = {
        "alpha": {"items": [1, 2, 3]},
        "beta": {"items": [4, 5, 6]},
        "gamma": {"items": [7, 8, 9]},
    }
    for name, value in data.items():
        assert client.store(name, value).success

    for name in data:
        assert client.update(name, attributes={"seen": True}).success
        assert client.show(name).value == {**data[name], "seen": True}

    assert store.keys() == sorted(data)
    print("PASS")


def test_wrong_key():
    """Test that a different key leaves the ciphertext untouched."""
    print("Testing wrong key...", end=" ")
    store = LocalConnector(TEST_STORE_DIR / "wrong-key-test")
    SecureData(connector=store, environ=TEST_ENV).store("secret", {"data": "sensitive"})

    other_env = {"VESSOT_CRYPT_KEY": base64.b64encode(os.urandom(32)).decode()}
    loaded = SecureData(connector=store, environ=other_env).show("secret")
    assert loaded.success
    assert loaded.value["data"] != "sensitive"
    print("PASS")


def main():
    setup_module()
    print("=" * 50)
    print("  Vessot Integration Tests")
    print("=" * 50)
    print()

    tests = [
        test_tree_round_trip,
        test_store_and_show,
        test_many_keys,
        test_wrong_key,
    ]

    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            passed += 1
        except Exception as e:
            print(f"FAIL: {e}")
            failed += 1

    print()
    print(f"Results: {passed} passed, {failed} failed")

    # Cleanup
    setup_module()

    return failed == 0


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
