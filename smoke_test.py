#!/usr/bin/env python3
"""
Smoke test for a Deep Sleep deployment
Tests that the main routes are accessible and working
"""
import os
import sys

import requests

# Base URL - override with DEEPSLEEP_URL
BASE_URL = os.getenv("DEEPSLEEP_URL", "http://localhost:3001")

# Routes to test
ROUTES = [
    ("/", "Sleep log page"),
    ("/health", "Health check"),
    ("/records", "Records API"),
    ("/records/stats", "Daily stats API"),
]

def check_route(path, name):
    """Check a single route"""
    url = BASE_URL + path
    try:
        response = requests.get(url, timeout=10)
        if response.status_code == 200:
            print(f"✓ {name:20} - OK (200)")
            return True
        else:
            print(f"✗ {name:20} - FAILED (Status: {response.status_code})")
            return False
    except requests.exceptions.RequestException as e:
        print(f"✗ {name:20} - ERROR: {str(e)}")
        return False

def check_record_round_trip():
    """Create a record, read it back in the list, then delete it"""
    payload = {
        "startTime": "2000-01-01T23:00",
        "endTime": "2000-01-02T07:00",
        "note": "smoke test",
    }
    try:
        created = requests.post(BASE_URL + "/records", json=payload, timeout=10)
        if created.status_code != 200:
            print(f"✗ {'Record round-trip':20} - CREATE FAILED (Status: {created.status_code})")
            return False
        record_id = created.json()["id"]

        listed = requests.get(BASE_URL + "/records", timeout=10).json()
        found = any(r["id"] == record_id for r in listed)

        deleted = requests.delete(f"{BASE_URL}/records/{record_id}", timeout=10)
        if not found or deleted.json() != {"deleted": True}:
            print(f"✗ {'Record round-trip':20} - FAILED (listed={found}, delete={deleted.status_code})")
            return False

        print(f"✓ {'Record round-trip':20} - OK (created and deleted #{record_id})")
        return True
    except (requests.exceptions.RequestException, ValueError, KeyError) as e:
        print(f"✗ {'Record round-trip':20} - ERROR: {str(e)}")
        return False

def main():
    """Run smoke tests"""
    print(f"\n🔍 Running smoke tests on {BASE_URL}\n")
    print("-" * 50)

    results = []
    for path, name in ROUTES:
        results.append(check_route(path, name))
    results.append(check_record_round_trip())

    print("-" * 50)
    passed = sum(results)
    total = len(results)
    print(f"\n✅ Passed: {passed}/{total}")

    if passed == total:
        print("🎉 All smoke tests passed!")
        sys.exit(0)
    else:
        print("❌ Some tests failed")
        sys.exit(1)

if __name__ == "__main__":
    main()
