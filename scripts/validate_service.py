#!/usr/bin/env python3
"""
Validation script for URL Shortener service.
Exercises a live running service to ensure the public endpoints behave.

Usage:
    python scripts/validate_service.py [--url http://localhost:3000]
"""

import argparse
import sys
import time
from datetime import datetime
from typing import Optional

import requests


class ServiceValidator:
    """Validates URL shortener service functionality."""

    def __init__(self, base_url: str = "http://localhost:3000"):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.test_results = []

    def print_header(self, text: str):
        """Print a formatted header."""
        print(f"\n{'='*60}")
        print(f"  {text}")
        print(f"{'='*60}\n")

    def print_test(self, name: str, passed: bool, details: str = ""):
        """Print test result."""
        status = "PASS" if passed else "FAIL"
        self.test_results.append((name, passed))
        print(f"{status} - {name}")
        if details:
            print(f"       {details}")

    def test_health_check(self) -> bool:
        """Test health check endpoint."""
        try:
            response = self.session.get(f"{self.base_url}/api/health", timeout=5)
            if response.status_code == 200:
                data = response.json()
                is_healthy = data.get("status") == "healthy"
                details = f"URLs: {data.get('urls')}, Visits: {data.get('visits')}"
                self.print_test("Health Check", is_healthy, details)
                return is_healthy
            self.print_test("Health Check", False, f"Status: {response.status_code}")
            return False
        except requests.RequestException as e:
            self.print_test("Health Check", False, f"Error: {e}")
            return False

    def test_create_short_url(self, url: str, name: str = "Create Short URL") -> Optional[str]:
        """Test creating a short URL; returns the short URL on success."""
        try:
            response = self.session.post(f"{self.base_url}/new", json={"url": url}, timeout=5)
            if response.status_code == 201:
                short_url = response.json().get("url")
                self.print_test(name, bool(short_url), f"Short URL: {short_url}")
                return short_url
            self.print_test(name, False, f"Status: {response.status_code} body={response.text}")
            return None
        except requests.RequestException as e:
            self.print_test(name, False, f"Error: {e}")
            return None

    def test_redirect(self, short_url: str, expected: str, name: str = "URL Redirect") -> bool:
        """Test URL redirect functionality."""
        url_id = short_url.rsplit("/", 1)[-1]
        try:
            response = self.session.get(
                f"{self.base_url}/{url_id}",
                allow_redirects=False,
                timeout=5,
            )
            location = response.headers.get("Location", "")
            passed = response.status_code == 307 and location == expected
            self.print_test(name, passed, f"Status: {response.status_code}, Location: {location}")
            return passed
        except requests.RequestException as e:
            self.print_test(name, False, f"Error: {e}")
            return False

    def test_error(self, name: str, response_factory, expected_code: int, expected_error: str) -> bool:
        """Test that a request fails with the normalized error body."""
        try:
            response = response_factory()
            body = response.json()
            passed = (
                response.status_code == expected_code
                and body == {"error": expected_error, "code": expected_code}
            )
            self.print_test(name, passed, f"Status: {response.status_code}, Body: {body}")
            return passed
        except (requests.RequestException, ValueError) as e:
            self.print_test(name, False, f"Error: {e}")
            return False

    def run_all_tests(self) -> bool:
        """Run all validation tests."""
        self.print_header("URL Shortener Service Validation")
        print(f"Testing service at: {self.base_url}")
        print(f"Timestamp: {datetime.now().isoformat()}\n")

        if not self.test_health_check():
            print("\nHealth check failed. Service may not be running.")
            print(f"   Make sure the service is accessible at {self.base_url}")
            return False

        print()

        target = f"https://example.com/test/{int(time.time())}"
        short_url = self.test_create_short_url(target)
        if short_url:
            self.test_redirect(short_url, target)

        bare = self.test_create_short_url("example.com", name="Create Without Scheme")
        if bare:
            self.test_redirect(bare, "http://example.com", name="Redirect Adds http://")

        print()

        self.test_error(
            "Empty URL Rejection",
            lambda: self.session.post(f"{self.base_url}/new", json={"url": ""}, timeout=5),
            400,
            "url is required",
        )
        self.test_error(
            "Non-JSON Rejection",
            lambda: self.session.post(f"{self.base_url}/new", data={"url": "example.com"}, timeout=5),
            400,
            "Content-Type: application/json header is required",
        )
        self.test_error(
            "Unknown Id",
            lambda: self.session.get(f"{self.base_url}/ZZZZ", allow_redirects=False, timeout=5),
            404,
            "url not found",
        )

        self.print_summary()

        return all(passed for _, passed in self.test_results)

    def print_summary(self):
        """Print test summary."""
        total = len(self.test_results)
        passed = sum(1 for _, p in self.test_results if p)
        failed = total - passed

        self.print_header("Test Summary")
        print(f"Total Tests:  {total}")
        print(f"Passed:       {passed}")
        print(f"Failed:       {failed}")
        print(f"Success Rate: {(passed/total*100):.1f}%")

        if failed > 0:
            print("\nFailed tests:")
            for name, passed in self.test_results:
                if not passed:
                    print(f"   - {name}")

        print()


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Validate URL Shortener service functionality"
    )
    parser.add_argument(
        "--url",
        default="http://localhost:3000",
        help="Base URL of the service (default: http://localhost:3000)"
    )

    args = parser.parse_args()

    validator = ServiceValidator(args.url)

    try:
        success = validator.run_all_tests()
        sys.exit(0 if success else 1)
    except KeyboardInterrupt:
        print("\n\nValidation interrupted by user")
        sys.exit(2)


if __name__ == "__main__":
    main()
