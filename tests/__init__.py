"""
Test Suite for Listing Explorer.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end tests through files and the CLI
    - fixtures/: Sample CSV and configuration files

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
"""
