"""
Integration Tests - End-to-End Pipeline Tests.

These tests verify that loading, filtering, pinning and exporting work
together on real files, and that the command line drives them.

Test Files:
    - test_listing_pipeline.py: Full load -> filter -> pin -> export workflow
    - test_cli_entry.py: Process entry through typer
"""
