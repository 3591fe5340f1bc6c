"""Test suite for constellate.

Test Structure:
- unit/: Unit tests for individual components
  - layouts/: geometry, surface sampling, strategies, registry and selector
  - records/: CSV parsing and ranking
  - config/: settings models and config loading
  - utils/: logging utilities
  - cli/: command-line smoke tests
  - test_packaging.py: installable package layout
- conftest.py: Shared fixtures and test configuration
"""
