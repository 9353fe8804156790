"""
Test suites package.

Kept importable so tests can import page objects from
`testsuites.ui_testing.pages` and the fakes under `testsuites.unit`.
"""
