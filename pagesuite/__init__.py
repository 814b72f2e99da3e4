"""
Page object test suite package.

`pagesuite` stays importable so that:
  - page objects and the framework can be reused from other suites
  - the command line runner (`run_tests.py`) can import session settings
  - unit tests can import page objects without a browser

Live UI tests target the public demo application configured in
`config/config.yaml`; no secrets are stored in the repository.
"""
