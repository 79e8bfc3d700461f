"""COREKIT test suite.

Folder taxonomy
- unit/         : Fast checks of a single module; no real I/O.
- functional/   : The CLI driven through CliRunner, asserting what a user sees.
- e2e/          : Full CLI runs checking console logging and the --log-file transcript.

Markers (`unit`, `functional`, `e2e`) are added automatically per folder.
"""
