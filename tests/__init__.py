"""bloglikes test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : User-visible flows through the adapters (real files under tmp_path).
- e2e/          : The ``bloglikes`` command line, invoked through CliRunner.
- fixtures/     : Shared factory fixtures and JSON data (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O).
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
