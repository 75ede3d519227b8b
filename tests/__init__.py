"""dashcompat test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : User-visible flows (the CLI) tested end-to-end at the boundary.

General guidance
- Keep unit tests fast and deterministic.
- Functional tests assert user-observable results, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, functional, property, slow
"""
