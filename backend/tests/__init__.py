"""
Auror Examination Backend Test Suite

Test structure:
- unit/: Test components in isolation, with a scripted random source
- integration/: Full examination runs through the bundled world (marked @pytest.mark.integration)
- mocks/: Deterministic stand-ins for the engine's random draws
"""
