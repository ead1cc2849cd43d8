"""Test suite for siliconsoul.

Test Structure:
- unit/: Unit tests per package (scroll, scheduling, boot, theme, config, utils, cli)
- integration/: A view wired to a scroll source end to end
- conftest.py: Shared fixtures (fake scheduler, notification recorder, layer tables)
"""
