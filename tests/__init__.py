"""Tests for the Fun × Tables game.

Scene tests run headlessly through pygame's dummy video driver, so no real
window is opened. Run ``pytest`` from the project root.
"""
